# fitcodec
#
# Copyright (c) 2018 Jean-Charles Lefebvre
# All rights reserved.
#
# This code is licensed under the MIT License.
# See the LICENSE.txt file at the root of this project.

import logging

from .exceptions import FitListenerError
from .reader import FitReader
from .records import FitDataMessage
from . import mesgs
from . import registry
from . import utils

__all__ = ['MesgBroadcaster']

_logger = logging.getLogger(__name__)


def _check_listener(listener):
    if callable(listener):
        return listener
    on_mesg = getattr(listener, 'on_mesg', None)
    if callable(on_mesg):
        return on_mesg
    raise TypeError(
        f'listener must be callable or have an on_mesg method: {listener!r}')


class MesgBroadcaster:
    """
    Dispatch decoded messages to listeners registered per message number.

    A listener is either a callable or an object with an ``on_mesg`` method.
    Listeners of a message known to the profile receive the typed view of the
    message (see `fitcodec.mesgs`). Messages unknown to the profile are passed
    as raw `fitcodec.Mesg` objects to their listeners if any, and to the
    *generic* listeners.

    Usage::

        def on_record(record):
            print(record.get_heart_rate())

        broadcaster = fitcodec.MesgBroadcaster()
        broadcaster.add_listener('record', on_record)
        broadcaster.run('activity.fit')

    Objects with ``on_<mesg_name>`` methods can also be registered in one go
    with `add_listener_object`.

    All the listeners of a message are called, in registration order, before
    `FitListenerError` is raised if any of them failed. The message is not
    copied: listeners that need to keep it must call its ``copy`` method.
    """

    def __init__(self):
        self._listeners = {}  # {mesg_num: [(listener, callback), ...]}
        self._generic_listeners = []
        self._method_cache = {}

    def add_listener(self, mesg_num_or_name, listener):
        mesg_num = self._get_mesg_num(mesg_num_or_name)
        callback = _check_listener(listener)
        self._listeners.setdefault(mesg_num, []).append((listener, callback))

    def remove_listener(self, mesg_num_or_name, listener):
        """
        Remove the first registration of *listener* for the given message.
        Return `True` if it was registered.
        """
        mesg_num = self._get_mesg_num(mesg_num_or_name)
        listeners = self._listeners.get(mesg_num, [])
        for idx, (registered, _) in enumerate(listeners):
            if registered == listener:
                del listeners[idx]
                return True
        return False

    def add_generic_listener(self, listener):
        """Add a listener of the messages unknown to the profile."""
        callback = _check_listener(listener)
        self._generic_listeners.append((listener, callback))

    def remove_generic_listener(self, listener):
        for idx, (registered, _) in enumerate(self._generic_listeners):
            if registered == listener:
                del self._generic_listeners[idx]
                return True
        return False

    def add_listener_object(self, obj):
        """
        Register the ``on_<mesg_name>`` methods of *obj* for the messages of
        the profile, ``on_record`` for ``record`` messages for instance.
        Return the number of registered methods.
        """
        count = 0
        for mesg_num, mesg_type in registry.MESSAGE_TYPES.items():
            method = self._get_scrubbed_method(obj, 'on_' + mesg_type.name)
            if method is not None:
                self.add_listener(mesg_num, method)
                count += 1
        return count

    def dispatch(self, mesg):
        """
        Call the listeners of *mesg* (a `fitcodec.Mesg` or a
        `fitcodec.FitDataMessage`).
        """
        if isinstance(mesg, FitDataMessage):
            mesg = mesg.mesg

        listeners = list(self._listeners.get(mesg.mesg_num, ()))
        if registry.is_known_mesg(mesg.mesg_num):
            arg = mesgs.wrap(mesg)
        else:
            arg = mesg
            listeners += self._generic_listeners

        errors = []
        for listener, callback in listeners:
            try:
                callback(arg)
            except Exception as exc:
                _logger.debug(
                    'listener %r failed on message %s', listener, mesg.name)
                errors.append((listener, exc))

        if errors:
            listener, exc = errors[0]
            raise FitListenerError(listener, mesg, exc, errors) from exc

    def run(self, fileish, **kwargs):
        """
        Decode *fileish* with a `fitcodec.FitReader` and dispatch every data
        message. *kwargs* are passed to the reader.

        Return the number of dispatched messages.
        """
        count = 0
        with FitReader(fileish, **kwargs) as reader:
            for frame in reader:
                if isinstance(frame, FitDataMessage):
                    self.dispatch(frame.mesg)
                    count += 1
        return count

    @staticmethod
    def _get_mesg_num(mesg_num_or_name):
        # one of the classes of `fitcodec.mesgs`
        if (isinstance(mesg_num_or_name, type) and
                issubclass(mesg_num_or_name, mesgs.MesgView)):
            return mesg_num_or_name.mesg_num

        if isinstance(mesg_num_or_name, str):
            mesg_num = registry.get_mesg_num(mesg_num_or_name)
            if mesg_num is None:
                raise KeyError(f'unknown message name "{mesg_num_or_name}"')
            return mesg_num

        return int(mesg_num_or_name)

    def _get_scrubbed_method(self, obj, method_name):
        scrubbed_method_name = self._method_cache.get(method_name)
        if scrubbed_method_name is None:
            scrubbed_method_name = utils.scrub_method_name(method_name)
            self._method_cache[method_name] = scrubbed_method_name

        method = getattr(obj, scrubbed_method_name, None)
        return method if callable(method) else None
