# fitcodec
#
# Copyright (c) 2018 Jean-Charles Lefebvre
# All rights reserved.
#
# This code is licensed under the MIT License.
# See the LICENSE.txt file at the root of this project.
"""
Typed views over `fitcodec.Mesg` objects.

One class is generated at import time for each message of the profile, named
after the message (``hrm_profile`` -> ``HrmProfileMesg``). Each class exposes
a ``get_<name>(index=0)`` and a ``set_<name>(value, index=0)`` method for every
field and subfield of its message::

    view = fitcodec.mesgs.HrmProfileMesg()
    view.set_hrm_ant_id(1234)
    view.set_enabled(True)
    assert view.get_hrm_ant_id() == 1234
    encoder.write(view)

Views hold no data: every call goes to the wrapped `fitcodec.Mesg` object
(`mesg` attribute), and any other attribute is looked up on it as well.
"""

from .mesg import MAIN_FIELD, Mesg
from . import profile
from . import utils

__all__ = ['MesgView', 'MESG_CLASSES', 'wrap']


class MesgView:
    """Base class of the generated message classes."""

    __slots__ = ('mesg', )

    #: the global message number of the wrapped messages
    mesg_num = None

    #: the name of the wrapped messages
    mesg_name = None

    def __init__(self, mesg=None):
        if mesg is None:
            mesg = Mesg(self.mesg_num)
        elif mesg.mesg_num != self.mesg_num:
            raise ValueError(
                f'cannot wrap a {mesg.name} message into ' +
                type(self).__name__)

        self.mesg = mesg

    def __repr__(self):
        return '<%s: %d fields>' % (type(self).__name__, len(self.mesg))

    def __getattr__(self, name):
        # slot not set yet
        if name == 'mesg':
            raise AttributeError(name)
        return getattr(self.mesg, name)

    def __eq__(self, other):
        if isinstance(other, MesgView):
            other = other.mesg
        if not isinstance(other, Mesg):
            return NotImplemented
        return self.mesg == other

    __hash__ = None


def _make_getter(def_num, subfield):
    def getter(self, index=0):
        return self.mesg.get_value(def_num, index, subfield=subfield)
    return getter


def _make_setter(def_num, subfield):
    def setter(self, value, index=0):
        self.mesg.set_value(def_num, value, index, subfield=subfield)
    return setter


def _make_mesg_class(mesg_type):
    namespace = {
        '__slots__': (),
        '__doc__': f'View over a ``{mesg_type.name}`` message ' +
                   f'(#{mesg_type.mesg_num}).',
        'mesg_num': mesg_type.mesg_num,
        'mesg_name': mesg_type.name}

    for field in mesg_type.fields.values():
        names = [(field.name, MAIN_FIELD)]
        names += [
            (sub_field.name, idx)
            for idx, sub_field in enumerate(field.subfields or ())]

        for name, subfield in names:
            name = utils.scrub_method_name(name)

            for attr, factory in (
                    ('get_' + name, _make_getter),
                    ('set_' + name, _make_setter)):
                # first definition wins, never shadow Mesg methods
                if (attr in namespace or hasattr(MesgView, attr) or
                        hasattr(Mesg, attr)):
                    continue
                namespace[attr] = factory(field.def_num, subfield)

    return type(
        utils.camel_case(mesg_type.name) + 'Mesg', (MesgView, ), namespace)


#: generated classes by global message number
MESG_CLASSES = {}

for _mesg_type in profile.MESSAGE_TYPES.values():
    _cls = _make_mesg_class(_mesg_type)
    MESG_CLASSES[_mesg_type.mesg_num] = _cls
    globals()[_cls.__name__] = _cls
    __all__.append(_cls.__name__)

del _mesg_type, _cls


def wrap(mesg):
    """
    Wrap *mesg* into the class generated for its message number. *mesg* is
    returned as is if its message is unknown to the profile.
    """
    cls = MESG_CLASSES.get(mesg.mesg_num)
    if cls is None:
        return mesg
    return cls(mesg)
