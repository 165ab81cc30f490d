# fitcodec
#
# Copyright (c) 2018 Jean-Charles Lefebvre
# All rights reserved.
#
# This code is licensed under the MIT License.
# See the LICENSE.txt file at the root of this project.

__all__ = [
    'FitError', 'FitHeaderError', 'FitProtocolVersionError', 'FitCRCError',
    'FitEOFError', 'FitParseError', 'FitUndefinedLocalMesgError',
    'FitFieldSizeError', 'FitTypeMismatchError', 'FitEncodeError',
    'FitListenerError']


class FitError(Exception):
    pass


class FitHeaderError(FitError):
    pass


class FitProtocolVersionError(FitHeaderError):
    def __init__(self, proto_ver, max_proto_ver):
        self.proto_ver = proto_ver  #: ``(major, minor)`` read from the header
        self.max_proto_ver = max_proto_ver

        super().__init__(
            f'unsupported FIT protocol version {proto_ver[0]}.{proto_ver[1]} '
            f'(up to {max_proto_ver}.x supported)')


class FitCRCError(FitError):
    def __init__(self, expected=None, computed=None, offset=None,
                 message='invalid FIT CRC'):
        self.expected = expected  #: CRC value read from the stream
        self.computed = computed  #: CRC value computed over the stream
        self.offset = offset  #: the offset of the CRC in the stream

        if expected is not None and computed is not None:
            message += f' (read {expected:#06x}, computed {computed:#06x})'
        if offset is not None:
            message += f' @ {offset}'

        super().__init__(message)


class FitEOFError(FitError):
    def __init__(self, expected, got, offset, message=''):
        self.expected = expected  #: number of expected bytes
        self.got = got            #: number of bytes read
        self.offset = offset  #: the file offset from which reading took place

        desc = f'expected {self.expected} bytes, got {self.got} @ {self.offset}'
        if not message:
            message = desc
        else:
            message += ' (' + desc + ')'

        super().__init__(message)


class FitParseError(FitError):
    def __init__(self, offset, message=''):
        self.offset = offset  #: the file offset from which reading took place

        desc = 'FIT parsing error @ ' + str(offset)
        if message:
            desc += ': ' + message

        super().__init__(desc)


class FitUndefinedLocalMesgError(FitParseError):
    def __init__(self, offset, local_mesg_num):
        self.local_mesg_num = local_mesg_num

        super().__init__(
            offset, f'local message {local_mesg_num} not defined')


class FitFieldSizeError(FitParseError):
    def __init__(self, offset, def_num, size, base_type):
        self.def_num = def_num
        self.size = size
        self.base_type = base_type

        super().__init__(
            offset,
            f'invalid size {size} for field {def_num} of type ' +
            f'{base_type.name} (expected a multiple of {base_type.size})')


class FitTypeMismatchError(FitError, TypeError):
    pass


class FitEncodeError(FitError, ValueError):
    pass


class FitListenerError(FitError):
    """
    Raised by `fitcodec.MesgBroadcaster` once every listener registered for a
    message has returned, if at least one of them failed.

    The first failure is also chained as ``__cause__``.
    """

    def __init__(self, listener, mesg, cause, errors=None):
        self.listener = listener  #: the first listener that failed
        self.mesg = mesg          #: the message being dispatched
        self.cause = cause        #: the exception raised by *listener*

        #: list of ``(listener, exception)`` pairs, in registration order
        self.errors = errors if errors is not None else [(listener, cause)]

        desc = f'listener {listener!r} failed on message {mesg.name}: {cause!r}'
        if len(self.errors) > 1:
            desc += f' (and {len(self.errors) - 1} more)'

        super().__init__(desc)
