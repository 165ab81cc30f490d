# fitcodec
#
# Copyright (c) 2018 Jean-Charles Lefebvre
# All rights reserved.
#
# This code is licensed under the MIT License.
# See the LICENSE.txt file at the root of this project.

__all__ = [
    'FitChunk', 'FitHeader', 'FitCRC', 'FitDefinitionMessage', 'FitDataMessage',
    'FIT_FRAME_HEADER', 'FIT_FRAME_CRC',
    'FIT_FRAME_DEFMESG', 'FIT_FRAME_DATAMESG']


FIT_FRAME_HEADER = 1
FIT_FRAME_CRC = 2
FIT_FRAME_DEFMESG = 3
FIT_FRAME_DATAMESG = 4


class FitChunk:
    __slots__ = ('index', 'offset', 'bytes')

    def __init__(self, index, offset, bytes):
        self.index = index    #: zero-based index of this frame in the stream
        self.offset = offset  #: the offset at which this frame starts in the stream
        self.bytes = bytes    #: the frame itself as a `bytes` object


class FitHeader:
    frame_type = FIT_FRAME_HEADER

    __slots__ = (
        'header_size', 'proto_ver', 'profile_ver', 'body_size',
        'crc', 'crc_matched', 'chunk')

    def __init__(self, header_size, proto_ver, profile_ver, body_size,
                 crc, crc_matched, chunk):
        self.header_size = header_size
        self.proto_ver = proto_ver  #: ``(major, minor)``
        self.profile_ver = profile_ver  #: ``(major, minor)``
        self.body_size = body_size  #: size of the records, CRC excluded
        self.crc = crc  #: may be `None`
        self.crc_matched = crc_matched  #: `None` if there is no CRC to match
        self.chunk = chunk  #: `FitChunk` or `None` (depends on ``keep_raw_chunks`` option)


class FitCRC:
    frame_type = FIT_FRAME_CRC

    __slots__ = ('crc', 'matched', 'chunk')

    def __init__(self, crc, matched, chunk):
        self.crc = crc
        self.matched = matched
        self.chunk = chunk  #: `FitChunk` or `None` (depends on ``keep_raw_chunks`` option)


class FitDefinitionMessage:
    frame_type = FIT_FRAME_DEFMESG

    __slots__ = (
        # record header
        'is_developer_data',
        'local_mesg_num',
        'time_offset',

        # payload
        'mesg_type',
        'global_mesg_num',
        'endian',
        'field_defs',
        'dev_field_defs',

        'chunk')

    def __init__(self, is_developer_data, local_mesg_num, time_offset,
                 mesg_type, global_mesg_num, endian, field_defs, dev_field_defs,
                 chunk):
        self.is_developer_data = is_developer_data
        self.local_mesg_num = local_mesg_num
        self.time_offset = time_offset
        self.mesg_type = mesg_type  #: `types.MessageType`, maybe an unknown one
        self.global_mesg_num = global_mesg_num
        self.endian = endian  #: ``<`` or ``>``
        self.field_defs = field_defs  #: list of `FieldDefinition`
        self.dev_field_defs = dev_field_defs  #: list of `DevFieldDefinition`
        self.chunk = chunk  #: `FitChunk` or `None` (depends on ``keep_raw_chunks`` option)

    @property
    def name(self):
        return self.mesg_type.name

    @property
    def all_field_defs(self):
        return self.field_defs + self.dev_field_defs

    @property
    def data_size(self):
        """Size of the payload of the data messages using this definition."""
        return sum(field_def.size for field_def in self.all_field_defs)


class FitDataMessage:
    """
    A data record. The decoded content is the `fitcodec.Mesg` object held by
    `mesg`, which can also be accessed through the shortcuts of this class.
    """

    frame_type = FIT_FRAME_DATAMESG

    __slots__ = (
        # record header
        'is_developer_data',
        'local_mesg_num',
        'time_offset',

        'def_mesg',
        'mesg',
        'chunk')

    def __init__(self, is_developer_data, local_mesg_num, time_offset, def_mesg,
                 mesg, chunk):
        self.is_developer_data = is_developer_data
        self.local_mesg_num = local_mesg_num
        self.time_offset = time_offset  #: compressed timestamp offset or `None`
        self.def_mesg = def_mesg  #: `FitDefinitionMessage`
        self.mesg = mesg  #: `fitcodec.Mesg`
        self.chunk = chunk  #: `FitChunk` or `None` (depends on ``keep_raw_chunks`` option)

    def __iter__(self):
        return iter(self.mesg)

    @property
    def name(self):
        return self.mesg.name

    @property
    def global_mesg_num(self):
        return self.def_mesg.global_mesg_num

    @property
    def mesg_type(self):
        return self.def_mesg.mesg_type

    def has_field(self, field_name_or_num):
        return self.mesg.has_field(field_name_or_num)

    def get_field(self, field_name_or_num):
        """
        The `fitcodec.MesgField` named or numbered *field_name_or_num*.
        `KeyError` is raised if not found.
        """
        mesg_field = self.mesg.get_field(field_name_or_num)
        if mesg_field is None:
            raise KeyError(
                f'field "{field_name_or_num}" not found in message ' +
                f'"{self.name}"')
        return mesg_field

    def get_value(self, field_name_or_num, index=0, **kwargs):
        """Shortcut to `fitcodec.Mesg.get_value`."""
        return self.mesg.get_value(field_name_or_num, index, **kwargs)
