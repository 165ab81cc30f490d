# fitcodec
#
# Copyright (c) 2018 Jean-Charles Lefebvre
# All rights reserved.
#
# This code is licensed under the MIT License.
# See the LICENSE.txt file at the root of this project.

import enum
import logging
import struct

from .exceptions import (
    FitError, FitHeaderError, FitProtocolVersionError, FitCRCError,
    FitEOFError, FitParseError, FitUndefinedLocalMesgError, FitFieldSizeError)
from .mesg import MAIN_FIELD, Mesg, MesgField
from . import profile
from . import records
from . import registry
from . import types
from . import utils

__all__ = ['CrcCheck', 'DecoderState', 'FitDecoder']

_logger = logging.getLogger(__name__)

_NEED_MORE = object()

#: highest major version of the FIT protocol this decoder understands
PROTOCOL_VERSION_MAJOR_MAX = 2

HEADER_SIZE_NO_CRC = 12
HEADER_SIZE_WITH_CRC = 14

_HEADER_STRUCT = struct.Struct('<2BHI4s')
_CRC_STRUCT = struct.Struct('<H')


class CrcCheck(enum.Enum):
    """
    Defines the values expected by the ``check_crc`` parameter of `FitDecoder`
    and `FitReader`.
    """

    #: CRC is not computed at all (fastest).
    #: :class:`fitcodec.FitCRC` frame will still be yielded if present in the
    #: source FIT stream, but with meaningless values.
    DISABLED = 0

    #: CRC is computed but never matched. So no :class:`fitcodec.FitCRCError`
    #: will ever be raised.
    READONLY = 1

    #: CRC is computed and matched.
    #: :class:`fitcodec.FitCRCError` is raised upon incorrect CRC values.
    ENABLED = 2


class DecoderState(enum.Enum):
    HEADER = 0           #: waiting for the header of the first FIT file
    RECORD_HEADER = 1    #: waiting for the header byte of a record
    DEFINITION_BODY = 2  #: waiting for the content of a definition message
    DATA_BODY = 3        #: waiting for the content of a data message
    CRC_TRAILER = 4      #: waiting for the CRC at the end of a FIT file
    CHAINED_HEADER = 5   #: a FIT file ended, another one may follow
    DONE = 6             #: `FitDecoder.finish` has been called
    ERROR = 7            #: an error occurred, the decoder is not usable anymore


class RecordHeader:
    __slots__ = (
        'is_definition', 'is_developer_data', 'local_mesg_num', 'time_offset')

    def __init__(self, is_definition, is_developer_data, local_mesg_num,
                 time_offset):
        self.is_definition = is_definition
        self.is_developer_data = is_developer_data
        self.local_mesg_num = local_mesg_num
        self.time_offset = time_offset


class FitDecoder:
    """
    Incremental FIT decoder: bytes go in, frames come out.

    Bytes are passed to `feed` as they come, in chunks of any size. `feed`
    returns the list of the frames that could be completed so far, in stream
    order. `finish` must be called once the input is exhausted to detect a
    truncated stream.

    Usage::

        decoder = fitcodec.FitDecoder()
        for data in iter(lambda: sock.recv(4096), b''):
            for frame in decoder.feed(data):
                # frame is one of:
                # * fitcodec.FitHeader
                # * fitcodec.FitDefinitionMessage
                # * fitcodec.FitDataMessage
                # * fitcodec.FitCRC
                if isinstance(frame, fitcodec.FitDataMessage):
                    print(frame.name, frame.mesg)
        decoder.finish()

    Chained FIT files are supported transparently, a `FitHeader` marks the
    beginning of each new FIT file.

    Errors are raised as `FitError` exceptions, after which the decoder is not
    usable anymore. When an error is met after some frames have been completed
    by the same call to `feed`, these frames are returned first and the error
    is raised by the next call to `feed` or `finish`.

    Each `FitDataMessage` holds a new `fitcodec.Mesg` object that is never
    referred to again by the decoder.
    """

    def __init__(self, *, check_crc=CrcCheck.ENABLED, keep_raw_chunks=False):
        # backward compatibility
        if check_crc is True:
            check_crc = CrcCheck.ENABLED
        elif check_crc is False:
            check_crc = CrcCheck.DISABLED
        if not isinstance(check_crc, CrcCheck):
            raise ValueError(f'invalid check_crc value: {check_crc!r}')

        # modifiable options (public)
        self.check_crc = check_crc

        # immutable options (private)
        self._keep_raw = keep_raw_chunks

        # state (private)
        self._state = DecoderState.HEADER
        self._error = None          # error to raise on next call
        self._buffer = bytearray()  # bytes fed but not consumed yet
        self._offset = 0            # stream offset of the first byte of `_buffer`
        self._needed = HEADER_SIZE_NO_CRC  # bytes needed to complete the current unit
        self._header = None         # `FitHeader` of the current FIT file

        # per-chunk state (private)
        self._chunk_index = 0   # the index of the frame being read
        self._chunk_offset = 0  # the offset of the frame being read
        self._record_header = None  # `RecordHeader` of the record being read
        self._record_chunk = b''    # record header byte of the record being read

        # per-FIT-file state (private)
        self._crc = utils.CRC_START
        self._body_bytes_left = 0
        self._local_mesg_defs = {}
        self._local_dev_types = {}
        self._accumulators = {}
        self._timestamp_ref = 0

    @property
    def state(self):
        """Current `DecoderState`."""
        return self._state

    @property
    def offset(self):
        """
        Stream offset of the first byte not consumed yet. After an error, the
        offset of the unit (header, record or CRC) that could not be decoded.
        """
        return self._offset

    @property
    def last_header(self):
        """The last read `FitHeader` object. May be `None`."""
        return self._header

    @property
    def last_timestamp(self):
        """
        The rolling reference of compressed timestamps, i.e. the last
        ``timestamp`` (`int`) read in the current FIT file.
        """
        return self._timestamp_ref

    @property
    def local_mesg_defs(self):
        """
        Read-only access to the `dict` of local message types of the current
        FIT file.

        It is cleared each time a FIT file ends (`FitCRC`) and each time a new
        FIT file header is read.
        """
        return self._local_mesg_defs

    @property
    def local_dev_types(self):
        """
        Read-only access to the `dict` of developer types of the current FIT
        file, keyed by ``developer_data_index``.
        """
        return self._local_dev_types

    def feed(self, data):
        """
        Decode *data* (bytes-like object), in addition to the data fed so far.

        Return the `list` of frames completed by *data*, may be empty.
        """
        self._check_usable()

        if data:
            self._buffer += data

        frames = []
        try:
            while True:
                frame = self._step()
                if frame is _NEED_MORE:
                    break
                if frame is not None:
                    frames.append(frame)
                    self._chunk_index += 1
        except FitError as exc:
            self._state = DecoderState.ERROR
            if not frames:
                raise
            self._error = exc

        return frames

    def finish(self):
        """
        Signal the end of the input.

        `FitEOFError` is raised if the stream ended in the middle of a header,
        of a record or before the CRC of the last FIT file.
        """
        if self._state is DecoderState.DONE:
            return

        self._check_usable()

        state = self._state
        if state is DecoderState.CHAINED_HEADER or (
                state is DecoderState.HEADER and not self._buffer):
            if self._buffer:
                _logger.warning(
                    'ignoring %d trailing bytes @ %d',
                    len(self._buffer), self._offset)
                self._offset += len(self._buffer)
                self._buffer.clear()
            self._state = DecoderState.DONE
            return

        self._state = DecoderState.ERROR
        raise FitEOFError(
            self._needed, len(self._buffer), self._offset,
            'unexpected end of FIT stream')

    # ONLY PRIVATE METHODS BELOW ***********************************************

    def _check_usable(self):
        if self._state is DecoderState.ERROR:
            exc, self._error = self._error, None
            if exc is not None:
                raise exc
            raise FitError('decoder is not usable after an error')

        if self._state is DecoderState.DONE:
            raise FitError('decoder is finished')

    def _step(self):
        state = self._state

        if state in (DecoderState.HEADER, DecoderState.CHAINED_HEADER):
            return self._read_header()
        elif state is DecoderState.RECORD_HEADER:
            return self._read_record_header()
        elif state is DecoderState.DEFINITION_BODY:
            return self._read_definition_message()
        elif state is DecoderState.DATA_BODY:
            return self._read_data_message()
        elif state is DecoderState.CRC_TRAILER:
            return self._read_crc()

        return _NEED_MORE

    def _need(self, size):
        # True if less than *size* bytes are available
        self._needed = size
        return len(self._buffer) < size

    def _consume(self, size):
        chunk = bytes(self._buffer[:size])
        del self._buffer[:size]

        if self.check_crc is not CrcCheck.DISABLED:
            self._crc = utils.compute_crc(chunk, crc=self._crc)
        self._offset += size

        return chunk

    def _consume_body(self, size):
        self._body_bytes_left -= size
        return self._consume(size)

    def _check_body_size(self, size):
        if size > self._body_bytes_left:
            raise FitParseError(
                self._chunk_offset,
                f'record of {size} bytes crosses the end of the data section ' +
                f'({self._body_bytes_left} bytes left)')

    def _keep_chunk(self, chunk):
        if not self._keep_raw:
            return None
        return records.FitChunk(self._chunk_index, self._chunk_offset, chunk)

    def _on_new_file(self):
        self._crc = utils.CRC_START
        self._body_bytes_left = 0
        self._local_mesg_defs = {}
        self._local_dev_types = {}
        self._accumulators = {}
        self._timestamp_ref = 0

    def _on_record_end(self):
        self._record_header = None
        self._record_chunk = b''
        if self._body_bytes_left > 0:
            self._state = DecoderState.RECORD_HEADER
        else:
            self._state = DecoderState.CRC_TRAILER

    def _read_header(self):
        if self._need(HEADER_SIZE_NO_CRC):
            return _NEED_MORE

        self._chunk_offset = self._offset

        header_size, proto_ver, profile_ver, body_size, header_magic = \
            _HEADER_STRUCT.unpack_from(self._buffer)

        if header_magic != b'.FIT':
            raise FitHeaderError(f'not a FIT file @ {self._offset}')

        if header_size not in (HEADER_SIZE_NO_CRC, HEADER_SIZE_WITH_CRC):
            raise FitHeaderError(
                f'unsupported FIT header size {header_size} @ {self._offset}')

        if self._need(header_size):
            return _NEED_MORE

        proto_ver = (proto_ver >> 4, proto_ver & ((1 << 4) - 1))
        if proto_ver[0] > PROTOCOL_VERSION_MAJOR_MAX:
            raise FitProtocolVersionError(proto_ver, PROTOCOL_VERSION_MAJOR_MAX)

        # the extended part of the header only holds a CRC
        read_crc = None
        crc_matched = None
        if header_size == HEADER_SIZE_WITH_CRC:
            (read_crc, ) = _CRC_STRUCT.unpack_from(
                self._buffer, HEADER_SIZE_NO_CRC)
            if not read_crc:  # can be null according to SDK
                _logger.debug('null FIT header CRC @ %d', self._offset)
                read_crc = None
            else:
                computed_crc = utils.compute_crc(
                    bytes(self._buffer[:HEADER_SIZE_NO_CRC]))
                crc_matched = computed_crc == read_crc
                if self.check_crc is CrcCheck.ENABLED and not crc_matched:
                    raise FitCRCError(
                        read_crc, computed_crc, self._offset,
                        'invalid FIT header CRC')

        if self._state is DecoderState.CHAINED_HEADER:
            _logger.debug('chained FIT file @ %d', self._offset)

        self._on_new_file()
        chunk = self._consume(header_size)
        self._body_bytes_left = body_size

        self._header = records.FitHeader(
            header_size=header_size,
            proto_ver=proto_ver,
            profile_ver=(profile_ver // 100, profile_ver % 100),
            body_size=body_size,
            crc=read_crc,
            crc_matched=crc_matched,
            chunk=self._keep_chunk(chunk))

        _logger.debug(
            'FIT header @ %d: protocol %d.%d, profile %d.%d, %d bytes of data',
            self._chunk_offset, *proto_ver, *self._header.profile_ver,
            body_size)

        if body_size:
            self._state = DecoderState.RECORD_HEADER
        else:
            self._state = DecoderState.CRC_TRAILER

        return self._header

    def _read_crc(self):
        if self._need(_CRC_STRUCT.size):
            return _NEED_MORE

        self._chunk_offset = self._offset
        computed_crc = self._crc
        (read_crc, ) = _CRC_STRUCT.unpack_from(self._buffer)

        if self.check_crc is CrcCheck.DISABLED:
            matched = None
        else:
            matched = computed_crc == read_crc
            if self.check_crc is CrcCheck.ENABLED and not matched:
                raise FitCRCError(read_crc, computed_crc, self._offset)

        chunk = self._consume(_CRC_STRUCT.size)

        # We've reached the end of this FIT file... Reset the per-file state
        # now rather than when the next header is read, in case the next FIT
        # header is missing.
        self._on_new_file()
        self._state = DecoderState.CHAINED_HEADER

        return records.FitCRC(read_crc, matched, self._keep_chunk(chunk))

    def _read_record_header(self):
        if self._need(1):
            return _NEED_MORE

        self._chunk_offset = self._offset

        byte = self._buffer[0]
        if byte & 0x80:  # bit 7: compressed timestamp?
            record_header = RecordHeader(
                False,             # is_definition
                False,             # is_developer_data
                (byte >> 5) & 0x3,  # local_mesg_num; bits 5-6
                byte & 0x1f)       # time_offset; bits 0-4
        else:
            record_header = RecordHeader(
                bool(byte & 0x40),  # is_definition; bit 6
                bool(byte & 0x20),  # is_developer_data; bit 5
                byte & 0xf,         # local_mesg_num; bits 0-3
                None)               # time_offset

        if (not record_header.is_definition and
                record_header.local_mesg_num not in self._local_mesg_defs):
            raise FitUndefinedLocalMesgError(
                self._offset, record_header.local_mesg_num)

        self._record_chunk = self._consume_body(1)
        self._record_header = record_header

        if record_header.is_definition:
            self._state = DecoderState.DEFINITION_BODY
        else:
            self._state = DecoderState.DATA_BODY

        return None

    def _read_definition_message(self):
        record_header = self._record_header

        # reserved, architecture, global message number, number of fields
        size = 5
        self._check_body_size(size)
        if self._need(size):
            return _NEED_MORE

        size += 3 * self._buffer[4]
        if record_header.is_developer_data:
            self._check_body_size(size + 1)
            if self._need(size + 1):
                return _NEED_MORE
            size += 1 + 3 * self._buffer[size]

        self._check_body_size(size)
        if self._need(size):
            return _NEED_MORE

        body = bytes(self._buffer[:size])
        def_mesg = self._parse_definition_message(record_header, body)
        self._consume_body(size)

        # According to FIT protocol's specification (section 4.8.3), it is ok to
        # redefine message types
        self._local_mesg_defs[record_header.local_mesg_num] = def_mesg

        _logger.debug(
            'local message %d @ %d defined as %s (#%d), %d fields, ' +
            '%d developer fields', def_mesg.local_mesg_num, self._chunk_offset,
            def_mesg.name, def_mesg.global_mesg_num, len(def_mesg.field_defs),
            len(def_mesg.dev_field_defs))

        self._on_record_end()
        return def_mesg

    def _parse_definition_message(self, record_header, body):
        endian = '<' if not body[1] else '>'
        global_mesg_num, num_fields = struct.unpack_from(
            endian + 'HB', body, 2)

        # get global message's declaration from our profile if any
        mesg_type = registry.get_mesg_type(global_mesg_num)

        field_defs = []
        dev_field_defs = []
        pos = 5

        for _ in range(num_fields):
            field_def_num, field_size, base_type_id = body[pos:pos + 3]
            pos += 3

            base_type = types.get_base_type(base_type_id)
            if base_type is None:
                _logger.warning(
                    'unknown base type 0x%02X of field %d in message %s @ %d, ' +
                    'read as byte', base_type_id, field_def_num, mesg_type.name,
                    self._chunk_offset)
                base_type = types.BASE_TYPE_BYTE

            if field_size % base_type.size:
                raise FitFieldSizeError(
                    self._chunk_offset, field_def_num, field_size, base_type)

            field_defs.append(types.FieldDefinition(
                mesg_type.fields.get(field_def_num), field_def_num, base_type,
                field_size))

        if record_header.is_developer_data:
            num_dev_fields = body[pos]
            pos += 1

            for _ in range(num_dev_fields):
                field_def_num, field_size, dev_data_index = body[pos:pos + 3]
                pos += 3

                field = self._get_dev_field(dev_data_index, field_def_num)
                if field is None:
                    _logger.warning(
                        'no description for developer field %d:%d in ' +
                        'message %s @ %d, kept as raw bytes', dev_data_index,
                        field_def_num, mesg_type.name, self._chunk_offset)
                elif field_size % field.base_type.size:
                    raise FitFieldSizeError(
                        self._chunk_offset, field_def_num, field_size,
                        field.base_type)

                dev_field_defs.append(types.DevFieldDefinition(
                    field, dev_data_index, field_def_num, field_size))

        return records.FitDefinitionMessage(
            record_header.is_developer_data,
            record_header.local_mesg_num,
            record_header.time_offset,
            mesg_type,
            global_mesg_num,
            endian,
            field_defs,
            dev_field_defs,
            self._keep_chunk(self._record_chunk + body))

    def _read_data_message(self):
        record_header = self._record_header
        def_mesg = self._local_mesg_defs[record_header.local_mesg_num]

        size = def_mesg.data_size
        self._check_body_size(size)
        if self._need(size):
            return _NEED_MORE

        body = bytes(self._buffer[:size])
        mesg = self._parse_data_message(def_mesg, record_header, body)

        if mesg.mesg_num == profile.MESG_NUM_DEVELOPER_DATA_ID:
            self._add_dev_data_id(mesg)
        elif mesg.mesg_num == profile.MESG_NUM_FIELD_DESCRIPTION:
            self._add_dev_field_description(mesg)

        self._consume_body(size)

        data_mesg = records.FitDataMessage(
            record_header.is_developer_data,
            record_header.local_mesg_num,
            record_header.time_offset,
            def_mesg,
            mesg,
            self._keep_chunk(self._record_chunk + body))

        self._on_record_end()
        return data_mesg

    def _parse_data_message(self, def_mesg, record_header, body):
        mesg = Mesg(def_mesg.global_mesg_num)
        endian = def_mesg.endian
        pos = 0

        for field_def in def_mesg.field_defs:
            chunk = body[pos:pos + field_def.size]
            pos += field_def.size

            mesg.add_field(MesgField(
                field_def.def_num, field_def.base_type,
                field_def.base_type.unpack(chunk, endian),
                size=field_def.size, field=field_def.field))

        for field_def in def_mesg.dev_field_defs:
            chunk = body[pos:pos + field_def.size]
            pos += field_def.size

            mesg.add_field(MesgField(
                field_def.def_num, field_def.base_type,
                field_def.base_type.unpack(chunk, endian),
                size=field_def.size, field=field_def.field,
                dev_data_index=field_def.dev_data_index))

        # any valid timestamp becomes the new reference of compressed
        # timestamps
        ts_field = mesg.get_field(profile.FIELD_NUM_TIMESTAMP)
        if ts_field and ts_field.values and ts_field.values[0] is not None:
            self._timestamp_ref = ts_field.values[0]
        elif record_header.time_offset is not None:
            self._timestamp_ref = utils.apply_compressed_accumulation(
                record_header.time_offset, self._timestamp_ref, 5)

            if ts_field is None:
                field = def_mesg.mesg_type.fields.get(
                    profile.FIELD_NUM_TIMESTAMP, profile.FIELD_TYPE_TIMESTAMP)
                mesg.add_field(MesgField(
                    profile.FIELD_NUM_TIMESTAMP, field.base_type,
                    [self._timestamp_ref], field=field, is_expanded=True))

        self._expand_components(mesg)

        return mesg

    def _expand_components(self, mesg):
        # Expanded fields may have components themselves (e.g. event.data16
        # expands to event.data, which expands to event.score when event is
        # sport_point), hence the queue.
        pending = [
            mesg_field for mesg_field in mesg.fields
            if mesg_field.field is not None and mesg_field.is_valid]

        while pending:
            mesg_field = pending.pop(0)
            field = mesg_field.field

            components = field.components
            if field.subfields:
                sub_idx = mesg.get_active_subfield(mesg_field.def_num)
                if sub_idx != MAIN_FIELD:
                    components = (
                        field.subfields[sub_idx].components or components)

            if not components:
                continue

            # byte arrays are unpacked as a whole
            if mesg_field.base_type.size == 1 and len(mesg_field.values) > 1:
                raw_value = mesg_field.values
            else:
                raw_value = mesg_field.values[0]

            for component in components:
                # render its raw value
                try:
                    cmp_raw_value = component.render(raw_value)
                except ValueError:
                    continue

                if cmp_raw_value is None:
                    continue

                # apply accumulated value
                if component.accumulate:
                    key = (mesg.mesg_num, component.def_num)
                    cmp_raw_value = utils.apply_compressed_accumulation(
                        cmp_raw_value, self._accumulators.get(key, 0),
                        component.bits)
                    self._accumulators[key] = cmp_raw_value

                dest_field = mesg.mesg_type.fields.get(component.def_num)
                if dest_field is None:
                    continue

                # a field read from the stream always wins
                current = mesg.get_field(component.def_num)
                if current is not None and not current.is_expanded:
                    continue

                # scale and offset from the component first, then back to the
                # raw value of the destination field since they may differ
                value = component.apply_scale_offset(cmp_raw_value)
                dest_raw_value = dest_field.unapply_scale_offset(
                    value, dest_field.base_type)

                expanded = MesgField(
                    component.def_num, dest_field.base_type, [dest_raw_value],
                    field=dest_field, is_expanded=True)
                mesg.add_field(expanded)
                pending.append(expanded)

    def _add_dev_data_id(self, mesg):
        dev_data_index = mesg.get_value('developer_data_index')
        if dev_data_index is None:
            raise FitParseError(
                self._chunk_offset, 'developer_data_index missing')

        # declare/overwrite type
        self._local_dev_types[dev_data_index] = {
            'dev_data_index': dev_data_index,
            'application_id': mesg.get_values('application_id'),
            'manufacturer_id': mesg.get_value('manufacturer_id'),
            'fields': {}}

    def _add_dev_field_description(self, mesg):
        dev_data_index = mesg.get_value('developer_data_index')
        if dev_data_index not in self._local_dev_types:
            raise FitParseError(
                self._chunk_offset,
                f'dev_data_index {dev_data_index} not defined')

        field_def_num = mesg.get_value('field_definition_number')
        if field_def_num is None:
            raise FitParseError(
                self._chunk_offset, 'field_definition_number missing')

        base_type_id = mesg.get_value('fit_base_type_id')
        base_type = None
        if base_type_id is not None:
            base_type = types.get_base_type(base_type_id)
        if base_type is None:
            _logger.warning(
                'unknown base type %r for developer field %d:%d @ %d, ' +
                'read as byte', base_type_id, dev_data_index, field_def_num,
                self._chunk_offset)
            base_type = types.BASE_TYPE_BYTE

        fields = self._local_dev_types[dev_data_index]['fields']

        # declare/overwrite type
        fields[field_def_num] = types.DevField(
            dev_data_index,
            mesg.get_value('field_name'),
            field_def_num,
            base_type,
            units=mesg.get_value('units'),
            native_field_num=mesg.get_value('native_field_num'),
            scale=mesg.get_value('scale'),
            offset=mesg.get_value('offset'))

    def _get_dev_field(self, dev_data_index, field_def_num):
        dev_type = self._local_dev_types.get(dev_data_index)
        if dev_type is None:
            return None
        return dev_type['fields'].get(field_def_num)
