# fitcodec
#
# Copyright (c) 2018 Jean-Charles Lefebvre
# All rights reserved.
#
# This code is licensed under the MIT License.
# See the LICENSE.txt file at the root of this project.

import collections
import logging
import os
import struct

from .exceptions import FitEncodeError
from .mesg import Mesg
from . import profile
from . import utils

__all__ = ['FitEncoder', 'encode', 'PROTOCOL_VERSION']

_logger = logging.getLogger(__name__)

#: FIT protocol version written in the header, ``(major << 4) | minor``
PROTOCOL_VERSION = 0x20

#: number of local message types available to definition messages
NUM_LOCAL_MESG_TYPES = 16

#: compressed timestamp headers can only refer to local message types 0-3
NUM_COMPRESSED_LOCAL_MESG_TYPES = 4

_HEADER_STRUCT = struct.Struct('<2BHI4s')
_CRC_STRUCT = struct.Struct('<H')


class _LocalMesgType:
    __slots__ = ('local_mesg_num', 'mesg_num', 'num_fields')

    def __init__(self, local_mesg_num, mesg_num, num_fields):
        self.local_mesg_num = local_mesg_num
        self.mesg_num = mesg_num
        self.num_fields = num_fields


class FitEncoder:
    """
    Encode `fitcodec.Mesg` objects into a FIT file.

    Messages are encoded in call order. A definition message is emitted only
    when the layout of a message (its global number, and the number, size and
    base type of its fields) does not match any of the 16 local message types
    currently defined, in which case the least recently used local message
    type is redefined.

    The output is built in memory and finalized by `close` (or `finish`),
    which returns the whole FIT file as `bytes` and also writes it to
    *fileish* if any (path or writable file object).

    Usage::

        with fitcodec.FitEncoder('out.fit') as encoder:
            file_id = fitcodec.Mesg('file_id')
            file_id.set_value('type', 'activity')
            file_id.set_value('manufacturer', 'garmin')
            encoder.write(file_id)

    Fields that were not read from a FIT stream but derived by the decoder
    (components, compressed timestamps) are not written. A ``timestamp``
    derived from a compressed timestamp header is written as such again if
    *compress_timestamps* is true and if it is still representable.
    """

    def __init__(self, fileish=None, *, endian='<', header_size=14,
                 header_crc=True, protocol_version=PROTOCOL_VERSION,
                 profile_version=profile.PROFILE_VERSION,
                 compress_timestamps=True):
        if endian not in ('<', '>'):
            raise ValueError(f'invalid endian: {endian!r}')
        if header_size not in (12, 14):
            raise ValueError(f'invalid header_size: {header_size}')
        if not 0 <= protocol_version <= 0xff:
            raise ValueError(f'invalid protocol_version: {protocol_version}')
        if not 0 <= profile_version <= 0xffff:
            raise ValueError(f'invalid profile_version: {profile_version}')

        if hasattr(fileish, '__fspath__'):
            fileish = os.fspath(fileish)

        # immutable options (private)
        self._fileish = fileish
        self._endian = endian
        self._header_size = header_size
        self._header_crc = header_crc
        self._protocol_version = protocol_version
        self._profile_version = profile_version
        self._compress_timestamps = compress_timestamps

        # state (private)
        self._data = bytearray()  # records written so far
        self._local_mesg_types = collections.OrderedDict()  # least recently used first
        self._timestamp_ref = 0
        self._num_mesgs = 0
        self._num_defs = 0
        self._result = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        # do not produce an incomplete file
        if exc_type is None:
            self.close()

    @property
    def endian(self):
        return self._endian

    @property
    def closed(self):
        return self._result is not None

    @property
    def data_size(self):
        """Size of the records written so far, header and CRC excluded."""
        return len(self._data)

    @property
    def num_mesgs(self):
        """Number of data messages written so far."""
        return self._num_mesgs

    @property
    def num_definitions(self):
        """Number of definition messages written so far."""
        return self._num_defs

    def write(self, mesg):
        """
        Encode *mesg*, a `fitcodec.Mesg` or one of the typed wrappers of
        `fitcodec.mesgs`.

        `FitEncodeError` is raised if a value cannot be packed into the base
        type of its field. The output is left untouched in this case.
        """
        if self._result is not None:
            raise FitEncodeError('cannot write to a closed encoder')

        if not isinstance(mesg, Mesg):
            mesg = getattr(mesg, 'mesg', mesg)
            if not isinstance(mesg, Mesg):
                raise TypeError(f'not a message: {mesg!r}')

        if not 0 <= mesg.mesg_num <= 0xffff:
            raise FitEncodeError(
                f'invalid global message number {mesg.mesg_num}')

        timestamp, time_offset = self._get_compressed_timestamp(mesg)

        fields = self._get_fields(mesg, time_offset is not None)
        dev_fields = self._get_dev_fields(mesg)

        if time_offset is not None:
            key = self._layout_key(mesg, fields, dev_fields)
            local_type = self._local_mesg_types.get(key)
            if (local_type is not None and
                    local_type.local_mesg_num >= NUM_COMPRESSED_LOCAL_MESG_TYPES):
                # already defined in a slot that compressed timestamp headers
                # cannot refer to
                time_offset = None
                fields = self._get_fields(mesg, False)

        key = self._layout_key(mesg, fields, dev_fields)

        # pack data first so that the output is left untouched on error
        data = [
            self._pack_field(mesg, mesg_field, size)
            for mesg_field, size in fields + dev_fields]

        local_type, definition = self._get_local_type(
            key, mesg, fields, dev_fields, time_offset is not None)

        if definition:
            self._data += definition
            self._num_defs += 1

        if time_offset is not None:
            self._data.append(
                0x80 | (local_type.local_mesg_num << 5) | time_offset)
        else:
            self._data.append(local_type.local_mesg_num)

        for chunk in data:
            self._data += chunk

        if timestamp is not None:
            self._timestamp_ref = timestamp

        self._num_mesgs += 1

    def write_mesgs(self, mesgs):
        for mesg in mesgs:
            self.write(mesg)

    def finish(self):
        """
        Finalize the FIT file and return it as a `bytes` object.

        The file is also written to the *fileish* passed to the constructor
        if any. Calling this method again returns the same object.
        """
        if self._result is not None:
            return self._result

        header = _HEADER_STRUCT.pack(
            self._header_size, self._protocol_version, self._profile_version,
            len(self._data), b'.FIT')

        if self._header_size == 14:
            header_crc = utils.compute_crc(header) if self._header_crc else 0
            header += _CRC_STRUCT.pack(header_crc)

        crc = utils.compute_crc(self._data, crc=utils.compute_crc(header))

        self._result = header + bytes(self._data) + _CRC_STRUCT.pack(crc)
        self._data = bytearray()
        self._local_mesg_types.clear()

        if self._fileish is not None:
            if hasattr(self._fileish, 'write'):
                self._fileish.write(self._result)
            else:
                with open(self._fileish, mode='wb') as fp:
                    fp.write(self._result)

        return self._result

    def close(self):
        return self.finish()

    # ONLY PRIVATE METHODS BELOW ***********************************************

    def _get_compressed_timestamp(self, mesg):
        # return a (timestamp, time_offset) pair, time_offset being None if
        # the timestamp cannot be written in a compressed timestamp header
        ts_field = mesg.get_field(profile.FIELD_NUM_TIMESTAMP)
        if ts_field is None or not ts_field.values:
            return None, None

        timestamp = ts_field.values[0]
        if not isinstance(timestamp, int):
            return None, None

        if (self._compress_timestamps and ts_field.is_expanded and
                0 <= timestamp - self._timestamp_ref < 32):
            return timestamp, timestamp & 0x1f

        return timestamp, None

    @staticmethod
    def _get_fields(mesg, compressed_timestamp):
        fields = []
        for mesg_field in mesg.fields:
            if not mesg_field.values and mesg_field.size != 0:
                continue

            if mesg_field.is_expanded:
                # a timestamp from a compressed timestamp header is written
                # back as a regular field if it cannot be compressed again
                if (compressed_timestamp or
                        mesg_field.def_num != profile.FIELD_NUM_TIMESTAMP):
                    continue

            fields.append((mesg_field, _field_size(mesg_field)))

        return fields

    @staticmethod
    def _get_dev_fields(mesg):
        return [
            (mesg_field, _field_size(mesg_field))
            for mesg_field in mesg.dev_fields.values()
            if mesg_field.values or mesg_field.size == 0]

    def _layout_key(self, mesg, fields, dev_fields):
        return (
            mesg.mesg_num,
            tuple(
                (mesg_field.def_num, size, mesg_field.base_type.identifier)
                for mesg_field, size in fields),
            tuple(
                (mesg_field.dev_data_index, mesg_field.def_num, size)
                for mesg_field, size in dev_fields),
            self._endian)

    def _pack_field(self, mesg, mesg_field, size):
        if size > 0xff:
            raise FitEncodeError(
                f'field {mesg_field.name} of message {mesg.name} is too ' +
                f'large ({size} bytes)')

        try:
            return mesg_field.base_type.pack(
                mesg_field.values, self._endian, size)
        except (struct.error, TypeError, UnicodeEncodeError) as exc:
            raise FitEncodeError(
                f'cannot pack {mesg_field.values!r} into field ' +
                f'{mesg_field.name} ({mesg_field.base_type.name}) of ' +
                f'message {mesg.name}: {exc}') from exc

    def _get_local_type(self, key, mesg, fields, dev_fields, compressed):
        # return a (local_type, definition) pair, definition being the bytes
        # of the definition message to emit or None
        local_type = self._local_mesg_types.get(key)
        if local_type is not None:
            self._local_mesg_types.move_to_end(key)
            return local_type, None

        if len(fields) > 0xff or len(dev_fields) > 0xff:
            raise FitEncodeError(f'too many fields in message {mesg.name}')

        max_local_num = (
            NUM_COMPRESSED_LOCAL_MESG_TYPES if compressed
            else NUM_LOCAL_MESG_TYPES)

        used = set(lt.local_mesg_num for lt in self._local_mesg_types.values())
        free = [num for num in range(max_local_num) if num not in used]
        if free:
            local_mesg_num = free[0]
        else:
            # evict the least recently used local type
            for old_key, old_type in self._local_mesg_types.items():
                if old_type.local_mesg_num < max_local_num:
                    break
            del self._local_mesg_types[old_key]
            local_mesg_num = old_type.local_mesg_num
            _logger.debug(
                'local message %d redefined (was message #%d)',
                local_mesg_num, old_type.mesg_num)

        local_type = _LocalMesgType(local_mesg_num, mesg.mesg_num, len(fields))
        self._local_mesg_types[key] = local_type

        record_header = 0x40 | local_mesg_num
        if dev_fields:
            record_header |= 0x20

        definition = bytearray((record_header, 0, int(self._endian == '>')))
        definition += struct.pack(
            self._endian + 'HB', mesg.mesg_num, len(fields))
        for mesg_field, size in fields:
            definition += bytes((
                mesg_field.def_num, size, mesg_field.base_type.identifier))

        if dev_fields:
            definition.append(len(dev_fields))
            for mesg_field, size in dev_fields:
                definition += bytes((
                    mesg_field.def_num, size, mesg_field.dev_data_index))

        _logger.debug(
            'local message %d defined as %s (#%d), %d fields, ' +
            '%d developer fields', local_mesg_num, mesg.name, mesg.mesg_num,
            len(fields), len(dev_fields))

        return local_type, bytes(definition)


def _field_size(mesg_field):
    base_type = mesg_field.base_type
    if base_type.is_string:
        size = sum(
            len((value or '').encode('utf-8', errors='replace')) + 1
            for value in mesg_field.values)
        if mesg_field.size is not None:
            if size == mesg_field.size + 1:
                # read without a terminating null byte
                return mesg_field.size
            size = max(size, mesg_field.size)
        return size

    return base_type.size * len(mesg_field.values)


def encode(mesgs, **kwargs):
    """
    Encode the *mesgs* iterable and return the resulting FIT file as `bytes`.
    *kwargs* are passed to `FitEncoder`.
    """
    encoder = FitEncoder(**kwargs)
    encoder.write_mesgs(mesgs)
    return encoder.finish()
