# fitcodec
#
# Copyright (c) 2018 Jean-Charles Lefebvre
# All rights reserved.
#
# This code is licensed under the MIT License.
# See the LICENSE.txt file at the root of this project.

import math
import struct

from . import utils

__all__ = []


class BaseType:
    """
    One of the FIT base types, as found in the ``base_type`` byte of a field
    definition.

    The *invalid* value is the sentinel that marks a value as "not set". On the
    Python side, `parse` turns it into `None` and `pack` turns `None` back into
    the sentinel, so that a field can hold an invalid value without losing it.
    """

    __slots__ = ('name', 'identifier', 'fmt', 'invalid', 'size')

    def __init__(self, name, identifier, fmt, invalid):
        self.name = name
        self.identifier = identifier
        self.fmt = fmt
        self.invalid = invalid
        self.size = struct.calcsize('<' + fmt)

    def __repr__(self):
        return '<BaseType: %s (#%d [0x%X])>' % (
            self.name, self.type_num, self.identifier)

    @property
    def type_num(self):
        return self.identifier & 0x1f

    @property
    def is_endian(self):
        """Multi-byte type which byte order depends on the definition."""
        return bool(self.identifier & 0x80)

    @property
    def is_string(self):
        return self.identifier == 0x07

    @property
    def is_float(self):
        return self.fmt in ('f', 'd')

    @property
    def is_integer(self):
        return not self.is_string and not self.is_float

    def parse(self, value):
        """Map the invalid sentinel to `None`."""
        if self.is_string:
            return parse_string(value)
        if self.is_float:
            return None if math.isnan(value) else value
        return None if value == self.invalid else value

    def unpack(self, chunk, endian='<'):
        """
        Unpack a bytes-like *chunk* holding as many elements as its size
        allows. Always return a `list` of parsed values.
        """
        if self.is_string:
            return [self.parse(bytes(chunk))]

        count = len(chunk) // self.size
        unpacker = struct.Struct(endian + str(count) + self.fmt)
        return [self.parse(v) for v in unpacker.unpack(chunk)]

    def pack_value(self, value, endian='<'):
        if value is None:
            return self.invalid_bytes
        return struct.pack(endian + self.fmt, value)

    def pack(self, values, endian='<', size=None):
        """
        Pack a list of raw *values*, `None` elements being written as the
        invalid sentinel.

        For strings, *size* is the size of the field in bytes: the encoded
        strings are null-terminated and padded with zeros up to *size*. A
        string that fills *size* exactly is written without its terminator.
        """
        if self.is_string:
            chunk = b''.join(
                (s or '').encode('utf-8') + b'\x00' for s in values)
            if size is not None and len(chunk) == size + 1:
                chunk = chunk[:size]
            elif size is not None and len(chunk) < size:
                chunk += b'\x00' * (size - len(chunk))
            return chunk

        return b''.join(self.pack_value(v, endian) for v in values)

    @property
    def invalid_bytes(self):
        if self.is_float:
            return b'\xff' * self.size
        if self.is_string:
            return b'\x00'
        return struct.pack('<' + self.fmt, self.invalid)


class FieldType:
    """A type from the ``Types`` sheet of the FIT profile (mostly enums)."""

    __slots__ = ('name', 'base_type', 'values', '_values_by_name')

    def __init__(self, name, base_type, values=None):
        self.name = name
        self.base_type = base_type
        self.values = values  #: `dict` of ``{value: name}``, may be `None`
        self._values_by_name = None

    def __repr__(self):
        return f'<FieldType: {self.name} ({self.base_type.name})>'

    def get_value(self, value_name):
        """Number of the enumeration value named *value_name*, or `None`."""
        if not self.values:
            return None
        if self._values_by_name is None:
            self._values_by_name = {
                name: value for value, name in self.values.items()}
        return self._values_by_name.get(value_name)

    def get_name(self, value):
        if not self.values:
            return None
        return self.values.get(value)


class MessageType:
    __slots__ = ('name', 'mesg_num', 'fields', '_fields_by_name')

    def __init__(self, name, mesg_num, fields=None):
        self.name = name
        self.mesg_num = mesg_num
        self.fields = fields if fields is not None else {}
        self._fields_by_name = None

    def __repr__(self):
        return '<MessageType: %s (#%d)>' % (self.name, self.mesg_num)

    @property
    def is_unknown(self):
        return self.name.startswith('unknown_')

    def get_field_by_name(self, name):
        """
        Return a ``(field, subfield_index)`` pair for *name*, which may be the
        name of a field or of a subfield. ``(None, None)`` if not found.
        """
        if self._fields_by_name is None:
            by_name = {}
            for field in self.fields.values():
                by_name.setdefault(field.name, (field, None))
                for idx, sub_field in enumerate(field.subfields or ()):
                    by_name.setdefault(sub_field.name, (field, idx))
            self._fields_by_name = by_name
        return self._fields_by_name.get(name, (None, None))


class FieldAndSubFieldBase:
    __slots__ = ()

    @property
    def base_type(self):
        return self.type if self.is_base_type else self.type.base_type

    @property
    def is_base_type(self):
        return isinstance(self.type, BaseType)

    @property
    def has_scale_offset(self):
        return bool((self.scale and self.scale != 1) or self.offset)

    def apply_scale_offset(self, raw_value):
        """``raw / scale - offset``; invalid values are left untouched"""
        if raw_value is None or not isinstance(raw_value, (int, float)):
            return raw_value
        if not self.has_scale_offset:
            return raw_value

        value = float(raw_value)
        if self.scale:
            value /= self.scale
        if self.offset:
            value -= self.offset
        return value

    def unapply_scale_offset(self, value, base_type=None):
        """Inverse of `apply_scale_offset`, rounded for integer types"""
        if value is None or not isinstance(value, (int, float)):
            return value
        if base_type is None:
            base_type = self.base_type

        if self.has_scale_offset:
            value = float(value)
            if self.offset:
                value += self.offset
            if self.scale:
                value *= self.scale

        if base_type.is_integer and isinstance(value, float):
            return utils.round_half_up(value)
        return value


class Field(FieldAndSubFieldBase):
    __slots__ = (
        'name', 'type', 'def_num', 'scale', 'offset', 'units', 'components',
        'subfields')
    field_type = 'field'

    def __init__(self, name, type, def_num, scale=None, offset=None,
                 units=None, components=None, subfields=None):
        self.name = name
        self.type = type  #: `BaseType` or `FieldType`
        self.def_num = def_num
        self.scale = scale
        self.offset = offset
        self.units = units
        self.components = components  #: `tuple` of `ComponentField` or `None`
        self.subfields = subfields  #: `tuple` of `SubField` or `None`

    def __repr__(self):
        return f'<Field: {self.name} (#{self.def_num})>'

    @property
    def is_unknown(self):
        return self.name.startswith('unknown_')


class SubField(FieldAndSubFieldBase):
    __slots__ = (
        'name', 'def_num', 'type', 'scale', 'offset', 'units', 'components',
        'ref_fields')
    field_type = 'subfield'

    def __init__(self, name, def_num, type, scale=None, offset=None,
                 units=None, components=None, ref_fields=None):
        self.name = name
        self.def_num = def_num  #: the number of the parent field
        self.type = type
        self.scale = scale
        self.offset = offset
        self.units = units
        self.components = components
        self.ref_fields = ref_fields  #: `tuple` of `ReferenceField`

    def __repr__(self):
        return f'<SubField: {self.name} (#{self.def_num})>'


class DevField(FieldAndSubFieldBase):
    __slots__ = (
        'dev_data_index', 'def_num', 'type', 'name', 'units',
        'native_field_num', 'scale', 'offset',
        # always None, to be compatible with Field objects
        'components', 'subfields')
    field_type = 'devfield'

    def __init__(self, dev_data_index, name, def_num, type, units=None,
                 native_field_num=None, scale=None, offset=None):
        self.dev_data_index = dev_data_index
        self.def_num = def_num
        self.type = type
        self.name = name
        self.units = units
        self.native_field_num = native_field_num
        self.scale = scale
        self.offset = offset
        self.components = None
        self.subfields = None

    def __repr__(self):
        return (
            f'<DevField: {self.name} ' +
            f'({self.dev_data_index}:{self.def_num})>')


class ReferenceField:
    __slots__ = ('name', 'def_num', 'value', 'raw_value')

    def __init__(self, name, def_num, value, raw_value):
        self.name = name
        self.def_num = def_num
        self.value = value
        self.raw_value = raw_value


class ComponentField:
    __slots__ = (
        'name', 'def_num', 'scale', 'offset', 'units', 'accumulate', 'bits',
        'bit_offset')
    field_type = 'component'

    def __init__(self, name, def_num, scale=None, offset=None, units=None,
                 accumulate=False, bits=0, bit_offset=0):
        self.name = name
        self.def_num = def_num  #: the number of the destination field
        self.scale = scale
        self.offset = offset
        self.units = units
        self.accumulate = accumulate
        self.bits = bits
        self.bit_offset = bit_offset

    @property
    def has_scale_offset(self):
        return bool((self.scale and self.scale != 1) or self.offset)

    def render(self, raw_value):
        """
        Extract the bits of this component from the *raw_value* of its
        parent field.

        *raw_value* is either a single integer, or a list of byte values that
        is unpacked as a little endian integer. `ValueError` is raised if the
        component lies beyond the parent's bits.
        """
        if raw_value is None:
            return None

        if isinstance(raw_value, (list, tuple)):
            # Profile.xls sometimes contains more components than the read raw
            # value is able to hold (typically the *event_timestamp_12* field in
            # *hr* messages).
            # This test allows to ensure *unpacked_num* is not right-shifted
            # more than necessary.
            if self.bit_offset and self.bit_offset >= len(raw_value) << 3:
                raise ValueError()

            unpacked_num = 0

            # unpack byte array as little endian, invalid bytes are 0xff
            for value in reversed(raw_value):
                unpacked_num = (unpacked_num << 8) + (
                    0xff if value is None else value)

            raw_value = unpacked_num

        if isinstance(raw_value, int):
            raw_value = (raw_value >> self.bit_offset) & ((1 << self.bits) - 1)

        return raw_value

    def apply_scale_offset(self, raw_value):
        if raw_value is None or not self.has_scale_offset:
            return raw_value

        value = float(raw_value)
        if self.scale:
            value /= self.scale
        if self.offset:
            value -= self.offset
        return value


class FieldDefinition:
    __slots__ = ('field', 'def_num', 'base_type', 'size')
    is_dev = False

    def __init__(self, field, def_num, base_type, size):
        self.field = field  #: `Field` or `None`
        self.def_num = def_num
        self.base_type = base_type
        self.size = size

    def __repr__(self):
        return '<FieldDefinition: %s (#%d) -- type: %s, size: %d>' % (
            self.name, self.def_num, self.base_type.name, self.size)

    @property
    def name(self):
        return self.field.name if self.field else 'unknown_' + str(self.def_num)

    @property
    def type(self):
        return self.field.type if self.field else self.base_type


class DevFieldDefinition:
    __slots__ = ('field', 'dev_data_index', 'def_num', 'size')
    is_dev = True

    def __init__(self, field, dev_data_index, def_num, size):
        self.field = field  #: `DevField` or `None` if not described
        self.dev_data_index = dev_data_index
        self.def_num = def_num
        self.size = size

    def __repr__(self):
        return '<DevFieldDefinition: %s (%d:%d) -- type: %s, size: %d>' % (
            self.name, self.dev_data_index, self.def_num,
            self.base_type.name, self.size)

    @property
    def name(self):
        if self.field:
            return self.field.name
        return f'unknown_dev_{self.dev_data_index}_{self.def_num}'

    @property
    def base_type(self):
        return self.field.base_type if self.field else BASE_TYPE_BYTE

    @property
    def type(self):
        return self.field.type if self.field else BASE_TYPE_BYTE


def parse_string(string):
    try:
        s = string[:string.index(0x00)]
    except ValueError:
        # FIT specification defines the 'string' type as follows: "Null
        # terminated string encoded in UTF-8 format".
        #
        # However 'string' values are not always null-terminated when encoded,
        # according to FIT files created by Garmin devices (e.g. DEVICE.FIT file
        # from a fenix3).
        #
        # So in order to be more flexible, in case index() could not find any
        # null byte, we just decode the whole bytes-like object.
        s = string

    return s.decode(encoding='utf-8', errors='replace') or None


# The default base type
BASE_TYPE_BYTE = BaseType('byte', 0x0D, 'B', 0xFF)

BASE_TYPES = {
    0x00: BaseType('enum', 0x00, 'B', 0xFF),
    0x01: BaseType('sint8', 0x01, 'b', 0x7F),
    0x02: BaseType('uint8', 0x02, 'B', 0xFF),
    0x83: BaseType('sint16', 0x83, 'h', 0x7FFF),
    0x84: BaseType('uint16', 0x84, 'H', 0xFFFF),
    0x85: BaseType('sint32', 0x85, 'i', 0x7FFFFFFF),
    0x86: BaseType('uint32', 0x86, 'I', 0xFFFFFFFF),
    0x07: BaseType('string', 0x07, 's', b''),
    0x88: BaseType('float32', 0x88, 'f', 0xFFFFFFFF),
    0x89: BaseType('float64', 0x89, 'd', 0xFFFFFFFFFFFFFFFF),
    0x0A: BaseType('uint8z', 0x0A, 'B', 0x00),
    0x8B: BaseType('uint16z', 0x8B, 'H', 0x0000),
    0x8C: BaseType('uint32z', 0x8C, 'I', 0x00000000),
    0x0D: BASE_TYPE_BYTE,
    0x8E: BaseType('sint64', 0x8E, 'q', 0x7FFFFFFFFFFFFFFF),
    0x8F: BaseType('uint64', 0x8F, 'Q', 0xFFFFFFFFFFFFFFFF),
    0x90: BaseType('uint64z', 0x90, 'Q', 0x0000000000000000),
}

BASE_TYPES_BY_NAME = {bt.name: bt for bt in BASE_TYPES.values()}

# base type numbers (bits 0-4) without the endian flag, as found in some
# legacy files and in developer field descriptions
BASE_TYPES_BY_NUM = {bt.type_num: bt for bt in BASE_TYPES.values()}


def get_base_type(identifier):
    """Base type from its identifier (endian flag optional), or `None`."""
    base_type = BASE_TYPES.get(identifier)
    if base_type is None:
        base_type = BASE_TYPES_BY_NUM.get(identifier & 0x1f)
    return base_type
