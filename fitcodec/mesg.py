# fitcodec
#
# Copyright (c) 2018 Jean-Charles Lefebvre
# All rights reserved.
#
# This code is licensed under the MIT License.
# See the LICENSE.txt file at the root of this project.

from .exceptions import FitTypeMismatchError
from . import registry
from . import types
from . import utils

__all__ = ['MAIN_FIELD', 'ACTIVE_SUBFIELD', 'MesgField', 'Mesg']


#: *subfield* selector: use the main field definition
MAIN_FIELD = 0xFFFE

#: *subfield* selector: use the subfield selected by the reference fields of
#: the message, or the main field if none matches
ACTIVE_SUBFIELD = 0xFFFF


class MesgField:
    """
    The values of one field of a `Mesg`.

    *values* is always a `list` of raw values (i.e. before scale and offset),
    `None` standing for the invalid value of *base_type*. String fields hold a
    single decoded `str` and remember their declared *size* in bytes.
    """

    __slots__ = (
        'def_num', 'base_type', 'values', 'size', 'field', 'dev_data_index',
        'is_expanded')

    def __init__(self, def_num, base_type, values=None, *, size=None,
                 field=None, dev_data_index=None, is_expanded=False):
        self.def_num = def_num
        self.base_type = base_type
        self.values = values if values is not None else []
        self.size = size  #: size in bytes as read from a definition, if any
        self.field = field  #: `types.Field`, `types.DevField` or `None`
        self.dev_data_index = dev_data_index  #: not `None` for developer fields

        #: true if this value was not read as is but derived from another
        #: field (component) or from a compressed timestamp header
        self.is_expanded = is_expanded

    def __repr__(self):
        return '<MesgField: %s (#%d) -- type: %s, values: %r>' % (
            self.name, self.def_num, self.base_type.name, self.values)

    def __eq__(self, other):
        if not isinstance(other, MesgField):
            return NotImplemented
        return (
            self.def_num == other.def_num and
            self.dev_data_index == other.dev_data_index and
            self.base_type.identifier == other.base_type.identifier and
            self.values == other.values)

    __hash__ = None

    @property
    def name(self):
        if self.field is not None:
            return self.field.name
        if self.is_dev:
            return f'unknown_dev_{self.dev_data_index}_{self.def_num}'
        return 'unknown_' + str(self.def_num)

    @property
    def is_dev(self):
        return self.dev_data_index is not None

    @property
    def is_valid(self):
        """At least one of the values is not invalid."""
        return any(v is not None for v in self.values)

    def copy(self):
        return MesgField(
            self.def_num, self.base_type, list(self.values), size=self.size,
            field=self.field, dev_data_index=self.dev_data_index,
            is_expanded=self.is_expanded)


class Mesg:
    """
    A FIT message as a bag of fields: a global message number and the values
    of each field it carries, in insertion order.

    Fields can be referred to by definition number or by name, subfield names
    included::

        mesg = Mesg('file_id')
        mesg.set_value('type', 'activity')
        mesg.set_value('manufacturer', 'garmin')
        mesg.set_value('garmin_product', 'edge500')
        assert mesg.get_value(2) == 1036

    Values are physical values: scale and offset of the profile are applied
    by `get_value` and reverted by `set_value`. Invalid values read as
    *fallback* and are written back as the invalid value of the base type.
    """

    __slots__ = ('mesg_num', 'mesg_type', '_fields', '_dev_fields')

    def __init__(self, mesg_num_or_name):
        if isinstance(mesg_num_or_name, str):
            mesg_num = registry.get_mesg_num(mesg_num_or_name)
            if mesg_num is None:
                raise KeyError(f'unknown message name "{mesg_num_or_name}"')
        else:
            mesg_num = int(mesg_num_or_name)

        self.mesg_num = mesg_num
        self.mesg_type = registry.get_mesg_type(mesg_num)
        self._fields = {}
        self._dev_fields = {}

    def __repr__(self):
        return '<Mesg: %s (#%d) -- %d fields>' % (
            self.name, self.mesg_num, len(self))

    def __eq__(self, other):
        if not isinstance(other, Mesg):
            return NotImplemented
        return (
            self.mesg_num == other.mesg_num and
            self._fields == other._fields and
            self._dev_fields == other._dev_fields)

    __hash__ = None

    def __iter__(self):
        yield from self._fields.values()
        yield from self._dev_fields.values()

    def __len__(self):
        return len(self._fields) + len(self._dev_fields)

    @property
    def name(self):
        return self.mesg_type.name

    @property
    def fields(self):
        """`list` of the `MesgField` objects of regular fields."""
        return list(self._fields.values())

    @property
    def dev_fields(self):
        """
        `dict` of developer `MesgField` objects keyed by
        ``(dev_data_index, def_num)``.
        """
        return self._dev_fields

    def copy(self):
        mesg = Mesg(self.mesg_num)
        for mesg_field in self:
            mesg.add_field(mesg_field.copy())
        return mesg

    def add_field(self, mesg_field):
        """Add or replace a `MesgField` object, developer fields included."""
        if mesg_field.is_dev:
            key = (mesg_field.dev_data_index, mesg_field.def_num)
            self._dev_fields[key] = mesg_field
        else:
            self._fields[mesg_field.def_num] = mesg_field

    def get_field(self, field):
        """The `MesgField` of *field* (number or name), or `None`."""
        def_num, _, _ = self._lookup(field)
        return self._fields.get(def_num)

    def has_field(self, field):
        return self.get_field(field) is not None

    def remove_field(self, field):
        """Remove *field* if present. Return `True` if it was present."""
        def_num, _, _ = self._lookup(field)
        return self._fields.pop(def_num, None) is not None

    def get_num_values(self, field):
        mesg_field = self.get_field(field)
        return len(mesg_field.values) if mesg_field else 0

    def get_active_subfield(self, field):
        """
        Index of the subfield of *field* which reference field matches the
        content of this message, or `MAIN_FIELD`.
        """
        def_num, prof_field, _ = self._lookup(field)
        if prof_field is None or not prof_field.subfields:
            return MAIN_FIELD

        for idx, sub_field in enumerate(prof_field.subfields):
            for ref_field in sub_field.ref_fields:
                ref_mesg_field = self._fields.get(ref_field.def_num)
                if (ref_mesg_field and ref_mesg_field.values and
                        ref_mesg_field.values[0] == ref_field.raw_value):
                    return idx

        return MAIN_FIELD

    def get_value(self, field, index=0, *, subfield=MAIN_FIELD, py_type=None,
                  raw_value=False, fallback=None):
        """
        Get the value at *index* of *field* (number or name).

        *fallback* is returned if the field is absent, if *index* is out of
        range or if the value is invalid.

        *subfield* selects the interpretation of the raw value: `MAIN_FIELD`,
        `ACTIVE_SUBFIELD` or the index of a subfield. Naming a subfield in
        *field* implies its selection.

        *py_type* can be `int`, `float`, `bool` or `str` to convert the value.
        `FitTypeMismatchError` is raised if *py_type* is `str` and the field is
        not a string, or the other way around. `bytes` can be used to get the
        whole content of a ``byte`` field.

        *raw_value* can be set to a true value to get the value as stored in
        the FIT stream, i.e. without scale and offset applied.
        """
        def_num, _, sub_idx = self._lookup(field)
        mesg_field = self._fields.get(def_num)
        if mesg_field is None:
            return fallback

        if sub_idx is not None:
            subfield = sub_idx

        return self._get_value(
            mesg_field, self._get_descriptor(mesg_field, subfield), index,
            py_type, raw_value, fallback)

    def get_values(self, field, *, subfield=MAIN_FIELD, py_type=None,
                   raw_value=False):
        """`list` of all the values of *field*, invalid ones being `None`."""
        def_num, _, sub_idx = self._lookup(field)
        mesg_field = self._fields.get(def_num)
        if mesg_field is None:
            return []

        if sub_idx is not None:
            subfield = sub_idx

        desc = self._get_descriptor(mesg_field, subfield)
        return [
            self._get_value(mesg_field, desc, idx, py_type, raw_value, None)
            for idx in range(len(mesg_field.values))]

    def set_value(self, field, value, index=0, *, subfield=MAIN_FIELD,
                  base_type=None):
        """
        Set the value at *index* of *field* (number or name).

        *value* is a physical value: scale and offset are reverted and the
        result is rounded for integer base types. Enumeration names are
        accepted for enumerated fields. `None` stores an invalid value.

        Setting an *index* past the end of the current values extends them,
        missing values being invalid.

        *base_type* (a `types.BaseType` or its name) is required if *field* is
        not part of the profile of this message.
        """
        def_num, prof_field, sub_idx = self._lookup(field)
        if def_num is None:
            raise KeyError(f'unknown field "{field}" in message {self.name}')

        if sub_idx is not None:
            subfield = sub_idx

        mesg_field = self._fields.get(def_num)
        if mesg_field is None:
            mesg_field = self._new_field(def_num, prof_field, base_type)

        raw = self._to_raw(
            mesg_field, self._get_descriptor(mesg_field, subfield), value)

        values = mesg_field.values
        if index >= len(values):
            values.extend([None] * (index + 1 - len(values)))
        values[index] = raw

        mesg_field.is_expanded = False
        self._fields[def_num] = mesg_field

    def set_values(self, field, values, *, subfield=MAIN_FIELD,
                   base_type=None):
        """Replace all the values of *field*. An empty *values* removes it."""
        if isinstance(values, (bytes, bytearray)):
            values = list(values)

        self.remove_field(field)
        for idx, value in enumerate(values):
            self.set_value(
                field, value, idx, subfield=subfield, base_type=base_type)

    def get_dev_value(self, dev_data_index, field_num, index=0, *,
                      raw_value=False, fallback=None):
        """Value of a developer field, scale and offset applied if known."""
        mesg_field = self._dev_fields.get((dev_data_index, field_num))
        if mesg_field is None:
            return fallback

        return self._get_value(
            mesg_field, mesg_field.field, index, None, raw_value, fallback)

    def set_dev_value(self, dev_field, value, index=0):
        """Set the value at *index* of the developer field *dev_field*."""
        key = (dev_field.dev_data_index, dev_field.def_num)
        mesg_field = self._dev_fields.get(key)
        if mesg_field is None:
            mesg_field = MesgField(
                dev_field.def_num, dev_field.base_type, field=dev_field,
                dev_data_index=dev_field.dev_data_index)
            self._dev_fields[key] = mesg_field

        raw = self._to_raw(mesg_field, dev_field, value)

        values = mesg_field.values
        if index >= len(values):
            values.extend([None] * (index + 1 - len(values)))
        values[index] = raw

    def _lookup(self, field):
        # return a (def_num, profile_field, subfield_index) tuple
        if isinstance(field, str):
            prof_field, sub_idx = self.mesg_type.get_field_by_name(field)
            if prof_field is not None:
                return prof_field.def_num, prof_field, sub_idx

            # name of a field unknown to the profile
            for mesg_field in self._fields.values():
                if mesg_field.name == field:
                    return mesg_field.def_num, None, None

            return None, None, None

        prof_field = self.mesg_type.fields.get(field)
        if prof_field is None:
            mesg_field = self._fields.get(field)
            if mesg_field is not None:
                prof_field = mesg_field.field

        return field, prof_field, None

    def _new_field(self, def_num, prof_field, base_type):
        if isinstance(base_type, str):
            base_type = types.BASE_TYPES_BY_NAME[base_type]

        if prof_field is None:
            if base_type is None:
                raise ValueError(
                    f'base_type required to set field {def_num} which is ' +
                    f'unknown to message {self.name}')
            prof_field = registry.get_field(self.mesg_num, def_num, base_type)

        return MesgField(
            def_num, base_type or prof_field.base_type, field=prof_field)

    def _get_descriptor(self, mesg_field, subfield):
        prof_field = mesg_field.field
        if prof_field is None or not prof_field.subfields:
            return prof_field

        if subfield == ACTIVE_SUBFIELD:
            subfield = self.get_active_subfield(mesg_field.def_num)

        if subfield == MAIN_FIELD or not (
                0 <= subfield < len(prof_field.subfields)):
            return prof_field

        return prof_field.subfields[subfield]

    @staticmethod
    def _get_value(mesg_field, desc, index, py_type, raw_value, fallback):
        base_type = mesg_field.base_type

        if py_type is bytes:
            if base_type is not types.BASE_TYPE_BYTE:
                raise FitTypeMismatchError(
                    f'field {mesg_field.name} of type {base_type.name} ' +
                    'cannot be read as bytes')
            if not mesg_field.is_valid:
                return fallback
            return bytes(0xff if v is None else v for v in mesg_field.values)

        if base_type.is_string:
            if py_type not in (None, str):
                raise FitTypeMismatchError(
                    f'string field {mesg_field.name} cannot be read as ' +
                    py_type.__name__)
        elif py_type is str:
            raise FitTypeMismatchError(
                f'field {mesg_field.name} of type {base_type.name} ' +
                'cannot be read as str')

        if not 0 <= index < len(mesg_field.values):
            return fallback

        value = mesg_field.values[index]
        if value is None:
            return fallback

        if not raw_value and desc is not None:
            value = desc.apply_scale_offset(value)

        if py_type is not None and not base_type.is_string:
            value = py_type(value)

        return value

    @staticmethod
    def _to_raw(mesg_field, desc, value):
        base_type = mesg_field.base_type

        if value is None:
            return None

        if base_type.is_string:
            if not isinstance(value, str):
                raise FitTypeMismatchError(
                    f'string field {mesg_field.name} cannot be set from ' +
                    type(value).__name__)
            return value

        if isinstance(value, str):
            field_type = desc.type if desc is not None else None
            raw = None
            if isinstance(field_type, types.FieldType):
                raw = field_type.get_value(value)
            if raw is None:
                raise FitTypeMismatchError(
                    f'"{value}" is not a value name of field ' +
                    f'{mesg_field.name}')
        else:
            if isinstance(value, bool):
                value = int(value)

            if desc is not None:
                raw = desc.unapply_scale_offset(value, base_type)
            elif base_type.is_integer and isinstance(value, float):
                raw = utils.round_half_up(value)
            else:
                raw = value

        # a raw value that lands on the sentinel is stored as invalid, the
        # same way the decoder reads it
        if isinstance(raw, (int, float)):
            return base_type.parse(raw)

        return raw
