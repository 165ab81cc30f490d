# fitcodec
#
# Copyright (c) 2018 Jean-Charles Lefebvre
# All rights reserved.
#
# This code is licensed under the MIT License.
# See the LICENSE.txt file at the root of this project.
"""
Read-only access to the FIT profile tables generated in `fitcodec.profile`.

Lookups never fail on numbers: a message or field number that the profile does
not know gets a synthetic ``unknown_<num>`` descriptor so that unknown data can
still be decoded, carried around and encoded back.
"""

import functools
from types import MappingProxyType

from . import profile
from . import types

__all__ = [
    'MESSAGE_TYPES', 'FIELD_TYPES', 'get_mesg_type', 'get_field',
    'get_mesg_num', 'get_field_num', 'get_type_value', 'get_type_value_name',
    'is_known_mesg', 'is_known_field']


MESSAGE_TYPES = MappingProxyType(profile.MESSAGE_TYPES)
FIELD_TYPES = MappingProxyType(profile.FIELD_TYPES)

_MESG_NUMS_BY_NAME = MappingProxyType({
    mesg_type.name: mesg_num
    for mesg_num, mesg_type in profile.MESSAGE_TYPES.items()})


def is_known_mesg(mesg_num):
    return mesg_num in MESSAGE_TYPES


def is_known_field(mesg_num, field_num):
    mesg_type = MESSAGE_TYPES.get(mesg_num)
    return mesg_type is not None and field_num in mesg_type.fields


@functools.lru_cache(maxsize=None)
def _unknown_mesg_type(mesg_num):
    return types.MessageType(
        name='unknown_' + str(mesg_num), mesg_num=mesg_num, fields={})


@functools.lru_cache(maxsize=None)
def _unknown_field(field_num, base_type):
    return types.Field(
        name='unknown_' + str(field_num), type=base_type, def_num=field_num)


def get_mesg_type(mesg_num):
    """
    Return the `MessageType` of global message number *mesg_num*.

    An empty ``unknown_<mesg_num>`` message type is returned if the number is
    not part of the profile. The same object is returned for the same number.
    """
    mesg_type = MESSAGE_TYPES.get(mesg_num)
    if mesg_type is None:
        mesg_type = _unknown_mesg_type(mesg_num)
    return mesg_type


def get_field(mesg_num, field_num, base_type=None):
    """
    Return the `Field` numbered *field_num* in message *mesg_num*.

    For a field unknown to the profile, a synthetic ``unknown_<field_num>``
    field is returned, typed after *base_type* (``byte`` by default).
    """
    mesg_type = MESSAGE_TYPES.get(mesg_num)
    if mesg_type is not None:
        field = mesg_type.fields.get(field_num)
        if field is not None:
            return field

    if base_type is None:
        base_type = types.BASE_TYPE_BYTE
    return _unknown_field(field_num, base_type)


def get_mesg_num(mesg_name):
    """Global number of message *mesg_name*, or `None` if unknown."""
    return _MESG_NUMS_BY_NAME.get(mesg_name)


def get_field_num(mesg_num, field_name):
    """
    Definition number of the field (or subfield) named *field_name* in message
    *mesg_num*, or `None` if unknown.
    """
    mesg_type = MESSAGE_TYPES.get(mesg_num)
    if mesg_type is None:
        return None
    field, _ = mesg_type.get_field_by_name(field_name)
    return field.def_num if field is not None else None


def get_type_value(type_name, value_name):
    """
    Numeric value of the enumeration value *value_name* of type *type_name*,
    ``get_type_value('sport', 'running') == 1``. `None` if either is unknown.
    """
    field_type = FIELD_TYPES.get(type_name)
    if field_type is None:
        return None
    return field_type.get_value(value_name)


def get_type_value_name(type_name, value):
    field_type = FIELD_TYPES.get(type_name)
    if field_type is None:
        return None
    return field_type.get_name(value)
