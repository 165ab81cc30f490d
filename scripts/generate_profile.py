#!/usr/bin/env python3
# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT
"""
Generate ``fitcodec/profile.py`` from the ``Profile.xlsx`` spreadsheet of the
FIT SDK.

xlrd only reads the legacy Excel format, so the spreadsheet has to be saved as
``Profile.xls`` first.
"""

import argparse
import os.path
import sys

import xlrd

THIS_DIR = os.path.abspath(os.path.dirname(__file__))
DEFAULT_OUTPUT = os.path.join(
    os.path.dirname(THIS_DIR), 'fitcodec', 'profile.py')

COLNAMES_TYPES = ('type_name', 'base_type', 'value_name', 'value', 'comment')

COLNAMES_MESSAGES = (
    'message_name', 'field_def_num', 'field_name', 'field_type', 'array',
    'components', 'scale', 'offset', 'units', 'bits', 'accumulate',
    'ref_field_name', 'ref_field_value', 'comment', 'products', 'example')

BASE_TYPE_IDS = {
    'enum': 0x00,
    'sint8': 0x01,
    'uint8': 0x02,
    'sint16': 0x83,
    'uint16': 0x84,
    'sint32': 0x85,
    'uint32': 0x86,
    'string': 0x07,
    'float32': 0x88,
    'float64': 0x89,
    'uint8z': 0x0A,
    'uint16z': 0x8B,
    'uint32z': 0x8C,
    'byte': 0x0D,
    'sint64': 0x8E,
    'uint64': 0x8F,
    'uint64z': 0x90}

# these are always exported, fitcodec refers to them directly
REQUIRED_TYPES = ('date_time', 'mesg_num')

HEADER = '''\
# fitcodec
#
# Copyright (c) 2018 Jean-Charles Lefebvre
# All rights reserved.
#
# This code is licensed under the MIT License.
# See the LICENSE.txt file at the root of this project.
#
# ****WARNING****  This file is auto-generated!  Do NOT edit this file.
# Generated by scripts/generate_profile.py from {source}
# Profile Version = {version}

from .types import (
    BASE_TYPES, FieldType, MessageType, Field, SubField, ComponentField,
    ReferenceField)

__all__ = []
'''

FOOTER = '''
FIELD_NUM_TIMESTAMP = 253
FIELD_NUM_MESSAGE_INDEX = 254

FIELD_TYPE_TIMESTAMP = Field(name='timestamp', type=FIELD_TYPES['date_time'], def_num=253, units='s')
'''


def cell_str(value):
    """Cell value as a stripped `str`, integral numbers without decimals"""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value).strip()


def split_cell(text):
    """Comma-separated cell content as a `list`, empty cells give ``[]``"""
    text = text.replace('\n', '')
    return [s.strip() for s in text.split(',')] if text else []


def parse_number(text):
    if not text:
        return None
    if text.lower().startswith('0x'):
        return int(text, 16)
    value = float(text)
    return int(value) if value.is_integer() else value


def _normalize(rows, colnames):
    for row in rows:
        row = [cell_str(cell) for cell in row[:len(colnames)]]
        row += [''] * (len(colnames) - len(row))
        yield dict(zip(colnames, row))


def parse_types(rows):
    """
    Parse the rows of the ``Types`` sheet, header row excluded.

    Return a `dict` ``{type_name: {'base_type': str, 'values': [(literal,
    value, value_name), ...]}}``. *literal* is the value as written in the
    sheet so that hexadecimal values are output as such.
    """
    types = {}
    current = None

    for row in _normalize(rows, COLNAMES_TYPES):
        if row['type_name']:
            current = {'base_type': row['base_type'], 'values': []}
            types[row['type_name']] = current
        elif current is not None and row['value_name'] and row['value']:
            literal = row['value']
            if literal.lower().startswith('0x'):
                literal = '0x' + literal[2:].upper()
            current['values'].append(
                (literal, parse_number(row['value']), row['value_name']))

    return types


def parse_components(row, fields_by_name):
    """
    Parse the components of a field or subfield *row*. Return a `list` of
    `dict`, bit offsets included.
    """
    names = split_cell(row['components'])
    if not names:
        return []

    scales = split_cell(row['scale'])
    offsets = split_cell(row['offset'])
    units = split_cell(row['units'])
    bits = split_cell(row['bits'])
    accumulate = split_cell(row['accumulate'])

    def _at(values, idx):
        return values[idx] if idx < len(values) else ''

    components = []
    bit_offset = 0
    for idx, name in enumerate(names):
        dest_field = fields_by_name.get(name)
        if dest_field is None:
            raise ValueError(
                f'unknown destination field "{name}" in components of ' +
                row['field_name'])

        num_bits = parse_number(_at(bits, idx))
        if not num_bits:
            raise ValueError(
                f'missing bits for component "{name}" of ' + row['field_name'])

        components.append({
            'name': name,
            'def_num': dest_field['def_num'],
            'scale': parse_number(_at(scales, idx)),
            'offset': parse_number(_at(offsets, idx)),
            'units': _at(units, idx) or None,
            'accumulate': _at(accumulate, idx) == '1',
            'bits': num_bits,
            'bit_offset': bit_offset})
        bit_offset += num_bits

    return components


def _field_attrs(row):
    # scale, offset and units of a field apply to the field itself only if
    # it has at most one component
    if len(split_cell(row['components'])) > 1:
        return {'scale': None, 'offset': None, 'units': None}

    return {
        'scale': parse_number((split_cell(row['scale']) or [''])[0]),
        'offset': parse_number((split_cell(row['offset']) or [''])[0]),
        'units': (split_cell(row['units']) or [None])[0] or None}


def parse_messages(rows, types):
    """
    Parse the rows of the ``Messages`` sheet, header row excluded.

    Return a `list` of messages sorted by global number, each message being a
    `dict` with a ``fields`` `list`.
    """
    mesg_nums = {
        name: value for _, value, name in types['mesg_num']['values']}

    messages = []
    current = None
    field_rows = []  # [(field_dict, row, [subfield_rows])]

    def _flush():
        if current is not None:
            _build_message(current, field_rows, types)

    for row in _normalize(rows, COLNAMES_MESSAGES):
        if row['message_name']:
            _flush()
            name = row['message_name']
            if name not in mesg_nums:
                raise ValueError(f'unknown message "{name}"')
            current = {
                'name': name, 'mesg_num': mesg_nums[name], 'fields': []}
            field_rows = []
            messages.append(current)
            continue

        # empty rows and section banners
        if current is None or not row['field_name']:
            continue

        if row['field_def_num']:
            field_rows.append((row, []))
        elif field_rows:
            field_rows[-1][1].append(row)

    _flush()

    messages.sort(key=lambda mesg: mesg['mesg_num'])
    return messages


def _build_message(message, field_rows, types):
    fields_by_name = {}
    for row, _ in field_rows:
        field = {
            'name': row['field_name'],
            'def_num': parse_number(row['field_def_num']),
            'type': row['field_type']}
        field.update(_field_attrs(row))
        fields_by_name[field['name']] = field
        message['fields'].append(field)

    for field, (row, subfield_rows) in zip(message['fields'], field_rows):
        field['components'] = parse_components(row, fields_by_name)
        field['subfields'] = []

        for sub_row in subfield_rows:
            subfield = {
                'name': sub_row['field_name'],
                'def_num': field['def_num'],
                'type': sub_row['field_type'],
                'components': parse_components(sub_row, fields_by_name),
                'ref_fields': []}
            subfield.update(_field_attrs(sub_row))

            ref_names = split_cell(sub_row['ref_field_name'])
            ref_values = split_cell(sub_row['ref_field_value'])
            if len(ref_names) == 1:
                ref_names *= len(ref_values)

            for ref_name, ref_value in zip(ref_names, ref_values):
                ref_field = fields_by_name.get(ref_name)
                if ref_field is None:
                    raise ValueError(
                        f'unknown reference field "{ref_name}" in ' +
                        f'{message["name"]}.{subfield["name"]}')
                subfield['ref_fields'].append({
                    'name': ref_name,
                    'def_num': ref_field['def_num'],
                    'value': ref_value,
                    'raw_value': _type_value(
                        types, ref_field['type'], ref_value)})

            field['subfields'].append(subfield)

    message['fields'].sort(key=lambda field: field['def_num'])


def _type_value(types, type_name, value_name):
    field_type = types.get(type_name)
    if field_type is not None:
        for _, value, name in field_type['values']:
            if name == value_name:
                return value
    return parse_number(value_name)


def _render_type_ref(types, type_name):
    if type_name in types:
        return f"FIELD_TYPES['{type_name}']"
    return 'BASE_TYPES[0x%02X]' % BASE_TYPE_IDS[type_name]


def _render_attrs(desc):
    out = ''
    for name in ('scale', 'offset', 'units'):
        if desc.get(name) is not None:
            out += f', {name}={desc[name]!r}'
    return out


def _render_components(components, indent):
    lines = []
    for cmp in components:
        lines.append(
            indent +
            f"ComponentField(name='{cmp['name']}', def_num={cmp['def_num']}" +
            _render_attrs(cmp) +
            f", accumulate={cmp['accumulate']}, bits={cmp['bits']}, " +
            f"bit_offset={cmp['bit_offset']}),")
    return lines


def render_profile(types, messages, version, source='Profile.xls'):
    """Return the code of the profile module as a `str`."""
    used_types = set(REQUIRED_TYPES)
    for message in messages:
        for field in message['fields']:
            used_types.add(field['type'])
            used_types.update(sub['type'] for sub in field['subfields'])
    used_types &= set(types)

    major, minor = divmod(version, 100)
    lines = [HEADER.format(source=source, version=f'{major}.{minor:02d}')]
    lines.append('')
    lines.append(f'PROFILE_VERSION = {version}  # {major}.{minor:02d}')
    lines.append('')

    lines.append('FIELD_TYPES = {')
    for type_name in sorted(used_types):
        field_type = types[type_name]
        base_type = 'BASE_TYPES[0x%02X]' % BASE_TYPE_IDS[
            field_type['base_type']]
        head = (
            f"    '{type_name}': FieldType(name='{type_name}', " +
            f'base_type={base_type}')
        if not field_type['values']:
            lines.append(head + '),')
            continue
        lines.append(head + ', values={')
        for literal, _, value_name in field_type['values']:
            lines.append(f"        {literal}: '{value_name}',")
        lines.append('    }),')
    lines.append('}')
    lines.append('')

    lines.append('MESSAGE_TYPES = {')
    for idx, message in enumerate(messages):
        if idx:
            lines.append('')
        banner = '#' * 32
        lines.append(
            f"    # {banner} {message['name']} ({message['mesg_num']}) " +
            banner)
        lines.append(
            f"    {message['mesg_num']}: MessageType(" +
            f"name='{message['name']}', mesg_num={message['mesg_num']}, " +
            'fields={')

        for field in message['fields']:
            line = (
                f"        {field['def_num']}: Field(name='{field['name']}', " +
                f"type={_render_type_ref(types, field['type'])}, " +
                f"def_num={field['def_num']}" + _render_attrs(field))

            if not field['components'] and not field['subfields']:
                lines.append(line + '),')
                continue

            opener = 'components=(' if field['components'] else 'subfields=('
            lines.append(line + ', ' + opener)

            if field['components']:
                lines += _render_components(field['components'], ' ' * 12)
                if field['subfields']:
                    lines.append('        ), subfields=(')

            for sub in field['subfields']:
                lines.append(
                    f"            SubField(name='{sub['name']}', " +
                    f"def_num={sub['def_num']}, " +
                    f"type={_render_type_ref(types, sub['type'])}" +
                    _render_attrs(sub) + ', ref_fields=(')
                for ref in sub['ref_fields']:
                    lines.append(
                        f"                ReferenceField(name='{ref['name']}', " +
                        f"def_num={ref['def_num']}, value='{ref['value']}', " +
                        f"raw_value={ref['raw_value']!r}),")
                if sub['components']:
                    lines.append('            ), components=(')
                    lines += _render_components(sub['components'], ' ' * 16)
                lines.append('            )),')

            lines.append('        )),')

        lines.append('    }),')
    lines.append('}')
    lines.append('')

    for message in messages:
        lines.append(
            f"MESG_NUM_{message['name'].upper()} = {message['mesg_num']}")

    return '\n'.join(lines) + '\n' + FOOTER


def read_sheet(workbook, sheet_name):
    """All the rows of a sheet, except the header row"""
    sheet = workbook.sheet_by_name(sheet_name)
    return [sheet.row_values(idx) for idx in range(1, sheet.nrows)]


def parse_version(text):
    major, _, minor = text.partition('.')
    return int(major) * 100 + int(minor or 0)


def parse_args(args=None):
    parser = argparse.ArgumentParser(
        description='Generate fitcodec/profile.py from the FIT SDK profile')

    parser.add_argument(
        'profile', metavar='PROFILE_XLS',
        help='Profile.xlsx file of the FIT SDK, saved as .xls')

    parser.add_argument(
        '-o', '--output', default=DEFAULT_OUTPUT,
        help='Output Python file (defaults to fitcodec/profile.py)')

    parser.add_argument(
        '--profile-version', required=True, type=parse_version,
        help='Version of the profile, "21.94" for instance')

    parser.add_argument(
        '-m', '--mesg', action='append',
        help=(
            'Name of a message to export (can be specified multiple ' +
            'times). All messages are exported by default.'))

    return parser.parse_args(args)


def main(args=None):
    options = parse_args(args)

    workbook = xlrd.open_workbook(options.profile)
    types = parse_types(read_sheet(workbook, 'Types'))
    messages = parse_messages(read_sheet(workbook, 'Messages'), types)

    if options.mesg:
        unknown = set(options.mesg) - set(m['name'] for m in messages)
        if unknown:
            raise ValueError('unknown message(s): ' + ', '.join(sorted(unknown)))
        messages = [m for m in messages if m['name'] in options.mesg]

    code = render_profile(
        types, messages, options.profile_version,
        source=os.path.basename(options.profile))

    with open(options.output, mode='wt', encoding='utf-8', newline='\n') as fp:
        fp.write(code)

    return 0


if __name__ == '__main__':
    sys.exit(main())
