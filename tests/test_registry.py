#!/usr/bin/env python3
# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

import struct
import unittest

from fitcodec import profile
from fitcodec import registry
from fitcodec import types


class RegistryTestCase(unittest.TestCase):

    def test_mesg_types(self):
        record = registry.get_mesg_type(20)
        self.assertIs(record, profile.MESSAGE_TYPES[20])
        self.assertEqual(record.name, 'record')
        self.assertTrue(registry.is_known_mesg(20))

        unknown = registry.get_mesg_type(0xff00)
        self.assertEqual(unknown.name, 'unknown_65280')
        self.assertEqual(unknown.fields, {})
        self.assertIs(registry.get_mesg_type(0xff00), unknown)
        self.assertFalse(registry.is_known_mesg(0xff00))

        self.assertEqual(registry.get_mesg_num('record'), 20)
        self.assertEqual(registry.get_mesg_num('developer_data_id'), 207)
        self.assertIsNone(registry.get_mesg_num('no_such_message'))

        with self.assertRaises(TypeError):
            registry.MESSAGE_TYPES[20] = unknown

    def test_fields(self):
        field = registry.get_field(20, 3)
        self.assertEqual(field.name, 'heart_rate')
        self.assertIs(field.base_type, types.BASE_TYPES[0x02])
        self.assertTrue(registry.is_known_field(20, 3))
        self.assertFalse(registry.is_known_field(20, 200))
        self.assertFalse(registry.is_known_field(0xff00, 0))

        unknown = registry.get_field(20, 200)
        self.assertEqual(unknown.name, 'unknown_200')
        self.assertIs(unknown.base_type, types.BASE_TYPE_BYTE)
        self.assertTrue(unknown.is_unknown)

        unknown = registry.get_field(0xff00, 1, types.BASE_TYPES[0x84])
        self.assertEqual(unknown.base_type.name, 'uint16')

        self.assertEqual(registry.get_field_num(20, 'heart_rate'), 3)
        self.assertEqual(registry.get_field_num(0, 'garmin_product'), 2)
        self.assertIsNone(registry.get_field_num(20, 'no_such_field'))
        self.assertIsNone(registry.get_field_num(0xff00, 'heart_rate'))

    def test_type_values(self):
        self.assertEqual(registry.get_type_value('sport', 'running'), 1)
        self.assertEqual(registry.get_type_value_name('sport', 1), 'running')
        self.assertEqual(registry.get_type_value('file', 'activity'), 4)
        self.assertIsNone(registry.get_type_value('sport', 'no_such_sport'))
        self.assertIsNone(registry.get_type_value('no_such_type', 'running'))
        self.assertIsNone(registry.get_type_value_name('no_such_type', 1))

    def test_components(self):
        field = registry.get_field(20, 8)
        self.assertEqual(field.name, 'compressed_speed_distance')
        self.assertEqual(
            [(c.name, c.bits, c.bit_offset, c.accumulate)
             for c in field.components],
            [('speed', 12, 0, False), ('distance', 12, 12, True)])

        speed, distance = field.components
        raw_value = [0xfa, 0x00, 0x01]
        self.assertEqual(speed.render(raw_value), 250)
        self.assertEqual(speed.apply_scale_offset(250), 2.5)
        self.assertEqual(distance.render(raw_value), 16)
        self.assertEqual(distance.apply_scale_offset(16), 1.0)

    def test_subfields(self):
        field = registry.get_field(0, 2)
        self.assertEqual(field.subfields[0].name, 'garmin_product')
        self.assertEqual(
            [ref.raw_value for ref in field.subfields[0].ref_fields],
            [1, 15, 13, 89])


class BaseTypeTestCase(unittest.TestCase):

    def test_invalid_values(self):
        sint8 = types.BASE_TYPES[0x01]
        self.assertEqual(sint8.unpack(b'\x7f\x80\xff'), [None, -128, -1])

        uint8z = types.BASE_TYPES[0x0A]
        self.assertEqual(uint8z.unpack(b'\x00\xff'), [None, 255])

        uint16 = types.BASE_TYPES[0x84]
        self.assertEqual(uint16.unpack(b'\x01\x02', '>'), [0x0102])
        self.assertEqual(uint16.unpack(b'\xff\xff'), [None])

        float32 = types.BASE_TYPES[0x88]
        nan = struct.pack('<I', 0x7fc00001)
        self.assertEqual(float32.unpack(b'\xff\xff\xff\xff' + nan), [None, None])
        self.assertEqual(float32.unpack(struct.pack('<f', 1.5)), [1.5])

    def test_strings(self):
        string = types.BASE_TYPES[0x07]
        self.assertEqual(string.unpack(b'abc\x00\x00\x00'), ['abc'])
        self.assertEqual(string.unpack(b'abc'), ['abc'])
        self.assertEqual(string.unpack(b'\x00\x00'), [None])

        self.assertEqual(string.pack(['abc']), b'abc\x00')
        self.assertEqual(string.pack(['abc'], size=6), b'abc\x00\x00\x00')
        self.assertEqual(string.pack([None], size=2), b'\x00\x00')

    def test_pack(self):
        sint16 = types.BASE_TYPES[0x83]
        self.assertEqual(sint16.pack([1, None], '<'), b'\x01\x00\xff\x7f')
        self.assertEqual(sint16.pack([1], '>'), b'\x00\x01')

        float64 = types.BASE_TYPES[0x89]
        self.assertEqual(float64.pack([None]), b'\xff' * 8)

        self.assertIsNone(types.get_base_type(0x1f))
        self.assertIs(types.get_base_type(0x0D), types.BASE_TYPE_BYTE)


if __name__ == '__main__':
    unittest.main()
