#!/usr/bin/env python3
# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

import struct
import unittest

import fitcodec
from fitcodec import utils


def _definition(local_mesg_num, mesg_num, field_defs, endian='<',
                dev_field_defs=None):
    """
    *field_defs* is a list of ``(def_num, size, base_type_id)`` and
    *dev_field_defs* a list of ``(def_num, size, dev_data_index)``.
    """
    header = 0x40 | local_mesg_num
    if dev_field_defs is not None:
        header |= 0x20

    s = struct.pack('<3B', header, 0, int(endian == '>'))
    s += struct.pack(endian + 'HB', mesg_num, len(field_defs))
    for field_def in field_defs:
        s += struct.pack('<3B', *field_def)

    if dev_field_defs is not None:
        s += struct.pack('<B', len(dev_field_defs))
        for field_def in dev_field_defs:
            s += struct.pack('<3B', *field_def)

    return s


def _data(local_mesg_num, fmt='', *values):
    return struct.pack('<B', local_mesg_num) + struct.pack(fmt, *values)


def _compressed(local_mesg_num, time_offset, fmt='', *values):
    return (
        struct.pack('<B', 0x80 | (local_mesg_num << 5) | time_offset) +
        struct.pack(fmt, *values))


def _fit_file(records=b'', header_size=14, proto_ver=0x20,
              profile_ver=2194, header_crc=True):
    header = struct.pack(
        '<2BHI4s', header_size, proto_ver, profile_ver, len(records), b'.FIT')
    if header_size == 14:
        header += struct.pack(
            '<H', utils.compute_crc(header) if header_crc else 0)

    data = header + records
    return data + struct.pack('<H', utils.compute_crc(data))


# file_id: type, manufacturer, product, time_created, serial_number
_FILE_ID_DEF = [(0, 1, 0x00), (1, 2, 0x84), (2, 2, 0x84), (4, 4, 0x86),
                (3, 4, 0x8C)]
_FILE_ID_VALUES = (4, 1, 0, 1000000000, 12345)


def _file_id_records(endian='<', local_mesg_num=0):
    return (
        _definition(local_mesg_num, 0, _FILE_ID_DEF, endian=endian) +
        _data(local_mesg_num, endian + 'BHHII', *_FILE_ID_VALUES))


def _decode(data, **kwargs):
    decoder = fitcodec.FitDecoder(**kwargs)
    frames = decoder.feed(data)
    decoder.finish()
    return frames


def _data_mesgs(frames):
    return [
        frame.mesg for frame in frames
        if isinstance(frame, fitcodec.FitDataMessage)]


class FitDecoderTestCase(unittest.TestCase):

    def test_minimal_file(self):
        data = _fit_file(header_size=12)
        self.assertEqual(len(data), 14)

        decoder = fitcodec.FitDecoder()
        frames = decoder.feed(data)

        self.assertEqual(len(frames), 2)
        self.assertIsInstance(frames[0], fitcodec.FitHeader)
        self.assertEqual(frames[0].header_size, 12)
        self.assertEqual(frames[0].body_size, 0)
        self.assertIsNone(frames[0].crc)
        self.assertIsInstance(frames[1], fitcodec.FitCRC)
        self.assertTrue(frames[1].matched)
        self.assertIs(decoder.state, fitcodec.DecoderState.CHAINED_HEADER)

        decoder.finish()
        self.assertIs(decoder.state, fitcodec.DecoderState.DONE)
        self.assertEqual(decoder.offset, 14)

        # finishing twice is harmless, feeding is not
        decoder.finish()
        with self.assertRaises(fitcodec.FitError):
            decoder.feed(b'\x00')

    def test_empty_input(self):
        decoder = fitcodec.FitDecoder()
        self.assertEqual(decoder.feed(b''), [])
        decoder.finish()
        self.assertIs(decoder.state, fitcodec.DecoderState.DONE)

    def test_file_id(self):
        frames = _decode(_fit_file(_file_id_records()))

        self.assertEqual(
            [type(frame) for frame in frames],
            [fitcodec.FitHeader, fitcodec.FitDefinitionMessage,
             fitcodec.FitDataMessage, fitcodec.FitCRC])

        header = frames[0]
        self.assertEqual(header.proto_ver, (2, 0))
        self.assertEqual(header.profile_ver, (21, 94))
        self.assertTrue(header.crc_matched)

        def_mesg = frames[1]
        self.assertEqual(def_mesg.local_mesg_num, 0)
        self.assertEqual(def_mesg.global_mesg_num, 0)
        self.assertEqual(def_mesg.name, 'file_id')
        self.assertEqual(def_mesg.endian, '<')
        self.assertEqual(
            [fd.name for fd in def_mesg.field_defs],
            ['type', 'manufacturer', 'product', 'time_created',
             'serial_number'])

        mesg = frames[2].mesg
        self.assertEqual(mesg.name, 'file_id')
        self.assertEqual(mesg.get_value('type'), 4)
        self.assertEqual(mesg.get_value('manufacturer'), 1)
        self.assertEqual(mesg.get_value('product'), 0)
        self.assertEqual(mesg.get_value('time_created'), 1000000000)
        self.assertEqual(mesg.get_value('serial_number'), 12345)

        # field order follows the definition
        self.assertEqual(
            [mesg_field.def_num for mesg_field in mesg], [0, 1, 2, 4, 3])

    def test_big_endian(self):
        little = _decode(_fit_file(_file_id_records('<')))
        big = _decode(_fit_file(_file_id_records('>')))

        self.assertEqual(big[1].endian, '>')
        self.assertEqual(_data_mesgs(big), _data_mesgs(little))

    def test_feed_byte_by_byte(self):
        data = _fit_file(_file_id_records() + _file_id_records())
        expected = _data_mesgs(_decode(data))

        decoder = fitcodec.FitDecoder(keep_raw_chunks=True)
        frames = []
        for idx in range(len(data)):
            frames += decoder.feed(data[idx:idx + 1])
        decoder.finish()

        self.assertEqual(_data_mesgs(frames), expected)
        self.assertEqual(b''.join(frame.chunk.bytes for frame in frames), data)

    def test_compressed_timestamp(self):
        ref = 0x3B9ACA00
        self.assertEqual(ref & 0x1f, 0)

        records = (
            # local 0: record with heart_rate only
            _definition(0, 20, [(3, 1, 0x02)]) +
            # local 1: record with timestamp and heart_rate
            _definition(1, 20, [(253, 4, 0x86), (3, 1, 0x02)]) +
            _data(1, '<IB', ref, 100) +
            _compressed(0, 0, '<B', 101) +
            _compressed(0, 5, '<B', 102) +
            # rolls over: the reference advances by 32 - 5 + 2
            _compressed(0, 2, '<B', 103))

        decoder = fitcodec.FitDecoder()
        mesgs = _data_mesgs(decoder.feed(_fit_file(records)))
        self.assertEqual(len(mesgs), 4)

        self.assertEqual(
            [mesg.get_value('timestamp') for mesg in mesgs],
            [ref, ref, ref + 5, ref + 34])
        self.assertEqual(
            [mesg.get_value('heart_rate') for mesg in mesgs],
            [100, 101, 102, 103])

        self.assertFalse(mesgs[0].get_field('timestamp').is_expanded)
        for mesg in mesgs[1:]:
            self.assertTrue(mesg.get_field('timestamp').is_expanded)

        # reset at the end of each FIT file
        self.assertEqual(decoder.last_timestamp, 0)

    def test_compressed_timestamp_with_timestamp_field(self):
        # the field read from the record wins, but the reference is updated
        records = (
            _definition(0, 20, [(253, 4, 0x86)]) +
            _compressed(0, 3, '<I', 2000) +
            _definition(1, 20, [(3, 1, 0x02)]) +
            _compressed(1, 20, '<B', 60))

        mesgs = _data_mesgs(_decode(_fit_file(records)))
        self.assertEqual(mesgs[0].get_value('timestamp'), 2000)
        self.assertFalse(mesgs[0].get_field('timestamp').is_expanded)
        self.assertEqual(mesgs[1].get_value('timestamp'), 2004)

    def test_chained_files(self):
        first = _fit_file(_file_id_records())
        second = _fit_file(_file_id_records('>', local_mesg_num=3))

        frames = _decode(first + second)
        headers = [f for f in frames if isinstance(f, fitcodec.FitHeader)]
        self.assertEqual(len(headers), 2)
        self.assertEqual(len(_data_mesgs(frames)), 2)
        self.assertEqual(_data_mesgs(frames)[0], _data_mesgs(frames)[1])

        # definitions of the first file are forgotten
        bad_second = _fit_file(_data(0, '<BHHII', *_FILE_ID_VALUES))
        decoder = fitcodec.FitDecoder()
        frames = decoder.feed(first + bad_second)

        self.assertEqual(len(_data_mesgs(frames)), 1)
        self.assertIsInstance(frames[-1], fitcodec.FitHeader)
        self.assertIs(decoder.state, fitcodec.DecoderState.ERROR)

        with self.assertRaises(fitcodec.FitUndefinedLocalMesgError) as cm:
            decoder.finish()
        self.assertEqual(cm.exception.local_mesg_num, 0)
        self.assertEqual(cm.exception.offset, len(first) + 14)

        with self.assertRaises(fitcodec.FitError):
            decoder.finish()

    def test_crc_corruption(self):
        records = _file_id_records() + b''.join(
            _data(0, '<BHHII', 4, 1, 0, 1000000000 + idx, idx)
            for idx in range(5))
        data = bytearray(_fit_file(records))

        # corrupt the serial number of the last message
        data[-6] ^= 0x01

        decoder = fitcodec.FitDecoder()
        frames = decoder.feed(bytes(data))

        # records before the CRC are delivered anyway
        mesgs = _data_mesgs(frames)
        self.assertEqual(len(mesgs), 6)
        self.assertEqual(mesgs[-1].get_value('serial_number'), 4 ^ 0x01)

        with self.assertRaises(fitcodec.FitCRCError) as cm:
            decoder.finish()
        self.assertEqual(cm.exception.offset, len(data) - 2)

    def test_single_byte_corruption(self):
        data = _fit_file(
            _file_id_records() +
            _definition(1, 20, [(253, 4, 0x86), (3, 1, 0x02)]) +
            _data(1, '<IB', 1000, 120))

        for idx in range(len(data)):
            corrupted = bytearray(data)
            corrupted[idx] ^= 0x01

            with self.assertRaises(fitcodec.FitError, msg=f'byte {idx}'):
                decoder = fitcodec.FitDecoder()
                decoder.feed(bytes(corrupted))
                decoder.finish()

    def test_crc_check_options(self):
        data = bytearray(_fit_file(_file_id_records()))
        data[-1] ^= 0xff

        frames = _decode(bytes(data), check_crc=fitcodec.CrcCheck.READONLY)
        self.assertFalse(frames[-1].matched)

        frames = _decode(bytes(data), check_crc=fitcodec.CrcCheck.DISABLED)
        self.assertIsNone(frames[-1].matched)

        with self.assertRaises(ValueError):
            fitcodec.FitDecoder(check_crc='yes')

    def test_header_errors(self):
        # bad tag
        data = bytearray(_fit_file())
        data[8:12] = b'.FOO'
        with self.assertRaises(fitcodec.FitHeaderError):
            _decode(bytes(data))

        # bad size
        data = _fit_file(header_size=13)
        with self.assertRaises(fitcodec.FitHeaderError):
            _decode(data)

        # protocol version
        with self.assertRaises(fitcodec.FitProtocolVersionError) as cm:
            _decode(_fit_file(proto_ver=0x30))
        self.assertEqual(cm.exception.proto_ver, (3, 0))

        # header CRC
        data = bytearray(_fit_file())
        data[12] ^= 0xff
        with self.assertRaises(fitcodec.FitCRCError):
            _decode(bytes(data))

        frames = _decode(bytes(data), check_crc=fitcodec.CrcCheck.READONLY)
        self.assertFalse(frames[0].crc_matched)

    def test_null_header_crc(self):
        frames = _decode(_fit_file(_file_id_records(), header_crc=False))
        self.assertIsNone(frames[0].crc)
        self.assertIsNone(frames[0].crc_matched)
        self.assertEqual(len(_data_mesgs(frames)), 1)

    def test_undefined_local_mesg(self):
        with self.assertRaises(fitcodec.FitUndefinedLocalMesgError) as cm:
            _decode(_fit_file(_data(5, '<B', 1)))
        self.assertEqual(cm.exception.local_mesg_num, 5)
        self.assertEqual(cm.exception.offset, 14)

    def test_field_size_mismatch(self):
        with self.assertRaises(fitcodec.FitFieldSizeError) as cm:
            _decode(_fit_file(_definition(0, 20, [(6, 3, 0x84)])))
        self.assertEqual(cm.exception.def_num, 6)
        self.assertEqual(cm.exception.size, 3)

    def test_record_crossing_data_end(self):
        records = _file_id_records()
        header = struct.pack(
            '<2BHI4s', 12, 0x20, 2194, len(records) - 1, b'.FIT')
        with self.assertRaises(fitcodec.FitParseError):
            _decode(header + records + b'\x00\x00')

    def test_unexpected_eof(self):
        data = _fit_file(_file_id_records())

        for size in (5, 13, 20, len(data) - 1):
            decoder = fitcodec.FitDecoder()
            decoder.feed(data[:size])
            with self.assertRaises(fitcodec.FitEOFError):
                decoder.finish()

        decoder = fitcodec.FitDecoder()
        decoder.feed(data[:len(data) - 1])
        with self.assertRaises(fitcodec.FitEOFError) as cm:
            decoder.finish()
        self.assertEqual(cm.exception.expected, 2)
        self.assertEqual(cm.exception.got, 1)
        self.assertEqual(cm.exception.offset, len(data) - 2)

    def test_trailing_garbage(self):
        decoder = fitcodec.FitDecoder()
        decoder.feed(_fit_file(_file_id_records()) + b'\x00' * 5)

        with self.assertLogs('fitcodec.decoder', level='WARNING'):
            decoder.finish()
        self.assertIs(decoder.state, fitcodec.DecoderState.DONE)

    def test_local_mesg_redefinition(self):
        records = (
            _file_id_records() +
            _definition(0, 20, [(3, 1, 0x02)]) +
            _data(0, '<B', 150) +
            _definition(0, 20, [(3, 1, 0x02), (4, 1, 0x02)]) +
            _data(0, '<BB', 151, 90))

        mesgs = _data_mesgs(_decode(_fit_file(records)))
        self.assertEqual([mesg.name for mesg in mesgs],
                         ['file_id', 'record', 'record'])
        self.assertEqual(mesgs[1].get_value('heart_rate'), 150)
        self.assertFalse(mesgs[1].has_field('cadence'))
        self.assertEqual(mesgs[2].get_value('heart_rate'), 151)
        self.assertEqual(mesgs[2].get_value('cadence'), 90)

    def test_unknown_mesg_and_fields(self):
        records = (
            _definition(0, 0xff00, [(1, 2, 0x84)]) +
            _data(0, '<H', 1234) +
            _definition(1, 20, [(3, 1, 0x02), (200, 2, 0x8B)]) +
            _data(1, '<BH', 90, 4321))

        mesgs = _data_mesgs(_decode(_fit_file(records)))
        self.assertEqual(mesgs[0].name, 'unknown_65280')
        self.assertEqual(mesgs[0].get_value(1), 1234)
        self.assertEqual(mesgs[1].get_value(200), 4321)
        self.assertEqual(mesgs[1].get_field(200).name, 'unknown_200')

    def test_unknown_base_type(self):
        records = (
            _definition(0, 20, [(3, 2, 0x1f)]) +
            _data(0, '<BB', 1, 2))

        with self.assertLogs('fitcodec.decoder', level='WARNING'):
            mesgs = _data_mesgs(_decode(_fit_file(records)))

        mesg_field = mesgs[0].get_field('heart_rate')
        self.assertEqual(mesg_field.base_type.name, 'byte')
        self.assertEqual(mesg_field.values, [1, 2])

    def test_invalid_values(self):
        records = (
            _definition(0, 20, [
                (3, 1, 0x02), (13, 1, 0x01), (5, 4, 0x86), (32, 2, 0x83),
                (91, 4, 0x86)]) +
            _data(0, '<BbIhI', 0xff, 0x7f, 0xffffffff, 0x7fff, 0xffffffff))

        mesg = _data_mesgs(_decode(_fit_file(records)))[0]
        for field in ('heart_rate', 'temperature', 'distance',
                      'vertical_speed', 'absolute_pressure'):
            self.assertTrue(mesg.has_field(field))
            self.assertIsNone(mesg.get_value(field))

    def test_developer_fields(self):
        records = (
            # developer_data_id: developer_data_index
            _definition(0, 207, [(3, 1, 0x02)]) +
            _data(0, '<B', 0) +
            # field_description: developer_data_index,
            # field_definition_number, fit_base_type_id, field_name, scale
            _definition(1, 206, [
                (0, 1, 0x02), (1, 1, 0x02), (2, 1, 0x02), (3, 8, 0x07),
                (6, 1, 0x02)]) +
            _data(1, '<BBB8sB', 0, 1, 0x84, b'power\x00\x00\x00', 10) +
            # record: heart_rate + developer field 1 and undescribed 2
            _definition(
                2, 20, [(3, 1, 0x02)],
                dev_field_defs=[(1, 2, 0), (2, 3, 0)]) +
            _data(2, '<BH3B', 140, 2505, 1, 2, 3))

        decoder = fitcodec.FitDecoder()
        with self.assertLogs('fitcodec.decoder', level='WARNING'):
            frames = decoder.feed(_fit_file(records))

        dev_types = decoder.local_dev_types
        self.assertEqual(dev_types, {})  # reset at the end of the file

        record = _data_mesgs(frames)[-1]
        self.assertEqual(record.get_value('heart_rate'), 140)
        self.assertAlmostEqual(record.get_dev_value(0, 1), 250.5)
        self.assertEqual(record.get_dev_value(0, 1, raw_value=True), 2505)
        self.assertEqual(record.dev_fields[(0, 1)].name, 'power')

        undescribed = record.dev_fields[(0, 2)]
        self.assertIsNone(undescribed.field)
        self.assertEqual(undescribed.base_type.name, 'byte')
        self.assertEqual(undescribed.values, [1, 2, 3])

    def test_field_description_without_developer_data_id(self):
        records = (
            _definition(1, 206, [(0, 1, 0x02), (1, 1, 0x02), (2, 1, 0x02)]) +
            _data(1, '<BBB', 0, 1, 0x84))

        with self.assertRaises(fitcodec.FitParseError):
            _decode(_fit_file(records))

    def test_accumulators_reset_per_file(self):
        def _file():
            return _fit_file(
                _definition(0, 20, [(18, 1, 0x02)]) +
                _data(0, '<B', 250) +
                _data(0, '<B', 5))

        mesgs = _data_mesgs(_decode(_file() + _file()))
        self.assertEqual(
            [mesg.get_value('total_cycles') for mesg in mesgs],
            [250, 261, 250, 261])


if __name__ == '__main__':
    unittest.main()
