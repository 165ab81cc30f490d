#!/usr/bin/env python3
# Copyright (c) Jean-Charles Lefebvre
# SPDX-License-Identifier: MIT

import io
import os.path
import pathlib
import struct
import tempfile
import unittest

import fitcodec


def _generate_messages(mesg_num, local_mesg_num, field_defs,
                       endian='<', data=None):
    """
    *field_defs* is a list of ``(def_num, base_type_name)`` or
    ``(def_num, base_type_name, count)`` tuples. Values of fields with a
    *count* are lists.
    """
    mesgs = []
    field_list = []

    # definition message, local message num
    s = struct.pack('<B', 0x40 | local_mesg_num)

    # reserved byte and endian
    s += struct.pack('<xB', int(endian == '>'))

    # global message num, num fields
    s += struct.pack('%sHB' % endian, mesg_num, len(field_defs))

    for field_def in field_defs:
        def_num, base_type = field_def[:2]
        count = field_def[2] if len(field_def) > 2 else None
        base_type = fitcodec.types.BASE_TYPES_BY_NAME[base_type]
        field_list.append((base_type, count))
        s += struct.pack(
            '<3B', def_num, base_type.size * (count or 1),
            base_type.identifier)

    mesgs.append(s)

    if data:
        for mesg_data in data:
            s = struct.pack('B', local_mesg_num)
            for value, (base_type, count) in zip(mesg_data, field_list):
                if count is None:
                    s += struct.pack('%s%s' % (endian, base_type.fmt), value)
                else:
                    s += struct.pack(
                        '%s%d%s' % (endian, count, base_type.fmt), *value)
            mesgs.append(s)

    return b''.join(mesgs)


def _generate_fitfile(data=None, endian='<'):
    fit_data = (_generate_messages(
        # local mesg 0, global mesg 0 (file_id)
        mesg_num=0, local_mesg_num=0, endian=endian, field_defs=[
            # serial number, time_created, manufacturer
            (3, 'uint32z'), (4, 'uint32'), (1, 'uint16'),
            # product/garmin_product, number, type
            (2, 'uint16'), (5, 'uint16'), (0, 'enum')],
        # random serial number, random time, garmin, edge500, null, activity
        data=[[558069241, 723842606, 1, 1036, (2 ** 16) - 1, 4]]))

    if data:
        fit_data += data

    # Prototcol version 1.0, profile version 1.52
    header = struct.pack('<2BHI4s', 14, 16, 152, len(fit_data), b'.FIT')

    file_data = \
        header + \
        struct.pack('<H', fitcodec.utils.compute_crc(header)) + \
        fit_data

    return \
        file_data + \
        struct.pack('<H', fitcodec.utils.compute_crc(file_data))


def _generate_dev_data():
    return (
        _generate_messages(
            # developer_data_id: developer_data_index, application_id
            mesg_num=207, local_mesg_num=1, field_defs=[
                (3, 'uint8'), (1, 'byte', 4)],
            data=[[0, [1, 2, 3, 4]]]) +
        _generate_messages(
            # field_description: developer_data_index,
            # field_definition_number, fit_base_type_id, field_name
            mesg_num=206, local_mesg_num=2, field_defs=[
                (0, 'uint8'), (1, 'uint8'), (2, 'uint8')],
            data=[[0, 0, 0x84]]))


def _data_messages(frames, name=None):
    return [
        frame for frame in frames
        if isinstance(frame, fitcodec.FitDataMessage) and
        (name is None or frame.name == name)]


class _NonBlockingStream:
    # returns None every other call, like a non-blocking raw stream with no
    # data available yet
    def __init__(self, data):
        self._fp = io.BytesIO(data)
        self._toggle = False
        self.closed = False

    def read(self, size=-1):
        self._toggle = not self._toggle
        if self._toggle:
            return None
        return self._fp.read(size)

    def close(self):
        self.closed = True


class FitReaderTestCase(unittest.TestCase):

    def test_raw_chunk_parsing(self):
        """
        Test that FitReader parses correctly "valid" streams by building an
        in-memory clone of each source, chunk by chunk, and then compare them
        """
        sources = (
            _generate_fitfile(),
            _generate_fitfile(endian='>'),
            _generate_fitfile(_generate_dev_data()),
            _generate_fitfile() + _generate_fitfile())

        for src in sources:
            raw_content = b''

            with fitcodec.FitReader(
                    src,
                    check_crc=fitcodec.CrcCheck.ENABLED,
                    keep_raw_chunks=True) as fit:
                for index, record in enumerate(fit):
                    self.assertEqual(record.chunk.index, index)
                    self.assertEqual(record.chunk.offset, len(raw_content))
                    raw_content += record.chunk.bytes

            self.assertEqual(raw_content, src)

    def test_no_raw_chunks(self):
        for frame in fitcodec.FitReader(_generate_fitfile()):
            self.assertIsNone(frame.chunk)

    def test_invalid_crc(self):
        data = bytearray(_generate_fitfile())
        data[-1] ^= 0xff

        try:
            tuple(fitcodec.FitReader(
                bytes(data),
                check_crc=fitcodec.CrcCheck.ENABLED,
                keep_raw_chunks=True))
            self.fail('did not detect an invalid CRC')
        except fitcodec.FitCRCError:
            pass

        # CRC is read but not matched
        frames = tuple(fitcodec.FitReader(
            bytes(data), check_crc=fitcodec.CrcCheck.READONLY))
        self.assertIsInstance(frames[-1], fitcodec.FitCRC)
        self.assertFalse(frames[-1].matched)

        frames = tuple(fitcodec.FitReader(bytes(data), check_crc=False))
        self.assertIsInstance(frames[-1], fitcodec.FitCRC)
        self.assertIsNone(frames[-1].matched)

    def test_unexpected_eof(self):
        data = _generate_fitfile()
        try:
            tuple(fitcodec.FitReader(
                data[:-5],
                check_crc=fitcodec.CrcCheck.ENABLED,
                keep_raw_chunks=True))
            self.fail('did not detect an unexpected EOF')
        except fitcodec.FitEOFError:
            pass

    def test_invalid_chained_files(self):
        """Detect errors when files are chained - concatenated - together"""
        bad_crc = bytearray(_generate_fitfile())
        bad_crc[-2] ^= 0x01

        try:
            tuple(fitcodec.FitReader(_generate_fitfile() + bytes(bad_crc)))
            self.fail("Didn't detect a CRC error in the chained file")
        except fitcodec.FitCRCError:
            pass

        try:
            tuple(fitcodec.FitReader(
                _generate_fitfile() + b'\x0e\x10\x98\x00' + b'\x00' * 10))
            self.fail("Didn't detect a header error in the chained file")
        except fitcodec.FitHeaderError:
            pass

        try:
            tuple(fitcodec.FitReader(
                _generate_fitfile() + _generate_fitfile()[:14]))
            self.fail("Didn't detect an EOF error in the chaned file")
        except fitcodec.FitEOFError:
            pass

    def test_chained_files(self):
        fit = tuple(fitcodec.FitReader(
            _generate_fitfile() + _generate_fitfile(endian='>')))

        headers = [f for f in fit if isinstance(f, fitcodec.FitHeader)]
        crcs = [f for f in fit if isinstance(f, fitcodec.FitCRC)]
        self.assertEqual(len(headers), 2)
        self.assertEqual(len(crcs), 2)

        file_ids = _data_messages(fit, 'file_id')
        self.assertEqual(len(file_ids), 2)
        self.assertEqual(file_ids[0].mesg, file_ids[1].mesg)
        self.assertEqual(file_ids[0].def_mesg.endian, '<')
        self.assertEqual(file_ids[1].def_mesg.endian, '>')

    def test_basic_file_with_one_record(self, endian='<'):
        fit = tuple(fitcodec.FitReader(
            _generate_fitfile(endian=endian),
            check_crc=fitcodec.CrcCheck.ENABLED,
            keep_raw_chunks=False))

        file_header = fit[0]
        file_id = fit[2]  # 1 is the definition message

        self.assertEqual(file_header.profile_ver, (1, 52))
        self.assertEqual(file_header.proto_ver, (1, 0))
        self.assertTrue(file_header.crc_matched)
        self.assertEqual(file_id.name, 'file_id')
        self.assertEqual(file_id.global_mesg_num, 0)

        for field in ('type', 0):
            self.assertEqual(file_id.get_value(field), 4)
        self.assertEqual(
            fitcodec.registry.get_type_value_name('file', 4), 'activity')

        for field in ('manufacturer', 1):
            self.assertEqual(file_id.get_value(field), 1)

        for field in ('product', 'garmin_product', 2):
            self.assertEqual(file_id.get_value(field), 1036)
        self.assertEqual(file_id.mesg.get_active_subfield('product'), 0)

        for field in ('serial_number', 3):
            self.assertEqual(file_id.get_value(field), 558069241)

        for field in ('time_created', 4):
            self.assertEqual(file_id.get_value(field), 723842606)

        for field in ('number', 5):
            self.assertIsNone(file_id.get_value(field))
            self.assertTrue(file_id.has_field(field))

        self.assertIsInstance(fit[-1], fitcodec.FitCRC)
        self.assertTrue(fit[-1].matched)

    def test_basic_file_big_endian(self):
        self.test_basic_file_with_one_record('>')

    def test_component_field_accumulaters(self):
        def _csd(speed, distance):
            value = speed | (distance << 12)
            return [value & 0xff, (value >> 8) & 0xff, (value >> 16) & 0xff]

        fit_data = _generate_fitfile(
            _generate_messages(
                # record (20), local message 1
                mesg_num=20, local_mesg_num=1, field_defs=[
                    # timestamp, compressed_speed_distance
                    (253, 'uint32'), (8, 'byte', 3)],
                data=[
                    [1000, _csd(250, 4000)],
                    [1001, _csd(300, 4088)],
                    [1002, _csd(310, 8)]]))  # distance rolled over

        fit = tuple(fitcodec.FitReader(fit_data))
        records = _data_messages(fit, 'record')
        self.assertEqual(len(records), 3)

        self.assertAlmostEqual(records[0].get_value('speed'), 2.5)
        self.assertAlmostEqual(records[0].get_value('enhanced_speed'), 2.5)
        self.assertAlmostEqual(records[0].get_value('distance'), 250.0)
        self.assertAlmostEqual(records[1].get_value('speed'), 3.0)
        self.assertAlmostEqual(records[1].get_value('distance'), 255.5)
        self.assertAlmostEqual(records[2].get_value('speed'), 3.1)
        self.assertAlmostEqual(records[2].get_value('distance'), 256.5)

        for record in records:
            self.assertTrue(record.get_field('speed').is_expanded)
            self.assertTrue(record.get_field('distance').is_expanded)
            self.assertFalse(
                record.get_field('compressed_speed_distance').is_expanded)

    def test_component_field_resolves_subfield(self):
        fit_data = _generate_fitfile(
            _generate_messages(
                # event (21), local message 1
                mesg_num=21, local_mesg_num=1, field_defs=[
                    # event, event_type, data16
                    (0, 'enum'), (1, 'enum'), (2, 'uint16')],
                data=[[0, 0, 2]]))

        # parse the whole content
        fit = tuple(fitcodec.FitReader(
            fit_data,
            check_crc=fitcodec.CrcCheck.ENABLED,
            keep_raw_chunks=False))

        event = fit[4]
        self.assertEqual(event.name, 'event')

        for field in ('event', 0):
            self.assertEqual(event.get_value(field), 0)

        for field in ('event_type', 1):
            self.assertEqual(event.get_value(field), 0)

        # should be able to reference by original field name, component field
        # name, subfield name, and then the field def_num of both the original
        # field and component field
        for field in ('timer_trigger', 'data', 3):
            self.assertEqual(event.get_value(field), 2)
        self.assertEqual(event.mesg.get_active_subfield('data'), 0)
        self.assertEqual(
            fitcodec.registry.get_type_value_name('timer_trigger', 2),
            'fitness_equipment')

        # component field should be left as is
        for field in ('data16', 2):
            self.assertEqual(event.get_value(field), 2)

    def test_subfield_components(self):
        # score = 123, opponent_score = 456, total = 29884539
        sport_point_value = 123 + (456 << 16)

        # rear_gear_num = 4, rear_gear, = 20, front_gear_num = 2, front_gear = 34
        gear_chance_value = 4 + (20 << 8) + (2 << 16) + (34 << 24)

        fit_data = _generate_fitfile(
            _generate_messages(
                # event (21), local message 1
                mesg_num=21, local_mesg_num=1, field_defs=[
                    # event, data
                    (0, 'enum'), (3, 'uint32')],
                data=[
                    # sport point
                    [33, sport_point_value],
                    # front gear change
                    [42, gear_chance_value]]))

        # parse the whole content
        fit = tuple(fitcodec.FitReader(
            fit_data,
            check_crc=fitcodec.CrcCheck.ENABLED,
            keep_raw_chunks=False))

        sport_point = fit[4]
        self.assertEqual(sport_point.name, 'event')

        for field in ('event', 0):
            self.assertEqual(sport_point.get_value(field), 33)

        for field in ('sport_point', 'data', 3):
            # verify raw numeric value
            self.assertEqual(sport_point.get_value(field), sport_point_value)

        for field in ('score', 7):
            self.assertEqual(sport_point.get_value(field), 123)

        for field in ('opponent_score', 8):
            self.assertEqual(sport_point.get_value(field), 456)

        gear_change = fit[5]
        self.assertEqual(gear_change.name, 'event')

        for field in ('event', 0):
            self.assertEqual(gear_change.get_value(field), 42)

        for field in ('gear_change_data', 'data', 3):
            # verify raw numeric value
            self.assertEqual(gear_change.get_value(field), gear_chance_value)

        for field in ('front_gear_num', 9):
            self.assertEqual(gear_change.get_value(field), 2)

        for field in ('front_gear', 10):
            self.assertEqual(gear_change.get_value(field), 34)

        for field in ('rear_gear_num', 11):
            self.assertEqual(gear_change.get_value(field), 4)

        for field in ('rear_gear', 12):
            self.assertEqual(gear_change.get_value(field), 20)

    def test_developer_data(self):
        fit_data = _generate_fitfile(
            _generate_dev_data() +
            # record with a developer field: developer flag, local message 3
            # record (20) without regular fields, developer flag set
            struct.pack('<3BHB', 0x60 | 3, 0, 0, 20, 0) +
            # 1 developer field: field 0 of index 0, 2 bytes
            struct.pack('<4B', 1, 0, 2, 0) +
            struct.pack('<BH', 3, 3456))

        fit = fitcodec.FitReader(fit_data)
        frames = tuple(fit)

        records = _data_messages(frames, 'record')
        self.assertEqual(len(records), 1)
        record = records[0]
        self.assertTrue(record.is_developer_data)

        self.assertEqual(record.mesg.get_dev_value(0, 0), 3456)
        dev_field = record.mesg.dev_fields[(0, 0)]
        self.assertEqual(dev_field.base_type.name, 'uint16')
        self.assertIsInstance(dev_field.field, fitcodec.types.DevField)

        dev_ids = _data_messages(frames, 'developer_data_id')
        self.assertEqual(dev_ids[0].mesg.get_values('application_id'),
                         [1, 2, 3, 4])

    def test_sources(self):
        data = _generate_fitfile()
        expected = tuple(
            type(frame) for frame in fitcodec.FitReader(data))
        self.assertEqual(len(expected), 4)

        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, 'test.fit')
            with open(path, mode='wb') as fp:
                fp.write(data)

            for source in (
                    path,
                    pathlib.Path(path),
                    bytearray(data),
                    memoryview(data),
                    io.BytesIO(data)):
                with fitcodec.FitReader(source) as fit:
                    self.assertEqual(
                        tuple(type(frame) for frame in fit), expected)

    def test_non_blocking_stream(self):
        stream = _NonBlockingStream(_generate_fitfile())
        fit = fitcodec.FitReader(stream, read_size=16)
        self.assertEqual(len(tuple(fit)), 4)

        fit.close()
        self.assertTrue(stream.closed)

    def test_read_size(self):
        data = _generate_fitfile(_generate_dev_data())
        expected = [
            frame.mesg for frame in _data_messages(fitcodec.FitReader(data))]

        for read_size in (1, 2, 7, 64):
            mesgs = [
                frame.mesg for frame in _data_messages(
                    fitcodec.FitReader(data, read_size=read_size))]
            self.assertEqual(mesgs, expected)

    def test_empty_source(self):
        self.assertEqual(tuple(fitcodec.FitReader(b'')), ())

    def test_reader_state(self):
        fit = fitcodec.FitReader(_generate_fitfile(), read_size=1)
        self.assertIsNone(fit.last_header)

        frames = iter(fit)
        header = next(frames)
        self.assertIs(fit.last_header, header)

        def_mesg = next(frames)
        self.assertIs(fit.local_mesg_defs[0], def_mesg)
        self.assertEqual(def_mesg.name, 'file_id')
        self.assertEqual(def_mesg.data_size, 4 + 4 + 2 + 2 + 2 + 1)

        tuple(frames)
        self.assertEqual(fit.local_mesg_defs, {})
        self.assertIs(fit.decoder.state, fitcodec.DecoderState.DONE)


if __name__ == '__main__':
    unittest.main()
