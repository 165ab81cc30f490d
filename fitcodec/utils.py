# fitcodec
#
# Copyright (c) 2018 Jean-Charles Lefebvre
# All rights reserved.
#
# This code is licensed under the MIT License.
# See the LICENSE.txt file at the root of this project.

import math
import re
import time

__all__ = []


METHOD_NAME_SCRUBBER = re.compile(r'\W|^(?=\d)')

CRC_START = 0
CRC_TABLE = (
    0x0000, 0xcc01, 0xd801, 0x1400, 0xf001, 0x3c00, 0x2800, 0xe401,
    0xa001, 0x6c00, 0x7800, 0xb401, 0x5000, 0x9c01, 0x8801, 0x4400)


def scrub_method_name(method_name):
    return METHOD_NAME_SCRUBBER.sub('_', method_name)


def camel_case(snake_name):
    """``hrm_profile`` -> ``HrmProfile``"""
    return ''.join(
        part[:1].upper() + part[1:] for part in snake_name.split('_') if part)


def compute_crc(byteslike, *, crc=CRC_START, start=0, end=None):
    """
    CRC-16 of ``byteslike[start:end]`` as used by FIT headers and files,
    continued from *crc*.

    Running it over data followed by its little-endian CRC gives ``0``.
    """
    if not end:
        end = len(byteslike)

    if start >= end:
        return crc

    for byte in memoryview(byteslike)[start:end]:
        tmp = CRC_TABLE[crc & 0xf]
        crc = (crc >> 4) & 0x0fff
        crc = crc ^ tmp ^ CRC_TABLE[byte & 0xf]

        tmp = CRC_TABLE[crc & 0xf]
        crc = (crc >> 4) & 0x0fff
        crc = crc ^ tmp ^ CRC_TABLE[(byte >> 4) & 0xf]

    return crc


def apply_compressed_accumulation(raw_value, accumulation, num_bits):
    """
    Rebuild a full value from its *num_bits* lowest bits (*raw_value*) and the
    last known full value (*accumulation*), assuming the value only ever
    increases and rolled over at most once.

    Used by compressed timestamp headers (5 bits) as well as by accumulated
    component fields.
    """
    max_value = 1 << num_bits
    max_mask = max_value - 1
    base_value = raw_value + (accumulation & ~max_mask)

    if raw_value < (accumulation & max_mask):
        base_value += max_value

    return base_value


def round_half_up(value):
    """Round to the nearest integer, halves being rounded up."""
    return int(math.floor(value + 0.5))


def blocking_read(istream, size=-1, nonblocking_reads_delay=0.06):
    """
    Read from *istream* and do not return until *size* `bytes` have been read
    unless EOF has been reached.

    Return all the data read so far. The length of the returned data may still
    be less than *size* in case EOF has been reached.

    *nonblocking_reads_delay* specifies the number of seconds (float) to wait
    before trying to read from *istream* again in case `BlockingIOError` has
    been raised during previous call.
    """
    if not size:
        return None

    data = b''
    while True:
        try:
            chunk = istream.read(-1 if size < 0 else size - len(data))

            # non-blocking streams return None when no data is available yet
            if chunk is None:
                raise BlockingIOError()

            if not data:
                data = chunk
            else:
                data += chunk

            if not chunk or (size > 0 and len(data) >= size):
                return data
        except BlockingIOError:
            time.sleep(nonblocking_reads_delay)
