# fitcodec
#
# Copyright (c) 2018 Jean-Charles Lefebvre
# All rights reserved.
#
# This code is licensed under the MIT License.
# See the LICENSE.txt file at the root of this project.

import io
import os

from .decoder import CrcCheck, FitDecoder
from . import utils

__all__ = ['FitReader']


class FitReader:
    """
    Parse the content of a FIT stream or storage.

    This is the pull counterpart of `FitDecoder`: *fileish* is read by blocks
    of *read_size* bytes which are fed to a `FitDecoder`, and the decoded
    frames are yielded during iteration.

    Transparently supports "chained FIT Files" as per SDK's definition. A
    `FitHeader` object is yielded during iteration to mark the beginning of each
    new "FIT File".

    Usage::

        import fitcodec

        with fitcodec.FitReader('file.fit') as fit:
            for frame in fit:
                # The yielded frame object is of one of the following types:
                # * fitcodec.FitHeader
                # * fitcodec.FitDefinitionMessage
                # * fitcodec.FitDataMessage
                # * fitcodec.FitCRC

                if isinstance(frame, fitcodec.FitDataMessage):
                    # frame.mesg is the decoded fitcodec.Mesg object
                    print(frame.name, frame.get_value('timestamp'))

    *fileish* can be a path (`str` or path-like object), a readable file
    object, non-blocking streams included, or a bytes-like object.

    Raw chunks:

    * "raw chunk" or sometimes "frame", is the name given to the `bytes` block
      that represents one of the four FIT entities: `FitHeader`,
      `FitDefinitionMessage`, `FitDataMessage` and `FitCRC`.
    * While iterating a file with `FitReader`, you can for instance cut, stitch
      and/or reconstruct the file being read by using the `FitChunk` object
      attached to any of the four aforementioned entities, as long as the
      *keep_raw_chunks* option is true.
    """

    def __init__(self, fileish, *, check_crc=CrcCheck.ENABLED,
                 keep_raw_chunks=False, read_size=8192):
        if read_size <= 0:
            raise ValueError(f'invalid read_size: {read_size}')

        # immutable options (private)
        self._read_size = read_size

        # state (private)
        self._fd = None  # the file object to read from
        self._decoder = FitDecoder(
            check_crc=check_crc, keep_raw_chunks=keep_raw_chunks)

        if hasattr(fileish, '__fspath__'):
            fileish = os.fspath(fileish)

        if hasattr(fileish, 'read'):
            self._fd = fileish
        elif isinstance(fileish, str):
            self._fd = open(fileish, mode='rb')
        else:
            self._fd = io.BytesIO(fileish)

    def __del__(self):
        self.close()

    def __enter__(self):
        return self

    def __exit__(self, *_):
        return self.close()

    def __iter__(self):
        yield from self._read_next()

    @property
    def decoder(self):
        """The underlying `FitDecoder` object."""
        return self._decoder

    @property
    def check_crc(self):
        return self._decoder.check_crc

    @property
    def last_header(self):
        """The last read `FitHeader` object. May be `None`."""
        return self._decoder.last_header

    @property
    def last_timestamp(self):
        """The last ``timestamp`` value (`int`) of the current FIT file."""
        return self._decoder.last_timestamp

    @property
    def local_mesg_defs(self):
        """
        Read-only access to the `dict` of local message types of the current
        "FIT file".

        It is cleared each time a FIT file ends, or a FIT file header is
        reached.
        """
        return self._decoder.local_mesg_defs

    @property
    def local_dev_types(self):
        """
        Read-only access to the `dict` of developer types of the current
        "FIT file".
        """
        return self._decoder.local_dev_types

    def close(self):
        """Close the file handle (constructor's *fileish*)."""
        fd = getattr(self, '_fd', None)
        if fd and hasattr(fd, 'close'):
            fd.close()
        self._fd = None

    # ONLY PRIVATE METHODS BELOW ***********************************************

    def _read_next(self):
        while self._fd:
            data = utils.blocking_read(self._fd, self._read_size)
            if not data:
                break

            yield from self._decoder.feed(data)

        if self._fd:
            self._decoder.finish()
