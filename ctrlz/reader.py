# -*- coding: utf-8 -*-
# ctrl-z Python Library for CTRL-Z Terminated Streams,
# (C) 2026 The ctrl-z Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
ctrlz.reader
~~~~~~~~~~~~~~~

This module implements readers stopping at the CTRL-Z byte.

A ReadToCtrlZ reads from *inner* until a 0x1A byte is read. The byte
and everything after it are never returned; once it is seen the reader
behaves as an exhausted stream forever, without asking *inner* again.

:copyright: (c) 2026 by The ctrl-z Authors.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

import io
from typing import Optional, TextIO, Union

from .error import InvalidInnerSourceError
from .helpers import PeekableSource, ReadableSource, find_ctrl_z, trace


class ReadToCtrlZ(io.RawIOBase):
    """
    ReadToCtrlZ returns a reader that reads from *inner* but stops with
    EOF at the first CTRL-Z byte.

    ReadToCtrlZ is a wrapper over RawIOBase; read(), readall() and
    iteration all go through readinto(), so it can also be wrapped by
    io.BufferedReader or io.TextIOWrapper.

    :param inner: Source having readinto(), e.g. class:`io.FileIO`.
       The reader owns it and closes it on close().

    Example::

        >>> reader = ReadToCtrlZ(io.BytesIO(b"foo\\x1abar"))
        >>> reader.read()
        b'foo'
    """

    def __init__(self, inner: ReadableSource):
        super().__init__()
        self._inner = inner
        self._terminated = False
        self._offset = 0
        self._trace_stream: Optional[TextIO] = None

    @property
    def inner(self) -> ReadableSource:
        """Get wrapped source."""
        return self._inner

    @property
    def terminated(self) -> bool:
        """Check whether CTRL-Z byte has been seen."""
        return self._terminated

    def trace_on(self, stream: TextIO):
        """
        Enable trace.

        Args:
            stream (TextIO):
                Stream for writing reader events.

        Example:
            >>> reader.trace_on(sys.stderr)
        """
        if not stream:
            raise ValueError('Input stream for trace output is invalid.')
        self._trace_stream = stream

    def trace_off(self):
        """Disable trace."""
        self._trace_stream = None

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> Optional[int]:
        """
        Read up to len(buffer) bytes into *buffer* and return the number
        of bytes before CTRL-Z byte; 0 once it has been reached.

        :param buffer: Writable bytes-like object to read into.
        :return: Length of the read bytes, or None if *inner* is
           non-blocking and has no data.
        """
        self._check_open()
        if self._terminated:
            return 0

        count = self._inner.readinto(buffer)
        if count is None:
            return None
        size = memoryview(buffer).nbytes
        if count < 0 or count > size:
            raise InvalidInnerSourceError(size, count)

        index = find_ctrl_z(buffer, count)
        if index >= 0:
            self._terminate(index)
            return index
        self._offset += count
        return count

    def close(self):
        """Close this reader and the wrapped source."""
        if self.closed:
            return
        try:
            close = getattr(self._inner, "close", None)
            if close:
                close()
        finally:
            super().close()

    def _check_open(self):
        if self.closed:
            raise ValueError("I/O operation on closed file.")

    def _terminate(self, index: int):
        self._terminated = True
        self._offset += index
        trace(self._trace_stream, f"CTRL-Z found at offset {self._offset}")


class BufferedReadToCtrlZ(ReadToCtrlZ):
    """
    BufferedReadToCtrlZ is a ReadToCtrlZ over a buffered source which also
    allows to look at buffered bytes without copying them.

    Look at data with peek(), then advance with consume()::

        >>> reader = BufferedReadToCtrlZ(io.BufferedReader(io.BytesIO(
        ...     b"foo\\x1abar")))
        >>> reader.peek()
        b'foo'
        >>> reader.consume(3)
        >>> reader.peek()
        b''

    :param inner: Source having peek() and read(), e.g.
       class:`io.BufferedReader`.
    """

    _inner: PeekableSource

    def peek(self, size: int = 0) -> bytes:
        """
        Return bytes buffered by *inner* without advancing position, cut
        before CTRL-Z byte. Empty bytes means EOF.
        """
        self._check_open()
        if self._terminated:
            return b""

        data = self._inner.peek(size)
        index = find_ctrl_z(data)
        if index < 0:
            return data
        # CTRL-Z at the front makes the stream empty from here on, even
        # if caller never consumes.
        if index == 0:
            self._terminate(index)
        return data[:index]

    def consume(self, amount: int):
        """Advance *inner* by *amount* bytes."""
        self._check_open()
        self._inner.read(amount)
        if not self._terminated:
            self._offset += amount


def wrap(
        inner: Union[ReadableSource, PeekableSource],
) -> Union[ReadToCtrlZ, BufferedReadToCtrlZ]:
    """
    Wrap *inner* with BufferedReadToCtrlZ if it supports peek(), else with
    ReadToCtrlZ.
    """
    if callable(getattr(inner, "peek", None)):
        return BufferedReadToCtrlZ(inner)  # type: ignore[arg-type]
    return ReadToCtrlZ(inner)
