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

"""Helper functions."""

from __future__ import absolute_import, annotations

import array
import platform
from typing import Optional, TextIO, Union

from typing_extensions import Protocol

from . import __title__, __version__

_DEFAULT_USER_AGENT = (
    f"ctrl-z ({platform.system()}; {platform.machine()}) "
    f"{__title__}/{__version__}"
)

CTRL_Z = b"\x1a"  # substitute character, legacy end-of-file marker

BytesLike = Union[bytes, bytearray, memoryview, array.array]


class ReadableSource(Protocol):
    """typing stub for a source filling caller owned buffers."""

    def readinto(self, buffer) -> Optional[int]:
        """Read bytes into buffer and return number of bytes read."""


class PeekableSource(ReadableSource, Protocol):
    """typing stub for a buffered source, like io.BufferedReader."""

    def peek(self, size: int = 0) -> bytes:
        """Return buffered bytes without advancing position."""

    def read(self, size: int = -1) -> bytes:
        """Read and return up to size bytes."""


def find_ctrl_z(data: BytesLike, length: Optional[int] = None) -> int:
    """
    Return index of first CTRL-Z byte within first length bytes of data,
    or -1 if there is none.
    """
    if not isinstance(data, (bytes, bytearray)):
        data = memoryview(data).cast("B")
        if length is None:
            length = len(data)
        return data[:length].tobytes().find(CTRL_Z)
    if length is None:
        length = len(data)
    return data.find(CTRL_Z, 0, length)


def trace(stream: Optional[TextIO], message: str):
    """Write message to trace stream if tracing is enabled."""
    if stream:
        stream.write(message)
        stream.write("\n")
