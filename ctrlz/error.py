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
ctrlz.error
~~~~~~~~~~~~~~~~~~~

This module provides custom exception classes for ctrl-z library.

Errors raised by a wrapped source are never translated; only contract
violations of the source and failed HTTP responses get their own types.

:copyright: (c) 2026 by The ctrl-z Authors.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

from typing import Optional


class CtrlZException(Exception):
    """Base ctrl-z exception."""


class InvalidInnerSourceError(CtrlZException, OSError):
    """
    Raised to indicate that wrapped source reported more bytes read than
    the buffer given to it can hold.
    """

    MESSAGE = "buffer smaller than amount of bytes read"

    def __init__(self, size: int = -1, count: int = -1):
        self._size = size
        self._count = count
        super().__init__(self.MESSAGE)

    def __reduce__(self):
        return type(self), (self._size, self._count)

    @property
    def size(self) -> int:
        """Get length of the buffer passed to the source."""
        return self._size

    @property
    def count(self) -> int:
        """Get byte count reported by the source."""
        return self._count


class InvalidResponseError(CtrlZException):
    """Raised to indicate that error response is received from server."""

    def __init__(
            self, code: int, content_type: Optional[str], body: Optional[str],
    ):
        self._code = code
        self._content_type = content_type
        self._body = body
        super().__init__(
            f"unexpected response from server; Response code: {code}, "
            f"Content-Type: {content_type}, Body: {body}"
        )

    def __reduce__(self):
        return type(self), (self._code, self._content_type, self._body)

    @property
    def code(self) -> int:
        """Get HTTP status code."""
        return self._code

    @property
    def content_type(self) -> Optional[str]:
        """Get Content-Type of the response."""
        return self._content_type

    @property
    def body(self) -> Optional[str]:
        """Get body of the response."""
        return self._body
