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
Convenience functions opening CTRL-Z terminated files and URLs.

    >>> from ctrlz import open_file
    >>> with open_file("legacy.txt") as reader:
    ...     data = reader.read()
"""

from __future__ import absolute_import, annotations

import io
import os
from datetime import timedelta
from typing import Optional, Union

import certifi
import urllib3
from urllib3 import Retry
from urllib3.util import Timeout

from .error import InvalidResponseError
from .helpers import _DEFAULT_USER_AGENT
from .reader import BufferedReadToCtrlZ


class _ResponseReader(BufferedReadToCtrlZ):
    """BufferedReadToCtrlZ returning HTTP connection to pool on close."""

    def __init__(self, response: urllib3.HTTPResponse):
        super().__init__(io.BufferedReader(response))
        self._response = response

    def close(self):
        if self.closed:
            return
        try:
            super().close()
        finally:
            self._response.release_conn()


def open_file(
        path: Union[str, os.PathLike],
        buffer_size: int = io.DEFAULT_BUFFER_SIZE,
) -> BufferedReadToCtrlZ:
    """
    Open a file for reading up to its CTRL-Z byte.

    Args:
        path (Union[str, os.PathLike]):
            Path of the file.

        buffer_size (int, default=io.DEFAULT_BUFFER_SIZE):
            Size of read buffer.

    Returns:
        BufferedReadToCtrlZ:
            Reader owning the opened file.

    Example:
        >>> with open_file("legacy.txt") as reader:
        ...     print(reader.read())
    """
    if buffer_size <= 0:
        raise ValueError("buffer size must be positive")
    return BufferedReadToCtrlZ(open(path, "rb", buffering=buffer_size))


def _new_http_client(cert_check: bool = True) -> urllib3.PoolManager:
    # Load CA certificates from SSL_CERT_FILE file if set
    timeout = timedelta(minutes=5).seconds
    return urllib3.PoolManager(
        timeout=Timeout(connect=timeout, read=timeout),
        maxsize=10,
        cert_reqs='CERT_REQUIRED' if cert_check else 'CERT_NONE',
        ca_certs=os.environ.get('SSL_CERT_FILE') or certifi.where(),
        retries=Retry(
            total=5,
            backoff_factor=0.2,
            status_forcelist=[500, 502, 503, 504]
        )
    )


def open_url(
        url: str,
        http_client: Optional[urllib3.PoolManager] = None,
        cert_check: bool = True,
) -> BufferedReadToCtrlZ:
    """
    Open a HTTP(S) resource for reading up to its CTRL-Z byte. The body is
    streamed; bytes after CTRL-Z byte are not downloaded unless they were
    already buffered.

    Args:
        url (str):
            URL of the resource.

        http_client (Optional[urllib3.PoolManager], default=None):
            Customized HTTP client.

        cert_check (bool, default=True):
            Flag to enable/disable server certificate validation
            for HTTPS connections.

    Returns:
        BufferedReadToCtrlZ:
            Reader owning the response; close it to release the connection.

    Raises:
        InvalidResponseError: if server does not return 2xx status.

    Example:
        >>> with open_url("https://example.org/legacy.txt") as reader:
        ...     print(reader.read())
    """
    if http_client and not isinstance(http_client, urllib3.PoolManager):
        raise TypeError(
            "HTTP client should be urllib3.PoolManager like object, "
            f"got {type(http_client).__name__}",
        )
    http_client = http_client or _new_http_client(cert_check)

    response = http_client.urlopen(
        "GET",
        url,
        headers={"User-Agent": _DEFAULT_USER_AGENT},
        preload_content=False,
    )
    if response.status not in range(200, 300):
        try:
            data = response.data
            body = data.decode(errors="replace") if data else None
            raise InvalidResponseError(
                response.status,
                response.headers.get("content-type"),
                body,
            )
        finally:
            response.release_conn()

    return _ResponseReader(response)
