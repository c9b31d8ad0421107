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
ctrlz - composable readers stopping at the CTRL-Z (0x1A) byte

    >>> import io
    >>> from ctrlz import ReadToCtrlZ
    >>> reader = ReadToCtrlZ(io.BytesIO(b"foo\\x1abar"))
    >>> reader.read()
    b'foo'

:copyright: (C) 2026 The ctrl-z Authors.
:license: Apache 2.0, see LICENSE for more details.
"""

__title__ = "ctrl-z"
__author__ = "The ctrl-z Authors"
__version__ = "1.0.0"
__license__ = "Apache 2.0"
__copyright__ = "Copyright 2026 The ctrl-z Authors"

# pylint: disable=unused-import,useless-import-alias
from .api import open_file as open_file
from .api import open_url as open_url
from .error import CtrlZException as CtrlZException
from .error import InvalidInnerSourceError as InvalidInnerSourceError
from .error import InvalidResponseError as InvalidResponseError
from .helpers import CTRL_Z as CTRL_Z
from .reader import BufferedReadToCtrlZ as BufferedReadToCtrlZ
from .reader import ReadToCtrlZ as ReadToCtrlZ
from .reader import wrap as wrap
