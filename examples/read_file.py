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

# Note: my-legacy-file.txt is a dummy value, please replace it with original
# value.

import io
import sys

from ctrlz import open_file

with open_file("my-legacy-file.txt") as reader:
    reader.trace_on(sys.stderr)
    text = io.TextIOWrapper(io.BufferedReader(reader), encoding="cp437")
    for line in text:
        print(line, end="")
