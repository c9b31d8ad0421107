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

# Note: https://example.org/my-legacy-file.txt and my-testfile are dummy
# values, please replace them with original values.

from ctrlz import open_url
from ctrlz.error import InvalidResponseError

try:
    with open_url("https://example.org/my-legacy-file.txt") as reader:
        with open("my-testfile", "wb") as file_data:
            while True:
                data = reader.peek()
                if not data:
                    break
                file_data.write(data)
                reader.consume(len(data))
except InvalidResponseError as err:
    print(err)
