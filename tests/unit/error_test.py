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

import pickle
from unittest import TestCase

from ctrlz.error import (CtrlZException, InvalidInnerSourceError,
                         InvalidResponseError)


class InvalidInnerSourceErrorTest(TestCase):
    def test_kind(self):
        error = InvalidInnerSourceError(4, 5)
        self.assertIsInstance(error, CtrlZException)
        self.assertIsInstance(error, OSError)
        self.assertEqual(
            str(error), "buffer smaller than amount of bytes read",
        )

    def test_pickle(self):
        error = pickle.loads(pickle.dumps(InvalidInnerSourceError(4, 5)))
        self.assertIsInstance(error, InvalidInnerSourceError)
        self.assertEqual(error.size, 4)
        self.assertEqual(error.count, 5)
        self.assertEqual(
            str(error), "buffer smaller than amount of bytes read",
        )


class InvalidResponseErrorTest(TestCase):
    def test_message(self):
        error = InvalidResponseError(404, "text/plain", "not found")
        self.assertIsInstance(error, CtrlZException)
        self.assertEqual(error.code, 404)
        self.assertEqual(error.content_type, "text/plain")
        self.assertEqual(error.body, "not found")
        self.assertEqual(
            str(error),
            "unexpected response from server; Response code: 404, "
            "Content-Type: text/plain, Body: not found",
        )

    def test_pickle(self):
        error = pickle.loads(pickle.dumps(
            InvalidResponseError(500, None, None),
        ))
        self.assertEqual(error.code, 500)
        self.assertIsNone(error.body)
