# -*- coding: utf-8 -*-
# MinIO Python Library for Amazon S3 Compatible Cloud Storage, (C)
# [2014] - [2025] MinIO, Inc.
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

from unittest import TestCase

from s3core.args import GetObjectArgs, StatObjectArgs, get_range_header
from s3core.error import InvalidArgumentError


class GetObjectArgsTest(TestCase):
    def test_method(self):
        self.assertEqual(GetObjectArgs("hello", "world").validate().method,
                         "GET")
        self.assertEqual(StatObjectArgs("hello", "world").validate().method,
                         "HEAD")

    def test_partial_object(self):
        builder = (
            GetObjectArgs("hello", "world")
            .with_offset_and_length(1000, 100)
            .validate()
            .new_request("https://localhost:9000")
        )
        self.assertEqual(builder.method, "GET")
        self.assertEqual(builder.headers["Range"], "bytes=1000-1099")

    def test_with_methods_keep_type(self):
        args = GetObjectArgs("hello", "world").with_length(10)
        self.assertIsInstance(args, GetObjectArgs)

    def test_both_etag_conditions(self):
        args = GetObjectArgs(
            "hello", "world", match_etag="abc", not_match_etag="xyz",
        )
        with self.assertRaises(InvalidArgumentError):
            args.validate()


class RangeHeaderTest(TestCase):
    def test_range_header(self):
        self.assertEqual(get_range_header(10, 5), "bytes=10-14")
        self.assertEqual(get_range_header(10, 0), "bytes=10-")
        self.assertEqual(get_range_header(0, 1), "bytes=0-0")
        self.assertIsNone(get_range_header(0, 0))
