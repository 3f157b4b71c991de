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

from s3core.error import InvalidArgumentError
from s3core.helpers import (check_bucket_name, check_object_name,
                            headers_to_strings, md5sum_hash, queryencode,
                            quote)


class BucketNameTest(TestCase):
    def test_valid_names(self):
        for name in ["hello", "my-bucket.1", "abc"]:
            check_bucket_name(name)
        check_bucket_name("my_bucket")

    def test_invalid_names(self):
        for name in ["AB#CD", "ab", "-bucket", "bucket-", "192.168.1.1",
                     "my..bucket", "my.-bucket"]:
            with self.assertRaises(InvalidArgumentError):
                check_bucket_name(name)

    def test_type(self):
        with self.assertRaises(TypeError):
            check_bucket_name(1234)


class ObjectNameTest(TestCase):
    def test_object_name(self):
        check_object_name("world")
        with self.assertRaises(InvalidArgumentError):
            check_object_name("")
        with self.assertRaises(TypeError):
            check_object_name(None)


class EncodingTest(TestCase):
    def test_quote(self):
        self.assertEqual(quote("a b/c~d"), "a%20b/c~d")
        self.assertEqual(queryencode("a/b c"), "a%2Fb%20c")

    def test_md5sum_hash(self):
        self.assertIsNone(md5sum_hash(None))
        self.assertEqual(md5sum_hash(b"32byteslongsecretkeymustprovided"),
                         "7PpPLAK26ONlVUGOWlusfg==")

    def test_headers_to_strings(self):
        self.assertEqual(
            headers_to_strings(
                {
                    "x-amz-server-side-encryption-customer-key": "secret",
                    "range": "bytes=0-9",
                    "x-multi": ["a", "b"],
                },
                titled_key=True,
            ),
            "X-Amz-Server-Side-Encryption-Customer-Key: *REDACTED*\n"
            "Range: bytes=0-9\n"
            "X-Multi: a\n"
            "X-Multi: b",
        )
