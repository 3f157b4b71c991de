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

from datetime import datetime, timedelta, timezone
from unittest import TestCase

from s3core.credentials import Credentials


class CredentialsTest(TestCase):
    def test_empty_keys(self):
        with self.assertRaises(ValueError):
            Credentials("", "secret")
        with self.assertRaises(ValueError):
            Credentials("access", "")

    def test_expiration_is_utc(self):
        creds = Credentials(
            "access",
            "secret",
            expiration=datetime(
                2030, 1, 1, 5, tzinfo=timezone(timedelta(hours=5)),
            ),
        )
        self.assertEqual(creds.expiration, datetime(2030, 1, 1, 0))

    def test_is_expired(self):
        self.assertFalse(Credentials("access", "secret").is_expired())
        self.assertTrue(
            Credentials(
                "access", "secret",
                expiration=datetime(2015, 1, 1, tzinfo=timezone.utc),
            ).is_expired(),
        )
        self.assertFalse(
            Credentials(
                "access", "secret",
                expiration=datetime.now(timezone.utc) + timedelta(hours=1),
            ).is_expired(),
        )

    def test_expiration_millisecond_precision(self):
        creds = Credentials(
            "access", "secret",
            expiration=datetime(2030, 1, 1, 0, 0, 0, 123456),
        )
        self.assertEqual(creds.expiration,
                         datetime(2030, 1, 1, 0, 0, 0, 123000))
