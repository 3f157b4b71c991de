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

"""
s3core.sse
~~~~~~~~~~~~~~~~~~~

This module contains server-side encryption types which marshal their key
material into request headers.

:copyright: (c) 2018 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""
from __future__ import absolute_import, annotations

import base64
from abc import ABC, abstractmethod
from typing import MutableMapping, cast

from .error import InvalidArgumentError
from .helpers import md5sum_hash

SSE_C_KEY_HEADER = "X-Amz-Server-Side-Encryption-Customer-Key"


class Sse(ABC):
    """Server-side encryption base class."""

    @abstractmethod
    def headers(self) -> dict[str, str]:
        """Return headers."""

    def tls_required(self) -> bool:  # pylint: disable=no-self-use
        """Return TLS required to use this server-side encryption."""
        return True

    def marshal(self, headers: MutableMapping[str, str]):
        """Set encryption headers into given headers."""
        headers.update(self.headers())


class SseCustomerKey(Sse):
    """ Server-side encryption - customer key type."""

    def __init__(self, key: bytes):
        if len(key) != 32:
            raise InvalidArgumentError(
                "SSE-C keys need to be 256 bit base64 encoded", "key",
            )
        b64key = base64.b64encode(key).decode()
        md5key = cast(str, md5sum_hash(key))
        self._headers: dict[str, str] = {
            "X-Amz-Server-Side-Encryption-Customer-Algorithm": "AES256",
            SSE_C_KEY_HEADER: b64key,
            "X-Amz-Server-Side-Encryption-Customer-Key-MD5": md5key,
        }

    def headers(self) -> dict[str, str]:
        return self._headers.copy()


class SseS3(Sse):
    """Server-side encryption - S3 type."""

    def headers(self) -> dict[str, str]:
        return {
            "X-Amz-Server-Side-Encryption": "AES256"
        }

    def tls_required(self) -> bool:
        return False
