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

"""Helper functions."""

from __future__ import absolute_import, annotations

import base64
import hashlib
import re
import urllib.parse
from typing import Mapping

from .error import InvalidArgumentError

_OLD_BUCKET_NAME_REGEX = re.compile(r'^[a-z0-9][a-z0-9_\.\-\:]{1,61}[a-z0-9]$',
                                    re.IGNORECASE)
_IPV4_REGEX = re.compile(
    r'^((25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9][0-9]|[0-9])\.){3}'
    r'(25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9][0-9]|[0-9])$')
_REDACTED_HEADERS = {
    "x-amz-server-side-encryption-customer-key",
    "x-amz-copy-source-server-side-encryption-customer-key",
}


def quote(
        resource: str,
        safe: str = "/",
        encoding: str | None = None,
        errors: str | None = None,
) -> str:
    """
    Wrapper to urllib.parse.quote() replacing back to '~' for older python
    versions.
    """
    return urllib.parse.quote(
        resource,
        safe=safe,
        encoding=encoding,
        errors=errors,
    ).replace("%7E", "~")


def queryencode(
        query: str,
        safe: str = "",
        encoding: str | None = None,
        errors: str | None = None,
) -> str:
    """Encode query parameter value."""
    return quote(query, safe, encoding, errors)


def headers_to_strings(
        headers: Mapping[str, str | list[str] | tuple[str]],
        titled_key: bool = False,
) -> str:
    """Convert HTTP headers to multi-line string."""
    values = []
    for key, value in headers.items():
        redacted = key.lower() in _REDACTED_HEADERS
        key = key.title() if titled_key else key
        for item in value if isinstance(value, (list, tuple)) else [value]:
            values.append(f"{key}: {'*REDACTED*' if redacted else item}")
    return "\n".join(values)


def check_bucket_name(bucket_name: str):
    """Check whether bucket name is valid or not."""

    if not isinstance(bucket_name, str):
        raise TypeError("bucket name must be str type")

    if not _OLD_BUCKET_NAME_REGEX.match(bucket_name):
        raise InvalidArgumentError(
            f"invalid bucket name {bucket_name}", "bucket_name",
        )

    if _IPV4_REGEX.match(bucket_name):
        raise InvalidArgumentError(
            f"bucket name {bucket_name} must not be formatted as an IP "
            "address",
            "bucket_name",
        )

    unallowed_successive_chars = ['..', '.-', '-.']
    if any(x in bucket_name for x in unallowed_successive_chars):
        raise InvalidArgumentError(
            f"bucket name {bucket_name} contains invalid successive "
            "characters",
            "bucket_name",
        )


def check_non_empty_string(string: str | bytes, name: str | None = None):
    """Check whether given string is not empty."""
    try:
        if not string.strip():
            raise InvalidArgumentError(f"{name or 'value'} must not be empty",
                                       name)
    except AttributeError as exc:
        raise TypeError(f"{name or 'value'} must be str type") from exc


def check_object_name(object_name: str):
    """Check whether object name is valid or not."""
    check_non_empty_string(object_name, "object_name")


def md5sum_hash(data: str | bytes | None) -> str | None:
    """Compute MD5 of data and return hash as Base64 encoded value."""
    if data is None:
        return None

    # indicate md5 hashing algorithm is not used in a security context.
    # Refer https://bugs.python.org/issue9216 for more information.
    hasher = hashlib.new(  # type: ignore[call-arg]
        "md5",
        usedforsecurity=False,
    )
    hasher.update(data.encode() if isinstance(data, str) else data)
    return base64.b64encode(hasher.digest()).decode()


def url_replace(
        url: urllib.parse.SplitResult,
        scheme: str | None = None,
        netloc: str | None = None,
        path: str | None = None,
        query: str | None = None,
        fragment: str | None = None,
) -> urllib.parse.SplitResult:
    """Return new URL with replaced properties in given URL."""
    return urllib.parse.SplitResult(
        scheme if scheme is not None else url.scheme,
        netloc if netloc is not None else url.netloc,
        path if path is not None else url.path,
        query if query is not None else url.query,
        fragment if fragment is not None else url.fragment,
    )
