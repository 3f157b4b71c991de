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

"""HTTP request builder consumed by validated request arguments."""

from __future__ import absolute_import, annotations

import urllib.parse
from typing import Optional, TextIO

from urllib3._collections import HTTPHeaderDict

from .error import InvalidArgumentError
from .helpers import headers_to_strings, quote, queryencode, url_replace


class RequestBuilder:
    """Collects method, path, headers and query parameters of a request."""

    def __init__(
            self,
            method: str,
            endpoint: str,
            bucket_name: Optional[str] = None,
            object_name: Optional[str] = None,
    ):
        url = urllib.parse.urlsplit(endpoint)
        if url.scheme not in ["http", "https"] or not url.netloc:
            raise InvalidArgumentError(
                f"endpoint {endpoint} must have http or https scheme and host",
                "endpoint",
            )
        if url.path not in ["", "/"] or url.query or url.fragment:
            raise InvalidArgumentError(
                f"path, query or fragment not allowed in endpoint {endpoint}",
                "endpoint",
            )
        if object_name and not bucket_name:
            raise InvalidArgumentError(
                "bucket name must be provided for object name", "bucket_name",
            )
        self._method = method.upper()
        self._url = url_replace(url, path="", query="", fragment="")
        self._bucket_name = bucket_name
        self._object_name = object_name
        self._headers = HTTPHeaderDict()
        self._query_params: dict[str, list[str]] = {}

    @property
    def method(self) -> str:
        """Get HTTP method."""
        return self._method

    @property
    def is_https(self) -> bool:
        """Check whether endpoint uses https scheme."""
        return self._url.scheme == "https"

    @property
    def bucket_name(self) -> Optional[str]:
        """Get bucket name."""
        return self._bucket_name

    @property
    def object_name(self) -> Optional[str]:
        """Get object name."""
        return self._object_name

    @property
    def headers(self) -> HTTPHeaderDict:
        """Get request headers."""
        return self._headers

    @property
    def query_params(self) -> dict[str, list[str]]:
        """Get query parameters."""
        return self._query_params

    def add_header(self, key: str, value: str) -> RequestBuilder:
        """Add or replace a header."""
        self._headers[key] = value
        return self

    def add_query_parameter(self, key: str, value: str) -> RequestBuilder:
        """Add a query parameter; repeated keys keep all values."""
        self._query_params.setdefault(key, []).append(value)
        return self

    @property
    def path(self) -> str:
        """Get path-style request path."""
        path = "/"
        if self._bucket_name:
            path += self._bucket_name
            if self._object_name:
                path += "/" + quote(self._object_name)
        return path

    @property
    def query(self) -> str:
        """Get encoded query string sorted by key."""
        return "&".join(
            f"{queryencode(key)}={queryencode(value)}"
            for key in sorted(self._query_params)
            for value in self._query_params[key]
        )

    @property
    def url(self) -> str:
        """Get request URL."""
        return urllib.parse.urlunsplit(
            url_replace(self._url, path=self.path, query=self.query),
        )

    def trace(self, stream: TextIO):
        """Write this request in HTTP trace format to given stream."""
        query = ("?" + self.query) if self._query_params else ""
        stream.write("---------START-HTTP---------\n")
        stream.write(f"{self._method} {self.path}{query} HTTP/1.1\n")
        stream.write(f"Host: {self._url.netloc}\n")
        if self._headers:
            stream.write(headers_to_strings(self._headers, titled_key=True))
            stream.write("\n")
        stream.write("\n")
