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

# pylint: disable=too-many-instance-attributes

"""Argument classes for object metadata and object read APIs."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import ClassVar, Optional, TypeVar

from .error import InvalidArgumentError
from .helpers import check_bucket_name, check_object_name
from .http import RequestBuilder
from .sse import Sse, SseCustomerKey
from .time import to_http_header

S3_ZIP_EXTRACT_KEY = "X-Minio-Extract"

A = TypeVar("A", bound="ObjectConditionalQueryArgs")


def get_range_header(offset: int, length: int) -> Optional[str]:
    """Get value of "Range" header for given offset and length."""
    if offset > 0 and length > 0:
        return f"bytes={offset}-{offset + length - 1}"
    if offset > 0:
        return f"bytes={offset}-"
    if length > 0:
        return f"bytes=0-{length - 1}"
    return None


@dataclass(frozen=True)
class ObjectConditionalQueryArgs:
    """
    Base arguments of conditional object queries.

    Values are immutable; every `with_*` method returns a new value leaving
    the receiver unchanged. Nothing is checked until `validate()`, which
    returns :class:`ValidatedObjectArgs` ready to build a request.
    """
    method: ClassVar[str] = ""

    bucket_name: str
    object_name: str
    version_id: Optional[str] = None
    sse: Optional[Sse] = None
    match_etag: Optional[str] = None
    not_match_etag: Optional[str] = None
    modified_since: Optional[datetime] = None
    unmodified_since: Optional[datetime] = None
    offset: int = 0
    length: int = 0
    offset_length_set: bool = False
    headers: Optional[dict[str, str]] = None
    fetch_checksum: bool = False

    def __post_init__(self):
        if not self.method:
            raise TypeError(
                f"{type(self).__name__} is abstract; "
                "use StatObjectArgs or GetObjectArgs",
            )

    def with_offset_and_length(self: A, offset: int, length: int) -> A:
        """Set byte range; negative values are treated as zero."""
        return replace(
            self,
            offset_length_set=True,
            offset=max(offset, 0),
            length=max(length, 0),
        )

    def with_length(self: A, length: int) -> A:
        """Set byte range from start; negative length is treated as zero."""
        return replace(
            self,
            offset_length_set=True,
            offset=0,
            length=max(length, 0),
        )

    def with_version_id(self: A, version_id: Optional[str]) -> A:
        """Set version ID."""
        return replace(self, version_id=version_id)

    def with_match_etag(self: A, etag: Optional[str]) -> A:
        """Set ETag which the object must match."""
        return replace(self, match_etag=etag)

    def with_not_match_etag(self: A, etag: Optional[str]) -> A:
        """Set ETag which the object must not match."""
        return replace(self, not_match_etag=etag)

    def with_modified_since(self: A, value: Optional[datetime]) -> A:
        """Set time the object must be modified since."""
        return replace(self, modified_since=value)

    def with_unmodified_since(self: A, value: Optional[datetime]) -> A:
        """Set time the object must be unmodified since."""
        return replace(self, unmodified_since=value)

    def with_sse(self: A, sse: Optional[Sse]) -> A:
        """Set server-side encryption."""
        return replace(self, sse=sse)

    def with_headers(self: A, headers: dict[str, str]) -> A:
        """Merge given headers into a copy of existing headers."""
        merged = dict(self.headers or {})
        merged.update(headers)
        return replace(self, headers=merged)

    def with_fetch_checksum(self: A, fetch_checksum: bool = True) -> A:
        """Set flag to fetch checksum of the object."""
        return replace(self, fetch_checksum=fetch_checksum)

    def validate(self) -> ValidatedObjectArgs:
        """
        Validate arguments and compute request headers.

        Raises:
            InvalidArgumentError: bucket or object name is invalid, both ETag
                match conditions or both modified time conditions are set,
                or the byte range is negative or empty.
        """
        check_bucket_name(self.bucket_name)
        check_object_name(self.object_name)
        if self.sse is not None and not isinstance(self.sse, Sse):
            raise InvalidArgumentError("Sse type is required", "sse")

        if self.match_etag and self.not_match_etag:
            raise InvalidArgumentError(
                "invalid to set both ETag match conditions "
                "not_match_etag and match_etag",
                "match_etag",
            )

        if (
                self.modified_since is not None and
                self.unmodified_since is not None
        ):
            raise InvalidArgumentError(
                "invalid to set both modified date match conditions "
                "modified_since and unmodified_since",
                "modified_since",
            )

        if self.offset_length_set:
            if self.offset < 0 or self.length < 0:
                raise InvalidArgumentError(
                    "offset and length cannot be less than 0", "offset",
                )
            if self.offset == 0 and self.length == 0:
                raise InvalidArgumentError(
                    "either offset or length must be greater than 0",
                    "offset",
                )

        return ValidatedObjectArgs(
            args=self, method=self.method, headers=self._populate(),
        )

    def _populate(self) -> dict[str, str]:
        """Generate request headers."""
        headers = dict(self.headers or {})
        if isinstance(self.sse, SseCustomerKey):
            self.sse.marshal(headers)
        if self.offset_length_set:
            for key in [key for key in headers if key.lower() == "range"]:
                del headers[key]
            value = get_range_header(self.offset, self.length)
            if value:
                headers["Range"] = value
        if self.match_etag:
            headers["If-Match"] = self.match_etag
        if self.not_match_etag:
            headers["If-None-Match"] = self.not_match_etag
        if self.modified_since:
            headers["If-Modified-Since"] = to_http_header(self.modified_since)
        if self.unmodified_since:
            headers["If-Unmodified-Since"] = to_http_header(
                self.unmodified_since,
            )
        if self.fetch_checksum:
            headers["x-amz-checksum-mode"] = "ENABLED"
        return headers


@dataclass(frozen=True)
class StatObjectArgs(ObjectConditionalQueryArgs):
    """Arguments of StatObject (HEAD object) API."""
    method: ClassVar[str] = "HEAD"


@dataclass(frozen=True)
class GetObjectArgs(ObjectConditionalQueryArgs):
    """Arguments of GetObject API."""
    method: ClassVar[str] = "GET"


@dataclass(frozen=True)
class ValidatedObjectArgs:
    """
    Validated arguments with final request headers; only created by
    :meth:`ObjectConditionalQueryArgs.validate`.

    Instances are unhashable as `headers` is a dict.
    """
    __hash__ = None  # type: ignore[assignment]

    args: ObjectConditionalQueryArgs
    method: str
    headers: dict[str, str]

    def build_request(self, builder: RequestBuilder) -> RequestBuilder:
        """
        Add headers and query parameters to given request builder.

        Raises:
            InvalidArgumentError: server-side encryption requiring TLS is
                used with a non-https endpoint.
        """
        sse = self.args.sse
        if sse is not None and sse.tls_required() and not builder.is_https:
            raise InvalidArgumentError(
                "SSE operation must be performed over a secure connection",
                "sse",
            )
        for key, value in self.headers.items():
            builder.add_header(key, value)
        if self.args.version_id:
            builder.add_query_parameter("versionId", self.args.version_id)
        value = self.headers.get(S3_ZIP_EXTRACT_KEY)
        if value is not None:
            builder.add_query_parameter(S3_ZIP_EXTRACT_KEY, value)
        return builder

    def new_request(self, endpoint: str) -> RequestBuilder:
        """Create request builder for given endpoint and build request."""
        return self.build_request(
            RequestBuilder(
                self.method,
                endpoint,
                self.args.bucket_name,
                self.args.object_name,
            ),
        )
