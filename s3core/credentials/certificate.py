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
Response of AssumeRoleWithCertificate STS API.

This is a MinIO extension to the AssumeRole STS APIs which issues temporary
credentials purely based on mTLS client certificate authentication.
"""

from __future__ import absolute_import, annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Type, TypeVar, cast
from xml.etree import ElementTree as ET

from ..error import DataFormatError
from ..time import from_iso8601utc, to_iso8601utc
from ..xml import (STS_NAMESPACE, Element, SubElement, find, findtext,
                   localname, marshal, unmarshal)
from .credentials import Credentials

A = TypeVar("A", bound="CertificateResult")
B = TypeVar("B", bound="ResponseMetadata")
C = TypeVar("C", bound="CertificateResponse")

RESPONSE_TAG = "AssumeRoleWithCertificateResponse"
RESULT_TAG = "AssumeRoleWithCertificateResult"


def _parse_expiration(value: Optional[str]) -> Optional[datetime]:
    """Parse Expiration element value."""
    try:
        return from_iso8601utc(value)
    except ValueError as exc:
        raise DataFormatError(f"invalid Expiration {value}") from exc


@dataclass(frozen=True)
class CertificateResult:
    """AssumeRoleWithCertificateResult of the response."""

    credentials: Credentials
    assumed_user: Optional[str] = None

    @classmethod
    def fromxml(cls: Type[A], element: ET.Element) -> A:
        """Create new object with values from XML element."""
        elem = cast(ET.Element, find(element, "Credentials", True))
        expiration = _parse_expiration(findtext(elem, "Expiration"))
        try:
            credentials = Credentials(
                cast(str, findtext(elem, "AccessKeyId", True)),
                cast(str, findtext(elem, "SecretAccessKey", True)),
                findtext(elem, "SessionToken"),
                expiration,
            )
        except ValueError as exc:
            raise DataFormatError(f"invalid Credentials; {exc}") from exc
        return cls(
            credentials=credentials,
            assumed_user=findtext(element, "AssumedUser"),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        element = SubElement(element, RESULT_TAG)
        if self.assumed_user is not None:
            SubElement(element, "AssumedUser", self.assumed_user)
        elem = SubElement(element, "Credentials")
        SubElement(elem, "AccessKeyId", self.credentials.access_key)
        SubElement(elem, "SecretAccessKey", self.credentials.secret_key)
        if self.credentials.session_token is not None:
            SubElement(elem, "SessionToken", self.credentials.session_token)
        if self.credentials.expiration is not None:
            SubElement(
                elem,
                "Expiration",
                to_iso8601utc(self.credentials.expiration),
            )
        return element


@dataclass(frozen=True)
class ResponseMetadata:
    """ResponseMetadata of the response."""

    request_id: Optional[str] = None

    @classmethod
    def fromxml(cls: Type[B], element: ET.Element) -> B:
        """Create new object with values from XML element."""
        return cls(request_id=findtext(element, "RequestId"))

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        element = SubElement(element, "ResponseMetadata")
        if self.request_id is not None:
            SubElement(element, "RequestId", self.request_id)
        return element


@dataclass(frozen=True)
class CertificateResponse:
    """AssumeRoleWithCertificate response."""

    result: CertificateResult
    response_metadata: Optional[ResponseMetadata] = None

    @property
    def credentials(self) -> Credentials:
        """Get credentials of the result."""
        return self.result.credentials

    @classmethod
    def fromxml(cls: Type[C], element: ET.Element) -> C:
        """Create new object with values from XML element."""
        if localname(element) != RESPONSE_TAG:
            raise DataFormatError(
                f"unexpected root element <{localname(element)}>; "
                f"expected <{RESPONSE_TAG}>",
            )
        result = CertificateResult.fromxml(
            cast(ET.Element, find(element, RESULT_TAG, True)),
        )
        elem = find(element, "ResponseMetadata")
        return cls(
            result=result,
            response_metadata=(
                None if elem is None else ResponseMetadata.fromxml(elem)
            ),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element(RESPONSE_TAG, STS_NAMESPACE)
        self.result.toxml(element)
        if self.response_metadata is not None:
            self.response_metadata.toxml(element)
        return element

    @classmethod
    def unmarshal(cls: Type[C], data: str | bytes) -> C:
        """Parse AssumeRoleWithCertificate response XML data."""
        return unmarshal(cls, data)

    def to_xml(self) -> str:
        """Serialize to XML document without XML declaration."""
        return marshal(self).decode()
