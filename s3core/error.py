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
s3core.error
~~~~~~~~~~~~~~~~~~~

This module provides custom exception classes for argument validation and
XML data handling.

:copyright: (c) 2015-2025 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

from typing import Optional


class S3CoreException(Exception):
    """Base s3core exception."""


class InvalidArgumentError(S3CoreException, ValueError):
    """
    Raised to indicate that request arguments are contradictory or
    otherwise invalid.
    """

    def __init__(self, message: str, argument: Optional[str] = None):
        self._argument = argument
        super().__init__(message)

    @property
    def argument(self) -> Optional[str]:
        """Get name of the offending argument if known."""
        return self._argument

    def __reduce__(self):
        return type(self), (str(self), self._argument)


class DataFormatError(S3CoreException, ValueError):
    """Raised to indicate that XML data could not be parsed or generated."""

    def __init__(self, message: str, body: Optional[str] = None):
        self._body = body
        super().__init__(message)

    @property
    def body(self) -> Optional[str]:
        """Get offending XML data if available."""
        return self._body

    def __reduce__(self):
        return type(self), (str(self), self._body)
