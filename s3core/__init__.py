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
s3core - request arguments and STS certificate credentials for Amazon S3
Compatible Cloud Storage

    >>> from s3core import StatObjectArgs, RequestBuilder
    >>> args = StatObjectArgs("my-bucket", "my-object").with_length(1024)
    >>> validated = args.validate()
    >>> builder = validated.build_request(
    ...     RequestBuilder(validated.method, "https://play.min.io",
    ...                    "my-bucket", "my-object"),
    ... )
    >>> print(builder.headers["Range"])
    bytes=0-1023

:copyright: (C) 2015-2025 MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.
"""

__title__ = "s3core"
__author__ = "MinIO, Inc."
__version__ = "1.0.0"
__license__ = "Apache 2.0"
__copyright__ = "Copyright 2015-2025 MinIO, Inc."

# pylint: disable=unused-import,useless-import-alias
from .args import GetObjectArgs as GetObjectArgs
from .args import StatObjectArgs as StatObjectArgs
from .args import ValidatedObjectArgs as ValidatedObjectArgs
from .credentials import CertificateResponse as CertificateResponse
from .credentials import CertificateResult as CertificateResult
from .credentials import Credentials as Credentials
from .error import DataFormatError as DataFormatError
from .error import InvalidArgumentError as InvalidArgumentError
from .error import S3CoreException as S3CoreException
from .http import RequestBuilder as RequestBuilder
