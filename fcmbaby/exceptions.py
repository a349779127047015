# Copyright 2015 OpenMarket Ltd
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


class FcmException(Exception):
    """
    Base class for everything raised by this library. The human readable
    description is available as 'detail'.
    """
    def __init__(self, detail):
        super().__init__(detail)
        self.detail = detail


class InvalidArgumentException(FcmException, ValueError):
    """
    An argument supplied by the caller was rejected: an empty registration
    id, key or API key, or a response body missing required fields.
    """
    pass


class ConflictException(FcmException):
    """
    A data or notification key was added that is already present.
    """
    pass


class SendFailedException(FcmException):
    """
    The FCM server refused the request. Raised only by FcmBaby.send()
    """
    def __init__(self, detail, status_code=None):
        super().__init__(detail)
        self.status_code = status_code


class AuthenticationException(SendFailedException):
    pass


class BadRequestException(SendFailedException):
    pass


class ServerErrorException(SendFailedException):
    """
    The server failed or was unavailable. If it told us when to come back,
    the value of its Retry-After header is available as 'retry_after'.
    Nothing is retried automatically.
    """
    def __init__(self, detail, status_code=None, retry_after=None):
        super().__init__(detail, status_code)
        self.retry_after = retry_after


class ProtocolException(SendFailedException):
    pass
