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

# Per-recipient error codes returned in the 'error' field of a result.
# These arrive as data inside a successful response, not as exceptions.
# https://firebase.google.com/docs/cloud-messaging/http-server-ref#error-codes
MISSING_REGISTRATION = 'MissingRegistration'
INVALID_REGISTRATION = 'InvalidRegistration'
NOT_REGISTERED = 'NotRegistered'
INVALID_PACKAGE_NAME = 'InvalidPackageName'
MISMATCH_SENDER_ID = 'MismatchSenderId'
MESSAGE_TOO_BIG = 'MessageTooBig'
INVALID_DATA_KEY = 'InvalidDataKey'
INVALID_TTL = 'InvalidTtl'
UNAVAILABLE = 'Unavailable'
INTERNAL_SERVER_ERROR = 'InternalServerError'
DEVICE_MESSAGE_RATE_EXCEEDED = 'DeviceMessageRateExceeded'
TOPICS_MESSAGE_RATE_EXCEEDED = 'TopicsMessageRateExceeded'
