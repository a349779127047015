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

import math
import re

from fcmbaby.correlate import correlate
from fcmbaby.exceptions import InvalidArgumentException


RESULT_MESSAGE_ID = 'message_id'
RESULT_ERROR = 'error'
RESULT_CANONICAL = 'registration_id'

REQUIRED_FIELDS = ('results', 'success', 'failure', 'canonical_ids', 'multicast_id')

_LEADING_NUMBER = re.compile(r'\s*([+-]?\d+)(\.\d*)?([eE][+-]?\d+)?')


class Response:
    """
    The outcome of sending a Message. If the message is known, results
    are keyed by the registration id they're for:

        resp = fcm.send(msg)
        for reg_id, error in resp.get_result(RESULT_ERROR).items():
            if error == fcmbaby.errors.NOT_REGISTERED:
                forget(reg_id)
    """
    def __init__(self, response=None, message=None):
        self._response = None
        self._message = None
        self._results = []
        self._multicast_id = None
        self._success_count = None
        self._failure_count = None
        self._canonical_count = None

        if response is not None:
            self.set_response(response)
        if message is not None:
            self.set_message(message)

    @property
    def message(self):
        return self._message

    def set_message(self, message):
        self._message = message
        return self

    @property
    def response(self):
        return self._response

    def set_response(self, response):
        """
        Args:
            response (dict): The decoded body of a response from FCM
        Throws:
            InvalidArgumentException: If any of the required fields are
                missing, in which case nothing is changed.
        """
        if not isinstance(response, dict):
            raise InvalidArgumentException("Response must be a dictionary")
        missing = [f for f in REQUIRED_FIELDS if response.get(f) is None]
        if missing:
            raise InvalidArgumentException(
                "Response did not contain the proper fields (missing %s)" % (', '.join(missing),)
            )

        self._response = response
        self._results = list(response['results'])
        self._success_count = _to_int(response['success'])
        self._failure_count = _to_int(response['failure'])
        self._canonical_count = _to_int(response['canonical_ids'])
        self._multicast_id = _to_int(response['multicast_id'])
        return self

    @property
    def multicast_id(self):
        return self._multicast_id

    @property
    def success_count(self):
        return self._success_count

    @property
    def failure_count(self):
        return self._failure_count

    @property
    def canonical_count(self):
        return self._canonical_count

    @property
    def results(self):
        reg_ids = self._message.registration_ids if self._message else None
        return correlate(self._results, reg_ids)

    def get_result(self, flag):
        """
        Returns a single field of each result, for those results that
        have it.
        Args:
            flag (str): One of RESULT_MESSAGE_ID, RESULT_ERROR or RESULT_CANONICAL
        """
        if flag not in (RESULT_MESSAGE_ID, RESULT_ERROR, RESULT_CANONICAL):
            raise InvalidArgumentException("Unknown result field '%s'" % (flag,))
        return {k: v[flag] for k, v in self.results.items() if v.get(flag) is not None}


def _to_int(val):
    # The counters should be numbers but don't fail over a server sending
    # them as strings: take whatever number they start with, otherwise 0.
    if isinstance(val, int):
        return int(val)
    if isinstance(val, float):
        return int(val) if math.isfinite(val) else 0
    if isinstance(val, str):
        m = _LEADING_NUMBER.match(val)
        if m:
            if not m.group(2) and not m.group(3):
                return int(m.group(1))
            return _to_int(float(m.group(0)))
    return 0
