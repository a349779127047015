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

import json
import json.encoder

# May as well cache a JSON encoder because we'll be
# using the same altered configuration each time
# (the json module will otherwise create it each time)
#
# Non-ascii text is sent as literal UTF-8 rather than
# \u escapes and there is no whitespace after separators:
# message size is limited server side so the shortest
# encoding is the one we want.
jsonencoder = json.encoder.JSONEncoder(
    ensure_ascii=False,
    separators=(',', ':')
)


def json_for_payload(payload):
    return jsonencoder.encode(payload).encode('utf8')


def decode_body(body):
    """
    Decodes the body of a response from the FCM server.
    Returns None if it is not valid JSON.
    """
    try:
        return json.loads(body)
    except ValueError:
        return None
