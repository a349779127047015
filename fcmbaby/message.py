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

from fcmbaby.exceptions import InvalidArgumentException, ConflictException
from fcmbaby.payload import json_for_payload


class Message:
    """
    A message to be sent to one or more registration ids.

    All the setters return the message so calls may be chained:

        msg = Message().add_registration_id(token).add_data('room', room_id)

    Anything left at its default is left out of the request body, with the
    exception of the priority, which is always sent unless cleared.
    """
    DEFAULT_PRIORITY = 'normal'
    DEFAULT_TIME_TO_LIVE = 2419200  # 4 weeks, the longest FCM will hold a message

    def __init__(self):
        self._registration_ids = []
        self._collapse_key = None
        self._priority = Message.DEFAULT_PRIORITY
        self._data = {}
        self._notification = {}
        self._delay_while_idle = False
        self._time_to_live = Message.DEFAULT_TIME_TO_LIVE
        self._restricted_package_name = None
        self._dry_run = False

    @property
    def registration_ids(self):
        return list(self._registration_ids)

    def set_registration_ids(self, ids):
        self.clear_registration_ids()
        for reg_id in ids:
            self.add_registration_id(reg_id)
        return self

    def add_registration_id(self, reg_id):
        """
        Appends a registration id. The order of registration ids is the
        order results come back in so adding one that is already present
        does nothing rather than moving it.
        """
        if not reg_id:
            raise InvalidArgumentException("Registration id must be a non-empty string")
        if reg_id not in self._registration_ids:
            self._registration_ids.append(reg_id)
        return self

    def clear_registration_ids(self):
        self._registration_ids = []
        return self

    @property
    def collapse_key(self):
        return self._collapse_key

    def set_collapse_key(self, key):
        _check_optional_string(key, "Collapse key")
        self._collapse_key = key
        return self

    @property
    def priority(self):
        return self._priority

    def set_priority(self, priority):
        _check_optional_string(priority, "Priority")
        self._priority = priority
        return self

    @property
    def data(self):
        return dict(self._data)

    def set_data(self, data):
        self.clear_data()
        for k, v in data.items():
            self.add_data(k, v)
        return self

    def add_data(self, key, value):
        _add_unique(self._data, key, value, "data")
        return self

    def clear_data(self):
        self._data = {}
        return self

    @property
    def notification(self):
        return dict(self._notification)

    def set_notification(self, notification):
        self.clear_notification()
        for k, v in notification.items():
            self.add_notification(k, v)
        return self

    def add_notification(self, key, value):
        _add_unique(self._notification, key, value, "notification")
        return self

    def clear_notification(self):
        self._notification = {}
        return self

    @property
    def delay_while_idle(self):
        return self._delay_while_idle

    def set_delay_while_idle(self, delay):
        self._delay_while_idle = bool(delay)
        return self

    @property
    def time_to_live(self):
        return self._time_to_live

    def set_time_to_live(self, ttl):
        """
        Args:
            ttl (int): How long, in seconds, FCM should keep the message
                       if the device is offline.
        """
        self._time_to_live = ttl
        return self

    @property
    def restricted_package_name(self):
        return self._restricted_package_name

    def set_restricted_package_name(self, name):
        _check_optional_string(name, "Restricted package name")
        self._restricted_package_name = name
        return self

    @property
    def dry_run(self):
        return self._dry_run

    def set_dry_run(self, dry_run):
        self._dry_run = bool(dry_run)
        return self

    def to_dict(self):
        """
        Returns the body of the FCM request for this message as a dictionary,
        omitting anything that is empty or left at its default.
        """
        fields = [
            (self._registration_ids, 'registration_ids', list(self._registration_ids)),
            (self._collapse_key, 'collapse_key', self._collapse_key),
            (self._priority, 'priority', self._priority),
            (self._data, 'data', dict(self._data)),
            (self._notification, 'notification', dict(self._notification)),
            (self._delay_while_idle, 'delay_while_idle', self._delay_while_idle),
            (self._time_to_live != Message.DEFAULT_TIME_TO_LIVE, 'time_to_live', self._time_to_live),
            (self._restricted_package_name, 'restricted_package_name', self._restricted_package_name),
            (self._dry_run, 'dry_run', self._dry_run),
        ]
        return {key: value for present, key, value in fields if present}

    def to_json(self):
        return json_for_payload(self.to_dict()).decode('utf8')


def _check_optional_string(val, what):
    if val is not None and len(val) == 0:
        raise InvalidArgumentException("%s must be None or a non-empty string" % (what,))


def _add_unique(target, key, value, what):
    if not key:
        raise InvalidArgumentException("Key must be a non-empty string")
    # never overwrite an existing key
    if key in target:
        raise ConflictException("Key '%s' conflicts with current %s" % (key, what))
    target[key] = value
