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
import unittest

from fcmbaby import Message
from fcmbaby.exceptions import InvalidArgumentException, ConflictException


class MessageTestCase(unittest.TestCase):
    def setUp(self):
        self.m = Message()

    def assertOmitted(self, key):
        self.assertNotIn(key, self.m.to_dict())
        self.assertNotIn(key, self.m.to_json())

    def test_empty_message(self):
        # priority is the only thing sent when left at its default
        self.assertEqual({'priority': 'normal'}, self.m.to_dict())
        self.assertEqual('{"priority":"normal"}', self.m.to_json())

    def test_registration_ids(self):
        ids = ['1234567890', '0987654321']
        self.assertEqual([], self.m.registration_ids)
        self.assertOmitted('registration_ids')
        self.m.set_registration_ids(ids)
        self.assertEqual(ids, self.m.registration_ids)
        for reg_id in ids:
            self.m.add_registration_id(reg_id)
        self.assertEqual(ids, self.m.registration_ids)
        self.assertEqual(ids, self.m.to_dict()['registration_ids'])
        self.m.clear_registration_ids()
        self.assertEqual([], self.m.registration_ids)
        self.assertOmitted('registration_ids')
        self.m.add_registration_id('1029384756')
        self.assertEqual(['1029384756'], self.m.registration_ids)

    def test_duplicate_registration_id_keeps_first_position(self):
        self.m.add_registration_id('A').add_registration_id('B').add_registration_id('A')
        self.assertEqual(['A', 'B'], self.m.registration_ids)

    def test_set_registration_ids_removes_duplicates(self):
        self.m.set_registration_ids(['A', 'B', 'A', 'C'])
        self.assertEqual(['A', 'B', 'C'], self.m.registration_ids)

    def test_invalid_registration_id(self):
        with self.assertRaises(InvalidArgumentException):
            self.m.add_registration_id('')
        self.assertEqual([], self.m.registration_ids)

    def test_set_registration_ids_never_includes_rejected(self):
        with self.assertRaises(InvalidArgumentException):
            self.m.set_registration_ids(['A', '', 'B'])
        self.assertNotIn('', self.m.registration_ids)

    def test_registration_ids_copy(self):
        self.m.add_registration_id('A')
        self.m.registration_ids.append('B')
        self.assertEqual(['A'], self.m.registration_ids)

    def test_collapse_key(self):
        self.assertIsNone(self.m.collapse_key)
        self.assertOmitted('collapse_key')
        self.m.set_collapse_key('my collapse key')
        self.assertEqual('my collapse key', self.m.collapse_key)
        self.assertEqual('my collapse key', self.m.to_dict()['collapse_key'])
        self.m.set_collapse_key(None)
        self.assertIsNone(self.m.collapse_key)
        self.assertOmitted('collapse_key')

    def test_invalid_collapse_key(self):
        with self.assertRaises(InvalidArgumentException):
            self.m.set_collapse_key('')

    def test_priority(self):
        self.assertEqual('normal', self.m.priority)
        self.assertEqual('normal', self.m.to_dict()['priority'])
        self.m.set_priority('high')
        self.assertEqual('high', self.m.to_dict()['priority'])
        self.m.set_priority(None)
        self.assertOmitted('priority')
        with self.assertRaises(InvalidArgumentException):
            self.m.set_priority('')

    def test_data(self):
        data = {'key': 'value', 'key2': ['value']}
        self.assertEqual({}, self.m.data)
        self.assertOmitted('data')
        self.m.set_data(data)
        self.assertEqual(data, self.m.data)
        self.assertEqual(data, self.m.to_dict()['data'])
        self.m.clear_data()
        self.assertEqual({}, self.m.data)
        self.assertOmitted('data')
        self.m.add_data('mykey', 'myvalue')
        self.assertEqual({'mykey': 'myvalue'}, self.m.data)

    def test_notification(self):
        notification = {'title': 'Hello', 'body': 'World'}
        self.assertEqual({}, self.m.notification)
        self.assertOmitted('notification')
        self.m.set_notification(notification)
        self.assertEqual(notification, self.m.notification)
        self.assertEqual(notification, self.m.to_dict()['notification'])
        self.m.clear_notification()
        self.assertOmitted('notification')

    def test_data_and_notification_are_independent(self):
        self.m.add_data('title', 'a')
        self.m.add_notification('title', 'b')
        self.assertEqual({'title': 'a'}, self.m.data)
        self.assertEqual({'title': 'b'}, self.m.notification)

    def test_invalid_data_key(self):
        with self.assertRaises(InvalidArgumentException):
            self.m.add_data('', 'value')
        with self.assertRaises(InvalidArgumentException):
            self.m.add_notification('', 'value')

    def test_duplicate_data_key(self):
        self.m.add_data('key', 'value')
        # same value or not, it's still a conflict
        with self.assertRaises(ConflictException):
            self.m.add_data('key', 'value')
        with self.assertRaises(ConflictException):
            self.m.add_data('key', 'other value')
        self.assertEqual({'key': 'value'}, self.m.data)

    def test_duplicate_notification_key(self):
        self.m.add_notification('title', 'Hello')
        with self.assertRaises(ConflictException):
            self.m.add_notification('title', 'Hello')

    def test_set_data_replaces(self):
        self.m.add_data('old', 1)
        self.m.set_data({'new': 2})
        self.assertEqual({'new': 2}, self.m.data)

    def test_delay_while_idle(self):
        self.assertFalse(self.m.delay_while_idle)
        self.assertOmitted('delay_while_idle')
        self.m.set_delay_while_idle(True)
        self.assertTrue(self.m.delay_while_idle)
        self.assertIs(True, self.m.to_dict()['delay_while_idle'])
        self.m.set_delay_while_idle(False)
        self.assertOmitted('delay_while_idle')

    def test_time_to_live(self):
        self.assertEqual(2419200, self.m.time_to_live)
        self.assertOmitted('time_to_live')
        self.m.set_time_to_live(12345)
        self.assertEqual(12345, self.m.time_to_live)
        self.assertEqual(12345, self.m.to_dict()['time_to_live'])
        self.m.set_time_to_live(0)
        self.assertEqual(0, self.m.to_dict()['time_to_live'])
        self.m.set_time_to_live(2419200)
        self.assertOmitted('time_to_live')

    def test_restricted_package_name(self):
        self.assertIsNone(self.m.restricted_package_name)
        self.assertOmitted('restricted_package_name')
        self.m.set_restricted_package_name('org.example.app')
        self.assertEqual('org.example.app', self.m.to_dict()['restricted_package_name'])
        self.m.set_restricted_package_name(None)
        self.assertOmitted('restricted_package_name')

    def test_invalid_restricted_package_name(self):
        with self.assertRaises(InvalidArgumentException):
            self.m.set_restricted_package_name('')

    def test_dry_run(self):
        self.assertFalse(self.m.dry_run)
        self.assertOmitted('dry_run')
        self.m.set_dry_run(True)
        self.assertIs(True, self.m.to_dict()['dry_run'])
        self.m.set_dry_run(False)
        self.assertOmitted('dry_run')

    def test_chaining_and_field_order(self):
        ret = (self.m
               .add_registration_id('A')
               .set_collapse_key('ck')
               .add_data('k', 'v')
               .add_notification('title', 't')
               .set_delay_while_idle(True)
               .set_time_to_live(60)
               .set_restricted_package_name('org.example')
               .set_dry_run(True))
        self.assertIs(self.m, ret)
        self.assertEqual([
            'registration_ids', 'collapse_key', 'priority', 'data', 'notification',
            'delay_while_idle', 'time_to_live', 'restricted_package_name', 'dry_run',
        ], list(json.loads(self.m.to_json()).keys()))

    def test_set_data_invalid_key(self):
        with self.assertRaises(InvalidArgumentException):
            self.m.set_data({'key': 'value', '': 'empty'})
        self.assertNotIn('', self.m.data)
        with self.assertRaises(InvalidArgumentException):
            self.m.set_notification({'title': 'Hello', '': 'empty'})
        self.assertNotIn('', self.m.notification)

    def test_boolean_fields_sent_as_booleans(self):
        self.m.set_dry_run(1).set_delay_while_idle('yes')
        self.assertIs(True, self.m.dry_run)
        self.assertIs(True, self.m.delay_while_idle)
        self.assertIn('"dry_run":true', self.m.to_json())
        self.assertIn('"delay_while_idle":true', self.m.to_json())
        self.m.set_dry_run(0)
        self.assertOmitted('dry_run')
