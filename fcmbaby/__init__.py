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

import logging

import httpx

from fcmbaby.message import Message
from fcmbaby.response import Response, RESULT_MESSAGE_ID, RESULT_ERROR, RESULT_CANONICAL
from fcmbaby.payload import json_for_payload, decode_body
from fcmbaby.exceptions import (
    FcmException, InvalidArgumentException, ConflictException, SendFailedException,
    AuthenticationException, BadRequestException, ServerErrorException, ProtocolException,
)
from fcmbaby.version import __version__


logger = logging.getLogger(__name__)


class FcmBaby:
    """
    This class is all that you should need to use in the majority of cases.
    Sending a push can be achieved using the send() method:

        fcm = FcmBaby(api_key='my server key')
        msg = Message().set_registration_ids(tokens).add_data('event_id', event_id)
        try:
            resp = fcm.send(msg)
        except ServerErrorException as e:
            [try again later, after e.retry_after if set]

        for token, error in resp.get_result(RESULT_ERROR).items():
            [handle error]
    """
    SERVER_URI = 'https://fcm.googleapis.com/fcm/send'
    MAX_REDIRECTS = 5

    def __init__(self, api_key, http_client=None, endpoint=None):
        """
        Args:
            api_key: The server key for the FCM project
            http_client: An httpx.Client to send requests with. If not given,
                         one is created the first time it is needed.
            endpoint: URI to send to instead of the FCM server.
                      This is useful only for testing.
        """
        self.api_key = api_key
        self._http_client = http_client
        self._own_http_client = False
        self.endpoint = endpoint or FcmBaby.SERVER_URI

    @property
    def api_key(self):
        return self._api_key

    @api_key.setter
    def api_key(self, api_key):
        if not api_key:
            raise InvalidArgumentException("The api key must be a non-empty string")
        self._api_key = api_key

    @property
    def http_client(self):
        if self._http_client is None:
            self._http_client = httpx.Client(follow_redirects=False)
            self._own_http_client = True
        return self._http_client

    @http_client.setter
    def http_client(self, http_client):
        self._http_client = http_client
        self._own_http_client = False

    def send(self, message):
        """
        Sends a message and blocks until FCM responds. Network failures
        from httpx are propagated.
        Args:
            message (Message): The message to send
        Returns:
            A Response with the outcome for each registration id
        Throws:
            AuthenticationException: The api key was rejected (401)
            BadRequestException: FCM could not parse the message (400)
            ServerErrorException: FCM failed or is unavailable (500, 503)
            ProtocolException: The response body was not a JSON object
            InvalidArgumentException: The response was missing required fields
        """
        body = json_for_payload(message.to_dict())
        headers = {
            'Authorization': 'key=%s' % (self.api_key,),
            'Content-Length': str(len(body)),
            'Content-Type': 'application/json',
        }

        logger.info("Sending message to %d registration ids", len(message.registration_ids))
        resp = self._post(self.endpoint, body, headers)

        status = resp.status_code
        if status == 500:
            logger.warning("FCM returned 500 Internal Server Error")
            raise ServerErrorException("500 Internal Server Error", status_code=status)
        elif status == 503:
            retry_after = resp.headers.get('Retry-After')
            detail = "503 Server Unavailable"
            if retry_after:
                detail += "; Retry After: %s" % (retry_after,)
            logger.warning("FCM returned %s", detail)
            raise ServerErrorException(detail, status_code=status, retry_after=retry_after)
        elif status == 401:
            logger.warning("FCM rejected our api key")
            raise AuthenticationException("401 Forbidden; Authentication Error", status_code=status)
        elif status == 400:
            logger.warning("FCM rejected message as invalid")
            raise BadRequestException("400 Bad Request; invalid message", status_code=status)

        decoded = decode_body(resp.content)
        if not decoded or not isinstance(decoded, dict):
            logger.error("Couldn't decode body of %d response from FCM", status)
            raise ProtocolException(
                "Response body did not contain a valid JSON response", status_code=status
            )

        response = Response(decoded, message)
        logger.info(
            "Message %d sent: %d succeeded, %d failed, %d canonical ids",
            response.multicast_id, response.success_count,
            response.failure_count, response.canonical_count,
        )
        return response

    def _post(self, url, body, headers):
        # Redirects are followed here rather than by httpx, which would turn
        # the POST into a GET without a body for 301, 302 and 303.
        resp = self.http_client.post(url, content=body, headers=headers, follow_redirects=False)
        redirects = 0
        while resp.is_redirect:
            if redirects >= FcmBaby.MAX_REDIRECTS:
                logger.error("Gave up after %d redirects", redirects)
                raise ProtocolException(
                    "Too many redirects (%d)" % (redirects,), status_code=resp.status_code
                )
            url = resp.url.join(resp.headers['Location'])
            redirects += 1
            logger.info("Redirected (%d) to %s", resp.status_code, url)
            resp = self.http_client.post(url, content=body, headers=headers, follow_redirects=False)
        return resp

    def close(self):
        """
        Closes the HTTP client, if it was created by us.
        """
        if self._own_http_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None
            self._own_http_client = False
