# (c) Copyright [2015] Hewlett Packard Enterprise Development LP
#
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.

"""
Keeps the token of a client valid: the token is renewed shortly before it
expires, from a background timer, and whenever the service rejects it.

.. code-block:: python

    auth = Authenticator(client)
    token = auth.login(CreateTokenOptions(user_name='admin',
                                          user_domain_name='Default',
                                          user_password='secret'))
    ...
    auth.logout()

"""

import datetime
import logging
import threading

from keystone_sdk.api.common import exceptions

LOG = logging.getLogger(__name__)

DEFAULT_REFRESH_MARGIN = 60
# seconds, lower bound of the delay before renewing an expiring token
MIN_REFRESH_DELAY = 5


class Authenticator(object):
    """
    The token slot of a :class:`KeystoneClient`.

    :param client: The client to authenticate
    :type client: :class:`KeystoneClient`
    :param refresh_margin: Seconds before expiry at which the token is renewed
    :type refresh_margin: float
    :param auto_refresh: Renew the token from a background timer
    :type auto_refresh: bool

    """

    def __init__(self, client, refresh_margin=None, auto_refresh=True):
        self.client = client
        if refresh_margin is None:
            refresh_margin = DEFAULT_REFRESH_MARGIN
        self.refresh_margin = refresh_margin
        self.auto_refresh = auto_refresh
        self._lock = threading.RLock()
        self._token = None
        self._options = None
        self._timer = None
        client.set_reauth_callback(self.refresh)

    @property
    def token(self):
        with self._lock:
            return self._token

    def get_token_id(self):
        with self._lock:
            if self._token is None:
                return None
            return self._token.value

    def is_authenticated(self):
        with self._lock:
            return self._token is not None

    def login(self, options):
        """
        Authenticates with the given options, which are kept to renew the
        token later on.

        :returns: the new Token
        """
        with self._lock:
            token = self.client.login(options)
            self._options = options
            self._set_token(token)
            return token

    def refresh(self):
        """
        Authenticates again with the options of the last login.
        """
        with self._lock:
            if self._options is None:
                raise exceptions.NoValidToken('Never logged in')
            LOG.debug("refreshing token")
            token = self.client.login(self._options)
            self._set_token(token)
            return token

    def logout(self):
        """
        Revokes the token on the server and forgets it.
        """
        with self._lock:
            self._cancel_timer()
            try:
                self.client.logout()
            finally:
                self._token = None
                self._options = None

    def close(self):
        with self._lock:
            self._cancel_timer()

    def _set_token(self, token):
        self._token = token
        self._schedule(token)

    def refresh_delay(self, token, now=None):
        """
        Returns the seconds to wait before renewing the token, or None if
        the token does not expire.
        """
        expires = token.expires if token is not None else None
        if expires is None:
            return None
        now = now or datetime.datetime.now(datetime.timezone.utc)
        remaining = (expires - now).total_seconds()
        if remaining <= self.refresh_margin:
            return max(remaining / 2.0, MIN_REFRESH_DELAY)
        return remaining - self.refresh_margin

    def _schedule(self, token):
        self._cancel_timer()
        if not self.auto_refresh:
            return
        delay = self.refresh_delay(token)
        if delay is None:
            LOG.debug("token does not expire, no refresh scheduled")
            return
        LOG.debug("token refresh scheduled in %.1f seconds", delay)
        self._timer = threading.Timer(delay, self._on_timer)
        self._timer.daemon = True
        self._timer.start()

    def _cancel_timer(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_timer(self):
        try:
            self.refresh()
        except exceptions.ClientException:
            # keep the old token; a 401 will trigger a new login
            LOG.exception("scheduled token refresh failed")
