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

import json
import logging
import time

import requests

from keystone_sdk import version
from keystone_sdk.api.common import exceptions
from keystone_sdk.api.common import marshal
from keystone_sdk.api.common import masking
from keystone_sdk.api.common import results

LOG = logging.getLogger(__name__)


class HTTPJSONRESTClient(object):
    """
    An HTTP REST Client that sends and recieves JSON data as the body of the
    HTTP request.

    :param api_url: The url to the service
                    ie. http://<keystone server>:5000
    :type api_url: str
    :param insecure: Skip the verification of the server certificate
    :type insecure: bool
    :param http_log_debug: Log requests and responses to the console
    :type http_log_debug: bool
    :param timeout: Seconds to wait for the server before giving up
    :type timeout: float
    :param user_agent: The User-Agent sent with every request
    :type user_agent: str
    :param session: The requests session used to send the requests
    :type session: :class:`requests.Session`

    """

    USER_AGENT = version.DEFAULT_USER_AGENT
    AUTH_TOKEN_HEADER = 'X-Auth-Token'
    DEFAULT_TIMEOUT = 10
    http_log_debug = False
    _logger = logging.getLogger(__name__)

    def __init__(self, api_url, insecure=False, http_log_debug=False,
                 timeout=None, user_agent=None, session=None):
        self.auth_token = None
        self.auth_try = 0
        self.insecure = insecure
        self.timeout = timeout or self.DEFAULT_TIMEOUT
        self.user_agent = user_agent or self.USER_AGENT
        self.session = session or requests.Session()

        self.set_url(api_url)
        self.set_debug_flag(http_log_debug)

        self.times = []  # [("item", starttime, endtime), ...]

    def set_url(self, api_url):
        self.api_url = api_url.rstrip('/')

    def set_debug_flag(self, flag):
        """
        This turns on/off http request/response debugging output to console

        :param flag: Set to True to enable debugging output
        :type flag: bool

        """
        if not HTTPJSONRESTClient.http_log_debug and flag:
            ch = logging.StreamHandler()
            HTTPJSONRESTClient._logger.setLevel(logging.DEBUG)
            HTTPJSONRESTClient._logger.addHandler(ch)
            HTTPJSONRESTClient.http_log_debug = True

    def get_timings(self):
        """
        Ths gives an array of the request timings since last reset_timings call
        """
        return self.times

    def reset_timings(self):
        """
        This resets the request/response timings array
        """
        self.times = []

    def _debug_enabled(self):
        return (self.http_log_debug or
                HTTPJSONRESTClient._logger.isEnabledFor(logging.DEBUG))

    def _http_log_req(self, method, url, headers, params, body):
        if not self._debug_enabled():
            return

        string_parts = ['curl -i', ' -X %s' % method]
        if params:
            url = requests.Request(method, url, params=params).prepare().url
        string_parts.append(' %s' % url)

        for element in headers:
            value = headers[element]
            if element.lower() in masking.SECRET_HEADERS:
                value = masking.zip_secret(value)
            string_parts.append(' -H "%s: %s"' % (element, value))

        HTTPJSONRESTClient._logger.debug("\nREQ: %s\n" % "".join(string_parts))
        if body is not None:
            shown = json.dumps(masking.mask_body(body))
            HTTPJSONRESTClient._logger.debug("REQ BODY: %s\n" % shown)

    def _http_log_resp(self, resp, body):
        if not self._debug_enabled():
            return
        shown = masking.mask_headers(resp)
        HTTPJSONRESTClient._logger.debug("RESP:%s %s\n", resp.status, shown)
        HTTPJSONRESTClient._logger.debug("RESP BODY:%s\n",
                                         masking.mask_body(body))

    def request(self, url, method, headers=None, body=None, params=None,
                authenticated=False):
        """
        This makes an HTTP Request to the server.
        You should use get, post, delete instead.

        :returns: headers - dict of HTTP Response headers, with the status
                            code and the mapped Result attached as
                            ``status`` and ``result``
        :returns: body - the body of the response.  If the body was JSON, it
                         will be an object
        """
        headers = dict(headers or {})
        if authenticated and self.auth_token:
            headers[self.AUTH_TOKEN_HEADER] = self.auth_token
        headers.setdefault('User-Agent', self.user_agent)
        if 'Accept' not in headers:
            headers['Accept'] = 'application/json'
        payload = None
        if body is not None:
            headers['Content-Type'] = 'application/json'
            payload = json.dumps(body)

        self._http_log_req(method, url, headers, params, body)
        try:
            r = self.session.request(method, url, params=params or None,
                                     data=payload, headers=headers,
                                     timeout=self.timeout,
                                     verify=not self.insecure)
        except requests.exceptions.RequestException as e:
            HTTPJSONRESTClient._logger.debug("Requests Exception:%s", e)
            raise exceptions.RequestException(str(e)).where(
                'url', url).where('method', method)

        resp = r.headers
        raw = r.content
        body = r.text

        # requests keeps the status on the response object only
        resp.status = r.status_code
        resp.result = results.from_status(r.status_code, raw, r.reason)

        r.close()

        # Try and convert the body response to an object
        # This assumes the body of the reply is JSON
        if body:
            try:
                body = json.loads(body)
            except ValueError:
                pass
        else:
            body = None

        self._http_log_resp(resp, body)

        if resp.status >= 400:
            raise exceptions.from_response(resp, body, resp.result)

        return resp, body

    def _full_url(self, url):
        if '://' in url:
            return url
        return self.api_url + url

    def _time_request(self, url, method, **kwargs):
        start_time = time.time()
        resp, body = self.request(self._full_url(url), method, **kwargs)
        self.times.append(("%s %s" % (method, url),
                           start_time, time.time()))
        return resp, body

    def _reauth(self):
        raise exceptions.NoValidToken('re-authentication is not supported')

    def _do_reauth(self, url, method, ex, **kwargs):
        try:
            if self.auth_try != 1:
                self._reauth()
                resp, body = self._time_request(url, method, **kwargs)
                return resp, body
            else:
                raise ex
        except exceptions.HTTPUnauthorized:
            raise ex

    def _cs_request(self, url, method, **kwargs):
        # Perform the request once. If we get a 401 back then it
        # might be because the auth token expired, so try to
        # re-authenticate and try again. If it still fails, bail.
        try:
            resp, body = self._time_request(url, method, **kwargs)
            return resp, body
        except exceptions.HTTPUnauthorized as ex:
            if not kwargs.get('authenticated'):
                raise
            LOG.debug("%s %s unauthorized, re-authenticating", method, url)
            resp, body = self._do_reauth(url, method, ex, **kwargs)
            return resp, body

    def invoke(self, method, url, options=None, output=None,
               authenticated=True):
        """
        Calls an API endpoint, building the request from the options and
        decoding the response into the output.

        .. code-block:: python

            #example call
            token, result = http.invoke('GET', '/v3/auth/tokens',
                                        ReadTokenOptions(subject_token=t),
                                        TokenOutput)

        :param method: The HTTP verb
        :type method: str
        :param url: The url, relative to api_url, or a full URI
        :type url: str
        :param options: Fields for query parameters, headers and body
        :type options: :class:`keystone_sdk.api.common.marshal.Options`
        :param output: The class to decode the response into
        :type output: :class:`keystone_sdk.api.common.marshal.Output`
        :param authenticated: Send the X-Auth-Token of this client
        :type authenticated: bool

        :returns: output - an instance of output, or None
        :returns: result - the Result of the call
        """
        LOG.debug("calling method %s on URL %s", method, url)

        if authenticated and not self.auth_token:
            LOG.error("no valid token available for authenticated call")
            raise exceptions.NoValidToken().where('url', url)

        params, headers, body = marshal.build_request(options)
        resp, body = self._cs_request(url, method, headers=headers,
                                      body=body, params=params,
                                      authenticated=authenticated)
        result = resp.result

        if not result.is_informational() and not result.is_success():
            LOG.warning("status code indicates some problem: %s", result)

        entity = None
        if output is not None:
            entity = output.from_response(resp, body)
        return entity, result

    def get(self, url, **kwargs):
        """
        Make an HTTP GET request to the server.

        .. code-block:: python

            #example call
            try:
                headers, body = http.get('/v3/auth/catalog',
                                         authenticated=True)
            except exceptions.HTTPUnauthorized as ex:
                print("Not logged in")

        :param url: The relative url from the api_url
        :type url: str

        :returns: headers - dict of HTTP Response headers
        :returns: body - the body of the response.  If the body was JSON, it
                         will be an object
        """
        return self._cs_request(url, 'GET', **kwargs)

    def post(self, url, **kwargs):
        """
        Make an HTTP POST request to the server.

        .. code-block:: python

            #example call
            info = {'auth': {'identity': {'methods': ['token'],
                                          'token': {'id': token}}}}
            headers, body = http.post('/v3/auth/tokens', body=info)

        :param url: The relative url from the api_url
        :type url: str

        :returns: headers - dict of HTTP Response headers
        :returns: body - the body of the response.  If the body was JSON, it
                         will be an object
        """
        return self._cs_request(url, 'POST', **kwargs)

    def put(self, url, **kwargs):
        return self._cs_request(url, 'PUT', **kwargs)

    def patch(self, url, **kwargs):
        return self._cs_request(url, 'PATCH', **kwargs)

    def delete(self, url, **kwargs):
        return self._cs_request(url, 'DELETE', **kwargs)

    def head(self, url, **kwargs):
        return self._cs_request(url, 'HEAD', **kwargs)
