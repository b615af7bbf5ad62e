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
Exceptions raised by the Keystone client.

.. module: exceptions

:Description: Exceptions for both local errors (invalid input, no token)
 and errors returned by the Identity service, one class per HTTP status.

"""


class ClientException(Exception):
    """
    The base exception class for all exceptions this library raises.

    :param error: The error detail, either a message or the 'error'
                  object of a Keystone error response
    :type error: str or dict
    :param result: The result of the API call, if there was one
    :type result: :class:`keystone_sdk.api.common.results.Result`

    """
    message = 'Unknown error'
    http_status = None
    _error_code = None
    _error_title = None
    _error_desc = None

    def __init__(self, error=None, result=None):
        self.result = result
        self.info = {}
        if isinstance(error, dict):
            if 'code' in error:
                self._error_code = error['code']
            if 'title' in error:
                self._error_title = error['title']
            if 'message' in error:
                self._error_desc = error['message']
        elif error:
            self._error_desc = error
        super(ClientException, self).__init__(self.__str__())

    def get_code(self):
        return self._error_code or self.http_status

    def get_title(self):
        return self._error_title

    def get_description(self):
        return self._error_desc

    def where(self, key, value):
        """
        Adds contextual information to the exception.

        .. code-block:: python

            raise exceptions.InvalidInput().where('auth_url', 'is required')

        :returns: the exception itself, so that calls can be chained
        """
        self.info[key] = value
        self.args = (self.__str__(),)
        return self

    def __str__(self):
        formatted_string = self.message
        if self.http_status:
            formatted_string += " (HTTP %s)" % self.http_status
        if self._error_desc:
            formatted_string += ": %s" % self._error_desc
        if self.info:
            formatted_string += " (%s)" % ", ".join(
                "%s: %s" % (key, self.info[key]) for key in sorted(self.info))
        return formatted_string


##
# Local errors
##
class InvalidInput(ClientException):
    message = 'Invalid input value'


class InvalidReference(ClientException):
    message = 'Invalid object reference'


class NoValidToken(ClientException):
    message = 'No valid token for authenticated call'


class RequestException(ClientException):
    """
    The request could not be sent or no response was received
    (connection refused, DNS failure, timeout...).
    """
    message = 'Unable to complete request'


class EndpointNotFound(ClientException):
    message = 'No matching endpoint in the catalog'


##
# HTTP errors
##
class HTTPBadRequest(ClientException):
    """
    HTTP 400 - the request could not be parsed: a required attribute was
    missing, an attribute that is not allowed was specified or an
    attribute of an unexpected type was specified.
    """
    http_status = 400
    message = 'Bad request'


class HTTPUnauthorized(ClientException):
    """
    HTTP 401 - authentication was not performed, the X-Auth-Token is not
    valid or the credentials are not valid.
    """
    http_status = 401
    message = 'Unauthorized'


class HTTPForbidden(ClientException):
    """
    HTTP 403 - the identity was authenticated but is not authorized to
    perform the requested action.
    """
    http_status = 403
    message = 'Forbidden'


class HTTPNotFound(ClientException):
    http_status = 404
    message = 'Not found'


class HTTPMethodNotAllowed(ClientException):
    http_status = 405
    message = 'Method not allowed'


class HTTPConflict(ClientException):
    http_status = 409
    message = 'Conflict'


class HTTPRequestEntityTooLarge(ClientException):
    http_status = 413
    message = 'Request entity too large'


class HTTPUnsupportedMediaType(ClientException):
    http_status = 415
    message = 'Unsupported media type'


class HTTPServerError(ClientException):
    http_status = 500
    message = 'Error'


class HTTPServiceUnavailable(ClientException):
    http_status = 503
    message = 'Service unavailable'


_code_map = dict((c.http_status, c) for c in [
    HTTPBadRequest,
    HTTPUnauthorized,
    HTTPForbidden,
    HTTPNotFound,
    HTTPMethodNotAllowed,
    HTTPConflict,
    HTTPRequestEntityTooLarge,
    HTTPUnsupportedMediaType,
    HTTPServerError,
    HTTPServiceUnavailable,
])


def from_response(response, body, result=None):
    """
    Return an instance of a ClientException or subclass
    based on a requests response.

    Usage::

        resp, body = http.request(...)
        if resp.status != 200:
            raise exceptions.from_response(resp, body)

    :param response: The response headers, with the HTTP status code
                     attached as ``status``
    :param body: The decoded response body
    :param result: The result mapped from the status code

    """
    status = response.status
    cls = _code_map.get(status)
    if cls is None:
        cls = HTTPServerError if status >= 500 else ClientException
    if isinstance(body, dict) and isinstance(body.get('error'), dict):
        exc = cls(body['error'], result=result)
    elif body and not isinstance(body, (dict, list)):
        exc = cls(str(body), result=result)
    else:
        exc = cls(result=result)
    if cls is ClientException or (cls is HTTPServerError and status != 500):
        exc.http_status = status
        exc.args = (exc.__str__(),)
    return exc
