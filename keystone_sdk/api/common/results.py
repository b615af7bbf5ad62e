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
Compact representation of the outcome of an HTTP API call.
"""


class Result(object):
    """
    The result of an API call, as mapped from the HTTP status code.

    :param code: The HTTP status code
    :type code: int
    :param status: The HTTP reason phrase, ie. 'Not Found'
    :type status: str
    :param description: A human readable explanation of the code
    :type description: str
    :param data: The raw response payload, if any
    :type data: bytes

    """

    def __init__(self, code, status, description, data=None):
        self.code = code
        self.status = status
        self.description = description
        self.data = data

    def __str__(self):
        return "%d - %s (%d bytes)" % (self.code, self.status,
                                       len(self.data or b''))

    def __repr__(self):
        return "<Result %s>" % self

    def __eq__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        return (self.code, self.status) == (other.code, other.status)

    def __ne__(self, other):
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return equal
        return not equal

    def __hash__(self):
        return hash((self.code, self.status))

    def with_data(self, data):
        return Result(self.code, self.status, self.description, data)

    def is_informational(self):
        return 100 <= self.code < 200

    def is_success(self):
        return 200 <= self.code < 300

    def is_redirection(self):
        return 300 <= self.code < 400

    def is_client_error(self):
        return 400 <= self.code < 500

    def is_server_error(self):
        return 500 <= self.code < 600

    def is_unofficial(self):
        return self.code >= 600


SUCCESS = Result(200, 'OK', 'Request was successful.')

CREATED = Result(201, 'Created', 'Resource was created and is ready to use.')

ACCEPTED = Result(202, 'Accepted',
                  'Request was accepted for processing.')

NO_CONTENT = Result(204, 'No Content',
                    'There is no data associated with the requested '
                    'resource.')

MULTIPLE_CHOICES = Result(300, 'Multiple Choices',
                          'The resource is available in multiple versions.')

BAD_REQUEST = Result(400, 'Bad Request',
                     'Some content in the request was invalid.')

UNAUTHORIZED = Result(401, 'Unauthorized',
                      'User must authenticate before making a request.')

FORBIDDEN = Result(403, 'Forbidden',
                   'Policy does not allow current user to do this '
                   'operation.')

NOT_FOUND = Result(404, 'Not Found',
                   'The requested resource could not be found.')

METHOD_NOT_ALLOWED = Result(405, 'Method Not Allowed',
                            'Method is not valid for this endpoint.')

# a client tried to update a unique attribute for an entity, which conflicts
# with that of another entity in the same collection, or issued a create
# operation twice on a collection with a user-defined unique attribute
CONFLICT = Result(409, 'Conflict', 'A POST or PATCH operation failed.')

REQUEST_ENTITY_TOO_LARGE = Result(413, 'Request Entity Too Large',
                                  'The request is larger than the server is '
                                  'willing or able to process.')

UNSUPPORTED_MEDIA_TYPE = Result(415, 'Unsupported Media Type',
                                'The request entity has a media type which '
                                'the server or resource does not support.')

INTERNAL_SERVER_ERROR = Result(500, 'Internal Server Error',
                               'Something went wrong inside the service.')

SERVICE_UNAVAILABLE = Result(503, 'Service Unavailable',
                             'Service is not available.')

_RESULTS = dict((r.code, r) for r in [
    SUCCESS,
    CREATED,
    ACCEPTED,
    NO_CONTENT,
    MULTIPLE_CHOICES,
    BAD_REQUEST,
    UNAUTHORIZED,
    FORBIDDEN,
    NOT_FOUND,
    METHOD_NOT_ALLOWED,
    CONFLICT,
    REQUEST_ENTITY_TOO_LARGE,
    UNSUPPORTED_MEDIA_TYPE,
    INTERNAL_SERVER_ERROR,
    SERVICE_UNAVAILABLE,
])


def from_status(code, data=None, reason=None):
    """
    Maps an HTTP status code to the corresponding API result.

    :param code: The HTTP status code of the response
    :type code: int
    :param data: The raw response payload
    :type data: bytes
    :param reason: The reason phrase sent by the server, used for codes
                   that have no canned result
    :type reason: str

    :returns: a new Result carrying the response data
    """
    known = _RESULTS.get(code)
    if known is not None:
        return known.with_data(data)
    return Result(code, reason or 'Unknown', 'Unknown error.', data)
