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
Declarative marshalling of API requests and responses.

An API call is described by an options class, whose fields say where each
value goes in the request, and by an output class, whose fields say where
each value comes from in the response:

.. code-block:: python

    class ReadTokenOptions(Options):
        no_catalog = QueryParam('nocatalog')
        subject_token = HeaderParam('X-Subject-Token')

    class TokenOutput(Output):
        subject_token = ResponseHeader('X-Subject-Token')
        token = ResponseEntity('token', data.Token)

    params, headers, body = build_request(ReadTokenOptions(
        subject_token=token))
    output = TokenOutput.from_response(resp, body)

Fields are looked up on the whole class hierarchy, so options can be
composed by inheritance.

"""

import logging

from keystone_sdk.api.common import data
from keystone_sdk.api.common import masking

LOG = logging.getLogger(__name__)

QUERY = 'query'
HEADER = 'header'
BODY = 'body'
RESPONSE_HEADER = 'response-header'
RESPONSE_ENTITY = 'response-entity'


def _plain(value):
    if isinstance(value, data.Resource):
        return value.to_dict()
    if isinstance(value, list):
        return [v.to_dict() if isinstance(v, data.Resource) else v
                for v in value]
    return value


class Param(object):
    """
    A field of an options or output class.

    :param name: The name on the wire: query parameter, header or JSON key
    :type name: str
    :param omit_empty: Skip the field when its value is None, False, an
                       empty string or an empty collection
    :type omit_empty: bool
    :param default: The value of the field when it is not set
    """
    location = None

    def __init__(self, name, omit_empty=True, default=None):
        self.name = name
        self.omit_empty = omit_empty
        self.default = default
        self.attr = None

    def __set_name__(self, owner, attr):
        self.attr = attr

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance.__dict__.get(self.attr, self.default)

    def __set__(self, instance, value):
        instance.__dict__[self.attr] = value

    def is_empty(self, value):
        if value is None or value is False:
            return True
        if isinstance(value, (str, bytes, list, tuple, dict, set)):
            return len(value) == 0
        return False

    def serialize(self, value):
        return value


class QueryParam(Param):
    location = QUERY

    def serialize(self, value):
        if isinstance(value, bool):
            return 'true' if value else 'false'
        if isinstance(value, (list, tuple)):
            return ','.join(self.serialize(v) for v in value)
        return str(value)


class HeaderParam(Param):
    location = HEADER

    def serialize(self, value):
        return str(value)


class BodyParam(Param):
    location = BODY

    def serialize(self, value):
        return _plain(value)


class ResponseHeader(Param):
    location = RESPONSE_HEADER


class ResponseEntity(Param):
    """
    A key of the JSON response body, decoded into ``resource`` (or into a
    list of ``resource`` when ``many`` is set).
    """
    location = RESPONSE_ENTITY

    def __init__(self, name, resource=None, many=False, **kwargs):
        super(ResponseEntity, self).__init__(name, **kwargs)
        self.resource = resource
        self.many = many

    def deserialize(self, value):
        if value is None or self.resource is None:
            return value
        if self.many:
            return [self.resource.from_dict(v) for v in value]
        return self.resource.from_dict(value)


def get_params(cls, location=None):
    """
    Returns the (attribute, field) pairs declared by the class and its
    bases, in declaration order, optionally restricted to one location.
    """
    params = []
    seen = set()
    for klass in reversed(cls.__mro__):
        for attr, value in vars(klass).items():
            if not isinstance(value, Param):
                continue
            if attr in seen:
                params = [(a, p) for a, p in params if a != attr]
            seen.add(attr)
            params.append((attr, value))
    if location is not None:
        params = [(a, p) for a, p in params if p.location == location]
    return params


class Options(object):
    """
    Base class for the options of an API call.
    """

    def __init__(self, **kwargs):
        known = dict(get_params(type(self)))
        for key, value in kwargs.items():
            if key not in known:
                raise TypeError("%s got an unexpected option '%s'" %
                                (type(self).__name__, key))
            setattr(self, key, value)

    def __repr__(self):
        shown = []
        for attr, param in get_params(type(self)):
            value = getattr(self, attr)
            if value is None:
                continue
            if (param.location in (HEADER, RESPONSE_HEADER) and
                    'token' in param.name.lower()):
                value = masking.MASK
            elif param.location in (BODY, RESPONSE_ENTITY):
                value = masking.mask_body(
                    {param.name: _plain(value)})[param.name]
            shown.append("%s=%r" % (attr, value))
        return "<%s %s>" % (type(self).__name__, ", ".join(shown))


class Output(Options):
    """
    Base class for the output of an API call.
    """

    @classmethod
    def from_response(cls, headers, body):
        output = cls()
        for attr, param in get_params(cls, RESPONSE_HEADER):
            if headers is not None:
                setattr(output, attr, headers.get(param.name))
        for attr, param in get_params(cls, RESPONSE_ENTITY):
            if isinstance(body, dict):
                setattr(output, attr, param.deserialize(body.get(param.name)))
        return output


def _collect(options, location):
    values = {}
    for attr, param in get_params(type(options), location):
        value = getattr(options, attr)
        if param.omit_empty and param.is_empty(value):
            continue
        if value is None:
            continue
        values[param.name] = param.serialize(value)
    return values


def build_request(options):
    """
    Translates the options of an API call into its query parameters,
    headers and JSON body.

    :param options: The options of the call, or None
    :type options: :class:`Options`

    :returns: params - dict of query parameters
    :returns: headers - dict of request headers
    :returns: body - dict to be sent as JSON, or None if no body field is set
    """
    if options is None:
        return {}, {}, None
    if not isinstance(options, Options):
        raise TypeError("only Options can be passed as API options, got %s" %
                        type(options).__name__)
    params = _collect(options, QUERY)
    headers = _collect(options, HEADER)
    body = _collect(options, BODY) or None
    LOG.debug("request built from %r: params %s, headers %s",
              options, params, sorted(headers))
    return params, headers, body
