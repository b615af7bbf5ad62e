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
Identity v3 resources, as exchanged in the JSON entities of the API.

See https://developer.openstack.org/api-ref/identity/v3/
"""

import datetime

from keystone_sdk.api.common import exceptions
from keystone_sdk.api.common import masking


class Resource(object):
    """
    Base class for Keystone resources.

    Subclasses list the attributes they expose in ``_attrs``; ``_nested``
    maps attributes holding other resources to their class (wrapped in a
    list when the attribute is a list of resources) and ``_keys`` maps
    attributes whose JSON key is not a valid identifier.
    Every attribute is optional: None means the key is absent.

    """
    _attrs = []
    _nested = {}
    _keys = {}

    def __init__(self, info=None, **kwargs):
        data = dict(info or {})
        data.update(kwargs)
        unknown = [k for k in kwargs if k not in self._attrs]
        if unknown:
            raise TypeError("%s got unexpected attributes: %s" %
                            (type(self).__name__, ", ".join(sorted(unknown))))
        self._info = data
        for attr in self._attrs:
            value = data.get(attr)
            if value is None:
                value = data.get(self._keys.get(attr, attr))
            setattr(self, attr, self._decode(attr, value))

    @classmethod
    def from_dict(cls, data):
        if data is None:
            return None
        if isinstance(data, cls):
            return data
        return cls(data)

    def _decode(self, attr, value):
        if value is None or attr not in self._nested:
            return value
        nested = self._nested[attr]
        if isinstance(nested, list):
            return [nested[0].from_dict(item) for item in value]
        return nested.from_dict(value)

    def to_dict(self):
        """Returns the JSON entity, without the attributes that are unset."""
        data = {}
        for attr in self._attrs:
            value = getattr(self, attr, None)
            if value is None:
                continue
            if isinstance(value, Resource):
                value = value.to_dict()
            elif isinstance(value, list):
                value = [v.to_dict() if isinstance(v, Resource) else v
                         for v in value]
            data[self._keys.get(attr, attr)] = value
        return data

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __ne__(self, other):
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return equal
        return not equal

    __hash__ = None

    def __repr__(self):
        shown = ["%s=%r" % (attr, masking.MASK if attr in masking.SECRET_KEYS
                            else getattr(self, attr))
                 for attr in self._attrs
                 if attr not in ('links', 'catalog')
                 and getattr(self, attr, None) is not None]
        return "<%s %s>" % (type(self).__name__, ", ".join(shown))


def parse_isotime(value):
    """
    Parses a Keystone timestamp, ie. '2015-11-06T15:32:17.893769Z', into a
    timezone aware datetime; naive timestamps are taken as UTC.
    """
    if value is None:
        return None
    text = value.strip()
    if text.endswith('Z') or text.endswith('z'):
        text = text[:-1] + '+00:00'
    try:
        parsed = datetime.datetime.fromisoformat(text)
    except ValueError:
        raise exceptions.InvalidInput(
            'Invalid timestamp').where('value', value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed


class Links(Resource):
    """
    Links to the resource itself and to its immediate siblings, if any.
    """
    _attrs = ['self', 'previous', 'next']


class Domain(Resource):
    """
    A container of users, projects and roles.
    """
    _attrs = ['id', 'name', 'description', 'enabled', 'links']
    _nested = {'links': Links}


class Project(Resource):
    """
    A container that groups or isolates resources or identity objects;
    a project can itself act as a domain.
    """
    _attrs = ['id', 'name', 'domain', 'domain_id', 'parent_id',
              'description', 'enabled', 'is_domain', 'links']
    _nested = {'domain': Domain, 'links': Links}


class Role(Resource):
    _attrs = ['id', 'name', 'domain_id', 'links']
    _nested = {'links': Links}


class User(Resource):
    _attrs = ['id', 'name', 'domain', 'domain_id', 'password',
              'password_expires_at', 'default_project_id', 'description',
              'email', 'enabled', 'links']
    _nested = {'domain': Domain, 'links': Links}


class Endpoint(Resource):
    """
    The address of one interface of a service; ``interface`` is one of
    'public', 'internal' and 'admin'.
    """
    _attrs = ['id', 'interface', 'region', 'region_id', 'url', 'service_id',
              'enabled']


class Service(Resource):
    """
    An OpenStack service, such as Compute (nova) or Image (glance), with
    the endpoints through which it can be reached.
    """
    _attrs = ['id', 'name', 'type', 'description', 'enabled', 'endpoints',
              'links']
    _nested = {'endpoints': [Endpoint], 'links': Links}


class System(Resource):
    _attrs = ['all']


class Scope(Resource):
    """
    The scope of a token: a project, a domain or the whole system, but
    never more than one of them.
    """
    _attrs = ['project', 'domain', 'system']
    _nested = {'project': Project, 'domain': Domain}

    def validate(self):
        targets = [attr for attr in self._attrs
                   if getattr(self, attr) is not None]
        if len(targets) != 1:
            raise exceptions.InvalidInput(
                'Scope must have exactly one of project, domain or '
                'system').where('scope', ", ".join(targets) or 'none')
        return self


class AppCredential(Resource):
    """
    A secret issued to an application so that it can act on behalf of a
    user on a subset of the user's roles.
    """
    _attrs = ['id', 'name', 'secret', 'description', 'expires_at',
              'project_id', 'roles', 'unrestricted', 'user', 'links']
    _nested = {'roles': [Role], 'user': User, 'links': Links}


class Token(Resource):
    """
    An authentication token and all its metadata.

    ``value`` is not part of the JSON entity: it holds the token itself,
    as returned in the X-Subject-Token header.

    """
    _attrs = ['issued_at', 'expires_at', 'user', 'roles', 'methods',
              'audit_ids', 'project', 'domain', 'system', 'is_domain',
              'catalog']
    _nested = {'user': User, 'roles': [Role], 'project': Project,
               'domain': Domain, 'catalog': [Service]}

    def __init__(self, info=None, value=None, **kwargs):
        super(Token, self).__init__(info, **kwargs)
        self.value = value

    @property
    def expires(self):
        return parse_isotime(self.expires_at)

    def is_expired(self, now=None):
        expires = self.expires
        if expires is None:
            return False
        now = now or datetime.datetime.now(datetime.timezone.utc)
        return now >= expires

    @property
    def scope(self):
        if self.project is not None:
            return 'project'
        if self.domain is not None:
            return 'domain'
        if self.system is not None:
            return 'system'
        return 'unscoped'

    def __repr__(self):
        return "<Token scope=%s, expires_at=%s, user=%r>" % (
            self.scope, self.expires_at, self.user)


class Version(Resource):
    """
    An API version published by the service at its root URL.
    """
    _attrs = ['id', 'status', 'updated', 'links', 'media_types']
    _keys = {'media_types': 'media-types'}
