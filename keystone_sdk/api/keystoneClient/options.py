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
Options and outputs of the Identity v3 API calls.
"""

import logging

from keystone_sdk.api.common import data
from keystone_sdk.api.common import exceptions
from keystone_sdk.api.common import marshal

LOG = logging.getLogger(__name__)

PASSWORD = 'password'
TOKEN = 'token'
APPLICATION_CREDENTIAL = 'application_credential'

UNSCOPED = 'unscoped'

TIME_FILTER_OPERATORS = ('lt', 'lte', 'gt', 'gte', 'eq', 'neq')


def _is_set(value):
    return value is not None and len(value.strip()) > 0


class CreateTokenOptions(object):
    """
    All the options for password based, token based and application
    credential based logon, both scoped and unscoped, with or without the
    catalog of the available services.

    The authentication method is chosen in this order: password (when a
    password is given), token (when a token id is given), application
    credential (when an application credential id or name is given).

    The scope is chosen in this order: project by id; project by name,
    within the domain given by id or else by name; domain by id; domain by
    name; the whole system; explicitly unscoped. With none of these the
    token is implicitly unscoped (or scoped to the user's default project,
    as the server decides).

    """

    def __init__(self, user_id=None, user_name=None, user_domain_id=None,
                 user_domain_name=None, user_password=None, token_id=None,
                 app_credential_id=None, app_credential_name=None,
                 app_credential_secret=None, scope_project_id=None,
                 scope_project_name=None, scope_domain_id=None,
                 scope_domain_name=None, scope_system=False,
                 unscoped_token=False, no_catalog=False,
                 authenticated=False):
        self.user_id = user_id
        self.user_name = user_name
        self.user_domain_id = user_domain_id
        self.user_domain_name = user_domain_name
        self.user_password = user_password
        self.token_id = token_id
        self.app_credential_id = app_credential_id
        self.app_credential_name = app_credential_name
        self.app_credential_secret = app_credential_secret
        self.scope_project_id = scope_project_id
        self.scope_project_name = scope_project_name
        self.scope_domain_id = scope_domain_id
        self.scope_domain_name = scope_domain_name
        self.scope_system = scope_system
        self.unscoped_token = unscoped_token
        self.no_catalog = no_catalog
        # send the client's own X-Auth-Token along
        self.authenticated = authenticated

    def __repr__(self):
        shown = ["%s=%r" % (k, v) for k, v in sorted(vars(self).items())
                 if v not in (None, False) and
                 k not in ('user_password', 'token_id',
                           'app_credential_secret')]
        return "<CreateTokenOptions %s>" % ", ".join(shown)

    @property
    def method(self):
        if self.user_password:
            return PASSWORD
        if self.token_id:
            return TOKEN
        if self.app_credential_id or self.app_credential_name:
            return APPLICATION_CREDENTIAL
        return None

    def _user(self, password=None):
        user = {}
        if _is_set(self.user_id):
            user['id'] = self.user_id
        else:
            if self.user_name:
                user['name'] = self.user_name
            if _is_set(self.user_domain_id):
                user['domain'] = {'id': self.user_domain_id}
            elif _is_set(self.user_domain_name):
                user['domain'] = {'name': self.user_domain_name}
        if password is not None:
            user['password'] = password
        return user

    def build_identity(self):
        method = self.method
        if method == PASSWORD:
            LOG.debug("logging in by password")
            return {
                'methods': [PASSWORD],
                'password': {'user': self._user(self.user_password)},
            }
        if method == TOKEN:
            LOG.debug("logging in by token")
            return {
                'methods': [TOKEN],
                'token': {'id': self.token_id},
            }
        if method == APPLICATION_CREDENTIAL:
            LOG.debug("logging in by application credential")
            if not self.app_credential_secret:
                raise exceptions.InvalidInput(
                    'Application credential requires a secret')
            if _is_set(self.app_credential_id):
                credential = {'id': self.app_credential_id}
            else:
                credential = {'name': self.app_credential_name,
                              'user': self._user()}
            credential['secret'] = self.app_credential_secret
            return {
                'methods': [APPLICATION_CREDENTIAL],
                APPLICATION_CREDENTIAL: credential,
            }
        raise exceptions.InvalidInput(
            'No authentication method').where(
                'options', 'password, token or application credential '
                           'required')

    def build_scope(self):
        if _is_set(self.scope_project_id):
            return data.Scope(project={'id': self.scope_project_id})
        if _is_set(self.scope_project_name):
            if _is_set(self.scope_domain_id):
                domain = {'id': self.scope_domain_id}
            elif _is_set(self.scope_domain_name):
                domain = {'name': self.scope_domain_name}
            else:
                raise exceptions.InvalidInput(
                    'Project name needs its domain').where(
                        'scope_domain_id or scope_domain_name', 'is required')
            return data.Scope(project={'name': self.scope_project_name,
                                       'domain': domain})
        if _is_set(self.scope_domain_id):
            return data.Scope(domain={'id': self.scope_domain_id})
        if _is_set(self.scope_domain_name):
            return data.Scope(domain={'name': self.scope_domain_name})
        if self.scope_system:
            return data.Scope(system={'all': True})
        if self.unscoped_token:
            return UNSCOPED
        return None

    def build_auth(self):
        auth = {'identity': self.build_identity()}
        scope = self.build_scope()
        if isinstance(scope, data.Scope):
            auth['scope'] = scope.validate().to_dict()
        elif scope is not None:
            auth['scope'] = scope
        return auth


class CreateTokenRequest(marshal.Options):
    no_catalog = marshal.QueryParam('nocatalog')
    auth = marshal.BodyParam('auth')


class TokenOutput(marshal.Output):
    subject_token = marshal.ResponseHeader('X-Subject-Token')
    token = marshal.ResponseEntity('token', data.Token)

    def get_token(self):
        token = self.token
        if token is not None and self.subject_token is not None:
            token.value = self.subject_token
        return token


class ReadTokenOptions(marshal.Options):
    """
    The options to validate a token and get its details.
    """
    no_catalog = marshal.QueryParam('nocatalog')
    allow_expired = marshal.QueryParam('allow_expired')
    subject_token = marshal.HeaderParam('X-Subject-Token', omit_empty=False)


class CheckTokenOptions(marshal.Options):
    allow_expired = marshal.QueryParam('allow_expired')
    subject_token = marshal.HeaderParam('X-Subject-Token', omit_empty=False)


class DeleteTokenOptions(marshal.Options):
    subject_token = marshal.HeaderParam('X-Subject-Token', omit_empty=False)


class CatalogOutput(marshal.Output):
    catalog = marshal.ResponseEntity('catalog', data.Service, many=True)
    links = marshal.ResponseEntity('links', data.Links)


class ProjectsOutput(marshal.Output):
    projects = marshal.ResponseEntity('projects', data.Project, many=True)
    links = marshal.ResponseEntity('links', data.Links)


class DomainsOutput(marshal.Output):
    domains = marshal.ResponseEntity('domains', data.Domain, many=True)
    links = marshal.ResponseEntity('links', data.Links)


class SystemsOutput(marshal.Output):
    systems = marshal.ResponseEntity('system', data.System, many=True)
    links = marshal.ResponseEntity('links', data.Links)


class TimeFilter(object):
    """
    A filter on a timestamp, ie. TimeFilter('lt', '2016-12-08T22:02:00Z')
    for the users whose password expires before that time.
    """

    def __init__(self, operator, timestamp):
        if operator not in TIME_FILTER_OPERATORS:
            raise exceptions.InvalidInput(
                'Invalid time filter operator').where('operator', operator)
        self.operator = operator
        self.timestamp = timestamp

    def __str__(self):
        return "%s:%s" % (self.operator, self.timestamp)

    def __repr__(self):
        return "<TimeFilter %s>" % self


class ListUsersOptions(marshal.Options):
    """
    The filters available on the list of registered users.
    """
    domain_id = marshal.QueryParam('domain_id')
    enabled = marshal.QueryParam('enabled', omit_empty=False)
    idp_id = marshal.QueryParam('idp_id')
    name = marshal.QueryParam('name')
    password_expires_at = marshal.QueryParam('password_expires_at')
    protocol_id = marshal.QueryParam('protocol_id')
    unique_id = marshal.QueryParam('unique_id')


class UsersOutput(marshal.Output):
    users = marshal.ResponseEntity('users', data.User, many=True)
    links = marshal.ResponseEntity('links', data.Links)


class ListAppCredentialsOptions(marshal.Options):
    name = marshal.QueryParam('name')


class AppCredentialsOutput(marshal.Output):
    app_credentials = marshal.ResponseEntity(
        'application_credentials', data.AppCredential, many=True)
    links = marshal.ResponseEntity('links', data.Links)


class CreateAppCredentialRequest(marshal.Options):
    application_credential = marshal.BodyParam('application_credential')


class AppCredentialOutput(marshal.Output):
    app_credential = marshal.ResponseEntity('application_credential',
                                            data.AppCredential)


class VersionsOutput(marshal.Output):
    versions = marshal.ResponseEntity('versions')
