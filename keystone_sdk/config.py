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
Connection settings, usually taken from the OS_* variables of an
OpenStack RC file.
"""

import os

from keystone_sdk.api.common import exceptions
from keystone_sdk.api.keystoneClient import options

ENV_VARS = {
    'auth_url': 'OS_AUTH_URL',
    'username': 'OS_USERNAME',
    'user_id': 'OS_USER_ID',
    'password': 'OS_PASSWORD',
    'user_domain_name': 'OS_USER_DOMAIN_NAME',
    'user_domain_id': 'OS_USER_DOMAIN_ID',
    'project_name': 'OS_PROJECT_NAME',
    'project_id': 'OS_PROJECT_ID',
    'project_domain_name': 'OS_PROJECT_DOMAIN_NAME',
    'project_domain_id': 'OS_PROJECT_DOMAIN_ID',
    'app_credential_id': 'OS_APPLICATION_CREDENTIAL_ID',
    'app_credential_name': 'OS_APPLICATION_CREDENTIAL_NAME',
    'app_credential_secret': 'OS_APPLICATION_CREDENTIAL_SECRET',
}


def _env_bool(value, default=False):
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'y', 'on')


class Settings(object):

    def __init__(self, auth_url=None, username=None, user_id=None,
                 password=None, user_domain_name=None, user_domain_id=None,
                 project_name=None, project_id=None, project_domain_name=None,
                 project_domain_id=None, app_credential_id=None,
                 app_credential_name=None, app_credential_secret=None,
                 insecure=False):
        self.auth_url = auth_url
        self.username = username
        self.user_id = user_id
        self.password = password
        self.user_domain_name = user_domain_name
        self.user_domain_id = user_domain_id
        self.project_name = project_name
        self.project_id = project_id
        self.project_domain_name = project_domain_name
        self.project_domain_id = project_domain_id
        self.app_credential_id = app_credential_id
        self.app_credential_name = app_credential_name
        self.app_credential_secret = app_credential_secret
        self.insecure = insecure

    @classmethod
    def from_env(cls, environ=None):
        """
        Reads the settings from the environment; unset and empty variables
        both leave the setting to None.
        """
        environ = os.environ if environ is None else environ
        values = {}
        for attr, name in ENV_VARS.items():
            value = environ.get(name)
            if value is not None and value.strip():
                values[attr] = value
        values['insecure'] = _env_bool(environ.get('OS_INSECURE'))
        return cls(**values)

    def __repr__(self):
        shown = ["%s=%r" % (attr, getattr(self, attr))
                 for attr in sorted(ENV_VARS)
                 if getattr(self, attr) is not None
                 and attr not in ('password', 'app_credential_secret')]
        return "<Settings %s>" % ", ".join(shown)

    def uses_app_credential(self):
        return bool(self.app_credential_id or self.app_credential_name)

    def validate(self):
        """
        Checks that the settings hold the minimum information needed to
        attempt an authentication request.
        """
        if not self.auth_url:
            raise exceptions.InvalidInput().where(ENV_VARS['auth_url'],
                                                  'must not be empty')
        if self.uses_app_credential():
            if not self.app_credential_secret:
                raise exceptions.InvalidInput().where(
                    ENV_VARS['app_credential_secret'], 'must not be empty')
            if (not self.app_credential_id and
                    not (self.user_id or self.username)):
                raise exceptions.InvalidInput().where(
                    'OS_USER_ID or OS_USERNAME',
                    'at least one must not be empty')
            return self
        if not (self.user_id or self.username):
            raise exceptions.InvalidInput().where(
                'OS_USER_ID or OS_USERNAME', 'at least one must not be empty')
        if not self.password:
            raise exceptions.InvalidInput().where(ENV_VARS['password'],
                                                  'must not be empty')
        return self

    def to_create_token_options(self):
        """
        Returns the options to log in with these settings: scoped to the
        project when it is fully identified, explicitly unscoped otherwise.
        """
        create = options.CreateTokenOptions(
            user_id=self.user_id,
            user_name=self.username,
            user_domain_id=self.user_domain_id,
            user_domain_name=self.user_domain_name)
        if self.uses_app_credential():
            # the password is ignored; application credentials carry their
            # own scope
            create.app_credential_id = self.app_credential_id
            create.app_credential_name = self.app_credential_name
            create.app_credential_secret = self.app_credential_secret
            return create

        create.user_password = self.password

        if self.project_id:
            create.scope_project_id = self.project_id
        elif self.project_name and (self.project_domain_name or
                                    self.project_domain_id):
            create.scope_project_name = self.project_name
            create.scope_domain_id = self.project_domain_id
            create.scope_domain_name = self.project_domain_name
        else:
            create.unscoped_token = True
        return create
