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

import logging

from keystone_sdk import config
from keystone_sdk.api import authenticator
from keystone_sdk.api import catalog
from keystone_sdk.api.common import data
from keystone_sdk.api.common import exceptions
from keystone_sdk.api.keystoneClient import client
from keystone_sdk.api.keystoneClient import options as opts

LOG = logging.getLogger(__name__)


class KeystoneAPI(object):
    """
    Entry point of the library: a client of one Identity service, with the
    token of the logged in user and the catalog of the services it can use.

    .. code-block:: python

        with KeystoneAPI('https://keystone.example.com:5000/v3') as api:
            api.login(CreateTokenOptions(user_name='demo',
                                         user_domain_name='Default',
                                         user_password='secret',
                                         scope_project_id=project_id))
            nova = api.get_endpoint_url('compute')

    Everything not given explicitly comes from the OS_* environment
    variables (see :class:`keystone_sdk.config.Settings`).

    """

    def __init__(self, auth_url=None, settings=None, session=None,
                 user_agent=None, insecure=None, timeout=None, debug=False,
                 refresh_margin=None, auto_refresh=True):
        if settings is None:
            settings = config.Settings.from_env()
        self.settings = settings
        self.auth_url = auth_url or settings.auth_url
        if not self.auth_url:
            raise exceptions.InvalidInput().where('auth_url', 'is required')
        if insecure is None:
            insecure = settings.insecure
        self._own_session = session is None

        self.client = client.KeystoneClient(self.auth_url, insecure=insecure,
                                            timeout=timeout,
                                            user_agent=user_agent,
                                            session=session)
        if debug:
            self.client.debug_rest(True)
        self.user_agent = self.client.http.user_agent
        self.authenticator = authenticator.Authenticator(
            self.client, refresh_margin=refresh_margin,
            auto_refresh=auto_refresh)
        self.catalog = catalog.ServiceCatalog()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def login(self, options=None):
        """
        Logs in and loads the service catalog.

        :param options: The credentials and scope; by default those of the
                        settings
        :type options: :class:`CreateTokenOptions`

        :returns: the Token
        """
        if options is None:
            options = self.settings.validate().to_create_token_options()
        if options.method is None:
            raise exceptions.InvalidInput('No authentication method').where(
                'options', 'password, token or application credential '
                           'required')
        token = self.authenticator.login(options)
        services = token.catalog
        if services is None:
            services = self.read_catalog()
        self.catalog = catalog.ServiceCatalog(services)
        LOG.debug("loaded %s", self.catalog)
        return token

    def logout(self):
        self.authenticator.logout()
        self.catalog = catalog.ServiceCatalog()

    def close(self):
        self.authenticator.close()
        if self._own_session:
            self.client.http.session.close()

    def get_token(self):
        return self.authenticator.token

    def get_token_id(self):
        return self.authenticator.get_token_id()

    def _user_id(self, user_id):
        if user_id:
            return user_id
        token = self.authenticator.token
        if token is None or token.user is None:
            raise exceptions.NoValidToken('Not logged in')
        return token.user.id

    def create_token(self, options):
        token, result = self.client.createToken(options)
        return token

    def read_token(self, subject_token, no_catalog=False,
                   allow_expired=False):
        token, result = self.client.readToken(opts.ReadTokenOptions(
            subject_token=subject_token, no_catalog=no_catalog,
            allow_expired=allow_expired))
        return token

    def check_token(self, subject_token, allow_expired=False):
        valid, result = self.client.checkToken(opts.CheckTokenOptions(
            subject_token=subject_token, allow_expired=allow_expired))
        return valid

    def delete_token(self, subject_token):
        deleted, result = self.client.deleteToken(opts.DeleteTokenOptions(
            subject_token=subject_token))
        return deleted

    def read_catalog(self):
        services, result = self.client.readCatalog()
        return services

    def list_projects(self):
        projects, result = self.client.listProjects()
        return projects

    def list_domains(self):
        domains, result = self.client.listDomains()
        return domains

    def list_systems(self):
        systems, result = self.client.listSystems()
        return systems

    def list_users(self, **filters):
        """
        Lists the users, ie. list_users(domain_id='default', enabled=True).
        See :class:`ListUsersOptions` for the filters.
        """
        options = opts.ListUsersOptions(**filters) if filters else None
        users, result = self.client.listUsers(options)
        return users

    def list_app_credentials(self, user_id=None, name=None):
        options = opts.ListAppCredentialsOptions(name=name) if name else None
        credentials, result = self.client.listAppCredentials(
            self._user_id(user_id), options)
        return credentials

    def create_app_credential(self, credential, user_id=None):
        """
        Creates an application credential for a user, by default the logged
        in one.

        :param credential: The credential, or its attributes as a dict
        :type credential: :class:`AppCredential` or dict

        :returns: the AppCredential, with its secret
        """
        if isinstance(credential, dict):
            credential = data.AppCredential(credential)
        created, result = self.client.createAppCredential(
            self._user_id(user_id), credential)
        return created

    def delete_app_credential(self, credential_id, user_id=None):
        deleted, result = self.client.deleteAppCredential(
            self._user_id(user_id), credential_id)
        return deleted

    def get_versions(self):
        versions, result = self.client.getVersions()
        return versions

    def get_services(self):
        return self.catalog.get_services()

    def get_endpoint_url(self, service_type, interface=catalog.PUBLIC,
                         region=None):
        return self.catalog.get_endpoint_url(service_type, interface, region)
