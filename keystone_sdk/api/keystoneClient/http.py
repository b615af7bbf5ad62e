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
from keystone_sdk.api.common import data
from keystone_sdk.api.common import exceptions
from keystone_sdk.api.common import http
from keystone_sdk.api.common import masking
from keystone_sdk.api.keystoneClient import options as opts

LOG = logging.getLogger(__name__)

TOKENS_PATH = '/v3/auth/tokens'


class HTTPJSONRESTClient(http.HTTPJSONRESTClient):
    """
    HTTP/REST client to access the keystone v3 service
    """

    def __init__(self, api_url, **kwargs):
        self.token = None
        self.reauth_callback = None
        self._auth_options = None
        super(HTTPJSONRESTClient, self).__init__(api_url, **kwargs)

    def set_url(self, api_url):
        # paths below carry the version, so keep only the service root
        api_url = api_url.rstrip('/')
        if api_url.endswith('/v3'):
            api_url = api_url[:-len('/v3')]
        self.api_url = api_url

    def authenticateKeystone(self, options):
        """
        This creates a token with the given options and keeps it as the
        token of this client, to be sent with all authenticated calls.

        :param options: The credentials and scope
        :type options: :class:`CreateTokenOptions`

        :returns: the new Token
        """
        # this prevents re-auth attempt if auth fails
        self.auth_try = 1
        try:
            token, result = self.createToken(options)
        finally:
            self.auth_try = 0
        if token is None or not token.value:
            raise exceptions.NoValidToken(
                'Identity service returned no token', result=result)
        LOG.info("authenticated as %s, token expires at %s",
                 token.user.name if token.user else None, token.expires_at)
        self.token = token
        self.auth_token = token.value
        self._auth_options = options
        return token

    def unauthenticateKeystone(self):
        """
        This revokes the token of this client on the server and forgets it.
        """
        if self.auth_token is None:
            return
        LOG.debug("invalidating authentication token %s",
                  masking.zip_secret(self.auth_token))
        try:
            self.auth_try = 1
            self.deleteToken(opts.DeleteTokenOptions(
                subject_token=self.auth_token))
        except (exceptions.HTTPNotFound, exceptions.HTTPUnauthorized):
            LOG.debug("token was already invalid")
        finally:
            self.auth_try = 0
            self.token = None
            self.auth_token = None
            self._auth_options = None

    def _reauth(self):
        if self.reauth_callback is not None:
            self.reauth_callback()
            return
        if self._auth_options is None:
            raise exceptions.NoValidToken('Never authenticated')
        self.authenticateKeystone(self._auth_options)

    def getTokenId(self):
        return self.auth_token

    def getToken(self):
        return self.token

    def createToken(self, options):
        """
        This authenticates a user or an application against the Identity
        service and returns a new token.

        Authentication can be performed with user name and password, with
        an existing token (ie. to get a scoped token out of an unscoped
        one) or with an application credential, which allows an
        application to act on behalf of a user on a subset of the user's
        resources without sharing the user's credentials.

        :param options: The credentials and scope
        :type options: :class:`CreateTokenOptions`

        :returns: token - the Token, its value set from X-Subject-Token
        :returns: result - the Result of the call
        """
        LOG.debug("creating token with %r", options)
        request = opts.CreateTokenRequest(no_catalog=options.no_catalog,
                                          auth=options.build_auth())
        output, result = self.invoke('POST', TOKENS_PATH, request,
                                     opts.TokenOutput,
                                     authenticated=options.authenticated)
        return output.get_token(), result

    def createTokenFromEnv(self, environ=None):
        """
        This authenticates using the OS_* variables of the environment.
        """
        settings = config.Settings.from_env(environ)
        return self.createToken(settings.to_create_token_options())

    def readToken(self, options):
        """
        This validates the given token and returns its details; it
        requires a token with the right to inspect other tokens.
        """
        output, result = self.invoke('GET', TOKENS_PATH, options,
                                     opts.TokenOutput)
        return output.get_token(), result

    def checkToken(self, options):
        """
        This checks that the given token is valid.

        :returns: valid - False if the server does not know the token
        :returns: result - the Result of the call
        """
        try:
            output, result = self.invoke('HEAD', TOKENS_PATH, options)
        except exceptions.HTTPNotFound as ex:
            return False, ex.result
        return result.code in (200, 204), result

    def deleteToken(self, options):
        """
        This revokes the given token; it is immediately invalid regardless
        of its expiry time.
        """
        output, result = self.invoke('DELETE', TOKENS_PATH, options)
        return result.code in (200, 204), result

    def readCatalog(self):
        """
        This returns the catalog of the current token; the catalog is
        returned even if the token was issued without one (?nocatalog).
        """
        output, result = self.invoke('GET', '/v3/auth/catalog',
                                     output=opts.CatalogOutput)
        return output.catalog or [], result

    def listProjects(self):
        """
        This returns the projects that the current token can be scoped to.
        """
        output, result = self.invoke('GET', '/v3/auth/projects',
                                     output=opts.ProjectsOutput)
        return output.projects or [], result

    def listDomains(self):
        output, result = self.invoke('GET', '/v3/auth/domains',
                                     output=opts.DomainsOutput)
        return output.domains or [], result

    def listSystems(self):
        output, result = self.invoke('GET', '/v3/auth/system',
                                     output=opts.SystemsOutput)
        return output.systems or [], result

    def listUsers(self, options=None):
        output, result = self.invoke('GET', '/v3/users', options,
                                     opts.UsersOutput)
        return output.users or [], result

    def _appCredentialsPath(self, user_id):
        if not user_id:
            raise exceptions.InvalidInput().where('user_id', 'is required')
        return '/v3/users/%s/application_credentials' % user_id

    def listAppCredentials(self, user_id, options=None):
        output, result = self.invoke('GET', self._appCredentialsPath(user_id),
                                     options, opts.AppCredentialsOutput)
        return output.app_credentials or [], result

    def createAppCredential(self, user_id, credential):
        """
        This creates an application credential for the given user, scoped
        to the project of the current token.

        :param credential: name, and optionally secret, description,
                           expires_at, roles and unrestricted
        :type credential: :class:`keystone_sdk.api.common.data.AppCredential`

        :returns: the AppCredential, with the secret generated by the server
                  if none was given
        """
        if not credential.name:
            raise exceptions.InvalidInput().where('name', 'is required')
        request = opts.CreateAppCredentialRequest(
            application_credential=credential)
        output, result = self.invoke('POST', self._appCredentialsPath(user_id),
                                     request, opts.AppCredentialOutput)
        return output.app_credential, result

    def deleteAppCredential(self, user_id, credential_id):
        path = '%s/%s' % (self._appCredentialsPath(user_id), credential_id)
        output, result = self.invoke('DELETE', path)
        return result.code in (200, 204), result

    def getVersions(self):
        """
        This returns the API versions published at the root of the
        service; it needs no authentication.
        """
        output, result = self.invoke('GET', '/', output=opts.VersionsOutput,
                                     authenticated=False)
        versions = output.versions
        if isinstance(versions, dict):
            versions = versions.get('values')
        return [data.Version.from_dict(v) for v in versions or []], result
