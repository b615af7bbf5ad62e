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

from keystone_sdk.api.keystoneClient import http


class KeystoneClient(object):

    """ Client layer to access HTTP calls to the Keystone v3 backend.

    All operations return a pair: the decoded entity and the
    :class:`keystone_sdk.api.common.results.Result` of the call.
    """

    def __init__(self, api_url, **kwargs):
        self.api_url = api_url
        self.http = http.HTTPJSONRESTClient(self.api_url, **kwargs)

    def login(self, options):
        return self.http.authenticateKeystone(options)

    def logout(self):
        self.http.unauthenticateKeystone()

    def set_reauth_callback(self, callback):
        self.http.reauth_callback = callback

    def debug_rest(self, flag):
        """This is useful for debugging requests.

        :param flag: set to True to enable debugging
        :type flag: bool

        """
        self.http.set_debug_flag(flag)

    def getTokenId(self):
        return self.http.getTokenId()

    def getToken(self):
        return self.http.getToken()

    def createToken(self, options):
        return self.http.createToken(options)

    def createTokenFromEnv(self, environ=None):
        return self.http.createTokenFromEnv(environ)

    def readToken(self, options):
        return self.http.readToken(options)

    def checkToken(self, options):
        return self.http.checkToken(options)

    def deleteToken(self, options):
        return self.http.deleteToken(options)

    def readCatalog(self):
        return self.http.readCatalog()

    def listProjects(self):
        return self.http.listProjects()

    def listDomains(self):
        return self.http.listDomains()

    def listSystems(self):
        return self.http.listSystems()

    def listUsers(self, options=None):
        return self.http.listUsers(options)

    def listAppCredentials(self, user_id, options=None):
        return self.http.listAppCredentials(user_id, options)

    def createAppCredential(self, user_id, credential):
        return self.http.createAppCredential(user_id, credential)

    def deleteAppCredential(self, user_id, credential_id):
        return self.http.deleteAppCredential(user_id, credential_id)

    def getVersions(self):
        return self.http.getVersions()
