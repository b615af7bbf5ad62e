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

from keystone_sdk.api.keystoneClient import client
from keystone_sdk.api.keystoneClient import options as opts
from tests import fakes


def test_login_and_logout(keystone_client, session):
    session.request.return_value = fakes.token_response()
    token = keystone_client.login(opts.CreateTokenOptions(
        user_id='u-423', user_password='secret'))
    assert keystone_client.getToken() is token
    assert keystone_client.getTokenId() == fakes.TOKEN_ID

    session.request.return_value = fakes.make_response(204)
    keystone_client.logout()
    assert keystone_client.getTokenId() is None


def test_options_reach_the_transport(session):
    keystone = client.KeystoneClient(fakes.AUTH_URL, session=session,
                                     timeout=3, insecure=True)
    assert keystone.http.timeout == 3
    assert keystone.http.insecure is True
    assert keystone.http.api_url == fakes.BASE_URL


def test_set_reauth_callback(keystone_client):
    def callback():
        pass

    keystone_client.set_reauth_callback(callback)
    assert keystone_client.http.reauth_callback is callback


def test_operations_are_delegated(keystone_client, session):
    keystone_client.http.auth_token = fakes.TOKEN_ID
    session.request.return_value = fakes.make_response(
        200, {'users': [{'id': 'u-1'}]})
    users, result = keystone_client.listUsers()
    assert users[0].id == 'u-1'
    assert fakes.sent(session)[2]['params'] is None
