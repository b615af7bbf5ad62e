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
from unittest import mock

import pytest
import requests

from keystone_sdk.api.common import exceptions
from keystone_sdk.api.common import http
from keystone_sdk.api.common import marshal
from keystone_sdk.api.common import results
from tests import fakes


class EchoOptions(marshal.Options):
    name = marshal.QueryParam('name')
    body = marshal.BodyParam('thing')


class EchoOutput(marshal.Output):
    request_id = marshal.ResponseHeader('X-Openstack-Request-Id')
    thing = marshal.ResponseEntity('thing')


@pytest.fixture
def rest(session):
    return http.HTTPJSONRESTClient(fakes.BASE_URL + '/', session=session,
                                   timeout=5)


def test_request_sends_json_and_decodes_response(rest, session):
    session.request.return_value = fakes.make_response(
        200, {'thing': {'id': 1}}, {'X-Openstack-Request-Id': 'req-9'})
    rest.auth_token = fakes.TOKEN_ID

    output, result = rest.invoke('POST', '/things',
                                 EchoOptions(name='x', body={'id': 1}),
                                 EchoOutput)

    assert output.thing == {'id': 1}
    assert output.request_id == 'req-9'
    assert result == results.SUCCESS
    method, url, kwargs = fakes.sent(session)
    assert (method, url) == ('POST', fakes.BASE_URL + '/things')
    assert kwargs['params'] == {'name': 'x'}
    assert fakes.sent_json(session) == {'thing': {'id': 1}}
    assert kwargs['headers']['X-Auth-Token'] == fakes.TOKEN_ID
    assert kwargs['headers']['Content-Type'] == 'application/json'
    assert kwargs['headers']['Accept'] == 'application/json'
    assert kwargs['headers']['User-Agent'].startswith('keystone-sdk/')
    assert kwargs['timeout'] == 5
    assert kwargs['verify'] is True


def test_unauthenticated_call_sends_no_token(rest, session):
    session.request.return_value = fakes.make_response(204)
    rest.auth_token = fakes.TOKEN_ID
    output, result = rest.invoke('GET', '/', authenticated=False)
    assert output is None
    assert result == results.NO_CONTENT
    method, url, kwargs = fakes.sent(session)
    assert 'X-Auth-Token' not in kwargs['headers']
    assert kwargs['data'] is None


def test_authenticated_call_needs_a_token(rest, session):
    with pytest.raises(exceptions.NoValidToken):
        rest.invoke('GET', '/things')
    assert not session.request.called


def test_error_response_raises(rest, session):
    session.request.return_value = fakes.error_response(404, 'No thing')
    with pytest.raises(exceptions.HTTPNotFound) as info:
        rest.invoke('GET', '/things/1', authenticated=False)
    assert info.value.get_description() == 'No thing'
    assert info.value.result.code == 404


def test_connection_error_is_wrapped(rest, session):
    session.request.side_effect = requests.exceptions.ConnectionError(
        'refused')
    with pytest.raises(exceptions.RequestException) as info:
        rest.get('/things')
    assert info.value.info['method'] == 'GET'


def test_insecure_skips_certificate_check(session):
    rest = http.HTTPJSONRESTClient(fakes.BASE_URL, insecure=True,
                                   session=session)
    session.request.return_value = fakes.make_response(200, {})
    rest.get('/')
    method, url, kwargs = fakes.sent(session)
    assert kwargs['verify'] is False
    assert kwargs['timeout'] == http.HTTPJSONRESTClient.DEFAULT_TIMEOUT


def test_non_json_body_is_returned_as_text(rest, session):
    session.request.return_value = fakes.make_response(200, 'plain text')
    resp, body = rest.get('/')
    assert body == 'plain text'
    assert resp.status == 200


def test_full_urls_are_used_as_is(rest, session):
    session.request.return_value = fakes.make_response(200, {})
    rest.get('http://other.test/v3')
    method, url, kwargs = fakes.sent(session)
    assert url == 'http://other.test/v3'


def test_unauthorized_is_retried_once_after_reauth(rest, session):
    session.request.side_effect = [fakes.error_response(401),
                                   fakes.make_response(200, {'thing': 2})]
    rest.auth_token = 'old'

    def reauth():
        rest.auth_token = 'new'

    with mock.patch.object(rest, '_reauth', side_effect=reauth) as m:
        output, result = rest.invoke('GET', '/things', output=EchoOutput)

    assert m.call_count == 1
    assert output.thing == 2
    assert fakes.sent(session, 0)[2]['headers']['X-Auth-Token'] == 'old'
    assert fakes.sent(session, 1)[2]['headers']['X-Auth-Token'] == 'new'


def test_unauthorized_during_authentication_is_not_retried(rest, session):
    session.request.return_value = fakes.error_response(401)
    rest.auth_token = 'old'
    rest.auth_try = 1
    with mock.patch.object(rest, '_reauth') as m:
        with pytest.raises(exceptions.HTTPUnauthorized):
            rest.invoke('GET', '/things')
    assert not m.called
    assert session.request.call_count == 1


def test_unauthorized_unauthenticated_call_is_not_retried(rest, session):
    session.request.return_value = fakes.error_response(401)
    with pytest.raises(exceptions.HTTPUnauthorized):
        rest.invoke('POST', '/v3/auth/tokens', authenticated=False)
    assert session.request.call_count == 1


def test_timings(rest, session):
    session.request.return_value = fakes.make_response(200, {})
    rest.get('/')
    rest.get('/')
    assert [t[0] for t in rest.get_timings()] == ['GET /', 'GET /']
    rest.reset_timings()
    assert rest.get_timings() == []


def test_debug_log_masks_secrets(rest, session, caplog):
    session.request.return_value = fakes.make_response(
        201, {'token': {}}, {'X-Subject-Token': fakes.OTHER_TOKEN_ID})
    rest.auth_token = fakes.TOKEN_ID
    with caplog.at_level(logging.DEBUG, logger=http.__name__):
        rest.post('/v3/auth/tokens', authenticated=True,
                  body={'auth': {'password': 'hunter2'}})
    text = caplog.text
    assert 'curl -i -X POST' in text
    assert fakes.TOKEN_ID not in text
    assert fakes.OTHER_TOKEN_ID not in text
    assert 'hunter2' not in text


def test_debug_log_masks_token_identity(rest, session, caplog):
    session.request.return_value = fakes.make_response(
        201, {'token': {}}, {'X-Subject-Token': fakes.OTHER_TOKEN_ID})
    with caplog.at_level(logging.DEBUG, logger=http.__name__):
        rest.post('/v3/auth/tokens', body={'auth': {'identity': {
            'methods': ['token'], 'token': {'id': fakes.TOKEN_ID}}}})
    assert 'REQ BODY' in caplog.text
    assert fakes.TOKEN_ID not in caplog.text
