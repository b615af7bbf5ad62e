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

import pytest

from keystone_sdk.api.common import exceptions
from keystone_sdk.api.common import results


class _Headers(dict):
    status = None


def _resp(status):
    headers = _Headers()
    headers.status = status
    return headers


def test_from_response_maps_status_to_class():
    body = {'error': {'code': 401, 'title': 'Unauthorized',
                      'message': 'The request you have made requires '
                                 'authentication.'}}
    ex = exceptions.from_response(_resp(401), body, results.UNAUTHORIZED)
    assert isinstance(ex, exceptions.HTTPUnauthorized)
    assert ex.get_code() == 401
    assert ex.get_title() == 'Unauthorized'
    assert ex.get_description().startswith('The request you have made')
    assert ex.result is results.UNAUTHORIZED
    assert str(ex).startswith('Unauthorized (HTTP 401): The request')


@pytest.mark.parametrize('status,cls', [
    (400, exceptions.HTTPBadRequest),
    (403, exceptions.HTTPForbidden),
    (404, exceptions.HTTPNotFound),
    (409, exceptions.HTTPConflict),
    (500, exceptions.HTTPServerError),
    (503, exceptions.HTTPServiceUnavailable),
])
def test_known_statuses(status, cls):
    ex = exceptions.from_response(_resp(status), None)
    assert type(ex) is cls
    assert ex.http_status == status


def test_unknown_statuses_keep_their_code():
    ex = exceptions.from_response(_resp(502), 'Bad gateway')
    assert type(ex) is exceptions.HTTPServerError
    assert ex.http_status == 502
    assert '(HTTP 502): Bad gateway' in str(ex)

    ex = exceptions.from_response(_resp(429), None)
    assert type(ex) is exceptions.ClientException
    assert ex.get_code() == 429


def test_where_adds_context():
    ex = exceptions.InvalidInput('Bad value').where('user_id', 'is required')
    assert ex.info == {'user_id': 'is required'}
    assert str(ex) == 'Invalid input value: Bad value (user_id: is required)'
    assert ex.args == (str(ex),)

    with pytest.raises(exceptions.ClientException):
        raise ex


def test_local_errors_have_no_status():
    ex = exceptions.NoValidToken()
    assert ex.http_status is None
    assert str(ex) == 'No valid token for authenticated call'
