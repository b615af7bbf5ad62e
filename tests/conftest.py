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

from unittest import mock

import pytest
import requests

from keystone_sdk.api.keystoneClient import client
from keystone_sdk.api.keystoneClient import http
from tests import fakes


@pytest.fixture
def session():
    return mock.MagicMock(spec=requests.Session)


@pytest.fixture
def keystone_http(session):
    return http.HTTPJSONRESTClient(fakes.AUTH_URL, session=session)


@pytest.fixture
def keystone_client(session):
    return client.KeystoneClient(fakes.AUTH_URL, session=session)


@pytest.fixture
def timer():
    with mock.patch('keystone_sdk.api.authenticator.threading.Timer') as t:
        yield t
