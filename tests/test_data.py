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

import datetime

import pytest

from keystone_sdk.api.common import data
from keystone_sdk.api.common import exceptions
from tests import fakes


def test_token_from_dict_decodes_nested_resources():
    token = data.Token.from_dict(fakes.token_body()['token'])
    assert isinstance(token.user, data.User)
    assert isinstance(token.user.domain, data.Domain)
    assert token.user.domain.name == 'Default'
    assert token.project.name == 'demo'
    assert [r.name for r in token.roles] == ['admin']
    assert isinstance(token.catalog[1].endpoints[0], data.Endpoint)
    assert token.scope == 'project'
    assert token.value is None


def test_token_expiry():
    token = data.Token(expires_at='2015-11-06T15:32:17.893769Z')
    assert token.expires == datetime.datetime(
        2015, 11, 6, 15, 32, 17, 893769, tzinfo=datetime.timezone.utc)
    assert token.is_expired()
    assert not token.is_expired(
        now=datetime.datetime(2015, 1, 1, tzinfo=datetime.timezone.utc))
    assert not data.Token().is_expired()


def test_unscoped_token():
    assert data.Token(user={'id': 'u1'}).scope == 'unscoped'
    assert data.Token(system={'all': True}).scope == 'system'


def test_parse_isotime():
    naive = data.parse_isotime('2017-02-01T10:00:00')
    assert naive.tzinfo is datetime.timezone.utc
    assert data.parse_isotime(None) is None
    with pytest.raises(exceptions.InvalidInput):
        data.parse_isotime('yesterday')


def test_to_dict_omits_unset_attributes():
    project = data.Project(id='p1', domain={'name': 'Default'})
    assert project.to_dict() == {'id': 'p1', 'domain': {'name': 'Default'}}
    assert data.Project().to_dict() == {}


def test_unknown_keyword_is_rejected():
    with pytest.raises(TypeError):
        data.User(nickname='bob')


def test_unknown_keys_of_the_entity_are_kept_aside():
    user = data.User.from_dict({'id': 'u1', 'options': {}})
    assert user.id == 'u1'
    assert user._info['options'] == {}
    assert 'options' not in user.to_dict()


def test_equality():
    assert data.Domain(id='d1') == data.Domain({'id': 'd1'})
    assert data.Domain(id='d1') != data.Domain(id='d2')
    assert data.Domain(id='d1') != data.Project(id='d1')


def test_version_media_types_key():
    version = data.Version.from_dict({
        'id': 'v3.14', 'status': 'stable',
        'media-types': [{'base': 'application/json'}]})
    assert version.media_types == [{'base': 'application/json'}]
    assert 'media-types' in version.to_dict()


def test_links_from_dict():
    links = data.Links.from_dict({'self': 'http://keystone.test/v3/users',
                                  'next': None})
    assert links.self == 'http://keystone.test/v3/users'
    assert links.next is None


@pytest.mark.parametrize('kwargs', [
    {},
    {'project': {'id': 'p1'}, 'domain': {'id': 'd1'}},
])
def test_scope_needs_exactly_one_target(kwargs):
    with pytest.raises(exceptions.InvalidInput):
        data.Scope(**kwargs).validate()


def test_scope_validate_returns_scope():
    scope = data.Scope(system={'all': True})
    assert scope.validate() is scope
