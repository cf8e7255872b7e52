"""
Tests for the console HTTP client.
"""

import json
from unittest.mock import Mock

import pytest
import requests

from console_client.client import (
    GENERIC_ERROR_MESSAGE,
    LEADERS_FETCH_ERROR,
    ApiError,
    ConsoleClient,
)
from console_client.session import SessionStore


USER = {'id': 'u-1', 'email': 'office@stmarys.example', 'church_name': "St. Mary's"}


def fake_response(status_code=200, data=None):
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.content = b'' if data is None else json.dumps(data).encode()
    if data is None:
        response.json.side_effect = ValueError('no body')
    else:
        response.json.return_value = data
    return response


@pytest.fixture
def store(tmp_path):
    return SessionStore(tmp_path / 'session.json')


@pytest.fixture
def http():
    session = Mock(spec=requests.Session)
    session.headers = {}
    return session


@pytest.fixture
def client(store, http):
    return ConsoleClient('http://parish.test/', store=store, session=http)


class TestResources:

    def test_list_with_search(self, client, http, store):
        store.save(USER, 'token-123')
        http.request.return_value = fake_response(data=[{'id': 'b-1'}])

        assert client.burials.list(search='perera') == [{'id': 'b-1'}]

        http.request.assert_called_once_with(
            'GET',
            'http://parish.test/api/burials',
            headers={'Authorization': 'Bearer token-123'},
            timeout=10,
            params={'search': 'perera'},
        )

    def test_update_uses_patch(self, client, http):
        http.request.return_value = fake_response(data={'id': 'm-1'})

        client.marriages.update('m-1', {'mass_type': 'Half'})

        args, kwargs = http.request.call_args
        assert args == ('PATCH', 'http://parish.test/api/marriages/m-1')
        assert kwargs['json'] == {'mass_type': 'Half'}

    def test_delete_returns_nothing(self, client, http):
        http.request.return_value = fake_response(status_code=204)

        assert client.choir_members.delete('c-1') is None
        assert http.request.call_args[0] == ('DELETE', 'http://parish.test/api/choiristors/c-1')

    def test_error_message_comes_from_server(self, client, http):
        http.request.return_value = fake_response(
            status_code=400, data={'error': 'zonal_number: No zonal leader', 'detail': 'ignored'})

        with pytest.raises(ApiError) as excinfo:
            client.unit_leaders.create({})

        assert excinfo.value.message == 'zonal_number: No zonal leader'
        assert excinfo.value.status_code == 400

    def test_error_without_body_is_generic(self, client, http):
        http.request.return_value = fake_response(status_code=500)

        with pytest.raises(ApiError) as excinfo:
            client.events.list()

        assert excinfo.value.message == GENERIC_ERROR_MESSAGE

    def test_network_failure(self, client, http):
        http.request.side_effect = requests.ConnectionError('refused')

        with pytest.raises(ApiError) as excinfo:
            client.baptisms.get('b-1')

        assert excinfo.value.status_code is None
        assert http.request.call_count == 1

    def test_unauthorized_clears_session(self, client, http, store):
        store.save(USER, 'expired')
        http.request.return_value = fake_response(status_code=401, data={'detail': 'Token expired'})

        with pytest.raises(ApiError):
            client.baptisms.list()

        assert not store.is_authenticated
        assert not store.path.exists()


class TestAuthentication:

    def test_login_saves_session(self, client, http, store):
        http.request.return_value = fake_response(data={'user': USER, 'token': 'tok', 'refresh': 'ref'})

        assert client.login('office@stmarys.example', 'secret') == USER
        assert store.token == 'tok'
        assert SessionStore(store.path).load().user == USER

    def test_failed_login_leaves_session_empty(self, client, http, store):
        http.request.return_value = fake_response(
            status_code=401, data={'error': 'Invalid email or password'})

        with pytest.raises(ApiError) as excinfo:
            client.login('office@stmarys.example', 'wrong')

        assert str(excinfo.value) == '401: Invalid email or password'
        assert not store.is_authenticated

    def test_register_saves_session(self, client, http, store):
        http.request.return_value = fake_response(
            status_code=201, data={'user': USER, 'token': 'tok', 'refresh': 'ref'})

        client.register('office@stmarys.example', 'secret', "St. Mary's", 'Holy Family')

        assert http.request.call_args[1]['json']['parish_name'] == 'Holy Family'
        assert store.is_authenticated

    def test_logout_clears_even_when_server_fails(self, client, http, store):
        store.save(USER, 'tok')
        http.request.side_effect = requests.Timeout()

        with pytest.raises(ApiError):
            client.logout()

        assert not store.is_authenticated

    def test_login_ignores_stale_token(self, client, http, store):
        store.save(USER, 'stale-token')
        http.request.return_value = fake_response(data={'user': USER, 'token': 'fresh', 'refresh': 'ref'})

        client.login('office@stmarys.example', 'secret')

        assert 'Authorization' not in http.request.call_args[1]['headers']
        assert store.token == 'fresh'

    def test_register_ignores_stale_token(self, client, http, store):
        store.save(USER, 'stale-token')
        http.request.return_value = fake_response(
            status_code=201, data={'user': USER, 'token': 'fresh', 'refresh': 'ref'})

        client.register('office@stmarys.example', 'secret', "St. Mary's", 'Holy Family')

        assert 'Authorization' not in http.request.call_args[1]['headers']

    def test_login_keeps_refresh_token(self, client, http, store):
        http.request.return_value = fake_response(data={'user': USER, 'token': 'tok', 'refresh': 'ref'})

        client.login('office@stmarys.example', 'secret')

        assert SessionStore(store.path).load().refresh == 'ref'

    def test_logout_revokes_stored_refresh_token(self, client, http, store):
        store.save(USER, 'tok', refresh='ref')
        http.request.return_value = fake_response(data={'message': 'Logged out'})

        client.logout()

        assert http.request.call_args[1]['json'] == {'refresh': 'ref'}
        assert not store.is_authenticated

    def test_logout_with_expired_session_is_quiet(self, client, http, store):
        store.save(USER, 'expired', refresh='ref')
        http.request.return_value = fake_response(
            status_code=401, data={'detail': 'Given token not valid for any token type'})

        client.logout()

        assert not store.is_authenticated
        assert not store.path.exists()

    def test_logout_still_raises_other_errors(self, client, http, store):
        store.save(USER, 'tok')
        http.request.return_value = fake_response(status_code=500)

        with pytest.raises(ApiError):
            client.logout()

        assert not store.is_authenticated


        assert not store.is_authenticated


class TestAssignZonalLeader:

    LEADERS = [
        {'id': 'z-1', 'first_name': 'Mary', 'last_name': 'Perera', 'zone_number': '1'},
        {'id': 'z-3', 'first_name': 'John', 'last_name': 'Silva', 'zone_number': '3'},
    ]

    def test_resolves_from_fetched_leaders(self, client, http):
        http.request.return_value = fake_response(data=self.LEADERS)

        assignment = client.assign_zonal_leader('3')

        assert assignment.can_submit
        assert assignment.leader_id == 'z-3'
        assert http.request.call_args[0] == ('GET', 'http://parish.test/api/zonal-leaders')

    def test_no_leader_blocks_submit(self, client, http):
        http.request.return_value = fake_response(data=self.LEADERS)

        assignment = client.assign_zonal_leader('2')

        assert not assignment.can_submit
        assert 'Zone 2' in assignment.message

    def test_fetch_failure_is_generic(self, client, http):
        http.request.return_value = fake_response(status_code=500, data={'error': 'db down'})

        with pytest.raises(ApiError) as excinfo:
            client.assign_zonal_leader('1')

        assert excinfo.value.message == LEADERS_FETCH_ERROR
