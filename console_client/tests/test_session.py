"""
Tests for the persisted console session.
"""

import json
import os
import stat

import pytest

from console_client.session import SessionStore


USER = {'id': 'u-1', 'email': 'office@stmarys.example', 'church_name': "St. Mary's"}


class TestSessionStore:

    def test_save_then_load(self, tmp_path):
        path = tmp_path / 'nested' / 'session.json'
        SessionStore(path).save(USER, 'token-123')

        store = SessionStore(path).load()

        assert store.is_authenticated
        assert store.user == USER
        assert json.loads(path.read_text()) == {'token': 'token-123', 'user': USER}

    def test_missing_file_is_signed_out(self, tmp_path):
        store = SessionStore(tmp_path / 'session.json').load()

        assert not store.is_authenticated
        assert store.user is None
        assert store.auth_headers() == {}

    def test_corrupt_file_is_signed_out(self, tmp_path):
        path = tmp_path / 'session.json'
        path.write_text('{not json')

        store = SessionStore(path).load()

        assert not store.is_authenticated

    def test_clear_removes_file(self, tmp_path):
        path = tmp_path / 'session.json'
        store = SessionStore(path)
        store.save(USER, 'token-123')

        store.clear()

        assert not path.exists()
        assert store.user is None
        store.clear()

    def test_auth_headers(self, tmp_path):
        store = SessionStore(tmp_path / 'session.json')
        store.save(USER, 'token-123')

        assert store.auth_headers() == {'Authorization': 'Bearer token-123'}

    def test_refresh_token_round_trips(self, tmp_path):
        path = tmp_path / 'session.json'
        SessionStore(path).save(USER, 'token-123', refresh='refresh-456')

        store = SessionStore(path).load()

        assert store.refresh == 'refresh-456'
        store.clear()
        assert store.refresh is None

    @pytest.mark.skipif(os.name != 'posix', reason='POSIX file modes')
    def test_file_is_owner_only(self, tmp_path):
        path = tmp_path / 'session.json'
        SessionStore(path).save(USER, 'token-123')

        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_path_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv('PARISH_CONSOLE_SESSION', str(tmp_path / 'env-session.json'))

        assert SessionStore().path == tmp_path / 'env-session.json'
