"""
Signed-in session storage for the console client.

Holds the current user, bearer token and refresh token and persists them as
``{"token": ..., "refresh": ..., "user": {...}}`` so a later process can pick
the session up.
Only login, register and logout write it (plus the client clearing it on a
401).
"""

import json
import os
from pathlib import Path

from decouple import config
import structlog

logger = structlog.get_logger(__name__)

DEFAULT_SESSION_PATH = '~/.parish_console/session.json'


def default_session_path():
    return Path(os.path.expanduser(
        config('PARISH_CONSOLE_SESSION', default=DEFAULT_SESSION_PATH)))


class SessionStore:
    """The persisted ``{token, user}`` pair, plus the refresh token if any."""

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else default_session_path()
        self.token = None
        self.refresh = None
        self.user = None

    @property
    def is_authenticated(self):
        return bool(self.token)

    def load(self):
        """
        Read the session file. A missing or unreadable file leaves the store
        signed out.
        """
        try:
            with open(self.path, encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            data = {}
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable session file", path=str(self.path), error=str(e))
            data = {}

        if not isinstance(data, dict):
            data = {}
        self.token = data.get('token') or None
        self.user = data.get('user') if self.token else None
        self.refresh = data.get('refresh') if self.token else None
        return self

    def save(self, user, token, refresh=None):
        self.user = user
        self.token = token
        self.refresh = refresh

        data = {'token': token, 'user': user}
        if refresh:
            data['refresh'] = refresh

        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Owner-only from creation; the file holds bearer tokens
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(data, f)
        os.chmod(self.path, 0o600)

    def clear(self):
        self.user = None
        self.token = None
        self.refresh = None
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass

    def auth_headers(self):
        if not self.token:
            return {}
        return {'Authorization': f'Bearer {self.token}'}

    def __repr__(self):
        email = (self.user or {}).get('email')
        return f"<SessionStore path={str(self.path)!r} user={email!r}>"
