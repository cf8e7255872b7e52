"""
HTTP client for the parish console API.

One :class:`Resource` per record type maps list/get/create/update/delete onto
GET/POST/PATCH/DELETE at a fixed path. Every request carries the stored
bearer token and a fixed timeout, and is never retried. A 401 signs the
session out.
"""

import requests
from decouple import config
import structlog

from leadership.resolver import LeaderAssignment

from .session import SessionStore

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = 'http://localhost:8000'
DEFAULT_TIMEOUT = 10
GENERIC_ERROR_MESSAGE = 'Something went wrong. Please try again.'
LEADERS_FETCH_ERROR = 'Failed to load zonal leaders. Please try again.'


class ApiError(Exception):
    """A failed console request; ``message`` is fit to show the user."""

    def __init__(self, message, status_code=None, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def __str__(self):
        if self.status_code is None:
            return self.message
        return f"{self.status_code}: {self.message}"


class Resource:
    """CRUD calls for one record type."""

    def __init__(self, client, path):
        self.client = client
        self.path = path.rstrip('/')

    def list(self, search=None):
        params = {'search': search} if search else None
        return self.client.request('GET', self.path, params=params)

    def get(self, record_id):
        return self.client.request('GET', f'{self.path}/{record_id}')

    def create(self, data):
        return self.client.request('POST', self.path, json=data)

    def update(self, record_id, data):
        return self.client.request('PATCH', f'{self.path}/{record_id}', json=data)

    def delete(self, record_id):
        self.client.request('DELETE', f'{self.path}/{record_id}')

    def __repr__(self):
        return f"<Resource {self.path}>"


class ConsoleClient:
    """
    Signed-in access to the console API.

    Example::

        client = ConsoleClient()
        client.login('office@stmarys.example', 'password')
        client.burials.list(search='perera')
    """

    RESOURCES = {
        'baptisms': '/api/baptisms',
        'burials': '/api/burials',
        'marriages': '/api/marriages',
        'choir_members': '/api/choiristors',
        'youth_members': '/api/youth-association',
        'sunday_school_teachers': '/api/sunday-school-teachers',
        'parish_committee': '/api/parish-committee',
        'zonal_leaders': '/api/zonal-leaders',
        'unit_leaders': '/api/unit-leaders',
        'member_registrations': '/api/member-registrations',
        'events': '/api/events',
    }

    def __init__(self, base_url=None, store=None, timeout=DEFAULT_TIMEOUT, session=None):
        self.base_url = (base_url or config('PARISH_CONSOLE_URL', default=DEFAULT_BASE_URL)).rstrip('/')
        self.store = store if store is not None else SessionStore().load()
        self.timeout = timeout
        self.http = session or requests.Session()
        self.http.headers.update({'Accept': 'application/json'})

        for name, path in self.RESOURCES.items():
            setattr(self, name, Resource(self, path))

    @property
    def user(self):
        return self.store.user

    def request(self, method, path, authenticate=True, **kwargs):
        """
        Send one request and return the decoded JSON body.

        ``authenticate=False`` leaves the stored token off, for the sign-in
        calls that must work after it has expired.
        """
        url = f"{self.base_url}{path}"
        headers = dict(kwargs.pop('headers', None) or {})
        if authenticate:
            headers.update(self.store.auth_headers())

        try:
            response = self.http.request(
                method, url, headers=headers, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning("Console request failed", method=method, path=path, error=str(e))
            raise ApiError(GENERIC_ERROR_MESSAGE) from e

        if response.status_code == 401 and authenticate:
            self.store.clear()

        if not response.ok:
            payload = self._json(response)
            raise ApiError(
                self._error_message(payload),
                status_code=response.status_code,
                payload=payload
            )

        if response.status_code == 204 or not response.content:
            return None
        return self._json(response)

    def login(self, email, password):
        data = self.request('POST', '/api/users/login', authenticate=False, json={
            'email': email,
            'password': password,
        })
        self.store.save(data['user'], data['token'], refresh=data.get('refresh'))
        logger.info("Signed in", user_id=data['user'].get('id'))
        return data['user']

    def register(self, email, password, church_name, parish_name):
        data = self.request('POST', '/api/users/register', authenticate=False, json={
            'email': email,
            'password': password,
            'church_name': church_name,
            'parish_name': parish_name,
        })
        self.store.save(data['user'], data['token'], refresh=data.get('refresh'))
        return data['user']

    def logout(self, refresh=None):
        """
        Sign out; the local session is cleared even if the server call fails.

        The stored refresh token is revoked unless another one is given. An
        already expired session (401) is not an error.
        """
        refresh = refresh or self.store.refresh
        try:
            if self.store.is_authenticated:
                self.request('POST', '/api/users/logout', json={'refresh': refresh} if refresh else {})
        except ApiError as e:
            if e.status_code != 401:
                raise
            logger.info("Session already expired at logout")
        finally:
            self.store.clear()

    def dashboard(self):
        return self.request('GET', '/api/dashboard')

    def assign_zonal_leader(self, zone_number):
        """
        Resolve the zonal leader a new unit leader in ``zone_number`` reports to.

        Returns a :class:`LeaderAssignment`; ``can_submit`` is false when the
        zone has no leader.
        """
        try:
            leaders = self.zonal_leaders.list()
        except ApiError as e:
            raise ApiError(LEADERS_FETCH_ERROR, status_code=e.status_code, payload=e.payload) from e
        return LeaderAssignment.for_zone(zone_number, leaders)

    @staticmethod
    def _json(response):
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _error_message(payload):
        if isinstance(payload, dict):
            for key in ('error', 'detail'):
                if payload.get(key):
                    return str(payload[key])
        return GENERIC_ERROR_MESSAGE
