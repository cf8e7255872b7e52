"""
Python client for the parish console API.

Importable without Django: it talks to the server over HTTP and keeps the
signed-in session in a small JSON file.
"""

from .client import ApiError, ConsoleClient, Resource
from .session import SessionStore

__all__ = ['ApiError', 'ConsoleClient', 'Resource', 'SessionStore']
