"""
Testing settings for parish_console project.

This file contains settings specific to running tests.
Optimized for speed and isolation.
"""

from .base import *

# ============================================================================
# DEBUG & TESTING
# ============================================================================

DEBUG = False
TESTING = True

# ============================================================================
# DATABASE - Testing
# ============================================================================

# Use in-memory SQLite for faster tests
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# ============================================================================
# PASSWORD HASHING - Testing
# ============================================================================

# Use faster password hasher for tests (speeds up user creation)
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

# ============================================================================
# LOGGING - Testing
# ============================================================================

# Minimize logging during tests (set to DEBUG to troubleshoot)
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
}

# ============================================================================
# THROTTLING - Testing
# ============================================================================

REST_FRAMEWORK['DEFAULT_THROTTLE_RATES'] = {
    'anon': '10000/hour',
    'user': '10000/hour',
    'login': '10000/hour',
    'registration': '10000/hour',
}

# ============================================================================
# SECURITY - Testing
# ============================================================================

SECRET_KEY = 'test-secret-key-not-for-production'  # nosec - test environment only
SIMPLE_JWT['SIGNING_KEY'] = SECRET_KEY
ALLOWED_HOSTS = ['*']
CSRF_COOKIE_SECURE = False
SESSION_COOKIE_SECURE = False
SECURE_SSL_REDIRECT = False
