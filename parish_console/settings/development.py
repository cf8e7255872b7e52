"""
Development settings for parish_console project.

This file contains settings specific to local development.
"""

from .base import *

# ============================================================================
# DEBUG & DEVELOPMENT
# ============================================================================

DEBUG = True
ALLOWED_HOSTS = ['localhost', '127.0.0.1', '0.0.0.0']

# ============================================================================
# CORS & CSRF - Development
# ============================================================================

CORS_ALLOWED_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

CSRF_TRUSTED_ORIGINS = list(CORS_ALLOWED_ORIGINS)
CSRF_COOKIE_SECURE = False
SESSION_COOKIE_SECURE = False

# ============================================================================
# SECURITY - Development (Relaxed)
# ============================================================================

SECURE_SSL_REDIRECT = False
SECURE_HSTS_SECONDS = 0
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'

# ============================================================================
# LOGGING - Development
# ============================================================================

LOGGING['root']['level'] = 'DEBUG'
LOGGING['loggers']['parish_console']['level'] = 'DEBUG'
LOGGING['loggers']['django']['level'] = 'INFO'

# Add Django SQL queries logging in development
LOGGING['loggers']['django.db.backends'] = {
    'handlers': ['console'],
    'level': 'DEBUG' if config('LOG_SQL', default=False, cast=bool) else 'INFO',
    'propagate': False,
}

# ============================================================================
# API THROTTLING - Development (Relaxed)
# ============================================================================

REST_FRAMEWORK['DEFAULT_THROTTLE_RATES'] = {
    'anon': '1000/hour',
    'user': '10000/hour',
    'login': '100/hour',
    'registration': '100/hour',
}

# ============================================================================
# JWT - Development (Longer tokens)
# ============================================================================

SIMPLE_JWT.update({
    'ACCESS_TOKEN_LIFETIME': timedelta(days=1),
    'REFRESH_TOKEN_LIFETIME': timedelta(days=30),
})
