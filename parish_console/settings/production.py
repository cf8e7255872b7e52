"""
Production settings for parish_console project.

This file contains settings specific to production deployment.
Security and performance optimized.
"""

from .base import *

# ============================================================================
# SECRET KEY VALIDATION
# ============================================================================

SECRET_KEY = config('SECRET_KEY')
SIMPLE_JWT['SIGNING_KEY'] = SECRET_KEY

if SECRET_KEY.startswith('django-insecure-'):
    raise ValueError(
        "Production SECRET_KEY must not use the default insecure key. "
        "Please set a proper SECRET_KEY environment variable."
    )

if len(SECRET_KEY) < 32:
    raise ValueError(
        "Production SECRET_KEY must be at least 32 characters long for security. "
        f"Current length: {len(SECRET_KEY)}"
    )

# ============================================================================
# MIDDLEWARE - Production
# ============================================================================

# Serve admin static assets straight from the app server
MIDDLEWARE.insert(
    MIDDLEWARE.index('django.middleware.security.SecurityMiddleware') + 1,
    'whitenoise.middleware.WhiteNoiseMiddleware',
)

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}

# ============================================================================
# PRODUCTION SECURITY
# ============================================================================

DEBUG = False

ALLOWED_HOSTS = config('ALLOWED_HOSTS', cast=Csv())
CSRF_TRUSTED_ORIGINS = config('CSRF_TRUSTED_ORIGINS', default='', cast=Csv())

SECURE_SSL_REDIRECT = config('SECURE_SSL_REDIRECT', default=True, cast=bool)
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SECURE_HSTS_SECONDS = 31536000  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_CONTENT_TYPE_NOSNIFF = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
X_FRAME_OPTIONS = 'DENY'

# ============================================================================
# DATABASE - Production (PostgreSQL)
# ============================================================================

DATABASE_URL = config('DATABASE_URL', default='')

if DATABASE_URL:
    import dj_database_url
    DATABASES = {
        'default': dj_database_url.parse(
            DATABASE_URL,
            conn_max_age=60,
        )
    }

# ============================================================================
# CACHE - Production
# ============================================================================

CACHE_URL = config('CACHE_URL', default=None)

if CACHE_URL:
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.redis.RedisCache',
            'LOCATION': CACHE_URL,
            'KEY_PREFIX': 'parish_console',
            'TIMEOUT': 300,
        }
    }

# ============================================================================
# LOGGING - Production
# ============================================================================

LOGGING['loggers']['parish_console']['level'] = 'INFO'
