"""
Django settings module selector.

This module automatically loads the appropriate settings based on the environment.
A concrete module named in DJANGO_SETTINGS_MODULE (e.g. ``parish_console.settings.testing``)
is imported by Django directly and skips the selector.
"""

import os
from decouple import config

django_settings_module = os.environ.get('DJANGO_SETTINGS_MODULE', '')

if django_settings_module.rsplit('.', 1)[-1] in ('development', 'production', 'testing'):
    pass
else:
    ENVIRONMENT = config('DJANGO_ENVIRONMENT', default='development')

    if ENVIRONMENT == 'production':
        from .production import *
    elif ENVIRONMENT == 'testing':
        from .testing import *
    else:
        from .development import *
