"""
Throttling classes for the console's authentication endpoints.

Rates come from REST_FRAMEWORK['DEFAULT_THROTTLE_RATES'] under the scope
names below.
"""

from rest_framework.throttling import AnonRateThrottle


class LoginRateThrottle(AnonRateThrottle):
    """Per-IP limit on login attempts."""
    scope = 'login'


class RegistrationRateThrottle(AnonRateThrottle):
    """Per-IP limit on console account registration."""
    scope = 'registration'
