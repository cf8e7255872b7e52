"""
Authentication URL configuration.

Mounted at ``/api/users/``; trailing slashes are optional.
"""

from django.urls import re_path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import register_view, login_view, logout_view, me_view

app_name = 'authentication'

urlpatterns = [
    re_path(r'^register/?$', register_view, name='register'),
    re_path(r'^login/?$', login_view, name='login'),
    re_path(r'^logout/?$', logout_view, name='logout'),
    re_path(r'^me/?$', me_view, name='me'),
    re_path(r'^token/refresh/?$', TokenRefreshView.as_view(), name='token-refresh'),
]
