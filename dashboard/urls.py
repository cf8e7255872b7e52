"""
Dashboard URL configuration.
"""

from django.urls import re_path

from .views import dashboard_view

app_name = 'dashboard'

urlpatterns = [
    re_path(r'^dashboard/?$', dashboard_view, name='overview'),
]
