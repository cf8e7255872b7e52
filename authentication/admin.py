"""
Django admin configuration for console accounts.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import UserChangeForm, UserCreationForm
from django.utils.translation import gettext_lazy as _

from .models import User


class ConsoleUserCreationForm(UserCreationForm):
    class Meta:
        model = User
        fields = ('email', 'church_name', 'parish_name')


class ConsoleUserChangeForm(UserChangeForm):
    class Meta:
        model = User
        fields = '__all__'


@admin.register(User)
class ConsoleUserAdmin(BaseUserAdmin):
    """Admin for email-login console accounts."""

    form = ConsoleUserChangeForm
    add_form = ConsoleUserCreationForm

    list_display = ('email', 'church_name', 'parish_name', 'is_staff', 'is_active', 'last_login')
    list_filter = ('is_staff', 'is_superuser', 'is_active')
    search_fields = ('email', 'church_name', 'parish_name')
    ordering = ('email',)
    readonly_fields = ('last_login', 'date_joined', 'created_at', 'updated_at')

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        (_('Church'), {'fields': ('church_name', 'parish_name')}),
        (_('Permissions'), {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        (_('Important dates'), {
            'fields': ('last_login', 'date_joined', 'created_at', 'updated_at'),
        }),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'church_name', 'parish_name', 'password1', 'password2'),
        }),
    )
