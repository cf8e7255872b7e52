"""
Create a staff account for the Django admin screens.

Usage:
    python manage.py create_console_admin --email office@stmarys.example \
        --church-name "St. Mary's Church" --parish-name "Holy Family Parish"

Or use environment variables:
    ADMIN_EMAIL=... ADMIN_PASSWORD=... ADMIN_CHURCH_NAME=... ADMIN_PARISH_NAME=... \
        python manage.py create_console_admin --no-input
"""

import getpass

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from decouple import config
import structlog

User = get_user_model()
logger = structlog.get_logger(__name__)


class Command(BaseCommand):
    help = 'Create a superuser console account'

    def add_arguments(self, parser):
        parser.add_argument('--email', type=str, help='Admin email address')
        parser.add_argument('--password', type=str, help='Admin password')
        parser.add_argument('--church-name', type=str, help='Church the account administers')
        parser.add_argument('--parish-name', type=str, help='Parish the church belongs to')
        parser.add_argument(
            '--skip-if-exists',
            action='store_true',
            help='Exit quietly if the account already exists',
        )
        parser.add_argument(
            '--no-input',
            action='store_true',
            help='Never prompt; fail when a value is missing',
        )

    def handle(self, *args, **options):
        interactive = not options['no_input']

        email = self._value(options, 'email', 'ADMIN_EMAIL', 'Admin email: ', interactive)
        email = email.strip().lower()

        if User.objects.filter(email__iexact=email).exists():
            if options['skip_if_exists']:
                self.stdout.write(self.style.WARNING(f'{email} already exists. Skipping.'))
                return
            raise CommandError(f'An account with email {email} already exists.')

        church_name = self._value(options, 'church_name', 'ADMIN_CHURCH_NAME', 'Church name: ', interactive)
        parish_name = self._value(options, 'parish_name', 'ADMIN_PARISH_NAME', 'Parish name: ', interactive)
        password = options.get('password') or config('ADMIN_PASSWORD', default='')

        if not password and interactive:
            password = getpass.getpass('Password: ')
            if password != getpass.getpass('Confirm password: '):
                raise CommandError('Passwords do not match.')
        if not password:
            raise CommandError('A password is required.')

        with transaction.atomic():
            user = User.objects.create_superuser(
                email=email,
                password=password,
                church_name=church_name,
                parish_name=parish_name,
            )

        logger.info("Console admin created", user_id=str(user.id))
        self.stdout.write(self.style.SUCCESS(f'Admin account created for {email}'))

    def _value(self, options, name, env_var, prompt, interactive):
        value = options.get(name) or config(env_var, default='')
        if not value and interactive:
            value = input(prompt)
        if not value:
            raise CommandError(f'--{name.replace("_", "-")} is required.')
        return value
