"""
Management command to check Daraja credentials.
"""

from django.core.management.base import BaseCommand, CommandError

from daraja.client import DarajaClient
from daraja.exceptions import ConfigurationError


class Command(BaseCommand):
    help = 'Request a Daraja access token with the configured credentials'

    def handle(self, *args, **options):
        try:
            client = DarajaClient.from_settings()
        except ConfigurationError as e:
            raise CommandError(f'Invalid Daraja configuration: {e.message}')

        self.stdout.write(
            f'Requesting access token from {client.config.base_url} '
            f'({client.config.environment.value})...'
        )

        try:
            success, errors = client.authorize()
        finally:
            client.close()

        if not success:
            for error in errors:
                self.stdout.write(self.style.ERROR(f'  - {error}'))
            raise CommandError('Authorization failed')

        self.stdout.write(self.style.SUCCESS('✓ Authorization successful'))
        self.stdout.write(f'  Token expires at: {client.session.expiry.isoformat()}')
