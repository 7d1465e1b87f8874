"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError
from django.db import connections, DEFAULT_DB_ALIAS
from django.db.utils import OperationalError

from django_billdocs.settings import logger


class Command(BaseCommand):
    help = 'Verifies the database connection and starts the BillDocs development server on the configured PORT.'

    def add_arguments(self, parser):
        parser.add_argument('--port', type=int, default=None, help='Overrides the PORT setting.')
        parser.add_argument('--host', type=str, default='0.0.0.0')
        parser.add_argument('--check-only', action='store_true', help='Verifies the database connection and exits.')

    def check_database(self):
        connection = connections[DEFAULT_DB_ALIAS]
        try:
            connection.ensure_connection()
        except OperationalError as e:
            logger.error(f'Database connection failed: {e}')
            raise CommandError(f'Unable to connect to the database: {e}') from e
        self.stdout.write(self.style.SUCCESS(f'Connected to {connection.vendor} database.'))

    def handle(self, *args, **options):
        self.check_database()
        if options['check_only']:
            return

        port = options['port'] or getattr(settings, 'PORT', 5002)
        logger.info(f'Server running on port {port}')
        call_command('runserver', f'{options["host"]}:{port}', use_reloader=False)
