"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from io import StringIO
from unittest.mock import patch

from django.core.management import call_command
from django.core.management.base import CommandError
from django.db.utils import OperationalError

from django_billdocs.models import ClientModel, InvoiceModel, PurchaseOrderModel
from django_billdocs.tests.base import DjangoBillDocsBaseTest


class ManagementCommandTest(DjangoBillDocsBaseTest):

    def test_seed(self):
        out = StringIO()
        call_command('billdocs_seed', clients=2, invoices=3, purchase_orders=1, seed=7, stdout=out)
        self.assertEqual(ClientModel.objects.count(), 2)
        self.assertEqual(InvoiceModel.objects.count(), 3)
        self.assertEqual(PurchaseOrderModel.objects.count(), 1)
        self.assertIn('Created 3 invoices.', out.getvalue())

    def test_serve_check_only(self):
        out = StringIO()
        call_command('billdocs_serve', check_only=True, stdout=out)
        self.assertIn('Connected to', out.getvalue())

    def test_serve_database_unavailable(self):
        with patch('django.db.backends.base.base.BaseDatabaseWrapper.ensure_connection',
                   side_effect=OperationalError('connection refused')):
            with self.assertRaises(CommandError):
                call_command('billdocs_serve', check_only=True, stdout=StringIO())
