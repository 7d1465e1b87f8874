"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from datetime import date
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import SimpleTestCase

from django_billdocs.io.binding import (build_document_binding, InvoiceBinding, PurchaseOrderBinding,
                                        LineItemBinding, ITEM_KEYS)
from django_billdocs.io.formatting import (format_amount, parse_amount, parse_quantity, format_percent,
                                           format_quantity, format_date, format_text)
from django_billdocs.tests.base import DjangoBillDocsBaseTest


class FormattingTest(SimpleTestCase):

    def test_format_amount(self):
        self.assertEqual(format_amount(Decimal('1200.5')), '1200.50')
        self.assertEqual(format_amount(0), '0.00')
        self.assertEqual(format_amount(2.675), '2.68')
        self.assertEqual(format_amount('10'), '10.00')

    def test_amount_round_trip(self):
        for value in ['0.00', '1200.50', '99999.99', '0.01', '432.18']:
            amount = Decimal(value)
            self.assertEqual(parse_amount(format_amount(amount)), amount)

    def test_parse_amount_invalid(self):
        with self.assertRaises(ValidationError):
            parse_amount('twelve')

    def test_parse_non_finite(self):
        for value in (float('nan'), float('inf'), float('-inf'), Decimal('NaN')):
            with self.assertRaises(ValidationError, msg=f'{value}'):
                parse_amount(value)
            with self.assertRaises(ValidationError, msg=f'{value}'):
                parse_quantity(value)

    def test_parse_out_of_range(self):
        with self.assertRaises(ValidationError):
            parse_amount(1e300)

    def test_format_text(self):
        self.assertEqual(format_text('Widget\x01A'), 'WidgetA')
        self.assertEqual(format_text('Line\tone\nline two'), 'Line\tone\nline two')
        self.assertEqual(format_text(None), '')

    def test_format_percent(self):
        self.assertEqual(format_percent(Decimal('18.00')), '18%')
        self.assertEqual(format_percent(Decimal('12.50')), '12.5%')
        self.assertEqual(format_percent(0), '0%')

    def test_format_quantity(self):
        self.assertEqual(format_quantity(Decimal('2.000')), '2')
        self.assertEqual(format_quantity(Decimal('2.500')), '2.5')

    def test_format_date(self):
        self.assertEqual(format_date(date(2024, 5, 18)), '18/05/2024')
        self.assertEqual(format_date(None), '')


class DocumentBindingTest(DjangoBillDocsBaseTest):

    def test_invoice_placeholders(self):
        invoice_model = self.create_invoice(
            items=[self.get_line_item(), self.get_line_item(description='Support', gstRate=12.5)],
            poreferencevalue='PO-REF-1',
            referenceDate=None,
        )
        binding = build_document_binding(invoice_model)
        self.assertIsInstance(binding, InvoiceBinding)
        placeholders = binding.to_placeholders()

        self.assertEqual(set(placeholders), InvoiceBinding.placeholder_keys())
        self.assertEqual(placeholders['InvoiceNo'], 'INV-240518-001')
        self.assertEqual(placeholders['InvoiceDate'], '18/05/2024')
        self.assertEqual(placeholders['invoicereference'], 'PO-REF-1')
        self.assertEqual(placeholders['referenceDate'], '')
        self.assertEqual(placeholders['BillToClientName'], invoice_model.bill_to['name'])
        self.assertEqual(placeholders['ShipToGSTIN'], invoice_model.ship_to['GSTIN'])
        self.assertEqual(placeholders['BillToSecondaryTaxId'], '')

        self.assertEqual(placeholders['SL1'], 1)
        self.assertEqual(placeholders['Description1'], 'Consulting Services')
        self.assertEqual(placeholders['Quantity1'], '2')
        self.assertEqual(placeholders['Rate1'], '1200.50')
        self.assertEqual(placeholders['GSTRate1'], '18%')
        self.assertEqual(placeholders['SL2'], 2)
        self.assertEqual(placeholders['Description2'], 'Support')
        self.assertEqual(placeholders['GSTRate2'], '12.5%')

    def test_absent_rows(self):
        for item_count in range(1, 5):
            invoice_model = self.create_invoice(item_count=item_count)
            placeholders = build_document_binding(invoice_model).to_placeholders()
            for slot in range(1, 5):
                row_values = [placeholders[f'{k}{slot}'] for k in ITEM_KEYS]
                if slot <= item_count:
                    self.assertTrue(all(v is not None for v in row_values))
                else:
                    self.assertTrue(all(v is None for v in row_values))

    def test_items_beyond_template_rows(self):
        invoice_model = self.create_invoice(item_count=6)
        with self.assertLogs('Django BillDocs Logger', level='WARNING'):
            binding = build_document_binding(invoice_model)
        placeholders = binding.to_placeholders()

        self.assertEqual(binding.omitted_item_count, 2)
        self.assertEqual(len(binding.items), 4)
        self.assertNotIn('SL5', placeholders)
        self.assertEqual(placeholders['SL4'], 4)

    def test_items_keep_insertion_order(self):
        items = [self.get_line_item(description=f'Item {i}') for i in range(1, 4)]
        invoice_model = self.create_invoice(items=items)
        placeholders = build_document_binding(invoice_model).to_placeholders()
        self.assertEqual([placeholders[f'Description{i}'] for i in range(1, 4)], ['Item 1', 'Item 2', 'Item 3'])

    def test_purchase_order_placeholders(self):
        vendor = self.GENERATOR.get_party()
        vendor['secondaryTaxId'] = 'PAN-1234'
        po_model = self.create_purchase_order(vendor=vendor, poreferencevalue='Q-77')
        binding = build_document_binding(po_model)
        self.assertIsInstance(binding, PurchaseOrderBinding)
        placeholders = binding.to_placeholders()

        self.assertEqual(set(placeholders), PurchaseOrderBinding.placeholder_keys())
        self.assertEqual(placeholders['PurchaseOrderNo'], 'PO-240518-001')
        self.assertEqual(placeholders['poDate'], '18/05/2024')
        self.assertEqual(placeholders['purchaseorderreference'], 'Q-77')
        self.assertEqual(placeholders['PaymentMode'], po_model.payment_terms)
        self.assertEqual(placeholders['BillToClientName'], vendor['name'])
        self.assertEqual(placeholders['BillToSecondaryTaxId'], 'PAN-1234')
        self.assertEqual(placeholders['ShipToClientName'], po_model.deliver_to['name'])
        self.assertNotIn('InvoiceNo', placeholders)

    def test_line_item_keys(self):
        self.assertEqual(LineItemBinding.placeholder_keys(3)[0], 'SL3')
        self.assertEqual(len(InvoiceBinding.placeholder_keys(item_rows=4)), 13 + 2 * 5 + 4 * 9)
