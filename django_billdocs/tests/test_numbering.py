"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from datetime import date

from django.db import IntegrityError

from django_billdocs.io.documents import InvoiceService
from django_billdocs.io.numbering import DocumentNumberAllocator, parse_document_sequence
from django_billdocs.models import InvoiceModel, PurchaseOrderModel, DocumentSequenceModel
from django_billdocs.tests.base import DjangoBillDocsBaseTest


class StaleNumberAllocator(DocumentNumberAllocator):
    """Hands out already used numbers before falling back to regular allocation."""

    def __init__(self, *args, stale_numbers, **kwargs):
        super().__init__(*args, **kwargs)
        self.STALE_NUMBERS = list(stale_numbers)

    def next_number(self, dt=None) -> str:
        if self.STALE_NUMBERS:
            return self.STALE_NUMBERS.pop(0)
        return super().next_number(dt=dt)


class DocumentNumberParseTest(DjangoBillDocsBaseTest):

    def test_parse(self):
        self.assertEqual(parse_document_sequence('INV-240518-007', 'INV-240518'), 7)
        self.assertEqual(parse_document_sequence('INV-240518-1000', 'INV-240518'), 1000)

    def test_parse_malformed(self):
        self.assertIsNone(parse_document_sequence(None, 'INV-240518'))
        self.assertIsNone(parse_document_sequence('', 'INV-240518'))
        self.assertIsNone(parse_document_sequence('INV-240518-ABC', 'INV-240518'))
        self.assertIsNone(parse_document_sequence('INV-240518-', 'INV-240518'))
        self.assertIsNone(parse_document_sequence('PO-240518-001', 'INV-240518'))
        self.assertIsNone(parse_document_sequence('INV-240518-00\u00b2', 'INV-240518'))


class DocumentNumberAllocatorTest(DjangoBillDocsBaseTest):

    def test_sequence_per_date(self):
        first = self.create_invoice()
        second = self.create_invoice()
        self.assertEqual(first.document_number, 'INV-240518-001')
        self.assertEqual(second.document_number, 'INV-240518-002')

        next_day = self.create_invoice(dt=date(2024, 5, 19))
        self.assertEqual(next_day.document_number, 'INV-240519-001')

    def test_sequence_per_kind(self):
        invoice_model = self.create_invoice()
        po_model = self.create_purchase_order()
        self.assertEqual(invoice_model.document_number, 'INV-240518-001')
        self.assertEqual(po_model.document_number, 'PO-240518-001')

    def test_counter_row(self):
        self.create_invoice()
        self.create_invoice()
        state_model = DocumentSequenceModel.objects.get(key=DocumentSequenceModel.KEY_INVOICE, date=self.ISSUE_DATE)
        self.assertEqual(state_model.sequence, 2)

    def test_numbers_are_unique(self):
        numbers = [self.create_invoice(item_count=1).document_number for _ in range(6)]
        self.assertEqual(len(set(numbers)), 6)
        self.assertEqual(numbers[-1], 'INV-240518-006')

    def test_malformed_last_number(self):
        invoice_model = self.create_invoice()
        InvoiceModel.objects.filter(uuid=invoice_model.uuid).update(document_number='INV-240518-ABC')
        DocumentSequenceModel.objects.all().delete()

        allocator = DocumentNumberAllocator(model_class=InvoiceModel)
        self.assertEqual(allocator.next_number(dt=self.ISSUE_DATE), 'INV-240518-001')

    def test_malformed_number_does_not_hide_valid_ones(self):
        valid = self.create_invoice()
        malformed = self.create_invoice()
        InvoiceModel.objects.filter(uuid=valid.uuid).update(document_number='INV-240518-005')
        InvoiceModel.objects.filter(uuid=malformed.uuid).update(document_number='INV-240518-ABC')
        DocumentSequenceModel.objects.all().delete()

        allocator = DocumentNumberAllocator(model_class=InvoiceModel)
        self.assertEqual(allocator.next_number(dt=self.ISSUE_DATE), 'INV-240518-006')

    def test_non_ascii_digit_suffix(self):
        invoice_model = self.create_invoice()
        InvoiceModel.objects.filter(uuid=invoice_model.uuid).update(document_number='INV-240518-00\u00b2')
        DocumentSequenceModel.objects.all().delete()

        allocator = DocumentNumberAllocator(model_class=InvoiceModel)
        self.assertEqual(allocator.next_number(dt=self.ISSUE_DATE), 'INV-240518-001')

    def test_number_inserted_outside_allocator(self):
        invoice_model = self.create_invoice()
        InvoiceModel.objects.filter(uuid=invoice_model.uuid).update(document_number='INV-240518-007')

        allocator = DocumentNumberAllocator(model_class=InvoiceModel)
        self.assertEqual(allocator.next_number(dt=self.ISSUE_DATE), 'INV-240518-008')

        DocumentSequenceModel.objects.all().delete()
        InvoiceModel.objects.filter(uuid=invoice_model.uuid).update(document_number='INV-240518-020')
        self.assertEqual(allocator.next_number(dt=self.ISSUE_DATE), 'INV-240518-021')

    def test_sequence_beyond_padding(self):
        self.create_invoice()
        DocumentSequenceModel.objects.filter(key=DocumentSequenceModel.KEY_INVOICE).update(sequence=999)
        allocator = DocumentNumberAllocator(model_class=InvoiceModel)
        self.assertEqual(allocator.next_number(dt=self.ISSUE_DATE), 'INV-240518-1000')

    def test_number_assigned_once(self):
        invoice_model = self.create_invoice()
        number = invoice_model.document_number
        self.assertFalse(invoice_model.can_generate_document_number())

        allocator = DocumentNumberAllocator(model_class=InvoiceModel)
        self.assertEqual(allocator.allocate(invoice_model, dt=date(2024, 6, 1)), number)

        invoice_model.amount_in_words = 'Updated'
        invoice_model.save()
        invoice_model.refresh_from_db()
        self.assertEqual(invoice_model.document_number, number)
        self.assertFalse(DocumentSequenceModel.objects.filter(date=date(2024, 6, 1)).exists())

    def test_purchase_order_allocator(self):
        allocator = DocumentNumberAllocator(model_class=PurchaseOrderModel)
        self.assertEqual(allocator.get_date_prefix(self.ISSUE_DATE), 'PO-240518')
        self.assertEqual(allocator.next_number(dt=self.ISSUE_DATE), 'PO-240518-001')


class DocumentCreateRetryTest(DjangoBillDocsBaseTest):

    def test_retry_once_on_conflict(self):
        existing = self.create_invoice()
        service = InvoiceService(
            allocator=StaleNumberAllocator(model_class=InvoiceModel, stale_numbers=[existing.document_number])
        )
        with self.assertLogs('Django BillDocs Logger', level='WARNING'):
            invoice_model = service.create(payload=self.get_invoice_payload(), dt=self.ISSUE_DATE)
        self.assertEqual(invoice_model.document_number, 'INV-240518-002')
        self.assertEqual(InvoiceModel.objects.count(), 2)

    def test_second_conflict_fails(self):
        existing = self.create_invoice()
        service = InvoiceService(
            allocator=StaleNumberAllocator(model_class=InvoiceModel,
                                           stale_numbers=[existing.document_number] * 2)
        )
        with self.assertRaises(IntegrityError):
            service.create(payload=self.get_invoice_payload(), dt=self.ISSUE_DATE)
        self.assertEqual(InvoiceModel.objects.count(), 1)
