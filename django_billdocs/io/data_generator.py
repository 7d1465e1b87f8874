"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

Random sample data for development and testing. The generator produces API payloads (the same JSON documents
accepted by the HTTP endpoints) and can populate the database through the document services.
"""

from datetime import date, timedelta
from decimal import Decimal
from random import Random
from string import ascii_uppercase, digits
from typing import List, Optional

from django.core.exceptions import ImproperlyConfigured
from django.utils.timezone import localdate

from django_billdocs.io.documents import InvoiceService, PurchaseOrderService, ClientService
from django_billdocs.io.formatting import parse_amount

try:
    from faker import Faker
    from faker.providers import company, address

    FAKER_IMPORTED = True
except ImportError:
    FAKER_IMPORTED = False

ONES = ['', 'One', 'Two', 'Three', 'Four', 'Five', 'Six', 'Seven', 'Eight', 'Nine', 'Ten', 'Eleven', 'Twelve',
        'Thirteen', 'Fourteen', 'Fifteen', 'Sixteen', 'Seventeen', 'Eighteen', 'Nineteen']
TENS = ['', '', 'Twenty', 'Thirty', 'Forty', 'Fifty', 'Sixty', 'Seventy', 'Eighty', 'Ninety']
SCALES = [(10 ** 9, 'Billion'), (10 ** 6, 'Million'), (1000, 'Thousand'), (100, 'Hundred')]


def integer_to_words(n: int) -> str:
    if n == 0:
        return 'Zero'
    for scale, name in SCALES:
        if n >= scale:
            head, rest = divmod(n, scale)
            words = f'{integer_to_words(head)} {name}'
            return f'{words} {integer_to_words(rest)}' if rest else words
    if n < 20:
        return ONES[n]
    tens, rest = divmod(n, 10)
    return f'{TENS[tens]} {ONES[rest]}' if rest else TENS[tens]


def amount_to_words(amount: Decimal, currency: str) -> str:
    whole = int(amount)
    cents = int((amount - whole) * 100)
    words = f'{currency} {integer_to_words(whole)}'
    if cents:
        words += f' and {integer_to_words(cents)} Cents'
    return f'{words} Only'


class BillingDataGenerator:
    """
    Generates random clients, invoices and purchase orders.

    Parameters
    ----------
    seed: int
        Optional seed making the generated data reproducible.
    currency: str
        Currency code used on every generated document.
    """
    GST_RATES = [Decimal('5'), Decimal('12'), Decimal('18'), Decimal('28')]
    PAYMENT_MODES = ['bank-transfer', 'credit-card', 'upi', 'cheque']
    PAYMENT_TERMS = ['net-30', 'net-60', 'advance', 'cod']

    def __init__(self, seed: Optional[int] = None, currency: str = 'INR'):
        if not FAKER_IMPORTED:
            raise ImproperlyConfigured('Must install Faker library to generate random data.')

        self.fk = Faker(['en_US'])
        self.fk.add_provider(company)
        self.fk.add_provider(address)
        self.rnd = Random(seed)
        if seed is not None:
            self.fk.seed_instance(seed)
        self.CURRENCY = currency
        self.local_date = localdate()

    def get_state_code(self) -> str:
        return f'{self.rnd.randint(1, 37):02d}'

    def get_gstin(self, state_code: str) -> str:
        pan_letters = ''.join(self.rnd.choices(ascii_uppercase, k=5))
        pan_digits = ''.join(self.rnd.choices(digits, k=4))
        return ''.join([
            state_code,
            pan_letters,
            pan_digits,
            self.rnd.choice(ascii_uppercase),
            self.rnd.choice('123456789' + ascii_uppercase),
            'Z',
            self.rnd.choice(digits + ascii_uppercase)
        ])

    def get_party(self, state_code: Optional[str] = None) -> dict:
        state_code = state_code or self.get_state_code()
        return {
            'name': self.fk.company(),
            'address': self.fk.address().replace('\n', ', '),
            'stateCode': state_code,
            'GSTIN': self.get_gstin(state_code),
        }

    def get_client_payload(self) -> dict:
        party = self.get_party()
        return {
            'name': party['name'],
            'address': party['address'],
            'stateCode': party['stateCode'],
            'gstin': party['GSTIN'],
        }

    def get_line_item(self) -> dict:
        quantity = Decimal(self.rnd.randint(1, 20))
        rate = parse_amount(Decimal(self.rnd.randint(500, 500000)) / 100)
        gst_rate = self.rnd.choice(self.GST_RATES)
        taxable_value = parse_amount(quantity * rate)
        gst_amount = parse_amount(taxable_value * gst_rate / 100)
        return {
            'description': self.fk.catch_phrase(),
            'hsnSac': ''.join(self.rnd.choices(digits, k=6)),
            'quantity': float(quantity),
            'rate': float(rate),
            'taxableValue': float(taxable_value),
            'gstRate': float(gst_rate),
            'gstAmount': float(gst_amount),
            'total': float(taxable_value + gst_amount),
        }

    def get_totals(self, items: List[dict], intra_state: bool) -> dict:
        taxable = sum(parse_amount(i['taxableValue']) for i in items)
        tax = sum(parse_amount(i['gstAmount']) for i in items)
        cgst = sgst = igst = Decimal('0.00')
        if intra_state:
            cgst = parse_amount(tax / 2)
            sgst = tax - cgst
        else:
            igst = tax
        grand_total = taxable + tax
        return {
            'totalTaxableValue': float(taxable),
            'totalCGSTAmount': float(cgst),
            'totalSGSTAmount': float(sgst),
            'totalIGSTAmount': float(igst),
            'grandTotal': grand_total,
            'valueInWords': amount_to_words(grand_total, self.CURRENCY),
        }

    def get_document_payload(self, item_count: int, issue_date: Optional[date]) -> dict:
        issue_date = issue_date or self.local_date
        primary = self.get_party()
        secondary = self.get_party(state_code=primary['stateCode'] if self.rnd.random() < 0.5 else None)
        items = [self.get_line_item() for _ in range(item_count)]
        totals = self.get_totals(items, intra_state=primary['stateCode'] == secondary['stateCode'])
        grand_total = totals.pop('grandTotal')
        return {
            'issueDate': issue_date,
            'dueDate': issue_date + timedelta(days=self.rnd.choice([15, 30, 45])),
            'primary': primary,
            'secondary': secondary,
            'grandTotal': float(grand_total),
            'payload': {
                'poreferencevalue': f'REF-{self.rnd.randint(1000, 9999)}',
                'referenceDate': (issue_date - timedelta(days=self.rnd.randint(1, 10))).isoformat(),
                'currency': self.CURRENCY,
                'items': items,
                'withSignature': self.rnd.random() < 0.5,
                **totals
            }
        }

    def get_invoice_payload(self, item_count: int = 2, issue_date: Optional[date] = None) -> dict:
        document = self.get_document_payload(item_count=item_count, issue_date=issue_date)
        return {
            'invoiceDate': document['issueDate'].isoformat(),
            'dueDate': document['dueDate'].isoformat(),
            'amountDue': document['grandTotal'],
            'paymentMode': self.rnd.choice(self.PAYMENT_MODES),
            'billTo': document['primary'],
            'shipTo': document['secondary'],
            **document['payload']
        }

    def get_purchase_order_payload(self, item_count: int = 2, issue_date: Optional[date] = None) -> dict:
        document = self.get_document_payload(item_count=item_count, issue_date=issue_date)
        return {
            'poDate': document['issueDate'].isoformat(),
            'deliveryDate': document['dueDate'].isoformat(),
            'totalAmount': document['grandTotal'],
            'paymentTerms': self.rnd.choice(self.PAYMENT_TERMS),
            'vendor': document['primary'],
            'deliverTo': document['secondary'],
            **document['payload']
        }

    def populate(self, clients: int = 5, invoices: int = 10, purchase_orders: int = 10) -> dict:
        client_service = ClientService()
        invoice_service = InvoiceService()
        po_service = PurchaseOrderService()

        client_models = [client_service.create(self.get_client_payload()) for _ in range(clients)]
        invoice_models = [
            invoice_service.create(self.get_invoice_payload(item_count=self.rnd.randint(1, 4)))
            for _ in range(invoices)
        ]
        po_models = [
            po_service.create(self.get_purchase_order_payload(item_count=self.rnd.randint(1, 4)))
            for _ in range(purchase_orders)
        ]
        return {
            'clients': client_models,
            'invoices': invoice_models,
            'purchase_orders': po_models,
        }
