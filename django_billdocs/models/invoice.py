"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

This module implements the InvoiceModel, the Sales Invoice/ Tax Invoice issued to a customer for the supply of goods
or services. Invoices are billed to one party and shipped to another, and carry up to four positional line items on
the rendered template.

Examples
________
>>> from django_billdocs.io.documents import InvoiceService
>>> invoice_model = InvoiceService().create(payload=request_json)
>>> invoice_model.document_number
'INV-240518-001'
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from django_billdocs.models.billing import BillingDocumentModelAbstract, LineItemModelAbstract
from django_billdocs.models.sequence import DocumentSequenceModel

__all__ = [
    'InvoiceModelAbstract',
    'InvoiceModel',
    'InvoiceLineItemModel'
]


class InvoiceModelAbstract(BillingDocumentModelAbstract):
    SEQUENCE_KEY = DocumentSequenceModel.KEY_INVOICE
    PARTY_FIELDS = ('bill_to', 'ship_to')
    DOCUMENT_LABEL = 'Invoice'

    PAYMENT_MODE_BANK_TRANSFER = 'bank-transfer'
    PAYMENT_MODE_CREDIT_CARD = 'credit-card'
    PAYMENT_MODE_DEBIT_CARD = 'debit-card'
    PAYMENT_MODE_UPI = 'upi'
    PAYMENT_MODE_CASH = 'cash'
    PAYMENT_MODE_CHEQUE = 'cheque'

    PAYMENT_MODE_CHOICES = [
        (PAYMENT_MODE_BANK_TRANSFER, _('Bank Transfer')),
        (PAYMENT_MODE_CREDIT_CARD, _('Credit Card')),
        (PAYMENT_MODE_DEBIT_CARD, _('Debit Card')),
        (PAYMENT_MODE_UPI, _('UPI')),
        (PAYMENT_MODE_CASH, _('Cash')),
        (PAYMENT_MODE_CHEQUE, _('Cheque')),
    ]

    bill_to = models.JSONField(verbose_name=_('Bill To'))
    ship_to = models.JSONField(verbose_name=_('Ship To'))
    payment_mode = models.CharField(max_length=20,
                                    choices=PAYMENT_MODE_CHOICES,
                                    default=PAYMENT_MODE_BANK_TRANSFER,
                                    verbose_name=_('Payment Mode'))

    class Meta(BillingDocumentModelAbstract.Meta):
        abstract = True
        verbose_name = _('Invoice')
        verbose_name_plural = _('Invoices')


class InvoiceModel(InvoiceModelAbstract):
    """
    Base Invoice Model from Abstract.
    """


class InvoiceLineItemModel(LineItemModelAbstract):
    invoice_model = models.ForeignKey('django_billdocs.InvoiceModel',
                                      on_delete=models.CASCADE,
                                      related_name='items',
                                      verbose_name=_('Invoice'))

    class Meta(LineItemModelAbstract.Meta):
        verbose_name = _('Invoice Line Item')
        unique_together = [
            ('invoice_model', 'position')
        ]
