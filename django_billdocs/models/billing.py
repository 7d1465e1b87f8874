"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

This module implements the abstract BillingDocumentModel shared by the InvoiceModel and the PurchaseOrderModel, as
well as the abstract LineItemModel used to store the billable rows of each document.

Every billing document carries two party blocks (stored as JSON objects), an ordered list of line items and a set of
totals computed by the caller. The document number is assigned once, before the first insert, by the
:func:`DocumentNumberAllocator <django_billdocs.io.numbering.DocumentNumberAllocator>`, and never changes afterwards.
"""

import re
from decimal import Decimal
from typing import Tuple
from uuid import uuid4

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _

from django_billdocs.models.mixins import CreateUpdateMixIn
from django_billdocs.settings import DJANGO_BILLDOCS_DEFAULT_CURRENCY

__all__ = [
    'BillingDocumentModelQuerySet',
    'BillingDocumentModelAbstract',
    'LineItemModelAbstract'
]

ZERO = Decimal('0.00')


class BillingDocumentModelQuerySet(models.QuerySet):
    """
    A custom defined QuerySet shared by the billing documents.
    """

    def search(self, term: str):
        """
        Case-insensitive substring search over the document number and the name & tax id of the primary party.

        Parameters
        ----------
        term: str
            The search term. Blank terms return the QuerySet unchanged.

        Returns
        -------
        BillingDocumentModelQuerySet
        """
        if not term:
            return self
        party_field = self.model.PARTY_FIELDS[0]
        return self.filter(
            Q(document_number__icontains=term) |
            Q(**{f'{party_field}__name__icontains': term}) |
            Q(**{f'{party_field}__GSTIN__icontains': term})
        )

    def with_numeric_suffix(self, prefix: str):
        return self.filter(document_number__regex=rf'^{re.escape(prefix)}-[0-9]+$')


class BillingDocumentModelAbstract(CreateUpdateMixIn):
    """
    Base implementation of a billing document.

    Attributes
    __________
    uuid : UUID
        This is a unique primary key generated for the table. The default value of this field is uuid4().

    document_number: str
        Human-readable unique number, formatted as <PREFIX>-<YYMMDD>-<SEQ>. Assigned once, on creation.

    date_issued: date
        The date the document was issued.

    date_due: date
        The date payment (invoice) or delivery (purchase order) is due.

    date_reference: date
        Optional date of the referenced document.

    reference: str
        Optional reference to an external document, such as the customer's purchase order.

    currency: str
        Currency code. Defaults to DJANGO_BILLDOCS_DEFAULT_CURRENCY.

    amount_due: Decimal
        Document grand total, computed by the caller.

    taxable_value_total: Decimal
        Sum of the taxable value of all line items, computed by the caller.

    cgst_total: Decimal
        Central tax component for intra-state supplies.

    sgst_total: Decimal
        State tax component for intra-state supplies.

    igst_total: Decimal
        Integrated tax component for inter-state supplies.

    amount_in_words: str
        The grand total spelled out.

    with_signature: bool
        Selects the template variant carrying a signature block.
    """
    SEQUENCE_KEY = None
    PARTY_FIELDS: Tuple[str, str] = None
    DOCUMENT_LABEL = None

    uuid = models.UUIDField(default=uuid4, editable=False, primary_key=True)
    document_number = models.CharField(max_length=30,
                                       unique=True,
                                       null=True,
                                       blank=True,
                                       editable=False,
                                       verbose_name=_('Document Number'))
    date_issued = models.DateField(verbose_name=_('Issue Date'))
    date_due = models.DateField(verbose_name=_('Due Date'))
    date_reference = models.DateField(null=True, blank=True, verbose_name=_('Reference Date'))
    reference = models.CharField(max_length=100, blank=True, default='', verbose_name=_('Reference'))
    currency = models.CharField(max_length=10, default=DJANGO_BILLDOCS_DEFAULT_CURRENCY, verbose_name=_('Currency'))

    amount_due = models.DecimalField(max_digits=20,
                                     decimal_places=2,
                                     validators=[MinValueValidator(ZERO)],
                                     verbose_name=_('Amount Due'))
    taxable_value_total = models.DecimalField(max_digits=20,
                                              decimal_places=2,
                                              validators=[MinValueValidator(ZERO)],
                                              verbose_name=_('Total Taxable Value'))
    cgst_total = models.DecimalField(max_digits=20,
                                     decimal_places=2,
                                     validators=[MinValueValidator(ZERO)],
                                     verbose_name=_('Total CGST Amount'))
    sgst_total = models.DecimalField(max_digits=20,
                                     decimal_places=2,
                                     validators=[MinValueValidator(ZERO)],
                                     verbose_name=_('Total SGST Amount'))
    igst_total = models.DecimalField(max_digits=20,
                                     decimal_places=2,
                                     validators=[MinValueValidator(ZERO)],
                                     verbose_name=_('Total IGST Amount'))
    amount_in_words = models.TextField(verbose_name=_('Amount in Words'))
    with_signature = models.BooleanField(default=False, verbose_name=_('With Signature Block'))

    objects = BillingDocumentModelQuerySet.as_manager()

    class Meta:
        abstract = True
        ordering = ['-created']
        indexes = [
            models.Index(fields=['created']),
            models.Index(fields=['date_issued']),
            models.Index(fields=['date_due']),
        ]

    def __str__(self):
        return f'{self.DOCUMENT_LABEL}: {self.document_number or "unnumbered"}'

    def can_generate_document_number(self) -> bool:
        """
        Determines if the document can be issued a number. Documents are numbered exactly once.

        Returns
        -------
        bool
            True if the document has not been numbered yet, else False.
        """
        return not self.document_number

    def get_primary_party(self) -> dict:
        return getattr(self, self.PARTY_FIELDS[0])

    def get_secondary_party(self) -> dict:
        return getattr(self, self.PARTY_FIELDS[1])

    def get_line_items(self):
        return self.items.all().order_by('position')

    def get_filename(self, extension: str) -> str:
        label = self.DOCUMENT_LABEL.replace(' ', '')
        return f'{label}_{self.document_number}.{extension}'


class LineItemModelAbstract(models.Model):
    """
    One billable row of a billing document. Rows are positional: the position determines the template slot
    where the item is rendered.
    """
    uuid = models.UUIDField(default=uuid4, editable=False, primary_key=True)
    position = models.PositiveSmallIntegerField(validators=[MinValueValidator(1)], verbose_name=_('Position'))
    description = models.TextField(verbose_name=_('Description'))
    hsn_sac = models.CharField(max_length=20, blank=True, default='', verbose_name=_('HSN/SAC Code'))
    quantity = models.DecimalField(max_digits=20,
                                   decimal_places=3,
                                   validators=[MinValueValidator(Decimal('1'))],
                                   verbose_name=_('Quantity'))
    rate = models.DecimalField(max_digits=20,
                               decimal_places=2,
                               validators=[MinValueValidator(ZERO)],
                               verbose_name=_('Rate'))
    taxable_value = models.DecimalField(max_digits=20,
                                        decimal_places=2,
                                        validators=[MinValueValidator(ZERO)],
                                        verbose_name=_('Taxable Value'))
    gst_rate = models.DecimalField(max_digits=6,
                                   decimal_places=2,
                                   validators=[MinValueValidator(ZERO)],
                                   verbose_name=_('GST Rate (%)'))
    gst_amount = models.DecimalField(max_digits=20,
                                     decimal_places=2,
                                     validators=[MinValueValidator(ZERO)],
                                     verbose_name=_('GST Amount'))
    total = models.DecimalField(max_digits=20,
                                decimal_places=2,
                                validators=[MinValueValidator(ZERO)],
                                verbose_name=_('Total'))

    class Meta:
        abstract = True
        ordering = ['position']

    def __str__(self):
        return f'{self.__class__.__name__} #{self.position}: {self.description}'
