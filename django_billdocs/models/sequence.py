"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

The DocumentSequenceModel holds the last sequence number issued for a document kind on a given calendar date. Rows
are locked while a new document number is allocated, so concurrent allocations for the same date are serialized
through a single counter.
"""

from uuid import uuid4

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from django_billdocs.models.mixins import CreateUpdateMixIn

__all__ = [
    'DocumentSequenceModelAbstract',
    'DocumentSequenceModel'
]


class DocumentSequenceModelAbstract(CreateUpdateMixIn):
    KEY_INVOICE = 'invoice'
    KEY_PURCHASE_ORDER = 'po'

    KEY_CHOICES = [
        (KEY_INVOICE, _('Invoice')),
        (KEY_PURCHASE_ORDER, _('Purchase Order')),
    ]

    uuid = models.UUIDField(default=uuid4, editable=False, primary_key=True)
    key = models.CharField(choices=KEY_CHOICES, max_length=10)
    date = models.DateField(verbose_name=_('Sequence Date'))
    sequence = models.BigIntegerField(default=0, validators=[MinValueValidator(limit_value=0)])

    class Meta:
        abstract = True
        verbose_name = _('Document Sequence')
        indexes = [
            models.Index(fields=['key']),
            models.Index(fields=['key', 'date'])
        ]
        unique_together = [
            ('key', 'date')
        ]

    def __str__(self):
        return f'{self.__class__.__name__}: {self.get_key_display()} {self.date.isoformat()} -> {self.sequence}'


class DocumentSequenceModel(DocumentSequenceModelAbstract):
    """
    Document Sequence Model Base Class from Abstract.
    """
