"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

The ClientModel is the directory of parties a business bills or buys from. Client records are used by front ends to
pre-fill the party blocks of new invoices and purchase orders.
"""

from uuid import uuid4

from django.core.validators import RegexValidator
from django.db import models
from django.db.models import Q, QuerySet
from django.utils.translation import gettext_lazy as _

from django_billdocs.models.mixins import CreateUpdateMixIn

__all__ = [
    'STATE_CODE_REGEX',
    'GSTIN_REGEX',
    'ClientModelQuerySet',
    'ClientModelAbstract',
    'ClientModel'
]

STATE_CODE_REGEX = r'^\d{2}$'
GSTIN_REGEX = r'^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z]{1}[1-9A-Z]{1}Z[0-9A-Z]{1}$'


class ClientModelQuerySet(QuerySet):

    def search(self, term: str) -> QuerySet:
        if not term:
            return self
        return self.filter(
            Q(name__icontains=term) |
            Q(address__icontains=term) |
            Q(gstin__icontains=term)
        )


class ClientModelAbstract(CreateUpdateMixIn):
    """
    Attributes
    __________
    uuid : UUID
        This is a unique primary key generated for the table. The default value of this field is uuid4().

    name: str
        The client name.

    address: str
        The client address.

    state_code: str
        Two-digit state code.

    gstin: str
        The client tax registration number. Unique across the directory.
    """
    uuid = models.UUIDField(default=uuid4, editable=False, primary_key=True)
    name = models.CharField(max_length=150, verbose_name=_('Client Name'))
    address = models.TextField(verbose_name=_('Address'))
    state_code = models.CharField(max_length=2,
                                  validators=[
                                      RegexValidator(regex=STATE_CODE_REGEX,
                                                     message=_('State code must be 2 digits.'))
                                  ],
                                  verbose_name=_('State Code'))
    gstin = models.CharField(max_length=15,
                             unique=True,
                             validators=[
                                 RegexValidator(regex=GSTIN_REGEX,
                                                message=_('Not a valid GSTIN.'))
                             ],
                             verbose_name=_('GSTIN'))

    objects = ClientModelQuerySet.as_manager()

    class Meta:
        abstract = True
        ordering = ['-created']
        verbose_name = _('Client')
        indexes = [
            models.Index(fields=['created']),
            models.Index(fields=['name']),
        ]

    def __str__(self):
        return f'Client: {self.name}'

    def clean(self):
        self.name = self.name.strip() if self.name else self.name
        self.address = self.address.strip() if self.address else self.address


class ClientModel(ClientModelAbstract):
    """
    Base Client Model Implementation
    """
