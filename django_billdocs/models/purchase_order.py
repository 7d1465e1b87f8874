"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

A purchase order is a commercial source document issued by a buyer to a vendor when placing an order. It lists the
goods or services to be delivered, their quantities and prices, where they are to be delivered and the payment terms
agreed with the vendor.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from django_billdocs.models.billing import BillingDocumentModelAbstract, LineItemModelAbstract
from django_billdocs.models.sequence import DocumentSequenceModel

__all__ = [
    'PurchaseOrderModelAbstract',
    'PurchaseOrderModel',
    'PurchaseOrderLineItemModel'
]


class PurchaseOrderModelAbstract(BillingDocumentModelAbstract):
    SEQUENCE_KEY = DocumentSequenceModel.KEY_PURCHASE_ORDER
    PARTY_FIELDS = ('vendor', 'deliver_to')
    DOCUMENT_LABEL = 'Purchase Order'

    TERMS_NET_30 = 'net-30'
    TERMS_NET_60 = 'net-60'
    TERMS_NET_90 = 'net-90'
    TERMS_COD = 'cod'
    TERMS_ADVANCE = 'advance'
    TERMS_IMMEDIATE = 'immediate'

    PAYMENT_TERMS_CHOICES = [
        (TERMS_NET_30, _('Net 30 Days')),
        (TERMS_NET_60, _('Net 60 Days')),
        (TERMS_NET_90, _('Net 90 Days')),
        (TERMS_COD, _('Cash on Delivery')),
        (TERMS_ADVANCE, _('Advance')),
        (TERMS_IMMEDIATE, _('Immediate')),
    ]

    vendor = models.JSONField(verbose_name=_('Vendor'))
    deliver_to = models.JSONField(verbose_name=_('Deliver To'))
    payment_terms = models.CharField(max_length=10,
                                     choices=PAYMENT_TERMS_CHOICES,
                                     default=TERMS_NET_30,
                                     verbose_name=_('Payment Terms'))

    class Meta(BillingDocumentModelAbstract.Meta):
        abstract = True
        verbose_name = _('Purchase Order')
        verbose_name_plural = _('Purchase Orders')


class PurchaseOrderModel(PurchaseOrderModelAbstract):
    """
    Base Purchase Order Model from Abstract.
    """


class PurchaseOrderLineItemModel(LineItemModelAbstract):
    po_model = models.ForeignKey('django_billdocs.PurchaseOrderModel',
                                 on_delete=models.CASCADE,
                                 related_name='items',
                                 verbose_name=_('Purchase Order'))

    class Meta(LineItemModelAbstract.Meta):
        verbose_name = _('Purchase Order Line Item')
        unique_together = [
            ('po_model', 'position')
        ]
