"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django_billdocs.io.documents import PurchaseOrderService
from django_billdocs.views.billing import (BillingDocumentCreateView, BillingDocumentListView,
                                           BillingDocumentDetailView, BillingDocumentUpdateView,
                                           BillingDocumentDeleteView, BillingDocumentDeleteAllView,
                                           BillingDocumentDownloadView)

__all__ = [
    'PurchaseOrderModelCreateView',
    'PurchaseOrderModelListView',
    'PurchaseOrderModelDetailView',
    'PurchaseOrderModelUpdateView',
    'PurchaseOrderModelDeleteView',
    'PurchaseOrderModelDeleteAllView',
    'PurchaseOrderModelDownloadView'
]


class PurchaseOrderModelViewMixIn:
    SERVICE_CLASS = PurchaseOrderService
    OBJECT_LABEL = 'Purchase Order'


class PurchaseOrderModelCreateView(PurchaseOrderModelViewMixIn, BillingDocumentCreateView):
    pass


class PurchaseOrderModelListView(PurchaseOrderModelViewMixIn, BillingDocumentListView):
    pass


class PurchaseOrderModelDetailView(PurchaseOrderModelViewMixIn, BillingDocumentDetailView):
    pass


class PurchaseOrderModelUpdateView(PurchaseOrderModelViewMixIn, BillingDocumentUpdateView):
    pass


class PurchaseOrderModelDeleteView(PurchaseOrderModelViewMixIn, BillingDocumentDeleteView):
    pass


class PurchaseOrderModelDeleteAllView(PurchaseOrderModelViewMixIn, BillingDocumentDeleteAllView):
    pass


class PurchaseOrderModelDownloadView(PurchaseOrderModelViewMixIn, BillingDocumentDownloadView):
    pass
