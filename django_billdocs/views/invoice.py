"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django_billdocs.io.documents import InvoiceService
from django_billdocs.views.billing import (BillingDocumentCreateView, BillingDocumentListView,
                                           BillingDocumentDetailView, BillingDocumentUpdateView,
                                           BillingDocumentDeleteView, BillingDocumentDeleteAllView,
                                           BillingDocumentDownloadView)

__all__ = [
    'InvoiceModelCreateView',
    'InvoiceModelListView',
    'InvoiceModelDetailView',
    'InvoiceModelUpdateView',
    'InvoiceModelDeleteView',
    'InvoiceModelDeleteAllView',
    'InvoiceModelDownloadView'
]


class InvoiceModelViewMixIn:
    SERVICE_CLASS = InvoiceService
    OBJECT_LABEL = 'Invoice'


class InvoiceModelCreateView(InvoiceModelViewMixIn, BillingDocumentCreateView):
    pass


class InvoiceModelListView(InvoiceModelViewMixIn, BillingDocumentListView):
    pass


class InvoiceModelDetailView(InvoiceModelViewMixIn, BillingDocumentDetailView):
    pass


class InvoiceModelUpdateView(InvoiceModelViewMixIn, BillingDocumentUpdateView):
    pass


class InvoiceModelDeleteView(InvoiceModelViewMixIn, BillingDocumentDeleteView):
    pass


class InvoiceModelDeleteAllView(InvoiceModelViewMixIn, BillingDocumentDeleteAllView):
    pass


class InvoiceModelDownloadView(InvoiceModelViewMixIn, BillingDocumentDownloadView):
    pass
