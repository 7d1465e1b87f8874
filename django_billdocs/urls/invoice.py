"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django.urls import re_path

from django_billdocs import views

urlpatterns = [
    re_path(r'^create/?$',
            views.InvoiceModelCreateView.as_view(),
            name='invoice-create'),
    re_path(r'^get/?$',
            views.InvoiceModelListView.as_view(),
            name='invoice-list'),
    re_path(r'^get/(?P<document_pk>[^/]+)/?$',
            views.InvoiceModelDetailView.as_view(),
            name='invoice-detail'),
    re_path(r'^put/(?P<document_pk>[^/]+)/?$',
            views.InvoiceModelUpdateView.as_view(),
            name='invoice-update'),
    re_path(r'^update/(?P<document_pk>[^/]+)/?$',
            views.InvoiceModelUpdateView.as_view(),
            name='invoice-update-alt'),
    re_path(r'^delete/(?P<document_pk>[^/]+)/?$',
            views.InvoiceModelDeleteView.as_view(),
            name='invoice-delete'),
    re_path(r'^deleteall/?$',
            views.InvoiceModelDeleteAllView.as_view(),
            name='invoice-delete-all'),

    # downloads...
    re_path(r'^(?P<document_pk>[^/]+)/download/word/?$',
            views.InvoiceModelDownloadView.as_view(document_format='docx'),
            name='invoice-download-word'),
    re_path(r'^(?P<document_pk>[^/]+)/download/pdf/?$',
            views.InvoiceModelDownloadView.as_view(document_format='pdf'),
            name='invoice-download-pdf'),
]
