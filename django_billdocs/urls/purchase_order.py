"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django.urls import re_path

from django_billdocs import views

urlpatterns = [
    re_path(r'^create/?$',
            views.PurchaseOrderModelCreateView.as_view(),
            name='po-create'),
    re_path(r'^get/?$',
            views.PurchaseOrderModelListView.as_view(),
            name='po-list'),
    re_path(r'^get/(?P<document_pk>[^/]+)/?$',
            views.PurchaseOrderModelDetailView.as_view(),
            name='po-detail'),
    re_path(r'^put/(?P<document_pk>[^/]+)/?$',
            views.PurchaseOrderModelUpdateView.as_view(),
            name='po-update'),
    re_path(r'^update/(?P<document_pk>[^/]+)/?$',
            views.PurchaseOrderModelUpdateView.as_view(),
            name='po-update-alt'),
    re_path(r'^delete/(?P<document_pk>[^/]+)/?$',
            views.PurchaseOrderModelDeleteView.as_view(),
            name='po-delete'),
    re_path(r'^deleteall/?$',
            views.PurchaseOrderModelDeleteAllView.as_view(),
            name='po-delete-all'),

    # downloads...
    re_path(r'^(?P<document_pk>[^/]+)/download/word/?$',
            views.PurchaseOrderModelDownloadView.as_view(document_format='docx'),
            name='po-download-word'),
    re_path(r'^(?P<document_pk>[^/]+)/download/pdf/?$',
            views.PurchaseOrderModelDownloadView.as_view(document_format='pdf'),
            name='po-download-pdf'),
]
