"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django.urls import re_path

from django_billdocs import views

urlpatterns = [
    re_path(r'^create/?$',
            views.ClientModelCreateView.as_view(),
            name='client-create'),
    re_path(r'^get/?$',
            views.ClientModelListView.as_view(),
            name='client-list'),
    re_path(r'^get/(?P<client_pk>[^/]+)/?$',
            views.ClientModelDetailView.as_view(),
            name='client-detail'),
    re_path(r'^update/(?P<client_pk>[^/]+)/?$',
            views.ClientModelUpdateView.as_view(),
            name='client-update'),
    re_path(r'^delete/(?P<client_pk>[^/]+)/?$',
            views.ClientModelDeleteView.as_view(),
            name='client-delete'),
]
