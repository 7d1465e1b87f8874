"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django.urls import path, include

app_name = 'django_billdocs'

urlpatterns = [
    path('invoice/', include('django_billdocs.urls.invoice')),
    path('purchase-order/', include('django_billdocs.urls.purchase_order')),
    path('client/', include('django_billdocs.urls.client')),
]
