"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django.contrib import admin

from django_billdocs.admin.billing import InvoiceModelAdmin, PurchaseOrderModelAdmin, DocumentSequenceModelAdmin
from django_billdocs.admin.client import ClientModelAdmin
from django_billdocs.models import InvoiceModel, PurchaseOrderModel, DocumentSequenceModel, ClientModel

admin.site.register(InvoiceModel, InvoiceModelAdmin)
admin.site.register(PurchaseOrderModel, PurchaseOrderModelAdmin)
admin.site.register(DocumentSequenceModel, DocumentSequenceModelAdmin)
admin.site.register(ClientModel, ClientModelAdmin)
