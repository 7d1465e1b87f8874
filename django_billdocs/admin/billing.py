"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django.contrib.admin import ModelAdmin, TabularInline

from django_billdocs.models import InvoiceLineItemModel, PurchaseOrderLineItemModel

LINE_ITEM_FIELDS = [
    'position',
    'description',
    'hsn_sac',
    'quantity',
    'rate',
    'taxable_value',
    'gst_rate',
    'gst_amount',
    'total'
]


class InvoiceLineItemModelInLine(TabularInline):
    extra = 0
    model = InvoiceLineItemModel
    fields = LINE_ITEM_FIELDS


class PurchaseOrderLineItemModelInLine(TabularInline):
    extra = 0
    model = PurchaseOrderLineItemModel
    fields = LINE_ITEM_FIELDS


class BillingDocumentModelAdmin(ModelAdmin):
    readonly_fields = [
        'document_number',
        'created',
        'updated'
    ]
    list_display = [
        'document_number',
        'date_issued',
        'date_due',
        'currency',
        'amount_due',
        'with_signature',
        'created'
    ]
    list_filter = [
        'with_signature',
        'currency'
    ]
    search_fields = [
        'document_number',
        'reference'
    ]
    date_hierarchy = 'date_issued'

    def has_add_permission(self, request):
        # documents are numbered by the API on creation
        return False


class InvoiceModelAdmin(BillingDocumentModelAdmin):
    inlines = [InvoiceLineItemModelInLine]
    list_display = BillingDocumentModelAdmin.list_display + ['payment_mode']


class PurchaseOrderModelAdmin(BillingDocumentModelAdmin):
    inlines = [PurchaseOrderLineItemModelInLine]
    list_display = BillingDocumentModelAdmin.list_display + ['payment_terms']


class DocumentSequenceModelAdmin(ModelAdmin):
    list_display = [
        'key',
        'date',
        'sequence',
        'updated'
    ]
    list_filter = ['key']
    readonly_fields = [
        'key',
        'date',
        'sequence'
    ]
