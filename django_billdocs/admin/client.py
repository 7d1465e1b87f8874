"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django.contrib.admin import ModelAdmin


class ClientModelAdmin(ModelAdmin):
    list_display = [
        'name',
        'gstin',
        'state_code',
        'created'
    ]
    search_fields = [
        'name',
        'gstin',
        'address'
    ]
    readonly_fields = [
        'created',
        'updated'
    ]
