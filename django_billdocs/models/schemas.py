"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

JSON Schemas used to validate the payloads accepted by the billing document and client APIs.
"""

from django_billdocs.models.client import GSTIN_REGEX, STATE_CODE_REGEX
from django_billdocs.models.invoice import InvoiceModel
from django_billdocs.models.purchase_order import PurchaseOrderModel

SCHEMA_AMOUNT = {
    'type': 'number',
    'minimum': 0
}

SCHEMA_DATE = {
    'type': 'string',
    'minLength': 1
}

SCHEMA_PARTY_ADDRESS = {
    'type': 'object',
    'properties': {
        'name': {
            'type': 'string',
            'minLength': 1
        },
        'address': {
            'type': 'string',
            'minLength': 1
        },
        'stateCode': {
            'type': 'string',
            'pattern': STATE_CODE_REGEX
        },
        'GSTIN': {
            'type': 'string',
            'minLength': 1
        },
        'secondaryTaxId': {
            'type': ['string', 'null']
        }
    },
    'required': [
        'name',
        'address',
        'stateCode',
        'GSTIN'
    ]
}

SCHEMA_LINE_ITEM = {
    'type': 'object',
    'properties': {
        'description': {
            'type': 'string',
            'minLength': 1
        },
        'hsnSac': {
            'type': ['string', 'null']
        },
        'quantity': {
            'type': 'number',
            'minimum': 1
        },
        'rate': SCHEMA_AMOUNT,
        'taxableValue': SCHEMA_AMOUNT,
        'gstRate': SCHEMA_AMOUNT,
        'gstAmount': SCHEMA_AMOUNT,
        'total': SCHEMA_AMOUNT
    },
    'required': [
        'description',
        'quantity',
        'rate',
        'taxableValue',
        'gstRate',
        'gstAmount',
        'total'
    ]
}

SCHEMA_BILLING_DOCUMENT_PROPERTIES = {
    'referenceDate': {
        'type': ['string', 'null']
    },
    'poreferencevalue': {
        'type': ['string', 'null']
    },
    'currency': {
        'type': 'string',
        'minLength': 1
    },
    'items': {
        'type': 'array',
        'items': SCHEMA_LINE_ITEM,
        'minItems': 1
    },
    'totalTaxableValue': SCHEMA_AMOUNT,
    'totalCGSTAmount': SCHEMA_AMOUNT,
    'totalSGSTAmount': SCHEMA_AMOUNT,
    'totalIGSTAmount': SCHEMA_AMOUNT,
    'valueInWords': {
        'type': 'string',
        'minLength': 1
    },
    'withSignature': {
        'type': 'boolean'
    }
}

SCHEMA_BILLING_DOCUMENT_REQUIRED = [
    'items',
    'totalTaxableValue',
    'totalCGSTAmount',
    'totalSGSTAmount',
    'totalIGSTAmount',
    'valueInWords'
]

SCHEMA_INVOICE = {
    'type': 'object',
    'properties': {
        **SCHEMA_BILLING_DOCUMENT_PROPERTIES,
        'invoiceDate': SCHEMA_DATE,
        'dueDate': SCHEMA_DATE,
        'amountDue': SCHEMA_AMOUNT,
        'paymentMode': {
            'type': 'string',
            'enum': [k for k, _ in InvoiceModel.PAYMENT_MODE_CHOICES]
        },
        'billTo': SCHEMA_PARTY_ADDRESS,
        'shipTo': SCHEMA_PARTY_ADDRESS,
    },
    'required': [
        'invoiceDate',
        'dueDate',
        'amountDue',
        'billTo',
        'shipTo',
        *SCHEMA_BILLING_DOCUMENT_REQUIRED
    ]
}

SCHEMA_PURCHASE_ORDER = {
    'type': 'object',
    'properties': {
        **SCHEMA_BILLING_DOCUMENT_PROPERTIES,
        'poDate': SCHEMA_DATE,
        'deliveryDate': SCHEMA_DATE,
        'totalAmount': SCHEMA_AMOUNT,
        'paymentTerms': {
            'type': 'string',
            'enum': [k for k, _ in PurchaseOrderModel.PAYMENT_TERMS_CHOICES]
        },
        'vendor': SCHEMA_PARTY_ADDRESS,
        'deliverTo': SCHEMA_PARTY_ADDRESS,
    },
    'required': [
        'poDate',
        'deliveryDate',
        'totalAmount',
        'vendor',
        'deliverTo',
        *SCHEMA_BILLING_DOCUMENT_REQUIRED
    ]
}

SCHEMA_CLIENT = {
    'type': 'object',
    'properties': {
        'name': {
            'type': 'string',
            'minLength': 1
        },
        'address': {
            'type': 'string',
            'minLength': 1
        },
        'stateCode': {
            'type': 'string',
            'pattern': STATE_CODE_REGEX
        },
        'gstin': {
            'type': 'string',
            'pattern': GSTIN_REGEX
        }
    },
    'required': [
        'name',
        'address',
        'stateCode',
        'gstin'
    ]
}
