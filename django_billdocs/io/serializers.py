"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

Serializers translate between the JSON documents exchanged with API clients and the BillDocs models. Incoming
payloads are validated against the JSON Schemas in django_billdocs.models.schemas before they touch any model.
"""

from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from dateutil.parser import isoparse
from jsonschema import Draft7Validator

from django_billdocs.exceptions import DocumentSchemaError
from django_billdocs.io.formatting import parse_amount, parse_quantity
from django_billdocs.models import InvoiceModel, PurchaseOrderModel, ClientModel
from django_billdocs.models.schemas import SCHEMA_INVOICE, SCHEMA_PURCHASE_ORDER, SCHEMA_CLIENT

ITEM_FIELD_MAP = {
    'description': 'description',
    'hsnSac': 'hsn_sac',
    'quantity': 'quantity',
    'rate': 'rate',
    'taxableValue': 'taxable_value',
    'gstRate': 'gst_rate',
    'gstAmount': 'gst_amount',
    'total': 'total',
}

ITEM_DECIMAL_KEYS = {'quantity', 'rate', 'taxableValue', 'gstRate', 'gstAmount', 'total'}


def validate_schema(payload, schema: dict):
    """
    Validates payload against a JSON Schema, collecting every violation into a single DocumentSchemaError.
    """
    validator = Draft7Validator(schema)
    errors = sorted(validator.iter_errors(payload), key=lambda e: [str(p) for p in e.absolute_path])
    if errors:
        messages = []
        for error in errors:
            path = '.'.join(str(p) for p in error.absolute_path)
            messages.append(f'{path}: {error.message}' if path else error.message)
        raise DocumentSchemaError(messages)


def parse_date(value) -> Optional[date]:
    if value in (None, ''):
        return None
    if isinstance(value, date):
        return value
    try:
        return isoparse(value).date()
    except (TypeError, ValueError) as e:
        raise DocumentSchemaError(f'{value!r} is not a valid ISO 8601 date.') from e


def parse_item_value(key: str, value):
    if key == 'quantity':
        return parse_quantity(value)
    if key in ITEM_DECIMAL_KEYS:
        return parse_amount(value)
    return value or ''


def decimal_to_json(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


def date_to_json(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


class BillingDocumentSerializer:
    MODEL_CLASS = None
    SCHEMA = None
    NUMBER_KEY = None
    FIELD_MAP: Dict[str, str] = None
    DATE_KEYS = set()
    DECIMAL_KEYS = {'totalTaxableValue', 'totalCGSTAmount', 'totalSGSTAmount', 'totalIGSTAmount'}
    PARTY_KEYS = set()

    def validate(self, payload) -> dict:
        if not isinstance(payload, dict):
            raise DocumentSchemaError('Request body must be a JSON object.')
        validate_schema(payload, self.SCHEMA)
        return payload

    def to_internal(self, payload: dict) -> Tuple[dict, Optional[List[dict]]]:
        """
        Validates payload and converts it into model field values and line item field values.

        Returns
        -------
        tuple
            A tuple of (document fields, line items). Line items is None if payload carries no items.
        """
        self.validate(payload)
        fields = dict()
        for key, field_name in self.FIELD_MAP.items():
            if key not in payload:
                continue
            value = payload[key]
            if key in self.DATE_KEYS:
                value = parse_date(value)
            elif key in self.DECIMAL_KEYS:
                value = parse_amount(value)
            elif key in self.PARTY_KEYS:
                value = {k: v for k, v in value.items() if k in ('name', 'address', 'stateCode', 'GSTIN',
                                                                 'secondaryTaxId')}
            elif key == 'poreferencevalue':
                value = value or ''
            fields[field_name] = value

        items = None
        if 'items' in payload:
            items = [
                {
                    field_name: parse_item_value(key, item.get(key))
                    for key, field_name in ITEM_FIELD_MAP.items()
                } for item in payload['items']
            ]
        return fields, items

    def to_representation(self, document_model) -> dict:
        data = {
            '_id': str(document_model.uuid),
            self.NUMBER_KEY: document_model.document_number,
        }
        for key, field_name in self.FIELD_MAP.items():
            value = getattr(document_model, field_name)
            if key in self.DATE_KEYS:
                value = date_to_json(value)
            elif key in self.DECIMAL_KEYS:
                value = decimal_to_json(value)
            data[key] = value
        data['items'] = [
            {
                key: (decimal_to_json(getattr(item_model, field_name))
                      if key in ITEM_DECIMAL_KEYS else getattr(item_model, field_name))
                for key, field_name in ITEM_FIELD_MAP.items()
            } for item_model in document_model.get_line_items()
        ]
        data['createdAt'] = date_to_json(document_model.created)
        data['updatedAt'] = date_to_json(document_model.updated)
        return data


class InvoiceSerializer(BillingDocumentSerializer):
    MODEL_CLASS = InvoiceModel
    SCHEMA = SCHEMA_INVOICE
    NUMBER_KEY = 'invoiceNo'
    FIELD_MAP = {
        'poreferencevalue': 'reference',
        'invoiceDate': 'date_issued',
        'dueDate': 'date_due',
        'referenceDate': 'date_reference',
        'currency': 'currency',
        'amountDue': 'amount_due',
        'paymentMode': 'payment_mode',
        'billTo': 'bill_to',
        'shipTo': 'ship_to',
        'totalTaxableValue': 'taxable_value_total',
        'totalCGSTAmount': 'cgst_total',
        'totalSGSTAmount': 'sgst_total',
        'totalIGSTAmount': 'igst_total',
        'valueInWords': 'amount_in_words',
        'withSignature': 'with_signature',
    }
    DATE_KEYS = {'invoiceDate', 'dueDate', 'referenceDate'}
    DECIMAL_KEYS = BillingDocumentSerializer.DECIMAL_KEYS | {'amountDue'}
    PARTY_KEYS = {'billTo', 'shipTo'}


class PurchaseOrderSerializer(BillingDocumentSerializer):
    MODEL_CLASS = PurchaseOrderModel
    SCHEMA = SCHEMA_PURCHASE_ORDER
    NUMBER_KEY = 'poNumber'
    FIELD_MAP = {
        'poreferencevalue': 'reference',
        'poDate': 'date_issued',
        'deliveryDate': 'date_due',
        'referenceDate': 'date_reference',
        'currency': 'currency',
        'totalAmount': 'amount_due',
        'paymentTerms': 'payment_terms',
        'vendor': 'vendor',
        'deliverTo': 'deliver_to',
        'totalTaxableValue': 'taxable_value_total',
        'totalCGSTAmount': 'cgst_total',
        'totalSGSTAmount': 'sgst_total',
        'totalIGSTAmount': 'igst_total',
        'valueInWords': 'amount_in_words',
        'withSignature': 'with_signature',
    }
    DATE_KEYS = {'poDate', 'deliveryDate', 'referenceDate'}
    DECIMAL_KEYS = BillingDocumentSerializer.DECIMAL_KEYS | {'totalAmount'}
    PARTY_KEYS = {'vendor', 'deliverTo'}


class ClientSerializer:
    MODEL_CLASS = ClientModel
    SCHEMA = SCHEMA_CLIENT
    FIELD_MAP = {
        'name': 'name',
        'address': 'address',
        'stateCode': 'state_code',
        'gstin': 'gstin',
    }

    def to_internal(self, payload) -> dict:
        if not isinstance(payload, dict):
            raise DocumentSchemaError('Request body must be a JSON object.')
        validate_schema(payload, self.SCHEMA)
        return {field_name: payload[key].strip() for key, field_name in self.FIELD_MAP.items()}

    def to_representation(self, client_model: ClientModel) -> dict:
        data = {'_id': str(client_model.uuid)}
        data.update({key: getattr(client_model, field_name) for key, field_name in self.FIELD_MAP.items()})
        data['createdAt'] = date_to_json(client_model.created)
        data['updatedAt'] = date_to_json(client_model.updated)
        return data
