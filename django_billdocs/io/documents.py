"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

Use cases over the billing document store: create, read, list, update and delete invoices and purchase orders.

Creation is the only operation that numbers a document. The number is allocated explicitly, right before the insert,
inside the same transaction. If the insert hits the unique document number constraint, the transaction is rolled back
and the creation is retried once with a freshly allocated number.
"""

from datetime import date
from math import ceil
from typing import List, Optional, Tuple
from uuid import UUID

from django.core.paginator import Paginator, EmptyPage
from django.db import transaction, IntegrityError

from django_billdocs.exceptions import InvalidDocumentIdError, DocumentSchemaError
from django_billdocs.io.numbering import DocumentNumberAllocator
from django_billdocs.io.serializers import InvoiceSerializer, PurchaseOrderSerializer, ClientSerializer
from django_billdocs.models import InvoiceLineItemModel, PurchaseOrderLineItemModel
from django_billdocs.settings import DJANGO_BILLDOCS_PAGINATE_BY, logger


def validate_document_id(pk, label: str = 'document') -> UUID:
    try:
        return UUID(str(pk))
    except (TypeError, ValueError, AttributeError) as e:
        raise InvalidDocumentIdError(f'Invalid {label} ID') from e


def paginate(queryset, page: int, limit: int) -> Tuple[list, int]:
    """
    Returns the objects of the requested page and the total number of pages.
    Pages past the end yield an empty list.
    """
    if page < 1 or limit < 1:
        raise DocumentSchemaError('page and limit must be positive integers.')
    paginator = Paginator(queryset, limit)
    total_pages = ceil(paginator.count / limit)
    try:
        object_list = list(paginator.page(page).object_list)
    except EmptyPage:
        object_list = list()
    return object_list, total_pages


class BillingDocumentService:
    SERIALIZER_CLASS = None
    ITEM_MODEL_CLASS = None
    ITEM_DOCUMENT_FIELD = None
    CREATE_ATTEMPTS = 2

    def __init__(self, allocator: Optional[DocumentNumberAllocator] = None):
        self.SERIALIZER = self.SERIALIZER_CLASS()
        self.MODEL_CLASS = self.SERIALIZER.MODEL_CLASS
        self.LABEL = self.MODEL_CLASS.DOCUMENT_LABEL.lower()
        self.ALLOCATOR = allocator or DocumentNumberAllocator(model_class=self.MODEL_CLASS)

    def get_queryset(self):
        return self.MODEL_CLASS.objects.all().prefetch_related('items')

    def serialize(self, document_model) -> dict:
        return self.SERIALIZER.to_representation(document_model)

    def get(self, pk):
        uuid = validate_document_id(pk, label=self.LABEL)
        return self.get_queryset().get(uuid__exact=uuid)

    def list(self, search: str = '', page: int = 1, limit: int = DJANGO_BILLDOCS_PAGINATE_BY) -> Tuple[list, int]:
        queryset = self.get_queryset().search(search).order_by('-created', '-document_number')
        return paginate(queryset, page=page, limit=limit)

    def set_line_items(self, document_model, items: List[dict]):
        document_model.items.all().delete()
        item_models = [
            self.ITEM_MODEL_CLASS(**{self.ITEM_DOCUMENT_FIELD: document_model}, position=position, **item)
            for position, item in enumerate(items, start=1)
        ]
        for item_model in item_models:
            item_model.full_clean(exclude=[self.ITEM_DOCUMENT_FIELD], validate_unique=False)
        self.ITEM_MODEL_CLASS.objects.bulk_create(item_models)

    def create(self, payload: dict, dt: Optional[date] = None):
        """
        Validates payload, allocates the next document number and stores the document with its line items.

        Parameters
        ----------
        payload: dict
            The deserialized JSON document. Any document number present in the payload is ignored.
        dt: date
            The date scoping the document number. Defaults to the current local date.

        Returns
        -------
        BillingDocumentModelAbstract
            The stored document.
        """
        fields, items = self.SERIALIZER.to_internal(payload)
        attempt = 0
        while True:
            attempt += 1
            document_model = self.MODEL_CLASS(**fields)
            try:
                with transaction.atomic():
                    self.ALLOCATOR.allocate(document_model, dt=dt)
                    document_model.full_clean(exclude=['document_number'], validate_unique=False)
                    document_model.save()
                    self.set_line_items(document_model, items)
                return document_model
            except IntegrityError as e:
                if attempt >= self.CREATE_ATTEMPTS:
                    raise e
                logger.warning(f'Document number {document_model.document_number} already taken. '
                               f'Retrying {self.LABEL} creation.')

    def update(self, pk, payload: dict):
        """
        Partially updates a document. The payload is merged onto the stored document and the result is validated
        against the full document schema. Line items are replaced only when the payload carries them. The document
        number never changes.
        """
        if not isinstance(payload, dict):
            raise DocumentSchemaError('Request body must be a JSON object.')
        document_model = self.get(pk)
        merged = {**self.serialize(document_model), **payload}
        fields, items = self.SERIALIZER.to_internal(merged)

        with transaction.atomic():
            for field_name, value in fields.items():
                setattr(document_model, field_name, value)
            document_model.full_clean(exclude=['document_number'], validate_unique=False)
            document_model.save()
            if 'items' in payload:
                self.set_line_items(document_model, items)
        return self.get(document_model.uuid)

    def delete(self, pk) -> dict:
        document_model = self.get(pk)
        data = self.serialize(document_model)
        document_model.delete()
        return data

    def delete_many(self, ids) -> int:
        """
        Deletes several documents in one bulk operation. Every id is validated before anything is deleted.

        Returns
        -------
        int
            The number of documents deleted.
        """
        if not isinstance(ids, list) or not ids:
            raise DocumentSchemaError(f'Please provide valid {self.LABEL} IDs')
        try:
            uuids = [validate_document_id(pk, label=self.LABEL) for pk in ids]
        except InvalidDocumentIdError as e:
            raise InvalidDocumentIdError(f'Some {self.LABEL} IDs are invalid') from e

        _, deleted = self.MODEL_CLASS.objects.filter(uuid__in=uuids).delete()
        deleted_count = deleted.get(self.MODEL_CLASS._meta.label, 0)
        if not deleted_count:
            raise self.MODEL_CLASS.DoesNotExist(f'No {self.LABEL}s found to delete')
        return deleted_count


class InvoiceService(BillingDocumentService):
    SERIALIZER_CLASS = InvoiceSerializer
    ITEM_MODEL_CLASS = InvoiceLineItemModel
    ITEM_DOCUMENT_FIELD = 'invoice_model'


class PurchaseOrderService(BillingDocumentService):
    SERIALIZER_CLASS = PurchaseOrderSerializer
    ITEM_MODEL_CLASS = PurchaseOrderLineItemModel
    ITEM_DOCUMENT_FIELD = 'po_model'


class ClientService:
    SERIALIZER_CLASS = ClientSerializer

    def __init__(self):
        self.SERIALIZER = self.SERIALIZER_CLASS()
        self.MODEL_CLASS = self.SERIALIZER.MODEL_CLASS

    def serialize(self, client_model) -> dict:
        return self.SERIALIZER.to_representation(client_model)

    def get(self, pk):
        uuid = validate_document_id(pk, label='client')
        return self.MODEL_CLASS.objects.get(uuid__exact=uuid)

    def list(self, search: str = '') -> list:
        return list(self.MODEL_CLASS.objects.search(search).order_by('-created'))

    def create(self, payload: dict):
        client_model = self.MODEL_CLASS(**self.SERIALIZER.to_internal(payload))
        client_model.full_clean()
        client_model.save()
        return client_model

    def update(self, pk, payload: dict):
        if not isinstance(payload, dict):
            raise DocumentSchemaError('Request body must be a JSON object.')
        client_model = self.get(pk)
        merged = {**self.serialize(client_model), **payload}
        for field_name, value in self.SERIALIZER.to_internal(merged).items():
            setattr(client_model, field_name, value)
        client_model.full_clean()
        client_model.save()
        return client_model

    def delete(self, pk) -> dict:
        client_model = self.get(pk)
        data = self.serialize(client_model)
        client_model.delete()
        return data


__all__ = [
    'validate_document_id',
    'paginate',
    'BillingDocumentService',
    'InvoiceService',
    'PurchaseOrderService',
    'ClientService'
]
