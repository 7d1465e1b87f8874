"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

Document number allocation. Numbers are scoped by document kind and calendar date and have the form
<PREFIX>-<YYMMDD>-<SEQ>, e.g. INV-240518-001.

Allocations for the same kind and date are serialized through a DocumentSequenceModel row locked with
SELECT ... FOR UPDATE. The next sequence is always greater than both the counter and the highest number already
stored under the same prefix, so numbers inserted outside the allocator are never reissued.
"""

import re
from datetime import date
from typing import Optional

from django.core.exceptions import ObjectDoesNotExist
from django.db import transaction, IntegrityError
from django.db.models.functions import Length
from django.utils.timezone import localdate

from django_billdocs.exceptions import DocumentNumberError
from django_billdocs.models.sequence import DocumentSequenceModel
from django_billdocs.settings import (DJANGO_BILLDOCS_INVOICE_NUMBER_PREFIX, DJANGO_BILLDOCS_PO_NUMBER_PREFIX,
                                      DJANGO_BILLDOCS_DOCUMENT_NUMBER_PADDING,
                                      DJANGO_BILLDOCS_DOCUMENT_NUMBER_DATE_FORMAT, logger)

SEQUENCE_REGEX = re.compile(r'[0-9]+')

NUMBER_PREFIXES = {
    DocumentSequenceModel.KEY_INVOICE: DJANGO_BILLDOCS_INVOICE_NUMBER_PREFIX,
    DocumentSequenceModel.KEY_PURCHASE_ORDER: DJANGO_BILLDOCS_PO_NUMBER_PREFIX,
}


def parse_document_sequence(document_number: Optional[str], date_prefix: str) -> Optional[int]:
    """
    Extracts the numeric sequence of a document number issued under date_prefix.

    Parameters
    ----------
    document_number: str
        The stored document number, e.g. 'INV-240518-007'.
    date_prefix: str
        The date-scoped prefix, e.g. 'INV-240518'.

    Returns
    -------
    int or None
        The sequence, or None if the number does not belong to the prefix or its suffix is not numeric.
    """
    if not document_number or not document_number.startswith(f'{date_prefix}-'):
        return None
    suffix = document_number[len(date_prefix) + 1:]
    if not SEQUENCE_REGEX.fullmatch(suffix):
        return None
    return int(suffix)


class DocumentNumberAllocator:
    """
    Allocates document numbers for one billing document model class.

    Examples
    ________
    >>> allocator = DocumentNumberAllocator(model_class=InvoiceModel)
    >>> allocator.allocate(invoice_model)
    'INV-240518-001'
    """
    MAX_ATTEMPTS = 5

    def __init__(self, model_class, padding: int = DJANGO_BILLDOCS_DOCUMENT_NUMBER_PADDING):
        self.MODEL_CLASS = model_class
        self.SEQUENCE_KEY = model_class.SEQUENCE_KEY
        self.PREFIX = NUMBER_PREFIXES[self.SEQUENCE_KEY]
        self.PADDING = padding

    def get_date_prefix(self, dt: date) -> str:
        return f'{self.PREFIX}-{dt.strftime(DJANGO_BILLDOCS_DOCUMENT_NUMBER_DATE_FORMAT)}'

    def get_last_sequence(self, date_prefix: str) -> int:
        """
        Sequence of the greatest well-formed document number stored under date_prefix. Numbers with a non-numeric
        suffix are ignored. Longer suffixes sort first so that -1000 ranks above -999.
        """
        last_number = self.MODEL_CLASS.objects.with_numeric_suffix(
            date_prefix
        ).order_by(
            Length('document_number').desc(), '-document_number'
        ).values_list('document_number', flat=True).first()
        last_sequence = parse_document_sequence(last_number, date_prefix)
        return last_sequence if last_sequence is not None else 0

    def _get_next_state_model(self, dt: date, raise_exception: bool = True) -> Optional[DocumentSequenceModel]:
        """
        Fetches and increments the DocumentSequenceModel associated with the document kind and date.
        If the DocumentSequenceModel is not present, a new one will be created.

        Parameters
        ----------
        dt: date
            The date scoping the sequence.
        raise_exception: bool
            Raises IntegrityError if the counter row could not be secured from the DB.

        Returns
        -------
        DocumentSequenceModel
            The locked counter holding the allocated sequence, or None if the row was created concurrently.
        """
        last_sequence = self.get_last_sequence(self.get_date_prefix(dt))
        try:
            state_model_qs = DocumentSequenceModel.objects.filter(
                key__exact=self.SEQUENCE_KEY,
                date__exact=dt
            ).select_for_update()
            state_model = state_model_qs.get()
            state_model.sequence = max(state_model.sequence, last_sequence) + 1
            state_model.save(update_fields=['sequence', 'updated'])
            return state_model
        except ObjectDoesNotExist:
            pass

        try:
            with transaction.atomic():
                return DocumentSequenceModel.objects.create(
                    key=self.SEQUENCE_KEY,
                    date=dt,
                    sequence=last_sequence + 1
                )
        except IntegrityError as e:
            if raise_exception:
                raise e

    def next_number(self, dt: Optional[date] = None) -> str:
        """
        Atomic Transaction. Reserves the next document number available for the given date.

        Parameters
        ----------
        dt: date
            The date scoping the number. Defaults to the current local date.

        Returns
        -------
        str
            The allocated document number.
        """
        dt = dt or localdate()
        with transaction.atomic():
            state_model = None
            attempts = 0
            while not state_model:
                if attempts == self.MAX_ATTEMPTS:
                    raise DocumentNumberError(f'Unable to allocate a {self.PREFIX} number for {dt.isoformat()}.')
                state_model = self._get_next_state_model(dt=dt, raise_exception=False)
                attempts += 1

        seq = str(state_model.sequence).zfill(self.PADDING)
        document_number = f'{self.get_date_prefix(dt)}-{seq}'
        logger.info(f'Allocated document number {document_number}.')
        return document_number

    def allocate(self, document_model, dt: Optional[date] = None, commit: bool = False) -> str:
        """
        Assigns a document number to document_model if it does not have one yet.
        Documents which already carry a number are returned untouched.

        Parameters
        ----------
        document_model: BillingDocumentModelAbstract
            The document to number.
        dt: date
            The date scoping the number. Defaults to the current local date.
        commit: bool
            Saves the document_number field of document_model.

        Returns
        -------
        str
            The document number of document_model.
        """
        if document_model.can_generate_document_number():
            document_model.document_number = self.next_number(dt=dt)
            if commit:
                document_model.save(update_fields=['document_number', 'updated'])
        return document_model.document_number
