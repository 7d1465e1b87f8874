"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""
import logging
from pathlib import Path

from django.conf import settings

logger = logging.getLogger('Django BillDocs Logger')
logger.setLevel(logging.INFO)

DJANGO_BILLDOCS_BASE_DIR = Path(__file__).resolve().parent

## DOCUMENT NUMBERING ##
DJANGO_BILLDOCS_INVOICE_NUMBER_PREFIX = getattr(settings, 'DJANGO_BILLDOCS_INVOICE_NUMBER_PREFIX', 'INV')
DJANGO_BILLDOCS_PO_NUMBER_PREFIX = getattr(settings, 'DJANGO_BILLDOCS_PO_NUMBER_PREFIX', 'PO')
DJANGO_BILLDOCS_DOCUMENT_NUMBER_PADDING = getattr(settings, 'DJANGO_BILLDOCS_DOCUMENT_NUMBER_PADDING', 3)
DJANGO_BILLDOCS_DOCUMENT_NUMBER_DATE_FORMAT = getattr(settings, 'DJANGO_BILLDOCS_DOCUMENT_NUMBER_DATE_FORMAT', '%y%m%d')

## DEFAULTS ##
DJANGO_BILLDOCS_DEFAULT_CURRENCY = getattr(settings, 'DJANGO_BILLDOCS_DEFAULT_CURRENCY', 'USD')
DJANGO_BILLDOCS_PAGINATE_BY = getattr(settings, 'DJANGO_BILLDOCS_PAGINATE_BY', 10)

## TEMPLATES ##
DJANGO_BILLDOCS_TEMPLATE_DIR = Path(getattr(settings,
                                            'DJANGO_BILLDOCS_TEMPLATE_DIR',
                                            DJANGO_BILLDOCS_BASE_DIR.joinpath('docx_templates')))
DJANGO_BILLDOCS_TEMPLATE_ITEM_ROWS = getattr(settings, 'DJANGO_BILLDOCS_TEMPLATE_ITEM_ROWS', 4)
DJANGO_BILLDOCS_TEMPLATE_DATE_FORMAT = getattr(settings, 'DJANGO_BILLDOCS_TEMPLATE_DATE_FORMAT', '%d/%m/%Y')
DJANGO_BILLDOCS_INVOICE_TEMPLATES = getattr(settings, 'DJANGO_BILLDOCS_INVOICE_TEMPLATES', {
    True: 'Invoice-Template With Signature.docx',
    False: 'Invoice-Template Without Signature.docx',
})
DJANGO_BILLDOCS_PO_TEMPLATES = getattr(settings, 'DJANGO_BILLDOCS_PO_TEMPLATES', {
    True: 'PurchaseOrder-Template With Signature.docx',
    False: 'PurchaseOrder-Template Without Signature.docx',
})

## PDF CONVERSION ##
DJANGO_BILLDOCS_SOFFICE_BINARY = getattr(settings, 'DJANGO_BILLDOCS_SOFFICE_BINARY', 'soffice')
DJANGO_BILLDOCS_PDF_CONVERSION_TIMEOUT = getattr(settings, 'DJANGO_BILLDOCS_PDF_CONVERSION_TIMEOUT', 60)
DJANGO_BILLDOCS_PDF_FALLBACK_ENABLED = getattr(settings, 'DJANGO_BILLDOCS_PDF_FALLBACK_ENABLED', True)
