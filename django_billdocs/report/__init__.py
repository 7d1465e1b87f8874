"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django_billdocs.report.renderer import DocumentRenderer, RenderedDocument

__all__ = [
    'DocumentRenderer',
    'RenderedDocument'
]
