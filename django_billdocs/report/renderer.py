"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

The DocumentRenderer turns a stored billing document into a downloadable Word or PDF file.

PDF output is produced by converting the filled Word document. When the conversion fails and the fallback is enabled,
a placeholder PDF is returned instead, flagged with render_mode='fallback' so callers can tell it apart from a faithful
rendition. Template errors are never masked by the fallback.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from django_billdocs.exceptions import DocumentRenderError, PDFConversionError
from django_billdocs.io.binding import build_document_binding
from django_billdocs.models.sequence import DocumentSequenceModel
from django_billdocs.report.docx_core import DocxTemplateRenderer
from django_billdocs.report.pdf_core import LibreOfficeConverter, build_fallback_pdf
from django_billdocs.settings import (DJANGO_BILLDOCS_TEMPLATE_DIR, DJANGO_BILLDOCS_INVOICE_TEMPLATES,
                                      DJANGO_BILLDOCS_PO_TEMPLATES, DJANGO_BILLDOCS_PDF_FALLBACK_ENABLED,
                                      DJANGO_BILLDOCS_TEMPLATE_ITEM_ROWS)

FORMAT_DOCX = 'docx'
FORMAT_PDF = 'pdf'

RENDER_MODE_DOCX = 'docx'
RENDER_MODE_CONVERTED = 'converted'
RENDER_MODE_FALLBACK = 'fallback'

CONTENT_TYPES = {
    FORMAT_DOCX: 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    FORMAT_PDF: 'application/pdf',
}


@dataclass(frozen=True)
class RenderedDocument:
    content: bytes
    content_type: str
    filename: str
    render_mode: str
    omitted_item_count: int = 0

    @property
    def is_degraded(self) -> bool:
        return self.render_mode == RENDER_MODE_FALLBACK


class DocumentRenderer:
    """
    Renders invoices and purchase orders from their Word templates.

    Parameters
    ----------
    template_dir: Path
        Directory holding the templates. Defaults to DJANGO_BILLDOCS_TEMPLATE_DIR.
    converter: LibreOfficeConverter
        The converter used for PDF output.
    fallback_enabled: bool
        Deliver a placeholder PDF when the conversion fails. Defaults to DJANGO_BILLDOCS_PDF_FALLBACK_ENABLED.
    """

    def __init__(self,
                 template_dir: Optional[Path] = None,
                 converter: Optional[LibreOfficeConverter] = None,
                 fallback_enabled: Optional[bool] = None,
                 item_rows: int = DJANGO_BILLDOCS_TEMPLATE_ITEM_ROWS):
        self.TEMPLATE_DIR = Path(template_dir or DJANGO_BILLDOCS_TEMPLATE_DIR)
        self.CONVERTER = converter or LibreOfficeConverter()
        self.FALLBACK_ENABLED = DJANGO_BILLDOCS_PDF_FALLBACK_ENABLED if fallback_enabled is None else fallback_enabled
        self.ITEM_ROWS = item_rows
        self.TEMPLATES = {
            DocumentSequenceModel.KEY_INVOICE: DJANGO_BILLDOCS_INVOICE_TEMPLATES,
            DocumentSequenceModel.KEY_PURCHASE_ORDER: DJANGO_BILLDOCS_PO_TEMPLATES,
        }

    def get_template_path(self, document_model) -> Path:
        template_name = self.TEMPLATES[document_model.SEQUENCE_KEY][bool(document_model.with_signature)]
        return self.TEMPLATE_DIR.joinpath(template_name)

    def render_docx(self, document_model, binding) -> bytes:
        template_renderer = DocxTemplateRenderer(template_path=self.get_template_path(document_model))
        return template_renderer.render(
            placeholders=binding.to_placeholders(),
            allowed_keys=binding.placeholder_keys(item_rows=self.ITEM_ROWS)
        )

    def render(self, document_model, fmt: str) -> RenderedDocument:
        """
        Renders document_model in the requested format.

        Parameters
        ----------
        document_model: BillingDocumentModelAbstract
            A stored invoice or purchase order.
        fmt: str
            Either 'docx' or 'pdf'.

        Returns
        -------
        RenderedDocument
        """
        if fmt not in CONTENT_TYPES:
            raise DocumentRenderError(f'Unsupported document format {fmt}.')

        binding = build_document_binding(document_model, item_rows=self.ITEM_ROWS)
        docx_content = self.render_docx(document_model, binding)

        if fmt == FORMAT_DOCX:
            content = docx_content
            render_mode = RENDER_MODE_DOCX
        else:
            try:
                content = self.CONVERTER.convert(docx_content)
                render_mode = RENDER_MODE_CONVERTED
            except PDFConversionError as e:
                if not self.FALLBACK_ENABLED:
                    raise e
                content = build_fallback_pdf(document_model, reason=e)
                render_mode = RENDER_MODE_FALLBACK

        return RenderedDocument(
            content=content,
            content_type=CONTENT_TYPES[fmt],
            filename=document_model.get_filename(fmt),
            render_mode=render_mode,
            omitted_item_count=binding.omitted_item_count
        )
