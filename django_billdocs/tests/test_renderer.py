"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

import subprocess
from io import BytesIO
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

from docx import Document

from django_billdocs.exceptions import (TemplateNotFoundError, TemplatePlaceholderMismatchError, PDFConversionError,
                                        DocumentRenderError)
from django_billdocs.report import DocumentRenderer
from django_billdocs.report.pdf_core import LibreOfficeConverter
from django_billdocs.tests.base import DjangoBillDocsBaseTest


class StaticConverter:

    def __init__(self, content: bytes = b'%PDF-1.7 converted'):
        self.content = content
        self.calls = 0

    def convert(self, docx_content: bytes, basename: str = 'document') -> bytes:
        self.calls += 1
        return self.content


class FailingConverter:

    def convert(self, docx_content: bytes, basename: str = 'document') -> bytes:
        raise PDFConversionError('soffice is not installed')


def get_document_text(content: bytes) -> str:
    document = Document(BytesIO(content))
    texts = [p.text for p in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            texts.extend(cell.text for cell in row.cells)
    for section in document.sections:
        texts.extend(p.text for p in section.header.paragraphs)
        texts.extend(p.text for p in section.footer.paragraphs)
    return '\n'.join(texts)


class DocxRenderTest(DjangoBillDocsBaseTest):

    def test_render_invoice_docx(self):
        invoice_model = self.create_invoice(item_count=2, withSignature=False)
        rendered = DocumentRenderer().render(invoice_model, fmt='docx')

        self.assertEqual(rendered.render_mode, 'docx')
        self.assertFalse(rendered.is_degraded)
        self.assertEqual(rendered.filename, f'Invoice_{invoice_model.document_number}.docx')
        self.assertEqual(rendered.omitted_item_count, 0)

        text = get_document_text(rendered.content)
        self.assertIn(f'Invoice No: {invoice_model.document_number}', text)
        self.assertIn(invoice_model.bill_to['name'], text)
        self.assertIn('18/05/2024', text)
        self.assertNotIn('{', text)
        self.assertNotIn('Authorised Signatory', text)

    def test_absent_item_rows_removed(self):
        invoice_model = self.create_invoice(item_count=2)
        rendered = DocumentRenderer().render(invoice_model, fmt='docx')
        document = Document(BytesIO(rendered.content))
        items_table = document.tables[1]
        # header row plus one row per item
        self.assertEqual(len(items_table.rows), 3)
        self.assertEqual(items_table.rows[2].cells[0].text, '2')

    def test_header_filled(self):
        po_model = self.create_purchase_order(item_count=1)
        rendered = DocumentRenderer().render(po_model, fmt='docx')
        document = Document(BytesIO(rendered.content))
        header_text = '\n'.join(p.text for p in document.sections[0].header.paragraphs)
        self.assertIn(po_model.document_number, header_text)

    def test_amount_in_words_in_totals(self):
        for document_model in (self.create_invoice(withSignature=True), self.create_purchase_order()):
            rendered = DocumentRenderer().render(document_model, fmt='docx')
            document = Document(BytesIO(rendered.content))
            body_text = [p.text for p in document.paragraphs]
            self.assertIn(f'Amount in words: {document_model.amount_in_words}', body_text)

    def test_footer_filled(self):
        invoice_model = self.create_invoice()
        rendered = DocumentRenderer().render(invoice_model, fmt='docx')
        document = Document(BytesIO(rendered.content))
        footer_text = '\n'.join(p.text for p in document.sections[0].footer.paragraphs)
        self.assertEqual(footer_text, f'Invoice No {invoice_model.document_number}')

    def test_signature_variant(self):
        invoice_model = self.create_invoice(withSignature=True)
        rendered = DocumentRenderer().render(invoice_model, fmt='docx')
        self.assertIn('Authorised Signatory', get_document_text(rendered.content))

    def test_omitted_items_reported(self):
        invoice_model = self.create_invoice(item_count=5)
        with self.assertLogs('Django BillDocs Logger', level='WARNING'):
            rendered = DocumentRenderer().render(invoice_model, fmt='docx')
        self.assertEqual(rendered.omitted_item_count, 1)

    def test_unsupported_format(self):
        invoice_model = self.create_invoice()
        with self.assertRaises(DocumentRenderError):
            DocumentRenderer().render(invoice_model, fmt='odt')

    def test_template_not_found(self):
        invoice_model = self.create_invoice()
        with TemporaryDirectory() as tmp_dir:
            renderer = DocumentRenderer(template_dir=Path(tmp_dir), converter=StaticConverter())
            with self.assertRaises(TemplateNotFoundError):
                renderer.render(invoice_model, fmt='docx')
            with self.assertRaises(TemplateNotFoundError):
                renderer.render(invoice_model, fmt='pdf')

    def test_unknown_placeholder(self):
        invoice_model = self.create_invoice(withSignature=False)
        with TemporaryDirectory() as tmp_dir:
            document = Document()
            document.add_paragraph('Invoice {InvoiceNo}')
            document.add_paragraph('Vendor code {VendorCode}')
            document.save(Path(tmp_dir).joinpath('Invoice-Template Without Signature.docx'))

            renderer = DocumentRenderer(template_dir=Path(tmp_dir), converter=FailingConverter())
            with self.assertRaises(TemplatePlaceholderMismatchError) as ctx:
                renderer.render(invoice_model, fmt='docx')
            self.assertEqual(ctx.exception.unknown_keys, ['VendorCode'])

            # template errors are never masked by the PDF fallback
            with self.assertRaises(TemplatePlaceholderMismatchError):
                renderer.render(invoice_model, fmt='pdf')

    def test_corrupt_template(self):
        invoice_model = self.create_invoice(withSignature=False)
        with TemporaryDirectory() as tmp_dir:
            Path(tmp_dir).joinpath('Invoice-Template Without Signature.docx').write_bytes(b'not a zip file')
            renderer = DocumentRenderer(template_dir=Path(tmp_dir))
            with self.assertRaises(DocumentRenderError):
                renderer.render(invoice_model, fmt='docx')


class PDFRenderTest(DjangoBillDocsBaseTest):

    def test_converted(self):
        converter = StaticConverter()
        po_model = self.create_purchase_order()
        rendered = DocumentRenderer(converter=converter).render(po_model, fmt='pdf')

        self.assertEqual(converter.calls, 1)
        self.assertEqual(rendered.render_mode, 'converted')
        self.assertEqual(rendered.content, b'%PDF-1.7 converted')
        self.assertEqual(rendered.content_type, 'application/pdf')
        self.assertEqual(rendered.filename, f'PurchaseOrder_{po_model.document_number}.pdf')

    def test_fallback(self):
        po_model = self.create_purchase_order()
        with self.assertLogs('Django BillDocs Logger', level='WARNING'):
            rendered = DocumentRenderer(converter=FailingConverter()).render(po_model, fmt='pdf')

        self.assertEqual(rendered.render_mode, 'fallback')
        self.assertTrue(rendered.is_degraded)
        self.assertTrue(rendered.content.startswith(b'%PDF'))
        self.assertEqual(rendered.filename, f'PurchaseOrder_{po_model.document_number}.pdf')

    def test_fallback_disabled(self):
        po_model = self.create_purchase_order()
        renderer = DocumentRenderer(converter=FailingConverter(), fallback_enabled=False)
        with self.assertRaises(PDFConversionError):
            renderer.render(po_model, fmt='pdf')


class LibreOfficeConverterTest(DjangoBillDocsBaseTest):

    def test_missing_binary(self):
        converter = LibreOfficeConverter(binary='soffice-missing', timeout=5)
        with patch('django_billdocs.report.pdf_core.subprocess.run', side_effect=FileNotFoundError):
            with self.assertRaises(PDFConversionError):
                converter.convert(b'docx')

    def test_timeout(self):
        converter = LibreOfficeConverter(timeout=1)
        with patch('django_billdocs.report.pdf_core.subprocess.run',
                   side_effect=subprocess.TimeoutExpired(cmd='soffice', timeout=1)):
            with self.assertRaises(PDFConversionError):
                converter.convert(b'docx')

    def test_non_zero_exit(self):
        converter = LibreOfficeConverter()
        failed = subprocess.CompletedProcess(args=[], returncode=1, stdout=b'', stderr=b'boom')
        with patch('django_billdocs.report.pdf_core.subprocess.run', return_value=failed):
            with self.assertRaises(PDFConversionError):
                converter.convert(b'docx')

    def test_missing_output(self):
        converter = LibreOfficeConverter()
        done = subprocess.CompletedProcess(args=[], returncode=0, stdout=b'', stderr=b'')
        with patch('django_billdocs.report.pdf_core.subprocess.run', return_value=done):
            with self.assertRaises(PDFConversionError):
                converter.convert(b'docx')

    def test_convert(self):
        converter = LibreOfficeConverter(timeout=30)

        def fake_run(command, **kwargs):
            self.assertEqual(kwargs['timeout'], 30)
            out_dir = Path(command[command.index('--outdir') + 1])
            source = Path(command[-1])
            self.assertEqual(source.read_bytes(), b'docx')
            out_dir.joinpath(f'{source.stem}.pdf').write_bytes(b'%PDF-1.7 soffice')
            return subprocess.CompletedProcess(args=command, returncode=0, stdout=b'', stderr=b'')

        with patch('django_billdocs.report.pdf_core.subprocess.run', side_effect=fake_run):
            self.assertEqual(converter.convert(b'docx'), b'%PDF-1.7 soffice')
