"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

PDF support. Filled Word documents are converted with a headless LibreOffice process. When the conversion is not
possible, FallbackPDFReport produces a minimal placeholder document with fpdf2 so that a PDF can still be delivered.
"""

import subprocess
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Optional

from fpdf import FPDF, XPos, YPos

from django_billdocs.exceptions import PDFConversionError
from django_billdocs.io.formatting import format_amount, format_date, format_text
from django_billdocs.settings import DJANGO_BILLDOCS_SOFFICE_BINARY, DJANGO_BILLDOCS_PDF_CONVERSION_TIMEOUT, logger


class LibreOfficeConverter:
    """
    Converts .docx content to PDF running soffice --headless --convert-to pdf inside a temporary directory.
    Every failure mode (missing binary, timeout, non-zero exit, missing output) raises PDFConversionError.
    """

    def __init__(self,
                 binary: Optional[str] = None,
                 timeout: Optional[int] = None):
        self.BINARY = binary or DJANGO_BILLDOCS_SOFFICE_BINARY
        self.TIMEOUT = timeout or DJANGO_BILLDOCS_PDF_CONVERSION_TIMEOUT

    def get_command(self, source: Path, out_dir: Path):
        return [
            self.BINARY,
            f'-env:UserInstallation={out_dir.joinpath("profile").as_uri()}',
            '--headless',
            '--convert-to', 'pdf',
            '--outdir', str(out_dir),
            str(source)
        ]

    def convert(self, docx_content: bytes, basename: str = 'document') -> bytes:
        with TemporaryDirectory(prefix='billdocs-') as tmp_dir:
            out_dir = Path(tmp_dir)
            source = out_dir.joinpath(f'{basename}.docx')
            source.write_bytes(docx_content)

            try:
                result = subprocess.run(self.get_command(source, out_dir),
                                        capture_output=True,
                                        timeout=self.TIMEOUT,
                                        check=False)
            except FileNotFoundError as e:
                raise PDFConversionError(f'PDF converter {self.BINARY} is not installed.') from e
            except subprocess.TimeoutExpired as e:
                raise PDFConversionError(f'PDF conversion timed out after {self.TIMEOUT} seconds.') from e

            if result.returncode != 0:
                stderr = (result.stderr or b'').decode(errors='replace').strip()
                raise PDFConversionError(f'PDF converter exited with status {result.returncode}. {stderr}')

            target = source.with_suffix('.pdf')
            if not target.is_file():
                raise PDFConversionError(f'PDF converter produced no output for {source.name}.')
            return target.read_bytes()


class FallbackPDFReport(FPDF):
    """
    One page A4 placeholder used when the filled template cannot be converted to PDF.
    """

    def __init__(self, *args, document_model, **kwargs):
        super().__init__(*args, orientation='P', unit='mm', format='A4', **kwargs)
        self.FONT_SIZE: int = 11
        self.FONT_FAMILY: str = 'helvetica'
        self.DOCUMENT_MODEL = document_model
        self.set_title(self.get_report_title())
        self.set_font(family=self.FONT_FAMILY, size=self.FONT_SIZE)
        self.add_page()

    @staticmethod
    def clean_text(text: str) -> str:
        # core fonts are latin-1 only
        return format_text(text).encode('latin-1', errors='replace').decode('latin-1')

    def get_report_title(self) -> str:
        return f'{self.DOCUMENT_MODEL.DOCUMENT_LABEL} generated from template'

    def print_title(self):
        self.set_font(family=self.FONT_FAMILY, style='B', size=self.FONT_SIZE + 7)
        self.cell(w=0,
                  h=12,
                  text=self.clean_text(self.get_report_title()),
                  new_x=XPos.LMARGIN,
                  new_y=YPos.NEXT,
                  align='C')
        self.ln(6)
        self.set_font(family=self.FONT_FAMILY, size=self.FONT_SIZE)

    def print_line(self, label: str, value: str):
        self.set_font(family=self.FONT_FAMILY, style='B', size=self.FONT_SIZE)
        self.cell(w=50, h=7, text=self.clean_text(label))
        self.set_font(family=self.FONT_FAMILY, size=self.FONT_SIZE)
        self.cell(w=0, h=7, text=self.clean_text(value), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def print_report(self):
        document_model = self.DOCUMENT_MODEL
        party = document_model.get_primary_party() or dict()
        self.print_title()
        self.print_line('Document Number:', document_model.document_number or '')
        self.print_line('Issue Date:', format_date(document_model.date_issued))
        self.print_line('Due Date:', format_date(document_model.date_due))
        self.print_line('Party:', party.get('name', ''))
        self.print_line('Amount Due:', f'{document_model.currency} {format_amount(document_model.amount_due)}')

    def get_content(self) -> bytes:
        self.print_report()
        return bytes(self.output())


def build_fallback_pdf(document_model, reason: Exception) -> bytes:
    logger.warning(f'{document_model}: PDF conversion failed ({reason}). Delivering fallback PDF.')
    return FallbackPDFReport(document_model=document_model).get_content()
