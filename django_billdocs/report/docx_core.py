"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

Word template filling. Templates are regular .docx files carrying {Key} placeholders in body paragraphs, tables,
headers and footers. Word frequently splits a placeholder across several runs, so the runs of a paragraph holding a
placeholder are merged into its first run before substitution.
"""

import re
from io import BytesIO
from pathlib import Path
from typing import Iterator, Set
from zipfile import BadZipFile

from docx import Document
from docx.opc.exceptions import PackageNotFoundError

from django_billdocs.exceptions import DocumentRenderError, TemplateNotFoundError, TemplatePlaceholderMismatchError
from django_billdocs.io.binding import PlaceholderMap

PLACEHOLDER_REGEX = re.compile(r'\{([A-Za-z][A-Za-z0-9_]*)\}')


def find_placeholders(text: str) -> Set[str]:
    return set(PLACEHOLDER_REGEX.findall(text))


def iter_table_paragraphs(table) -> Iterator:
    for row in table.rows:
        for cell in row.cells:
            yield from cell.paragraphs
            for nested_table in cell.tables:
                yield from iter_table_paragraphs(nested_table)


def iter_tables(container) -> Iterator:
    for table in container.tables:
        yield table
        for row in table.rows:
            for cell in row.cells:
                yield from iter_tables(cell)


def iter_containers(document) -> Iterator:
    """
    Yields the document body and every header & footer that carries its own definition.
    Headers linked to the previous section are skipped, accessing them would add a definition to the package.
    """
    yield document
    for section in document.sections:
        for part in (section.header, section.footer):
            if not part.is_linked_to_previous:
                yield part


def iter_paragraphs(container) -> Iterator:
    yield from container.paragraphs
    for table in container.tables:
        yield from iter_table_paragraphs(table)


def get_row_text(row) -> str:
    return '\n'.join(p.text for cell in row.cells for p in cell.paragraphs)


class DocxTemplateRenderer:
    """
    Fills a single .docx template with a placeholder map.

    Placeholders bound to None are absent. A table row whose placeholders are all absent is removed from the output.
    Remaining absent placeholders render as empty text.

    Examples
    ________
    >>> renderer = DocxTemplateRenderer(template_path=Path('Invoice-Template Without Signature.docx'))
    >>> content = renderer.render(binding.to_placeholders(), allowed_keys=binding.placeholder_keys())
    """

    def __init__(self, template_path: Path):
        self.TEMPLATE_PATH = Path(template_path)

    def load(self):
        if not self.TEMPLATE_PATH.is_file():
            raise TemplateNotFoundError(f'Template {self.TEMPLATE_PATH.name} not found in {self.TEMPLATE_PATH.parent}')
        try:
            return Document(str(self.TEMPLATE_PATH))
        except (PackageNotFoundError, BadZipFile, KeyError, ValueError) as e:
            raise DocumentRenderError(f'Template {self.TEMPLATE_PATH.name} is not a valid Word document.') from e

    def get_template_placeholders(self, document) -> Set[str]:
        placeholders = set()
        for container in iter_containers(document):
            for paragraph in iter_paragraphs(container):
                placeholders.update(find_placeholders(paragraph.text))
        return placeholders

    def validate_placeholders(self, document, allowed_keys: Set[str]):
        unknown_keys = self.get_template_placeholders(document) - set(allowed_keys)
        if unknown_keys:
            raise TemplatePlaceholderMismatchError(template_name=self.TEMPLATE_PATH.name, unknown_keys=unknown_keys)

    def remove_absent_rows(self, container, placeholders: PlaceholderMap):
        for table in list(iter_tables(container)):
            for row in list(table.rows):
                row_keys = find_placeholders(get_row_text(row))
                if row_keys and all(placeholders.get(k) is None for k in row_keys):
                    tr = row._tr
                    tr.getparent().remove(tr)

    def fill_paragraph(self, paragraph, placeholders: PlaceholderMap):
        text = paragraph.text
        if not PLACEHOLDER_REGEX.search(text):
            return

        def replace(match):
            value = placeholders.get(match.group(1))
            return '' if value is None else str(value)

        filled = PLACEHOLDER_REGEX.sub(replace, text)
        runs = paragraph.runs
        if not runs:
            paragraph.add_run(filled)
            return
        runs[0].text = filled
        for run in runs[1:]:
            run.text = ''

    def render(self, placeholders: PlaceholderMap, allowed_keys: Set[str]) -> bytes:
        """
        Renders the template.

        Parameters
        ----------
        placeholders: dict
            The placeholder map produced by a document binding.
        allowed_keys: set
            Every placeholder key the binding may produce. Template placeholders outside this set are rejected.

        Returns
        -------
        bytes
            The filled .docx document.
        """
        document = self.load()
        self.validate_placeholders(document, allowed_keys)

        for container in iter_containers(document):
            self.remove_absent_rows(container, placeholders)
            for paragraph in iter_paragraphs(container):
                self.fill_paragraph(paragraph, placeholders)

        output = BytesIO()
        document.save(output)
        return output.getvalue()
