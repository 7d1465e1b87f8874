"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django.core.exceptions import ValidationError


class InvalidDocumentIdError(ValidationError):
    pass


class DocumentSchemaError(ValidationError):
    pass


class DocumentNumberError(Exception):
    pass


class DocumentRenderError(Exception):
    pass


class TemplateNotFoundError(DocumentRenderError):
    pass


class TemplatePlaceholderMismatchError(DocumentRenderError):

    def __init__(self, template_name: str, unknown_keys):
        self.template_name = template_name
        self.unknown_keys = sorted(unknown_keys)
        super().__init__(
            f'Template {template_name} uses placeholders not provided by the document binding: '
            f'{", ".join(self.unknown_keys)}'
        )


class PDFConversionError(Exception):
    pass
