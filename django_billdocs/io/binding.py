"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

Template bindings flatten a stored billing document into the placeholder map consumed by the document templates.

Each binding declares the placeholder keys it produces, so a template can be checked against the binding before it
is rendered. Line items occupy a fixed number of positional rows (DJANGO_BILLDOCS_TEMPLATE_ITEM_ROWS). Rows without
an item are bound to None, the absence marker which makes the renderer drop the row from the output document.
Items beyond the last row are not represented on the template and are reported through omitted_item_count.

Examples
________
>>> binding = build_document_binding(invoice_model)
>>> placeholders = binding.to_placeholders()
>>> placeholders['InvoiceNo']
'INV-240518-001'
>>> placeholders['Description4'] is None
True
"""

from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Optional, Set, Union

from django_billdocs.io.formatting import format_amount, format_date, format_percent, format_quantity, format_text
from django_billdocs.models.sequence import DocumentSequenceModel
from django_billdocs.settings import DJANGO_BILLDOCS_TEMPLATE_ITEM_ROWS, logger

PlaceholderValue = Union[str, int, None]
PlaceholderMap = Dict[str, PlaceholderValue]

PARTY_KEYS = ('ClientName', 'Address', 'StateCode', 'GSTIN', 'SecondaryTaxId')
ITEM_KEYS = ('SL', 'Description', 'HSN_SAC', 'Quantity', 'Rate', 'TaxableValue', 'GSTRate', 'GSTAmount', 'Total')


@dataclass(frozen=True)
class PartyBinding:
    name: str
    address: str
    state_code: str
    tax_id: str
    secondary_tax_id: Optional[str] = None

    @classmethod
    def from_dict(cls, party: dict) -> 'PartyBinding':
        return cls(
            name=format_text(party['name']),
            address=format_text(party['address']),
            state_code=format_text(party['stateCode']),
            tax_id=format_text(party['GSTIN']),
            secondary_tax_id=format_text(party.get('secondaryTaxId'))
        )

    @staticmethod
    def placeholder_keys(prefix: str) -> List[str]:
        return [f'{prefix}{k}' for k in PARTY_KEYS]

    def to_placeholders(self, prefix: str) -> PlaceholderMap:
        values = (self.name, self.address, self.state_code, self.tax_id, self.secondary_tax_id or '')
        return dict(zip(self.placeholder_keys(prefix), values))


@dataclass(frozen=True)
class LineItemBinding:
    slot: int
    description: str
    hsn_sac: str
    quantity: str
    rate: str
    taxable_value: str
    gst_rate: str
    gst_amount: str
    total: str

    @classmethod
    def from_model(cls, slot: int, item_model) -> 'LineItemBinding':
        return cls(
            slot=slot,
            description=format_text(item_model.description),
            hsn_sac=format_text(item_model.hsn_sac),
            quantity=format_quantity(item_model.quantity),
            rate=format_amount(item_model.rate),
            taxable_value=format_amount(item_model.taxable_value),
            gst_rate=format_percent(item_model.gst_rate),
            gst_amount=format_amount(item_model.gst_amount),
            total=format_amount(item_model.total)
        )

    @staticmethod
    def placeholder_keys(slot: int) -> List[str]:
        return [f'{k}{slot}' for k in ITEM_KEYS]

    @classmethod
    def absent_placeholders(cls, slot: int) -> PlaceholderMap:
        return {k: None for k in cls.placeholder_keys(slot)}

    def to_placeholders(self) -> PlaceholderMap:
        values = (self.slot, self.description, self.hsn_sac, self.quantity, self.rate,
                  self.taxable_value, self.gst_rate, self.gst_amount, self.total)
        return dict(zip(self.placeholder_keys(self.slot), values))


@dataclass(frozen=True)
class DocumentBinding:
    NUMBER_KEY: ClassVar[str] = None
    ISSUE_DATE_KEY: ClassVar[str] = None
    REFERENCE_KEY: ClassVar[str] = None
    PRIMARY_PARTY_PREFIX: ClassVar[str] = 'BillTo'
    SECONDARY_PARTY_PREFIX: ClassVar[str] = 'ShipTo'

    document_number: str
    date_issued: str
    date_due: str
    reference: str
    date_reference: str
    currency: str
    amount_due: str
    terms: str
    taxable_value_total: str
    cgst_total: str
    sgst_total: str
    igst_total: str
    amount_in_words: str
    primary_party: PartyBinding
    secondary_party: PartyBinding
    items: List[LineItemBinding] = field(default_factory=list)
    item_rows: int = DJANGO_BILLDOCS_TEMPLATE_ITEM_ROWS
    omitted_item_count: int = 0

    @classmethod
    def scalar_placeholder_keys(cls) -> List[str]:
        return [
            cls.NUMBER_KEY,
            cls.ISSUE_DATE_KEY,
            'DueDate',
            cls.REFERENCE_KEY,
            'referenceDate',
            'Currency',
            'AmountDue',
            'PaymentMode',
            'TotalTaxableValue',
            'ValueInFigure',
            'CGST',
            'SGST',
            'IGST',
        ]

    @classmethod
    def placeholder_keys(cls, item_rows: int = DJANGO_BILLDOCS_TEMPLATE_ITEM_ROWS) -> Set[str]:
        keys = set(cls.scalar_placeholder_keys())
        keys.update(PartyBinding.placeholder_keys(cls.PRIMARY_PARTY_PREFIX))
        keys.update(PartyBinding.placeholder_keys(cls.SECONDARY_PARTY_PREFIX))
        for slot in range(1, item_rows + 1):
            keys.update(LineItemBinding.placeholder_keys(slot))
        return keys

    def to_placeholders(self) -> PlaceholderMap:
        scalars = (
            self.document_number,
            self.date_issued,
            self.date_due,
            self.reference,
            self.date_reference,
            self.currency,
            self.amount_due,
            self.terms,
            self.taxable_value_total,
            self.amount_in_words,
            self.cgst_total,
            self.sgst_total,
            self.igst_total,
        )
        placeholders: PlaceholderMap = dict(zip(self.scalar_placeholder_keys(), scalars))
        placeholders.update(self.primary_party.to_placeholders(self.PRIMARY_PARTY_PREFIX))
        placeholders.update(self.secondary_party.to_placeholders(self.SECONDARY_PARTY_PREFIX))

        for item in self.items:
            placeholders.update(item.to_placeholders())
        for slot in range(len(self.items) + 1, self.item_rows + 1):
            placeholders.update(LineItemBinding.absent_placeholders(slot))
        return placeholders


@dataclass(frozen=True)
class InvoiceBinding(DocumentBinding):
    NUMBER_KEY: ClassVar[str] = 'InvoiceNo'
    ISSUE_DATE_KEY: ClassVar[str] = 'InvoiceDate'
    REFERENCE_KEY: ClassVar[str] = 'invoicereference'


@dataclass(frozen=True)
class PurchaseOrderBinding(DocumentBinding):
    NUMBER_KEY: ClassVar[str] = 'PurchaseOrderNo'
    ISSUE_DATE_KEY: ClassVar[str] = 'poDate'
    REFERENCE_KEY: ClassVar[str] = 'purchaseorderreference'


BINDING_CLASSES = {
    DocumentSequenceModel.KEY_INVOICE: InvoiceBinding,
    DocumentSequenceModel.KEY_PURCHASE_ORDER: PurchaseOrderBinding,
}


def get_binding_class(document_model) -> type:
    return BINDING_CLASSES[document_model.SEQUENCE_KEY]


def get_document_terms(document_model) -> str:
    if document_model.SEQUENCE_KEY == DocumentSequenceModel.KEY_INVOICE:
        return document_model.payment_mode
    return document_model.payment_terms


def build_document_binding(document_model, item_rows: int = DJANGO_BILLDOCS_TEMPLATE_ITEM_ROWS) -> DocumentBinding:
    """
    Flattens a stored InvoiceModel or PurchaseOrderModel into its template binding.

    Parameters
    ----------
    document_model: BillingDocumentModelAbstract
        The billing document to bind.
    item_rows: int
        Number of line item rows available on the template.

    Returns
    -------
    DocumentBinding
        An InvoiceBinding or a PurchaseOrderBinding.
    """
    binding_class = get_binding_class(document_model)
    item_models = list(document_model.get_line_items())

    omitted = max(len(item_models) - item_rows, 0)
    if omitted:
        logger.warning(f'{document_model}: {len(item_models)} line items exceed the {item_rows} template rows. '
                       f'{omitted} item(s) will not be rendered.')

    return binding_class(
        document_number=document_model.document_number,
        date_issued=format_date(document_model.date_issued),
        date_due=format_date(document_model.date_due),
        reference=format_text(document_model.reference),
        date_reference=format_date(document_model.date_reference),
        currency=format_text(document_model.currency),
        amount_due=format_amount(document_model.amount_due),
        terms=get_document_terms(document_model),
        taxable_value_total=format_amount(document_model.taxable_value_total),
        cgst_total=format_amount(document_model.cgst_total),
        sgst_total=format_amount(document_model.sgst_total),
        igst_total=format_amount(document_model.igst_total),
        amount_in_words=format_text(document_model.amount_in_words),
        primary_party=PartyBinding.from_dict(document_model.get_primary_party()),
        secondary_party=PartyBinding.from_dict(document_model.get_secondary_party()),
        items=[
            LineItemBinding.from_model(slot, item_model)
            for slot, item_model in enumerate(item_models[:item_rows], start=1)
        ],
        item_rows=item_rows,
        omitted_item_count=omitted
    )
