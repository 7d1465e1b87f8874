"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

Value formatting helpers used to fill document templates.
"""

import re
from datetime import date
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Optional, Union

from django.core.exceptions import ValidationError

from django_billdocs.settings import DJANGO_BILLDOCS_TEMPLATE_DATE_FORMAT

TWO_PLACES = Decimal('0.01')
THREE_PLACES = Decimal('0.001')

# characters not allowed in XML 1.0 documents
XML_INCOMPATIBLE_REGEX = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]')


def to_decimal(value: Union[Decimal, float, int, str]) -> Decimal:
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except (InvalidOperation, ValueError) as e:
            raise ValidationError(f'{value!r} is not a valid number.') from e
    if not value.is_finite():
        raise ValidationError(f'{value} is not a finite number.')
    return value


def format_amount(value: Union[Decimal, float, int, str]) -> str:
    """
    Formats a monetary value with exactly two decimal places.

    Examples
    ________
    >>> format_amount(Decimal('1200.5'))
    '1200.50'
    """
    return str(to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def quantize(value, places: Decimal) -> Decimal:
    try:
        return to_decimal(value).quantize(places, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValidationError(f'{value!r} is out of range.') from e


def parse_amount(value: str) -> Decimal:
    return quantize(value, TWO_PLACES)


def parse_quantity(value) -> Decimal:
    return quantize(value, THREE_PLACES)


def format_percent(value: Union[Decimal, float, int, str]) -> str:
    """
    Formats a rate as an integer or decimal percentage. 18.00 renders as '18%', 12.50 renders as '12.5%'.
    """
    value = to_decimal(value)
    if value == value.to_integral_value():
        return f'{value.to_integral_value()}%'
    return f'{value.normalize()}%'


def format_quantity(value: Union[Decimal, float, int, str]) -> str:
    value = to_decimal(value)
    if value == value.to_integral_value():
        return str(value.to_integral_value())
    return str(value.normalize())


def format_date(dt: Optional[date], fmt: str = DJANGO_BILLDOCS_TEMPLATE_DATE_FORMAT) -> str:
    return dt.strftime(fmt) if dt else ''


def format_text(value: Optional[str]) -> str:
    """
    Renders free text for a Word template. Control characters that cannot be stored in a .docx are dropped.
    """
    if value is None:
        return ''
    return XML_INCOMPATIBLE_REGEX.sub('', str(value))
