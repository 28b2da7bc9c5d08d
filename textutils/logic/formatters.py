# textutils/logic/formatters.py

"""Numeric formatters that a positional mask template cannot express."""

import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

from textutils.logic.mask import MaskEngine

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")

Amount = Union[str, int, float, Decimal]


def format_currency_amount(amount: Amount, engine: Optional[MaskEngine] = None) -> str:
    """Formats an amount as US dollars with digit grouping.

    Digit grouping depends on the total number of digits, which the mask
    template walk cannot know in advance, so numeric input is formatted
    here. Input that does not parse as a number goes through the
    'currency' preset instead.

    Args:
        amount: Number, or a string such as '1234.5' or '$1,234.50'
        engine: Mask engine used for non-numeric input

    Returns:
        Formatted amount such as '$1,234.50', or '' for empty input
    """
    text = str(amount).strip()
    if not text:
        return ""

    try:
        number = Decimal(text.replace("$", "").replace(",", ""))
    except InvalidOperation:
        return (engine or MaskEngine()).apply(text, "currency")

    if not number.is_finite():
        return (engine or MaskEngine()).apply(text, "currency")

    number = number.quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if number < 0 else ""
    return f"{sign}${abs(number):,.2f}"
