"""Money helper

Pure fixed-point calculations for line totals and BTW (VAT).

Rounding policy: every value is a Decimal rounded ROUND_HALF_UP to cents at
the point of each multiplication and sum. Floats are converted through their
string form so 33.335 stays 33.335.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, NamedTuple, Union

CENTS = Decimal("0.01")
DEFAULT_VAT_RATE = Decimal("0.21")

Number = Union[Decimal, int, float, str]


class MoneyLine(NamedTuple):
    quantity: Number
    unit_price: Number


@dataclass(frozen=True)
class Totals:
    subtotal: Decimal
    tax: Decimal
    total: Decimal


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_money(value: Number) -> Decimal:
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def line_total(quantity: Number, unit_price: Number) -> Decimal:
    return round_money(to_decimal(quantity) * to_decimal(unit_price))


def tax(amount: Number, rate: Number = DEFAULT_VAT_RATE) -> Decimal:
    return round_money(to_decimal(amount) * to_decimal(rate))


def vat_breakdown(subtotal: Number, rate: Number = DEFAULT_VAT_RATE) -> Totals:
    """Subtotal, tax and total for an already summed amount"""
    subtotal = round_money(subtotal)
    tax_amount = tax(subtotal, rate)
    return Totals(
        subtotal=subtotal,
        tax=tax_amount,
        total=round_money(subtotal + tax_amount),
    )


def totals(lines: Iterable[Any], rate: Number = DEFAULT_VAT_RATE) -> Totals:
    """
    Compute subtotal, tax and total for a set of lines

    Each line needs quantity and unit_price attributes (MoneyLine,
    WorkEntry, ...).
    """
    subtotal = sum((line_total(line.quantity, line.unit_price) for line in lines), Decimal("0"))
    return vat_breakdown(subtotal, rate)
