"""
Order tax calculator.

Shared by the order consistency checks and the standalone tax preview
endpoint, so both always agree on the after-tax total.

Rules:
- Percentage taxes are summed and applied once to the item total
- Fixed taxes are summed and added as flat amounts after the percentage
- The result is quantized to 2 decimals with ROUND_HALF_UP
- Cash rounding lifts any fractional amount up to the next whole unit

Usage:
    from orders.calculators import TaxCalculator
    breakdown = TaxCalculator.calculate(tenant, Decimal('50.00'), [1, 2])
    breakdown.after_rounding_tax  # Decimal('59.00')
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_DOWN, ROUND_HALF_UP
from typing import Dict, Iterable, List, Union

TWO_PLACES = Decimal('0.01')
ZERO = Decimal('0.00')


def to_decimal(value: Union[Decimal, int, float, str]) -> Decimal:
    """Convert a primitive amount to Decimal without float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize(amount: Decimal) -> Decimal:
    return amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class TaxBreakdown:
    after_rounding_tax: Decimal
    rounding: Decimal
    before_rounding_tax: Decimal

    def as_dict(self) -> Dict[str, str]:
        # Strings keep the exact 2-decimal representation on the wire
        return {
            'after_rounding_tax': str(self.after_rounding_tax),
            'rounding': str(self.rounding),
            'before_rounding_tax': str(self.before_rounding_tax),
        }


class TaxCalculator:
    """
    Computes the after-tax total for an item total and a set of tax rules.

    `compute()` is pure and works with any objects exposing `rate` and
    `is_fixed`. `calculate()` resolves tax ids for a tenant first; ids that
    do not resolve are ignored.
    """

    @staticmethod
    def compute(total_item_price, taxes: Iterable) -> TaxBreakdown:
        total_item_price = to_decimal(total_item_price)

        fixed_total = ZERO
        percentage_total = ZERO
        for tax in taxes:
            if tax.is_fixed:
                fixed_total += to_decimal(tax.rate)
            else:
                percentage_total += to_decimal(tax.rate)

        before_rounding = quantize(
            total_item_price * (Decimal('1') + percentage_total / Decimal('100'))
            + fixed_total
        )

        whole_units = before_rounding.to_integral_value(rounding=ROUND_DOWN)
        fraction = quantize(before_rounding - whole_units)
        rounding = quantize(Decimal('1') - fraction) if fraction > 0 else ZERO

        return TaxBreakdown(
            after_rounding_tax=before_rounding + rounding,
            rounding=rounding,
            before_rounding_tax=before_rounding,
        )

    @staticmethod
    def calculate(tenant, total_item_price, tax_ids: List[int]) -> TaxBreakdown:
        from products.models import Tax

        taxes = []
        if tax_ids:
            taxes = list(Tax.all_objects.filter(tenant=tenant, id__in=tax_ids))
        return TaxCalculator.compute(total_item_price, taxes)
