"""
Tax Calculator Tests

Percentage taxes are summed and applied once, fixed taxes are added flat,
and cash rounding lifts the total to the next whole unit.
"""
import random

import pytest
from decimal import Decimal
from types import SimpleNamespace

from orders.calculators import TaxCalculator, TaxBreakdown


def percentage(rate):
    return SimpleNamespace(rate=Decimal(rate), is_fixed=False)


def fixed(amount):
    return SimpleNamespace(rate=Decimal(amount), is_fixed=True)


class TestTaxCalculatorCompute:
    """Pure computation, no database"""

    def test_percentage_and_fixed_taxes(self):
        breakdown = TaxCalculator.compute(Decimal('50.00'), [percentage('7'), fixed('5.00')])

        assert breakdown.before_rounding_tax == Decimal('58.50')
        assert breakdown.rounding == Decimal('0.50')
        assert breakdown.after_rounding_tax == Decimal('59.00')

    def test_single_percentage_tax(self):
        breakdown = TaxCalculator.compute(Decimal('40'), [percentage('7')])

        assert breakdown.before_rounding_tax == Decimal('42.80')
        assert breakdown.rounding == Decimal('0.20')
        assert breakdown.after_rounding_tax == Decimal('43.00')

    def test_no_taxes_and_whole_amount_needs_no_rounding(self):
        breakdown = TaxCalculator.compute(Decimal('100.00'), [])

        assert breakdown == TaxBreakdown(
            after_rounding_tax=Decimal('100.00'),
            rounding=Decimal('0.00'),
            before_rounding_tax=Decimal('100.00'),
        )

    def test_percentages_are_summed_before_applying(self):
        breakdown = TaxCalculator.compute(Decimal('100.00'), [percentage('5'), percentage('10')])

        assert breakdown.before_rounding_tax == Decimal('115.00')
        assert breakdown.rounding == Decimal('0.00')

    def test_half_cent_rounds_up_before_cash_rounding(self):
        breakdown = TaxCalculator.compute(Decimal('10.005'), [])

        assert breakdown.before_rounding_tax == Decimal('10.01')
        assert breakdown.rounding == Decimal('0.99')
        assert breakdown.after_rounding_tax == Decimal('11.00')

    def test_primitive_inputs_are_accepted(self):
        breakdown = TaxCalculator.compute('20', [SimpleNamespace(rate='7', is_fixed=False)])

        assert breakdown.before_rounding_tax == Decimal('21.40')
        assert breakdown.rounding == Decimal('0.60')
        assert breakdown.after_rounding_tax == Decimal('22.00')

    def test_as_dict_keeps_two_decimal_strings(self):
        breakdown = TaxCalculator.compute(Decimal('50'), [percentage('7'), fixed('5')])

        assert breakdown.as_dict() == {
            'after_rounding_tax': '59.00',
            'rounding': '0.50',
            'before_rounding_tax': '58.50',
        }


@pytest.mark.django_db
class TestTaxCalculatorCalculate:
    """Tax id resolution against the tenant's taxes"""

    def test_resolves_tenant_taxes(self, tenant_a, vat_tenant_a, service_fee_tenant_a):
        breakdown = TaxCalculator.calculate(
            tenant_a, Decimal('50.00'), [vat_tenant_a.id, service_fee_tenant_a.id]
        )

        assert breakdown.after_rounding_tax == Decimal('59.00')

    def test_unknown_tax_ids_are_ignored(self, tenant_a, vat_tenant_a):
        breakdown = TaxCalculator.calculate(tenant_a, Decimal('50.00'), [vat_tenant_a.id, 999999])

        assert breakdown.before_rounding_tax == Decimal('53.50')
        assert breakdown.after_rounding_tax == Decimal('54.00')

    def test_other_tenant_taxes_are_ignored(self, tenant_a, tax_tenant_b):
        breakdown = TaxCalculator.calculate(tenant_a, Decimal('50.00'), [tax_tenant_b.id])

        assert breakdown.before_rounding_tax == Decimal('50.00')


def random_tax_cases(seed, count):
    rng = random.Random(seed)
    cases = []
    for _ in range(count):
        total = Decimal(rng.randint(0, 500000)) / 100
        taxes = [percentage(Decimal(rng.randint(0, 2500)) / 100) for _ in range(rng.randint(0, 3))]
        taxes += [fixed(Decimal(rng.randint(0, 2000)) / 100) for _ in range(rng.randint(0, 2))]
        cases.append((total, taxes))
    return cases


class TestTaxCalculatorRoundingProperties:
    """Cash rounding holds for any item total and tax mix"""

    @pytest.mark.parametrize("total,taxes", random_tax_cases(seed=7, count=300))
    def test_rounding_lifts_to_next_whole_unit(self, total, taxes):
        breakdown = TaxCalculator.compute(total, taxes)

        assert breakdown.before_rounding_tax == breakdown.before_rounding_tax.quantize(Decimal('0.01'))
        assert Decimal('0') <= breakdown.rounding < Decimal('1')
        assert breakdown.after_rounding_tax == breakdown.before_rounding_tax + breakdown.rounding
        assert breakdown.after_rounding_tax == breakdown.after_rounding_tax.to_integral_value()
        assert (breakdown.rounding == 0) == (
            breakdown.before_rounding_tax == breakdown.before_rounding_tax.to_integral_value()
        )
