"""
Unit Tests for the Aggregate Totals Calculator

Tests verify the strict ordering of surcharge, welfare contribution and VAT.
"""

from decimal import Decimal

import pytest

from liquidation.calculators import TotalsCalculator, compute_totals
from liquidation.models import CompensationResult
from liquidation.schedule import ComplexityTier


def compensation(grand_total: str) -> CompensationResult:
    return CompensationResult(tier=ComplexityTier.SIMPLE, grand_total=Decimal(grand_total))


class TestTotalsCalculator:
    """Test the final payable amounts."""

    @pytest.fixture
    def calculator(self):
        return TotalsCalculator()

    def test_rates(self, calculator):
        assert calculator.WELFARE_RATE == Decimal("0.04")
        assert calculator.VAT_RATE == Decimal("0.22")

    def test_full_cascade(self, calculator):
        """
        base 1000 + 500 = 1500
        surcharge 30% = 450 -> 1950
        contribution 4% = 78 -> 2028
        VAT 22% = 446.16 -> 2474.16
        """
        totals = calculator.calculate(compensation("1000"), compensation("500"), Decimal("0.30"))

        assert totals.base == Decimal("1500")
        assert totals.surcharge_amount == Decimal("450")
        assert totals.final_total == Decimal("1950")
        assert totals.welfare_contribution == Decimal("78")
        assert totals.vat_base == Decimal("2028")
        assert totals.vat == Decimal("446.16")
        assert totals.grand_total_with_vat == Decimal("2474.16")

    def test_without_interim(self, calculator):
        totals = calculator.calculate(compensation("1000"), None, Decimal("0"))
        assert totals.base == Decimal("1000")
        assert totals.interim is None

    def test_zero_extra_parties_leaves_base_unchanged(self, calculator):
        totals = calculator.calculate(compensation("725.27"), None, Decimal("0"))
        assert totals.surcharge_amount == 0
        assert totals.final_total == totals.base

    def test_vat_is_charged_on_contribution_too(self, calculator):
        """VAT applies to fees + contribution, not to fees alone."""
        totals = calculator.calculate(compensation("1000"), None, Decimal("0"))
        assert totals.vat == Decimal("1040") * Decimal("0.22")
        assert totals.vat != totals.final_total * Decimal("0.22")

    @pytest.mark.parametrize("rate", ["0", "0.30", "1.2", "3.0", "3.70"])
    def test_each_step_is_non_decreasing(self, calculator, rate):
        totals = calculator.calculate(compensation("725.2666"), compensation("507.53"), Decimal(rate))
        assert totals.base <= totals.final_total <= totals.vat_base <= totals.grand_total_with_vat

    def test_functional_entry_point(self):
        totals = compute_totals(compensation("100"), None, Decimal("0.30"))
        assert totals.final_total == Decimal("130")
