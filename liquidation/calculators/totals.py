"""
Aggregate Totals Calculator

Combines the principal and interim compensation with the multi-party
surcharge and the fixed statutory add-ons.
"""

from decimal import Decimal

from ..models import CompensationResult, MonetaryTotals


class TotalsCalculator:
    """Calculates the final payable amounts."""

    WELFARE_RATE = Decimal("0.04")  # Cassa forense
    VAT_RATE = Decimal("0.22")

    def calculate(
        self,
        principal: CompensationResult,
        interim: CompensationResult | None,
        surcharge_rate: Decimal,
    ) -> MonetaryTotals:
        """
        Apply each add-on to the total produced by the previous step.

        The steps are not commutative and must stay in this order.
        """
        base = principal.grand_total + (interim.grand_total if interim else Decimal("0"))
        surcharge_amount = base * surcharge_rate
        final_total = base + surcharge_amount
        welfare_contribution = final_total * self.WELFARE_RATE
        vat_base = final_total + welfare_contribution
        vat = vat_base * self.VAT_RATE
        grand_total_with_vat = vat_base + vat

        return MonetaryTotals(
            principal=principal,
            interim=interim,
            base=base,
            surcharge_rate=surcharge_rate,
            surcharge_amount=surcharge_amount,
            final_total=final_total,
            welfare_contribution=welfare_contribution,
            vat_base=vat_base,
            vat=vat,
            grand_total_with_vat=grand_total_with_vat,
        )


def compute_totals(
    principal: CompensationResult,
    interim: CompensationResult | None,
    surcharge_rate: Decimal,
) -> MonetaryTotals:
    return TotalsCalculator().calculate(principal, interim, surcharge_rate)
