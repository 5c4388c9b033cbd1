"""
Output Builder

Constructs the JSON result of a liquidation from the processing context.
"""

from decimal import Decimal

from .formatting import format_amount
from .models import CompensationResult, LiquidationContext, LiquidationResult


def to_money(value: Decimal) -> float:
    """Convert Decimal to float with 2 decimal places."""
    return round(float(value), 2)


def _fmt(value: Decimal) -> str:
    """Format an amount as it will appear in the decree."""
    return f"€ {format_amount(value)}"


class OutputBuilder:
    """Builds the final liquidation result."""

    def build(self, ctx: LiquidationContext) -> LiquidationResult:
        """Construct the complete result from the processing context."""
        return LiquidationResult(
            case_summary=self._build_case_summary(ctx),
            calculations=self._build_calculations(ctx),
            motivations=dict(ctx.motivations),
            document_fields=dict(ctx.placeholders),
            case=ctx.case.to_dict(),
        )

    def _build_case_summary(self, ctx: LiquidationContext) -> dict:
        case = ctx.case
        return {
            "rg_dib": case.rg_dib,
            "rgnr": case.rgnr,
            "judge": case.judge,
            "counsel": case.counsel,
            "lead_party": case.lead_party.generality,
            "party_count": case.party_count,
            "tier": case.tier.value if case.tier else None,
            "has_interim": case.has_interim,
            "interim_tier": case.interim_tier.value if case.interim_tier and ctx.interim else None,
            "surcharge_policy": ctx.surcharge_policy,
        }

    def _build_calculations(self, ctx: LiquidationContext) -> dict:
        """Build calculations section with value and dynamic description for each field."""
        totals = ctx.totals
        surcharge = ctx.surcharge
        base = to_money(totals.base)
        rate_pct = float(totals.surcharge_rate * 100)

        calculations = {
            "principal": self._build_compensation(ctx.principal, "principal proceeding"),
            "interim": (
                self._build_compensation(ctx.interim, "interim sub-proceeding")
                if ctx.interim else None
            ),
            "base": {
                "value": base,
                "description": (
                    f"principal ({_fmt(ctx.principal.grand_total)}) + interim "
                    f"({_fmt(ctx.interim.grand_total)}) = {_fmt(totals.base)}"
                    if ctx.interim else
                    f"principal proceeding only = {_fmt(totals.base)}"
                )
            },
            "surcharge_rate": {
                "value": float(totals.surcharge_rate),
                "description": (
                    f"{surcharge.counted_parties} extra parties under {surcharge.policy} policy: "
                    f"{surcharge.high_rate_parties} × 30% + {surcharge.low_rate_parties} × 10% = {rate_pct:.0f}%"
                    if surcharge.counted_parties else
                    "Single represented party, no surcharge"
                )
            },
            "surcharge_amount": {
                "value": to_money(totals.surcharge_amount),
                "description": f"{rate_pct:.0f}% × {_fmt(totals.base)} = {_fmt(totals.surcharge_amount)}"
            },
            "final_total": {
                "value": to_money(totals.final_total),
                "description": f"base ({_fmt(totals.base)}) + surcharge ({_fmt(totals.surcharge_amount)}) = {_fmt(totals.final_total)}"
            },
            "welfare_contribution": {
                "value": to_money(totals.welfare_contribution),
                "description": f"4% × {_fmt(totals.final_total)} = {_fmt(totals.welfare_contribution)}"
            },
            "vat_base": {
                "value": to_money(totals.vat_base),
                "description": f"fees ({_fmt(totals.final_total)}) + contribution ({_fmt(totals.welfare_contribution)}) = {_fmt(totals.vat_base)}"
            },
            "vat": {
                "value": to_money(totals.vat),
                "description": f"22% × {_fmt(totals.vat_base)} = {_fmt(totals.vat)}"
            },
            "grand_total_with_vat": {
                "value": to_money(totals.grand_total_with_vat),
                "description": f"Total payable including contribution and VAT: {_fmt(totals.grand_total_with_vat)}"
            },
        }
        if surcharge.extra_parties > surcharge.counted_parties:
            calculations["surcharge_rate"]["description"] += (
                f" ({surcharge.extra_parties} declared, capped at {surcharge.counted_parties})"
            )
        return calculations

    def _build_compensation(self, result: CompensationResult, label: str) -> dict:
        partial = to_money(result.partial_total)
        reduced = to_money(result.reduced_total)
        return {
            "tier": result.tier.value if result.tier else None,
            "phases": {
                phase.value: to_money(amount)
                for phase, amount in result.amounts.items()
            },
            "partial_total": {
                "value": partial,
                "description": f"Sum of recognised phases for the {label} = {_fmt(result.partial_total)}"
            },
            "reduction": {
                "value": to_money(result.reduction),
                "description": f"One-third reduction: {_fmt(result.partial_total)} / 3 = {_fmt(result.reduction)}"
            },
            "reduced_total": {
                "value": reduced,
                "description": f"{_fmt(result.partial_total)} - {_fmt(result.reduction)} = {_fmt(result.reduced_total)}"
            },
            "reimbursement": {
                "value": to_money(result.reimbursement),
                "description": f"15% flat reimbursement × {_fmt(result.reduced_total)} = {_fmt(result.reimbursement)}"
            },
            "grand_total": {
                "value": to_money(result.grand_total),
                "description": f"{_fmt(result.reduced_total)} + {_fmt(result.reimbursement)} = {_fmt(result.grand_total)}"
            },
        }
