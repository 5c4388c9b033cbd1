"""
Phase Compensation Calculator

Turns a complexity tier and the set of phases performed into the
compensation for one proceeding kind (principal or interim).
"""

from decimal import Decimal

from ..errors import ComputationError
from ..models import CompensationResult
from ..schedule import ComplexityTier, FeeSchedule


class CompensationCalculator:
    """Calculates per-phase fees, the one-third reduction and the 15% reimbursement."""

    REDUCTION_DIVISOR = Decimal("3")
    REIMBURSEMENT_RATE = Decimal("0.15")

    def __init__(self, schedule: FeeSchedule):
        self.schedule = schedule

    def calculate(self, tier: ComplexityTier | None, phases) -> CompensationResult:
        """
        Calculate compensation for the selected phases.

        The order of operations is fixed:
        partial -> reduction (partial / 3) -> reduced (partial - reduction)
        -> reimbursement (reduced x 15%) -> grand total (reduced + reimbursement)
        """
        if tier is not None and not isinstance(tier, ComplexityTier):
            raise ComputationError(f"Unknown complexity tier: {tier!r}")

        amounts = {}
        for phase, selected in phases.flags().items():
            if selected and tier is not None:
                amounts[phase] = self.schedule.amount(tier, phase)
            else:
                amounts[phase] = Decimal("0")

        partial_total = sum(amounts.values(), Decimal("0"))
        reduction = partial_total / self.REDUCTION_DIVISOR
        reduced_total = partial_total - reduction
        reimbursement = reduced_total * self.REIMBURSEMENT_RATE
        grand_total = reduced_total + reimbursement

        return CompensationResult(
            tier=tier,
            amounts=amounts,
            partial_total=partial_total,
            reduction=reduction,
            reduced_total=reduced_total,
            reimbursement=reimbursement,
            grand_total=grand_total,
        )


def compute_compensation(tier: ComplexityTier | None, phases, schedule: FeeSchedule) -> CompensationResult:
    """Functional entry point over CompensationCalculator."""
    return CompensationCalculator(schedule).calculate(tier, phases)
