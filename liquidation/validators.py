"""
Input Validation for the Liquidation Engine

Validates the case record before any calculation runs.
Raises ValueError (or ComputationError) with clear messages for any
constraint violation.
"""

from .calculators.surcharge import SURCHARGE_POLICIES
from .errors import ComputationError
from .models import CaseRecord
from .schedule import ComplexityTier


class InputValidator:
    """Validates a case record according to business rules."""

    def validate(self, case: CaseRecord) -> None:
        """
        Run all validations. Raises ValueError if any check fails.
        """
        self._validate_principal(case)
        self._validate_interim(case)
        self._validate_surcharge_policy(case)

    def _validate_principal(self, case: CaseRecord) -> None:
        if case.tier is not None and not isinstance(case.tier, ComplexityTier):
            raise ComputationError(f"Unknown complexity tier: {case.tier!r}")
        if case.phases.any_selected() and case.tier is None:
            raise ValueError("tier is required when principal phases are selected")

    def _validate_interim(self, case: CaseRecord) -> None:
        if case.interim_tier is not None and not isinstance(case.interim_tier, ComplexityTier):
            raise ComputationError(f"Unknown complexity tier: {case.interim_tier!r}")
        # Interim selections are ignored unless the sub-proceeding is activated
        if case.has_interim and case.interim_phases.any_selected() and case.interim_tier is None:
            raise ValueError("interim_tier is required when interim phases are selected")

    def _validate_surcharge_policy(self, case: CaseRecord) -> None:
        if case.surcharge_policy is not None and case.surcharge_policy not in SURCHARGE_POLICIES:
            raise ComputationError(
                f"Invalid surcharge_policy: {case.surcharge_policy}. "
                f"Must be one of {sorted(SURCHARGE_POLICIES)}"
            )
