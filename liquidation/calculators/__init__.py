"""
Calculators Package

Provides all calculation components for a fee liquidation.
"""

from .compensation import CompensationCalculator, compute_compensation
from .surcharge import (
    SURCHARGE_POLICIES,
    BandedSurchargePolicy,
    FlatSurchargePolicy,
    SurchargePolicy,
    compute_surcharge_rate,
    get_surcharge_policy,
)
from .totals import TotalsCalculator, compute_totals

__all__ = [
    "CompensationCalculator",
    "SurchargePolicy",
    "BandedSurchargePolicy",
    "FlatSurchargePolicy",
    "SURCHARGE_POLICIES",
    "TotalsCalculator",
    "compute_compensation",
    "compute_surcharge_rate",
    "compute_totals",
    "get_surcharge_policy",
]
