"""
Unit Tests for the Multi-Party Surcharge Calculator

Tests cover both policies, the 20-party cap and policy lookup.
"""

from decimal import Decimal

import pytest

from liquidation.calculators import (
    BandedSurchargePolicy,
    FlatSurchargePolicy,
    compute_surcharge_rate,
    get_surcharge_policy,
)
from liquidation.errors import ComputationError


class TestBandedPolicy:
    """Test the statutory 30%/10% banding."""

    @pytest.fixture
    def policy(self):
        return BandedSurchargePolicy()

    def test_no_extra_parties(self, policy):
        assert policy.rate(0) == 0

    def test_one_extra_party(self, policy):
        assert policy.rate(1) == Decimal("0.30")

    def test_nine_extra_parties_all_high_rate(self, policy):
        assert policy.rate(9) == 9 * Decimal("0.30")

    def test_tenth_extra_party_uses_low_rate(self, policy):
        assert policy.rate(10) == 9 * Decimal("0.30") + 1 * Decimal("0.10")

    def test_twelve_extra_parties(self, policy):
        """9 x 30% + 3 x 10% = 300%"""
        assert policy.rate(12) == Decimal("3.0")

    def test_cap_at_nineteen(self, policy):
        """9 x 30% + 10 x 10% = 370%"""
        assert policy.rate(19) == Decimal("3.70")

    @pytest.mark.parametrize("extra", [19, 20, 25, 100])
    def test_cap_idempotence(self, policy, extra):
        assert policy.rate(extra) == policy.rate(19)

    def test_negative_count_clamped_to_zero(self, policy):
        assert policy.rate(-3) == 0

    def test_banding_is_monotonic(self, policy):
        rates = [policy.rate(n) for n in range(0, 25)]
        assert rates == sorted(rates)

    def test_breakdown(self, policy):
        surcharge = policy.calculate(25)
        assert surcharge.policy == "banded"
        assert surcharge.extra_parties == 25
        assert surcharge.counted_parties == 19
        assert surcharge.high_rate_parties == 9
        assert surcharge.low_rate_parties == 10


class TestFlatPolicy:
    """Test the operator-selected uniform rate."""

    def test_flat_ten_percent(self):
        policy = get_surcharge_policy("flat_10")
        assert policy.rate(12) == Decimal("1.20")

    def test_flat_thirty_percent(self):
        policy = get_surcharge_policy("flat_30")
        assert policy.rate(12) == Decimal("3.60")

    def test_flat_policy_is_capped(self):
        policy = get_surcharge_policy("flat_30")
        assert policy.rate(30) == 19 * Decimal("0.30")

    def test_flat_policy_has_no_banding(self):
        surcharge = get_surcharge_policy("flat_10").calculate(12)
        assert surcharge.high_rate_parties == 0
        assert surcharge.low_rate_parties == 12

    def test_only_statutory_rates_allowed(self):
        with pytest.raises(ComputationError):
            FlatSurchargePolicy("flat_20", Decimal("0.20"))


class TestPolicyLookup:
    """Test selection of policies by configuration name."""

    def test_functional_entry_point(self):
        assert compute_surcharge_rate(0) == 0
        assert compute_surcharge_rate(12) == Decimal("3.0")
        assert compute_surcharge_rate(12, "flat_10") == Decimal("1.2")

    def test_accepts_policy_object(self):
        assert compute_surcharge_rate(2, BandedSurchargePolicy()) == Decimal("0.60")

    def test_unknown_policy(self):
        with pytest.raises(ComputationError, match="Unknown surcharge policy"):
            get_surcharge_policy("generous")
