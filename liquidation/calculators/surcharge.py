"""
Multi-Party Surcharge Calculator

Percentage uplift on the combined base fees when counsel represents more
than one party. Two mutually exclusive policies exist and are modelled as
interchangeable strategies:

- banded: 30% for each of the first 9 extra parties, 10% for the rest
- flat: one uniform rate (10% or 30%) for every extra party

Both stop counting at 19 extra parties (20 parties in total).
"""

from decimal import Decimal

from ..errors import ComputationError
from ..models import PartySurcharge


class SurchargePolicy:
    """Base strategy. Subclasses split counted parties between the two rates."""

    name = ""
    MAX_EXTRA_PARTIES = 19
    HIGH_RATE = Decimal("0.30")
    LOW_RATE = Decimal("0.10")

    def counted(self, extra_parties: int) -> int:
        """Clamp the extra party count to the statutory cap."""
        return max(0, min(int(extra_parties), self.MAX_EXTRA_PARTIES))

    def split(self, counted: int) -> tuple[int, int]:
        """Return (parties at HIGH_RATE, parties at LOW_RATE)."""
        raise NotImplementedError

    def calculate(self, extra_parties: int) -> PartySurcharge:
        counted = self.counted(extra_parties)
        high, low = self.split(counted)
        rate = self.HIGH_RATE * high + self.LOW_RATE * low
        return PartySurcharge(
            policy=self.name,
            extra_parties=int(extra_parties),
            counted_parties=counted,
            high_rate_parties=high,
            low_rate_parties=low,
            rate=rate,
        )

    def rate(self, extra_parties: int) -> Decimal:
        return self.calculate(extra_parties).rate

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class BandedSurchargePolicy(SurchargePolicy):
    """Statutory banding: first 9 extras at 30%, the next ones at 10%."""

    name = "banded"
    HIGH_RATE_PARTIES = 9

    def split(self, counted: int) -> tuple[int, int]:
        high = min(counted, self.HIGH_RATE_PARTIES)
        return high, max(0, counted - self.HIGH_RATE_PARTIES)


class FlatSurchargePolicy(SurchargePolicy):
    """Operator-selected uniform rate for every extra party."""

    def __init__(self, name: str, rate: Decimal):
        if rate not in (self.HIGH_RATE, self.LOW_RATE):
            raise ComputationError(f"Flat surcharge rate must be 10% or 30%, got: {rate}")
        self.name = name
        self.uniform_rate = rate

    def split(self, counted: int) -> tuple[int, int]:
        if self.uniform_rate == self.HIGH_RATE:
            return counted, 0
        return 0, counted


SURCHARGE_POLICIES = {
    "banded": BandedSurchargePolicy(),
    "flat_10": FlatSurchargePolicy("flat_10", Decimal("0.10")),
    "flat_30": FlatSurchargePolicy("flat_30", Decimal("0.30")),
}


def get_surcharge_policy(name: str) -> SurchargePolicy:
    """Look up a policy by configuration name."""
    try:
        return SURCHARGE_POLICIES[name]
    except KeyError:
        raise ComputationError(
            f"Unknown surcharge policy: {name!r}. Must be one of {sorted(SURCHARGE_POLICIES)}"
        ) from None


def compute_surcharge_rate(extra_parties: int, policy: SurchargePolicy | str = "banded") -> Decimal:
    """Surcharge as a fraction of the combined base (e.g. 12 extras banded -> 3.0)."""
    if isinstance(policy, str):
        policy = get_surcharge_policy(policy)
    return policy.rate(extra_parties)
