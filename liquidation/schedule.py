"""
Fee Schedule for Legal-Aid Defence Liquidation

Base fees per procedural phase, one table for the principal proceeding and
one for the interim (precautionary) sub-proceeding. Amounts are integer-valued
constants in euro, selected by the complexity tier of the proceeding.
"""

from decimal import Decimal
from enum import Enum
from types import MappingProxyType

from .errors import ComputationError


class ComplexityTier(str, Enum):
    """Complexity classification selecting a fee table row."""

    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"

    @property
    def label(self) -> str:
        """Italian label used in the decree text."""
        return TIER_LABELS[self]

    @classmethod
    def parse(cls, value) -> "ComplexityTier | None":
        """Parse a tier from input data. Empty values mean 'not set'."""
        if value is None or value == "":
            return None
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in TIER_ALIASES:
            return TIER_ALIASES[key]
        raise ComputationError(f"Unknown complexity tier: {value!r}")


class Phase(str, Enum):
    """A discrete, independently billable stage of defence work."""

    STUDY = "study"
    INTRODUCTORY = "introductory"
    EVIDENTIARY = "evidentiary"
    DECISIONAL = "decisional"

    @property
    def label(self) -> str:
        return PHASE_LABELS[self]


TIER_LABELS = MappingProxyType({
    ComplexityTier.SIMPLE: "semplice",
    ComplexityTier.MEDIUM: "media",
    ComplexityTier.COMPLEX: "complessa",
})

TIER_ALIASES = MappingProxyType({
    **{tier.value: tier for tier in ComplexityTier},
    **{label: tier for tier, label in TIER_LABELS.items()},
})

PHASE_LABELS = MappingProxyType({
    Phase.STUDY: "fase di studio",
    Phase.INTRODUCTORY: "fase introduttiva",
    Phase.EVIDENTIARY: "fase istruttoria",
    Phase.DECISIONAL: "fase decisionale",
})

PRINCIPAL_PHASES = (Phase.STUDY, Phase.INTRODUCTORY, Phase.EVIDENTIARY, Phase.DECISIONAL)
INTERIM_PHASES = (Phase.STUDY, Phase.INTRODUCTORY, Phase.DECISIONAL)


class FeeSchedule:
    """An immutable tier -> phase -> base fee table."""

    def __init__(self, name: str, table: dict):
        self.name = name
        self._table = MappingProxyType({
            tier: MappingProxyType(dict(row)) for tier, row in table.items()
        })

    @property
    def phases(self) -> tuple:
        """Phases billable under this schedule, in decree order."""
        first_row = next(iter(self._table.values()))
        return tuple(phase for phase in PRINCIPAL_PHASES if phase in first_row)

    def amount(self, tier: ComplexityTier, phase: Phase) -> Decimal:
        """Look up the base fee. Unknown tiers or phases are programmer errors."""
        if not isinstance(tier, ComplexityTier) or tier not in self._table:
            raise ComputationError(f"Unknown complexity tier for {self.name} schedule: {tier!r}")
        row = self._table[tier]
        if phase not in row:
            raise ComputationError(f"Phase {phase!r} is not billable in the {self.name} schedule")
        return row[phase]

    def row(self, tier: ComplexityTier):
        return self._table[tier]

    def __repr__(self) -> str:
        return f"FeeSchedule({self.name!r})"


# Principal proceeding (tribunale monocratico)
PRINCIPAL_SCHEDULE = FeeSchedule("principal", {
    ComplexityTier.SIMPLE: {
        Phase.STUDY: Decimal("237"),
        Phase.INTRODUCTORY: Decimal("284"),
        Phase.EVIDENTIARY: Decimal("473"),
        Phase.DECISIONAL: Decimal("709"),
    },
    ComplexityTier.MEDIUM: {
        Phase.STUDY: Decimal("473"),
        Phase.INTRODUCTORY: Decimal("567"),
        Phase.EVIDENTIARY: Decimal("945"),
        Phase.DECISIONAL: Decimal("1418"),
    },
    ComplexityTier.COMPLEX: {
        Phase.STUDY: Decimal("710"),
        Phase.INTRODUCTORY: Decimal("851"),
        Phase.EVIDENTIARY: Decimal("1418"),
        Phase.DECISIONAL: Decimal("2127"),
    },
})

# Interim sub-proceeding: no evidentiary phase
INTERIM_SCHEDULE = FeeSchedule("interim", {
    ComplexityTier.SIMPLE: {
        Phase.STUDY: Decimal("189"),
        Phase.INTRODUCTORY: Decimal("236"),
        Phase.DECISIONAL: Decimal("473"),
    },
    ComplexityTier.MEDIUM: {
        Phase.STUDY: Decimal("378"),
        Phase.INTRODUCTORY: Decimal("473"),
        Phase.DECISIONAL: Decimal("945"),
    },
    ComplexityTier.COMPLEX: {
        Phase.STUDY: Decimal("567"),
        Phase.INTRODUCTORY: Decimal("709"),
        Phase.DECISIONAL: Decimal("1418"),
    },
})
