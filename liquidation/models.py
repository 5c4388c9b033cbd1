"""
Domain Models for the Liquidation Engine

These dataclasses provide type-safe representations of the case record and of
every derived figure. All monetary values use Decimal for precision.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from .schedule import ComplexityTier, Phase
from .texts import PARTY_GENERALITY, PHASE_MOTIVATIONS, is_generated

# =============================================================================
# INPUT MODELS
# =============================================================================


@dataclass(frozen=True)
class PhaseSet:
    """Phases performed in the principal proceeding."""

    study: bool = False
    introductory: bool = False
    evidentiary: bool = False
    decisional: bool = False

    def flags(self) -> dict[Phase, bool]:
        return {
            Phase.STUDY: self.study,
            Phase.INTRODUCTORY: self.introductory,
            Phase.EVIDENTIARY: self.evidentiary,
            Phase.DECISIONAL: self.decisional,
        }

    def any_selected(self) -> bool:
        return any(self.flags().values())

    @classmethod
    def from_dict(cls, data: dict | None) -> "PhaseSet":
        data = data or {}
        return cls(
            study=bool(data.get("study", False)),
            introductory=bool(data.get("introductory", False)),
            evidentiary=bool(data.get("evidentiary", False)),
            decisional=bool(data.get("decisional", False)),
        )

    def to_dict(self) -> dict:
        return {phase.value: selected for phase, selected in self.flags().items()}


@dataclass(frozen=True)
class InterimPhaseSet:
    """Phases performed in the interim sub-proceeding (no evidentiary phase)."""

    study: bool = False
    introductory: bool = False
    decisional: bool = False

    def flags(self) -> dict[Phase, bool]:
        return {
            Phase.STUDY: self.study,
            Phase.INTRODUCTORY: self.introductory,
            Phase.DECISIONAL: self.decisional,
        }

    def any_selected(self) -> bool:
        return any(self.flags().values())

    @classmethod
    def from_dict(cls, data: dict | None) -> "InterimPhaseSet":
        data = data or {}
        return cls(
            study=bool(data.get("study", False)),
            introductory=bool(data.get("introductory", False)),
            decisional=bool(data.get("decisional", False)),
        )

    def to_dict(self) -> dict:
        return {phase.value: selected for phase, selected in self.flags().items()}


@dataclass
class RepresentedParty:
    """A person assisted by the defence counsel."""

    surname: str = ""
    name: str = ""
    birth_place: str = ""
    birth_date: str = ""
    residence: str = ""
    domiciled_with_counsel: bool = False

    @property
    def generality(self) -> str:
        """Full particulars as written in the decree."""
        text = PARTY_GENERALITY["base"].format(
            name=self.name,
            surname=self.surname,
            birth_place=self.birth_place,
            birth_date=self.birth_date,
            residence=self.residence,
        )
        if self.domiciled_with_counsel:
            text += PARTY_GENERALITY["domiciled"]
        return text

    @classmethod
    def from_dict(cls, data: dict | None) -> "RepresentedParty":
        data = data or {}
        return cls(
            surname=data.get("surname") or "",
            name=data.get("name") or "",
            birth_place=data.get("birth_place") or "",
            birth_date=data.get("birth_date") or "",
            residence=data.get("residence") or "",
            domiciled_with_counsel=bool(data.get("domiciled_with_counsel", False)),
        )

    def to_dict(self) -> dict:
        return {
            "surname": self.surname,
            "name": self.name,
            "birth_place": self.birth_place,
            "birth_date": self.birth_date,
            "residence": self.residence,
            "domiciled_with_counsel": self.domiciled_with_counsel,
        }


class MotivationState(str, Enum):
    """Who last wrote a motivation field."""

    AUTO_POSITIVE = "auto_positive"
    AUTO_NEGATIVE = "auto_negative"
    USER_EDITED = "user_edited"


@dataclass(frozen=True)
class MotivationField:
    """Motivation text plus the state that decides whether auto-sync may touch it.

    state=None means the field has never been synced or edited.
    """

    text: str = ""
    state: MotivationState | None = None

    @property
    def is_user_edited(self) -> bool:
        return self.state is MotivationState.USER_EDITED

    @classmethod
    def classify(cls, key: str, text: str) -> "MotivationField":
        """Infer the state of a field that arrived without one.

        Phase fields matching a canned string stay automatic, as do interim
        and party fields shaped like a generated sentence (their figures may
        be stale, so they are regenerated). Any other non-empty text counts
        as a manual edit.
        """
        if not text or not text.strip():
            return cls(text="", state=None)
        try:
            phase = Phase(key)
        except ValueError:
            if is_generated(key, text):
                return cls(text=text, state=None)
            return cls(text=text, state=MotivationState.USER_EDITED)
        if text == PHASE_MOTIVATIONS[(phase, True)]:
            return cls(text=text, state=MotivationState.AUTO_POSITIVE)
        if text == PHASE_MOTIVATIONS[(phase, False)]:
            return cls(text=text, state=MotivationState.AUTO_NEGATIVE)
        return cls(text=text, state=MotivationState.USER_EDITED)

    @classmethod
    def from_value(cls, key: str, value) -> "MotivationField":
        """Accept either a bare string or {"text": ..., "state": ...}."""
        if isinstance(value, dict):
            text = value.get("text", "") or ""
            state = value.get("state")
            if state is None:
                return cls.classify(key, text)
            return cls(text=text, state=MotivationState(state))
        return cls.classify(key, value or "")

    def to_dict(self) -> dict:
        return {"text": self.text, "state": self.state.value if self.state else None}


MOTIVATION_KEYS = (
    Phase.STUDY.value,
    Phase.INTRODUCTORY.value,
    Phase.EVIDENTIARY.value,
    Phase.DECISIONAL.value,
    "interim",
    "parties",
)


@dataclass
class CaseRecord:
    """The full input for one decree: identifiers, parties and fee selections."""

    rg_dib: str = ""
    rgnr: str = ""
    judge: str = ""
    counsel: str = ""
    counsel_bar: str = ""
    application_date: str = ""
    lead_party: RepresentedParty = field(default_factory=RepresentedParty)
    additional_parties: list[RepresentedParty] = field(default_factory=list)
    tier: ComplexityTier | None = None
    phases: PhaseSet = field(default_factory=PhaseSet)
    has_interim: bool = False
    interim_tier: ComplexityTier | None = None
    interim_phases: InterimPhaseSet = field(default_factory=InterimPhaseSet)
    surcharge_policy: str | None = None
    motivations: dict[str, MotivationField] = field(default_factory=dict)

    @property
    def extra_party_count(self) -> int:
        """Represented parties beyond the lead one."""
        return len(self.additional_parties)

    @property
    def party_count(self) -> int:
        return 1 + self.extra_party_count

    def motivation(self, key: str) -> MotivationField | None:
        return self.motivations.get(key)

    @classmethod
    def from_dict(cls, data: dict) -> "CaseRecord":
        motivations = {
            key: MotivationField.from_value(key, value)
            for key, value in (data.get("motivations") or {}).items()
            if key in MOTIVATION_KEYS
        }
        return cls(
            rg_dib=data.get("rg_dib") or "",
            rgnr=data.get("rgnr") or "",
            judge=data.get("judge") or "",
            counsel=data.get("counsel") or "",
            counsel_bar=data.get("counsel_bar") or "",
            application_date=data.get("application_date") or "",
            lead_party=RepresentedParty.from_dict(data.get("lead_party")),
            additional_parties=[
                RepresentedParty.from_dict(p) for p in data.get("additional_parties") or []
            ],
            tier=ComplexityTier.parse(data.get("tier")),
            phases=PhaseSet.from_dict(data.get("phases")),
            has_interim=bool(data.get("has_interim", False)),
            interim_tier=ComplexityTier.parse(data.get("interim_tier")),
            interim_phases=InterimPhaseSet.from_dict(data.get("interim_phases")),
            surcharge_policy=data.get("surcharge_policy") or None,
            motivations=motivations,
        )

    def to_dict(self) -> dict:
        return {
            "rg_dib": self.rg_dib,
            "rgnr": self.rgnr,
            "judge": self.judge,
            "counsel": self.counsel,
            "counsel_bar": self.counsel_bar,
            "application_date": self.application_date,
            "lead_party": self.lead_party.to_dict(),
            "additional_parties": [p.to_dict() for p in self.additional_parties],
            "tier": self.tier.value if self.tier else None,
            "phases": self.phases.to_dict(),
            "has_interim": self.has_interim,
            "interim_tier": self.interim_tier.value if self.interim_tier else None,
            "interim_phases": self.interim_phases.to_dict(),
            "surcharge_policy": self.surcharge_policy,
            "motivations": {key: f.to_dict() for key, f in self.motivations.items()},
        }


# =============================================================================
# OUTPUT / RESULT MODELS
# =============================================================================


@dataclass(frozen=True)
class CompensationResult:
    """Compensation for one proceeding kind.

    reduced_total = partial_total - partial_total / 3
    grand_total = reduced_total + reduced_total * 0.15
    """

    tier: ComplexityTier | None
    amounts: dict = field(default_factory=dict)  # Phase -> counted amount
    partial_total: Decimal = Decimal("0")
    reduction: Decimal = Decimal("0")
    reduced_total: Decimal = Decimal("0")
    reimbursement: Decimal = Decimal("0")
    grand_total: Decimal = Decimal("0")

    def amount(self, phase: Phase) -> Decimal:
        return self.amounts.get(phase, Decimal("0"))


@dataclass(frozen=True)
class PartySurcharge:
    """Multi-party surcharge (art. 12 D.M. 55/2014)."""

    policy: str
    extra_parties: int = 0
    counted_parties: int = 0
    high_rate_parties: int = 0
    low_rate_parties: int = 0
    rate: Decimal = Decimal("0")


@dataclass(frozen=True)
class MonetaryTotals:
    """Final payable amounts, built strictly in order.

    base -> + surcharge -> + welfare contribution (4%) -> + VAT (22%)
    """

    principal: CompensationResult
    interim: CompensationResult | None = None
    base: Decimal = Decimal("0")
    surcharge_rate: Decimal = Decimal("0")
    surcharge_amount: Decimal = Decimal("0")
    final_total: Decimal = Decimal("0")
    welfare_contribution: Decimal = Decimal("0")
    vat_base: Decimal = Decimal("0")
    vat: Decimal = Decimal("0")
    grand_total_with_vat: Decimal = Decimal("0")


@dataclass
class LiquidationContext:
    """
    Holds all intermediate state during liquidation.
    This is the "bag" that flows through the pipeline.
    """

    # Input (immutable during processing)
    case: CaseRecord
    surcharge_policy: str = "banded"

    # Step results (populated as we go)
    principal: CompensationResult | None = None
    interim: CompensationResult | None = None
    surcharge: PartySurcharge | None = None
    totals: MonetaryTotals | None = None
    motivations: dict[str, str] = field(default_factory=dict)

    # Final outputs
    placeholders: dict[str, str] = field(default_factory=dict)


@dataclass
class LiquidationResult:
    """Final output of a liquidation run."""

    case_summary: dict
    calculations: dict
    motivations: dict
    document_fields: dict
    case: dict = field(default_factory=dict)


@dataclass
class DecreeDocument:
    """A rendered decree ready to be returned to the caller."""

    content: bytes
    media_type: str
    filename: str
