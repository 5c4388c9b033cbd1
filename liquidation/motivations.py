"""
Motivation Text Generator

Chooses the legal justification for each part of the liquidation from the
canned tables in texts.py, and keeps motivation fields in sync with the
phase toggles until the user edits them.
"""

from .calculators.surcharge import SurchargePolicy
from .formatting import format_amount, format_percentage
from .models import CaseRecord, CompensationResult, MotivationField, MotivationState
from .schedule import PRINCIPAL_PHASES, Phase
from .texts import INTERIM_MOTIVATIONS, PARTY_MOTIVATIONS, PHASE_MOTIVATIONS


def motivation_for(phase: Phase, recognized: bool) -> str:
    """Canned motivation for a principal phase."""
    return PHASE_MOTIVATIONS[(Phase(phase), bool(recognized))]


def motivation_for_interim(present: bool, interim: CompensationResult | None, interim_phases) -> str:
    """Motivation for the interim sub-proceeding, listing each recognised phase."""
    if not present or interim is None:
        return INTERIM_MOTIVATIONS["absent"]

    items = [
        INTERIM_MOTIVATIONS["item"].format(label=phase.label, amount=format_amount(interim.amount(phase)))
        for phase, selected in interim_phases.flags().items()
        if selected
    ]
    return INTERIM_MOTIVATIONS["present"].format(
        items="; ".join(items) if items else INTERIM_MOTIVATIONS["none_selected"],
        total=format_amount(interim.grand_total),
    )


def motivation_for_parties(extra_parties: int, policy: SurchargePolicy) -> str:
    """Motivation for the multi-party surcharge under the active policy."""
    surcharge = policy.calculate(extra_parties)
    if surcharge.counted_parties == 0:
        return PARTY_MOTIVATIONS["single"]

    if surcharge.high_rate_parties and surcharge.low_rate_parties:
        return PARTY_MOTIVATIONS["banded"].format(
            high_rate=format_percentage(policy.HIGH_RATE),
            high_count=surcharge.high_rate_parties,
            low_rate=format_percentage(policy.LOW_RATE),
            low_count=surcharge.low_rate_parties,
        )

    rate = policy.HIGH_RATE if surcharge.high_rate_parties else policy.LOW_RATE
    return PARTY_MOTIVATIONS["uniform"].format(
        rate=format_percentage(rate),
        count=surcharge.counted_parties,
    )


# =============================================================================
# AUTO-UNTIL-TOUCHED SYNC
# =============================================================================


def sync_motivation(current: MotivationField | None, phase: Phase, recognized: bool) -> MotivationField:
    """
    Follow a phase toggle.

    Replaces the text with the matching canned string unless the user has
    edited the field; user-edited fields are returned unchanged.
    """
    if current is not None and current.is_user_edited:
        return current
    state = MotivationState.AUTO_POSITIVE if recognized else MotivationState.AUTO_NEGATIVE
    return MotivationField(text=motivation_for(phase, recognized), state=state)


def edit_motivation(current: MotivationField | None, text: str) -> MotivationField:
    """
    Record a manual edit. Clearing the text hands the field back to auto-sync.

    Resubmitting the current text unchanged is not an edit and keeps the
    field's state.
    """
    if not text or not text.strip():
        return MotivationField(text="", state=None)
    if current is not None and text == current.text:
        return current
    return MotivationField(text=text, state=MotivationState.USER_EDITED)


class MotivationGenerator:
    """Resolves every motivation of a decree for one case."""

    def resolve(
        self,
        case: CaseRecord,
        interim: CompensationResult | None,
        policy: SurchargePolicy,
    ) -> dict[str, str]:
        """Return motivation text keyed by phase value, 'interim' and 'parties'."""
        resolved = {}
        flags = case.phases.flags()
        for phase in PRINCIPAL_PHASES:
            field = sync_motivation(case.motivation(phase.value), phase, flags[phase])
            resolved[phase.value] = field.text

        resolved["interim"] = self._override(case, "interim") or motivation_for_interim(
            case.has_interim, interim, case.interim_phases
        )
        resolved["parties"] = self._override(case, "parties") or motivation_for_parties(
            case.extra_party_count, policy
        )
        return resolved

    def _override(self, case: CaseRecord, key: str) -> str | None:
        field = case.motivation(key)
        if field is not None and field.is_user_edited:
            return field.text
        return None
