"""
Placeholder Map Builder

Maps every literal token of the decree skeleton to its rendered value.
Amounts are rounded and formatted here, at the rendering boundary.
"""

from .formatting import format_amount, format_percentage
from .models import LiquidationContext
from .schedule import INTERIM_PHASES, PRINCIPAL_PHASES, Phase
from .texts import PARTY_GENERALITY

PHASE_TOKENS = {
    Phase.STUDY: "STUDIO",
    Phase.INTRODUCTORY: "INTRODUTTIVA",
    Phase.EVIDENTIARY: "ISTRUTTORIA",
    Phase.DECISIONAL: "DECISIONALE",
}


def token(name: str) -> str:
    return f"[{name}]"


# Every token a decree skeleton may contain
TOKENS = tuple(
    token(name)
    for name in (
        "GIUDICE", "RG_DIB", "RGNR", "AVVOCATO", "FORO", "DATA_ISTANZA",
        "ASSISTITO", "ALTRI_ASSISTITI", "NUMERO_ASSISTITI",
        "COMPLESSITA",
        *(f"FASE_{PHASE_TOKENS[p]}" for p in PRINCIPAL_PHASES),
        "TOTALE_PARZIALE", "RIDUZIONE", "TOTALE_RIDOTTO", "RIMBORSO_FORFETTARIO", "TOTALE_PRINCIPALE",
        "COMPLESSITA_CAUTELARE",
        *(f"CAUTELARE_{PHASE_TOKENS[p]}" for p in INTERIM_PHASES),
        "CAUTELARE_TOTALE",
        "COMPENSO_BASE", "PERCENTUALE_AUMENTO", "AUMENTO", "TOTALE_COMPENSO",
        "CPA", "IMPONIBILE_IVA", "IVA", "TOTALE_GENERALE",
        *(f"MOTIVAZIONE_{PHASE_TOKENS[p]}" for p in PRINCIPAL_PHASES),
        "MOTIVAZIONE_CAUTELARE", "MOTIVAZIONE_ASSISTITI",
    )
)


class PlaceholderBuilder:
    """Builds the token -> value map from a fully processed context."""

    def build(self, ctx: LiquidationContext) -> dict[str, str]:
        case = ctx.case
        totals = ctx.totals
        principal = ctx.principal
        interim = ctx.interim

        values = {
            "GIUDICE": case.judge,
            "RG_DIB": case.rg_dib,
            "RGNR": case.rgnr,
            "AVVOCATO": case.counsel,
            "FORO": case.counsel_bar,
            "DATA_ISTANZA": case.application_date,
            "ASSISTITO": case.lead_party.generality,
            "ALTRI_ASSISTITI": self._additional_parties(ctx),
            "NUMERO_ASSISTITI": str(case.party_count),
            "COMPLESSITA": case.tier.label if case.tier else "",
            "TOTALE_PARZIALE": format_amount(principal.partial_total),
            "RIDUZIONE": format_amount(principal.reduction),
            "TOTALE_RIDOTTO": format_amount(principal.reduced_total),
            "RIMBORSO_FORFETTARIO": format_amount(principal.reimbursement),
            "TOTALE_PRINCIPALE": format_amount(principal.grand_total),
            "COMPLESSITA_CAUTELARE": case.interim_tier.label if interim and case.interim_tier else "",
            "CAUTELARE_TOTALE": format_amount(interim.grand_total) if interim else "0",
            "COMPENSO_BASE": format_amount(totals.base),
            "PERCENTUALE_AUMENTO": format_percentage(totals.surcharge_rate),
            "AUMENTO": format_amount(totals.surcharge_amount),
            "TOTALE_COMPENSO": format_amount(totals.final_total),
            "CPA": format_amount(totals.welfare_contribution),
            "IMPONIBILE_IVA": format_amount(totals.vat_base),
            "IVA": format_amount(totals.vat),
            "TOTALE_GENERALE": format_amount(totals.grand_total_with_vat),
            "MOTIVAZIONE_CAUTELARE": ctx.motivations["interim"],
            "MOTIVAZIONE_ASSISTITI": ctx.motivations["parties"],
        }
        for phase in PRINCIPAL_PHASES:
            name = PHASE_TOKENS[phase]
            values[f"FASE_{name}"] = format_amount(principal.amount(phase))
            values[f"MOTIVAZIONE_{name}"] = ctx.motivations[phase.value]
        for phase in INTERIM_PHASES:
            values[f"CAUTELARE_{PHASE_TOKENS[phase]}"] = format_amount(interim.amount(phase)) if interim else "0"

        return {token(name): value for name, value in values.items()}

    def _additional_parties(self, ctx: LiquidationContext) -> str:
        parties = ctx.case.additional_parties
        if not parties:
            return ""
        return PARTY_GENERALITY["additional"].format(
            parties="; ".join(p.generality for p in parties)
        )
