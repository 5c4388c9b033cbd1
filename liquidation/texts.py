"""
Canned Decree Texts

Legal boilerplate injected into the decree. Content is data: the tables are
read-only mappings so wording can change without touching calculator logic.
"""

import re
from types import MappingProxyType

from .schedule import Phase

# (phase, recognized) -> motivation
PHASE_MOTIVATIONS = MappingProxyType({
    (Phase.STUDY, True): (
        "RITENUTO congruo comminare la fase di studio essendo stata documentata tale attività "
        "necessaria e propedeutica all'espletamento dell'incarico difensivo;"
    ),
    (Phase.STUDY, False): (
        "RITENUTO non congruo comminare la fase di studio non risultando documentata tale attività "
        "necessaria e propedeutica all'espletamento dell'incarico difensivo;"
    ),
    (Phase.INTRODUCTORY, True): (
        "RITENUTO opportuno riconoscere la fase introduttiva risultando che il difensore abbia "
        "avanzato istanze rilevanti ai fini della suddetta fase;"
    ),
    (Phase.INTRODUCTORY, False): (
        "RITENUTO non opportuno riconoscere la fase introduttiva non risultando che il difensore "
        "abbia avanzato istanze rilevanti ai fini della suddetta fase;"
    ),
    (Phase.EVIDENTIARY, True): (
        "RITENUTO congruo liquidare la fase istruttoria dal momento che l'istante ha dimostrato di "
        "aver svolto e partecipato alle attività tipiche della fase istruttoria, quali la "
        "formulazione di richieste di prova in sede di apertura del dibattimento e la conseguente "
        "acquisizione di prove documentali e testimoniali;"
    ),
    (Phase.EVIDENTIARY, False): (
        "RITENUTO non congruo liquidare la fase istruttoria non risultando dimostrato lo "
        "svolgimento o la partecipazione alle attività tipiche della fase istruttoria;"
    ),
    (Phase.DECISIONAL, True): (
        "RITENUTO congruo liquidare la fase decisionale dal momento che risulta provato che il "
        "difensore ha partecipato alla formulazione delle conclusioni e all'esito del giudizio;"
    ),
    (Phase.DECISIONAL, False): (
        "RITENUTO non congruo liquidare la fase decisionale non risultando provato che il "
        "difensore abbia partecipato alla formulazione delle conclusioni e all'esito del giudizio;"
    ),
})

INTERIM_MOTIVATIONS = MappingProxyType({
    "absent": (
        "RITENUTO che non risulta instaurato alcun subprocedimento cautelare e che, pertanto, "
        "nulla è dovuto a tale titolo;"
    ),
    "present": (
        "RITENUTO congruo liquidare il subprocedimento cautelare come segue: {items}; "
        "per un totale di € {total};"
    ),
    "item": "{label} € {amount}",
    "none_selected": "nessuna fase riconosciuta",
})

PARTY_MOTIVATIONS = MappingProxyType({
    "single": (
        "RITENUTO che il difensore ha assistito un solo soggetto e che, pertanto, non compete "
        "l'aumento di cui all'art. 12 D.M. 55/2014;"
    ),
    "uniform": (
        "RITENUTO di applicare, ai sensi dell'art. 12 D.M. 55/2014, l'aumento del {rate}% per "
        "ciascuno dei {count} soggetti assistiti oltre il primo;"
    ),
    "banded": (
        "RITENUTO di applicare, ai sensi dell'art. 12 D.M. 55/2014, l'aumento del {high_rate}% "
        "per ciascuno dei soggetti assistiti oltre il primo fino a un massimo di {high_count} e "
        "del {low_rate}% per ciascuno dei successivi {low_count}, fino al limite di venti "
        "soggetti;"
    ),
})

PARTY_GENERALITY = MappingProxyType({
    "base": "{name} {surname}, nato/a a {birth_place} il {birth_date}, residente in {residence}",
    "domiciled": ", domiciliato/a presso il difensore",
    "additional": "nonché in favore di {parties}",
})


def _shape(template: str) -> re.Pattern:
    """Pattern matching any text produced by filling `template`."""
    parts = re.split(r"\{[a-z_]+\}", template)
    return re.compile(".+?".join(re.escape(part) for part in parts), re.DOTALL)


# Every sentence the generator can emit for the non-phase fields
GENERATED_SHAPES = MappingProxyType({
    "interim": (
        _shape(INTERIM_MOTIVATIONS["absent"]),
        _shape(INTERIM_MOTIVATIONS["present"]),
    ),
    "parties": (
        _shape(PARTY_MOTIVATIONS["single"]),
        _shape(PARTY_MOTIVATIONS["uniform"]),
        _shape(PARTY_MOTIVATIONS["banded"]),
    ),
})


def is_generated(key: str, text: str) -> bool:
    """True when `text` has the shape of a sentence generated for `key`."""
    return any(shape.fullmatch(text) for shape in GENERATED_SHAPES.get(key, ()))
