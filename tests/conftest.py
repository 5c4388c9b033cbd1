"""Shared fixtures for the liquidation engine tests."""

import io
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
TEXT_TEMPLATE = PROJECT_ROOT / "templates" / "decreto_liquidazione.txt"

CONTENT_TYPES = (
    b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    b'<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types"/>'
)
STYLES = b'<?xml version="1.0" encoding="UTF-8"?><w:styles><w:style w:styleId="Titolo"/></w:styles>'


def build_docx(body: str, include_document: bool = True) -> bytes:
    """Build a minimal .docx package whose document part contains `body`."""
    document = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<w:document><w:body><w:p><w:r><w:t xml:space="preserve">'
        f"{body}"
        "</w:t></w:r></w:p></w:body></w:document>"
    )
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as package:
        package.writestr("[Content_Types].xml", CONTENT_TYPES)
        if include_document:
            package.writestr("word/document.xml", document)
        package.writestr("word/styles.xml", STYLES)
    return buffer.getvalue()


@pytest.fixture
def docx_skeleton():
    return build_docx


@pytest.fixture
def sample_case():
    """A single-party case: simple tier, study and decisional phases recognised."""
    return {
        "rg_dib": "1234/2024",
        "rgnr": "5678/2023",
        "judge": "Dott. Simone Falerno",
        "counsel": "Mario Bianchi",
        "counsel_bar": "Brindisi",
        "application_date": "12/03/2025",
        "lead_party": {
            "surname": "Rossi",
            "name": "Giuseppe",
            "birth_place": "Brindisi",
            "birth_date": "01/01/1980",
            "residence": "Brindisi, via Appia 1",
            "domiciled_with_counsel": True,
        },
        "additional_parties": [],
        "tier": "simple",
        "phases": {"study": True, "introductory": False, "evidentiary": False, "decisional": True},
        "has_interim": False,
    }


def make_parties(count: int) -> list[dict]:
    return [
        {
            "surname": f"Coimputato{i}",
            "name": "Luca",
            "birth_place": "Lecce",
            "birth_date": "02/02/1990",
            "residence": "Lecce",
        }
        for i in range(1, count + 1)
    ]
