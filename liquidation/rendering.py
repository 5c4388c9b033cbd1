"""
Document Renderer

Literal placeholder substitution into a decree skeleton. Structured
skeletons (.docx) are treated as opaque archives: only the raw XML of the
main document part is rewritten, every other member is copied unchanged.
"""

import html
import io
import logging
import re
import zipfile
import zlib

from .errors import TemplateMalformed

logger = logging.getLogger(__name__)

DOCUMENT_PART = "word/document.xml"
TOKEN_PATTERN = re.compile(r"\[[A-Z][A-Z0-9_]*\]")


def escape_markup(value: str) -> str:
    """Neutralise & < > " ' for insertion into XML text."""
    return html.escape(value, quote=True)


def substitute(text: str, placeholders: dict[str, str], escape: bool = False) -> str:
    """
    Replace every occurrence of every token in a single pass.

    Replacement values are never rescanned, so a value that happens to
    contain a token cannot trigger a second substitution and the order of
    keys has no effect on the output.
    """
    if not placeholders:
        return text

    values = {
        token: escape_markup(str(value)) if escape else str(value)
        for token, value in placeholders.items()
    }
    missing = [token for token in values if token not in text]
    if missing:
        logger.debug(f"Tokens not present in skeleton: {', '.join(sorted(missing))}")

    # Longest first so overlapping tokens resolve deterministically
    pattern = re.compile("|".join(re.escape(token) for token in sorted(values, key=len, reverse=True)))
    return pattern.sub(lambda match: values[match.group(0)], text)


def remaining_tokens(text: str) -> list[str]:
    """Bracketed tokens still present after substitution."""
    return sorted(set(TOKEN_PATTERN.findall(text)))


class TextRenderer:
    """Renders plain-text skeletons."""

    media_type = "text/plain; charset=utf-8"
    extension = "txt"

    def render(self, skeleton: bytes, placeholders: dict[str, str]) -> bytes:
        try:
            text = skeleton.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TemplateMalformed(f"Text template is not valid UTF-8: {e}") from e

        rendered = substitute(text, placeholders)
        self._warn_leftovers(rendered, placeholders)
        return rendered.encode("utf-8")

    def _warn_leftovers(self, rendered: str, placeholders: dict[str, str]) -> None:
        leftovers = [token for token in remaining_tokens(rendered) if token not in placeholders]
        if leftovers:
            logger.warning(f"Unresolved tokens in decree: {', '.join(leftovers)}")


class DocxRenderer(TextRenderer):
    """Renders Word (.docx) skeletons by rewriting word/document.xml in place."""

    media_type = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    extension = "docx"

    def render(self, skeleton: bytes, placeholders: dict[str, str]) -> bytes:
        try:
            source = zipfile.ZipFile(io.BytesIO(skeleton))
        except zipfile.BadZipFile as e:
            raise TemplateMalformed(f"Decree template is not a valid .docx package: {e}") from e

        with source:
            if DOCUMENT_PART not in source.namelist():
                raise TemplateMalformed(f"Decree template has no {DOCUMENT_PART} part")

            try:
                document = source.read(DOCUMENT_PART).decode("utf-8")
            except (zipfile.BadZipFile, UnicodeDecodeError) as e:
                raise TemplateMalformed(f"Cannot read {DOCUMENT_PART}: {e}") from e

            rendered = substitute(document, placeholders, escape=True)
            self._warn_leftovers(rendered, placeholders)

            # Build the whole package in memory; nothing is emitted on failure
            output = io.BytesIO()
            try:
                with zipfile.ZipFile(output, "w") as target:
                    for info in source.infolist():
                        if info.filename == DOCUMENT_PART:
                            target.writestr(info, rendered.encode("utf-8"))
                        else:
                            target.writestr(info, source.read(info.filename))
            except (zipfile.BadZipFile, zlib.error) as e:
                raise TemplateMalformed(f"Corrupt member in decree template: {e}") from e

        return output.getvalue()


RENDERERS = {
    "docx": DocxRenderer(),
    "text": TextRenderer(),
}


def renderer_for(location: str) -> TextRenderer:
    """Pick a renderer from the skeleton's file extension."""
    if location.lower().split("?", 1)[0].endswith(".docx"):
        return RENDERERS["docx"]
    return RENDERERS["text"]


def render(skeleton: bytes, placeholders: dict[str, str], kind: str = "text") -> bytes:
    """Render a skeleton with the renderer registered for `kind` (docx or text)."""
    try:
        renderer = RENDERERS[kind]
    except KeyError:
        raise ValueError(f"Unknown document kind: {kind!r}. Must be one of {sorted(RENDERERS)}") from None
    return renderer.render(skeleton, placeholders)
