"""Rendering of parsed citations in the standard Slovenian styles."""

import logging

from corpus.models.enums import CitationStyle, CitationType
from engine.exceptions import FormatError
from engine.legal_parser.abbreviations import STATUTE_FULL_NAMES
from engine.legal_parser.citation_parser import parse_citation

logger = logging.getLogger(__name__)


def coerce_style(style: CitationStyle | str) -> CitationStyle:
    """Convert a style name to ``CitationStyle``.

    Raises:
        FormatError: If the name is not full, short or pinpoint.
    """
    try:
        return CitationStyle(style)
    except ValueError as e:
        allowed = ", ".join(s.value for s in CitationStyle)
        raise FormatError(f"style must be one of: {allowed}") from e


def format_citation(raw: str, style: CitationStyle | str = CitationStyle.FULL) -> str:
    """Re-render a citation in the requested style.

    Unparseable input, unknown styles, EU instruments and gazette
    references come back unchanged; case law comes back as its ECLI.
    Statute articles render as:

    - full: ``6. člen Zakon o kazenskem postopku (ZKP), 2. odstavek``
    - short: ``6. člen ZKP, 2. odstavek``
    - pinpoint: ``6. člen, 2. odstavek``
    """
    try:
        style = coerce_style(style)
    except FormatError:
        logger.debug(f"Unknown citation style {style!r}, returning input unchanged")
        return raw
    parsed = parse_citation(raw)

    if not parsed.valid:
        return raw
    if parsed.citation_type == CitationType.CASE_LAW:
        return parsed.ecli or raw
    if parsed.citation_type != CitationType.STATUTE:
        return raw
    if not parsed.code_abbreviation or not parsed.article:
        return raw

    code = parsed.code_abbreviation
    paragraph = f", {parsed.paragraph}. odstavek" if parsed.paragraph else ""

    if style == CitationStyle.FULL:
        full_name = STATUTE_FULL_NAMES.get(code, code)
        return f"{parsed.article}. člen {full_name} ({code}){paragraph}"
    if style == CitationStyle.SHORT:
        return f"{parsed.article}. člen {code}{paragraph}"
    return f"{parsed.article}. člen{paragraph}"
