"""Extraction of EU directive and regulation references from Slovenian text.

Recognized forms:
- Direktiva (EU) 2019/770          -> directive
- Uredba (EU) 2016/679             -> regulation
- Direktiva 95/46/ES               -> directive (older community-suffix style)
- člena 6(1)(c) Uredbe (EU) ...    -> with an article reference

Modern references are extracted first, then old-style ones. Each
(instrument, article) pair is reported once, so an instrument cited for
several articles yields several references.
"""

import logging
import re
from dataclasses import dataclass

from corpus.models.enums import EUDocumentType, EUReferenceType

logger = logging.getLogger(__name__)

# "Direktiva (EU) 2019/770", "Uredbe (EU) št. 2016/679", "člen 6 Direktive (EU) 2019/770"
MODERN_PATTERN = re.compile(
    r"(?:člen(?:a)?\s+([\w.()]+)\s+)?"
    r"(?:(Direktiv[aeo]|Uredb[aeo])\s+\((\w+)\)\s+(?:(?:št|br)\.\s+)?(\d{4})/(\d+))",
    re.IGNORECASE,
)

# "Direktiva 95/46/ES", "Uredba 1049/2001/ES"
OLD_STYLE_PATTERN = re.compile(
    r"(?:člen(?:a)?\s+([\w.()]+)\s+)?"
    r"(?:(Direktiv[aeo]|Uredb[aeo])\s+(\d{2,4})/(\d+)/(\w+))",
    re.IGNORECASE,
)

# Relationship keywords searched in the text preceding a reference,
# checked in this order.
RELATION_KEYWORDS: list[tuple[EUReferenceType, tuple[str, ...]]] = [
    (EUReferenceType.IMPLEMENTS, ("za izvajanje", "za prenos", "prenaša")),
    (EUReferenceType.SUPPLEMENTS, ("dopolnjuje", "za dopolnitev")),
    (EUReferenceType.APPLIES, ("na podlagi", "v skladu z")),
]

# How many characters before a match are searched for relationship keywords
CONTEXT_WINDOW = 50

PLAUSIBLE_YEARS = range(1950, 2041)


@dataclass
class ExtractedEUReference:
    """An EU instrument reference found in national text.

    Attributes:
        doc_type: Directive or regulation.
        year: Year of the instrument.
        number: Sequence number within the year.
        community: Community designator as written ("EU", "ES", "EGS").
        article: Cited article of the instrument, e.g. "6(1)(c)".
        reference_type: Relationship inferred from the preceding text.
        raw_match: The matched text.
    """

    doc_type: EUDocumentType
    year: int
    number: int
    reference_type: EUReferenceType
    raw_match: str
    community: str | None = None
    article: str | None = None

    @property
    def eu_document_id(self) -> str:
        """Catalog id of the instrument, e.g. "regulation:2016/679"."""
        return f"{self.doc_type.value}:{self.year}/{self.number}"


def expand_two_digit_year(value: int) -> int:
    """Expand a two-digit year around a 1950 pivot (95 -> 1995, 12 -> 2012)."""
    if value < 100:
        return 1900 + value if value >= 50 else 2000 + value
    return value


def resolve_year_and_number(first: int, second: int) -> tuple[int, int]:
    """Decide which of two numeric components is the year.

    Modern citations put the year first ("2016/679"); older regulation
    citations put the number first ("1215/2012"). The first value is taken
    as the year when it is plausible, otherwise the second (expanded from
    two digits if needed) when that is plausible. If neither is, the first
    value is kept as the year.

    Returns:
        Tuple of (year, number).
    """
    if first in PLAUSIBLE_YEARS:
        return first, second
    expanded = expand_two_digit_year(second)
    if expanded in PLAUSIBLE_YEARS:
        return expanded, first
    if second in PLAUSIBLE_YEARS:
        return second, first
    logger.warning(
        f"No plausible year in EU reference {first}/{second}; "
        f"treating {first} as the year"
    )
    return first, second


def classify_reference_type(preceding_text: str) -> EUReferenceType:
    """Infer the relationship from keywords in the preceding text."""
    lower = preceding_text.lower()
    for reference_type, keywords in RELATION_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return reference_type
    return EUReferenceType.REFERENCES


def _doc_type(word: str) -> EUDocumentType:
    if word.lower().startswith("direktiv"):
        return EUDocumentType.DIRECTIVE
    return EUDocumentType.REGULATION


def extract_eu_references(text: str) -> list[ExtractedEUReference]:
    """Extract EU directive and regulation references from text."""
    results: list[ExtractedEUReference] = []
    seen: set[str] = set()

    def _add(
        match: re.Match,
        article: str | None,
        word: str,
        community: str | None,
        first: str,
        second: str,
    ) -> None:
        doc_type = _doc_type(word)
        year, number = resolve_year_and_number(
            expand_two_digit_year(int(first, 10)), int(second, 10)
        )
        key = f"{doc_type.value}:{year}/{number}:{article or ''}"
        if key in seen:
            return
        seen.add(key)

        preceding = text[max(0, match.start() - CONTEXT_WINDOW) : match.start()]
        results.append(
            ExtractedEUReference(
                doc_type=doc_type,
                year=year,
                number=number,
                community=community,
                article=article or None,
                reference_type=classify_reference_type(preceding),
                raw_match=match.group(0),
            )
        )

    for match in MODERN_PATTERN.finditer(text):
        article, word, community, first, second = match.groups()
        _add(match, article, word, community, first, second)

    for match in OLD_STYLE_PATTERN.finditer(text):
        article, word, first, second, community = match.groups()
        _add(match, article, word, community, first, second)

    logger.debug(f"Extracted {len(results)} EU references")
    return results
