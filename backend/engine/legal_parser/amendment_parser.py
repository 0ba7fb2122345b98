"""Parser for amendment annotations in Slovenian provision text.

Consolidated provision texts carry annotations such as
"Spremenjen z zakonom, Ur. l. RS, št. 63/13" or
"Razveljavljen z odločbo US, Ur. l. RS, št. 32/12". This module extracts
those annotations, classifies where in the provision they sit, and offers
helpers for gazette references and effective dates.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from corpus.models.enums import AmendmentKind, AmendmentPosition

logger = logging.getLogger(__name__)

# ", Ur. l. RS, št. 63/13" (optional, captures the numeric reference)
GAZETTE_CLAUSE = r"(?:\s*,?\s*Ur\.?\s*l\.?\s*RS,?\s*št\.?\s*(\d+/\d+(?:-\w+)?))?"

# Amendment annotations, tried in this order
AMENDMENT_PATTERNS: list[tuple[AmendmentKind, re.Pattern]] = [
    (
        AmendmentKind.MODIFIED,
        re.compile(
            r"\bspremenjen\s+z\s+(?:zakonom|uredbo|odlokom)" + GAZETTE_CLAUSE,
            re.IGNORECASE,
        ),
    ),
    (
        AmendmentKind.REPEALED,
        re.compile(
            r"\brazveljavljen\b(?:\s+z\s+(?:odločbo(?:\s+US)?|zakonom|uredbo))?"
            + GAZETTE_CLAUSE,
            re.IGNORECASE,
        ),
    ),
    (
        AmendmentKind.DELETED,
        re.compile(r"\bčrtan\s+z\s+(?:zakonom|uredbo)" + GAZETTE_CLAUSE, re.IGNORECASE),
    ),
    (
        AmendmentKind.ADDED,
        re.compile(
            r"\bdodan\s+z\s+(?:zakonom|uredbo|odlokom)" + GAZETTE_CLAUSE,
            re.IGNORECASE,
        ),
    ),
]

GAZETTE_REF_SHAPE = re.compile(r"^\d+/\d+(-\w+)?$")
GAZETTE_REF_CORE = re.compile(r"(\d+/\d+(?:-\w+)?)")

# Annotations starting before this offset are part of the provision header
HEADER_OFFSET = 100

# A line shorter than this before the annotation means it stands on its own
SUFFIX_LINE_LENGTH = 10

SLOVENIAN_MONTHS = [
    "januar",
    "februar",
    "marec",
    "april",
    "maj",
    "junij",
    "julij",
    "avgust",
    "september",
    "oktober",
    "november",
    "december",
]

NUMERIC_DATE = re.compile(r"(\d{1,2})\.\s*(\d{1,2})\.\s*(\d{4})")
WORD_DATE = re.compile(
    r"(\d{1,2})\.\s*("
    r"januar(?:ja)?|februar(?:ja)?|marc(?:a|ec)|april(?:a)?|maj(?:a)?|"
    r"junij(?:a)?|julij(?:a)?|avgust(?:a)?|august(?:a)?|september|septembr(?:a)?|"
    r"oktober|oktobr(?:a)?|november|novembr(?:a)?|december|decembr(?:a)?"
    r")\s+(\d{4})",
    re.IGNORECASE,
)


@dataclass
class AmendmentReference:
    """An amendment annotation found in provision text.

    Attributes:
        kind: Modified, repealed, deleted or added.
        position: Header, inline or suffix placement.
        raw_text: The matched annotation.
        gazette_ref: Normalized gazette reference ("RS, št. 63/13"), if cited.
        amended_by_document_id: Id of the amending statute, when known.
    """

    kind: AmendmentKind
    position: AmendmentPosition
    raw_text: str
    gazette_ref: str | None = None
    amended_by_document_id: str | None = None


@dataclass
class ProvisionAmendments:
    """Amendment annotations of one provision."""

    provision_ref: str
    amendments: list[AmendmentReference] = field(default_factory=list)


def determine_position(content: str, index: int) -> AmendmentPosition:
    """Classify where an annotation starting at ``index`` sits."""
    if index < HEADER_OFFSET:
        return AmendmentPosition.HEADER
    current_line = content[:index].rsplit("\n", 1)[-1]
    if len(current_line.strip()) < SUFFIX_LINE_LENGTH:
        return AmendmentPosition.SUFFIX
    return AmendmentPosition.INLINE


def extract_amendment_references(content: str) -> list[AmendmentReference]:
    """Extract all amendment annotations from provision text.

    Annotations of the same kind citing the same gazette number (or, without
    one, with the same text) are reported once.
    """
    amendments: list[AmendmentReference] = []
    seen: set[str] = set()

    for kind, pattern in AMENDMENT_PATTERNS:
        for match in pattern.finditer(content):
            gazette_ref = f"RS, št. {match.group(1)}" if match.group(1) else None
            key = f"{kind.value}-{gazette_ref or match.group(0).casefold()}"
            if key in seen:
                continue
            seen.add(key)
            amendments.append(
                AmendmentReference(
                    kind=kind,
                    position=determine_position(content, match.start()),
                    raw_text=match.group(0),
                    gazette_ref=gazette_ref,
                )
            )

    return amendments


def parse_statute_amendments(
    provisions: Iterable[tuple[str, str]],
) -> list[ProvisionAmendments]:
    """Extract amendment annotations for each (provision_ref, content) pair."""
    results = []
    for provision_ref, content in provisions:
        amendments = extract_amendment_references(content)
        if amendments:
            logger.debug(f"čl. {provision_ref}: {len(amendments)} amendment annotations")
        results.append(
            ProvisionAmendments(provision_ref=provision_ref, amendments=amendments)
        )
    return results


def is_valid_gazette_ref(ref: str) -> bool:
    """Check the "NN/YY" or "NN/YY-ZZ" shape of a gazette reference."""
    return GAZETTE_REF_SHAPE.match(ref) is not None


def normalize_gazette_ref(ref: str) -> str | None:
    """Normalize a gazette reference to "RS, št. NN/YY", or None if absent."""
    match = GAZETTE_REF_CORE.search(ref)
    if match is None:
        return None
    return f"RS, št. {match.group(1)}"


def extract_effective_date(text: str) -> str | None:
    """Extract a date from Slovenian text as YYYY-MM-DD.

    Numeric dates ("1. 1. 2020", "01.01.2020") are tried first, then dates
    with a month name ("15. marca 2021"). Month names are matched on their
    first three letters.
    """
    numeric = NUMERIC_DATE.search(text)
    if numeric:
        day, month, year = numeric.groups()
        return f"{year}-{month.zfill(2)}-{day.zfill(2)}"

    worded = WORD_DATE.search(text)
    if worded is None:
        return None

    day, month_name, year = worded.groups()
    prefix_matches = [
        index
        for index, name in enumerate(SLOVENIAN_MONTHS)
        if month_name.lower().startswith(name[:3])
    ]
    if not prefix_matches:
        return None
    return f"{year}-{prefix_matches[0] + 1:02d}-{day.zfill(2)}"
