"""Extraction of cross-references between Slovenian legal provisions.

Detects references such as:
- "1. člen ZKP"
- "v skladu z 42. členom"
- "3. odstavek 7. člena"

Three classes of reference are evaluated in order (paragraph with article,
article with statute abbreviation, bare article). Each reference is reported
once per dedup key, so "3. odstavek 7. člena" also yields the bare
reference to article 7 when that key has not been seen yet.
"""

import logging
import re
from dataclasses import dataclass

from engine.legal_parser.abbreviations import (
    STATUTE_ABBREVIATIONS,
    abbreviation_alternation,
)

logger = logging.getLogger(__name__)

# Inflected forms: člen, člena, členom, členu
ARTICLE_INFLECTION = r"člen(?:a|om|u)?"

# "N. odstavek NN. člena"
PARAGRAPH_ARTICLE = re.compile(rf"(\d+)\.\s*odstavek\s+(\d+)\.\s*{ARTICLE_INFLECTION}")

# Known abbreviations first (whole token only), then any token with at least
# two capitals such as "ZFoo-1". Mixed-case forms like "ZDavP-2" stay whole.
STATUTE_TOKEN = (
    rf"(?:{abbreviation_alternation()})(?![A-Za-zČŠŽčšž0-9-])"
    r"|[A-ZČŠŽ](?=[A-Za-zČŠŽčšž0-9]*[A-ZČŠŽ])[A-Za-zČŠŽčšž0-9]+(?:-\d+)?"
)

# "NN. člen(a) ABBREVIATION"
ARTICLE_WITH_STATUTE = re.compile(
    rf"(\d+)\.\s*{ARTICLE_INFLECTION}\s+({STATUTE_TOKEN})"
)

# "NN. člen(a)" referring to the current document. The word boundary stops
# "členom ZKP" from matching as the shorter "člen" followed by "om ZKP".
ARTICLE_ONLY = re.compile(rf"(\d+)\.\s*{ARTICLE_INFLECTION}\b(?!\s+[A-ZČŠŽ])")


@dataclass
class ExtractedCrossReference:
    """A reference to another provision found in provision text.

    Attributes:
        raw_text: The matched text fragment.
        target_statute: Statute abbreviation (e.g. "ZKP"); None means the
            current document.
        target_article: Article number.
        target_paragraph: Paragraph number, if one was cited.
    """

    raw_text: str
    target_statute: str | None = None
    target_article: str | None = None
    target_paragraph: str | None = None

    @property
    def is_self_reference(self) -> bool:
        """Return True when the reference points into the current document."""
        return self.target_statute is None


def extract_cross_references(text: str) -> list[ExtractedCrossReference]:
    """Extract provision cross-references from Slovenian legal text."""
    results: list[ExtractedCrossReference] = []
    seen: set[str] = set()

    for match in PARAGRAPH_ARTICLE.finditer(text):
        key = f"p{match.group(1)}-a{match.group(2)}"
        if key in seen:
            continue
        seen.add(key)
        results.append(
            ExtractedCrossReference(
                raw_text=match.group(0),
                target_article=match.group(2),
                target_paragraph=match.group(1),
            )
        )

    for match in ARTICLE_WITH_STATUTE.finditer(text):
        key = f"{match.group(2)}-a{match.group(1)}"
        if key in seen:
            continue
        seen.add(key)
        results.append(
            ExtractedCrossReference(
                raw_text=match.group(0),
                target_statute=match.group(2),
                target_article=match.group(1),
            )
        )

    for match in ARTICLE_ONLY.finditer(text):
        key = f"self-a{match.group(1)}"
        if key in seen:
            continue
        seen.add(key)
        results.append(
            ExtractedCrossReference(
                raw_text=match.group(0),
                target_article=match.group(1),
            )
        )

    logger.debug(f"Extracted {len(results)} cross-references")
    return results


def resolve_statute_abbreviation(abbreviation: str) -> str | None:
    """Resolve a statute abbreviation to its PIS document id.

    The lookup is exact; "zkp" does not resolve.
    """
    return STATUTE_ABBREVIATIONS.get(abbreviation)
