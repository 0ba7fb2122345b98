"""Parser that decomposes a single citation string into a typed reference.

Recognized shapes, in priority order:
- ECLI identifiers of Slovenian courts
- Official Gazette references ("Uradni list RS, št. 63/13")
- EU directives and regulations ("Direktiva (EU) 2019/770")
- Statute articles ("6. člen ZKP", "ZKP, 6. člen", "2. odstavek 14. člena KZ-1")

Anything else is returned as an invalid ``ParsedCitation`` with an error
message; parsing never raises.
"""

import logging
import re

from corpus.models.enums import CitationType
from corpus.schemas.citation import ParsedCitation
from engine.legal_parser.abbreviations import (
    STATUTE_ABBREVIATIONS,
    canonical_abbreviation,
)
from engine.legal_parser.patterns import CITATION_PATTERNS, CitationPattern

logger = logging.getLogger(__name__)


def _number(value: str | None) -> str | None:
    """Normalize a captured paragraph number ("02" -> "2")."""
    if value is None:
        return None
    return str(int(value, 10))


def resolve_code(abbreviation: str) -> tuple[str, str]:
    """Resolve a statute abbreviation to (canonical abbreviation, document id).

    Lookup ignores case. Unknown abbreviations fall back to their lower-cased
    form as the document id.
    """
    canonical = canonical_abbreviation(abbreviation)
    if canonical is None:
        return abbreviation, abbreviation.lower()
    return canonical, STATUTE_ABBREVIATIONS[canonical]


class CitationParser:
    """Parser for single Slovenian citation strings.

    Attributes:
        patterns: Citation patterns tried in order; the first match wins.
    """

    def __init__(self, patterns: list[CitationPattern] | None = None):
        self.patterns = patterns if patterns is not None else CITATION_PATTERNS
        self._compiled = [(p, p.compile()) for p in self.patterns]

    def parse(self, raw: str) -> ParsedCitation:
        """Parse a citation string.

        Args:
            raw: The citation as written by the user.

        Returns:
            ParsedCitation; ``valid`` is False when nothing matched.
        """
        trimmed = raw.strip()
        if not trimmed:
            return ParsedCitation(raw=raw, valid=False, error="Empty citation")

        for pattern, compiled in self._compiled:
            match = compiled.match(trimmed)
            if match is None:
                continue
            logger.debug(f"Citation {trimmed!r} matched pattern {pattern.name}")
            return self._build(pattern, match, raw, trimmed)

        return ParsedCitation(
            raw=raw,
            valid=False,
            error=f'Unrecognized citation format: "{trimmed}"',
        )

    def _build(
        self,
        pattern: CitationPattern,
        match: re.Match,
        raw: str,
        trimmed: str,
    ) -> ParsedCitation:
        if pattern.name == "ecli":
            return ParsedCitation(
                raw=raw,
                citation_type=CitationType.CASE_LAW,
                document_id=trimmed,
                ecli=trimmed,
                valid=True,
            )

        if pattern.name == "gazette":
            gazette_ref = match.group(1)
            return ParsedCitation(
                raw=raw,
                citation_type=CitationType.STATUTE,
                document_id=f"gazette:{gazette_ref}",
                gazette_ref=gazette_ref,
                valid=True,
            )

        if pattern.citation_type in (
            CitationType.EU_DIRECTIVE,
            CitationType.EU_REGULATION,
        ):
            prefix = (
                "directive"
                if pattern.citation_type == CitationType.EU_DIRECTIVE
                else "regulation"
            )
            year = int(match.group(2), 10)
            number = int(match.group(3), 10)
            return ParsedCitation(
                raw=raw,
                citation_type=pattern.citation_type,
                document_id=f"{prefix}:{year}/{number}",
                valid=True,
            )

        if pattern.name == "statute_article":
            leading_paragraph, article, code, trailing_paragraph = match.groups()
            paragraph = leading_paragraph or trailing_paragraph
        else:
            code, article, paragraph = match.groups()

        abbreviation, document_id = resolve_code(code)
        return ParsedCitation(
            raw=raw,
            citation_type=CitationType.STATUTE,
            document_id=document_id,
            article=article.lower(),
            paragraph=_number(paragraph),
            code_abbreviation=abbreviation,
            valid=True,
        )


_default_parser = CitationParser()


def parse_citation(raw: str) -> ParsedCitation:
    """Parse a citation string with the default pattern set."""
    return _default_parser.parse(raw)
