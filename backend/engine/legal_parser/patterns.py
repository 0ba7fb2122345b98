"""Citation pattern definitions for Slovenian legal references.

This module defines the regex patterns used to recognize a single citation
string. Patterns are tried in list order and the first match wins, so the
more specific shapes (ECLI, gazette, EU instruments) come before the
statute article forms.

Pattern Categories:
- Case law: European Case Law Identifier of a Slovenian court
- Gazette: Official Gazette publication reference
- EU instruments: directives and regulations
- Statute articles: "<article>. člen <ABBR>" and "<ABBR>, <article>. člen"
"""

import re
from dataclasses import dataclass

from corpus.models.enums import CitationType
from engine.legal_parser.abbreviations import abbreviation_alternation

# "odstavek" or its abbreviation "odst."
PARAGRAPH_WORD = r"(?:odstavek|odst\.)"

# "člen", "člena" or the abbreviation "čl." / "čl"
ARTICLE_WORD = r"(?:člen[a]?|čl\.?)"

# Article id: digits with an optional letter suffix ("14", "3a")
ARTICLE_ID = r"(\d+[a-zčšž]?)"

# Community designators in Slovenian EU citations
COMMUNITY = r"(?:EU|ES|EGS)"

STATUTE_CODES = abbreviation_alternation()


@dataclass
class CitationPattern:
    """Definition of a citation pattern with its regex and metadata."""

    name: str
    citation_type: CitationType
    regex: str
    description: str
    ignore_case: bool = True

    def compile(self) -> re.Pattern:
        """Compile the regex, case-insensitively unless disabled."""
        return re.compile(self.regex, re.IGNORECASE if self.ignore_case else 0)


CITATION_PATTERNS: list[CitationPattern] = [
    # Examples:
    # 1. ECLI:SI:VSRS:2020:I.IPS.12.2020
    # 2. ECLI:SI:USRS:2019:U.I.123.17
    CitationPattern(
        name="ecli",
        citation_type=CitationType.CASE_LAW,
        regex=r"^ECLI:SI:[A-Z]{2,5}:\d{4}:[\w.]+$",
        description="European Case Law Identifier of a Slovenian court",
        ignore_case=False,
    ),
    # Examples:
    # 1. Uradni list RS, št. 63/13
    # 2. Ur. l. RS, št. 32/12-1
    CitationPattern(
        name="gazette",
        citation_type=CitationType.STATUTE,
        regex=(
            r"^(?:Uradni\s+list|Ur\.\s*l\.)\s+RS,?\s+[šs]t\.\s+"
            r"(\d+/\d{2}(?:-\d+)?)"
        ),
        description="Official Gazette of the Republic of Slovenia reference",
    ),
    # Examples:
    # 1. Direktiva (EU) 2019/770
    # 2. Direktiva 95/46/ES
    # 3. Direktiva EU št. 2016/680
    CitationPattern(
        name="eu_directive",
        citation_type=CitationType.EU_DIRECTIVE,
        regex=(
            rf"^Direktiva\s+(?:\(?({COMMUNITY})\)?\s+)?(?:št\.\s*)?"
            rf"(\d{{2,4}})/(\d+)(?:/({COMMUNITY}))?"
        ),
        description="EU directive by year and number",
    ),
    # Examples:
    # 1. Uredba (EU) 2016/679
    # 2. Uredba 1049/2001/ES
    CitationPattern(
        name="eu_regulation",
        citation_type=CitationType.EU_REGULATION,
        regex=(
            rf"^Uredba\s+(?:\(?({COMMUNITY})\)?\s+)?(?:št\.\s*)?"
            rf"(\d{{2,4}})/(\d+)(?:/({COMMUNITY}))?"
        ),
        description="EU regulation by year and number",
    ),
    # Examples:
    # 1. 6. člen ZKP
    # 2. 2. odstavek 14. člena KZ-1
    # 3. 14. člen KZ-1, 2. odstavek
    CitationPattern(
        name="statute_article",
        citation_type=CitationType.STATUTE,
        regex=(
            rf"^(?:(\d+)\.\s*{PARAGRAPH_WORD}\s+)?"
            rf"{ARTICLE_ID}\.?\s*{ARTICLE_WORD}\s+({STATUTE_CODES})"
            rf"(?:,\s*(\d+)\.\s*{PARAGRAPH_WORD})?\s*$"
        ),
        description="Article (and paragraph) followed by the statute abbreviation",
    ),
    # Examples:
    # 1. ZKP, 6. člen
    # 2. OZ 131. člen 1. odstavek
    CitationPattern(
        name="statute_article_reversed",
        citation_type=CitationType.STATUTE,
        regex=(
            rf"^({STATUTE_CODES}),?\s+{ARTICLE_ID}\.?\s*{ARTICLE_WORD}"
            rf"(?:\s+(\d+)\.\s*{PARAGRAPH_WORD})?\s*$"
        ),
        description="Statute abbreviation followed by article (and paragraph)",
    ),
]
