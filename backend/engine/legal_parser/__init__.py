"""Citation parsing and reference extraction for Slovenian legal text."""

from engine.legal_parser.amendment_parser import (
    AmendmentReference,
    ProvisionAmendments,
    extract_amendment_references,
    extract_effective_date,
    is_valid_gazette_ref,
    normalize_gazette_ref,
    parse_statute_amendments,
)
from engine.legal_parser.citation_formatter import format_citation
from engine.legal_parser.citation_parser import CitationParser, parse_citation
from engine.legal_parser.citation_validator import validate_citation
from engine.legal_parser.cross_reference_extractor import (
    ExtractedCrossReference,
    extract_cross_references,
    resolve_statute_abbreviation,
)
from engine.legal_parser.eu_reference_parser import (
    ExtractedEUReference,
    extract_eu_references,
)
from engine.legal_parser.patterns import CITATION_PATTERNS, CitationPattern

__all__ = [
    # Citations
    "CITATION_PATTERNS",
    "CitationParser",
    "CitationPattern",
    "format_citation",
    "parse_citation",
    "validate_citation",
    # Cross-references
    "ExtractedCrossReference",
    "extract_cross_references",
    "resolve_statute_abbreviation",
    # EU references
    "ExtractedEUReference",
    "extract_eu_references",
    # Amendments
    "AmendmentReference",
    "ProvisionAmendments",
    "extract_amendment_references",
    "extract_effective_date",
    "is_valid_gazette_ref",
    "normalize_gazette_ref",
    "parse_statute_amendments",
]
