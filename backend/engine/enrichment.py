"""Ingestion-time enrichment: derive reference edges from provision text.

These helpers turn extractor output into records ready to be stored as
``cross_reference`` and ``eu_reference`` rows. They do not touch the
database; callers decide how and when to persist them.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from corpus.models.enums import CrossReferenceType, EUReferenceType
from engine.legal_parser.cross_reference_extractor import (
    extract_cross_references,
    resolve_statute_abbreviation,
)
from engine.legal_parser.eu_reference_parser import extract_eu_references

logger = logging.getLogger(__name__)


@dataclass
class CrossReferenceEdge:
    """A reference from a provision to a provision of another statute."""

    source_document_id: str
    source_provision_ref: str
    target_document_id: str
    target_provision_ref: str | None
    ref_type: CrossReferenceType = CrossReferenceType.REFERENCES


@dataclass
class EUReferenceCandidate:
    """An EU instrument reference found in one provision."""

    document_id: str
    provision_ref: str
    eu_document_id: str
    eu_article: str | None
    reference_type: EUReferenceType
    full_citation: str


def build_cross_references(
    document_id: str,
    provisions: Iterable[tuple[str, str]],
    known_document_ids: set[str],
) -> list[CrossReferenceEdge]:
    """Build cross-statute edges for a document's provisions.

    Only references qualified with a statute abbreviation are kept, and only
    when the abbreviation resolves to a known document other than the source.

    Args:
        document_id: The source document.
        provisions: (provision_ref, content) pairs.
        known_document_ids: Ids of documents present in the corpus.
    """
    edges: list[CrossReferenceEdge] = []
    for provision_ref, content in provisions:
        for reference in extract_cross_references(content):
            if reference.target_statute is None:
                continue
            target_id = resolve_statute_abbreviation(reference.target_statute)
            if target_id is None or target_id == document_id:
                continue
            if target_id not in known_document_ids:
                continue
            edges.append(
                CrossReferenceEdge(
                    source_document_id=document_id,
                    source_provision_ref=provision_ref,
                    target_document_id=target_id,
                    target_provision_ref=reference.target_article,
                )
            )

    logger.info(f"{document_id}: {len(edges)} cross-references")
    return edges


def build_eu_references(
    document_id: str, provisions: Iterable[tuple[str, str]]
) -> list[EUReferenceCandidate]:
    """Extract EU references from each provision of a document."""
    candidates: list[EUReferenceCandidate] = []
    for provision_ref, content in provisions:
        for reference in extract_eu_references(content):
            candidates.append(
                EUReferenceCandidate(
                    document_id=document_id,
                    provision_ref=provision_ref,
                    eu_document_id=reference.eu_document_id,
                    eu_article=reference.article,
                    reference_type=reference.reference_type,
                    full_citation=reference.raw_match,
                )
            )

    logger.info(f"{document_id}: {len(candidates)} EU references")
    return candidates
