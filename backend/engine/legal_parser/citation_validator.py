"""Validation of citations against the corpus store."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from corpus.crud.documents import get_document, get_provision
from corpus.models.enums import DocumentStatus
from corpus.schemas.citation import ValidationResult
from engine.legal_parser.citation_parser import parse_citation

logger = logging.getLogger(__name__)


async def validate_citation(session: AsyncSession, raw: str) -> ValidationResult:
    """Parse a citation and check that what it points at exists.

    The provision is looked up only when the citation names an article and
    the document was found; otherwise ``provision_exists`` mirrors
    ``document_exists``. Repealed and amended documents produce warnings.

    Args:
        session: Read-only database session.
        raw: The citation string.

    Returns:
        ValidationResult with existence flags, document status and warnings.
    """
    parsed = parse_citation(raw)
    if not parsed.valid:
        return ValidationResult(
            citation=parsed,
            document_exists=False,
            provision_exists=False,
            warnings=[parsed.error or "Invalid citation format"],
        )

    document = await get_document(session, parsed.document_id)
    document_exists = document is not None
    provision_exists = document_exists
    warnings: list[str] = []

    if document is None:
        logger.debug(f"Citation {raw!r}: document {parsed.document_id} not in corpus")
        return ValidationResult(
            citation=parsed,
            document_exists=False,
            provision_exists=False,
        )

    if parsed.article:
        provision = await get_provision(session, document.document_id, parsed.article)
        provision_exists = provision is not None

    if document.status == DocumentStatus.REPEALED:
        warnings.append(f'Dokument "{document.title}" je prenehal veljati (repealed)')
    elif document.status == DocumentStatus.AMENDED:
        warnings.append(
            f'Dokument "{document.title}" je bil spremenjen — '
            "preverite veljavno besedilo"
        )

    return ValidationResult(
        citation=parsed,
        document_exists=document_exists,
        provision_exists=provision_exists,
        status=document.status,
        document_title=document.title,
        warnings=warnings,
    )
