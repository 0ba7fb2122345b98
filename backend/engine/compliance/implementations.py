"""National statutes that implement or cite an EU instrument."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from corpus.crud.eu import get_eu_document, get_implementation_rows
from corpus.models.enums import DocumentStatus
from corpus.schemas.compliance import (
    EUDocumentSummarySchema,
    ImplementationStatisticsSchema,
    SlovenianImplementationSchema,
    SlovenianImplementationsSchema,
)

logger = logging.getLogger(__name__)


async def get_slovenian_implementations(
    session: AsyncSession,
    eu_document_id: str,
    primary_only: bool = False,
    in_force_only: bool = False,
) -> SlovenianImplementationsSchema:
    """List the national statutes referring to an EU instrument.

    This is the inverse of ``get_eu_basis``. References are merged into one
    entry per statute; the first reference decides the reference type and
    primary flag, later ones only add cited articles.

    Args:
        session: Read-only database session.
        eu_document_id: Instrument id, e.g. "directive:2016/680".
        primary_only: Keep only references marked as primary implementation.
        in_force_only: Keep only statutes currently in force.

    Returns:
        SlovenianImplementationsSchema with the instrument, the statutes
        ordered by title, and counts by status.
    """
    eu_document = await get_eu_document(session, eu_document_id)
    if eu_document is None:
        logger.debug(f"EU instrument {eu_document_id} is not catalogued")
        summary = EUDocumentSummarySchema(eu_document_id=eu_document_id)
    else:
        summary = EUDocumentSummarySchema(
            eu_document_id=eu_document.eu_document_id,
            document_type=eu_document.document_type,
            year=eu_document.year,
            number=eu_document.number,
            title=eu_document.title,
            short_name=eu_document.short_name,
            celex_number=eu_document.celex_number,
        )

    rows = await get_implementation_rows(
        session, eu_document_id, primary_only=primary_only, in_force_only=in_force_only
    )

    by_statute: dict[str, SlovenianImplementationSchema] = {}
    for document, reference in rows:
        entry = by_statute.get(document.document_id)
        if entry is None:
            by_statute[document.document_id] = SlovenianImplementationSchema(
                statute_id=document.document_id,
                title=document.title,
                short_name=document.short_name,
                status=document.status,
                reference_type=reference.reference_type,
                is_primary_implementation=reference.is_primary_implementation,
                implementation_status=reference.implementation_status,
                articles_referenced=(
                    [reference.eu_article] if reference.eu_article else None
                ),
            )
            continue

        if reference.eu_article:
            if entry.articles_referenced is None:
                entry.articles_referenced = []
            if reference.eu_article not in entry.articles_referenced:
                entry.articles_referenced.append(reference.eu_article)

    implementations = list(by_statute.values())
    return SlovenianImplementationsSchema(
        eu_document=summary,
        implementations=implementations,
        statistics=ImplementationStatisticsSchema(
            total_statutes=len(implementations),
            primary_implementations=sum(
                1 for i in implementations if i.is_primary_implementation
            ),
            in_force=sum(
                1 for i in implementations if i.status == DocumentStatus.IN_FORCE
            ),
            repealed=sum(
                1 for i in implementations if i.status == DocumentStatus.REPEALED
            ),
        ),
    )
