"""Cross-reference and related case-law queries."""

from __future__ import annotations

from sqlalchemy import Row, select
from sqlalchemy.ext.asyncio import AsyncSession

from corpus.models.documents import LegalDocument
from corpus.models.enums import CrossReferenceType
from corpus.models.references import CaseLaw, CrossReference


async def get_amended_by_references(
    session: AsyncSession, document_id: str, provision_ref: str
) -> list[CrossReference]:
    """Return ``amended_by`` edges that target this provision."""
    result = await session.execute(
        select(CrossReference)
        .where(
            CrossReference.target_document_id == document_id,
            CrossReference.target_provision_ref == provision_ref,
            CrossReference.ref_type == CrossReferenceType.AMENDED_BY,
        )
        .order_by(CrossReference.reference_id)
    )
    return list(result.scalars().all())


async def get_related_case_law(
    session: AsyncSession,
    document_id: str,
    provision_ref: str | None = None,
    limit: int = 5,
) -> list[Row[tuple[CaseLaw, str | None]]]:
    """Return court decisions that cross-reference a document or provision.

    Newest decisions first. Each row is ``(CaseLaw, document url)``.
    """
    stmt = (
        select(CaseLaw, LegalDocument.url)
        .select_from(CaseLaw)
        .join(CrossReference, CrossReference.source_document_id == CaseLaw.document_id)
        .join(LegalDocument, LegalDocument.document_id == CaseLaw.document_id)
        .where(CrossReference.target_document_id == document_id)
    )
    if provision_ref is not None:
        stmt = stmt.where(CrossReference.target_provision_ref == provision_ref)
    stmt = stmt.order_by(CaseLaw.decision_date.desc().nulls_last()).limit(limit)

    result = await session.execute(stmt)
    return list(result.all())
