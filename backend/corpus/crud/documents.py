"""Read-only lookups for documents and current provisions."""

from sqlalchemy import Row, select
from sqlalchemy.ext.asyncio import AsyncSession

from corpus.models.documents import LegalDocument, LegalProvision


async def get_document(session: AsyncSession, document_id: str) -> LegalDocument | None:
    """Return the document with this id, or None."""
    result = await session.execute(
        select(LegalDocument).where(LegalDocument.document_id == document_id)
    )
    return result.scalar_one_or_none()


async def get_provision(
    session: AsyncSession, document_id: str, provision_ref: str
) -> LegalProvision | None:
    """Return the current text of a provision, or None."""
    result = await session.execute(
        select(LegalProvision).where(
            LegalProvision.document_id == document_id,
            LegalProvision.provision_ref == provision_ref,
        )
    )
    return result.scalar_one_or_none()


async def list_provisions(
    session: AsyncSession, document_id: str, limit: int = 200
) -> list[LegalProvision]:
    """Return a document's current provisions in insertion order."""
    result = await session.execute(
        select(LegalProvision)
        .where(LegalProvision.document_id == document_id)
        .order_by(LegalProvision.provision_id)
        .limit(limit)
    )
    return list(result.scalars().all())


async def list_document_ids(session: AsyncSession) -> set[str]:
    """Return the ids of every document in the corpus."""
    result = await session.execute(select(LegalDocument.document_id))
    return set(result.scalars().all())


async def get_current_provision_rows(
    session: AsyncSession,
    document_id: str,
    provision_ref: str | None = None,
    limit: int | None = None,
) -> list[Row[tuple[LegalProvision, LegalDocument]]]:
    """Return current provisions of a document joined with the document."""
    stmt = (
        select(LegalProvision, LegalDocument)
        .select_from(LegalProvision)
        .join(LegalDocument, LegalDocument.document_id == LegalProvision.document_id)
        .where(LegalProvision.document_id == document_id)
    )
    if provision_ref is not None:
        stmt = stmt.where(LegalProvision.provision_ref == provision_ref)
    stmt = stmt.order_by(LegalProvision.provision_id)
    if limit is not None:
        stmt = stmt.limit(limit)
    result = await session.execute(stmt)
    return list(result.all())
