"""Queries over the EU instrument catalog and national EU references."""

from __future__ import annotations

from sqlalchemy import Row, select
from sqlalchemy.ext.asyncio import AsyncSession

from corpus.models.documents import LegalDocument
from corpus.models.enums import DocumentStatus, EUReferenceType
from corpus.models.eu import EUDocument, EUReference


async def get_eu_document(
    session: AsyncSession, eu_document_id: str
) -> EUDocument | None:
    """Return a catalogued EU instrument, or None."""
    result = await session.execute(
        select(EUDocument).where(EUDocument.eu_document_id == eu_document_id)
    )
    return result.scalar_one_or_none()


async def get_eu_references(
    session: AsyncSession,
    document_id: str,
    provision_id: int | None = None,
    eu_document_id: str | None = None,
) -> list[EUReference]:
    """Return EU references of a document, optionally narrowed."""
    stmt = select(EUReference).where(EUReference.document_id == document_id)
    if provision_id is not None:
        stmt = stmt.where(EUReference.provision_id == provision_id)
    if eu_document_id is not None:
        stmt = stmt.where(EUReference.eu_document_id == eu_document_id)
    result = await session.execute(stmt.order_by(EUReference.eu_reference_id))
    return list(result.scalars().all())


async def get_eu_basis_rows(
    session: AsyncSession,
    document_id: str,
    reference_types: list[EUReferenceType] | None = None,
) -> list[Row[tuple[EUDocument, EUReference]]]:
    """Return (EUDocument, EUReference) pairs for a national document.

    Ordered by instrument year (newest first), then number.
    """
    stmt = (
        select(EUDocument, EUReference)
        .select_from(EUDocument)
        .join(EUReference, EUReference.eu_document_id == EUDocument.eu_document_id)
        .where(EUReference.document_id == document_id)
    )
    if reference_types:
        stmt = stmt.where(EUReference.reference_type.in_(reference_types))
    stmt = stmt.order_by(
        EUDocument.year.desc(), EUDocument.number.asc(), EUReference.eu_reference_id
    )
    result = await session.execute(stmt)
    return list(result.all())


async def get_provision_eu_reference_rows(
    session: AsyncSession, provision_id: int
) -> list[Row[tuple[EUDocument, EUReference]]]:
    """Return (EUDocument, EUReference) pairs cited by one provision."""
    stmt = (
        select(EUDocument, EUReference)
        .select_from(EUDocument)
        .join(EUReference, EUReference.eu_document_id == EUDocument.eu_document_id)
        .where(EUReference.provision_id == provision_id)
        .order_by(EUDocument.year.desc(), EUDocument.number.asc())
    )
    result = await session.execute(stmt)
    return list(result.all())


async def get_implementation_rows(
    session: AsyncSession,
    eu_document_id: str,
    primary_only: bool = False,
    in_force_only: bool = False,
) -> list[Row[tuple[LegalDocument, EUReference]]]:
    """Return (LegalDocument, EUReference) pairs referring to an EU instrument.

    Ordered by national document title, then reference insertion order.
    """
    stmt = (
        select(LegalDocument, EUReference)
        .select_from(EUReference)
        .join(LegalDocument, LegalDocument.document_id == EUReference.document_id)
        .where(EUReference.eu_document_id == eu_document_id)
    )
    if primary_only:
        stmt = stmt.where(EUReference.is_primary_implementation.is_(True))
    if in_force_only:
        stmt = stmt.where(LegalDocument.status == DocumentStatus.IN_FORCE)
    stmt = stmt.order_by(LegalDocument.title, EUReference.eu_reference_id)
    result = await session.execute(stmt)
    return list(result.all())
