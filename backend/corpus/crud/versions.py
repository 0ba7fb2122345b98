"""Interval queries over the provision version table.

Versions are valid on the half-open interval ``[valid_from, valid_to)``;
NULL bounds are unbounded.
"""

from datetime import date

from sqlalchemy import Row, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from corpus.models.documents import LegalDocument, LegalProvisionVersion


async def get_version_at(
    session: AsyncSession,
    document_id: str,
    provision_ref: str,
    on: date,
) -> LegalProvisionVersion | None:
    """Return the latest version whose interval contains ``on``."""
    stmt = (
        select(LegalProvisionVersion)
        .where(
            LegalProvisionVersion.document_id == document_id,
            LegalProvisionVersion.provision_ref == provision_ref,
            or_(
                LegalProvisionVersion.valid_from.is_(None),
                LegalProvisionVersion.valid_from <= on,
            ),
            or_(
                LegalProvisionVersion.valid_to.is_(None),
                LegalProvisionVersion.valid_to > on,
            ),
        )
        .order_by(LegalProvisionVersion.valid_from.desc().nulls_last())
        .limit(1)
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def get_next_version_after(
    session: AsyncSession,
    document_id: str,
    provision_ref: str,
    on: date,
) -> LegalProvisionVersion | None:
    """Return the earliest version that starts after ``on``."""
    stmt = (
        select(LegalProvisionVersion)
        .where(
            LegalProvisionVersion.document_id == document_id,
            LegalProvisionVersion.provision_ref == provision_ref,
            LegalProvisionVersion.valid_from > on,
        )
        .order_by(LegalProvisionVersion.valid_from.asc())
        .limit(1)
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def count_versions(
    session: AsyncSession, document_id: str, provision_ref: str
) -> int:
    """Return how many versions exist for a provision."""
    result = await session.execute(
        select(func.count(LegalProvisionVersion.version_id)).where(
            LegalProvisionVersion.document_id == document_id,
            LegalProvisionVersion.provision_ref == provision_ref,
        )
    )
    return result.scalar_one()



async def get_version_rows_at(
    session: AsyncSession,
    document_id: str,
    on: date,
    provision_ref: str | None = None,
    limit: int | None = None,
) -> list[Row[tuple[LegalProvisionVersion, LegalDocument]]]:
    """Return the versions of a document in force on ``on``, with the document."""
    stmt = (
        select(LegalProvisionVersion, LegalDocument)
        .select_from(LegalProvisionVersion)
        .join(
            LegalDocument,
            LegalDocument.document_id == LegalProvisionVersion.document_id,
        )
        .where(
            LegalProvisionVersion.document_id == document_id,
            or_(
                LegalProvisionVersion.valid_from.is_(None),
                LegalProvisionVersion.valid_from <= on,
            ),
            or_(
                LegalProvisionVersion.valid_to.is_(None),
                LegalProvisionVersion.valid_to > on,
            ),
        )
    )
    if provision_ref is not None:
        stmt = stmt.where(LegalProvisionVersion.provision_ref == provision_ref)
    stmt = stmt.order_by(LegalProvisionVersion.version_id)
    if limit is not None:
        stmt = stmt.limit(limit)
    result = await session.execute(stmt)
    return list(result.all())
