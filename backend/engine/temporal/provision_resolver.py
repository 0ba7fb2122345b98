"""Point-in-time retrieval of provision text.

Given a document, a provision reference and a date, returns the version of
the provision that was in force on that date, classified against today as
current, historical or future.
"""

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from corpus.crud.references import get_amended_by_references
from corpus.crud.versions import get_next_version_after, get_version_at
from corpus.models.documents import LegalProvisionVersion
from corpus.models.enums import ProvisionStatus
from corpus.schemas.provision import AmendmentRecordSchema, ProvisionVersionSchema
from engine.exceptions import FormatError
from engine.temporal.dates import normalize_date

logger = logging.getLogger(__name__)

MISSING_DATE_MESSAGE = "date parameter is required and must be in YYYY-MM-DD format"


def determine_provision_status(
    valid_from: date | None,
    valid_to: date | None,
    query_date: date,
    today: date,
) -> ProvisionStatus:
    """Classify a version interval against the query date and today.

    Open bounds are unbounded. The interval is half-open, so a version whose
    ``valid_to`` equals the query date is already historical.
    """
    if valid_from is not None and query_date < valid_from:
        return ProvisionStatus.FUTURE
    if valid_to is not None and query_date >= valid_to:
        return ProvisionStatus.HISTORICAL

    in_force_today = (valid_from is None or valid_from <= today) and (
        valid_to is None or valid_to > today
    )
    if in_force_today:
        return ProvisionStatus.CURRENT
    if valid_to is not None and today >= valid_to:
        return ProvisionStatus.HISTORICAL

    return ProvisionStatus.CURRENT


def _version_schema(
    document_id: str, version: LegalProvisionVersion, status: ProvisionStatus
) -> ProvisionVersionSchema:
    return ProvisionVersionSchema(
        document_id=document_id,
        provision_ref=version.provision_ref,
        chapter=version.chapter,
        section=version.section,
        article=version.article,
        title=version.title,
        content=version.content,
        valid_from=version.valid_from,
        valid_to=version.valid_to,
        status=status,
    )


async def resolve_provision_at(
    session: AsyncSession,
    document_id: str,
    provision_ref: str,
    date: str | None,
    include_amendments: bool = False,
    today: date | None = None,
) -> ProvisionVersionSchema:
    """Return the version of a provision in force on a date.

    Args:
        session: Read-only database session.
        document_id: Corpus document id.
        provision_ref: Provision reference within the document, e.g. "14".
        date: Query date as YYYY-MM-DD. Required.
        include_amendments: Also list statutes recorded as amending the
            provision. Their amendment dates are not known and left empty.
        today: Reference date for the current/historical split; defaults to
            the real current date.

    Returns:
        The containing version, else the earliest later version tagged
        ``future``, else a ``not_found`` result with empty content.

    Raises:
        FormatError: If ``date`` is missing or not a valid ISO date.
    """
    normalized = normalize_date(date)
    if normalized is None:
        raise FormatError(MISSING_DATE_MESSAGE)
    query_date = _parse_iso(normalized)
    today = today or _today()

    version = await get_version_at(session, document_id, provision_ref, query_date)
    if version is None:
        upcoming = await get_next_version_after(
            session, document_id, provision_ref, query_date
        )
        if upcoming is not None:
            logger.debug(
                f"{document_id} čl. {provision_ref}: no version on {normalized}, "
                f"next starts {upcoming.valid_from}"
            )
            return _version_schema(document_id, upcoming, ProvisionStatus.FUTURE)

        logger.debug(f"{document_id} čl. {provision_ref}: no versions found")
        return ProvisionVersionSchema(
            document_id=document_id,
            provision_ref=provision_ref,
            article=provision_ref,
            content="",
            status=ProvisionStatus.NOT_FOUND,
        )

    status = determine_provision_status(
        version.valid_from, version.valid_to, query_date, today
    )
    result = _version_schema(document_id, version, status)

    if include_amendments:
        edges = await get_amended_by_references(session, document_id, provision_ref)
        result.amendments = [
            AmendmentRecordSchema(
                source_document_id=edge.source_document_id,
                amendment_date=None,
                ref_type=edge.ref_type,
            )
            for edge in edges
        ]

    return result


def _parse_iso(value: str) -> date:
    return date.fromisoformat(value)


def _today() -> date:
    return date.today()
