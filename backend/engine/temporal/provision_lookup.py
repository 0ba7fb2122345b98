"""Whole-document provision lookup, current or as of a date."""

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from corpus.config import settings
from corpus.crud.documents import get_current_provision_rows
from corpus.crud.versions import get_version_rows_at
from corpus.schemas.provision import DocumentProvisionSchema, ProvisionListSchema
from engine.temporal.dates import normalize_date

logger = logging.getLogger(__name__)


async def get_provisions_at(
    session: AsyncSession,
    document_id: str,
    provision_ref: str | None = None,
    as_of_date: str | None = None,
) -> ProvisionListSchema:
    """Return the provisions of a document, optionally as of a date.

    Without a date the current provision texts are returned. With a date,
    every version whose ``[valid_from, valid_to)`` interval contains it is
    returned instead. Whole-document lookups stop at
    ``settings.provision_result_limit`` rows and say so in ``warning``.

    Raises:
        FormatError: If ``as_of_date`` is given but not a valid ISO date.
    """
    normalized = normalize_date(as_of_date)
    limit = None if provision_ref else settings.provision_result_limit

    if normalized is None:
        rows = await get_current_provision_rows(
            session, document_id, provision_ref, limit=limit
        )
        query_date = None
    else:
        query_date = date.fromisoformat(normalized)
        rows = await get_version_rows_at(
            session, document_id, query_date, provision_ref, limit=limit
        )

    provisions = [
        DocumentProvisionSchema(
            document_id=document.document_id,
            document_title=document.title,
            document_status=document.status,
            provision_ref=provision.provision_ref,
            chapter=provision.chapter,
            section=provision.section,
            article=provision.article,
            title=provision.title,
            content=provision.content,
            valid_from=getattr(provision, "valid_from", None),
            valid_to=getattr(provision, "valid_to", None),
        )
        for provision, document in rows
    ]

    result = ProvisionListSchema(
        document_id=document_id, as_of_date=query_date, provisions=provisions
    )
    if limit is not None and len(provisions) >= limit:
        logger.warning(f"{document_id}: provision lookup truncated at {limit} rows")
        result.truncated = True
        result.warning = (
            f"Results truncated at {limit} provisions. Specify a provision_ref "
            "to retrieve a specific provision."
        )
    return result
