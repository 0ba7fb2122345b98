"""Currency check: is a document (or provision) in force on a given date."""

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from corpus.config import settings
from corpus.crud.documents import get_document, get_provision
from corpus.crud.references import get_related_case_law
from corpus.crud.versions import count_versions, get_version_at
from corpus.models.enums import DocumentStatus
from corpus.schemas.compliance import CurrencyCheckSchema, RelatedCaseLawSchema
from engine.temporal.dates import extract_repeal_date, normalize_date, today_iso

logger = logging.getLogger(__name__)


async def check_currency(
    session: AsyncSession,
    document_id: str,
    provision_ref: str | None = None,
    as_of_date: str | None = None,
) -> CurrencyCheckSchema:
    """Check whether a document, and optionally one provision, is in force.

    Args:
        session: Read-only database session.
        document_id: Corpus document id.
        provision_ref: Optional provision to check against its version history.
        as_of_date: YYYY-MM-DD; defaults to today.

    Returns:
        CurrencyCheckSchema with ``is_current``, Slovenian warnings and up to
        five related court decisions.

    Raises:
        FormatError: If ``as_of_date`` is not a valid ISO date.
    """
    as_of = date.fromisoformat(normalize_date(as_of_date) or today_iso())

    document = await get_document(session, document_id)
    if document is None:
        return CurrencyCheckSchema(
            document_id=document_id,
            status="not_found",
            is_current=False,
            as_of_date=as_of,
            provision_ref=provision_ref,
            warnings=[f"Dokument {document_id} ni najden v bazi podatkov"],
        )

    warnings: list[str] = []
    repeal_iso = extract_repeal_date(document.description)
    repeal_date = _lenient_date(repeal_iso)
    is_current = document.status in (DocumentStatus.IN_FORCE, DocumentStatus.AMENDED)

    if document.status == DocumentStatus.REPEALED:
        warnings.append(f'"{document.title}" je prenehal veljati (repealed)')
        is_current = False

    if document.status == DocumentStatus.NOT_YET_IN_FORCE:
        warnings.append(f'"{document.title}" še ni začel veljati (not yet in force)')
        is_current = False

    if document.in_force_date and as_of < document.in_force_date:
        warnings.append(
            f"Datum {as_of.isoformat()} je pred datumom začetka veljavnosti "
            f"{document.in_force_date.isoformat()}"
        )
        is_current = False

    # Compared as text so an unparseable repeal date still takes effect
    if repeal_iso and as_of.isoformat() >= repeal_iso:
        warnings.append(
            f"Datum {as_of.isoformat()} je po datumu prenehanja veljavnosti {repeal_iso}"
        )
        is_current = False

    provision_valid_from = None
    provision_valid_to = None

    if provision_ref:
        version = await get_version_at(session, document_id, provision_ref, as_of)
        if version is not None:
            provision_valid_from = version.valid_from
            provision_valid_to = version.valid_to
        elif await count_versions(session, document_id, provision_ref) > 0:
            warnings.append(
                f"Člen {provision_ref} nima veljavne različice na datum "
                f"{as_of.isoformat()}"
            )
            is_current = False
        elif await get_provision(session, document_id, provision_ref) is None:
            warnings.append(f"Člen {provision_ref} ni najden v dokumentu {document_id}")

    rows = await get_related_case_law(
        session, document_id, provision_ref, limit=settings.related_case_law_limit
    )
    related_case_law = [
        RelatedCaseLawSchema(
            ecli=case_law.ecli,
            court=case_law.court,
            decision_date=case_law.decision_date,
            summary=case_law.summary,
            url=url,
        )
        for case_law, url in rows
    ]

    logger.debug(
        f"Currency of {document_id} on {as_of}: current={is_current}, "
        f"{len(warnings)} warnings"
    )
    return CurrencyCheckSchema(
        document_id=document.document_id,
        document_title=document.title,
        status=document.status.value,
        is_current=is_current,
        as_of_date=as_of,
        in_force_date=document.in_force_date,
        repeal_date=repeal_date,
        provision_ref=provision_ref,
        provision_valid_from=provision_valid_from,
        provision_valid_to=provision_valid_to,
        warnings=warnings,
        related_case_law=related_case_law,
    )


def _lenient_date(value: str | None) -> date | None:
    """Parse an extracted repeal date, or None if it is not a calendar date."""
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(f"Repeal date {value!r} is not a calendar date")
        return None
