"""EU transposition compliance report for a national document."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from corpus.crud.documents import get_provision
from corpus.crud.eu import get_eu_document, get_eu_references
from corpus.models.enums import ImplementationStatus
from corpus.schemas.compliance import (
    ComplianceIssueSchema,
    ComplianceIssueType,
    ComplianceReportSchema,
    ComplianceStatisticsSchema,
    ComplianceStatus,
    IssueSeverity,
)

logger = logging.getLogger(__name__)


def _overall_status(
    references_found: int, statistics: ComplianceStatisticsSchema
) -> ComplianceStatus:
    if references_found == 0:
        return ComplianceStatus.UNKNOWN
    if statistics.high_severity:
        return ComplianceStatus.NON_COMPLIANT
    if statistics.medium_severity:
        return ComplianceStatus.PARTIALLY_COMPLIANT
    return ComplianceStatus.COMPLIANT


async def validate_eu_compliance(
    session: AsyncSession,
    document_id: str,
    provision_ref: str | None = None,
    eu_document_id: str | None = None,
) -> ComplianceReportSchema:
    """Report transposition problems in a document's EU references.

    References are narrowed to one provision when ``provision_ref`` names an
    existing provision, and to one EU instrument when ``eu_document_id`` is
    given. References to instruments missing from the catalog are counted
    but produce no issues.
    """
    provision_id = None
    if provision_ref:
        provision = await get_provision(session, document_id, provision_ref)
        if provision is not None:
            provision_id = provision.provision_id

    references = await get_eu_references(
        session, document_id, provision_id=provision_id, eu_document_id=eu_document_id
    )

    issues: list[ComplianceIssueSchema] = []
    checked: set[str] = set()

    for reference in references:
        checked.add(reference.eu_document_id)
        eu_document = await get_eu_document(session, reference.eu_document_id)
        if eu_document is None:
            logger.debug(f"EU document {reference.eu_document_id} not in catalog")
            continue

        label = eu_document.short_name or eu_document.title or eu_document.eu_document_id

        if reference.implementation_status == ImplementationStatus.PARTIAL:
            issues.append(
                ComplianceIssueSchema(
                    issue_type=ComplianceIssueType.PARTIAL_IMPLEMENTATION,
                    severity=IssueSeverity.MEDIUM,
                    description=f"Prenos {label} je le delen.",
                    eu_document_id=eu_document.eu_document_id,
                    recommendation=(
                        "Preverite, ali so vse zahtevane določbe EU dokumenta "
                        "prenesene v nacionalno zakonodajo."
                    ),
                )
            )

        if reference.implementation_status == ImplementationStatus.PENDING:
            issues.append(
                ComplianceIssueSchema(
                    issue_type=ComplianceIssueType.MISSING_IMPLEMENTATION,
                    severity=IssueSeverity.HIGH,
                    description=f"Prenos {label} še ni izveden.",
                    eu_document_id=eu_document.eu_document_id,
                    recommendation=(
                        "Zagotovite pravočasen prenos zahtev EU v nacionalno "
                        "zakonodajo."
                    ),
                )
            )

        if not eu_document.in_force:
            if eu_document.amended_by:
                recommendation = (
                    "Preverite, ali je sklicevanje posodobljeno na naslednji EU akt: "
                    f"{eu_document.amended_by}."
                )
            else:
                recommendation = (
                    "Preverite, ali je sklicevanje na ta EU dokument še aktualno."
                )
            issues.append(
                ComplianceIssueSchema(
                    issue_type=ComplianceIssueType.REPEALED_EU_DOCUMENT,
                    severity=IssueSeverity.HIGH,
                    description=f"{label} ne velja več.",
                    eu_document_id=eu_document.eu_document_id,
                    recommendation=recommendation,
                )
            )
        elif eu_document.amended_by:
            issues.append(
                ComplianceIssueSchema(
                    issue_type=ComplianceIssueType.OUTDATED_REFERENCE,
                    severity=IssueSeverity.LOW,
                    description=f"{label} je bil spremenjen z {eu_document.amended_by}.",
                    eu_document_id=eu_document.eu_document_id,
                    recommendation=(
                        "Preverite, ali nacionalna zakonodaja odraža spremembe "
                        "v EU dokumentu."
                    ),
                )
            )

    statistics = ComplianceStatisticsSchema(
        total_issues=len(issues),
        high_severity=sum(1 for i in issues if i.severity == IssueSeverity.HIGH),
        medium_severity=sum(1 for i in issues if i.severity == IssueSeverity.MEDIUM),
        low_severity=sum(1 for i in issues if i.severity == IssueSeverity.LOW),
    )

    return ComplianceReportSchema(
        document_id=document_id,
        provision_ref=provision_ref,
        compliance_status=_overall_status(len(references), statistics),
        issues=issues,
        eu_references_checked=len(checked),
        statistics=statistics,
    )
