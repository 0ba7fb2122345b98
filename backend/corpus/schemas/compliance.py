"""Pydantic schemas for currency checks and EU compliance reports."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field

from corpus.models.enums import (
    DocumentStatus,
    EUCommunity,
    EUDocumentType,
    EUReferenceType,
    ImplementationStatus,
)


class RelatedCaseLawSchema(BaseModel):
    """A court decision that cross-references a document or provision."""

    ecli: str | None = None
    court: str
    decision_date: date | None = None
    summary: str | None = None
    url: str | None = None


class CurrencyCheckSchema(BaseModel):
    """Whether a document (and optionally a provision) is in force on a date."""

    document_id: str
    document_title: str = ""
    status: str = Field(..., description="Document status, or 'not_found'")
    is_current: bool
    as_of_date: date
    in_force_date: date | None = None
    repeal_date: date | None = None
    provision_ref: str | None = None
    provision_valid_from: date | None = None
    provision_valid_to: date | None = None
    warnings: list[str] = Field(default_factory=list)
    related_case_law: list[RelatedCaseLawSchema] = Field(default_factory=list)


class ComplianceIssueType(str, Enum):
    """Kind of problem found when checking EU transposition."""

    MISSING_IMPLEMENTATION = "missing_implementation"
    PARTIAL_IMPLEMENTATION = "partial_implementation"
    OUTDATED_REFERENCE = "outdated_reference"
    REPEALED_EU_DOCUMENT = "repealed_eu_document"


class IssueSeverity(str, Enum):
    """Severity of a compliance issue."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ComplianceStatus(str, Enum):
    """Overall compliance verdict for a document or provision."""

    COMPLIANT = "compliant"
    PARTIALLY_COMPLIANT = "partially_compliant"
    NON_COMPLIANT = "non_compliant"
    UNKNOWN = "unknown"


class ComplianceIssueSchema(BaseModel):
    """A single compliance finding with a recommendation."""

    issue_type: ComplianceIssueType
    severity: IssueSeverity
    description: str
    eu_document_id: str | None = None
    recommendation: str


class ComplianceStatisticsSchema(BaseModel):
    """Issue counts by severity."""

    total_issues: int = 0
    high_severity: int = 0
    medium_severity: int = 0
    low_severity: int = 0


class ComplianceReportSchema(BaseModel):
    """EU compliance report for a national document or provision."""

    document_id: str
    provision_ref: str | None = None
    compliance_status: ComplianceStatus
    issues: list[ComplianceIssueSchema] = Field(default_factory=list)
    eu_references_checked: int = 0
    statistics: ComplianceStatisticsSchema = Field(
        default_factory=ComplianceStatisticsSchema
    )


class EUBasisDocumentSchema(BaseModel):
    """An EU instrument underlying a national document, with cited articles."""

    eu_document_id: str
    document_type: EUDocumentType
    year: int
    number: int
    community: EUCommunity | None = None
    celex_number: str | None = None
    title: str | None = None
    short_name: str | None = None
    reference_type: EUReferenceType
    is_primary_implementation: bool = False
    articles: list[str] | None = None
    url_eur_lex: str | None = None


class EUBasisStatisticsSchema(BaseModel):
    """Counts over an EU basis listing."""

    total_eu_references: int = 0
    directive_count: int = 0
    regulation_count: int = 0


class EUBasisSchema(BaseModel):
    """All EU instruments a national document rests on."""

    document_id: str
    document_title: str = ""
    eu_documents: list[EUBasisDocumentSchema] = Field(default_factory=list)
    statistics: EUBasisStatisticsSchema = Field(default_factory=EUBasisStatisticsSchema)


class ProvisionEUReferenceSchema(BaseModel):
    """An EU instrument cited by a single provision."""

    eu_document_id: str
    document_type: EUDocumentType
    title: str | None = None
    short_name: str | None = None
    article: str | None = None
    reference_type: EUReferenceType
    full_citation: str = ""
    context: str | None = None


class ProvisionEUBasisSchema(BaseModel):
    """EU references of one provision."""

    document_id: str
    provision_ref: str
    provision_title: str | None = None
    eu_references: list[ProvisionEUReferenceSchema] = Field(default_factory=list)
    statistics: EUBasisStatisticsSchema = Field(default_factory=EUBasisStatisticsSchema)


class EUDocumentSummarySchema(BaseModel):
    """Catalog data of an EU instrument.

    An instrument missing from the catalog is reported as a directive with
    year and number 0.
    """

    eu_document_id: str
    document_type: EUDocumentType = EUDocumentType.DIRECTIVE
    year: int = 0
    number: int = 0
    title: str | None = None
    short_name: str | None = None
    celex_number: str | None = None


class SlovenianImplementationSchema(BaseModel):
    """A national statute referring to an EU instrument."""

    statute_id: str
    title: str
    short_name: str | None = None
    status: DocumentStatus
    reference_type: EUReferenceType
    is_primary_implementation: bool = False
    implementation_status: ImplementationStatus | None = None
    articles_referenced: list[str] | None = None


class ImplementationStatisticsSchema(BaseModel):
    """Counts over the national implementations of an EU instrument."""

    total_statutes: int = 0
    primary_implementations: int = 0
    in_force: int = 0
    repealed: int = 0


class SlovenianImplementationsSchema(BaseModel):
    """National statutes implementing or citing an EU instrument."""

    eu_document: EUDocumentSummarySchema
    implementations: list[SlovenianImplementationSchema] = Field(default_factory=list)
    statistics: ImplementationStatisticsSchema = Field(
        default_factory=ImplementationStatisticsSchema
    )
