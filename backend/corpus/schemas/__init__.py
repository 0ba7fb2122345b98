"""Pydantic schemas module.

This module contains Pydantic models used for:
- Results handed to the tool layer (citations, provisions, reports)
- Data transfer between the store queries and the engine

Naming convention:
- Schema suffix to distinguish from SQLAlchemy models, except for the two
  citation results whose names are part of the public contract
"""

from corpus.schemas.citation import ParsedCitation, ValidationResult
from corpus.schemas.compliance import (
    ComplianceIssueSchema,
    ComplianceIssueType,
    ComplianceReportSchema,
    ComplianceStatisticsSchema,
    ComplianceStatus,
    CurrencyCheckSchema,
    EUBasisDocumentSchema,
    EUBasisSchema,
    EUBasisStatisticsSchema,
    EUDocumentSummarySchema,
    ImplementationStatisticsSchema,
    IssueSeverity,
    ProvisionEUBasisSchema,
    ProvisionEUReferenceSchema,
    RelatedCaseLawSchema,
    SlovenianImplementationSchema,
    SlovenianImplementationsSchema,
)
from corpus.schemas.provision import (
    AmendmentRecordSchema,
    DocumentProvisionSchema,
    ProvisionListSchema,
    ProvisionVersionSchema,
)

__all__ = [
    # Citations
    "ParsedCitation",
    "ValidationResult",
    # Provisions
    "AmendmentRecordSchema",
    "DocumentProvisionSchema",
    "ProvisionListSchema",
    "ProvisionVersionSchema",
    # Currency
    "CurrencyCheckSchema",
    "RelatedCaseLawSchema",
    # EU compliance
    "ComplianceIssueSchema",
    "ComplianceIssueType",
    "ComplianceReportSchema",
    "ComplianceStatisticsSchema",
    "ComplianceStatus",
    "IssueSeverity",
    # EU basis
    "EUBasisDocumentSchema",
    "EUBasisSchema",
    "EUBasisStatisticsSchema",
    "ProvisionEUBasisSchema",
    "ProvisionEUReferenceSchema",
    # National implementations
    "EUDocumentSummarySchema",
    "ImplementationStatisticsSchema",
    "SlovenianImplementationSchema",
    "SlovenianImplementationsSchema",
]
