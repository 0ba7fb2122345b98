"""SQLAlchemy models for the Slovenian legal corpus store."""

from corpus.models.base import Base, async_session_maker
from corpus.models.documents import (
    LegalDocument,
    LegalProvision,
    LegalProvisionVersion,
)
from corpus.models.enums import (
    AmendmentKind,
    AmendmentPosition,
    CitationStyle,
    CitationType,
    CrossReferenceType,
    DocumentStatus,
    DocumentType,
    EUCommunity,
    EUDocumentType,
    EUReferenceSource,
    EUReferenceType,
    ImplementationStatus,
    ProvisionStatus,
)
from corpus.models.eu import EUDocument, EUReference
from corpus.models.references import CaseLaw, CrossReference

__all__ = [
    # Base
    "Base",
    "async_session_maker",
    # Enums
    "AmendmentKind",
    "AmendmentPosition",
    "CitationStyle",
    "CitationType",
    "CrossReferenceType",
    "DocumentStatus",
    "DocumentType",
    "EUCommunity",
    "EUDocumentType",
    "EUReferenceSource",
    "EUReferenceType",
    "ImplementationStatus",
    "ProvisionStatus",
    # Documents
    "LegalDocument",
    "LegalProvision",
    "LegalProvisionVersion",
    # References
    "CrossReference",
    "CaseLaw",
    # EU
    "EUDocument",
    "EUReference",
]
