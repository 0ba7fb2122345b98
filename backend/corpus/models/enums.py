"""Enumerations shared by the corpus models, schemas and parsers."""

import enum


class DocumentType(str, enum.Enum):
    """Type of document held in the corpus."""

    STATUTE = "statute"
    CONSTITUTIONAL = "constitutional"
    PARLIAMENTARY = "parliamentary"
    REGULATION = "regulation"
    DECREE = "decree"
    CASE_LAW = "case_law"


class DocumentStatus(str, enum.Enum):
    """Legal status of a document. Set by ingestion, never by this package."""

    IN_FORCE = "in_force"
    AMENDED = "amended"
    REPEALED = "repealed"
    NOT_YET_IN_FORCE = "not_yet_in_force"


class CitationType(str, enum.Enum):
    """Kind of reference a parsed citation points at."""

    STATUTE = "statute"
    CASE_LAW = "case_law"
    EU_DIRECTIVE = "eu_directive"
    EU_REGULATION = "eu_regulation"


class CitationStyle(enum.StrEnum):
    """Display style for formatted statute citations."""

    FULL = "full"
    SHORT = "short"
    PINPOINT = "pinpoint"


class CrossReferenceType(str, enum.Enum):
    """Type of directed edge between two provisions or documents."""

    REFERENCES = "references"
    AMENDED_BY = "amended_by"
    IMPLEMENTS = "implements"
    SEE_ALSO = "see_also"


class ProvisionStatus(enum.StrEnum):
    """Temporal status of a resolved provision version."""

    CURRENT = "current"
    HISTORICAL = "historical"
    FUTURE = "future"
    NOT_FOUND = "not_found"


class EUDocumentType(str, enum.Enum):
    """Type of EU legal instrument."""

    DIRECTIVE = "directive"
    REGULATION = "regulation"
    DECISION = "decision"


class EUCommunity(str, enum.Enum):
    """Community designator of an EU instrument (varies by era)."""

    EU = "EU"
    EG = "EG"
    EEG = "EEG"
    EURATOM = "Euratom"


class EUReferenceType(str, enum.Enum):
    """Relationship between a national provision and an EU instrument."""

    IMPLEMENTS = "implements"
    SUPPLEMENTS = "supplements"
    APPLIES = "applies"
    REFERENCES = "references"
    COMPLIES_WITH = "complies_with"
    DEROGATES_FROM = "derogates_from"
    AMENDED_BY = "amended_by"
    REPEALED_BY = "repealed_by"
    CITES_ARTICLE = "cites_article"


class EUReferenceSource(str, enum.Enum):
    """What kind of national source an EU reference was extracted from."""

    PROVISION = "provision"
    DOCUMENT = "document"
    CASE_LAW = "case_law"


class ImplementationStatus(str, enum.Enum):
    """How far a national provision transposes an EU requirement."""

    COMPLETE = "complete"
    PARTIAL = "partial"
    PENDING = "pending"
    UNKNOWN = "unknown"


class AmendmentKind(enum.StrEnum):
    """Kind of amendment annotation found in provision text."""

    MODIFIED = "modified"
    REPEALED = "repealed"
    DELETED = "deleted"
    ADDED = "added"
    NEW = "new"


class AmendmentPosition(enum.StrEnum):
    """Where in the provision body an amendment annotation sits."""

    HEADER = "header"
    INLINE = "inline"
    SUFFIX = "suffix"
