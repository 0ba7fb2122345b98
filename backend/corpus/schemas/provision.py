"""Pydantic schemas for point-in-time provision retrieval."""

from datetime import date

from pydantic import BaseModel, Field

from corpus.models.enums import CrossReferenceType, DocumentStatus, ProvisionStatus


class AmendmentRecordSchema(BaseModel):
    """A statute recorded as having amended a provision."""

    source_document_id: str = Field(..., description="The amending document")
    amendment_date: date | None = Field(
        None, description="Not populated from amended_by edges"
    )
    ref_type: CrossReferenceType = CrossReferenceType.AMENDED_BY


class ProvisionVersionSchema(BaseModel):
    """A provision's text as it stood on a query date.

    ``status`` classifies the version against the query date and today.
    A ``not_found`` result carries empty content and no interval.
    """

    document_id: str
    provision_ref: str
    chapter: str | None = None
    section: str | None = None
    article: str
    title: str | None = None
    content: str = ""
    valid_from: date | None = None
    valid_to: date | None = None
    status: ProvisionStatus
    amendments: list[AmendmentRecordSchema] | None = None


class DocumentProvisionSchema(BaseModel):
    """A provision joined with its document's title and status.

    ``valid_from`` and ``valid_to`` are only set for dated lookups.
    """

    document_id: str
    document_title: str
    document_status: DocumentStatus
    provision_ref: str
    chapter: str | None = None
    section: str | None = None
    article: str
    title: str | None = None
    content: str
    valid_from: date | None = None
    valid_to: date | None = None


class ProvisionListSchema(BaseModel):
    """Provisions of a document, current or as of a date."""

    document_id: str
    as_of_date: date | None = None
    provisions: list[DocumentProvisionSchema] = Field(default_factory=list)
    truncated: bool = False
    warning: str | None = None
