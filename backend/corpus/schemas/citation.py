"""Pydantic schemas for parsed and validated citations."""

from pydantic import BaseModel, Field

from corpus.models.enums import CitationType, DocumentStatus


class ParsedCitation(BaseModel):
    """A citation string decomposed into a typed reference.

    Never persisted; always derived from ``raw`` per call. ``valid`` is False
    when no citation pattern matched, in which case ``error`` explains why.
    """

    raw: str = Field(..., description="The citation string as supplied")
    citation_type: CitationType = Field(
        CitationType.STATUTE, description="Kind of reference"
    )
    document_id: str = Field(
        "", description='Corpus document id, or a synthesized id like "directive:2019/770"'
    )
    article: str | None = Field(None, description='Article id, e.g. "6" or "3a"')
    paragraph: str | None = Field(None, description="Paragraph number")
    code_abbreviation: str | None = Field(None, description='e.g. "ZKP", "KZ-1"')
    ecli: str | None = Field(None, description="ECLI of a court decision")
    gazette_ref: str | None = Field(None, description='Official gazette ref, e.g. "63/13"')
    valid: bool = Field(..., description="Whether any citation pattern matched")
    error: str | None = Field(None, description="Why the citation is invalid")


class ValidationResult(BaseModel):
    """Outcome of checking a citation against the corpus store."""

    citation: ParsedCitation
    document_exists: bool
    provision_exists: bool
    status: DocumentStatus | None = None
    document_title: str | None = None
    warnings: list[str] = Field(default_factory=list)
