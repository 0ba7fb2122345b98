"""EU instrument catalog and national-to-EU reference models."""

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from corpus.models.base import Base, enum_column
from corpus.models.enums import (
    EUCommunity,
    EUDocumentType,
    EUReferenceSource,
    EUReferenceType,
    ImplementationStatus,
)


class EUDocument(Base):
    """A catalogued EU directive, regulation or decision.

    ``eu_document_id`` follows the "<type>:<year>/<number>" convention, e.g.
    "regulation:2016/679".
    """

    __tablename__ = "eu_document"

    eu_document_id: Mapped[str] = mapped_column(String(100), primary_key=True)
    document_type: Mapped[EUDocumentType] = mapped_column(
        enum_column(EUDocumentType, "eu_document_type"), nullable=False
    )
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    community: Mapped[EUCommunity | None] = mapped_column(
        enum_column(EUCommunity, "eu_community"), nullable=True
    )
    celex_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    short_name: Mapped[str | None] = mapped_column(
        String(100), nullable=True, doc='e.g., "GDPR"'
    )
    entry_into_force_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    in_force: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    amended_by: Mapped[str | None] = mapped_column(String(200), nullable=True)
    url_eur_lex: Mapped[str | None] = mapped_column(String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<EUDocument({self.eu_document_id})>"


class EUReference(Base):
    """A reference from a national document or provision to an EU instrument."""

    __tablename__ = "eu_reference"

    eu_reference_id: Mapped[int] = mapped_column(primary_key=True)
    source_type: Mapped[EUReferenceSource] = mapped_column(
        enum_column(EUReferenceSource, "eu_reference_source"), nullable=False
    )
    document_id: Mapped[str] = mapped_column(
        ForeignKey("legal_document.document_id", ondelete="CASCADE"),
        nullable=False,
    )
    provision_id: Mapped[int | None] = mapped_column(
        ForeignKey("legal_provision.provision_id", ondelete="CASCADE"),
        nullable=True,
    )
    eu_document_id: Mapped[str] = mapped_column(
        ForeignKey("eu_document.eu_document_id", ondelete="CASCADE"),
        nullable=False,
    )
    eu_article: Mapped[str | None] = mapped_column(String(50), nullable=True)
    reference_type: Mapped[EUReferenceType] = mapped_column(
        enum_column(EUReferenceType, "eu_reference_type"),
        default=EUReferenceType.REFERENCES,
        nullable=False,
    )
    reference_context: Mapped[str | None] = mapped_column(Text, nullable=True)
    full_citation: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_primary_implementation: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    implementation_status: Mapped[ImplementationStatus | None] = mapped_column(
        enum_column(ImplementationStatus, "implementation_status"), nullable=True
    )

    __table_args__ = (
        Index("idx_eu_reference_document", "document_id"),
        Index("idx_eu_reference_eu_document", "eu_document_id"),
        Index("idx_eu_reference_provision", "provision_id"),
    )

    def __repr__(self) -> str:
        return f"<EUReference({self.document_id} -> {self.eu_document_id})>"
