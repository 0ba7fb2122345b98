"""Corpus document models: LegalDocument, LegalProvision, LegalProvisionVersion."""

from datetime import date
from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    Date,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from corpus.models.base import Base, enum_column
from corpus.models.enums import DocumentStatus, DocumentType

if TYPE_CHECKING:
    from corpus.models.references import CaseLaw


class LegalDocument(Base):
    """A statute, regulation, decree or court decision in the corpus.

    ``document_id`` is the corpus-unique identifier (PIS naming convention
    for statutes, e.g. "zakon-o-kazenskem-postopku"). ``status`` is written
    by ingestion only.
    """

    __tablename__ = "legal_document"

    document_id: Mapped[str] = mapped_column(String(200), primary_key=True)
    document_type: Mapped[DocumentType] = mapped_column(
        enum_column(DocumentType, "document_type"), nullable=False
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    title_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    short_name: Mapped[str | None] = mapped_column(
        String(50), nullable=True, doc='e.g., "ZKP", "KZ-1"'
    )
    status: Mapped[DocumentStatus] = mapped_column(
        enum_column(DocumentStatus, "document_status"),
        default=DocumentStatus.IN_FORCE,
        nullable=False,
    )
    issued_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    in_force_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        doc='Free text, may embed a repeal date ("Prenehal veljati 01.01.2020")',
    )

    # Relationships
    provisions: Mapped[list["LegalProvision"]] = relationship(
        back_populates="document", cascade="all, delete-orphan"
    )
    case_law: Mapped[Optional["CaseLaw"]] = relationship(back_populates="document")

    def __repr__(self) -> str:
        return f"<LegalDocument({self.document_id}, {self.status.value})>"


class LegalProvision(Base):
    """The latest known text of a provision (article) of a document."""

    __tablename__ = "legal_provision"

    provision_id: Mapped[int] = mapped_column(primary_key=True)
    document_id: Mapped[str] = mapped_column(
        ForeignKey("legal_document.document_id", ondelete="CASCADE"),
        nullable=False,
    )
    provision_ref: Mapped[str] = mapped_column(
        String(50), nullable=False, doc='e.g., "14", "3a"'
    )
    chapter: Mapped[str | None] = mapped_column(String(200), nullable=True)
    section: Mapped[str | None] = mapped_column(String(200), nullable=True)
    article: Mapped[str] = mapped_column(String(50), nullable=False)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships
    document: Mapped["LegalDocument"] = relationship(back_populates="provisions")

    __table_args__ = (
        UniqueConstraint(
            "document_id", "provision_ref", name="uq_legal_provision_document_ref"
        ),
        Index("idx_provision_document", "document_id"),
        Index("idx_provision_chapter", "document_id", "chapter"),
    )

    def __repr__(self) -> str:
        return f"<LegalProvision({self.document_id} čl. {self.provision_ref})>"


class LegalProvisionVersion(Base):
    """A historical version of a provision with a half-open validity interval.

    The version was in effect on ``[valid_from, valid_to)``. A NULL bound is
    unbounded on that side. Intervals for one (document, provision_ref) pair
    do not overlap.
    """

    __tablename__ = "legal_provision_version"

    version_id: Mapped[int] = mapped_column(primary_key=True)
    document_id: Mapped[str] = mapped_column(
        ForeignKey("legal_document.document_id", ondelete="CASCADE"),
        nullable=False,
    )
    provision_ref: Mapped[str] = mapped_column(String(50), nullable=False)
    chapter: Mapped[str | None] = mapped_column(String(200), nullable=True)
    section: Mapped[str | None] = mapped_column(String(200), nullable=True)
    article: Mapped[str] = mapped_column(String(50), nullable=False)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    valid_from: Mapped[date | None] = mapped_column(Date, nullable=True)
    valid_to: Mapped[date | None] = mapped_column(Date, nullable=True)

    __table_args__ = (
        Index("idx_provision_version_doc_ref", "document_id", "provision_ref"),
    )

    def __repr__(self) -> str:
        return (
            f"<LegalProvisionVersion("
            f"{self.document_id} čl. {self.provision_ref}, "
            f"{self.valid_from}..{self.valid_to}"
            f")>"
        )
