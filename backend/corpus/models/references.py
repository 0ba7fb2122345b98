"""Reference models: CrossReference between provisions, CaseLaw metadata."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from corpus.models.base import Base, enum_column
from corpus.models.enums import CrossReferenceType

if TYPE_CHECKING:
    from corpus.models.documents import LegalDocument


class CrossReference(Base):
    """A directed edge from a source provision to a target provision.

    Provision refs are optional on both ends; an edge without a target
    provision points at the document as a whole.
    """

    __tablename__ = "cross_reference"

    reference_id: Mapped[int] = mapped_column(primary_key=True)
    source_document_id: Mapped[str] = mapped_column(
        ForeignKey("legal_document.document_id", ondelete="CASCADE"),
        nullable=False,
    )
    source_provision_ref: Mapped[str | None] = mapped_column(
        String(50), nullable=True
    )
    target_document_id: Mapped[str] = mapped_column(
        ForeignKey("legal_document.document_id", ondelete="CASCADE"),
        nullable=False,
    )
    target_provision_ref: Mapped[str | None] = mapped_column(
        String(50), nullable=True
    )
    ref_type: Mapped[CrossReferenceType] = mapped_column(
        enum_column(CrossReferenceType, "cross_reference_type"),
        default=CrossReferenceType.REFERENCES,
        nullable=False,
    )

    __table_args__ = (
        Index("idx_xref_source", "source_document_id"),
        Index("idx_xref_target", "target_document_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<CrossReference({self.source_document_id} -> "
            f"{self.target_document_id}, {self.ref_type.value})>"
        )


class CaseLaw(Base):
    """Court decision metadata attached to a case_law LegalDocument."""

    __tablename__ = "case_law"

    case_law_id: Mapped[int] = mapped_column(primary_key=True)
    document_id: Mapped[str] = mapped_column(
        ForeignKey("legal_document.document_id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    court: Mapped[str] = mapped_column(
        String(20), nullable=False, doc='e.g., "VSRS", "USRS", "UPRS"'
    )
    ecli: Mapped[str | None] = mapped_column(String(100), nullable=True, unique=True)
    case_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    decision_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    document: Mapped["LegalDocument"] = relationship(back_populates="case_law")

    def __repr__(self) -> str:
        return f"<CaseLaw({self.ecli or self.document_id})>"
