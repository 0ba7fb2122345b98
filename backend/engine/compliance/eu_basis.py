"""EU legal basis of national documents and provisions."""

from sqlalchemy.ext.asyncio import AsyncSession

from corpus.crud.documents import get_document, get_provision
from corpus.crud.eu import get_eu_basis_rows, get_provision_eu_reference_rows
from corpus.models.enums import EUDocumentType, EUReferenceType
from corpus.schemas.compliance import (
    EUBasisDocumentSchema,
    EUBasisSchema,
    EUBasisStatisticsSchema,
    ProvisionEUBasisSchema,
    ProvisionEUReferenceSchema,
)


async def get_eu_basis(
    session: AsyncSession,
    document_id: str,
    include_articles: bool = False,
    reference_types: list[EUReferenceType] | None = None,
) -> EUBasisSchema:
    """List the EU instruments a national document refers to.

    References are stored one per cited article; they are merged here into
    one entry per instrument. The first reference of an instrument decides
    its ``reference_type``. With ``include_articles`` the distinct cited
    articles are collected in order of appearance.
    """
    document = await get_document(session, document_id)
    rows = await get_eu_basis_rows(session, document_id, reference_types)

    by_instrument: dict[str, EUBasisDocumentSchema] = {}
    for eu_document, reference in rows:
        entry = by_instrument.get(eu_document.eu_document_id)
        if entry is None:
            entry = EUBasisDocumentSchema(
                eu_document_id=eu_document.eu_document_id,
                document_type=eu_document.document_type,
                year=eu_document.year,
                number=eu_document.number,
                community=eu_document.community,
                celex_number=eu_document.celex_number,
                title=eu_document.title,
                short_name=eu_document.short_name,
                reference_type=reference.reference_type,
                is_primary_implementation=reference.is_primary_implementation,
                url_eur_lex=eu_document.url_eur_lex,
            )
            by_instrument[eu_document.eu_document_id] = entry

        if include_articles and reference.eu_article:
            if entry.articles is None:
                entry.articles = []
            if reference.eu_article not in entry.articles:
                entry.articles.append(reference.eu_article)

    eu_documents = list(by_instrument.values())
    return EUBasisSchema(
        document_id=document_id,
        document_title=document.title if document else "",
        eu_documents=eu_documents,
        statistics=EUBasisStatisticsSchema(
            total_eu_references=len(rows),
            directive_count=sum(
                1 for d in eu_documents if d.document_type == EUDocumentType.DIRECTIVE
            ),
            regulation_count=sum(
                1 for d in eu_documents if d.document_type == EUDocumentType.REGULATION
            ),
        ),
    )


async def get_provision_eu_basis(
    session: AsyncSession, document_id: str, provision_ref: str
) -> ProvisionEUBasisSchema:
    """List the EU references of a single provision."""
    provision = await get_provision(session, document_id, provision_ref)
    if provision is None:
        return ProvisionEUBasisSchema(
            document_id=document_id, provision_ref=provision_ref
        )

    rows = await get_provision_eu_reference_rows(session, provision.provision_id)
    eu_references = [
        ProvisionEUReferenceSchema(
            eu_document_id=eu_document.eu_document_id,
            document_type=eu_document.document_type,
            title=eu_document.title,
            short_name=eu_document.short_name,
            article=reference.eu_article,
            reference_type=reference.reference_type,
            full_citation=reference.full_citation or "",
            context=reference.reference_context,
        )
        for eu_document, reference in rows
    ]

    return ProvisionEUBasisSchema(
        document_id=document_id,
        provision_ref=provision_ref,
        provision_title=provision.title,
        eu_references=eu_references,
        statistics=EUBasisStatisticsSchema(
            total_eu_references=len(eu_references),
            directive_count=sum(
                1 for r in eu_references if r.document_type == EUDocumentType.DIRECTIVE
            ),
            regulation_count=sum(
                1 for r in eu_references if r.document_type == EUDocumentType.REGULATION
            ),
        ),
    )
