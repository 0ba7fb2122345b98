"""Shared fixtures: an in-memory SQLite corpus with a small seeded data set."""

from datetime import date

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from corpus.models import (
    Base,
    CaseLaw,
    CrossReference,
    EUDocument,
    EUReference,
    LegalDocument,
    LegalProvision,
    LegalProvisionVersion,
)
from corpus.models.enums import (
    CrossReferenceType,
    DocumentStatus,
    DocumentType,
    EUCommunity,
    EUDocumentType,
    EUReferenceSource,
    EUReferenceType,
    ImplementationStatus,
)

ZKP = "zakon-o-kazenskem-postopku"
ZVOP = "zakon-o-varstvu-osebnih-podatkov"
OZ = "obligacijski-zakonik"
REPEALED = "zakon-o-denacionalizaciji-stari"
PENDING = "zakon-o-digitalnih-storitvah"


@pytest_asyncio.fixture
async def session() -> AsyncSession:
    """An empty in-memory database with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    maker = async_sessionmaker(engine, expire_on_commit=False)
    async with maker() as db_session:
        yield db_session

    await engine.dispose()


@pytest_asyncio.fixture
async def corpus(session: AsyncSession) -> AsyncSession:
    """The in-memory database seeded with documents, versions and references."""
    session.add_all(
        [
            LegalDocument(
                document_id=ZKP,
                document_type=DocumentType.STATUTE,
                title="Zakon o kazenskem postopku",
                short_name="ZKP",
                status=DocumentStatus.IN_FORCE,
                in_force_date=date(1995, 1, 1),
            ),
            LegalDocument(
                document_id=ZVOP,
                document_type=DocumentType.STATUTE,
                title="Zakon o varstvu osebnih podatkov",
                short_name="ZVOP-2",
                status=DocumentStatus.AMENDED,
                in_force_date=date(2023, 1, 26),
            ),
            LegalDocument(
                document_id=OZ,
                document_type=DocumentType.STATUTE,
                title="Obligacijski zakonik",
                short_name="OZ",
                status=DocumentStatus.IN_FORCE,
                in_force_date=date(2002, 1, 1),
            ),
            LegalDocument(
                document_id=REPEALED,
                document_type=DocumentType.STATUTE,
                title="Zakon o denacionalizaciji",
                status=DocumentStatus.REPEALED,
                in_force_date=date(1991, 12, 7),
                description="Prenehal veljati 31.12.2019",
            ),
            LegalDocument(
                document_id=PENDING,
                document_type=DocumentType.STATUTE,
                title="Zakon o digitalnih storitvah",
                status=DocumentStatus.NOT_YET_IN_FORCE,
                in_force_date=date(2099, 1, 1),
            ),
            LegalDocument(
                document_id="zakon-o-spremembah-zkp-n",
                document_type=DocumentType.STATUTE,
                title="Zakon o spremembah in dopolnitvah ZKP (ZKP-N)",
                status=DocumentStatus.IN_FORCE,
            ),
            LegalDocument(
                document_id="vsrs-i-ips-12-2020",
                document_type=DocumentType.CASE_LAW,
                title="Sodba VSRS I Ips 12/2020",
                status=DocumentStatus.IN_FORCE,
                url="https://www.sodnapraksa.si/?id=2020-12",
            ),
            LegalDocument(
                document_id="vsrs-i-ips-3-2018",
                document_type=DocumentType.CASE_LAW,
                title="Sodba VSRS I Ips 3/2018",
                status=DocumentStatus.IN_FORCE,
            ),
        ]
    )

    zkp_6 = LegalProvision(
        document_id=ZKP, provision_ref="6", article="6", content="Prvi odstavek."
    )
    zkp_14 = LegalProvision(
        document_id=ZKP,
        provision_ref="14",
        article="14",
        title="Pravica do zagovornika",
        content="Obdolženec ima pravico do zagovornika.",
    )
    zvop_1 = LegalProvision(
        document_id=ZVOP,
        provision_ref="1",
        article="1",
        title="Vsebina zakona",
        content="Ta zakon ureja izvajanje Uredbe (EU) 2016/679.",
    )
    zvop_2 = LegalProvision(
        document_id=ZVOP,
        provision_ref="2",
        article="2",
        content="Posebne vrste podatkov.",
    )
    session.add_all([zkp_6, zkp_14, zvop_1, zvop_2])

    session.add_all(
        [
            LegalProvisionVersion(
                document_id=ZKP,
                provision_ref="14",
                article="14",
                title="Pravica do zagovornika",
                content="Obdolženec mora imeti zagovornika.",
                valid_from=date(2000, 1, 1),
                valid_to=date(2012, 6, 1),
            ),
            LegalProvisionVersion(
                document_id=ZKP,
                provision_ref="14",
                article="14",
                title="Pravica do zagovornika",
                content="Obdolženec ima pravico do zagovornika.",
                valid_from=date(2012, 6, 1),
                valid_to=None,
            ),
            LegalProvisionVersion(
                document_id=ZKP,
                provision_ref="20",
                article="20",
                content="Nova ureditev pripora.",
                valid_from=date(2099, 1, 1),
                valid_to=None,
            ),
            LegalProvisionVersion(
                document_id=ZKP,
                provision_ref="6",
                article="6",
                content="Prvi odstavek.",
                valid_from=None,
                valid_to=None,
            ),
        ]
    )

    session.add_all(
        [
            CrossReference(
                source_document_id="zakon-o-spremembah-zkp-n",
                target_document_id=ZKP,
                target_provision_ref="14",
                ref_type=CrossReferenceType.AMENDED_BY,
            ),
            CrossReference(
                source_document_id="vsrs-i-ips-12-2020",
                target_document_id=ZKP,
                target_provision_ref="14",
                ref_type=CrossReferenceType.REFERENCES,
            ),
            CrossReference(
                source_document_id="vsrs-i-ips-3-2018",
                target_document_id=ZKP,
                target_provision_ref="6",
                ref_type=CrossReferenceType.REFERENCES,
            ),
            CaseLaw(
                document_id="vsrs-i-ips-12-2020",
                court="VSRS",
                ecli="ECLI:SI:VSRS:2020:I.IPS.12.2020",
                case_number="I Ips 12/2020",
                decision_date=date(2020, 5, 14),
                summary="Kršitev pravice do zagovornika.",
            ),
            CaseLaw(
                document_id="vsrs-i-ips-3-2018",
                court="VSRS",
                ecli="ECLI:SI:VSRS:2018:I.IPS.3.2018",
                case_number="I Ips 3/2018",
                decision_date=date(2018, 2, 1),
            ),
        ]
    )

    session.add_all(
        [
            EUDocument(
                eu_document_id="regulation:2016/679",
                document_type=EUDocumentType.REGULATION,
                year=2016,
                number=679,
                community=EUCommunity.EU,
                celex_number="32016R0679",
                title="Splošna uredba o varstvu podatkov",
                short_name="GDPR",
                in_force=True,
            ),
            EUDocument(
                eu_document_id="directive:2016/680",
                document_type=EUDocumentType.DIRECTIVE,
                year=2016,
                number=680,
                community=EUCommunity.EU,
                title="Direktiva o varstvu podatkov pri kazenskem pregonu",
                in_force=True,
                amended_by="regulation:2018/1725",
            ),
            EUDocument(
                eu_document_id="directive:1995/46",
                document_type=EUDocumentType.DIRECTIVE,
                year=1995,
                number=46,
                community=EUCommunity.EG,
                title="Direktiva o varstvu podatkov",
                in_force=False,
                amended_by="regulation:2016/679",
            ),
        ]
    )
    await session.flush()

    session.add_all(
        [
            EUReference(
                source_type=EUReferenceSource.PROVISION,
                document_id=ZVOP,
                provision_id=zvop_1.provision_id,
                eu_document_id="regulation:2016/679",
                reference_type=EUReferenceType.IMPLEMENTS,
                is_primary_implementation=True,
                implementation_status=ImplementationStatus.COMPLETE,
                full_citation="Uredbe (EU) 2016/679",
            ),
            EUReference(
                source_type=EUReferenceSource.PROVISION,
                document_id=ZVOP,
                provision_id=zvop_1.provision_id,
                eu_document_id="regulation:2016/679",
                eu_article="6",
                reference_type=EUReferenceType.IMPLEMENTS,
                full_citation="člena 6 Uredbe (EU) 2016/679",
            ),
            EUReference(
                source_type=EUReferenceSource.PROVISION,
                document_id=ZVOP,
                provision_id=zvop_2.provision_id,
                eu_document_id="regulation:2016/679",
                eu_article="9",
                reference_type=EUReferenceType.APPLIES,
                full_citation="člena 9 Uredbe (EU) 2016/679",
                reference_context="v skladu s členom 9",
            ),
            EUReference(
                source_type=EUReferenceSource.PROVISION,
                document_id=ZVOP,
                provision_id=zvop_2.provision_id,
                eu_document_id="directive:2016/680",
                reference_type=EUReferenceType.IMPLEMENTS,
                implementation_status=ImplementationStatus.PARTIAL,
            ),
            EUReference(
                source_type=EUReferenceSource.DOCUMENT,
                document_id=ZVOP,
                eu_document_id="directive:1995/46",
                reference_type=EUReferenceType.REFERENCES,
            ),
            EUReference(
                source_type=EUReferenceSource.DOCUMENT,
                document_id=PENDING,
                eu_document_id="directive:2016/680",
                reference_type=EUReferenceType.IMPLEMENTS,
                implementation_status=ImplementationStatus.PENDING,
            ),
            EUReference(
                source_type=EUReferenceSource.DOCUMENT,
                document_id=REPEALED,
                eu_document_id="directive:1995/46",
                reference_type=EUReferenceType.IMPLEMENTS,
                is_primary_implementation=True,
                implementation_status=ImplementationStatus.COMPLETE,
            ),
            EUReference(
                source_type=EUReferenceSource.DOCUMENT,
                document_id=ZKP,
                eu_document_id="directive:2016/680",
                eu_article="1",
                reference_type=EUReferenceType.REFERENCES,
            ),
        ]
    )
    await session.commit()
    return session
