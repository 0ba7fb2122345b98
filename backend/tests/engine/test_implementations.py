"""Tests for national implementations of EU instruments."""

import pytest

from corpus.models.enums import (
    DocumentStatus,
    EUDocumentType,
    EUReferenceType,
    ImplementationStatus,
)
from engine.compliance.implementations import get_slovenian_implementations

ZKP = "zakon-o-kazenskem-postopku"
ZVOP = "zakon-o-varstvu-osebnih-podatkov"
PENDING = "zakon-o-digitalnih-storitvah"
REPEALED = "zakon-o-denacionalizaciji-stari"


class TestGetSlovenianImplementations:
    """Tests for get_slovenian_implementations."""

    @pytest.mark.asyncio
    async def test_statutes_ordered_by_title(self, corpus) -> None:
        result = await get_slovenian_implementations(corpus, "directive:2016/680")
        assert [i.statute_id for i in result.implementations] == [PENDING, ZKP, ZVOP]
        assert result.eu_document.document_type == EUDocumentType.DIRECTIVE
        assert result.eu_document.year == 2016
        assert result.eu_document.number == 680

    @pytest.mark.asyncio
    async def test_statistics(self, corpus) -> None:
        result = await get_slovenian_implementations(corpus, "directive:2016/680")
        assert result.statistics.total_statutes == 3
        assert result.statistics.primary_implementations == 0
        assert result.statistics.in_force == 1
        assert result.statistics.repealed == 0

    @pytest.mark.asyncio
    async def test_references_merged_per_statute(self, corpus) -> None:
        result = await get_slovenian_implementations(corpus, "regulation:2016/679")
        assert len(result.implementations) == 1
        zvop = result.implementations[0]
        assert zvop.statute_id == ZVOP
        assert zvop.short_name == "ZVOP-2"
        assert zvop.status == DocumentStatus.AMENDED
        assert zvop.reference_type == EUReferenceType.IMPLEMENTS
        assert zvop.is_primary_implementation
        assert zvop.implementation_status == ImplementationStatus.COMPLETE
        assert zvop.articles_referenced == ["6", "9"]
        assert result.eu_document.short_name == "GDPR"
        assert result.eu_document.celex_number == "32016R0679"

    @pytest.mark.asyncio
    async def test_articles_absent_when_none_cited(self, corpus) -> None:
        result = await get_slovenian_implementations(corpus, "directive:2016/680")
        by_id = {i.statute_id: i for i in result.implementations}
        assert by_id[ZVOP].articles_referenced is None
        assert by_id[ZKP].articles_referenced == ["1"]

    @pytest.mark.asyncio
    async def test_primary_only(self, corpus) -> None:
        result = await get_slovenian_implementations(
            corpus, "directive:1995/46", primary_only=True
        )
        assert [i.statute_id for i in result.implementations] == [REPEALED]
        assert result.statistics.primary_implementations == 1
        assert result.statistics.repealed == 1

    @pytest.mark.asyncio
    async def test_in_force_only(self, corpus) -> None:
        result = await get_slovenian_implementations(
            corpus, "directive:2016/680", in_force_only=True
        )
        assert [i.statute_id for i in result.implementations] == [ZKP]

    @pytest.mark.asyncio
    async def test_uncatalogued_instrument(self, corpus) -> None:
        result = await get_slovenian_implementations(corpus, "directive:2099/1")
        assert result.eu_document.eu_document_id == "directive:2099/1"
        assert result.eu_document.year == 0
        assert result.eu_document.number == 0
        assert result.implementations == []
        assert result.statistics.total_statutes == 0
