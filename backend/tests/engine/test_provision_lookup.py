"""Tests for whole-document provision lookup."""

from datetime import date

import pytest

from corpus.config import settings
from corpus.models.enums import DocumentStatus
from engine.exceptions import FormatError
from engine.temporal.provision_lookup import get_provisions_at

ZKP = "zakon-o-kazenskem-postopku"


class TestGetProvisionsAt:
    """Tests against the seeded in-memory corpus."""

    @pytest.mark.asyncio
    async def test_current_text_without_date(self, corpus) -> None:
        result = await get_provisions_at(corpus, ZKP)
        assert result.as_of_date is None
        assert [p.provision_ref for p in result.provisions] == ["6", "14"]
        provision = result.provisions[1]
        assert provision.document_title == "Zakon o kazenskem postopku"
        assert provision.document_status == DocumentStatus.IN_FORCE
        assert provision.title == "Pravica do zagovornika"
        assert provision.valid_from is None
        assert not result.truncated
        assert result.warning is None

    @pytest.mark.asyncio
    async def test_versions_on_date(self, corpus) -> None:
        result = await get_provisions_at(corpus, ZKP, as_of_date="2020-01-01")
        assert result.as_of_date == date(2020, 1, 1)
        assert [p.provision_ref for p in result.provisions] == ["14", "6"]
        assert result.provisions[0].content == "Obdolženec ima pravico do zagovornika."
        assert result.provisions[0].valid_from == date(2012, 6, 1)

    @pytest.mark.asyncio
    async def test_single_provision_on_date(self, corpus) -> None:
        result = await get_provisions_at(
            corpus, ZKP, provision_ref="14", as_of_date="2005-06-01"
        )
        assert len(result.provisions) == 1
        assert result.provisions[0].content == "Obdolženec mora imeti zagovornika."
        assert result.provisions[0].valid_to == date(2012, 6, 1)

    @pytest.mark.asyncio
    async def test_later_date_includes_new_provisions(self, corpus) -> None:
        result = await get_provisions_at(corpus, ZKP, as_of_date="2099-06-01")
        assert [p.provision_ref for p in result.provisions] == ["14", "20", "6"]

    @pytest.mark.asyncio
    async def test_blank_date_means_current_text(self, corpus) -> None:
        result = await get_provisions_at(corpus, ZKP, provision_ref="14", as_of_date=" ")
        assert result.as_of_date is None
        assert result.provisions[0].content == "Obdolženec ima pravico do zagovornika."

    @pytest.mark.asyncio
    async def test_whole_document_truncated(self, corpus, monkeypatch) -> None:
        monkeypatch.setattr(settings, "provision_result_limit", 2)
        result = await get_provisions_at(corpus, ZKP, as_of_date="2099-06-01")
        assert len(result.provisions) == 2
        assert result.truncated
        assert result.warning.startswith("Results truncated at 2 provisions.")

    @pytest.mark.asyncio
    async def test_single_provision_never_truncated(self, corpus, monkeypatch) -> None:
        monkeypatch.setattr(settings, "provision_result_limit", 1)
        result = await get_provisions_at(corpus, ZKP, provision_ref="14")
        assert len(result.provisions) == 1
        assert not result.truncated

    @pytest.mark.asyncio
    async def test_unknown_document(self, corpus) -> None:
        result = await get_provisions_at(corpus, "ne-obstaja")
        assert result.provisions == []
        assert not result.truncated

    @pytest.mark.asyncio
    async def test_malformed_date(self, corpus) -> None:
        with pytest.raises(FormatError):
            await get_provisions_at(corpus, ZKP, as_of_date="2021-02-30")
