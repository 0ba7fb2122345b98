"""Tests for date normalization and repeal date extraction."""

import pytest

from engine.exceptions import FormatError
from engine.temporal.dates import extract_repeal_date, normalize_date, today_iso


class TestNormalizeDate:
    """Tests for normalize_date."""

    def test_valid_date(self) -> None:
        assert normalize_date("2024-02-29") == "2024-02-29"

    def test_trims_whitespace(self) -> None:
        assert normalize_date("  2020-01-01\n") == "2020-01-01"

    def test_none_and_blank(self) -> None:
        assert normalize_date(None) is None
        assert normalize_date("") is None
        assert normalize_date("   ") is None

    def test_impossible_calendar_date(self) -> None:
        """Shape is right but the day does not exist."""
        with pytest.raises(FormatError, match="YYYY-MM-DD"):
            normalize_date("2021-02-30")

    def test_not_a_leap_year(self) -> None:
        with pytest.raises(FormatError):
            normalize_date("2023-02-29")

    @pytest.mark.parametrize("value", ["01.01.2020", "2020-1-1", "2020/01/01", "x"])
    def test_wrong_shape(self, value: str) -> None:
        with pytest.raises(FormatError):
            normalize_date(value)

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            normalize_date("2020-13-01")

    def test_today_iso_shape(self) -> None:
        assert normalize_date(today_iso()) == today_iso()


class TestExtractRepealDate:
    """Tests for extract_repeal_date."""

    def test_prenehal_veljati(self) -> None:
        assert extract_repeal_date("Prenehal veljati 31.12.2019") == "2019-12-31"

    def test_razveljavljena(self) -> None:
        assert (
            extract_repeal_date("Uredba. Razveljavljena 01.07.2008 z novim zakonom.")
            == "2008-07-01"
        )

    def test_iso_date(self) -> None:
        assert extract_repeal_date("Velja do 2015-03-01") == "2015-03-01"

    def test_prenehal_takes_priority_over_iso(self) -> None:
        text = "Objavljeno 2010-05-05. Prenehal veljati 01.02.2020"
        assert extract_repeal_date(text) == "2020-02-01"

    def test_case_insensitive(self) -> None:
        assert extract_repeal_date("prenehal veljati 15.06.2011") == "2011-06-15"

    def test_no_date(self) -> None:
        assert extract_repeal_date("Zakon velja.") is None
        assert extract_repeal_date(None) is None
        assert extract_repeal_date("") is None

    def test_no_calendar_validation(self) -> None:
        """Extracted dates are returned as found, even when impossible."""
        assert extract_repeal_date("Prenehal veljati 31.02.2019") == "2019-02-31"
