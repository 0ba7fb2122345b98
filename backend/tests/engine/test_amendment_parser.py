"""Tests for amendment annotation parsing."""

import pytest

from corpus.models.enums import AmendmentKind, AmendmentPosition
from engine.legal_parser.amendment_parser import (
    determine_position,
    extract_amendment_references,
    extract_effective_date,
    is_valid_gazette_ref,
    normalize_gazette_ref,
    parse_statute_amendments,
)

# Long enough that annotations after it are past the header region
BODY = (
    "(1) Obdolženec ima pravico, da se zagovarja sam ali s strokovno pomočjo "
    "zagovornika, ki si ga izbere izmed odvetnikov.\n"
)


class TestExtractAmendmentReferences:
    """Tests for extract_amendment_references."""

    def test_modified_with_gazette(self) -> None:
        refs = extract_amendment_references("Spremenjen z zakonom, Ur. l. RS, št. 63/13")
        assert len(refs) == 1
        assert refs[0].kind == AmendmentKind.MODIFIED
        assert refs[0].gazette_ref == "RS, št. 63/13"
        assert refs[0].position == AmendmentPosition.HEADER

    def test_repealed_by_constitutional_court(self) -> None:
        refs = extract_amendment_references(
            "Razveljavljen z odločbo US, Ur. l. RS, št. 32/12"
        )
        assert refs[0].kind == AmendmentKind.REPEALED
        assert refs[0].gazette_ref == "RS, št. 32/12"

    def test_gazette_clause_optional(self) -> None:
        refs = extract_amendment_references("Črtan z zakonom.")
        assert refs[0].kind == AmendmentKind.DELETED
        assert refs[0].gazette_ref is None
        assert refs[0].raw_text == "Črtan z zakonom"

    def test_added(self) -> None:
        refs = extract_amendment_references("Dodan z odlokom, Ur. l. RS, št. 5/20-1")
        assert refs[0].kind == AmendmentKind.ADDED
        assert refs[0].gazette_ref == "RS, št. 5/20-1"

    def test_inflected_prose_is_not_an_annotation(self) -> None:
        refs = extract_amendment_references(
            "Odločba, ki je bila razveljavljena, se ne uporablja."
        )
        assert refs == []

    def test_bare_annotations_deduplicated_ignoring_case(self) -> None:
        text = "Pravilo je bilo razveljavljeno. Razveljavljen. razveljavljen."
        refs = extract_amendment_references(text)
        assert len(refs) == 1
        assert refs[0].kind == AmendmentKind.REPEALED
        assert refs[0].raw_text == "Razveljavljen"
        assert refs[0].gazette_ref is None

    def test_same_gazette_deduplicated_per_kind(self) -> None:
        text = (
            "Spremenjen z zakonom, Ur. l. RS, št. 63/13. "
            "spremenjen z uredbo, Ur. l. RS, št. 63/13. "
            "Dodan z zakonom, Ur. l. RS, št. 63/13."
        )
        refs = extract_amendment_references(text)
        assert [(r.kind, r.gazette_ref) for r in refs] == [
            (AmendmentKind.MODIFIED, "RS, št. 63/13"),
            (AmendmentKind.ADDED, "RS, št. 63/13"),
        ]

    def test_different_gazettes_kept(self) -> None:
        text = "Spremenjen z zakonom, Ur. l. RS, št. 63/13; spremenjen z zakonom, Ur. l. RS, št. 22/19"
        assert len(extract_amendment_references(text)) == 2

    def test_kind_order(self) -> None:
        text = "Dodan z zakonom. Spremenjen z zakonom."
        kinds = [r.kind for r in extract_amendment_references(text)]
        assert kinds == [AmendmentKind.MODIFIED, AmendmentKind.ADDED]

    def test_suffix_position(self) -> None:
        text = BODY + "Spremenjen z zakonom, Ur. l. RS, št. 91/11"
        refs = extract_amendment_references(text)
        assert refs[0].position == AmendmentPosition.SUFFIX

    def test_inline_position(self) -> None:
        text = BODY + "Ta odstavek je bil spremenjen z zakonom, Ur. l. RS, št. 91/11"
        refs = extract_amendment_references(text)
        assert refs[0].position == AmendmentPosition.INLINE

    def test_no_annotations(self) -> None:
        assert extract_amendment_references(BODY) == []


class TestDeterminePosition:
    """Tests for determine_position."""

    def test_header_boundary(self) -> None:
        content = "x" * 200
        assert determine_position(content, 99) == AmendmentPosition.HEADER
        assert determine_position(content, 100) == AmendmentPosition.INLINE

    def test_short_line_is_suffix(self) -> None:
        content = "x" * 120 + "\n  (2) " + "y" * 10
        assert determine_position(content, 127) == AmendmentPosition.SUFFIX


class TestParseStatuteAmendments:
    """Tests for parse_statute_amendments."""

    def test_per_provision(self) -> None:
        results = parse_statute_amendments(
            [("1", "Spremenjen z zakonom, Ur. l. RS, št. 63/13"), ("2", BODY)]
        )
        assert [r.provision_ref for r in results] == ["1", "2"]
        assert len(results[0].amendments) == 1
        assert results[1].amendments == []


class TestGazetteRefs:
    """Tests for gazette reference helpers."""

    @pytest.mark.parametrize("ref", ["63/13", "32/12-1", "5/20-popr"])
    def test_valid(self, ref: str) -> None:
        assert is_valid_gazette_ref(ref)

    @pytest.mark.parametrize("ref", ["RS, št. 63/13", "63-13", "63/", ""])
    def test_invalid(self, ref: str) -> None:
        assert not is_valid_gazette_ref(ref)

    def test_normalize(self) -> None:
        assert normalize_gazette_ref("Ur. l. RS, št. 63/13") == "RS, št. 63/13"
        assert normalize_gazette_ref("32/12-1") == "RS, št. 32/12-1"

    def test_normalize_without_number(self) -> None:
        assert normalize_gazette_ref("brez številke") is None


class TestExtractEffectiveDate:
    """Tests for extract_effective_date."""

    def test_numeric(self) -> None:
        assert extract_effective_date("velja od 1. 1. 2020") == "2020-01-01"

    def test_numeric_compact(self) -> None:
        assert extract_effective_date("Prenehal veljati 31.12.2019") == "2019-12-31"

    def test_month_name(self) -> None:
        assert extract_effective_date("začne veljati 15. marca 2021") == "2021-03-15"

    def test_genitive_month(self) -> None:
        assert extract_effective_date("od 1. januarja 2008") == "2008-01-01"

    def test_avgust(self) -> None:
        assert extract_effective_date("dne 3. avgusta 2015") == "2015-08-03"

    def test_unmatched_month_prefix(self) -> None:
        """'august' is recognized but matches no month prefix."""
        assert extract_effective_date("dne 3. august 2015") is None

    def test_no_date(self) -> None:
        assert extract_effective_date("brez datuma") is None
