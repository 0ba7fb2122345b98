"""Tests for ingestion-time reference enrichment."""

from corpus.models.enums import CrossReferenceType, EUReferenceType
from engine.enrichment import build_cross_references, build_eu_references

ZKP = "zakon-o-kazenskem-postopku"
KZ = "kazenski-zakonik"


class TestBuildCrossReferences:
    """Tests for build_cross_references."""

    def test_edges_to_known_documents(self) -> None:
        provisions = [
            ("12", "Kaznivo dejanje iz 135. člena KZ-1 se preganja po uradni dolžnosti."),
            ("13", "Glej 5. člen ZPP."),
        ]
        edges = build_cross_references(ZKP, provisions, {ZKP, KZ})
        assert len(edges) == 1
        edge = edges[0]
        assert edge.source_document_id == ZKP
        assert edge.source_provision_ref == "12"
        assert edge.target_document_id == KZ
        assert edge.target_provision_ref == "135"
        assert edge.ref_type == CrossReferenceType.REFERENCES

    def test_mixed_case_abbreviation_resolved(self) -> None:
        provisions = [("7", "Za vročanje se uporablja 85. člen ZDavP-2.")]
        known = {ZKP, "zakon-o-davcnem-postopku"}
        edges = build_cross_references(ZKP, provisions, known)
        assert [(e.target_document_id, e.target_provision_ref) for e in edges] == [
            ("zakon-o-davcnem-postopku", "85")
        ]

    def test_self_references_skipped(self) -> None:
        provisions = [("1", "Po 3. členu ZKP in po 4. členu tega zakona.")]
        assert build_cross_references(ZKP, provisions, {ZKP}) == []

    def test_unknown_abbreviation_skipped(self) -> None:
        provisions = [("1", "Po 3. členu ABC.")]
        assert build_cross_references(ZKP, provisions, {ZKP, KZ}) == []


class TestBuildEUReferences:
    """Tests for build_eu_references."""

    def test_candidates_per_article(self) -> None:
        provisions = [
            ("1", "Ta zakon je namenjen za izvajanje Uredbe (EU) 2016/679."),
            ("2", "v skladu s člena 9 Uredbe (EU) 2016/679 in člena 10 Uredbe (EU) 2016/679"),
        ]
        candidates = build_eu_references("zakon-o-varstvu-osebnih-podatkov", provisions)
        assert [(c.provision_ref, c.eu_article) for c in candidates] == [
            ("1", None),
            ("2", "9"),
            ("2", "10"),
        ]
        assert candidates[0].eu_document_id == "regulation:2016/679"
        assert candidates[0].reference_type == EUReferenceType.IMPLEMENTS
        assert candidates[0].full_citation == "Uredbe (EU) 2016/679"
