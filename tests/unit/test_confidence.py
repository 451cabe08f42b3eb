"""Tests for Italian-origin and authenticity confidence scoring."""

from dataclasses import replace

import pytest

from services.label_analysis import (
    AuthenticityVerdict,
    ProductRecord,
    authenticity_confidence,
    classify_confidence,
    completeness_score,
    determine_verdict,
    italian_origin_confidence,
)


def _full_record(**overrides) -> ProductRecord:
    values = dict(
        id="test",
        name="Parmigiano Reggiano",
        manufacturer="Caseificio Rossi",
        production_location="Italy",
        production_date="01/02/2023",
        serial_number="ABCDE12345",
        certifications=("DOP",),
        confidence_score=0.0,
    )
    values.update(overrides)
    return ProductRecord(**values)


class TestItalianOriginConfidence:

    def test_mean_over_matching_labels_only(self):
        assert italian_origin_confidence([("Italian pasta", 0.9), ("food", 0.5)]) == pytest.approx(0.9)

    def test_mean_of_several_matches(self):
        labels = [("Made in Italy", 0.8), ("Artisan bread", 0.6), ("bread", 0.99)]
        assert italian_origin_confidence(labels) == pytest.approx(0.7)

    def test_case_insensitive(self):
        assert italian_origin_confidence([("HANDCRAFTED", 0.4)]) == pytest.approx(0.4)

    def test_no_matches(self):
        assert italian_origin_confidence([("food", 0.9), ("cheese", 0.8)]) == 0.0

    def test_no_labels(self):
        assert italian_origin_confidence([]) == 0.0


class TestAuthenticityConfidence:

    def test_empty_record(self):
        assert authenticity_confidence(ProductRecord(id="empty")) == 0.0

    def test_all_extractable_fields(self):
        assert completeness_score(_full_record()) == pytest.approx(0.8)
        assert authenticity_confidence(_full_record()) == pytest.approx(0.8)

    def test_label_signal_adds_a_fifth(self):
        record = _full_record(confidence_score=0.5)
        assert authenticity_confidence(record) == pytest.approx(0.9)

    def test_not_clamped_by_default(self):
        record = _full_record(confidence_score=1.0, authenticity_code="IT-0001")
        assert authenticity_confidence(record, clamp=False) == pytest.approx(1.2)

    def test_clamped_when_requested(self):
        record = _full_record(confidence_score=1.0, authenticity_code="IT-0001")
        assert authenticity_confidence(record, clamp=True) == 1.0

    def test_blank_fields_do_not_count(self):
        record = ProductRecord(id="blank", name="   ", manufacturer="\t")
        assert completeness_score(record) == 0.0

    @pytest.mark.parametrize("field,value", [
        ("name", "Pecorino Romano"),
        ("manufacturer", "Caseificio Rossi"),
        ("production_location", "Italy"),
        ("production_date", "01/02/2023"),
        ("serial_number", "ABCDE12345"),
        ("certifications", ("DOP",)),
        ("authenticity_code", "IT-0001"),
    ])
    def test_adding_a_field_never_decreases_score(self, field, value):
        base = ProductRecord(id="base", name="Olio", confidence_score=0.4)
        if field == "name":
            base = replace(base, name="")
        enriched = replace(base, **{field: value})
        assert authenticity_confidence(enriched, clamp=False) >= authenticity_confidence(base, clamp=False)


class TestVerdict:

    @pytest.mark.parametrize("score,expected", [
        (0.95, AuthenticityVerdict.AUTHENTIC),
        (0.71, AuthenticityVerdict.AUTHENTIC),
        (0.7, AuthenticityVerdict.UNVERIFIED),
        (0.5, AuthenticityVerdict.UNVERIFIED),
        (0.3, AuthenticityVerdict.UNVERIFIED),
        (0.29, AuthenticityVerdict.COUNTERFEIT),
        (0.0, AuthenticityVerdict.COUNTERFEIT),
        (1.2, AuthenticityVerdict.AUTHENTIC),
    ])
    def test_bands(self, score, expected):
        assert classify_confidence(score) == expected

    def test_complete_record_is_authentic(self):
        assert determine_verdict(_full_record(confidence_score=0.9)) == AuthenticityVerdict.AUTHENTIC

    def test_banned_substances_force_counterfeit(self):
        record = _full_record(
            confidence_score=0.9,
            contains_banned_substances=True,
            banned_substances_found=("Red #40",),
        )
        assert determine_verdict(record) == AuthenticityVerdict.COUNTERFEIT

    def test_verdict_values_are_strings(self):
        assert AuthenticityVerdict.UNVERIFIED.value == "unverified"
