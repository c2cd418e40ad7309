"""Unit tests for individual / entity classification."""

import pytest

from sanctions_mapper.classification import (
    DEFAULT_SOURCE,
    classify,
    confidence_for,
    normalize_record_type,
    score_fields,
    score_key,
)
from sanctions_mapper.models import Confidence, RecordType


@pytest.mark.unit
class TestNormalizeRecordType:
    """Free-text type labels."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("Individual", RecordType.INDIVIDUAL),
            ("natural person", RecordType.INDIVIDUAL),
            ("P", RecordType.INDIVIDUAL),
            ("i", RecordType.INDIVIDUAL),
            ("Entity", RecordType.ENTITY),
            ("Company", RecordType.ENTITY),
            ("enterprise", RecordType.ENTITY),
            ("E", RecordType.ENTITY),
            ("", RecordType.INDIVIDUAL),
            (None, RecordType.INDIVIDUAL),
        ],
    )
    def test_labels(self, value, expected):
        assert normalize_record_type(value) == expected

    def test_unrecognised_label_warns(self, recording_reporter):
        assert normalize_record_type("Vessel", reporter=recording_reporter) == RecordType.UNKNOWN
        assert recording_reporter.warnings == [("classification", "Unrecognised record type 'Vessel'")]


@pytest.mark.unit
class TestScoring:
    """The keyword weight table."""

    @pytest.mark.parametrize(
        "key,expected",
        [
            ("firstName", ("INDIVIDUAL", 3)),
            ("organization_name", ("ENTITY", 3)),
            ("gender", ("INDIVIDUAL", 2)),
            ("ENTITY_ADDRESS_CITY", ("ENTITY", 2)),
            ("display_name", ("INDIVIDUAL", 1)),
            ("registration_number", ("ENTITY", 1)),
            ("corp_name", None),
            ("remarks", None),
        ],
    )
    def test_score_key(self, key, expected):
        assert score_key(key) == expected

    def test_each_key_scores_once(self):
        """``first_name`` matches both the weight-3 and the ``name`` row but counts once."""
        assert score_fields({"first_name": "A"}) == {"INDIVIDUAL": 3, "ENTITY": 0}

    @pytest.mark.parametrize(
        "score,expected",
        [(7, Confidence.HIGH), (3, Confidence.HIGH), (2, Confidence.MEDIUM), (1, Confidence.LOW), (0, Confidence.LOW)],
    )
    def test_confidence(self, score, expected):
        assert confidence_for(score) == expected


@pytest.mark.unit
class TestClassify:
    """Explicit labels first, then keyword scoring."""

    def test_explicit_sdn_type(self):
        result = classify({"uid": "36", "sdnType": "Entity"})
        assert result.value == "ENTITY"
        assert result.source_field == "sdnType"
        assert result.secondary_value == "HIGH_CONFIDENCE"

    def test_explicit_bare_type_token(self):
        result = classify({"Type": "Individual"})
        assert result.value == "INDIVIDUAL"
        assert result.source_field == "Type"

    def test_eu_subject_type_attribute(self):
        assert classify({"subjectType_code": "enterprise"}).value == "ENTITY"

    def test_blank_element_beside_its_code_attribute(self):
        """A flattened ``<subjectType code=".."/>`` still classifies by its code."""
        result = classify({"subjectType_code": "enterprise", "subjectType": ""})
        assert result.value == "ENTITY"
        assert result.source_field == "subjectType_code"

    def test_nested_type_leaf_is_not_explicit(self):
        """An alias block's ``type`` says nothing about the record."""
        result = classify({"akaList_aka_type": "a.k.a.", "firstName": "Ali"})
        assert result.value == "INDIVIDUAL"
        assert result.source_field == "Inferred from patterns (firstName)"

    def test_un_list_type_is_not_a_record_type(self):
        result = classify({"UN_LIST_TYPE": "Taliban", "FIRST_NAME": "ABDUL"})
        assert result.value == "INDIVIDUAL"
        assert result.source_field.startswith("Inferred from patterns")

    def test_blank_explicit_field_means_individual(self):
        result = classify({"recordType": " ", "company_name": "Acme"})
        assert result.value == "INDIVIDUAL"
        assert result.source_field == "recordType"
        assert result.secondary_value == "HIGH_CONFIDENCE"

    def test_scored_entity(self):
        result = classify({"company_name": "Acme", "registration_number": "123"})
        assert result.value == "ENTITY"
        assert result.source_field == "Inferred from patterns (company_name, registration_number)"
        assert result.secondary_value == "HIGH_CONFIDENCE"

    def test_medium_confidence(self):
        result = classify({"gender": "M"})
        assert result.value == "INDIVIDUAL"
        assert result.secondary_value == "MEDIUM_CONFIDENCE"

    def test_low_confidence(self):
        result = classify({"name": "x"})
        assert result.value == "INDIVIDUAL"
        assert result.secondary_value == "LOW_CONFIDENCE"

    @pytest.mark.parametrize("field_map", [{}, {"company": "x", "first_name": "y"}])
    def test_tie_is_unknown(self, field_map):
        result = classify(field_map)
        assert result.value == "UNKNOWN"
        assert result.source_field == DEFAULT_SOURCE
        assert result.secondary_value == "LOW_CONFIDENCE"

    def test_unknown_explicit_label(self, recording_reporter):
        result = classify({"sdnType": "Vessel"}, reporter=recording_reporter)
        assert result.value == "UNKNOWN"
        assert result.source_field == "sdnType"
        assert recording_reporter.warnings
