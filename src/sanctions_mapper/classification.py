"""Decide whether a record describes an individual or an entity."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from sanctions_mapper.config.classification_terms import (
    ENTITY_VALUE_CODES,
    ENTITY_VALUE_TERMS,
    EXPLICIT_TYPE_FIELDS,
    EXPLICIT_TYPE_TOKENS,
    HIGH_CONFIDENCE_SCORE,
    INDIVIDUAL_VALUE_CODES,
    INDIVIDUAL_VALUE_TERMS,
    MEDIUM_CONFIDENCE_SCORE,
    SCORING_TABLE,
)
from sanctions_mapper.fields import Exact, Fuzzy, first_success
from sanctions_mapper.models import Confidence, ExtractionResult, FieldMap, RecordType
from sanctions_mapper.reporting import ExtractionReporter, degrades_to, resolve

COMPONENT = "classification"
DEFAULT_SOURCE = "Default classification (insufficient indicators)"

EXPLICIT_LADDER = (
    Fuzzy("explicit", EXPLICIT_TYPE_FIELDS),
    Exact("explicit", EXPLICIT_TYPE_TOKENS, ignore_case=True),
)


def normalize_record_type(value: Optional[str], *, reporter: Optional[ExtractionReporter] = None) -> RecordType:
    """Map a free-text type label onto INDIVIDUAL, ENTITY or UNKNOWN.

    An empty label counts as INDIVIDUAL.
    """

    if not value or not value.strip():
        return RecordType.INDIVIDUAL

    upper = value.strip().upper()
    if upper in INDIVIDUAL_VALUE_CODES or any(term in upper for term in INDIVIDUAL_VALUE_TERMS):
        return RecordType.INDIVIDUAL
    if upper in ENTITY_VALUE_CODES or any(term in upper for term in ENTITY_VALUE_TERMS):
        return RecordType.ENTITY

    resolve(reporter).warning(COMPONENT, "Unrecognised record type %r", value)
    return RecordType.UNKNOWN


def score_key(key: str) -> Optional[Tuple[str, int]]:
    """Return ``(side, weight)`` for the first table row ``key`` matches."""

    lowered = key.lower()
    for side, weight, terms, vetoes in SCORING_TABLE:
        if any(term in lowered for term in terms) and not any(veto in lowered for veto in vetoes):
            return side, weight
    return None


def score_fields(field_map: FieldMap) -> Dict[str, int]:
    scored = [score_key(key) for key in field_map]
    return {
        side: sum(weight for hit_side, weight in filter(None, scored) if hit_side == side)
        for side in (RecordType.INDIVIDUAL.value, RecordType.ENTITY.value)
    }


def confidence_for(score: int) -> Confidence:
    if score >= HIGH_CONFIDENCE_SCORE:
        return Confidence.HIGH
    if score >= MEDIUM_CONFIDENCE_SCORE:
        return Confidence.MEDIUM
    return Confidence.LOW


def _blank_explicit_field(field_map: FieldMap) -> Optional[str]:
    """Key of an explicit type field that is present but empty."""

    names = {name.lower() for name in EXPLICIT_TYPE_FIELDS + EXPLICIT_TYPE_TOKENS}
    return next((key for key in field_map if key.lower() in names), None)


def _unknown() -> ExtractionResult:
    return ExtractionResult(RecordType.UNKNOWN.value, DEFAULT_SOURCE, Confidence.LOW.value)


@degrades_to(_unknown)
def classify(field_map: FieldMap, *, reporter: Optional[ExtractionReporter] = None) -> ExtractionResult:
    """Classify the record; ``secondary_value`` carries the confidence label."""

    reporter = resolve(reporter)

    explicit, _ = first_success(EXPLICIT_LADDER, field_map)
    if explicit.found:
        record_type = normalize_record_type(explicit.value, reporter=reporter)
        reporter.found(COMPONENT, record_type.value, explicit.source_field)
        return ExtractionResult(record_type.value, explicit.source_field, Confidence.HIGH.value)

    blank_key = _blank_explicit_field(field_map)
    if blank_key is not None:
        return ExtractionResult(RecordType.INDIVIDUAL.value, blank_key, Confidence.HIGH.value)

    scores = score_fields(field_map)
    individual = scores[RecordType.INDIVIDUAL.value]
    entity = scores[RecordType.ENTITY.value]
    if individual == entity:
        reporter.not_found(COMPONENT)
        return _unknown()

    winner = RecordType.INDIVIDUAL if individual > entity else RecordType.ENTITY
    contributing: List[str] = [key for key in field_map if (score_key(key) or ("", 0))[0] == winner.value]
    source = f"Inferred from patterns ({', '.join(contributing)})"
    reporter.found(COMPONENT, winner.value, source)
    return ExtractionResult(winner.value, source, confidence_for(max(individual, entity)).value)
