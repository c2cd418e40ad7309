"""Reconstruct the subject's name from whichever name fields a source provides.

The tiers are mutually exclusive and strictly ordered: UN style numbered
parts, then individual first/middle/last fields, then a single opaque full
name (kept verbatim, never split), then ``INDIVIDUAL_*_NAME`` groups.
"""

from __future__ import annotations

from typing import Optional

from sanctions_mapper.config.field_patterns import (
    FIRST_NAME_PATTERNS,
    FIRST_NAME_TOKENS,
    FOURTH_NAME_PATTERNS,
    FULL_NAME_PATTERNS,
    FULL_NAME_TOKENS,
    LAST_NAME_PATTERNS,
    LAST_NAME_TOKENS,
    MIDDLE_NAME_PATTERNS,
    MIDDLE_NAME_TOKENS,
    NAME_MISSING,
    PATTERN_GROUP_MARKER,
    PATTERN_GROUP_PREFIX,
    SECOND_NAME_PATTERNS,
    THIRD_NAME_PATTERNS,
)

from sanctions_mapper.fields import Exact, Fuzzy, clean_text, first_success
from sanctions_mapper.models import ExtractionResult, FieldMap, NameRecord, NameSourceType
from sanctions_mapper.reporting import ExtractionReporter, degrades_to, resolve

COMPONENT = "names"
NO_NAME_SOURCE = "No name fields detected"


def is_alias_key(key: str) -> bool:
    """True for keys that belong to an alias block (``akaList_aka_*``, ``INDIVIDUAL_ALIAS_*``)."""

    if "ALIAS" in key:
        return True
    return any(segment.lower() in ("aka", "akalist") for segment in key.split("_"))


def _component(field_map: FieldMap, patterns, tokens=()) -> ExtractionResult:
    ladder = [Fuzzy("pattern", tuple(patterns), is_alias_key)]
    if tokens:
        ladder.append(Exact("token", tuple(tokens), ignore_case=True))
    result, _ = first_success(ladder, field_map)
    return result


def _not_found() -> NameRecord:
    return NameRecord(full_name=NAME_MISSING, source_type=NameSourceType.NOT_FOUND, source_fields=NO_NAME_SOURCE)


def _multi_part(first: ExtractionResult, second, third, fourth) -> NameRecord:
    ordered = [part for part in (first, second, third, fourth) if part.found]
    last = next(part for part in (fourth, third, second) if part.found)
    middle = " ".join(part.value for part in (second, third) if part.found and part is not last)
    return NameRecord(
        first_name=first.value,
        middle_name=middle,
        last_name=last.value,
        full_name=" ".join(part.value for part in ordered),
        source_type=NameSourceType.UNSCR_MULTI_FIELDS,
        source_fields=", ".join(part.source_field for part in (first, second, third, fourth)),
    )


def _individual(first: ExtractionResult, middle: ExtractionResult, last: ExtractionResult) -> NameRecord:
    return NameRecord(
        first_name=first.value,
        middle_name=middle.value,
        last_name=last.value,
        full_name=" ".join(part.value for part in (first, middle, last) if part.found),
        source_type=NameSourceType.INDIVIDUAL_FIELDS,
        source_fields=", ".join(part.source_field for part in (first, middle, last)),
    )


def _pattern_group(field_map: FieldMap) -> Optional[NameRecord]:
    parts = []
    for key, raw in field_map.items():
        if not key.startswith(PATTERN_GROUP_PREFIX) or PATTERN_GROUP_MARKER not in key or "ALIAS" in key:
            continue
        value = clean_text(raw)
        if value:
            parts.append((key, value))
    if not parts:
        return None

    first = next((value for key, value in parts if "FIRST" in key), "")
    last = next((value for key, value in parts if "LAST" in key), "")
    return NameRecord(
        first_name=first,
        last_name=last,
        full_name=" ".join(value for _, value in parts),
        source_type=NameSourceType.UNSCR_PATTERN,
        source_fields=", ".join(key for key, _ in parts),
    )


@degrades_to(_not_found)
def extract_name(field_map: FieldMap, *, reporter: Optional[ExtractionReporter] = None) -> NameRecord:
    """Return the subject's name using the first tier that applies."""

    reporter = resolve(reporter)

    first = _component(field_map, FIRST_NAME_PATTERNS, FIRST_NAME_TOKENS)
    second = _component(field_map, SECOND_NAME_PATTERNS)
    third = _component(field_map, THIRD_NAME_PATTERNS)
    fourth = _component(field_map, FOURTH_NAME_PATTERNS)

    if first.found and (second.found or third.found or fourth.found):
        record = _multi_part(first, second, third, fourth)
        reporter.found(COMPONENT, record.full_name, record.source_type.value)
        return record

    middle = _component(field_map, MIDDLE_NAME_PATTERNS, MIDDLE_NAME_TOKENS)
    last = _component(field_map, LAST_NAME_PATTERNS, LAST_NAME_TOKENS)
    if first.found or last.found:
        record = _individual(first, middle, last)
        reporter.found(COMPONENT, record.full_name, record.source_type.value)
        return record

    full, _ = first_success(
        (Fuzzy("full_name", FULL_NAME_PATTERNS, is_alias_key), Exact("full_name", FULL_NAME_TOKENS, ignore_case=True)),
        field_map,
    )
    if full.found:
        reporter.found(COMPONENT, full.value, NameSourceType.FULL_NAME_FIELD.value)
        return NameRecord(
            full_name=full.value,
            source_type=NameSourceType.FULL_NAME_FIELD,
            source_fields=full.source_field,
        )

    record = _pattern_group(field_map)
    if record is not None:
        reporter.found(COMPONENT, record.full_name, record.source_type.value)
        return record

    reporter.not_found(COMPONENT)
    return _not_found()
