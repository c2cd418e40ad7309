"""Father / husband / guardian name lookup."""

from __future__ import annotations

import re
from typing import Optional

from sanctions_mapper.config.field_patterns import (
    FATHER_NAME_PATTERNS,
    FATHER_OR_HUSBAND_PATTERNS,
    HUSBAND_NAME_PATTERNS,
    PATRONYMIC_PATTERNS,
    RELATIONAL_DEFAULT_SOURCE,
    RELATIONAL_FALLBACK_PATTERNS,
    RELATIONAL_KEY_TERMS,
    RELATIONAL_TITLES,
)
from sanctions_mapper.fields import Exact, KeyScan, first_success
from sanctions_mapper.models import ExtractionResult, FieldMap
from sanctions_mapper.reporting import ExtractionReporter, degrades_to, resolve

COMPONENT = "relations"

RELATIONAL_LADDER = (
    Exact("father", FATHER_NAME_PATTERNS),
    Exact("husband", HUSBAND_NAME_PATTERNS),
    Exact("father_or_husband", FATHER_OR_HUSBAND_PATTERNS),
    Exact("patronymic", PATRONYMIC_PATTERNS),
    Exact("source_specific", RELATIONAL_FALLBACK_PATTERNS),
    KeyScan("key_scan", RELATIONAL_KEY_TERMS),
)

_TITLE_RE = re.compile(
    r"^\s*(?:" + "|".join(re.escape(title) for title in RELATIONAL_TITLES) + r")(?=[\s.:]|$)[\s.:]*",
    re.IGNORECASE,
)


def _not_found() -> ExtractionResult:
    return ExtractionResult("", RELATIONAL_DEFAULT_SOURCE)


@degrades_to(_not_found)
def extract_relational_name(field_map: FieldMap, *, reporter: Optional[ExtractionReporter] = None) -> ExtractionResult:
    """Return the father or husband name; ``secondary_value`` names the tier that matched."""

    reporter = resolve(reporter)
    result, tier = first_success(RELATIONAL_LADDER, field_map)
    if not result.found:
        reporter.not_found(COMPONENT)
        return _not_found()

    reporter.found(COMPONENT, result.value, result.source_field)
    return ExtractionResult(result.value, result.source_field, tier or "")


def clean_relational_name(value: Optional[str]) -> str:
    """Strip leading titles such as ``Mr.`` or ``S/O`` from a relational name."""

    if not value:
        return ""
    cleaned = value.strip()
    while True:
        stripped = _TITLE_RE.sub("", cleaned, count=1).strip()
        if stripped == cleaned:
            return cleaned
        cleaned = stripped
