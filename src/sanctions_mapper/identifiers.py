"""Personal and government identifiers: CNIC, passport, national id and SSN.

Values are checked for shape only; no check digits or registry lookups.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from sanctions_mapper.config.field_patterns import CNIC_FIELD, DOCUMENT_PAIRINGS, GENERIC_PASSPORT_FIELDS
from sanctions_mapper.fields import clean_text
from sanctions_mapper.models import FieldMap, IdentifierCategory, IdentifierRecord
from sanctions_mapper.reporting import ExtractionReporter, degrades_to, resolve

COMPONENT = "identifiers"

CNIC_RES = (
    re.compile(r"\b\d{5}-?\d{7}-?\d\b"),
    re.compile(r"\b\d{13}\b"),
)
SSN_RE = re.compile(r"\b\d{3}-\d{2}-\d{4}\b")
PASSPORT_CHARSET = re.compile(r"^[A-Za-z0-9\- ]+$")

CATEGORY_ORDER = (
    IdentifierCategory.CNIC,
    IdentifierCategory.PASSPORT,
    IdentifierCategory.NATIONAL_ID,
    IdentifierCategory.SSN,
)


@dataclass(frozen=True)
class DocumentPairing:
    """A type field and its number field, e.g. ``idType`` / ``idNumber``."""

    type_token: str
    number_token: str
    rules: Tuple[Tuple[str, str, str], ...]

    def category_for(self, type_value: str) -> Optional[IdentifierCategory]:
        for match, expected, category in self.rules:
            if (match == "equals" and type_value == expected) or (match == "contains" and expected in type_value):
                return IdentifierCategory(category)
        return None

    def pairs(self, field_map: FieldMap) -> Iterable[Tuple[str, str, IdentifierCategory, str]]:
        for type_key, raw in field_map.items():
            if self.type_token not in type_key:
                continue
            type_value = clean_text(raw)
            category = self.category_for(type_value) if type_value else None
            if category is None:
                continue
            number_key = type_key.replace(self.type_token, self.number_token)
            number = clean_text(field_map.get(number_key))
            if number:
                yield type_key, number_key, category, number


PAIRINGS = tuple(DocumentPairing(type_token, number_token, rules) for type_token, number_token, rules in DOCUMENT_PAIRINGS)


# ------------------------------------------------------------------
# Shape checks
# ------------------------------------------------------------------
def is_valid_cnic(value: Optional[str]) -> bool:
    if not value:
        return False
    digits = value.replace("-", "")
    return len(digits) == 13 and digits.isdecimal()


def normalize_cnic(value: str) -> str:
    """Format a valid CNIC as ``XXXXX-XXXXXXX-X`` in ASCII digits; other input is returned unchanged."""

    if not is_valid_cnic(value):
        return value
    digits = "".join(str(int(char)) for char in value.replace("-", ""))
    return f"{digits[:5]}-{digits[5:12]}-{digits[12]}"


def is_valid_passport_number(value: Optional[str]) -> bool:
    if not value:
        return False
    return 4 <= len(value) <= 20 and bool(PASSPORT_CHARSET.match(value))


# ------------------------------------------------------------------
# Per-category scans
# ------------------------------------------------------------------
def _cnics(field_map: FieldMap) -> List[IdentifierRecord]:
    found: List[IdentifierRecord] = []
    direct = clean_text(field_map.get(CNIC_FIELD))
    if direct and is_valid_cnic(direct):
        found.append(IdentifierRecord(IdentifierCategory.CNIC, normalize_cnic(direct), CNIC_FIELD))

    for key, raw in field_map.items():
        if not raw:
            continue
        for pattern in CNIC_RES:
            for match in pattern.finditer(raw):
                candidate = match.group(0)
                if is_valid_cnic(candidate):
                    found.append(IdentifierRecord(IdentifierCategory.CNIC, normalize_cnic(candidate), key))
    return found


def _paired(field_map: FieldMap) -> List[IdentifierRecord]:
    found: List[IdentifierRecord] = []
    for pairing in PAIRINGS:
        for type_key, number_key, category, number in pairing.pairs(field_map):
            found.append(IdentifierRecord(category, number, f"{type_key}, {number_key}"))
    return found


def _generic_passports(field_map: FieldMap) -> List[IdentifierRecord]:
    found: List[IdentifierRecord] = []
    for key in GENERIC_PASSPORT_FIELDS:
        value = clean_text(field_map.get(key))
        if value and is_valid_passport_number(value):
            found.append(IdentifierRecord(IdentifierCategory.PASSPORT, value, key))
    return found


def _ssns(field_map: FieldMap) -> List[IdentifierRecord]:
    found: List[IdentifierRecord] = []
    for key, raw in field_map.items():
        if raw:
            found.extend(IdentifierRecord(IdentifierCategory.SSN, match.group(0), key) for match in SSN_RE.finditer(raw))
    return found


def deduplicate(identifiers: Iterable[IdentifierRecord]) -> List[IdentifierRecord]:
    seen = set()
    unique = []
    for identifier in identifiers:
        if (identifier.category, identifier.value) in seen:
            continue
        seen.add((identifier.category, identifier.value))
        unique.append(identifier)
    return unique


@degrades_to(list)
def extract_identifiers(field_map: FieldMap, *, reporter: Optional[ExtractionReporter] = None) -> List[IdentifierRecord]:
    """Return identifiers grouped CNIC, passport, national id, SSN, without duplicates."""

    reporter = resolve(reporter)

    candidates = _cnics(field_map) + _paired(field_map) + _generic_passports(field_map) + _ssns(field_map)
    pooled = [identifier for category in CATEGORY_ORDER for identifier in candidates if identifier.category == category]
    identifiers = deduplicate(pooled)

    if identifiers:
        for identifier in identifiers:
            reporter.found(COMPONENT, identifier.key, identifier.source_field)
    else:
        reporter.not_found(COMPONENT)
    return identifiers
