"""Birth, death and listing dates.

Birth dates come from up to four dialects (OFAC ``dateOfBirth`` items, the UN
type/year/date triple, the EU remark-qualified ``birthdate`` block and a list
of generic names). Death dates are mined from free-text remarks such as
``"Confirmed to have died in 2015. Location: Kabul"``.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from sanctions_mapper.config.field_patterns import (
    BIRTH_TYPE_LABELS,
    EFFECTIVE_DATE_PATTERNS,
    EU_BIRTH_REMARK_PATTERNS,
    EU_BIRTH_REMARK_TOKENS,
    GENERIC_BIRTH_PATTERNS,
    LAST_UPDATED_PATTERNS,
    LISTED_ON_PATTERNS,
    OFAC_BIRTH_PATTERNS,
    OFAC_MAIN_ENTRY_PATTERNS,
    REMARK_PATTERNS,
    UN_BIRTH_DATE_PATTERNS,
    UN_BIRTH_DATE_TOKENS,
    UN_BIRTH_TYPE_PATTERNS,
    UN_BIRTH_YEAR_PATTERNS,
    UN_BIRTH_YEAR_TOKENS,
)
from sanctions_mapper.fields import Exact, Fuzzy, clean_text, first_success, locate, locate_exact
from sanctions_mapper.models import (
    BirthDate,
    BirthDateType,
    DateRecord,
    DeathInfo,
    DeathType,
    ExtractionResult,
    FieldMap,
    ListingDateInfo,
)
from sanctions_mapper.reporting import ExtractionReporter, degrades_to, resolve

COMPONENT = "dates"

YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

_MONTHS = "january|february|march|april|may|june|july|august|september|october|november|december"
DATE_TOKEN_RES = (
    re.compile(rf"\b(?:\d{{1,2}}\s+)?(?:{_MONTHS})\s+(?:\d{{1,2}},?\s+)?\d{{4}}\b", re.IGNORECASE),
    re.compile(r"\b\d{1,2}[-/]\d{1,2}[-/]\d{4}\b"),
    re.compile(r"\b\d{4}\b"),
)

DEATH_RES = (
    re.compile(r"\bdied?\s+in\s+", re.IGNORECASE),
    re.compile(r"\bconfirmed\s+to\s+have\s+died\s+in\s+", re.IGNORECASE),
    re.compile(r"\bdeath\s+in\s+", re.IGNORECASE),
    re.compile(r"\bdeceased\s+in\s+", re.IGNORECASE),
)
# A full stop ends a sentence unless it closes a short abbreviation such as "St.".
_SENTENCE_END = re.compile(r"(?<!\b[A-Z])(?<!\b[A-Z][a-z])\.(?=\s+[A-Z]|\s*$)")
_LOCATION_TRAILER = re.compile(r"^\s*(?:location|place)\s*:\s*(.+)", re.IGNORECASE)
_LOCATION_LABEL = re.compile(r"^\s*(?:location|place)\s*:\s*", re.IGNORECASE)
_DANGLING = re.compile(r"^\s*(?:in|at|on)\b\s*|\s*\b(?:in|at|on)\s*$", re.IGNORECASE)

_MULTI_DATE_SPLIT = re.compile(r"[,;|]")


def _not_ofac_flag(key: str) -> bool:
    lowered = key.lower()
    return lowered.endswith("mainentry") or lowered.endswith("uid")


# ------------------------------------------------------------------
# Text helpers
# ------------------------------------------------------------------
def extract_year(text: Optional[str]) -> Optional[int]:
    if not text:
        return None
    match = YEAR_RE.search(text)
    return int(match.group(0)) if match else None


def extract_date_token(text: str) -> str:
    for pattern in DATE_TOKEN_RES:
        match = pattern.search(text)
        if match:
            return match.group(0).strip()
    return ""


def strip_date_tokens(text: str) -> str:
    for pattern in DATE_TOKEN_RES:
        text = pattern.sub("", text)
    previous = None
    while previous != text:
        previous = text
        text = _LOCATION_LABEL.sub("", text)
        text = _DANGLING.sub("", text)
        text = text.strip(" \t,.;:-")
    return re.sub(r"\s{2,}", " ", text)


def split_dates(value: str) -> List[str]:
    parts = [part.strip() for part in _MULTI_DATE_SPLIT.split(value)]
    return [part for part in parts if part] or [value]


def indexed_variants(field_map: FieldMap, key: str) -> List[str]:
    """Keys equal to ``key`` up to the ``_<n>`` occurrence markers added when flattening."""

    segments = [re.escape(segment) for segment in key.split("_")]
    pattern = re.compile(r"(?:_\d+)?_".join(segments) + r"(?:_\d+)?")
    return [candidate for candidate in field_map if pattern.fullmatch(candidate)]


# ------------------------------------------------------------------
# Birth dates
# ------------------------------------------------------------------
def _main_entry_key(date_key: str) -> str:
    prefix, _, _ = date_key.rpartition("_")
    return f"{prefix}_mainEntry" if prefix else "mainEntry"


def _ofac_birth_dates(field_map: FieldMap) -> List[BirthDate]:
    hit = locate(field_map, OFAC_BIRTH_PATTERNS, exclude=_not_ofac_flag)
    if not hit.found:
        return []

    results = []
    for key in indexed_variants(field_map, hit.source_field) or [hit.source_field]:
        value = clean_text(field_map.get(key))
        if not value:
            continue
        flag = clean_text(field_map.get(_main_entry_key(key)))
        if flag is None and key == hit.source_field:
            flag = locate_exact(field_map, OFAC_MAIN_ENTRY_PATTERNS).value
        results.append(
            BirthDate(
                date=value,
                type=BirthDateType.EXACT,
                year=extract_year(value),
                is_main_entry=(flag or "").lower() == "true",
                source_field=key,
            )
        )
    return results


def _un_birth_date(field_map: FieldMap) -> Optional[BirthDate]:
    kind = locate(field_map, UN_BIRTH_TYPE_PATTERNS)
    year, _ = first_success(
        (Fuzzy("year", UN_BIRTH_YEAR_PATTERNS), Exact("year", UN_BIRTH_YEAR_TOKENS)), field_map
    )
    date, _ = first_success(
        (Fuzzy("date", UN_BIRTH_DATE_PATTERNS), Exact("date", UN_BIRTH_DATE_TOKENS)), field_map
    )
    if not (year.found or date.found):
        return None

    label = BIRTH_TYPE_LABELS.get(kind.value.upper(), BirthDateType.UNKNOWN.value) if kind.found else "UNKNOWN"
    return BirthDate(
        date=date.value or year.value,
        type=BirthDateType(label),
        year=extract_year(year.value) or extract_year(date.value),
        is_main_entry=True,
        source_field=", ".join(hit.source_field for hit in (kind, year, date) if hit.found),
    )


def _eu_birth_date(field_map: FieldMap) -> Optional[BirthDate]:
    hit, _ = first_success(
        (Fuzzy("remark", EU_BIRTH_REMARK_PATTERNS), Exact("remark", EU_BIRTH_REMARK_TOKENS)), field_map
    )
    if not hit.found:
        return None
    return BirthDate(date=hit.value, type=BirthDateType.REMARK, year=extract_year(hit.value), source_field=hit.source_field)


def _generic_birth_date(field_map: FieldMap) -> Optional[BirthDate]:
    for pattern in GENERIC_BIRTH_PATTERNS:
        hit = locate(field_map, (pattern,))
        if hit.found:
            return BirthDate(date=hit.value, year=extract_year(hit.value), source_field=hit.source_field)
    return None


def extract_birth_dates(field_map: FieldMap) -> List[BirthDate]:
    birth_dates = _ofac_birth_dates(field_map)
    for dialect in (_un_birth_date, _eu_birth_date):
        found = dialect(field_map)
        if found is not None:
            birth_dates.append(found)
    if not birth_dates:
        generic = _generic_birth_date(field_map)
        if generic is not None:
            birth_dates.append(generic)
    return birth_dates


# ------------------------------------------------------------------
# Death dates
# ------------------------------------------------------------------
def _first_sentence(text: str) -> Tuple[str, str]:
    """Split ``text`` after its first sentence; the full stop itself is dropped."""

    match = _SENTENCE_END.search(text)
    if not match:
        return text, ""
    return text[:match.start()], text[match.end():]


def parse_death_remark(remark: str, source_field: str = "") -> Optional[DeathInfo]:
    """Mine a death date and place from a free-text remark, or return None."""

    if not remark:
        return None

    for pattern in DEATH_RES:
        match = pattern.search(remark)
        if not match:
            continue

        body, after = _first_sentence(remark[match.end():])
        trailer = _LOCATION_TRAILER.match(_first_sentence(after)[0])

        location = strip_date_tokens(body)
        if trailer:
            location = trailer.group(1).strip()
        kind = DeathType.REPORTED if "reported" in remark.lower() else DeathType.CONFIRMED
        return DeathInfo(date=extract_date_token(body), type=kind, location=location, source_field=source_field)
    return None


def extract_death_date(field_map: FieldMap) -> Optional[DeathInfo]:
    for pattern in REMARK_PATTERNS:
        hit = locate(field_map, (pattern,))
        if not hit.found:
            continue
        death = parse_death_remark(hit.value, hit.source_field)
        if death is not None:
            return death
    return None


# ------------------------------------------------------------------
# Listing dates
# ------------------------------------------------------------------
def _last_updated(field_map: FieldMap, hit: ExtractionResult) -> Tuple[List[str], List[str]]:
    dates: List[str] = []
    keys: List[str] = []
    for key in indexed_variants(field_map, hit.source_field) or [hit.source_field]:
        value = clean_text(field_map.get(key))
        if not value:
            continue
        keys.append(key)
        dates.extend(date for date in split_dates(value) if date not in dates)
    return dates, keys


def extract_listing_dates(field_map: FieldMap) -> Optional[ListingDateInfo]:
    source_fields: List[str] = []

    listed_on = locate(field_map, LISTED_ON_PATTERNS)
    if listed_on.found:
        source_fields.append(listed_on.source_field)

    last_updated: List[str] = []
    updated = locate(field_map, LAST_UPDATED_PATTERNS)
    if updated.found:
        last_updated, keys = _last_updated(field_map, updated)
        source_fields.extend(keys)

    effective = locate(field_map, EFFECTIVE_DATE_PATTERNS)
    if effective.found:
        source_fields.append(effective.source_field)

    if not source_fields:
        return None
    return ListingDateInfo(
        listed_on=listed_on.value,
        last_updated=tuple(last_updated),
        effective_date=effective.value,
        source_fields=tuple(source_fields),
    )


@degrades_to(DateRecord)
def extract_dates(field_map: FieldMap, *, reporter: Optional[ExtractionReporter] = None) -> DateRecord:
    """Return all birth, death and listing dates found in the record."""

    reporter = resolve(reporter)

    birth_dates = extract_birth_dates(field_map)
    death = extract_death_date(field_map)
    listing = extract_listing_dates(field_map)

    source_fields: List[str] = [birth.source_field for birth in birth_dates]
    if death is not None:
        source_fields.append(death.source_field)
        reporter.found(COMPONENT, death.date, death.source_field)
    if listing is not None:
        source_fields.extend(listing.source_fields)
    if not source_fields:
        reporter.not_found(COMPONENT)

    return DateRecord(
        birth_dates=tuple(birth_dates),
        death_date=death,
        listing_dates=(listing,) if listing is not None else (),
        source_fields=tuple(source_fields),
    )
