"""Postal address normalization.

Address fields are first grouped by the index or uid embedded in their keys
(``address1``/``city1``, ``addressList_address_2_city``). Every group with at
least two fields becomes one structured address. When nothing groups, the
components are searched across the whole record instead, and a single
free-text address field is the last resort.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Set, Tuple

from sanctions_mapper.config.field_patterns import (
    ADDRESS_CITY_PATTERNS,
    ADDRESS_COUNTRY_PATTERNS,
    ADDRESS_EXCLUDED_TERMS,
    ADDRESS_KEY_TERMS,
    ADDRESS_LINE1_PATTERNS,
    ADDRESS_LINE2_PATTERNS,
    ADDRESS_POSTAL_PATTERNS,
    ADDRESS_REGION_PATTERNS,
    FREE_TEXT_ADDRESS_PATTERNS,
    NO_ADDRESS_SOURCE,
    SINGLE_LINE1_PATTERNS,
)
from sanctions_mapper.fields import clean_text
from sanctions_mapper.models import AddressRecord, AddressType, FieldMap
from sanctions_mapper.reporting import ExtractionReporter, degrades_to, resolve

COMPONENT = "addresses"
DEFAULT_GROUP = "default"

_TRAILING_INDEX = re.compile(r"(\d+)$")
_UID_INDEX = re.compile(r"uid_?(\d+)", re.IGNORECASE)
_INNER_INDEX = re.compile(r"_(\d+)_")


def _is_excluded(key: str) -> bool:
    lowered = key.lower()
    return any(term in lowered for term in ADDRESS_EXCLUDED_TERMS)


def is_address_key(key: str) -> bool:
    if _is_excluded(key):
        return False
    return any(term in key.lower() for term in ADDRESS_KEY_TERMS)


def group_key(key: str) -> str:
    """Derive the address group a key belongs to."""

    match = _TRAILING_INDEX.search(key)
    if match:
        return f"group_{match.group(1)}"
    match = _UID_INDEX.search(key)
    if match:
        return f"uid_{match.group(1)}"
    match = _INNER_INDEX.search(key)
    if match:
        return f"index_{match.group(1)}"
    return DEFAULT_GROUP


def group_address_fields(field_map: FieldMap) -> Dict[str, Dict[str, str]]:
    """Group non-blank address fields; groups with a single field are dropped."""

    groups: Dict[str, Dict[str, str]] = {}
    for key, raw in field_map.items():
        value = clean_text(raw)
        if not value or not is_address_key(key):
            continue
        groups.setdefault(group_key(key), {})[key] = value
    return {name: fields for name, fields in groups.items() if len(fields) > 1}


def _pick(fields: Dict[str, str], patterns: Sequence[str], consumed: Set[str]) -> Tuple[str, Optional[str]]:
    for pattern in patterns:
        lowered = pattern.lower()
        for key, value in fields.items():
            if key in consumed or lowered not in key.lower():
                continue
            consumed.add(key)
            return value, key
    return "", None


def _components(fields: Dict[str, str], line1_patterns: Sequence[str]) -> Tuple[Dict[str, str], List[str]]:
    consumed: Set[str] = set()
    used: List[str] = []
    found: Dict[str, str] = {}
    for name, patterns in (
        ("line1", line1_patterns),
        ("line2", ADDRESS_LINE2_PATTERNS),
        ("city", ADDRESS_CITY_PATTERNS),
        ("region", ADDRESS_REGION_PATTERNS),
        ("country", ADDRESS_COUNTRY_PATTERNS),
        ("postal_code", ADDRESS_POSTAL_PATTERNS),
    ):
        value, key = _pick(fields, patterns, consumed)
        found[name] = value
        if key is not None:
            used.append(key)
    return found, used


def join_address(line1: str = "", line2: str = "", city: str = "", region: str = "", postal_code: str = "",
                 country: str = "") -> str:
    return ", ".join(part for part in (line1, line2, city, region, postal_code, country) if part)


def _from_components(found: Dict[str, str], address_type: AddressType, source_fields: Sequence[str]) -> AddressRecord:
    return AddressRecord(
        full_address=join_address(
            found["line1"], found["line2"], found["city"], found["region"], found["postal_code"], found["country"]
        ),
        address_type=address_type,
        source_fields=tuple(source_fields),
        **found,
    )


def _list_addresses(field_map: FieldMap, grouped: Set[str]) -> List[AddressRecord]:
    addresses = []
    for key, raw in field_map.items():
        lowered = key.lower()
        if key in grouped or not lowered.endswith("list") or "address" not in lowered:
            continue
        value = clean_text(raw)
        if value:
            addresses.append(AddressRecord(full_address=value, address_type=AddressType.LIST, source_fields=(key,)))
    return addresses


@degrades_to(list)
def extract_addresses(field_map: FieldMap) -> List[AddressRecord]:
    """Return every grouped address in record order."""

    addresses: List[AddressRecord] = []
    grouped: Set[str] = set()
    for fields in group_address_fields(field_map).values():
        grouped.update(fields)
        found, _ = _components(fields, ADDRESS_LINE1_PATTERNS)
        if not any(found.values()):
            continue
        addresses.append(_from_components(found, AddressType.STRUCTURED, list(fields)))
    addresses.extend(_list_addresses(field_map, grouped))
    return addresses


def extract_single_address(field_map: FieldMap) -> AddressRecord:
    """Search the whole record for address components, then for one free-text field."""

    fields = {key: value.strip() for key, value in field_map.items() if clean_text(value) and not _is_excluded(key)}

    found, used = _components(fields, SINGLE_LINE1_PATTERNS)
    if any(found.values()):
        return _from_components(found, AddressType.COMPONENTS, used)

    free_text, key = _pick(fields, FREE_TEXT_ADDRESS_PATTERNS, set())
    if free_text:
        return AddressRecord(full_address=free_text, address_type=AddressType.FULL, source_fields=(key,))

    return AddressRecord(source_fields=(NO_ADDRESS_SOURCE,))


def _empty() -> AddressRecord:
    return AddressRecord(source_fields=(NO_ADDRESS_SOURCE,))


@degrades_to(_empty)
def extract_address(field_map: FieldMap, *, reporter: Optional[ExtractionReporter] = None) -> AddressRecord:
    """Return the primary address of the record.

    When several grouped addresses exist, the first one is returned and its
    ``source_fields`` start with ``"Multiple addresses found (N)"``; call
    :func:`extract_addresses` to get all of them.
    """

    reporter = resolve(reporter)

    addresses = extract_addresses(field_map)
    if addresses:
        primary = addresses[0]
        note = f"Multiple addresses found ({len(addresses)})"
        reporter.found(COMPONENT, primary.full_address, note)
        return replace(primary, source_fields=(note,) + primary.source_fields)

    address = extract_single_address(field_map)
    if address.source_fields == (NO_ADDRESS_SOURCE,):
        reporter.not_found(COMPONENT)
    else:
        reporter.found(COMPONENT, address.full_address, ", ".join(address.source_fields))
    return address
