"""Alternate names (a.k.a., f.k.a., EU name aliases).

Four dialects are tried in a fixed order and the first one that yields at
least one alias wins:

* ``OFAC_AKALIST`` - ``akaList_aka_*`` blocks with name parts, type and category
* ``CANADIAN_ALIASES`` - a single ``Aliases`` field holding several names
* ``EU_NAME_ALIAS`` - ``nameAlias`` blocks carrying a ``wholeName``
* ``GENERIC_ALIAS`` - known-as / pseudonym style fields
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence, Tuple

from sanctions_mapper.config.field_patterns import (
    AKA_CATEGORY,
    AKA_FIRST_NAME,
    AKA_LAST_NAME,
    AKA_LIST_MARKER,
    AKA_MIDDLE_NAME,
    AKA_PREFIX,
    AKA_TYPE,
    AKA_UID,
    AKA_WHOLE_NAME,
    ALIAS_DELIMITERS,
    ALIAS_LIST_FIELDS,
    GENERIC_ALIAS_FIELDS,
    NAME_ALIAS_LEAVES,
    NAME_ALIAS_PLACEHOLDER,
    NAME_ALIAS_STRENGTH,
    NAME_ALIAS_TERMS,
    WEAK_CATEGORY_TERMS,
)
from sanctions_mapper.fields import clean_text
from sanctions_mapper.models import AliasExtractionResult, AliasRecord, AliasSourceType, FieldMap
from sanctions_mapper.reporting import ExtractionReporter, degrades_to, resolve

COMPONENT = "aliases"
NO_ALIAS_SOURCE = "No aliases found"

_TRAILING_INDEX = re.compile(r"_(\d+)$")


def normalize_category(value: Optional[str]) -> str:
    if not value:
        return "strong"
    lowered = value.strip().lower()
    return "weak" if any(term in lowered for term in WEAK_CATEGORY_TERMS) else "strong"


def split_aliases(value: str) -> List[str]:
    """Split on the first delimiter present, trying ``;`` then ``|`` then line breaks."""

    for delimiter in ALIAS_DELIMITERS:
        if delimiter in value:
            parts = [part.strip() for part in value.split(delimiter)]
            return [part for part in parts if part]
    return [value.strip()] if value.strip() else []


def _sub_field(group: Dict[str, str], patterns: Sequence[str]) -> str:
    for pattern in patterns:
        for key, value in group.items():
            leaf = _TRAILING_INDEX.sub("", key)
            if leaf == pattern or leaf.endswith("_" + pattern):
                return value
    return ""


# ------------------------------------------------------------------
# OFAC aka blocks
# ------------------------------------------------------------------
def _aka_group_key(key: str) -> str:
    """``akaList_aka_2_lastName`` -> ``akaList_aka_2``; ``aka_lastName_3`` -> ``aka#3``."""

    match = _TRAILING_INDEX.search(key)
    if match:
        stem = key[: match.start()]
        return f"{stem.rpartition('_')[0]}#{match.group(1)}"
    return key.rpartition("_")[0]


def group_aka_fields(field_map: FieldMap) -> List[Dict[str, str]]:
    groups: Dict[str, Dict[str, str]] = {}
    for key, raw in field_map.items():
        if AKA_LIST_MARKER not in key and not key.startswith(AKA_PREFIX):
            continue
        value = clean_text(raw)
        if value:
            groups.setdefault(_aka_group_key(key), {})[key] = value

    merged: List[Dict[str, str]] = []
    by_uid: Dict[str, Dict[str, str]] = {}
    for group in groups.values():
        uid = _sub_field(group, AKA_UID)
        if uid and uid in by_uid:
            by_uid[uid].update(group)
            continue
        merged.append(group)
        if uid:
            by_uid[uid] = group
    return merged


def _aka_alias(group: Dict[str, str]) -> Optional[AliasRecord]:
    first = _sub_field(group, AKA_FIRST_NAME)
    middle = _sub_field(group, AKA_MIDDLE_NAME)
    last = _sub_field(group, AKA_LAST_NAME)
    full_name = " ".join(part for part in (first, middle, last) if part)
    if not (first or last):
        full_name = _sub_field(group, AKA_WHOLE_NAME)
    if not full_name:
        return None
    return AliasRecord(
        full_name=full_name,
        first_name=first,
        middle_name=middle,
        last_name=last,
        alias_type=_sub_field(group, AKA_TYPE) or "a.k.a.",
        category=normalize_category(_sub_field(group, AKA_CATEGORY)),
        source_field=", ".join(group),
    )


def _ofac_aliases(field_map: FieldMap) -> Tuple[List[AliasRecord], List[str]]:
    aliases: List[AliasRecord] = []
    sources: List[str] = []
    for group in group_aka_fields(field_map):
        alias = _aka_alias(group)
        if alias is not None:
            aliases.append(alias)
            sources.extend(key for key in group if key not in sources)
    return aliases, sources


# ------------------------------------------------------------------
# Single-field dialects
# ------------------------------------------------------------------
def _list_aliases(field_map: FieldMap) -> Tuple[List[AliasRecord], List[str]]:
    aliases: List[AliasRecord] = []
    sources: List[str] = []
    for key, raw in field_map.items():
        if key.lower() not in ALIAS_LIST_FIELDS:
            continue
        value = clean_text(raw)
        if not value:
            continue
        aliases.extend(AliasRecord(full_name=name, source_field=key) for name in split_aliases(value))
        sources.append(key)
    return aliases, sources


def _strength(field_map: FieldMap, key: str) -> str:
    """Category from a ``strong``/``quality`` field next to the alias or one block up."""

    lowered = {name.lower(): value for name, value in field_map.items()}
    prefix = key.rpartition("_")[0]
    for _ in range(2):
        for name in NAME_ALIAS_STRENGTH:
            flag = clean_text(lowered.get(f"{prefix}_{name}".lower() if prefix else name))
            if flag is None:
                continue
            if name == "strong":
                return "strong" if flag.lower() == "true" else "weak"
            return normalize_category(flag)
        if not prefix:
            break
        prefix = prefix.rpartition("_")[0]
    return "strong"


def _is_name_alias_key(key: str) -> bool:
    normalized = key.replace("_", "").lower()
    if not any(term in normalized for term in NAME_ALIAS_TERMS):
        return False
    return any(normalized.endswith(leaf) for leaf in NAME_ALIAS_TERMS + NAME_ALIAS_LEAVES)


def _eu_aliases(field_map: FieldMap) -> Tuple[List[AliasRecord], List[str]]:
    aliases: List[AliasRecord] = []
    sources: List[str] = []
    for key, raw in field_map.items():
        if not _is_name_alias_key(key):
            continue
        value = clean_text(raw)
        if not value or value.lower() == NAME_ALIAS_PLACEHOLDER:
            continue
        aliases.append(
            AliasRecord(full_name=value, alias_type="nameAlias", category=_strength(field_map, key), source_field=key)
        )
        sources.append(key)
    return aliases, sources


def _generic_aliases(field_map: FieldMap) -> Tuple[List[AliasRecord], List[str]]:
    aliases: List[AliasRecord] = []
    sources: List[str] = []
    for key in GENERIC_ALIAS_FIELDS:
        value = clean_text(field_map.get(key))
        if value:
            aliases.append(AliasRecord(full_name=value, alias_type="generic", source_field=key))
            sources.append(key)
    return aliases, sources


DIALECTS = (
    (AliasSourceType.OFAC_AKALIST, _ofac_aliases),
    (AliasSourceType.CANADIAN_ALIASES, _list_aliases),
    (AliasSourceType.EU_NAME_ALIAS, _eu_aliases),
    (AliasSourceType.GENERIC_ALIAS, _generic_aliases),
)


def _none_found() -> AliasExtractionResult:
    return AliasExtractionResult(source_fields=(NO_ALIAS_SOURCE,))


@degrades_to(_none_found)
def extract_aliases(field_map: FieldMap, *, reporter: Optional[ExtractionReporter] = None) -> AliasExtractionResult:
    """Return the aliases of the first dialect that has any."""

    reporter = resolve(reporter)
    for source_type, dialect in DIALECTS:
        aliases, sources = dialect(field_map)
        if aliases:
            reporter.found(COMPONENT, f"{len(aliases)} aliases", source_type.value)
            return AliasExtractionResult(tuple(aliases), source_type, tuple(sources))

    reporter.not_found(COMPONENT)
    return _none_found()
