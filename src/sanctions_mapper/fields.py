"""Field lookup primitives shared by every normalizer.

A field-map is the flattened ``{key: value}`` view of one record. Lookups walk
an ordered list of candidate key names and return the first non-blank value;
ordering in both the pattern list and the map decides ties.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Tuple

from sanctions_mapper.models import NO_SOURCE, ExtractionResult, FieldMap

KeyPredicate = Callable[[str], bool]

MISSING = ExtractionResult()


def clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def locate(
    field_map: FieldMap,
    patterns: Iterable[str],
    *,
    substring: bool = True,
    exclude: Optional[KeyPredicate] = None,
) -> ExtractionResult:
    """Return the first non-blank field matching ``patterns``.

    Each pattern is tried in turn: an exact case-insensitive key match first,
    then (when ``substring`` is set) the first key containing the pattern.
    Keys rejected by ``exclude`` are never considered.
    """

    keys = [key for key in field_map if exclude is None or not exclude(key)]
    for pattern in patterns:
        lowered = pattern.lower()
        for key in keys:
            if key.lower() == lowered:
                value = clean_text(field_map[key])
                if value:
                    return ExtractionResult(value, key)
        if not substring:
            continue
        for key in keys:
            if lowered in key.lower():
                value = clean_text(field_map[key])
                if value:
                    return ExtractionResult(value, key)
    return MISSING


def locate_exact(field_map: FieldMap, patterns: Iterable[str], *, ignore_case: bool = False) -> ExtractionResult:
    """Return the first pattern present verbatim as a key with a non-blank value."""

    lowered = {key.lower(): key for key in reversed(list(field_map))} if ignore_case else {}
    for pattern in patterns:
        key = lowered.get(pattern.lower()) if ignore_case else pattern
        if key is None or key not in field_map:
            continue
        value = clean_text(field_map[key])
        if value:
            return ExtractionResult(value, key)
    return MISSING


def scan_keys(field_map: FieldMap, terms: Iterable[str]) -> ExtractionResult:
    """Return the first non-blank field whose lower-cased key contains any of ``terms``."""

    terms = tuple(term.lower() for term in terms)
    for key, raw in field_map.items():
        lowered = key.lower()
        if any(term in lowered for term in terms):
            value = clean_text(raw)
            if value:
                return ExtractionResult(value, key)
    return MISSING


# ------------------------------------------------------------------
# Strategy ladders
# ------------------------------------------------------------------
@dataclass(frozen=True)
class Exact:
    tag: str
    patterns: Tuple[str, ...]
    ignore_case: bool = False

    def __call__(self, field_map: FieldMap) -> ExtractionResult:
        return locate_exact(field_map, self.patterns, ignore_case=self.ignore_case)


@dataclass(frozen=True)
class Fuzzy:
    tag: str
    patterns: Tuple[str, ...]
    exclude: Optional[KeyPredicate] = None

    def __call__(self, field_map: FieldMap) -> ExtractionResult:
        return locate(field_map, self.patterns, exclude=self.exclude)


@dataclass(frozen=True)
class KeyScan:
    tag: str
    terms: Tuple[str, ...]

    def __call__(self, field_map: FieldMap) -> ExtractionResult:
        return scan_keys(field_map, self.terms)


Strategy = Callable[[FieldMap], ExtractionResult]


def first_success(strategies: Sequence, field_map: FieldMap) -> Tuple[ExtractionResult, Optional[str]]:
    """Evaluate ``strategies`` in order; return the first hit and its tag."""

    for strategy in strategies:
        result = strategy(field_map)
        if result.found:
            return result, getattr(strategy, "tag", None)
    return MISSING, None


__all__ = [
    "Exact",
    "Fuzzy",
    "KeyScan",
    "MISSING",
    "NO_SOURCE",
    "clean_text",
    "first_success",
    "locate",
    "locate_exact",
    "scan_keys",
]
