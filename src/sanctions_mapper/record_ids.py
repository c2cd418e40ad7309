"""Record identifiers: the publisher's own id plus a stable content hash."""

from __future__ import annotations

import hashlib
import logging
import uuid
from dataclasses import dataclass
from pathlib import Path

from sanctions_mapper.config.field_patterns import SYSTEM_ID_COMPOUNDS, SYSTEM_ID_FIELDS
from sanctions_mapper.fields import Exact, Fuzzy, first_success
from sanctions_mapper.models import ExtractionResult, FieldMap

NO_SYSTEM_ID = "No original system ID found"
HASH_SOURCE = "Generated from record content"
FALLBACK_SOURCE = "Generated GUID (hash failed)"

SYSTEM_ID_LADDER = (
    Exact("system_id", SYSTEM_ID_FIELDS, ignore_case=True),
    Fuzzy("system_id", SYSTEM_ID_COMPOUNDS),
)


@dataclass(frozen=True)
class RecordId:
    original_id: str
    original_source: str
    content_hash: str
    hash_source: str


def find_original_system_id(field_map: FieldMap) -> ExtractionResult:
    """Return the publisher-assigned id (``uid``, ``DATAID``, ``logicalId``...), if any."""

    result, _ = first_success(SYSTEM_ID_LADDER, field_map)
    if result.found:
        logging.debug("Found original system id %s in %s", result.value, result.source_field)
        return result
    return ExtractionResult("", NO_SYSTEM_ID)


def hash_input(field_map: FieldMap, file_name: str) -> str:
    parts = [f"SOURCE:{Path(file_name).stem}"]
    parts.extend(f"{key}:{value}" for key, value in sorted(field_map.items()) if value and value.strip())
    return "|".join(parts)


def content_hash(field_map: FieldMap, file_name: str) -> ExtractionResult:
    """MD5 of the source name and every non-blank field, as upper-case hex.

    Identical ``(file_name, field_map)`` pairs always hash identically. If
    hashing fails a random id is returned instead.
    """

    try:
        digest = hashlib.md5(hash_input(field_map, file_name).encode("utf-8")).hexdigest().upper()
    except Exception:
        logging.exception("Content hash failed for record from %s; using a random id", file_name)
        return ExtractionResult(uuid.uuid4().hex.upper(), FALLBACK_SOURCE)
    return ExtractionResult(digest, HASH_SOURCE)


def record_id(field_map: FieldMap, file_name: str) -> RecordId:
    original = find_original_system_id(field_map)
    generated = content_hash(field_map, file_name)
    return RecordId(original.value, original.source_field, generated.value, generated.source_field)
