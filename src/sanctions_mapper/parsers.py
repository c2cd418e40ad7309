"""Turn a source file into a list of field-maps, picking the reader by extension."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Callable, Dict, List

try:  # Prefer lxml for speed; fall back to stdlib if unavailable.
    from lxml import etree as ET  # type: ignore

    LXML_AVAILABLE = True
except ImportError:  # pragma: no cover - executed only when lxml missing.
    import xml.etree.ElementTree as ET  # type: ignore

    LXML_AVAILABLE = False

from openpyxl import load_workbook

from sanctions_mapper.discovery import discover_records
from sanctions_mapper.models import FieldMap


def _cell_text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _column_names(header: List[str]) -> List[str]:
    """Number repeated header names from the second one on (``col``, ``col_2``)."""

    names: List[str] = []
    used = set()
    for name in header:
        candidate = name
        suffix = 1
        while candidate and candidate in used:
            suffix += 1
            candidate = f"{name}_{suffix}"
        used.add(candidate)
        names.append(candidate)
    return names


def _rows_to_records(header: List[str], rows) -> List[FieldMap]:
    header = _column_names(header)
    records: List[FieldMap] = []
    for row in rows:
        record = {name: _cell_text(value) for name, value in zip(header, row) if name}
        if any(record.values()):
            records.append(record)
    return records


def parse_xml(path: Path) -> List[FieldMap]:
    parser = None
    if LXML_AVAILABLE:
        parser = ET.XMLParser(resolve_entities=False, remove_comments=True)
    elif hasattr(ET, "XMLParser"):
        parser = ET.XMLParser()

    try:
        tree = ET.parse(str(path), parser=parser) if parser is not None else ET.parse(str(path))
    except ET.ParseError as exc:
        logging.error("Could not parse %s: %s", path, exc)
        return []
    return discover_records(tree.getroot())


def parse_csv(path: Path) -> List[FieldMap]:
    with path.open("r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.reader(handle)
        header = [_cell_text(name) for name in next(reader, [])]
        return _rows_to_records(header, reader)


def parse_excel(path: Path) -> List[FieldMap]:
    workbook = load_workbook(filename=str(path), read_only=True, data_only=True)
    try:
        rows = workbook.active.iter_rows(values_only=True)
        header = [_cell_text(name) for name in next(rows, ())]
        return _rows_to_records(header, rows)
    finally:
        workbook.close()


PARSERS: Dict[str, Callable[[Path], List[FieldMap]]] = {
    ".xml": parse_xml,
    ".csv": parse_csv,
    ".xlsx": parse_excel,
}


def parse_any_file(path: Path, *, limit: int = 0) -> List[FieldMap]:
    """Parse ``path`` into field-maps; ``limit`` of 0 keeps every record."""

    path = Path(path)
    parser = PARSERS.get(path.suffix.lower())
    if parser is None:
        logging.error("Unsupported file type %s for %s", path.suffix or "(none)", path)
        return []

    records = parser(path)
    if limit > 0:
        records = records[:limit]
    logging.info("Parsed %s records from %s", f"{len(records):,}", path.name)
    return records
