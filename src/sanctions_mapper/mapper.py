#!/usr/bin/env python3
"""Sanctions list → canonical profile JSON transformer.

Reads OFAC, UN, EU and similar sanctions publications in XML (or CSV / Excel
exports), discovers the repeating record element without any per-publisher
configuration, normalizes every record and writes one ``<stem>.json`` document
per input file.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from sanctions_mapper.assembler import build_document, build_profile
from sanctions_mapper.models import FieldMap
from sanctions_mapper.parsers import parse_any_file
from sanctions_mapper.reporting import ExtractionReporter


class SanctionsListMapper:
    """Map one sanctions list file to canonical profiles."""

    def __init__(self, *, limit: int = 0, reporter: Optional[ExtractionReporter] = None) -> None:
        self.limit = limit
        self.reporter = reporter

        self.source_path: Optional[Path] = None
        self.records: Optional[List[FieldMap]] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def load(self, source_path: Path) -> int:
        """Parse the source file; returns the number of records discovered."""

        self.source_path = Path(source_path)
        self.records = parse_any_file(self.source_path, limit=self.limit)
        return len(self.records)

    def profiles(self) -> List[Dict[str, object]]:
        if self.records is None or self.source_path is None:
            raise RuntimeError("Mapper not initialized; call load() first")
        return [build_profile(record, self.source_path.name, reporter=self.reporter) for record in self.records]

    def transform(self, *, output_json: Path) -> Dict[str, int]:
        """Write the profile document, returning processing statistics."""

        if self.records is None:
            raise RuntimeError("Mapper not initialized; call load() first")

        start_time = datetime.now()
        profiles = self.profiles()

        stats = {
            "processed": len(self.records),
            "emitted": len(profiles),
            "aliases": sum(len(profile["aliases"]) for profile in profiles),
            "addresses": sum(len(profile["addresses"]) for profile in profiles),
            "identifiers": sum(len(profile["identifiers"]) for profile in profiles),
            "deceased": sum(1 for profile in profiles if profile["isDeceased"]),
        }

        output_json.parent.mkdir(parents=True, exist_ok=True)
        with output_json.open("w", encoding="utf-8") as json_file:
            json.dump(build_document(profiles), json_file, ensure_ascii=False, indent=2)

        duration = datetime.now() - start_time
        logging.info(
            "Completed %s records in %s (emitted %s profiles to %s)",
            f"{stats['processed']:,}",
            str(duration).split(".")[0],
            f"{stats['emitted']:,}",
            output_json,
        )

        return stats


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Normalize sanctions list files into canonical profile JSON",
    )
    parser.add_argument("input_files", type=Path, nargs="+", help="XML, CSV or XLSX sanctions list files")
    parser.add_argument(
        "--output-dir",
        dest="output_dir",
        type=Path,
        default=Path("output"),
        help="Directory for <name>.json output files (default: output)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=0,
        help="Maximum records per file; 0 processes all (default: 0)",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="[%(levelname)s] %(message)s",
    )

    succeeded = 0
    failed: List[str] = []

    for index, input_file in enumerate(args.input_files, start=1):
        logging.info("Processing file %s/%s: %s", index, len(args.input_files), input_file)

        if not input_file.exists():
            logging.error("File not found: %s", input_file)
            failed.append(f"{input_file.name} (file not found)")
            continue

        mapper = SanctionsListMapper(limit=args.limit)
        try:
            if mapper.load(input_file) == 0:
                logging.error("No records found in %s", input_file.name)
                failed.append(f"{input_file.name} (no records found)")
                continue
            stats = mapper.transform(output_json=args.output_dir / f"{input_file.stem}.json")
        except Exception as exc:
            logging.exception("Error processing %s", input_file.name)
            failed.append(f"{input_file.name} (error: {exc})")
            continue

        succeeded += 1
        logging.info(
            "Emitted %s profiles with %s aliases, %s addresses and %s identifiers",
            f"{stats['emitted']:,}",
            f"{stats['aliases']:,}",
            f"{stats['addresses']:,}",
            f"{stats['identifiers']:,}",
        )

    logging.info("Processed %s of %s files successfully", succeeded, len(args.input_files))
    for failure in failed:
        logging.warning("Failed: %s", failure)

    return 0 if not failed else 1


if __name__ == "__main__":  # pragma: no cover - CLI entry point.
    sys.exit(main())
