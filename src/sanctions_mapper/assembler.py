"""Build the canonical profile document from one field-map."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from sanctions_mapper.addresses import extract_address
from sanctions_mapper.aliases import extract_aliases
from sanctions_mapper.classification import classify
from sanctions_mapper.dates import extract_dates
from sanctions_mapper.identifiers import extract_identifiers
from sanctions_mapper.models import AddressRecord, DateRecord, FieldMap, RecordType
from sanctions_mapper.names import extract_name
from sanctions_mapper.record_ids import record_id
from sanctions_mapper.relations import clean_relational_name, extract_relational_name
from sanctions_mapper.reporting import ExtractionReporter


def _address_entries(address: AddressRecord) -> List[Dict[str, str]]:
    if address.is_empty:
        return []
    return [
        {
            "addressType": address.address_type.value,
            "line1": address.line1,
            "line2": address.line2,
            "postcode": address.postal_code,
            "districtTown": "",
            "city": address.city,
            "county": address.region,
            "countyAbbrev": "",
            "country": address.country,
            "countryIsoCode": "",
        }
    ]


def _date_entries(dates: DateRecord) -> Dict[str, object]:
    death = dates.death_date
    return {
        "birthDates": [
            {
                "date": birth.date,
                "type": birth.type.value,
                "year": str(birth.year) if birth.year else "",
                "isMainEntry": birth.is_main_entry,
            }
            for birth in dates.birth_dates
        ],
        "deathDate": (
            {"date": death.date, "type": death.type.value, "location": death.location} if death is not None else None
        ),
        "listingDates": [
            {"listedOn": listing.listed_on, "lastUpdated": list(listing.last_updated), "effectiveDate": listing.effective_date}
            for listing in dates.listing_dates
        ],
    }


def build_profile(
    field_map: FieldMap,
    file_name: str,
    *,
    reporter: Optional[ExtractionReporter] = None,
) -> Dict[str, object]:
    """Run every normalizer over ``field_map`` and return one profile."""

    name = extract_name(field_map, reporter=reporter)
    relation = extract_relational_name(field_map, reporter=reporter)
    record_type = classify(field_map, reporter=reporter)
    ids = record_id(field_map, file_name)
    address = extract_address(field_map, reporter=reporter)
    aliases = extract_aliases(field_map, reporter=reporter)
    identifiers = extract_identifiers(field_map, reporter=reporter)
    dates = extract_dates(field_map, reporter=reporter)
    dataset = Path(file_name).stem

    profile: Dict[str, object] = {
        "notes": "",
        "firstName": name.first_name,
        "middleName": name.middle_name,
        "lastName": name.last_name,
        "fullName": name.full_name,
        "fatherHusbandName": clean_relational_name(relation.value),
        "recordType": record_type.value or RecordType.INDIVIDUAL.value,
        "gender": "",
        "qrCode": ids.original_id,
        "qrCode2": ids.content_hash,
        "resourceUri": "",
        "resourceId": "",
        "isDeleted": False,
        "isDeceased": dates.death_date is not None,
        "aliases": [
            {
                "fullName": alias.full_name,
                "firstName": alias.first_name,
                "middleName": alias.middle_name,
                "lastName": alias.last_name,
                "aliasType": alias.alias_type,
                "category": alias.category,
                "sourceField": alias.source_field,
            }
            for alias in aliases.aliases
        ],
        "addresses": _address_entries(address),
        "contactEntries": [],
        "identifiers": [{"category": identifier.category.value, "value": identifier.value} for identifier in identifiers],
        "individualLinks": [],
        "businessLinks": [],
        "evidences": [
            {
                "originalUrl": "",
                "title": f"Parsed from {file_name}",
                "credibility": "",
                "language": "",
                "summary": f"Record extracted from {file_name}",
                "datasets": [dataset],
            }
        ],
    }
    profile.update(_date_entries(dates))
    return profile


def build_document(profiles: Iterable[Dict[str, object]], *, timestamp: Optional[int] = None) -> Dict[str, object]:
    return {
        "profiles": list(profiles),
        "timestamp": int(time.time()) if timestamp is None else timestamp,
    }
