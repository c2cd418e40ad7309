"""Typed results produced by the normalizers.

Every record is built fresh per input record and is immutable once returned.
Enumerations subclass ``str`` so they serialize to their labels in JSON.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

FieldMap = Dict[str, str]

NO_SOURCE = "No source found"


class NameSourceType(str, Enum):
    INDIVIDUAL_FIELDS = "INDIVIDUAL_FIELDS"
    UNSCR_MULTI_FIELDS = "UNSCR_MULTI_FIELDS"
    FULL_NAME_FIELD = "FULL_NAME_FIELD"
    UNSCR_PATTERN = "UNSCR_PATTERN"
    NOT_FOUND = "NOT_FOUND"


class RecordType(str, Enum):
    INDIVIDUAL = "INDIVIDUAL"
    ENTITY = "ENTITY"
    UNKNOWN = "UNKNOWN"


class Confidence(str, Enum):
    HIGH = "HIGH_CONFIDENCE"
    MEDIUM = "MEDIUM_CONFIDENCE"
    LOW = "LOW_CONFIDENCE"


class AddressType(str, Enum):
    COMPONENTS = "components"
    FULL = "full"
    LIST = "list"
    STRUCTURED = "structured"


class BirthDateType(str, Enum):
    EXACT = "EXACT"
    APPROXIMATELY = "APPROXIMATELY"
    REMARK = "REMARK"
    UNKNOWN = "UNKNOWN"


class DeathType(str, Enum):
    CONFIRMED = "CONFIRMED"
    REPORTED = "REPORTED"


class IdentifierCategory(str, Enum):
    CNIC = "CNIC"
    PASSPORT = "PASSPORT"
    NATIONAL_ID = "NATIONAL_ID"
    SSN = "SSN"


class AliasSourceType(str, Enum):
    OFAC_AKALIST = "OFAC_AKALIST"
    CANADIAN_ALIASES = "CANADIAN_ALIASES"
    EU_NAME_ALIAS = "EU_NAME_ALIAS"
    GENERIC_ALIAS = "GENERIC_ALIAS"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class ExtractionResult:
    """A located value and the key it came from."""

    value: str = ""
    source_field: str = NO_SOURCE
    secondary_value: str = ""

    @property
    def found(self) -> bool:
        return bool(self.value)


@dataclass(frozen=True)
class NameRecord:
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    full_name: str = ""
    source_type: NameSourceType = NameSourceType.NOT_FOUND
    source_fields: str = ""


@dataclass(frozen=True)
class AddressRecord:
    line1: str = ""
    line2: str = ""
    city: str = ""
    region: str = ""
    country: str = ""
    postal_code: str = ""
    full_address: str = ""
    address_type: AddressType = AddressType.COMPONENTS
    source_fields: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.full_address or self.city or self.country)


@dataclass(frozen=True)
class BirthDate:
    date: str
    type: BirthDateType = BirthDateType.EXACT
    year: Optional[int] = None
    is_main_entry: bool = False
    source_field: str = ""


@dataclass(frozen=True)
class DeathInfo:
    date: str = ""
    type: DeathType = DeathType.CONFIRMED
    location: str = ""
    source_field: str = ""


@dataclass(frozen=True)
class ListingDateInfo:
    listed_on: str = ""
    last_updated: Tuple[str, ...] = ()
    effective_date: str = ""
    source_fields: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DateRecord:
    birth_dates: Tuple[BirthDate, ...] = ()
    death_date: Optional[DeathInfo] = None
    listing_dates: Tuple[ListingDateInfo, ...] = ()
    source_fields: Tuple[str, ...] = ()


@dataclass(frozen=True)
class IdentifierRecord:
    category: IdentifierCategory
    value: str
    source_field: str = ""

    @property
    def key(self) -> str:
        return f"{self.category.value}:{self.value}"


@dataclass(frozen=True)
class AliasRecord:
    full_name: str
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    alias_type: str = "a.k.a."
    category: str = "strong"
    source_field: str = ""


@dataclass(frozen=True)
class AliasExtractionResult:
    aliases: Tuple[AliasRecord, ...] = ()
    source_type: AliasSourceType = AliasSourceType.NOT_FOUND
    source_fields: Tuple[str, ...] = field(default_factory=tuple)
