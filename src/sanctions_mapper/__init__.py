"""Schema-agnostic record discovery and normalization for sanctions lists."""

from sanctions_mapper.addresses import extract_address, extract_addresses
from sanctions_mapper.aliases import extract_aliases
from sanctions_mapper.assembler import build_document, build_profile
from sanctions_mapper.classification import classify, normalize_record_type
from sanctions_mapper.dates import extract_dates
from sanctions_mapper.discovery import DiscoveryResult, discover_records, find_record_elements, flatten
from sanctions_mapper.fields import first_success, locate
from sanctions_mapper.identifiers import extract_identifiers, is_valid_cnic, normalize_cnic
from sanctions_mapper.names import extract_name
from sanctions_mapper.record_ids import content_hash, find_original_system_id
from sanctions_mapper.relations import clean_relational_name, extract_relational_name

__version__ = "0.1.0"

__all__ = [
    "DiscoveryResult",
    "build_document",
    "build_profile",
    "classify",
    "clean_relational_name",
    "content_hash",
    "discover_records",
    "extract_address",
    "extract_addresses",
    "extract_aliases",
    "extract_dates",
    "extract_identifiers",
    "extract_name",
    "extract_relational_name",
    "find_original_system_id",
    "find_record_elements",
    "first_success",
    "flatten",
    "is_valid_cnic",
    "locate",
    "normalize_cnic",
    "normalize_record_type",
]
