"""Unit tests for birth, death and listing dates."""

import pytest

from sanctions_mapper.dates import (
    extract_birth_dates,
    extract_date_token,
    extract_dates,
    extract_death_date,
    extract_listing_dates,
    extract_year,
    indexed_variants,
    parse_death_remark,
    split_dates,
    strip_date_tokens,
)
from sanctions_mapper.models import BirthDateType, DeathType


@pytest.mark.unit
class TestTextHelpers:
    @pytest.mark.parametrize(
        "text,expected",
        [("01 Jan 1960", 1960), ("circa 2003", 2003), ("1875", None), ("unknown", None), ("", None), (None, None)],
    )
    def test_extract_year(self, text, expected):
        assert extract_year(text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("on 3 March 2014 in Quetta", "3 March 2014"),
            ("May 2013 in Pakistan", "May 2013"),
            ("recorded 12/03/2014", "12/03/2014"),
            ("2015", "2015"),
            ("no date here", ""),
        ],
    )
    def test_extract_date_token(self, text, expected):
        assert extract_date_token(text) == expected

    def test_strip_date_tokens(self):
        assert strip_date_tokens("May 2013 in Pakistan") == "Pakistan"
        assert strip_date_tokens("2015") == ""

    def test_split_dates(self):
        assert split_dates("2009-03-30, 2010-05-11; 2011-01-01") == ["2009-03-30", "2010-05-11", "2011-01-01"]
        assert split_dates("2007-07-27") == ["2007-07-27"]

    def test_indexed_variants(self):
        field_map = {
            "dateOfBirthList_dateOfBirthItem_dateOfBirth": "1960",
            "dateOfBirthList_dateOfBirthItem_mainEntry": "true",
            "dateOfBirthList_dateOfBirthItem_2_dateOfBirth": "1962",
        }
        assert indexed_variants(field_map, "dateOfBirthList_dateOfBirthItem_dateOfBirth") == [
            "dateOfBirthList_dateOfBirthItem_dateOfBirth",
            "dateOfBirthList_dateOfBirthItem_2_dateOfBirth",
        ]


@pytest.mark.unit
class TestBirthDates:
    """Birth date dialects."""

    def test_ofac_items_with_main_entry(self):
        field_map = {
            "dateOfBirthList_dateOfBirthItem_uid": "2",
            "dateOfBirthList_dateOfBirthItem_dateOfBirth": "1960",
            "dateOfBirthList_dateOfBirthItem_mainEntry": "true",
            "dateOfBirthList_dateOfBirthItem_2_dateOfBirth": "1962",
            "dateOfBirthList_dateOfBirthItem_2_mainEntry": "false",
        }
        births = extract_birth_dates(field_map)
        assert [(birth.date, birth.year, birth.is_main_entry) for birth in births] == [
            ("1960", 1960, True),
            ("1962", 1962, False),
        ]
        assert all(birth.type == BirthDateType.EXACT for birth in births)

    def test_un_type_and_year(self):
        field_map = {"INDIVIDUAL_DATE_OF_BIRTH_TYPE_OF_DATE": "APPROXIMATELY", "INDIVIDUAL_DATE_OF_BIRTH_YEAR": "1968"}
        (birth,) = extract_birth_dates(field_map)
        assert birth.date == "1968"
        assert birth.type == BirthDateType.APPROXIMATELY
        assert birth.year == 1968
        assert birth.is_main_entry
        assert birth.source_field == "INDIVIDUAL_DATE_OF_BIRTH_TYPE_OF_DATE, INDIVIDUAL_DATE_OF_BIRTH_YEAR"

    def test_un_bare_date(self):
        (birth,) = extract_birth_dates({"TYPE_OF_DATE": "EXACT", "DATE": "1970-05-12"})
        assert birth.date == "1970-05-12"
        assert birth.type == BirthDateType.EXACT
        assert birth.year == 1970

    def test_un_unknown_type_label(self):
        (birth,) = extract_birth_dates({"TYPE_OF_DATE": "FROM-TO", "YEAR": "1970"})
        assert birth.type == BirthDateType.UNKNOWN

    def test_eu_remark(self):
        (birth,) = extract_birth_dates({"birthdate_remark": "circa 1955"})
        assert birth.type == BirthDateType.REMARK
        assert birth.year == 1955

    def test_generic_field(self):
        (birth,) = extract_birth_dates({"dob": "1 March 1975"})
        assert birth.date == "1 March 1975"
        assert birth.year == 1975
        assert birth.source_field == "dob"

    def test_eu_birthdate_attribute(self):
        (birth,) = extract_birth_dates({"birthdate_birthdate": "1953-01-31", "birthdate_year": "1953"})
        assert birth.date == "1953-01-31"
        assert birth.source_field == "birthdate_birthdate"

    def test_dialects_accumulate_in_order(self):
        field_map = {
            "dateOfBirth": "01 Jan 1960",
            "INDIVIDUAL_DATE_OF_BIRTH_TYPE_OF_DATE": "EXACT",
            "INDIVIDUAL_DATE_OF_BIRTH_YEAR": "1968",
            "birthdate_remark": "circa 1955",
        }
        births = extract_birth_dates(field_map)
        assert [(birth.date, birth.type) for birth in births] == [
            ("01 Jan 1960", BirthDateType.EXACT),
            ("1968", BirthDateType.EXACT),
            ("circa 1955", BirthDateType.REMARK),
        ]
        assert [birth.source_field for birth in births] == [
            "dateOfBirth",
            "INDIVIDUAL_DATE_OF_BIRTH_TYPE_OF_DATE, INDIVIDUAL_DATE_OF_BIRTH_YEAR",
            "birthdate_remark",
        ]

    def test_generic_field_only_when_nothing_else_matched(self):
        (birth,) = extract_birth_dates({"dateOfBirth": "1960", "dob": "1 March 1975"})
        assert birth.date == "1960"
        assert birth.type == BirthDateType.EXACT

    def test_none(self):
        assert extract_birth_dates({"firstName": "Ali"}) == []


@pytest.mark.unit
class TestDeathDates:
    """Death information mined from remarks."""

    def test_confirmed_with_location_trailer(self):
        death = parse_death_remark("Confirmed to have died in 2015. Location: Kabul", "remark")
        assert death.type == DeathType.CONFIRMED
        assert "2015" in death.date
        assert death.location == "Kabul"
        assert death.source_field == "remark"

    def test_reported_with_inline_location(self):
        death = parse_death_remark("Reportedly died in May 2013 in Pakistan.")
        assert death.type == DeathType.REPORTED
        assert death.date == "May 2013"
        assert death.location == "Pakistan"

    def test_deceased(self):
        death = parse_death_remark("Deceased in 2010")
        assert death.date == "2010"
        assert death.location == ""

    def test_abbreviated_place_name(self):
        death = parse_death_remark("Died in 2016 in St. Petersburg.")
        assert death.date == "2016"
        assert death.location == "St. Petersburg"

    def test_abbreviated_place_in_location_trailer(self):
        death = parse_death_remark("Confirmed to have died in 2015. Location: St. Petersburg, Russia. Listed 2001.")
        assert death.date == "2015"
        assert death.location == "St. Petersburg, Russia"

    @pytest.mark.parametrize("remark", ["", "Listed for financing.", "Born in 1960 in Kabul"])
    def test_no_death(self, remark):
        assert parse_death_remark(remark) is None

    def test_remark_field_lookup(self):
        death = extract_death_date({"COMMENTS1": "Confirmed to have died in 2015. Location: Kabul"})
        assert death is not None
        assert death.source_field == "COMMENTS1"


@pytest.mark.unit
class TestListingDates:
    def test_un_listing(self):
        field_map = {
            "LISTED_ON": "2001-01-25",
            "LAST_DAY_UPDATED_VALUE": "2007-07-27",
            "LAST_DAY_UPDATED_VALUE_2": "2009-03-30; 2010-05-11",
        }
        listing = extract_listing_dates(field_map)
        assert listing.listed_on == "2001-01-25"
        assert listing.last_updated == ("2007-07-27", "2009-03-30", "2010-05-11")
        assert listing.source_fields == ("LISTED_ON", "LAST_DAY_UPDATED_VALUE", "LAST_DAY_UPDATED_VALUE_2")

    def test_eu_designation_date(self):
        assert extract_listing_dates({"designationDate": "2022-02-23"}).listed_on == "2022-02-23"

    def test_none(self):
        assert extract_listing_dates({"firstName": "Ali"}) is None


@pytest.mark.unit
class TestExtractDates:
    def test_death_scenario(self):
        """A remark-only record yields a confirmed death in Kabul."""
        record = extract_dates({"remark": "Confirmed to have died in 2015. Location: Kabul"})
        assert record.death_date.type == DeathType.CONFIRMED
        assert "2015" in record.death_date.date
        assert "Kabul" in record.death_date.location
        assert record.birth_dates == ()
        assert record.source_fields == ("remark",)

    def test_empty(self, recording_reporter):
        record = extract_dates({"firstName": "Ali"}, reporter=recording_reporter)
        assert record.birth_dates == ()
        assert record.death_date is None
        assert record.listing_dates == ()
        assert recording_reporter.not_found_calls == ["dates"]
