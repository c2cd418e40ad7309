# Field-name vocabularies for the sanctions-list dialects (OFAC SDN, UN consolidated,
# EU financial sanctions, Canadian SEMA, NACTA). Patterns are tried in order.

# ----------------------------------------------------------------------
# Names
# ----------------------------------------------------------------------
FIRST_NAME_PATTERNS = ("firstName", "first_name", "FirstName", "givenName", "FIRST_NAME", "given_name")
MIDDLE_NAME_PATTERNS = ("middleName", "middle_name", "MiddleName", "additionalName", "MIDDLE_NAME", "middleInitial")
LAST_NAME_PATTERNS = ("lastName", "last_name", "LastName", "familyName", "surname", "LAST_NAME", "family_name")

# Short tokens are only trusted as whole keys ("fullname" contains "lname").
FIRST_NAME_TOKENS = ("fname",)
MIDDLE_NAME_TOKENS = ("mname",)
LAST_NAME_TOKENS = ("lname",)

SECOND_NAME_PATTERNS = ("SECOND_NAME", "second_name")
THIRD_NAME_PATTERNS = ("THIRD_NAME", "third_name")
FOURTH_NAME_PATTERNS = ("FOURTH_NAME", "fourth_name")

FULL_NAME_PATTERNS = (
    "fullName",
    "full_name",
    "FullName",
    "PersonName",
    "person_name",
    "wholeName",
    "displayName",
    "completeName",
)
FULL_NAME_TOKENS = ("Name", "name", "Individual")

PATTERN_GROUP_PREFIX = "INDIVIDUAL_"
PATTERN_GROUP_MARKER = "_NAME"

NAME_MISSING = "NAME MISSING"

# ----------------------------------------------------------------------
# Father / husband names
# ----------------------------------------------------------------------
FATHER_NAME_PATTERNS = (
    "fatherName",
    "father_name",
    "FatherName",
    "FATHER_NAME",
    "fathersName",
    "fathers_name",
    "FathersName",
    "paternal",
    "paternalName",
    "paternal_name",
    "father",
    "Father",
    "FATHER",
)
HUSBAND_NAME_PATTERNS = (
    "husbandName",
    "husband_name",
    "HusbandName",
    "HUSBAND_NAME",
    "husbandsName",
    "husbands_name",
    "HusbandsName",
    "spouse",
    "spouseName",
    "spouse_name",
    "husband",
    "Husband",
    "HUSBAND",
)
FATHER_OR_HUSBAND_PATTERNS = (
    "fatherHusbandName",
    "father_husband_name",
    "FatherHusbandName",
    "FATHER_HUSBAND_NAME",
    "fatherOrHusbandName",
    "father_or_husband_name",
    "FatherOrHusbandName",
    "parentSpouseName",
    "parent_spouse_name",
    "ParentSpouseName",
)
PATRONYMIC_PATTERNS = (
    "patronymic",
    "patronymicName",
    "patronymic_name",
    "PatronymicName",
    "PATRONYMIC_NAME",
    "parentage",
    "parentageName",
    "parentage_name",
    "Parentage",
    "guardian",
    "guardianName",
    "guardian_name",
    "Guardian",
    "GUARDIAN_NAME",
    "parentName",
    "parent_name",
    "ParentName",
    "PARENT_NAME",
)
RELATIONAL_FALLBACK_PATTERNS = (
    "INDIVIDUAL_ALIAS_ALIAS_NAME",
    "FOURTH_NAME",
    "fourth_name",
    "ADDITIONAL_NAME",
    "additional_name",
)
RELATIONAL_KEY_TERMS = ("father", "parent", "patron")
RELATIONAL_DEFAULT_SOURCE = "Default value used"

# Leading titles, longest first.
RELATIONAL_TITLES = ("son of", "daughter of", "wife of", "s/o", "d/o", "w/o", "mr.", "mr")

# ----------------------------------------------------------------------
# Addresses
# ----------------------------------------------------------------------
ADDRESS_KEY_TERMS = (
    "address",
    "street",
    "city",
    "country",
    "state",
    "province",
    "postal",
    "postcode",
    "zip",
    "location",
    "region",
)
ADDRESS_EXCLUDED_TERMS = ("birth", "nationality", "citizen", "ethnicity", "designation")

ADDRESS_LINE1_PATTERNS = ("address1", "street1", "line1", "street")
ADDRESS_LINE2_PATTERNS = ("address2", "street2", "line2")
ADDRESS_CITY_PATTERNS = ("city", "town")
ADDRESS_REGION_PATTERNS = ("stateOrProvince", "state", "province", "region")
ADDRESS_COUNTRY_PATTERNS = ("country", "nation")
ADDRESS_POSTAL_PATTERNS = ("postalCode", "postal", "PostCode", "zip")

# Single-address extraction also accepts a bare street field as line 1.
SINGLE_LINE1_PATTERNS = ("address1", "street", "line1")
FREE_TEXT_ADDRESS_PATTERNS = ("fullAddress", "address", "location")

NO_ADDRESS_SOURCE = "No address fields found"

# ----------------------------------------------------------------------
# Dates
# ----------------------------------------------------------------------
OFAC_BIRTH_PATTERNS = ("dateOfBirthList_dateOfBirthItem_dateOfBirth", "dateOfBirth", "Individual_DateOfBirth")
OFAC_MAIN_ENTRY_PATTERNS = ("dateOfBirthList_dateOfBirthItem_mainEntry", "mainEntry")

UN_BIRTH_TYPE_PATTERNS = ("INDIVIDUAL_DATE_OF_BIRTH_TYPE_OF_DATE", "TYPE_OF_DATE")
UN_BIRTH_YEAR_PATTERNS = ("INDIVIDUAL_DATE_OF_BIRTH_YEAR",)
UN_BIRTH_DATE_PATTERNS = ("INDIVIDUAL_DATE_OF_BIRTH_DATE",)
UN_BIRTH_YEAR_TOKENS = ("YEAR",)
UN_BIRTH_DATE_TOKENS = ("DATE",)

EU_BIRTH_REMARK_PATTERNS = ("birthdate_remark",)
EU_BIRTH_REMARK_TOKENS = ("birthdate",)

GENERIC_BIRTH_PATTERNS = (
    "birthdate_birthdate",
    "birthDate",
    "birth_date",
    "dob",
    "date_of_birth",
    "Individual_DateOfBirth",
    "Birth_Date",
)

REMARK_PATTERNS = ("remark", "remarks", "COMMENTS1", "comments", "identification_remark", "address_remark")

LISTED_ON_PATTERNS = ("LISTED_ON", "listed_on", "DateListed", "date_listed", "designationDate")
LAST_UPDATED_PATTERNS = ("LAST_DAY_UPDATED", "last_updated", "LastUpdated", "DateDesignated")
EFFECTIVE_DATE_PATTERNS = ("Effective Date (EO 14024 Directive 3):", "effective_date", "effectiveDate")

BIRTH_TYPE_LABELS = {
    "EXACT": "EXACT",
    "APPROXIMATELY": "APPROXIMATELY",
    "APPROXIMATE": "APPROXIMATELY",
    "BETWEEN": "APPROXIMATELY",
    "REMARK": "REMARK",
}

# ----------------------------------------------------------------------
# Identifiers
# ----------------------------------------------------------------------
CNIC_FIELD = "CNIC"
GENERIC_PASSPORT_FIELDS = ("Passport", "passport", "PassportNumber", "passport_number")

# (type token, number token, ((match, expected value, category), ...))
DOCUMENT_PAIRINGS = (
    (
        "idType",
        "idNumber",
        (
            ("equals", "Passport", "PASSPORT"),
            ("equals", "National ID No.", "NATIONAL_ID"),
            ("contains", "National", "NATIONAL_ID"),
        ),
    ),
    (
        "TYPE_OF_DOCUMENT",
        "NUMBER",
        (
            ("equals", "Passport", "PASSPORT"),
            ("equals", "National Identification Number", "NATIONAL_ID"),
            ("contains", "National", "NATIONAL_ID"),
        ),
    ),
    (
        "identificationTypeCode",
        "number",
        (
            ("equals", "passport", "PASSPORT"),
            ("equals", "id", "NATIONAL_ID"),
            ("equals", "ssn", "SSN"),
        ),
    ),
)

# ----------------------------------------------------------------------
# Aliases
# ----------------------------------------------------------------------
AKA_LIST_MARKER = "akaList_aka_"
AKA_PREFIX = "aka_"
AKA_FIRST_NAME = ("firstName", "first_name", "FirstName")
AKA_MIDDLE_NAME = ("middleName", "middle_name", "MiddleName")
AKA_LAST_NAME = ("lastName", "last_name", "LastName")
AKA_WHOLE_NAME = ("wholeName", "fullName", "full_name")
AKA_TYPE = ("aliasType", "type", "Type")
AKA_CATEGORY = ("category", "Category", "quality")
AKA_UID = ("uid",)

ALIAS_LIST_FIELDS = ("aliases", "alias")
ALIAS_DELIMITERS = (";", "|", "\r\n", "\n")

NAME_ALIAS_TERMS = ("namealias", "aliasname", "alternativename")
NAME_ALIAS_LEAVES = ("wholename",)
NAME_ALIAS_PLACEHOLDER = "good quality alias"
NAME_ALIAS_STRENGTH = ("strong", "quality")

GENERIC_ALIAS_FIELDS = (
    "alternativeName",
    "alternative_name",
    "AlternativeName",
    "knownAs",
    "known_as",
    "KnownAs",
    "alsoKnownAs",
    "also_known_as",
    "AlsoKnownAs",
    "pseudonym",
    "Pseudonym",
    "PSEUDONYM",
)

WEAK_CATEGORY_TERMS = ("weak", "low", "false")

# ----------------------------------------------------------------------
# Record ids
# ----------------------------------------------------------------------
SYSTEM_ID_FIELDS = ("uid", "id", "recordId", "record_id", "uniqueId", "unique_id", "entryId", "entry_id",
                    "listId", "list_id", "DATAID", "dataId", "logicalId", "ssid")
SYSTEM_ID_COMPOUNDS = ("recordId", "record_id", "uniqueId", "unique_id", "entryId", "entry_id", "dataId", "logicalId")
