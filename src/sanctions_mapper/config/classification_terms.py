# Vocabulary used to decide whether a record describes a person or an organisation.

# Compound key names that always describe the record itself.
EXPLICIT_TYPE_FIELDS = (
    "recordType",
    "record_type",
    "RecordType",
    "entityType",
    "entity_type",
    "sdnType",
    "subjectType",
    "personType",
    "organizationType",
)
# Bare names are too common as nested leaves ("akaList_aka_type"); whole keys only.
EXPLICIT_TYPE_TOKENS = ("type", "category", "classification")

INDIVIDUAL_VALUE_TERMS = ("INDIVIDUAL", "PERSON", "NATURAL", "HUMAN")
INDIVIDUAL_VALUE_CODES = ("I", "P")
ENTITY_VALUE_TERMS = ("ENTITY", "ORGANIZATION", "ORGANISATION", "COMPANY", "CORPORATION", "ENTERPRISE", "BUSINESS", "LEGAL")
ENTITY_VALUE_CODES = ("E", "O")

# (side, weight, key terms, key terms that veto the row). Order matters:
# a key scores on the first row it matches and nowhere else.
SCORING_TABLE = (
    (
        "INDIVIDUAL",
        3,
        (
            "firstname",
            "first_name",
            "lastname",
            "last_name",
            "middlename",
            "middle_name",
            "fathername",
            "father_name",
            "dateofbirth",
            "birthdate",
            "placeofbirth",
            "birthplace",
        ),
        (),
    ),
    (
        "ENTITY",
        3,
        ("organization", "company", "corporation", "enterprise", "business", "firm", "agency", "institution"),
        (),
    ),
    (
        "INDIVIDUAL",
        2,
        ("individual", "person", "gender", "nationality", "passport", "cnic", "alias", "title"),
        (),
    ),
    (
        "ENTITY",
        2,
        ("entity", "legal", "commercial", "trade", "industry", "group"),
        (),
    ),
    (
        "INDIVIDUAL",
        1,
        ("name",),
        ("company", "organization", "corp"),
    ),
    (
        "ENTITY",
        1,
        ("registration", "license", "tax", "vat", "ein", "duns"),
        (),
    ),
)

HIGH_CONFIDENCE_SCORE = 3
MEDIUM_CONFIDENCE_SCORE = 2
