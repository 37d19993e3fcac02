"""
Constants and default values for model conversions.

This module centralizes the default values and fallbacks used when
converting FogBugz XML responses to models.
"""

#
# Common defaults
#
EMPTY_STRING = ""

#
# FogBugz defaults
#
FOGBUGZ_DEFAULT_ID = "0"

# Values FogBugz uses for its "f"-prefixed boolean fields
TRUE_VALUES = ("true", "1", "yes")

# Case child elements consumed by the named case fields
CASE_TITLE_FIELD = "sTitle"
CASE_STATUS_FIELD = "sStatus"
CASE_FIX_FOR_FIELD = "sFixFor"
CASE_ASSIGNED_TO_FIELD = "sPersonAssignedTo"
CASE_ASSIGNED_TO_EMAIL_FIELD = "sEmailAssignedTo"
CASE_TAGS_FIELD = "tags"
CASE_TAG_FIELD = "tag"

CASE_CONSUMED_FIELDS = frozenset(
    {
        CASE_TITLE_FIELD,
        CASE_STATUS_FIELD,
        CASE_FIX_FOR_FIELD,
        CASE_ASSIGNED_TO_FIELD,
        CASE_ASSIGNED_TO_EMAIL_FIELD,
        CASE_TAGS_FIELD,
    }
)

TAGS_SEPARATOR = ", "
