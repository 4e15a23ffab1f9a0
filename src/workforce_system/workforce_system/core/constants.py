"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ART_VALIDITY_DAYS = 7

UEN_MIN_LENGTH = 9
UEN_MAX_LENGTH = 10
COMPANY_NAME_MAX_LENGTH = 255
WORK_PERMIT_MIN_LENGTH = 9
CONTACT_NUMBER_LENGTH = 8

DEFAULT_MYSQL_PORT = 3306

SKILL_NAME_MAX_LENGTH = 255
SKILL_TASK_MAX_LENGTH = 255

# Employee skill ratings are stars.
SKILL_RATING_MIN = 0
SKILL_RATING_MAX = 5
