"""
Application-level constants for hardcoded business logic.

These values define the catalog's validation rules and URL layout and are
not meant to be changed via environment variables. For configurable values
(database, logging), see catalog/settings.py.
"""

import re

# ============================================================================
# URL layout
# ============================================================================

# Prefix under which every catalog page is served
CATALOG_PREFIX = "/catalog"

# Author list page, the redirect target after delete
AUTHOR_LIST_URL = f"{CATALOG_PREFIX}/authors"


# ============================================================================
# Author form validation
# ============================================================================

# Minimum name length accepted when creating an author
AUTHOR_CREATE_NAME_MIN_LENGTH = 2

# Minimum name length accepted when updating an author
AUTHOR_UPDATE_NAME_MIN_LENGTH = 3

# Width of the first_name / family_name columns
AUTHOR_NAME_MAX_LENGTH = 100

# Names are restricted to ASCII letters and digits
ALPHANUMERIC_PATTERN = re.compile(r"^[0-9A-Za-z]+$")


# ============================================================================
# Presentation
# ============================================================================

# Medium date format used on detail/list pages, e.g. "Oct 14, 1983"
DISPLAY_DATE_FORMAT = "%b %d, %Y"


# ============================================================================
# Request tracing
# ============================================================================

# Correlation ids are truncated/generated to this many characters
CORRELATION_ID_LENGTH = 8
