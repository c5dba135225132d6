"""Domain business rules and constants."""

from typing import Final

# Business Rules - Core domain constraints
MAX_BOATS: Final = 120
MAX_NAME_LENGTH: Final = 127
MAX_TRAILER_TAG_LENGTH: Final = 15

# Persisted record format
FIELD_DELIMITER: Final = ","
RECORD_FIELD_COUNT: Final = 5
