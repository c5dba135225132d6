"""Infrastructure and technical constants."""

from typing import Final

# Technical configuration constants
DEFAULT_LOG_DIR: Final = "logs"
LOG_FILE_NAME: Final = "marina.log"
LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
FILE_ENCODING: Final = "utf-8"
# Undecodable bytes in the inventory file round-trip through surrogates
FILE_ENCODING_ERRORS: Final = "surrogateescape"
