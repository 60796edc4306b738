"""Shared constants and helpers for rgrep.

Centralizes output defaults, highlight styles, and the timezone-aware
datetime helper used by error contexts.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


# Separator printed between non-adjacent blocks of output.
DEFAULT_GROUP_SEPARATOR: str = "--"

# Delimiter between the file path, line number and content of an output line.
FIELD_DELIMITER: str = ":"

# click.style keyword arguments per output element.
MATCH_STYLE: dict = {"fg": "red", "bold": True}
FILE_PATH_STYLE: dict = {"fg": "magenta"}
LINE_NUMBER_STYLE: dict = {"fg": "green"}
SEPARATOR_STYLE: dict = {"fg": "cyan"}

# Prefix for environment variables that supply CLI option defaults.
ENV_PREFIX: str = "RGREP"
