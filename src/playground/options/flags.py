"""Command-line flags understood by the playground generator."""

from enum import Enum
from typing import Optional

FLAG_PREFIX = "-"


class Flag(Enum):
    """A flag and its short spelling."""

    TARGET_PATH = "-t"
    PLATFORM = "-p"
    DEPENDENCIES = "-d"
    CODE = "-c"
    URL = "-u"
    ADD_VIEW_CODE = "-v"
    FORCE_OVERWRITE = "-f"
    AUTO_RUN = "-a"
    HELP = "-h"

    @property
    def takes_value(self) -> bool:
        return self in _VALUE_FLAGS


_VALUE_FLAGS = frozenset({
    Flag.TARGET_PATH,
    Flag.PLATFORM,
    Flag.DEPENDENCIES,
    Flag.CODE,
    Flag.URL,
})


def classify(token: str) -> Optional[Flag]:
    """Return the flag spelled by *token*, or None if it is not a flag."""
    try:
        return Flag(token)
    except ValueError:
        return None


def looks_like_flag(token: str) -> bool:
    return token.startswith(FLAG_PREFIX)
