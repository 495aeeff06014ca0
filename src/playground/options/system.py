"""Clock, unique-token and filesystem capabilities used while building options."""

import os
import uuid
from datetime import date


def format_short_date(day: date) -> str:
    """Format *day* as M-D-YY: the US short date with slashes replaced by hyphens."""
    return f"{day.month}-{day.day}-{day:%y}"


class SystemClock:
    """Reads the machine-local calendar date."""

    def today(self) -> str:
        return format_short_date(date.today())


class UuidTokenSource:
    """Produces globally unique tokens for disambiguating target paths."""

    def next(self) -> str:
        return str(uuid.uuid4()).upper()


class DiskPathChecker:
    """Answers existence questions against the local filesystem."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)
