"""Runtime configuration read from environment variables."""

import os
from dataclasses import dataclass

from playground.code.downloader import DEFAULT_TIMEOUT
from playground.errors import ConfigurationError
from playground.generation.launcher import DEFAULT_OPEN_COMMAND

BASE_DIR_VAR = "PLAYGROUND_BASE_DIR"
DOWNLOAD_TIMEOUT_VAR = "PLAYGROUND_DOWNLOAD_TIMEOUT"
OPEN_COMMAND_VAR = "PLAYGROUND_OPEN_COMMAND"


@dataclass(frozen=True)
class PlaygroundConfig:
    base_directory: str
    download_timeout: float = DEFAULT_TIMEOUT
    open_command: str = DEFAULT_OPEN_COMMAND

    @classmethod
    def from_environment(cls, environ=None) -> "PlaygroundConfig":
        """Build a config from *environ* (defaults to os.environ).

        Raises:
            ConfigurationError: If the download timeout is not a positive number
        """
        if environ is None:
            environ = os.environ

        return cls(
            base_directory=environ.get(BASE_DIR_VAR) or os.getcwd(),
            download_timeout=_parse_timeout(environ.get(DOWNLOAD_TIMEOUT_VAR)),
            open_command=environ.get(OPEN_COMMAND_VAR) or DEFAULT_OPEN_COMMAND,
        )


def _parse_timeout(raw):
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        timeout = 0
    if timeout <= 0:
        raise ConfigurationError(
            f"{DOWNLOAD_TIMEOUT_VAR} must be a positive number of seconds, got '{raw}'"
        )
    return timeout
