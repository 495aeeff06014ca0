"""Launcher: opens a generated bundle with the system's open command."""

import subprocess

from playground.errors import LaunchError

DEFAULT_OPEN_COMMAND = "open"


class Launcher:
    """Wraps the external ``open`` call so it can be replaced in tests."""

    def __init__(self, open_command: str = DEFAULT_OPEN_COMMAND):
        self.open_command = open_command

    def _run(self, args):
        return subprocess.run(args, capture_output=True, text=True)

    def open(self, path: str) -> None:
        print(f"Opening {path}...")
        try:
            result = self._run([self.open_command, path])
        except OSError as error:
            raise LaunchError(path, str(error)) from error
        if result.returncode != 0:
            reason = result.stderr.strip() or f"'{self.open_command}' exited with {result.returncode}"
            raise LaunchError(path, reason)
