"""OptionsBuilder: turns raw command-line tokens into Options.

Flags are processed strictly left to right with a single pending-flag
register. A value-taking flag consumes the next token as its value. A boolean
flag takes effect as soon as the next token arrives, and that token is then
replayed as a fresh flag, so boolean flags can be chained and only the last
flag of the argument list may dangle.
"""

import os
from urllib.parse import urlsplit

from playground.errors import (
    InvalidDependencyError,
    InvalidFlagError,
    InvalidPlatformError,
    MissingValueError,
)
from playground.options.code_source import ClipboardCode, CustomCode, UrlCode, ViewCode
from playground.options.flags import Flag, classify, looks_like_flag
from playground.options.options import Options
from playground.target_platform import Platform

PROJECT_EXTENSION = ".xcodeproj"
PLAYGROUND_EXTENSION = ".playground"


class OptionsBuilder:
    """Builds Options from a sequence of arguments.

    Collaborators are injected so that parsing can be tested without touching
    the real clock or filesystem:

    - path_checker: ``exists(path)`` and ``is_directory(path)``
    - clock: ``today()`` returning the date used in default file names
    - token_source: ``next()`` returning a unique suffix for taken paths
    """

    def __init__(self, base_directory, path_checker, clock, token_source):
        self.base_directory = base_directory
        self.path_checker = path_checker
        self.clock = clock
        self.token_source = token_source

    def default_target_path(self) -> str:
        return os.path.join(
            self.base_directory, f"{self.clock.today()}{PLAYGROUND_EXTENSION}"
        )

    def build(self, arguments) -> Options:
        """Parse *arguments* into Options.

        Raises:
            InvalidFlagError: A token was found where a flag was expected
            MissingValueError: A value-taking flag ended the argument list
            InvalidPlatformError: The platform name is unknown
            InvalidDependencyError: A dependency is not an existing Xcode project
        """
        options = Options(target_path=self.default_target_path())
        arguments = list(arguments)
        pending = None
        index = 0

        while index < len(arguments):
            argument = arguments[index]
            if pending is None:
                pending = classify(argument)
                if pending is None:
                    raise InvalidFlagError(argument)
                index += 1
                continue

            consumed = self._apply(options, pending, argument)
            pending = None
            if consumed:
                index += 1

        if pending is not None:
            self._apply_dangling(options, pending)

        if options.code is not None and self.path_checker.exists(options.target_path):
            options.target_path += f"-{self.token_source.next()}"

        return options

    def _apply(self, options, flag, argument) -> bool:
        """Apply *flag* given the following *argument*.

        Returns False when the argument was not used as a value and must be
        parsed again as a flag.
        """
        if flag is Flag.TARGET_PATH:
            options.target_path = self._parse_target_path(argument)
        elif flag is Flag.PLATFORM:
            options.platform = self._parse_platform(argument)
        elif flag is Flag.DEPENDENCIES:
            options.dependencies = self._parse_dependencies(argument)
        elif flag is Flag.CODE:
            if looks_like_flag(argument):
                options.code = ClipboardCode()
                return False
            options.code = CustomCode(argument)
        elif flag is Flag.URL:
            options.code = UrlCode(argument) if is_valid_url(argument) else None
        else:
            self._apply_boolean(options, flag)
            return False
        return True

    def _apply_dangling(self, options, flag):
        if flag is Flag.CODE:
            options.code = ClipboardCode()
        elif flag.takes_value:
            raise MissingValueError(flag)
        else:
            self._apply_boolean(options, flag)

    @staticmethod
    def _apply_boolean(options, flag):
        if flag is Flag.ADD_VIEW_CODE:
            options.code = ViewCode()
        elif flag is Flag.FORCE_OVERWRITE:
            options.force_overwrite = True
        elif flag is Flag.AUTO_RUN:
            options.auto_run = True
        elif flag is Flag.HELP:
            options.display_help = True

    def _parse_target_path(self, argument: str) -> str:
        if self.path_checker.is_directory(argument):
            return os.path.join(argument, self.clock.today())
        return argument

    @staticmethod
    def _parse_platform(argument: str) -> Platform:
        platform = Platform.parse(argument)
        if platform is None:
            raise InvalidPlatformError(argument)
        return platform

    def _parse_dependencies(self, argument: str) -> list[str]:
        dependencies = []
        for path in argument.split(","):
            if not path.endswith(PROJECT_EXTENSION):
                raise InvalidDependencyError(path)
            if not self.path_checker.is_directory(path):
                raise InvalidDependencyError(path)
            dependencies.append(os.path.abspath(path))
        return dependencies


def is_valid_url(value: str) -> bool:
    """Whether *value* is syntactically usable as a URL."""
    if not value or any(c.isspace() for c in value):
        return False
    try:
        urlsplit(value)
    except ValueError:
        return False
    return True
