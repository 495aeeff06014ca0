"""Errors raised while turning command-line arguments into a generated playground."""


class PlaygroundError(Exception):
    """Base class for all errors that end a playground run."""


class InvalidFlagError(PlaygroundError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"Invalid flag '{token}'. Run 'playground -h' for available options."
        )


class MissingValueError(PlaygroundError):
    def __init__(self, flag):
        self.flag = flag
        super().__init__(f"Missing value for flag '{flag.value}'.")


class InvalidPlatformError(PlaygroundError):
    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(
            f"Invalid platform '{platform}'. Must be iOS, macOS or tvOS."
        )


class InvalidDependencyError(PlaygroundError):
    def __init__(self, dependency: str):
        self.dependency = dependency
        super().__init__(
            f"Invalid dependency '{dependency}'. "
            "Make sure that it's an Xcode project that exists."
        )


class CodeDownloadFailedError(PlaygroundError):
    """Fetching remote code failed; ``cause`` holds the transport error."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(
            "Failed to download code from the given URL. "
            f"Underlying error: {cause}."
        )


class ClipboardUnavailableError(PlaygroundError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Could not read the clipboard: {reason}")


class LaunchError(PlaygroundError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not open {path}: {reason}")


class ConfigurationError(PlaygroundError):
    pass


class ProjectWriteError(PlaygroundError):
    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write {path}: {cause}")
