"""Options dataclass produced by parsing the command line."""

from dataclasses import dataclass, field

from playground.options.code_source import CodeSource
from playground.target_platform import Platform


@dataclass
class Options:
    """All options for a single playground generation run."""

    target_path: str
    platform: Platform = Platform.IOS
    auto_run: bool = False
    force_overwrite: bool = False
    display_help: bool = False
    dependencies: list[str] = field(default_factory=list)
    code: CodeSource | None = None
