"""Where the code placed inside a generated playground comes from."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ViewCode:
    """Boilerplate for prototyping a view in the live preview."""


@dataclass(frozen=True)
class ClipboardCode:
    """The current text contents of the clipboard."""


@dataclass(frozen=True)
class UrlCode:
    """Code downloaded from a URL."""

    url: str


@dataclass(frozen=True)
class CustomCode:
    """Code passed literally on the command line."""

    text: str


CodeSource = Union[ViewCode, ClipboardCode, UrlCode, CustomCode]
