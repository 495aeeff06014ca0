"""CodeSourceResolver: produces the final source text for a code source."""

from dataclasses import dataclass

from playground.code.framework_imports import add_framework_imports_if_needed
from playground.code.url_normalizer import normalize_code_url
from playground.code.view_code import render_view_code
from playground.options.code_source import (
    ClipboardCode,
    CodeSource,
    CustomCode,
    UrlCode,
    ViewCode,
)
from playground.target_platform import Platform

MACOS_ONLY_IMPORTS = ("import Cocoa", "import AppKit")


@dataclass(frozen=True)
class ResolvedCode:
    """Final source text and the platform it should run on."""

    code: str
    platform: Platform


class CodeSourceResolver:
    """Resolves a CodeSource into source text.

    Collaborators:

    - clipboard: ``read()`` returning the clipboard text
    - downloader: ``download(url)`` returning remote text, raising
      CodeDownloadFailedError on failure
    """

    def __init__(self, clipboard, downloader):
        self.clipboard = clipboard
        self.downloader = downloader

    def resolve(self, source: CodeSource, platform: Platform) -> ResolvedCode:
        if isinstance(source, ViewCode):
            return ResolvedCode(render_view_code(platform), platform)

        if isinstance(source, ClipboardCode):
            copied = self.clipboard.read()
            return ResolvedCode(add_framework_imports_if_needed(copied, platform), platform)

        if isinstance(source, UrlCode):
            return self._resolve_url(source.url, platform)

        if isinstance(source, CustomCode):
            return ResolvedCode(source.text, platform)

        raise TypeError(f"Unknown code source: {source!r}")

    def _resolve_url(self, url: str, platform: Platform) -> ResolvedCode:
        url = normalize_code_url(url)
        print(f"Downloading code from {url}...")
        loaded = self.downloader.download(url)

        if any(statement in loaded for statement in MACOS_ONLY_IMPORTS):
            return ResolvedCode(loaded, Platform.MACOS)
        return ResolvedCode(add_framework_imports_if_needed(loaded, platform), platform)
