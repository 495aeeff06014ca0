"""Platforms a playground can target."""

from enum import Enum
from typing import Optional


class Platform(Enum):
    """Target platform; the value is the playground's target-platform attribute."""

    IOS = "ios"
    MACOS = "macos"
    TVOS = "tvos"

    @classmethod
    def parse(cls, name: str) -> Optional["Platform"]:
        """Return the platform for *name*, ignoring case, or None if unknown."""
        try:
            return cls(name.lower())
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        return {"ios": "iOS", "macos": "macOS", "tvos": "tvOS"}[self.value]

    @property
    def ui_framework(self) -> str:
        """Framework providing views and colors on this platform."""
        if self is Platform.MACOS:
            return "Cocoa"
        return "UIKit"
