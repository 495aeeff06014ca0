"""Boilerplate for prototyping a view in a playground's live preview."""

from playground.target_platform import Platform
from playground.templates.template_renderer import render_template


def render_view_code(platform: Platform) -> str:
    """Render code that shows a white 500x500 view as the live preview.

    AppKit views need layer backing before a layer background color can be
    set, so the macOS variant enables it first.
    """
    is_macos = platform is Platform.MACOS
    return render_template(
        "view_code.swift.j2",
        package=__package__,
        framework=platform.ui_framework,
        view_class="NSView" if is_macos else "UIView",
        layer_backed=is_macos,
    )
