"""Prepend the framework imports a playground needs but its code lacks."""

from playground.target_platform import Platform

BASE_FRAMEWORKS = ("Foundation", "PlaygroundSupport")


def required_frameworks(platform: Platform) -> list[str]:
    return [*BASE_FRAMEWORKS, platform.ui_framework]


def add_framework_imports_if_needed(code: str, platform: Platform) -> str:
    """Return *code* preceded by an import for every framework it never mentions.

    A framework counts as imported when its name appears anywhere in the code,
    so running this twice never duplicates an import.
    """
    imports = [
        f"import {framework}"
        for framework in required_frameworks(platform)
        if framework not in code
    ]
    if not imports:
        return code
    return "\n".join(imports) + "\n\n" + code
