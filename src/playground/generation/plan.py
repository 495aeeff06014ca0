"""GenerationPlan: everything needed to write a playground to disk."""

from dataclasses import dataclass

from playground.code.framework_imports import add_framework_imports_if_needed
from playground.target_platform import Platform


@dataclass(frozen=True)
class GenerationPlan:
    """Validated options combined with the fully resolved code."""

    target_path: str
    platform: Platform
    auto_run: bool = False
    force_overwrite: bool = False
    dependencies: tuple[str, ...] = ()
    code: str = ""

    @classmethod
    def from_options(cls, options, resolver) -> "GenerationPlan":
        """Resolve the options' code source (if any) and freeze the result.

        The resolver may override the platform, e.g. when downloaded code
        imports a macOS-only framework. A requested code source never yields
        empty code: an empty result (such as ``-c ""``) becomes the platform's
        framework imports.
        """
        platform = options.platform
        code = ""
        if options.code is not None:
            resolved = resolver.resolve(options.code, options.platform)
            platform = resolved.platform
            code = resolved.code or add_framework_imports_if_needed("", platform)

        return cls(
            target_path=options.target_path,
            platform=platform,
            auto_run=options.auto_run,
            force_overwrite=options.force_overwrite,
            dependencies=tuple(options.dependencies),
            code=code,
        )
