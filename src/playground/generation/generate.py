"""The generate workflow: arguments in, opened playground out."""

from playground.generation.bundle_paths import output_path
from playground.generation.plan import GenerationPlan
from playground.usage import USAGE


def generate(arguments, *, builder, resolver, writer, launcher, path_checker):
    """Parse *arguments*, then write and open the requested playground.

    Unless overwriting is forced, an existing playground (or workspace) at the
    output path is opened as-is and no code is resolved.

    Raises:
        PlaygroundError: On any parse, download, write or launch failure
    """
    options = builder.build(arguments)

    if options.display_help:
        print(USAGE)
        return

    output = output_path(options.target_path, bool(options.dependencies))
    if not options.force_overwrite and path_checker.exists(output):
        launcher.open(output)
        return

    plan = GenerationPlan.from_options(options, resolver)
    path = writer.write(plan)

    if plan.dependencies:
        print(f"Generated Playground workspace at {path}")
    else:
        print(f"Generated Playground at {path}")
    launcher.open(path)
