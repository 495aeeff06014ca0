"""Click entry point for the playground generator."""

import sys

import click

from playground.code.clipboard import SystemClipboard
from playground.code.downloader import UrlCodeDownloader
from playground.code.resolver import CodeSourceResolver
from playground.config import PlaygroundConfig
from playground.errors import PlaygroundError
from playground.generation.generate import generate
from playground.generation.launcher import Launcher
from playground.generation.project_writer import ProjectWriter
from playground.options.options_builder import OptionsBuilder
from playground.options.system import DiskPathChecker, SystemClock, UuidTokenSource


def _run(args):
    config = PlaygroundConfig.from_environment()
    path_checker = DiskPathChecker()
    generate(
        args,
        builder=OptionsBuilder(
            config.base_directory, path_checker, SystemClock(), UuidTokenSource()
        ),
        resolver=CodeSourceResolver(
            SystemClipboard(), UrlCodeDownloader(timeout=config.download_timeout)
        ),
        writer=ProjectWriter(),
        launcher=Launcher(config.open_command),
        path_checker=path_checker,
    )


class PassthroughCommand(click.Command):
    """A command whose callback receives every token exactly as given.

    Flags are order-sensitive and chainable, so click must not interpret any of
    them: ``-h`` and a bare ``--`` reach the callback like any other token.
    """

    def parse_args(self, ctx, args):
        ctx.params["args"] = tuple(args)
        return []


@click.command("playground", cls=PassthroughCommand)
def main(args):
    """Easily create Swift playgrounds from the command line."""
    try:
        _run(args)
    except PlaygroundError as error:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)
