"""ProjectWriter: writes playground and workspace bundles to disk."""

import os
import shutil

from playground.errors import ProjectWriteError
from playground.generation.bundle_paths import (
    WORKSPACE_PLAYGROUND_NAME,
    output_path,
    workspace_playground_path,
)
from playground.templates.template_renderer import render_template

CODE_FILE = "Contents.swift"
PLAYGROUND_FILE = "contents.xcplayground"
TIMELINE_FILE = "timeline.xctimeline"
WORKSPACE_FILE = "contents.xcworkspacedata"


class ProjectWriter:
    """Writes the bundle described by a GenerationPlan.

    A plan without dependencies becomes a single ``.playground`` bundle. A
    plan with dependencies becomes an ``.xcworkspace`` bundle that references
    each dependency project and holds the playground itself. Any existing
    bundle at the output path is replaced.
    """

    def write(self, plan) -> str:
        """Write the bundle for *plan* and return its path.

        Raises:
            ProjectWriteError: If the bundle cannot be written
        """
        path = output_path(plan.target_path, bool(plan.dependencies))
        try:
            _prepare_bundle_directory(path)
            if plan.dependencies:
                self._write_workspace(path, plan)
            else:
                self._write_playground_files(path, plan)
        except OSError as error:
            raise ProjectWriteError(path, error) from error
        return path

    def _write_workspace(self, path, plan):
        _write_file(
            os.path.join(path, WORKSPACE_FILE),
            _render(
                "contents.xcworkspacedata.j2",
                playground_name=WORKSPACE_PLAYGROUND_NAME,
                dependencies=plan.dependencies,
            ),
        )

        playground = workspace_playground_path(path)
        os.makedirs(playground)
        self._write_playground_files(playground, plan)

    def _write_playground_files(self, path, plan):
        _write_file(
            os.path.join(path, PLAYGROUND_FILE),
            _render(
                "contents.xcplayground.j2",
                platform=plan.platform.value,
                auto_run=plan.auto_run,
            ),
        )
        _write_file(os.path.join(path, TIMELINE_FILE), _render("timeline.xctimeline.j2"))

        code = plan.code or _render(
            "default_code.swift.j2", framework=plan.platform.ui_framework
        )
        _write_file(os.path.join(path, CODE_FILE), code)


def _render(template_name, **kwargs):
    return render_template(template_name, package=__package__, **kwargs)


def _prepare_bundle_directory(path):
    if os.path.isdir(path):
        shutil.rmtree(path)
    elif os.path.exists(path):
        os.remove(path)
    os.makedirs(path)


def _write_file(path, content):
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
