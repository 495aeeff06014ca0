"""Tests for ProjectWriter, writing into a temporary directory."""

import pytest

from playground.errors import ProjectWriteError
from playground.generation.plan import GenerationPlan
from playground.generation.project_writer import ProjectWriter
from playground.target_platform import Platform


@pytest.mark.integration
class TestPlaygroundBundle:

    def test_writes_playground_files(self, tmp_path):
        target = tmp_path / "Demo.playground"
        plan = GenerationPlan(target_path=str(target), platform=Platform.MACOS, code="print(1)")

        path = ProjectWriter().write(plan)

        assert path == str(target)
        assert (target / "Contents.swift").read_text() == "print(1)"
        manifest = (target / "contents.xcplayground").read_text()
        assert "target-platform='macos'" in manifest
        assert "executeOnSourceChanges='false'" in manifest
        assert "<Timeline" in (target / "timeline.xctimeline").read_text()

    def test_auto_run_is_recorded(self, tmp_path):
        plan = GenerationPlan(
            target_path=str(tmp_path / "Demo.playground"), platform=Platform.IOS, auto_run=True,
        )

        ProjectWriter().write(plan)

        manifest = (tmp_path / "Demo.playground" / "contents.xcplayground").read_text()
        assert "executeOnSourceChanges='true'" in manifest

    @pytest.mark.parametrize("platform,framework", [
        (Platform.IOS, "UIKit"),
        (Platform.MACOS, "Cocoa"),
    ])
    def test_empty_code_gets_default_code(self, tmp_path, platform, framework):
        plan = GenerationPlan(target_path=str(tmp_path / "Demo.playground"), platform=platform)

        ProjectWriter().write(plan)

        code = (tmp_path / "Demo.playground" / "Contents.swift").read_text()
        assert code == f'import {framework}\n\nvar str = "Hello, playground"\n'

    def test_extension_is_added(self, tmp_path):
        plan = GenerationPlan(target_path=str(tmp_path / "Demo"), platform=Platform.IOS)

        path = ProjectWriter().write(plan)

        assert path == str(tmp_path / "Demo.playground")
        assert (tmp_path / "Demo.playground" / "Contents.swift").is_file()

    def test_existing_bundle_is_replaced(self, tmp_path):
        target = tmp_path / "Demo.playground"
        target.mkdir()
        (target / "stale.txt").write_text("old")
        plan = GenerationPlan(target_path=str(target), platform=Platform.IOS, code="new")

        ProjectWriter().write(plan)

        assert not (target / "stale.txt").exists()
        assert (target / "Contents.swift").read_text() == "new"

    def test_unwritable_location_raises(self, tmp_path):
        blocker = tmp_path / "file.txt"
        blocker.write_text("not a directory")
        plan = GenerationPlan(target_path=str(blocker / "Demo.playground"), platform=Platform.IOS)

        with pytest.raises(ProjectWriteError):
            ProjectWriter().write(plan)


@pytest.mark.integration
class TestWorkspaceBundle:

    def test_writes_workspace_with_dependencies(self, tmp_path):
        plan = GenerationPlan(
            target_path=str(tmp_path / "Demo.playground"),
            platform=Platform.IOS,
            dependencies=("/deps/A.xcodeproj", "/deps/B&C.xcodeproj"),
            code="import A",
        )

        path = ProjectWriter().write(plan)

        workspace = tmp_path / "Demo.xcworkspace"
        assert path == str(workspace)
        data = (workspace / "contents.xcworkspacedata").read_text()
        assert 'location = "group:Playground.playground"' in data
        assert 'location = "absolute:/deps/A.xcodeproj"' in data
        assert 'location = "absolute:/deps/B&amp;C.xcodeproj"' in data
        assert data.index("A.xcodeproj") < data.index("B&amp;C.xcodeproj")
        assert (workspace / "Playground.playground" / "Contents.swift").read_text() == "import A"
        assert not (tmp_path / "Demo.playground").exists()
