"""Paths of the bundles generated for a target path."""

import os

PLAYGROUND_EXTENSION = ".playground"
WORKSPACE_EXTENSION = ".xcworkspace"
WORKSPACE_PLAYGROUND_NAME = "Playground" + PLAYGROUND_EXTENSION


def playground_path(target_path: str) -> str:
    if target_path.endswith(PLAYGROUND_EXTENSION):
        return target_path
    return target_path + PLAYGROUND_EXTENSION


def workspace_path(target_path: str) -> str:
    """Workspace bundle for *target_path*, replacing any playground extension."""
    if target_path.endswith(WORKSPACE_EXTENSION):
        return target_path
    stem = target_path
    if stem.endswith(PLAYGROUND_EXTENSION):
        stem = stem[:-len(PLAYGROUND_EXTENSION)]
    return stem + WORKSPACE_EXTENSION


def output_path(target_path: str, has_dependencies: bool) -> str:
    """The bundle that gets written and opened for a run."""
    if has_dependencies:
        return workspace_path(target_path)
    return playground_path(target_path)


def workspace_playground_path(workspace: str) -> str:
    return os.path.join(workspace, WORKSPACE_PLAYGROUND_NAME)
