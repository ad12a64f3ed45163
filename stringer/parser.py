"""Discovery and parsing of composite GitHub Actions."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from typing import Any

import yaml

from stringer.types import CompositeAction

_YAML_EXTENSIONS = (".yml", ".yaml")


class ActionParseError(ValueError):
    """Raised when a document is not a usable composite action."""


def _walk_files(root: str) -> Iterator[str]:
    """Yield every non-directory path under ``root`` in lexical order."""
    info = os.lstat(root)
    if not stat.S_ISDIR(info.st_mode):
        yield root
        return
    for name in sorted(os.listdir(root)):
        yield from _walk_files(os.path.join(root, name))


def parse_composite_actions(root: str | os.PathLike[str]) -> list[CompositeAction]:
    """Scan ``root`` for YAML files and return the composite actions among them.

    Files that are not valid composite actions are skipped; filesystem errors
    propagate as :class:`OSError`.
    """
    actions = []
    for path in _walk_files(os.fspath(root)):
        if os.path.splitext(path)[1] not in _YAML_EXTENSIONS:
            continue
        with open(path, "rb") as handle:
            data = handle.read()
        try:
            actions.append(parse_composite_action_from_bytes(data, path))
        except ActionParseError:
            continue
    return actions


def _get_string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def parse_composite_action_from_bytes(data: bytes | str, path: str) -> CompositeAction:
    """Parse one YAML document into a :class:`CompositeAction`."""
    try:
        raw = yaml.safe_load(data)
    except yaml.YAMLError as err:
        raise ActionParseError("invalid yaml file") from err
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ActionParseError("invalid yaml file")

    runs = raw.get("runs")
    if not isinstance(runs, dict) or runs.get("using") != "composite":
        raise ActionParseError("not a composite action")

    name = _get_string(raw.get("name"))
    description = _get_string(raw.get("description"))
    if not name or not description:
        raise ActionParseError("the composite action must have a name, and description")

    action = CompositeAction(name=name, description=description, path=path)

    inputs = raw.get("inputs")
    if isinstance(inputs, dict):
        print("Found input...")
        action.inputs = inputs

    outputs = raw.get("outputs")
    if isinstance(outputs, dict):
        print("found output...")
        action.outputs = outputs

    return action