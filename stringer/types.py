"""Data types describing GitHub composite actions and workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CompositeAction:
    """A parsed composite action; ``path`` is never serialised."""

    name: str
    description: str
    inputs: dict[str, Any] | None = None
    outputs: dict[str, Any] | None = None
    path: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation of the action."""
        return {
            "name": self.name,
            "description": self.description,
            "inputs": self.inputs,
            "outputs": self.outputs,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CompositeAction:
        """Build an action from its JSON representation."""
        if not isinstance(data, dict):
            raise TypeError("composite action must be an object")
        fields = {"name": str, "description": str, "inputs": dict, "outputs": dict}
        for key, kind in fields.items():
            value = data.get(key)
            if value is not None and not isinstance(value, kind):
                raise TypeError(f"field {key!r} must be of type {kind.__name__}")
        return cls(
            name=data.get("name") or "",
            description=data.get("description") or "",
            inputs=data.get("inputs"),
            outputs=data.get("outputs"),
        )


@dataclass
class Step:
    """A single step of a workflow job."""

    name: str = ""
    uses: str = ""
    run: str = ""
    with_: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation, leaving out empty optional fields."""
        result: dict[str, Any] = {"name": self.name}
        if self.uses:
            result["uses"] = self.uses
        if self.run:
            result["run"] = self.run
        if self.with_:
            result["with"] = dict(self.with_)
        return result


@dataclass
class Job:
    """A workflow job."""

    name: str = ""
    runs_on: str = ""
    steps: list[Step] = field(default_factory=list)


@dataclass
class Workflow:
    """A GitHub workflow."""

    name: str = ""
    on: dict[str, Any] | None = None
    jobs: dict[str, Any] | None = None