"""Canonical navigation graph schema.

Single source of truth for node types, edge kinds and the structure of
nodes and edges. Graph construction code builds NodeSpec/EdgeSpec
instances (validated by Pydantic) instead of ad-hoc dictionaries.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger("navgraph.graph.schema")


class NodeType(str, Enum):
    """Kind of view a markup file describes."""

    WINDOW = "Window"
    USER_CONTROL = "UserControl"
    PAGE = "Page"
    DIALOG = "Dialog"


class EdgeKind(str, Enum):
    """How one view opens another."""

    NAVIGATE = "Navigate"
    SHOW_DIALOG = "ShowDialog"
    SHOW = "Show"


class NodeSpec(BaseModel):
    """A view discovered from one markup file.

    ``id`` and ``source_path`` both hold the canonical path of the markup
    file; they are always equal.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: Annotated[str, Field(..., description="Canonical path of the markup file")]
    label: Annotated[str, Field(..., description="File name without the .xaml suffix")]
    type: Annotated[NodeType, Field(..., description="Classified view type")]
    source_path: Annotated[
        str, Field(..., description="Canonical path of the markup file")
    ]

    @field_validator("id")
    @classmethod
    def _check_id_non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("Node id must be a non-empty string")
        return value

    @model_validator(mode="after")
    def _check_source_path_matches_id(self) -> "NodeSpec":
        if self.source_path != self.id:
            raise ValueError(
                f"Node source_path {self.source_path!r} must equal id {self.id!r}"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data form handed to visualization consumers."""
        return {
            "id": self.id,
            "label": self.label,
            "type": self.type.value,
            "sourcePath": self.source_path,
        }


class EdgeSpec(BaseModel):
    """A resolved navigation from one view to another."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: Annotated[str, Field(..., description="Source node id")]
    target: Annotated[str, Field(..., description="Target node id")]
    kind: Annotated[EdgeKind, Field(..., description="Navigation kind")]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.source,
            "to": self.target,
            "kind": self.kind.value,
        }


def node_from_dict(data: Dict[str, Any]) -> NodeSpec:
    """Build a NodeSpec from its plain-data form."""
    return NodeSpec(
        id=data["id"],
        label=data["label"],
        type=NodeType(data["type"]),
        source_path=data.get("sourcePath", data["id"]),
    )


def edge_from_dict(data: Dict[str, Any]) -> EdgeSpec:
    """Build an EdgeSpec from its plain-data form."""
    return EdgeSpec(
        source=data["from"],
        target=data["to"],
        kind=EdgeKind(data["kind"]),
    )


__all__ = [
    "EdgeKind",
    "EdgeSpec",
    "NodeSpec",
    "NodeType",
    "edge_from_dict",
    "node_from_dict",
]
