"""UI AST Models.

Structural description of one Flutter screen as produced by the mobile side.
Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.timestamps import utc_timestamp


class WireModel(BaseModel):
    """Base for models exchanged as camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict[str, Any]:
        """Dump using wire aliases, dropping unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class UIASTNode(WireModel):
    """Single widget in the UI tree."""

    id: str | None = None
    type: str = Field(..., min_length=1, description="Source widget kind")
    props: dict[str, Any] = Field(default_factory=dict)
    style: dict[str, Any] | None = None
    children: list["UIASTNode"] | None = None
    text_id: str | None = None
    text: str | None = None


class EventBinding(WireModel):
    """Wires a widget event to an application action."""

    component_id: str
    event: str
    action: str
    parameters: dict[str, Any] | None = None


class AssetReference(WireModel):
    """Asset used by the screen (image, font, ...)."""

    id: str
    type: str
    url: str
    metadata: dict[str, Any] | None = None


class UIASTDocument(WireModel):
    """Complete per-screen UI description carried by UI_UPDATE."""

    screen_id: str = Field(..., min_length=1)
    route: str
    timestamp: str = Field(default_factory=utc_timestamp)
    language: str = Field(default="en")
    tree: UIASTNode
    state: dict[str, Any] = Field(default_factory=dict)
    events: list[EventBinding] = Field(default_factory=list)
    assets: list[AssetReference] = Field(default_factory=list)


UIASTNode.model_rebuild()
