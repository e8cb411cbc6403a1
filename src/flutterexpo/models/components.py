"""React component specification models."""

from typing import Any
from pydantic import BaseModel, Field


class ComponentSpec(BaseModel):
    """Renderable element tree pushed to viewers in COMPONENT_SPEC."""

    type: str = Field(..., description="Target element tag")
    props: dict[str, Any] = Field(default_factory=dict)
    style: dict[str, Any] | None = Field(default=None)
    children: list["ComponentSpec"] | None = Field(default=None)

    def to_wire(self) -> dict[str, Any]:
        """Wire form: ``style`` and ``children`` only when present."""
        wire: dict[str, Any] = {"type": self.type, "props": self.props}
        if self.style is not None:
            wire["style"] = self.style
        if self.children is not None:
            wire["children"] = [child.to_wire() for child in self.children]
        return wire


ComponentSpec.model_rebuild()
