"""
Mapping Registry
Keyed lookup from Flutter widget kinds to React element mappings.
"""

from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field

FALLBACK_TAG = "div"


class WidgetKind(str, Enum):
    """Widget families that carry kind-specific output rules."""

    SCAFFOLD = "scaffold"
    APP_BAR = "app_bar"
    CONTAINER = "container"
    ROW = "row"
    COLUMN = "column"
    TEXT = "text"
    BUTTON = "button"
    TEXT_INPUT = "text_input"
    IMAGE = "image"
    ICON = "icon"


class MappingEntry(BaseModel):
    """How one source widget kind maps onto a target element."""

    model_config = ConfigDict(frozen=True)

    source_type: str = Field(..., min_length=1)
    target_tag: str = Field(..., min_length=1)
    kind: WidgetKind
    prop_renames: dict[str, str] | None = None
    style_renames: dict[str, str] | None = None
    default_props: dict[str, Any] = Field(default_factory=dict)
    runtime: bool = Field(
        default=True, description="False for kinds only known to the source generator"
    )


class DuplicateMappingError(ValueError):
    """A mapping for this source type is already registered."""


def _identity(*keys: str) -> dict[str, str]:
    return {key: key for key in keys}


BUILTIN_MAPPINGS: tuple[MappingEntry, ...] = (
    MappingEntry(
        source_type="Scaffold",
        target_tag="div",
        kind=WidgetKind.SCAFFOLD,
        style_renames=_identity("display", "flexDirection", "minHeight", "backgroundColor"),
        default_props={"className": "flutter-scaffold"},
    ),
    MappingEntry(
        source_type="AppBar",
        target_tag="header",
        kind=WidgetKind.APP_BAR,
        style_renames=_identity(
            "backgroundColor", "color", "padding", "display", "alignItems", "minHeight"
        ),
        default_props={"className": "flutter-appbar"},
    ),
    MappingEntry(
        source_type="FloatingActionButton",
        target_tag="button",
        kind=WidgetKind.BUTTON,
        prop_renames={"enabled": "disabled"},
        style_renames=_identity(
            "position", "bottom", "right", "width", "height", "borderRadius",
            "backgroundColor", "border", "cursor", "display", "alignItems", "justifyContent",
        ),
        default_props={"className": "flutter-fab"},
    ),
    MappingEntry(
        source_type="Text",
        target_tag="span",
        kind=WidgetKind.TEXT,
        prop_renames={"data": "children"},
        style_renames=_identity("fontSize", "color", "fontWeight", "fontStyle"),
        default_props={"className": "flutter-text"},
    ),
    MappingEntry(
        source_type="Button",
        target_tag="button",
        kind=WidgetKind.BUTTON,
        prop_renames={"enabled": "disabled"},
        style_renames=_identity(
            "backgroundColor", "color", "padding", "borderRadius", "border", "cursor"
        ),
        default_props={"type": "button", "className": "flutter-button"},
    ),
    MappingEntry(
        source_type="Container",
        target_tag="div",
        kind=WidgetKind.CONTAINER,
        style_renames=_identity(
            "backgroundColor", "padding", "margin", "width", "height", "borderRadius"
        ),
        default_props={"className": "flutter-container"},
    ),
    MappingEntry(
        source_type="Row",
        target_tag="div",
        kind=WidgetKind.ROW,
        style_renames=_identity("display", "flexDirection", "justifyContent", "alignItems"),
        default_props={"className": "flutter-row"},
    ),
    MappingEntry(
        source_type="Column",
        target_tag="div",
        kind=WidgetKind.COLUMN,
        style_renames=_identity("display", "flexDirection", "justifyContent", "alignItems"),
        default_props={"className": "flutter-column"},
    ),
    # Markup-only kinds: the source generator knows their tags, live translation does not
    MappingEntry(source_type="ElevatedButton", target_tag="button", kind=WidgetKind.BUTTON, runtime=False),
    MappingEntry(source_type="TextButton", target_tag="button", kind=WidgetKind.BUTTON, runtime=False),
    MappingEntry(source_type="OutlinedButton", target_tag="button", kind=WidgetKind.BUTTON, runtime=False),
    MappingEntry(source_type="Image", target_tag="img", kind=WidgetKind.IMAGE, runtime=False),
    MappingEntry(source_type="TextField", target_tag="input", kind=WidgetKind.TEXT_INPUT, runtime=False),
    MappingEntry(source_type="Icon", target_tag="i", kind=WidgetKind.ICON, runtime=False),
)


class MappingRegistry:
    """
    Registry of widget mappings keyed by source widget type.
    Lookup is by exact type name; each type can be registered once.
    """

    def __init__(self, entries: Iterable[MappingEntry] | None = None) -> None:
        self._entries: dict[str, MappingEntry] = {}
        for entry in BUILTIN_MAPPINGS if entries is None else entries:
            self.register(entry)

    def register(self, entry: MappingEntry) -> None:
        """
        Register a widget mapping.

        Raises:
            DuplicateMappingError: If the source type is already mapped
        """
        if entry.source_type in self._entries:
            raise DuplicateMappingError(f"Widget type already mapped: {entry.source_type}")
        self._entries[entry.source_type] = entry

    def resolve(self, source_type: str, include_markup: bool = False) -> MappingEntry | None:
        """
        Resolve a widget type to its mapping.

        Args:
            source_type: Flutter widget type name
            include_markup: Also match kinds only known to the source generator

        Returns:
            The mapping, or None when the type is not mapped
        """
        entry = self._entries.get(source_type)
        if entry is None or (not entry.runtime and not include_markup):
            return None
        return entry

    def tag_for(self, source_type: str) -> str:
        """Target tag for markup output, falling back to a generic container."""
        entry = self.resolve(source_type, include_markup=True)
        return entry.target_tag if entry else FALLBACK_TAG

    def types(self) -> list[str]:
        """All registered source types, in registration order."""
        return list(self._entries)

    def __contains__(self, source_type: object) -> bool:
        return source_type in self._entries

    def __len__(self) -> int:
        return len(self._entries)
