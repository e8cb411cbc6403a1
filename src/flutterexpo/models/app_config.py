"""Flutter application configuration models."""

from typing import Any
from pydantic import ConfigDict, Field

from .ast import WireModel


class ColorScheme(WireModel):
    primary: str
    secondary: str
    surface: str
    background: str


class TextTheme(WireModel):
    headline_large: dict[str, Any] | None = None
    body_large: dict[str, Any] | None = None
    body_medium: dict[str, Any] | None = None


class Theme(WireModel):
    """Material theme snapshot. Unknown keys are kept."""

    model_config = ConfigDict(extra="allow")

    primary_color: str
    color_scheme: ColorScheme | None = None
    text_theme: TextTheme | None = None


class AppConfig(WireModel):
    """Application-wide configuration sent by APP_CONFIG."""

    title: str = Field(..., min_length=1)
    theme: Theme | None = None
    dark_theme: Theme | None = None
    routes: list[str] = Field(default_factory=list)
    initial_route: str = Field(default="/")
    supported_locales: list[str] = Field(default_factory=lambda: ["en"])
    current_locale: str = Field(default="en")
