"""Pytest configuration and fixtures."""

import json
import os
from typing import Any

import pytest

from flutterexpo.context import BridgeContext
from flutterexpo.core import Settings
from flutterexpo.generator import ReactCodeGenerator
from flutterexpo.handlers import AppConfigHandler, UIUpdateHandler
from flutterexpo.mapping import MappingRegistry
from flutterexpo.protocol import MessageDispatcher, MessageType
from flutterexpo.translator import UITranslator


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["BRIDGE_LOG_LEVEL"] = "DEBUG"


# ============================================================================
# Transport Doubles
# ============================================================================

class FakeConnection:
    """In-memory stand-in for a viewer WebSocket."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.frames: list[str] = []
        self.closed = False

    async def send_text(self, data: str) -> None:
        if self.fail:
            raise RuntimeError("connection reset by peer")
        self.frames.append(data)

    async def close(self, code: int = 1000) -> None:
        self.closed = True

    @property
    def messages(self) -> list[dict[str, Any]]:
        return [json.loads(frame) for frame in self.frames]

    def types(self) -> list[str]:
        return [message["type"] for message in self.messages]


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def output_dir(tmp_path):
    """Generated app root inside the test's temp dir."""
    return tmp_path / "generated_react_app"


@pytest.fixture
def settings(output_dir):
    """Test settings."""
    return Settings(output_dir=str(output_dir), log_level="DEBUG")


@pytest.fixture
def registry():
    """Mapping registry with built-in mappings."""
    return MappingRegistry()


@pytest.fixture
def translator(registry):
    return UITranslator(registry)


@pytest.fixture
def generator(registry, output_dir):
    return ReactCodeGenerator(registry, output_dir=output_dir)


@pytest.fixture
def context():
    """Fresh bridge context (no sessions, no configuration)."""
    return BridgeContext()


@pytest.fixture
def dispatcher(translator, generator, settings):
    """Dispatcher wired the same way the container wires it."""
    return MessageDispatcher(
        {
            MessageType.APP_CONFIG: AppConfigHandler(),
            MessageType.UI_UPDATE: UIUpdateHandler(translator, generator),
        },
        settings,
    )


@pytest.fixture
def connection_factory():
    """Create fake connections."""
    return FakeConnection


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_document():
    """Counter screen as sent by the Flutter side."""
    return {
        "screenId": "home_screen",
        "route": "/home",
        "timestamp": "2026-01-01T00:00:00.000Z",
        "language": "en",
        "tree": {
            "type": "Scaffold",
            "props": {},
            "style": {"backgroundColor": "#ffffff"},
            "children": [
                {
                    "type": "AppBar",
                    "props": {},
                    "style": {"backgroundColor": "#2196f3", "color": "white"},
                    "children": [{"type": "Text", "props": {}, "text": "Counter"}],
                },
                {
                    "type": "Column",
                    "props": {},
                    "style": {"display": "flex", "flexDirection": "column"},
                    "children": [
                        {"type": "Text", "props": {"data": "ignored"}, "text": "You pressed"},
                        {"id": "count", "type": "Text", "props": {}, "text": "0"},
                    ],
                },
                {
                    "id": "increment",
                    "type": "FloatingActionButton",
                    "props": {"enabled": True, "tooltip": "Increment"},
                    "style": {"position": "fixed", "bottom": "16px"},
                },
            ],
        },
        "state": {"counter": 0, "label": "Clicks"},
        "events": [
            {"componentId": "increment", "event": "onPressed", "action": "increment"}
        ],
        "assets": [],
    }


@pytest.fixture
def sample_app_config():
    return {
        "title": "Counter Demo",
        "theme": {
            "primaryColor": "#2196f3",
            "colorScheme": {
                "primary": "#2196f3",
                "secondary": "#ff4081",
                "surface": "#ffffff",
                "background": "#fafafa",
            },
            "textTheme": {"bodyLarge": {"fontSize": 16}},
        },
        "routes": ["/home"],
        "initialRoute": "/home",
        "supportedLocales": ["en", "fr"],
        "currentLocale": "en",
    }


@pytest.fixture
def frame():
    """Serialize an inbound frame."""

    def _frame(msg_type: str, data: Any = None, **extra: Any) -> str:
        message = {"type": msg_type, "timestamp": "2026-01-01T00:00:00.000Z", **extra}
        if data is not None:
            message["data"] = data
        return json.dumps(message)

    return _frame
