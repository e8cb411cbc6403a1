"""Process-wide bridge state."""

from dataclasses import dataclass, field

from .models import AppConfig
from .streaming import SessionManager


@dataclass
class BridgeContext:
    """
    State shared by every session: the live session table and the current
    application configuration. Created once at startup and handed to the
    dispatcher; only mutated from the event loop.
    """

    sessions: SessionManager = field(default_factory=SessionManager)
    app_config: AppConfig | None = None
