"""Handlers for inbound protocol messages."""

from .ui import UIUpdateHandler
from .config import AppConfigHandler

__all__ = ["UIUpdateHandler", "AppConfigHandler"]
