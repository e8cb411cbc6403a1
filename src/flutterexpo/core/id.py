"""ID Generation System.

ULID-based session identifiers.

Features:
- ULIDs: Lexicographically sortable
- Type-safe: NewType wrapper for session IDs
- Prefixed: ``sess_*`` keeps logs readable
"""

from typing import NewType
from ulid import ULID

SessionID = NewType("SessionID", str)
"""Viewer connection identifier"""


class Prefix:
    """ID prefix constants."""

    SESSION = "sess"


class Generator:
    """ULID generator."""

    def generate(self) -> str:
        """Generate a new ULID."""
        return str(ULID())

    def generate_with_prefix(self, prefix: str) -> str:
        """Generate ULID with type prefix."""
        return f"{prefix}_{self.generate()}"


_generator = Generator()


def new_session_id() -> SessionID:
    """Generate new session ID."""
    return SessionID(_generator.generate_with_prefix(Prefix.SESSION))

