"""AI providers for commit message generation."""

from __future__ import annotations


class NoopProvider:
    """Provider that never proposes a message."""

    def generate_commit(self, diff: str) -> str:
        """Return an empty message for any ``diff``; reject non-text input."""
        if not isinstance(diff, str):
            raise TypeError(f"diff must be a str, not {type(diff).__name__}")
        return ""