"""Protocols for the collaborators the commit workflow depends on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AIProvider(Protocol):
    """Something that can propose a commit message for a diff."""

    def generate_commit(self, diff: str) -> str:
        """Return a proposed commit message for ``diff``."""
        ...


@runtime_checkable
class GitRepository(Protocol):
    """Operations the workflow needs from a Git working tree."""

    def get_diff(self, *args: str) -> str:
        """Return the staged diff, optionally limited to the given paths."""
        ...

    def is_repository(self) -> bool:
        """Tell whether the current directory is inside a work tree."""
        ...

    def list_staged_files(self) -> list[str]:
        """Return the paths currently staged."""
        ...

    def list_changed_files(self) -> list[str]:
        """Return modified, deleted and untracked paths that are not staged."""
        ...

    def stage_files(self, paths: list[str]) -> None:
        """Stage the given paths."""
        ...

    def commit(self, message: str) -> None:
        """Commit everything staged with ``message``."""
        ...

    def commit_paths(self, message: str, paths: list[str]) -> None:
        """Commit only ``paths`` with ``message``."""
        ...

    def create_branch(self, name: str) -> None:
        """Create and check out a new branch."""
        ...