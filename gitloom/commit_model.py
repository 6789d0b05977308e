"""Conventional commit types and the commit model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class CommitType(str, Enum):
    """Conventional commit types the tool understands."""

    FEAT = "feat"
    FIX = "fix"
    REFACTOR = "refactor"
    CHORE = "chore"
    DOCS = "docs"
    TEST = "test"

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)


@dataclass(frozen=True)
class CommitModel:
    """The parts a commit message is built from.

    ``type`` may hold a plain string; unknown types are treated as chore
    when the message is generated.
    """

    type: Union[CommitType, str] = CommitType.CHORE
    scope: str = ""
    intent: str = ""
    description: str = ""
    body: str = ""