"""Formatting of conventional commit messages."""

from __future__ import annotations

from typing import Union

from gitloom.commit_model import CommitModel, CommitType

_HEADER_LIMIT = 72


class EmptyDescriptionError(ValueError):
    """Raised when a commit message is requested without a description."""

    def __init__(self, message: str = "a descricao do commit e obrigatoria") -> None:
        super().__init__(message)


def generate_message(model: CommitModel) -> str:
    """Build ``type(scope): description`` with an optional body.

    Raises EmptyDescriptionError when the description is blank.
    """
    description = model.description.strip()
    if not description:
        raise EmptyDescriptionError()

    commit_type = _normalize_type(model.type)
    scope = model.scope.strip()
    body = model.body.strip()
    header = _format_header(commit_type, scope, description)
    if not body:
        return header
    return f"{header}\n\n{body}"


def _format_header(commit_type: CommitType, scope: str, description: str) -> str:
    description = _limit_header_description(commit_type, scope, description)
    if not scope:
        return f"{commit_type.value}: {description}"
    return f"{commit_type.value}({scope}): {description}"


def _normalize_type(commit_type: Union[CommitType, str]) -> CommitType:
    try:
        return CommitType(commit_type)
    except ValueError:
        return CommitType.CHORE


def _limit_header_description(
    commit_type: CommitType, scope: str, description: str
) -> str:
    prefix_length = len(commit_type.value.encode()) + 2
    if scope:
        prefix_length += len(scope.encode()) + 2

    max_length = _HEADER_LIMIT - prefix_length
    encoded = description.encode()
    if max_length <= 0 or len(encoded) <= max_length:
        return description

    truncated = encoded[:max_length].decode("utf-8", errors="ignore").strip()
    last_space = truncated.rfind(" ")
    if last_space <= 0:
        return truncated
    return truncated[:last_space].strip()