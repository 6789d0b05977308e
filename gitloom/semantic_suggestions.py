"""Detection of generic scopes and descriptions, with alternatives."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import Iterable

from gitloom.semantic_context import ChangedFile

_GENERIC_SCOPES = frozenset(
    {"", "core", "app", "cli", "ui", "repo", "project", "misc", "general", "gitignore"}
)

_GENERIC_DESCRIPTIONS = frozenset(
    {
        "atualizar projeto", "ajustar projeto",
        "atualizar repositorio", "ajustar repositorio",
        "atualizar cli", "ajustar cli",
        "atualizar core", "ajustar core",
        "refinar core", "refinar app",
        "refinar cli", "refinar ui",
        "refinar config", "refinar commit",
        "atualizar", "ajustar", "modificar", "alterar",
    }
)

_IGNORED_DIRECTORIES = frozenset(
    {"", ".", "internal", "cmd", "ui", "cli", "domain", "semantic", "shared", "app"}
)

_MAX_ALTERNATIVES = 3


@dataclass
class ScopeSuggestion:
    """A scope and, when it is generic, better alternatives."""

    current: str
    alternatives: list[str] = field(default_factory=list)
    generic: bool = False


@dataclass
class DescriptionSuggestion:
    """A description and whether it is too generic."""

    reason: str = ""
    current: str = ""
    generic: bool = False


def suggest_scope(scope: str, files: Iterable[ChangedFile]) -> ScopeSuggestion:
    """Suggest up to three specific scopes when ``scope`` is generic."""
    normalized = scope.strip().lower()
    if not is_generic_scope(normalized):
        return ScopeSuggestion(current=scope, generic=False)

    candidates = {
        candidate
        for changed in files
        for candidate in _scope_candidates_from_file_path(changed.path)
        if candidate != normalized
    }
    return ScopeSuggestion(
        current=scope,
        generic=True,
        alternatives=sorted(candidates)[:_MAX_ALTERNATIVES],
    )


def suggest_description(desc: str) -> DescriptionSuggestion:
    """Flag ``desc`` when it is too generic."""
    if not is_generic_description(desc):
        return DescriptionSuggestion(current=desc, generic=False)
    return DescriptionSuggestion(
        current=desc, generic=True, reason="descricao generica detectada"
    )


def is_generic_scope(scope: str) -> bool:
    """Tell whether ``scope`` says too little about the change."""
    return scope.strip().lower() in _GENERIC_SCOPES


def is_generic_description(desc: str) -> bool:
    """Tell whether ``desc`` says too little about the change."""
    return desc.strip().lower() in _GENERIC_DESCRIPTIONS


def _base(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _ext(path: str) -> str:
    name = path.rsplit("/", 1)[-1]
    index = name.rfind(".")
    return name[index:] if index >= 0 else ""


def _dir(path: str) -> str:
    index = path.rfind("/")
    if index < 0:
        return "."
    return posixpath.normpath(path[: index + 1])


def _scope_candidates_from_file_path(path: str) -> list[str]:
    base = _base(path)
    extension = _ext(path)
    if extension and base.endswith(extension):
        base = base[: len(base) - len(extension)]
    base = base.lower()
    if base.startswith("."):
        base = base[1:]
    directory = _dir(path).lower()

    candidates = [
        part
        for part in (segment.strip() for segment in directory.split("/"))
        if part not in _IGNORED_DIRECTORIES
    ]

    if "gitignore" in path:
        candidates += ["config", "repo", "tooling"]
    elif "go.mod" in path or "go.sum" in path or "makefile" in path:
        candidates += ["deps", "build", "tooling"]
    elif path.endswith("_test.go"):
        candidates.append("test")

    if base and base not in ("readme", "main"):
        candidates.append(base.replace("_", "-"))

    return _unique_suggestions(candidates)


def _unique_suggestions(values: Iterable[str]) -> list[str]:
    normalized = (value.strip().lower() for value in values)
    return list(dict.fromkeys(value for value in normalized if value))