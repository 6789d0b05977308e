"""Scoring of the semantic quality of a commit block."""

from __future__ import annotations

from typing import Iterable

from gitloom.semantic_context import (
    ChangedFile,
    ChangeIntent,
    CommitContext,
    CommitQuality,
    QualityCriteria,
    normalize_scope,
)
from gitloom.semantic_suggestions import is_generic_scope

_MAX_FILES = 4

_GENERIC_DESCRIPTIONS = frozenset(
    {
        "atualizar projeto",
        "ajustar projeto",
        "atualizar repositorio",
        "ajustar repositorio",
        "atualizar cli",
        "ajustar cli",
        "atualizar core",
        "ajustar core",
        "refinar core",
        "refinar app",
        "refinar cli",
        "refinar ui",
        "refinar config",
        "refinar commit",
    }
)

_DEPENDENCY_FILES = frozenset({"go.mod", "go.sum", "makefile"})


def score_commit(intent: ChangeIntent, context: CommitContext) -> CommitQuality:
    """Score a commit block from 0 to 100 and explain the deductions."""
    score = 100
    reasons: list[str] = []
    criteria: list[QualityCriteria] = []

    def fail(name: str, message: str, penalty: int = 0, reason: str = "") -> None:
        nonlocal score
        score -= penalty
        if reason:
            reasons.append(reason)
        criteria.append(QualityCriteria(name=name, passed=False, warning=True, message=message))

    def passed(name: str) -> None:
        criteria.append(QualityCriteria(name=name, passed=True))

    if len(context.files) > _MAX_FILES:
        fail(
            "tamanho",
            "excede limite de 4 arquivos",
            40,
            "bloco excede o limite recomendado de 4 arquivos",
        )
    else:
        passed("tamanho")

    if not intent.scope:
        fail("escopo", "escopo nao identificado", 15, "escopo nao foi identificado com clareza")
    elif is_generic_scope(intent.scope):
        fail("escopo", "escopo generico: " + intent.scope)
    else:
        passed("escopo")

    if _is_generic_description(intent.description):
        fail("descricao", "descricao generica", 25, "descricao ainda esta generica")
    else:
        passed("descricao")

    if _has_mixed_scopes(context.files):
        fail("coerencia", "contexts mistos", 15, "arquivos misturam contexts diferentes")
    else:
        passed("coerencia")

    expected_type = _infer_expected_type(context)
    if expected_type and expected_type != str(intent.type):
        fail(
            "tipo",
            "tipo pode nao refletir bem a mudanca",
            20,
            "tipo pode nao refletir bem a mudanca",
        )
    else:
        passed("tipo")

    return CommitQuality(criteria=criteria, reasons=reasons, score=max(score, 0))


def _is_generic_description(description: str) -> bool:
    return description.strip().lower() in _GENERIC_DESCRIPTIONS


def _has_mixed_scopes(files: Iterable[ChangedFile]) -> bool:
    return len({normalize_scope(changed.path) for changed in files}) > 2


def _infer_expected_type(context: CommitContext) -> str:
    if not context.files:
        return ""
    paths = [changed.path.lower() for changed in context.files]
    if all(path.endswith("_test.go") for path in paths):
        return "test"
    if all(path.endswith(".md") for path in paths):
        return "docs"
    if all(path in _DEPENDENCY_FILES for path in paths):
        return "chore"
    return ""