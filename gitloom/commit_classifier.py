"""Heuristic classification of a diff into a conventional commit type."""

from __future__ import annotations

from gitloom.commit_analyzer import Change, contains_any, extract_changes
from gitloom.commit_model import CommitType

_SOURCE_EXTENSIONS = (".go", ".ts", ".tsx", ".js", ".jsx")
_CHORE_FILES = frozenset({"go.mod", "go.sum", "makefile", ".gitloom.yaml"})


def classify_commit(diff: str) -> CommitType:
    """Return the commit type that best describes ``diff``."""
    content = diff.lower()
    changes = extract_changes(diff)

    if _has_docs_file_signal(changes) or _has_docs_signal(content):
        return CommitType.DOCS
    if _has_test_file_signal(changes) or _has_test_signal(content):
        return CommitType.TEST
    if _has_chore_file_signal(changes):
        return CommitType.CHORE
    if _has_fix_signal(content):
        return CommitType.FIX
    if _has_feature_file_signal(content):
        return CommitType.FEAT
    if _has_refactor_file_signal(content):
        return CommitType.REFACTOR
    if _has_refactor_signal(content):
        return CommitType.REFACTOR
    if _has_feature_signal(content):
        return CommitType.FEAT
    return CommitType.CHORE


def _has_docs_file_signal(changes: list[Change]) -> bool:
    return any(change.path.lower().endswith(".md") for change in changes)


def _has_test_file_signal(changes: list[Change]) -> bool:
    return any(change.path.lower().endswith("_test.go") for change in changes)


def _has_chore_file_signal(changes: list[Change]) -> bool:
    return any(change.path.lower() in _CHORE_FILES for change in changes)


def _has_fix_signal(content: str) -> bool:
    if contains_any(
        content, "fix", "bug", "error", "fail", "hotfix", "regression", "broken", "issue"
    ):
        return True
    return contains_any(content, "remove", "delete", "revert") and contains_any(
        content, "bug", "error", "fail", "broken"
    )


def _has_refactor_signal(content: str) -> bool:
    return contains_any(
        content, "refactor", "cleanup", "rename", "extract", "simplify", "move", "reorganize"
    )


def _has_feature_signal(content: str) -> bool:
    return contains_any(
        content, "feat", "add", "create", "implement", "introduce", "support", "enable"
    )


def _has_feature_file_signal(content: str) -> bool:
    return "new file mode" in content and contains_any(content, *_SOURCE_EXTENSIONS)


def _has_refactor_file_signal(content: str) -> bool:
    return "diff --git" in content and contains_any(content, *_SOURCE_EXTENSIONS)


def _has_docs_signal(content: str) -> bool:
    return contains_any(content, ".md", "readme", "docs", "document", "documentation")


def _has_test_signal(content: str) -> bool:
    return contains_any(content, "_test.go", "test", "spec", "coverage")