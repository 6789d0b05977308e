"""Semantic context of a diff: changed files, tags, preview and scope."""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Union

from gitloom.commit_model import CommitType

_TOKEN_SPLIT = re.compile(r"[_\-./ ]+")

_TAG_KEYWORDS = (
    "commit", "cli", "preview", "strict", "score", "suggest", "prompt",
    "output", "readme", "deps", "build", "config", "git", "test", "ui",
    "json", "help", "version", "doctor", "renderer",
)

_CROSS_CUTTING_TOPICS = (
    "json", "help", "config", "version", "doctor", "renderer", "output", "commit",
)

_CROSS_CUTTING_TYPES = frozenset({"refactor", "chore", "docs", "test", "fix"})

_PREFIX_SCOPES = (
    (("cmd/", "internal/cli/"), "cli"),
    (("internal/ui/",), "ui"),
    (("internal/infra/git/",), "git"),
    (("internal/infra/config/",), "config"),
    (("internal/domain/commit/",), "commit"),
    (("internal/app/",), "app"),
    (("internal/domain/",), "core"),
    (("internal/infra/",), "infra"),
)

_FILE_SCOPES = {
    "README.md": "readme",
    "go.mod": "deps",
    "go.sum": "deps",
    "Makefile": "build",
    ".gitloom.yaml": "config",
}


@dataclass
class ChangedFile:
    """A file touched by a diff."""

    path: str
    status: str = "atualizado"


@dataclass
class CommitContext:
    """Files, raw diff and detected tags of one commit block."""

    files: list[ChangedFile] = field(default_factory=list)
    diff: str = ""
    tags: list[str] = field(default_factory=list)


@dataclass
class ChangeIntent:
    """What a commit block is about and why."""

    type: str = ""
    scope: str = ""
    intent: str = ""
    description: str = ""


@dataclass
class CommitPreview:
    """Size of a commit block."""

    files_changed: int = 0
    additions: int = 0
    deletions: int = 0


@dataclass
class QualityCriteria:
    """One quality check and its outcome."""

    name: str
    message: str = ""
    passed: bool = False
    warning: bool = False


@dataclass
class CommitQuality:
    """Overall quality score with the checks behind it."""

    criteria: list[QualityCriteria] = field(default_factory=list)
    reasons: list[str] = field(default_factory=list)
    score: int = 0


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


def _trim_suffix(value: str, suffix: str) -> str:
    return value[: len(value) - len(suffix)] if suffix and value.endswith(suffix) else value


def new_commit_context(diff: str) -> CommitContext:
    """Build the context of ``diff``: its files and detected tags."""
    files = _extract_changed_files(diff)
    return CommitContext(files=files, diff=diff, tags=_detect_tags(diff, files))


def build_preview(context: CommitContext) -> CommitPreview:
    """Count files, added and removed lines of the context's diff."""
    additions = 0
    deletions = 0
    for line in context.diff.split("\n"):
        if line.startswith(("+++", "---")):
            continue
        if line.startswith("+"):
            additions += 1
        elif line.startswith("-"):
            deletions += 1
    return CommitPreview(
        files_changed=len(context.files), additions=additions, deletions=deletions
    )


def build_grouping_key(commit_type: Union[CommitType, str], context: CommitContext) -> str:
    """Return the key that decides which changes share a commit."""
    type_name = str(commit_type)
    topic = _cross_cutting_topic(type_name, context)
    if topic:
        return "|".join((type_name, "topic", topic))
    return "|".join(
        (
            type_name,
            normalize_scope_from_files(context.files),
            _normalize_package_family(context.files),
        )
    )


def normalize_scope_from_files(files: Iterable[ChangedFile]) -> str:
    """Return the most common non-empty scope among ``files``."""
    votes: dict[str, int] = {}
    for changed in files:
        scope = normalize_scope(changed.path)
        if scope:
            votes[scope] = votes.get(scope, 0) + 1
    return most_common(votes)


def normalize_scope(path: str) -> str:
    """Map a repository path to a commit scope."""
    normalized = path.strip()
    if not normalized:
        return ""
    if normalized in _FILE_SCOPES:
        return _FILE_SCOPES[normalized]
    for prefixes, scope in _PREFIX_SCOPES:
        if normalized.startswith(prefixes):
            return scope
    name = _trim_suffix(_base(normalized), _ext(normalized))
    return name.replace("_", "-").lower()


def most_common(votes: Mapping[str, int]) -> str:
    """Return the key with most votes, the smallest key on ties, or ""."""
    if not votes:
        return ""
    return min(votes.items(), key=lambda item: (-item[1], item[0]))[0]


def contains_tag(tags: Iterable[str], expected: str) -> bool:
    """Tell whether ``expected`` is among ``tags``."""
    return expected in tags


def _extract_changed_files(diff: str) -> list[ChangedFile]:
    lines = diff.split("\n")
    unique: dict[str, ChangedFile] = {}
    for index, raw_line in enumerate(lines):
        line = raw_line.strip()
        if not line.startswith("diff --git "):
            continue
        path = _extract_path(line)
        if not path:
            continue
        unique[path] = ChangedFile(path=path, status=_detect_status(lines, index))
    return [unique[path] for path in sorted(unique)]


def _extract_path(line: str) -> str:
    fields = line.split()
    if len(fields) < 4:
        return ""
    path = fields[3]
    return path[2:] if path.startswith("b/") else path


def _detect_status(lines: list[str], start: int) -> str:
    if start + 1 >= len(lines):
        return "atualizado"
    next_line = lines[start + 1].strip()
    if next_line.startswith("new file mode"):
        return "adicionado"
    if next_line.startswith("deleted file mode"):
        return "removido"
    return "atualizado"


def _detect_tags(diff: str, files: Iterable[ChangedFile]) -> list[str]:
    tags: set[str] = set()
    normalized_diff = diff.lower()

    for changed in files:
        base_name = _base(changed.path).lower()
        name = _trim_suffix(base_name, _ext(base_name))
        tags.update(part for part in _TOKEN_SPLIT.split(name) if len(part) >= 3)

    tags.update(keyword for keyword in _TAG_KEYWORDS if keyword in normalized_diff)
    return sorted(tags)


def _cross_cutting_topic(commit_type: str, context: CommitContext) -> str:
    if commit_type not in _CROSS_CUTTING_TYPES:
        return ""
    return next(
        (topic for topic in _CROSS_CUTTING_TOPICS if contains_tag(context.tags, topic)),
        "",
    )


def _normalize_package_family(files: list[ChangedFile]) -> str:
    if not files:
        return "root"
    votes: dict[str, int] = {}
    for changed in files:
        family = _package_family(changed.path)
        votes[family] = votes.get(family, 0) + 1
    return most_common(votes)


def _package_family(path: str) -> str:
    directory = _dir(path)
    if directory in (".", ""):
        return normalize_scope(path)
    segments = directory.split("/")
    if len(segments) >= 3 and segments[0] == "internal":
        return "/".join(segments[:3])
    if len(segments) >= 2:
        return "/".join(segments[:2])
    return directory