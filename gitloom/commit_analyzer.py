"""Structured analysis of a staged diff: scope, description and body."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from gitloom.commit_model import CommitType

_FLAG_PATTERN = re.compile(r"--[a-z0-9][a-z0-9-]*")
_COBRA_FLAG_PATTERN = re.compile(
    r'(?:BoolVar|StringVar|IntVar|DurationVar)\([^,]+,\s*"([^"]+)"'
)
_COMMAND_PATTERN = re.compile(r'Use:\s*"([^"]+)"')

_SPECIFIC_TARGETS = (
    ("commit_service.go", "commit service"),
    ("commit_feedback.go", "feedback de commit"),
    ("branch_service.go", "branch service"),
    ("workflow_service.go", "workflow service"),
    ("commit.go", "comando commit"),
    ("branch.go", "comando branch"),
    ("root.go", "comando raiz"),
    ("loader.go", "loader de configuracao"),
    ("schema.go", "schema de configuracao"),
    ("repository.go", "repositorio"),
    ("prompts.go", "prompts"),
    ("renderer.go", "renderer"),
    ("commit_view.go", "visao de commit"),
    ("summary_view.go", "resumo"),
    ("messages.go", "mensagens"),
    ("intent_detector.go", "detector de intencao"),
    ("scope_normalizer.go", "normalizador de escopo"),
    ("output.go", "output"),
    ("_test.go", "testes"),
)

_TOPIC_RULES = (
    (("json", "marshal", "unmarshal"), "saida json"),
    (("prompt", "confirm", "[y/n]", "stdin", "stdout"), "confirmacao do fluxo"),
    (("strict",), "modo estrito"),
    (("preview", "diff impact"), "preview de mudancas"),
    (("optimize", "suggestion", "sugest"), "sugestoes de agrupamento"),
    (("config", "yaml", "loader", "schema"), "configuracao"),
    (("doctor", "check", "diagnostic"), "diagnostico"),
    (("commit", "stage", "staged"), "fluxo de commit"),
    (("analyze", "review", "plan"), "analise de commits"),
)


@dataclass(frozen=True)
class Analysis:
    """Result of analysing a diff."""

    scope: str = ""
    description: str = ""
    body: str = ""


@dataclass(frozen=True)
class Change:
    """A file touched by a diff and what happened to it."""

    path: str
    status: str


@dataclass(frozen=True)
class _DiffInsights:
    commands: list[str] = field(default_factory=list)
    flags: list[str] = field(default_factory=list)
    functions: list[str] = field(default_factory=list)
    topic: str = ""


def contains_any(content: str, *args: str) -> bool:
    """Tell whether any of the keywords occurs in ``content``."""
    return any(keyword in content for keyword in args)


def analyze_diff(diff: str, commit_type: Union[CommitType, str]) -> Analysis:
    """Derive scope, a short description and a detailed body from ``diff``."""
    changes = extract_changes(diff)
    insights = _extract_diff_insights(diff)
    scope = _detect_scope(changes)
    return Analysis(
        scope=scope,
        description=_build_structured_description(commit_type, scope, changes, insights),
        body=_build_structured_body(changes, insights),
    )


def extract_changes(diff: str) -> list[Change]:
    """Return the files of ``diff``, one per path, sorted by path."""
    lines = diff.split("\n")
    unique: dict[str, Change] = {}
    for index, raw_line in enumerate(lines):
        line = raw_line.strip()
        if not line.startswith("diff --git "):
            continue
        path = _extract_path(line)
        if not path:
            continue
        unique[path] = Change(path=path, status=_detect_status(lines, index))
    return [unique[path] for path in sorted(unique)]


def _extract_path(line: str) -> str:
    fields = line.split()
    if len(fields) < 4:
        return ""
    path = fields[3]
    return path[2:] if path.startswith("b/") else path


def _detect_status(lines: list[str], start: int) -> str:
    if start + 1 >= len(lines):
        return "modificado"
    next_line = lines[start + 1].strip()
    if next_line.startswith("new file mode"):
        return "adicionado"
    if next_line.startswith("deleted file mode"):
        return "removido"
    return "atualizado"


def _most_voted(votes: dict[str, int]) -> str:
    if not votes:
        return ""
    return min(votes.items(), key=lambda item: (-item[1], item[0]))[0]


def _detect_scope(changes: Iterable[Change]) -> str:
    votes: dict[str, int] = {}
    for change in changes:
        scope = _detect_path_scope(change.path)
        if scope:
            votes[scope] = votes.get(scope, 0) + 1
    return _most_voted(votes)


def _detect_path_scope(path: str) -> str:
    segments = path.split("/")
    if len(segments) >= 3 and segments[0] == "internal" and segments[1] in ("domain", "infra"):
        return segments[2]
    if len(segments) >= 2 and segments[0] in ("internal", "cmd", "pkg"):
        return segments[1]
    return _normalize_name(segments[0])


def _build_structured_description(
    commit_type: Union[CommitType, str],
    scope: str,
    changes: list[Change],
    insights: _DiffInsights,
) -> str:
    target = _detect_target(commit_type, scope, changes)
    insight_target = _detect_insight_target(scope, insights)
    if insight_target:
        target = insight_target
    action = _detect_action(commit_type, changes)

    if commit_type == CommitType.TEST and target.startswith("testes de "):
        return ("ajustar " + target).strip()
    return (action + " " + target).strip()


def _detect_target(
    commit_type: Union[CommitType, str], scope: str, changes: list[Change]
) -> str:
    if len(changes) == 1:
        return _normalize_description_target(commit_type, changes[0].path)
    return scope or "repositorio"


def _detect_action(commit_type: Union[CommitType, str], changes: list[Change]) -> str:
    if _has_only_status(changes, "adicionado"):
        return {
            CommitType.FEAT: "adicionar",
            CommitType.DOCS: "documentar",
            CommitType.TEST: "adicionar testes para",
        }.get(_as_type(commit_type), "adicionar")

    if _has_only_status(changes, "atualizado"):
        return {
            CommitType.FIX: "corrigir",
            CommitType.REFACTOR: "refatorar",
            CommitType.DOCS: "atualizar",
            CommitType.TEST: "ajustar testes de",
        }.get(_as_type(commit_type), "atualizar")

    return {
        CommitType.FEAT: "adicionar",
        CommitType.FIX: "corrigir",
        CommitType.REFACTOR: "refatorar",
        CommitType.DOCS: "documentar",
        CommitType.TEST: "cobrir",
    }.get(_as_type(commit_type), "atualizar")


def _as_type(commit_type: Union[CommitType, str]) -> Optional[CommitType]:
    try:
        return CommitType(commit_type)
    except ValueError:
        return None


def _has_only_status(changes: list[Change], status: str) -> bool:
    return bool(changes) and all(change.status == status for change in changes)


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
    directory = path[: index + 1] if index >= 0 else ""
    if not directory:
        return "."
    parts: list[str] = []
    for part in directory.split("/"):
        if part in ("", "."):
            continue
        if part == ".." and parts and parts[-1] != "..":
            parts.pop()
        elif part == ".." and directory.startswith("/"):
            continue
        else:
            parts.append(part)
    joined = "/".join(parts)
    if directory.startswith("/"):
        return "/" + joined
    return joined or "."


def _normalize_file_target(path: str) -> str:
    target = _detect_test_target(path) or _detect_specific_target(path)
    if target:
        return target
    base = _base(path)
    extension = _ext(base)
    name = base[: len(base) - len(extension)] if extension else base
    return _normalize_name(name)


def _normalize_description_target(commit_type: Union[CommitType, str], path: str) -> str:
    if commit_type == CommitType.TEST:
        subject = _detect_test_subject(path)
        if subject:
            return subject
    return _normalize_file_target(path)


def _detect_test_target(path: str) -> str:
    subject = _detect_test_subject(path)
    return "testes de " + subject if subject else ""


def _detect_test_subject(path: str) -> str:
    if not path.endswith("_test.go"):
        return ""
    name = _base(path)
    if name.endswith("_test.go"):
        name = name[: -len("_test.go")]
    return _detect_specific_target(name + ".go") or _normalize_name(name)


def _detect_specific_target(path: str) -> str:
    for fragment, target in _SPECIFIC_TARGETS:
        if fragment in path:
            return target
    return ""


def _normalize_name(name: str) -> str:
    return name.translate(str.maketrans("_-.", "   ")).strip()


def _build_structured_body(changes: list[Change], insights: _DiffInsights) -> str:
    if not changes:
        return ""

    details = ["- " + _describe_change(change) for change in changes]
    if insights.functions:
        details.append("- ajusta funcoes: " + ", ".join(insights.functions[:3]))
    if insights.flags:
        details.append("- ajusta flags: " + ", ".join(insights.flags[:4]))
    if insights.commands:
        details.append("- ajusta comandos: " + ", ".join(insights.commands[:3]))
    return "\n".join(details)


def _extract_diff_insights(diff: str) -> _DiffInsights:
    functions: set[str] = set()
    flags: set[str] = set()
    commands: set[str] = set()
    topic_votes: dict[str, int] = {}

    for line in diff.split("\n"):
        trimmed = line.strip()
        if not trimmed.startswith("+") or trimmed.startswith("+++"):
            continue
        added_line = trimmed[1:].strip()

        function = _extract_function_name(added_line)
        if function:
            functions.add(function)
        flags.update(_FLAG_PATTERN.findall(added_line))
        cobra_flag = _extract_cobra_flag_name(added_line)
        if cobra_flag:
            flags.add(cobra_flag)
        command = _extract_command_name(added_line)
        if command:
            commands.add(command)
        _collect_topic_votes(added_line.lower(), topic_votes)

    return _DiffInsights(
        commands=sorted(commands),
        flags=sorted(flags),
        functions=sorted(functions),
        topic=_most_voted(topic_votes),
    )


def _extract_function_name(line: str) -> str:
    if not line.startswith("func "):
        return ""
    rest = line[len("func "):]
    if rest.startswith("("):
        receiver_end = rest.find(")")
        if receiver_end < 0 or receiver_end + 1 >= len(rest):
            return ""
        rest = rest[receiver_end + 1:].strip()
    name_end = rest.find("(")
    if name_end <= 0:
        return ""
    return rest[:name_end].strip()


def _extract_command_name(line: str) -> str:
    match = _COMMAND_PATTERN.search(line)
    if not match:
        return ""
    fields = match.group(1).split()
    return fields[0] if fields else ""


def _extract_cobra_flag_name(line: str) -> str:
    match = _COBRA_FLAG_PATTERN.search(line)
    if not match:
        return ""
    flag = match.group(1).strip()
    return "--" + flag if flag else ""


def _collect_topic_votes(line: str, votes: dict[str, int]) -> None:
    for keywords, topic in _TOPIC_RULES:
        if contains_any(line, *keywords):
            votes[topic] = votes.get(topic, 0) + 1
            return


def _detect_insight_target(scope: str, insights: _DiffInsights) -> str:
    if not insights.topic:
        return ""
    if not scope:
        return insights.topic
    if scope == "cli":
        return insights.topic + " do cli"
    return insights.topic + " em " + scope


def _describe_change(change: Change) -> str:
    target = _normalize_file_target(change.path) + _normalize_change_context(change.path)
    if change.status == "adicionado":
        return "adiciona " + target
    if change.status == "removido":
        return "remove " + target
    return "atualiza " + target


def _normalize_change_context(path: str) -> str:
    directory = _dir(path)
    if directory in (".", ""):
        return ""
    segments = directory.split("/")
    if segments and segments[0] in ("internal", "cmd", "pkg"):
        segments = segments[1:]
    if len(segments) > 2:
        segments = segments[-2:]
    return " em " + "/".join(segments)