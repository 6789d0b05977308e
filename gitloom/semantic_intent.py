"""Detection of the intent behind a commit block."""

from __future__ import annotations

from typing import Iterable, Union

from gitloom.commit_model import CommitType
from gitloom.semantic_context import (
    ChangedFile,
    ChangeIntent,
    CommitContext,
    contains_tag,
    normalize_scope_from_files,
)

_EXACT_TARGETS = {
    "README.md": "documentacao principal do projeto",
    "go.mod": "dependencies do projeto",
    "go.sum": "dependencies do projeto",
    "Makefile": "commandos de desenvolvimento",
    ".gitloom.yaml": "configuracao do projeto",
}

_SUFFIX_TARGETS = (
    ("main.go", "inicializacao do cli"),
    ("root.go", "commando raiz"),
    ("commit.go", "fluxo de commit"),
    ("commit_service.go", "planejamento de commits"),
    ("commit_feedback.go", "feedback semantico de commit"),
    ("prompts.go", "prompts do cli"),
    ("renderer.go", "renderer do cli"),
    ("commit_view.go", "visao de commit"),
    ("summary_view.go", "resumo do fluxo de commit"),
    ("messages.go", "mensagens do cli"),
    ("intent_detector.go", "heuristicas de intencao semantica"),
    ("scope_normalizer.go", "normalizacao de escopo"),
    ("output.go", "layout do cli"),
    ("repository.go", "repositorio git"),
    ("analyzer.go", "analise semantica de commits"),
    ("classifier.go", "classificacao de commits"),
    ("generator.go", "geracao de mensagens de commit"),
)

_SCOPE_DESCRIPTIONS = {
    "deps": "atualizar dependencies do projeto",
    "build": "ajustar commandos de desenvolvimento",
}

_SCOPE_REASONS = {
    "readme": "melhorar a clareza de uso para quem adota o projeto",
    "deps": "manter as dependencies alinhadas com a versao atual do projeto",
    "build": "simplificar o fluxo de desenvolvimento local",
    "config": "padronizar o comportamento do cli",
}

_TAG_REASONS = (
    (("preview",), "aumentar a visibilidade do impacto antes do commit"),
    (("strict",), "reforcar validacoes de qualidade antes de commitar"),
    (("score",), "medir melhor a qualidade semantica dos commits"),
    (("suggest",), "orientar agrupamentos e descricoes melhores"),
    (("prompt", "output"), "melhorar a experiencia visual do cli"),
)

_VERBS = {
    "fix": "corrigir",
    "refactor": "refinar",
    "docs": "atualizar",
    "test": "ajustar testes de",
}

_MULTI_FILE_TARGETS = {
    "cli": "fluxo de commit",
    "git": "repositorio git",
    "commit": "motor de commits",
    "app": "planejamento de commits",
}


def detect_intent(commit_type: Union[CommitType, str], context: CommitContext) -> ChangeIntent:
    """Work out scope, reason and description of a commit block."""
    type_name = str(commit_type)
    scope = normalize_scope_from_files(context.files)
    target = _detect_intent_target(scope, context)
    return ChangeIntent(
        type=type_name,
        scope=scope,
        intent=_detect_intent_reason(scope, target, context),
        description=_build_intent_description(type_name, scope, target, context),
    )


def _build_intent_description(
    commit_type: str, scope: str, target: str, context: CommitContext
) -> str:
    if commit_type == "test" and target.strip():
        return "ajustar " + target

    if scope == "readme":
        if contains_tag(context.tags, "commit") or contains_tag(context.tags, "cli"):
            return "atualizar instrucoes de uso do cli commit"
        return "atualizar documentacao principal do projeto"
    if scope in _SCOPE_DESCRIPTIONS:
        return _SCOPE_DESCRIPTIONS[scope]
    if scope == "config":
        if contains_tag(context.tags, "strict"):
            return "ajustar configuracao do modo estrito"
        return "ajustar configuracao do projeto"

    verb = _detect_intent_verb(commit_type, context)
    if scope == "cli" and target == "fluxo de commit":
        return (verb + " fluxo de commit").strip()
    if scope == "ui" and target == "layout do cli":
        return (verb + " layout do cli").strip()
    if not target:
        return (verb + " " + scope).strip()
    return (verb + " " + target).strip()


def _detect_intent_verb(commit_type: str, context: CommitContext) -> str:
    if commit_type == "feat":
        return "adicionar" if _has_only_status(context.files, "adicionado") else "evoluir"
    return _VERBS.get(commit_type, "ajustar")


def _detect_intent_target(scope: str, context: CommitContext) -> str:
    if not context.files:
        return "repositorio"
    if len(context.files) == 1:
        return _normalize_intent_target(scope, context.files[0].path)
    if scope == "ui":
        if any(contains_tag(context.tags, tag) for tag in ("renderer", "output", "prompt")):
            return "camada de apresentacao do cli"
        return "layout do cli"
    return _MULTI_FILE_TARGETS.get(scope, scope)


def _base(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _ext(name: str) -> str:
    index = name.rfind(".")
    return name[index:] if index >= 0 else ""


def _normalize_intent_target(scope: str, path: str) -> str:
    base_name = _base(path)
    if path in _EXACT_TARGETS:
        return _EXACT_TARGETS[path]
    for suffix, target in _SUFFIX_TARGETS:
        if path.endswith(suffix):
            return target
    if path.endswith("_test.go"):
        name = base_name[: -len("_test.go")] if base_name.endswith("_test.go") else base_name
        target = _normalize_intent_target(scope, name + ".go")
        if target:
            return "testes de " + target
        return "testes de " + name.replace("_", " ")
    if scope:
        return scope
    extension = _ext(base_name)
    name = base_name[: len(base_name) - len(extension)] if extension else base_name
    return name.replace("_", " ")


def _detect_intent_reason(scope: str, target: str, context: CommitContext) -> str:
    if scope in _SCOPE_REASONS:
        return _SCOPE_REASONS[scope]
    for tags, reason in _TAG_REASONS:
        if any(contains_tag(context.tags, tag) for tag in tags):
            return reason
    if target:
        return "deixar o fluxo mais claro e previsivel"
    return "melhorar a organizacao das mudancas"


def _has_only_status(files: Iterable[ChangedFile], status: str) -> bool:
    files = list(files)
    return bool(files) and all(changed.status == status for changed in files)