import pytest

from gitloom.semantic_context import ChangedFile
from gitloom.semantic_suggestions import (
    is_generic_description,
    is_generic_scope,
    suggest_description,
    suggest_scope,
)


@pytest.mark.parametrize(
    ("scope", "files", "expect_generic", "expect_alternatives"),
    [
        ("config", [ChangedFile(path=".gitignore")], False, 0),
        ("gitignore", [ChangedFile(path=".gitignore")], True, 1),
        ("", [ChangedFile(path="internal/cli/commit.go")], True, 1),
    ],
)
def test_suggest_scope(scope, files, expect_generic, expect_alternatives):
    result = suggest_scope(scope, files)
    assert result.generic is expect_generic
    assert len(result.alternatives) >= expect_alternatives


def test_non_generic_scope_is_returned_unchanged():
    result = suggest_scope("config", [ChangedFile(path=".gitignore")])
    assert result.current == "config"
    assert result.alternatives == []


def test_gitignore_alternatives():
    result = suggest_scope("gitignore", [ChangedFile(path=".gitignore")])
    assert result.alternatives == ["config", "repo", "tooling"]


def test_empty_scope_suggests_file_name():
    result = suggest_scope("", [ChangedFile(path="internal/cli/commit.go")])
    assert result.alternatives == ["commit"]


def test_alternatives_are_limited_to_three():
    result = suggest_scope("misc", [ChangedFile(path="pkg/alpha/beta/delta.go")])
    assert result.alternatives == ["alpha", "beta", "delta"]


def test_dependency_files_suggest_tooling_scopes():
    result = suggest_scope("project", [ChangedFile(path="go.mod")])
    assert result.alternatives == ["build", "deps", "go"]


@pytest.mark.parametrize(
    ("scope", "expected"),
    [
        ("", True),
        ("gitignore", True),
        ("core", True),
        ("cli", True),
        ("config", False),
        ("commit_service", False),
        ("renderer", False),
    ],
)
def test_is_generic_scope(scope, expected):
    assert is_generic_scope(scope) is expected


@pytest.mark.parametrize(
    ("desc", "expected"),
    [
        ("atualizar", True),
        ("ajustar", True),
        ("atualizar projeto", True),
        ("adicionar suporte a retry", False),
        ("corrigir race condition no worker", False),
    ],
)
def test_is_generic_description(desc, expected):
    assert is_generic_description(desc) is expected


def test_suggest_description_flags_generic_text():
    result = suggest_description("  Atualizar Projeto ")
    assert result.generic is True
    assert result.reason == "descricao generica detectada"
    assert result.current == "  Atualizar Projeto "


def test_suggest_description_keeps_specific_text():
    result = suggest_description("adicionar suporte a retry")
    assert result.generic is False
    assert result.reason == ""