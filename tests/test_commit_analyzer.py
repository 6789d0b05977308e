import pytest

from gitloom.commit_analyzer import (
    Analysis,
    Change,
    analyze_diff,
    contains_any,
    extract_changes,
)
from gitloom.commit_model import CommitType


def test_analyze_diff():
    diff = "\n".join(
        [
            "diff --git a/internal/app/commit_service.go b/internal/app/commit_service.go",
            "index 1111111..2222222 100644",
            "--- a/internal/app/commit_service.go",
            "+++ b/internal/app/commit_service.go",
            "@@ -1,3 +1,3 @@",
            "diff --git a/internal/cli/commit.go b/internal/cli/commit.go",
            "new file mode 100644",
            "--- /dev/null",
            "+++ b/internal/cli/commit.go",
        ]
    )

    analysis = analyze_diff(diff, CommitType.FIX)

    assert analysis.scope == "app"
    assert analysis.description == "corrigir app"
    assert "- atualiza commit service em app" in analysis.body
    assert "- adiciona comando commit em cli" in analysis.body


def test_analyze_diff_for_tests():
    diff = "\n".join(
        [
            "diff --git a/internal/domain/commit/analyzer_test.go b/internal/domain/commit/analyzer_test.go",
            "index 1111111..2222222 100644",
        ]
    )

    analysis = analyze_diff(diff, CommitType.TEST)

    assert analysis.scope == "commit"
    assert analysis.description == "ajustar testes de analyzer"
    assert "- atualiza testes de analyzer em domain/commit" in analysis.body


def test_analyze_diff_adds_semantic_hints_from_patch():
    diff = "\n".join(
        [
            "diff --git a/internal/cli/commit.go b/internal/cli/commit.go",
            "index 1111111..2222222 100644",
            "--- a/internal/cli/commit.go",
            "+++ b/internal/cli/commit.go",
            "@@ -10,6 +10,12 @@",
            "+func buildJSONExecutionSummary() {}",
            '+command.Flags().BoolVar(&options.json, "json", false, "render json")',
            '+Use: "commit"',
        ]
    )

    analysis = analyze_diff(diff, CommitType.FEAT)

    assert analysis.description == "atualizar saida json do cli"
    assert "- ajusta funcoes: buildJSONExecutionSummary" in analysis.body
    assert "- ajusta flags: --json" in analysis.body
    assert "- ajusta comandos: commit" in analysis.body


def test_analyze_empty_diff():
    assert analyze_diff("", CommitType.CHORE) == Analysis(
        scope="", description="atualizar repositorio", body=""
    )


def test_analyze_added_docs_file():
    diff = "diff --git a/docs/guide.md b/docs/guide.md\nnew file mode 100644"
    analysis = analyze_diff(diff, CommitType.DOCS)

    assert analysis.scope == "docs"
    assert analysis.description == "documentar guide"
    assert analysis.body == "- adiciona guide em docs"


def test_analyze_accepts_plain_string_type():
    diff = "diff --git a/internal/cli/root.go b/internal/cli/root.go\nindex 1..2 100644"
    analysis = analyze_diff(diff, "refactor")

    assert analysis.description == "refatorar comando raiz"


def test_function_list_is_limited_to_three():
    diff = "\n".join(
        [
            "diff --git a/pkg/tool/main.go b/pkg/tool/main.go",
            "index 1..2 100644",
            "+func a() {}",
            "+func b() {}",
            "+func c() {}",
            "+func d() {}",
        ]
    )
    analysis = analyze_diff(diff, CommitType.FEAT)

    assert "- ajusta funcoes: a, b, c" in analysis.body.split("\n")
    assert "d" not in analysis.body.split("\n")[-1]


def test_method_receiver_is_skipped_in_function_name():
    diff = "\n".join(
        [
            "diff --git a/pkg/tool/render.go b/pkg/tool/render.go",
            "index 1..2 100644",
            "+func (r Renderer) Render() string {",
        ]
    )
    analysis = analyze_diff(diff, CommitType.FEAT)

    assert "- ajusta funcoes: Render" in analysis.body


def test_extract_changes_deduplicates_and_sorts():
    diff = "\n".join(
        [
            "diff --git a/z.go b/z.go",
            "deleted file mode 100644",
            "diff --git a/a.go b/a.go",
            "new file mode 100644",
            "diff --git a/z.go b/z.go",
            "index 1..2 100644",
        ]
    )

    assert extract_changes(diff) == [
        Change(path="a.go", status="adicionado"),
        Change(path="z.go", status="atualizado"),
    ]


def test_extract_changes_marks_last_line_as_modified():
    assert extract_changes("diff --git a/x.go b/x.go") == [
        Change(path="x.go", status="modificado")
    ]


def test_extract_changes_skips_malformed_headers():
    assert extract_changes("diff --git a/x.go\nindex 1..2") == []


def test_removed_file_is_described_as_removed():
    diff = "diff --git a/internal/infra/git/old.go b/internal/infra/git/old.go\ndeleted file mode 100644"
    analysis = analyze_diff(diff, CommitType.CHORE)

    assert analysis.scope == "git"
    assert analysis.body == "- remove old em infra/git"


@pytest.mark.parametrize(
    "content, keywords, expected",
    [
        ("fix the bug", ("bug",), True),
        ("fix the bug", ("error", "fail"), False),
        ("", ("x",), False),
        ("anything", (), False),
    ],
)
def test_contains_any(content, keywords, expected):
    assert contains_any(content, *keywords) is expected