import pytest

from gitloom.commit_classifier import classify_commit
from gitloom.commit_model import CommitType


@pytest.mark.parametrize(
    ("diff", "expected"),
    [
        ("add support for branch automation", CommitType.FEAT),
        ("fix timeout error in git command", CommitType.FIX),
        ("refactor commit generator to simplify logic", CommitType.REFACTOR),
        ("update dependency metadata", CommitType.CHORE),
        ("remove flaky timeout workaround after bug fix", CommitType.FIX),
        ("move generator helpers to dedicated functions", CommitType.REFACTOR),
        ("docs: update installation guide", CommitType.DOCS),
        ("add commit_service_test.go coverage", CommitType.TEST),
        (
            "diff --git a/README.md b/README.md\nindex 1111111..2222222 100644",
            CommitType.DOCS,
        ),
        (
            "diff --git a/go.mod b/go.mod\nindex 1111111..2222222 100644",
            CommitType.CHORE,
        ),
    ],
)
def test_classify_commit(diff, expected):
    assert classify_commit(diff) == expected


def test_new_source_file_is_feature():
    diff = "diff --git a/pkg/x/new.go b/pkg/x/new.go\nnew file mode 100644"
    assert classify_commit(diff) == CommitType.FEAT


def test_modified_source_file_is_refactor():
    diff = "diff --git a/pkg/x/old.go b/pkg/x/old.go\nindex 1..2 100644"
    assert classify_commit(diff) == CommitType.REFACTOR


def test_empty_diff_is_chore():
    assert classify_commit("") == CommitType.CHORE