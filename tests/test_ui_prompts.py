import io

import pytest

from gitloom.ui_prompts import ask_input, confirm_commit


@pytest.mark.parametrize(
    ("answer", "expected"),
    [
        ("y\n", True),
        ("yes\n", True),
        ("\n", True),
        ("nope\n", False),
    ],
)
def test_confirm_commit(answer, expected):
    output = io.StringIO()
    confirmed = confirm_commit(io.StringIO(answer), output, "criar commit?")
    assert confirmed is expected
    text = output.getvalue()
    assert ">" in text
    assert "criar commit?" in text
    assert "[Y/n]:" in text


def test_confirm_commit_accepts_answer_without_newline():
    assert confirm_commit(io.StringIO("YES"), io.StringIO(), "criar?") is True


def test_confirm_commit_at_end_of_input_counts_as_yes():
    assert confirm_commit(io.StringIO(""), io.StringIO(), "criar?") is True


def test_ask_input():
    output = io.StringIO()
    answer = ask_input(io.StringIO("nova mensagem\n"), output, "editar mensagem")
    assert answer == "nova mensagem"
    assert "editar mensagem" in output.getvalue()