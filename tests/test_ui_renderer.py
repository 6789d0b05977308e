import io

import pytest

from gitloom.ui_renderer import (
    ACCENT_COLOR,
    DANGER_COLOR,
    RenderMode,
    RenderOptions,
    Renderer,
    colorize_line,
    colorize_text,
    pluralize_commits,
    print_status,
    print_status_done,
    score_badge,
    split_commit_message,
    use_ansi_colors,
)


@pytest.fixture
def no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def with_color(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)


def test_use_ansi_colors_follows_no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert use_ansi_colors() is False
    monkeypatch.setenv("NO_COLOR", "")
    assert use_ansi_colors() is True


def test_colorize_text_wraps_in_escape_codes(with_color):
    assert colorize_text(DANGER_COLOR, "x") == "\x1b[31mx\x1b[0m"
    assert colorize_line(ACCENT_COLOR, "y") == "\x1b[36my\x1b[0m"


def test_colorize_text_blank_color_leaves_value(with_color):
    assert colorize_text("  ", "value") == "value"


def test_colorize_disabled_returns_plain(no_color):
    assert colorize_text(DANGER_COLOR, "x") == "x"
    assert colorize_line(DANGER_COLOR, "x") == "x"


def test_split_commit_message_with_body():
    subject, body = split_commit_message(
        "feat(cli): adicionar fluxo de commit\n\n- adiciona renderer novo"
    )
    assert subject == "feat(cli): adicionar fluxo de commit"
    assert body == "- adiciona renderer novo"


def test_split_commit_message_without_body():
    assert split_commit_message("  docs(config): atualizar regras \n") == (
        "docs(config): atualizar regras",
        "",
    )


def test_score_badge_labels(no_color):
    assert score_badge(85) == "[85] bom"
    assert score_badge(95).endswith("excelente")
    assert score_badge(70).endswith("aceitavel")
    assert score_badge(10).endswith("critico")


def test_pluralize_commits():
    assert pluralize_commits(1) == "commit criado"
    assert pluralize_commits(2) == "commits criados"


def test_renderer_defaults_to_clean_mode():
    assert Renderer().mode is RenderMode.CLEAN
    assert Renderer(RenderOptions(mode="")).mode is RenderMode.CLEAN
    verbose = Renderer(RenderOptions(mode=RenderMode.VERBOSE, show_preview=True))
    assert verbose.mode is RenderMode.VERBOSE
    assert verbose.show_preview is True
    assert verbose.show_explain is False


def test_section_title(no_color):
    assert Renderer().section_title("analise") == "analise:"


def test_print_status_lines(no_color):
    stream = io.StringIO()
    print_status(stream, "analisando")
    print_status_done(stream, "pronto")
    assert stream.getvalue() == "\r  analisando\n\r  pronto\n"