import pytest

from gitloom.config import (
    CLIConfig,
    CommitConfig,
    Config,
    default_config,
    load,
    parse_config,
    render_default_config,
)


def test_load_returns_defaults_when_file_does_not_exist(tmp_path):
    configuration = load(tmp_path / ".gitloom.yaml")
    assert configuration.commit.scope == ""
    assert configuration.cli.auto_confirm is False


def test_load_parses_supported_gitloom_config(tmp_path):
    path = tmp_path / ".gitloom.yaml"
    path.write_text("commit:\n  scope: core\ncli:\n  auto_confirm: true\n", encoding="utf-8")

    configuration = load(str(path))
    assert configuration.commit.scope == "core"
    assert configuration.cli.auto_confirm is True


def test_load_propagates_other_read_errors(tmp_path):
    with pytest.raises(OSError):
        load(tmp_path)


def test_default_config():
    configuration = default_config()
    assert configuration.commit.scope == ""
    assert configuration.cli.auto_confirm is False
    assert configuration == Config(CommitConfig(), CLIConfig())


def test_rendered_default_parses_back_to_defaults():
    assert parse_config(render_default_config()) == default_config()


def test_parse_strips_quotes_and_skips_comments():
    content = "# comment\ncommit:\n  # scope: ignored\n  scope: 'core'\ncli:\n  auto_confirm: \"true\"\n"
    configuration = parse_config(content)
    assert configuration.commit.scope == "core"
    assert configuration.cli.auto_confirm is True


def test_parse_ignores_keys_outside_their_section():
    content = "scope: core\nother:\n  auto_confirm: true\n  scope: cli\n"
    assert parse_config(content) == default_config()


def test_parse_treats_non_true_value_as_false():
    configuration = parse_config("cli:\n  auto_confirm: yes\n")
    assert configuration.cli.auto_confirm is False


def test_parse_skips_lines_without_separator():
    configuration = parse_config("commit:\n  garbage line\n  scope: core\n")
    assert configuration.commit.scope == "core"