"""Loading and rendering of the ``.gitloom.yaml`` configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass
class CommitConfig:
    """Commit-related settings."""

    scope: str = ""


@dataclass
class CLIConfig:
    """Command-line behaviour settings."""

    auto_confirm: bool = False


@dataclass
class Config:
    """Complete tool configuration."""

    commit: CommitConfig = field(default_factory=CommitConfig)
    cli: CLIConfig = field(default_factory=CLIConfig)


def default_config() -> Config:
    """Return the configuration used when no file is present."""
    return Config()


def render_default_config() -> str:
    """Return the text written by ``config init``."""
    return 'commit:\n  scope: ""\n\ncli:\n  auto_confirm: false\n'


def load(path: Union[str, "os.PathLike[str]"]) -> Config:
    """Read the configuration at ``path``; a missing file yields the defaults."""
    try:
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
    except FileNotFoundError:
        return default_config()
    return parse_config(content)


def parse_config(content: str) -> Config:
    """Parse the small YAML subset the configuration file uses."""
    configuration = default_config()
    section = ""

    for raw_line in content.split("\n"):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.endswith(":") and " " not in line:
            section = line[:-1]
            continue

        pair = _split_key_value(line)
        if pair is None:
            continue
        key, value = pair

        if section == "commit" and key == "scope":
            configuration.commit.scope = value
        elif section == "cli" and key == "auto_confirm":
            configuration.cli.auto_confirm = value == "true"

    return configuration


def _split_key_value(line: str) -> Optional[Tuple[str, str]]:
    key, separator, value = line.partition(":")
    if not separator:
        return None
    key = key.strip()
    if not key:
        return None
    return key, value.strip().strip("\"'")