"""Interactive prompts read from a text stream."""

from __future__ import annotations

from typing import TextIO

from gitloom.messages import MESSAGE_COMMIT_PROMPT_SUFFIX
from gitloom.ui_renderer import (
    DEFAULT_COLOR,
    EMPHASIS_COLOR,
    STATUS_PROMPT_COLOR,
    colorize_text,
)

_YES_ANSWERS = frozenset({"", "y", "yes"})


def confirm_commit(input_stream: TextIO, output_stream: TextIO, question: str) -> bool:
    """Ask a yes/no question; an empty answer counts as yes."""
    prefix = colorize_text(STATUS_PROMPT_COLOR, ">")
    highlighted = colorize_text(DEFAULT_COLOR, question)
    suffix = colorize_text(EMPHASIS_COLOR, MESSAGE_COMMIT_PROMPT_SUFFIX)
    output_stream.write(f"\n{prefix} {highlighted} {suffix}")
    output_stream.flush()

    answer = input_stream.readline()
    return answer.strip().lower() in _YES_ANSWERS


def ask_input(input_stream: TextIO, output_stream: TextIO, question: str) -> str:
    """Ask for a line of text and return it stripped."""
    prefix = colorize_text(STATUS_PROMPT_COLOR, ">")
    highlighted = colorize_text(DEFAULT_COLOR, question)
    suffix = colorize_text(EMPHASIS_COLOR, ": ")
    output_stream.write(f"\n{prefix} {highlighted}{suffix}")
    output_stream.flush()

    return input_stream.readline().strip()