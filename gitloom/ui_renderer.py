"""Terminal rendering primitives: colours, badges and status lines."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, TextIO, Tuple, Union

BORDER_COLOR = "90"
ACCENT_COLOR = "36"
HEADER_COLOR = "33"
DEFAULT_COLOR = "37"
MUTATED_COLOR = "94"
MUTED_COLOR = "90"
SUCCESS_COLOR = "32"
WARNING_COLOR = "33"
DANGER_COLOR = "31"
EMPHASIS_COLOR = "96"
INFO_COLOR = "34"
MAGENTA_COLOR = "35"
PANEL_BACKGROUND = "48;5;53"
PANEL_BORDER_COLOR = "38;5;203"
PANEL_TEXT_COLOR = "38;5;230"
MUTED_CAPS_COLOR = "37"
STATUS_ADD_COLOR = "32"
STATUS_UPDATE_COLOR = "33"
STATUS_REMOVE_COLOR = "31"
STATUS_PROMPT_COLOR = "36"
LABEL_COLOR = "38;5;109"
TYPE_VALUE_COLOR = "38;5;45"
SCOPE_VALUE_COLOR = "38;5;219"

_RESET = "\x1b[0m"


class RenderMode(str, Enum):
    """How much detail the renderer shows."""

    CLEAN = "clean"
    VERBOSE = "verbose"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RenderOptions:
    """Options that control the renderer's output."""

    mode: Union[RenderMode, str] = RenderMode.CLEAN
    show_preview: bool = False
    show_explain: bool = False


class Renderer:
    """Renders workflow output for the terminal."""

    def __init__(self, options: Optional[RenderOptions] = None) -> None:
        options = options or RenderOptions()
        if not options.mode:
            options = replace(options, mode=RenderMode.CLEAN)
        self._options = options

    @property
    def options(self) -> RenderOptions:
        """The options the renderer was built with."""
        return self._options

    @property
    def mode(self) -> RenderMode:
        """The effective render mode."""
        return RenderMode(self._options.mode) if self._options.mode else RenderMode.CLEAN

    @property
    def show_preview(self) -> bool:
        """Whether diff previews are shown."""
        return self._options.show_preview

    @property
    def show_explain(self) -> bool:
        """Whether grouping explanations are shown."""
        return self._options.show_explain

    def section_title(self, title: str) -> str:
        """Return ``title:`` in the accent colour."""
        return colorize_line(ACCENT_COLOR, title + ":")


def use_ansi_colors() -> bool:
    """Tell whether ANSI colours are enabled (NO_COLOR unset or empty)."""
    return os.environ.get("NO_COLOR", "") == ""


def colorize_line(color: str, line: str) -> str:
    """Wrap ``line`` in the ANSI colour ``color`` when colours are enabled."""
    if not use_ansi_colors():
        return line
    return f"\x1b[{color}m{line}{_RESET}"


def colorize_text(color: str, value: str) -> str:
    """Like colorize_line, but leave ``value`` alone when ``color`` is blank."""
    if not use_ansi_colors() or not color.strip():
        return value
    return f"\x1b[{color}m{value}{_RESET}"


def split_commit_message(message: str) -> Tuple[str, str]:
    """Split a commit message into subject and body."""
    subject, separator, body = message.strip().partition("\n\n")
    if not separator:
        return subject.strip(), ""
    return subject.strip(), body.strip()


def score_badge(score: int) -> str:
    """Return ``[score] label`` coloured by quality band."""
    if score >= 90:
        label, color = "excelente", SUCCESS_COLOR
    elif score >= 80:
        label, color = "bom", SUCCESS_COLOR
    elif score >= 70:
        label, color = "aceitavel", WARNING_COLOR
    else:
        label, color = "critico", DANGER_COLOR
    return colorize_line(color, f"[{score}] {label}")


def pluralize_commits(total: int) -> str:
    """Return the singular or plural label for ``total`` created commits."""
    plural = total != 1
    noun = "commits" if plural else "commit"
    participle = "criados" if plural else "criado"
    return f"{noun} {participle}"


def print_status(stream: TextIO, message: str) -> None:
    """Write an in-progress status line."""
    stream.write("\r" + colorize_line(ACCENT_COLOR, "  " + message) + "\n")


def print_status_done(stream: TextIO, message: str) -> None:
    """Write a completed status line."""
    stream.write("\r" + colorize_line(SUCCESS_COLOR, "  " + message) + "\n")