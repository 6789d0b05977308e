"""Git operations performed through the ``git`` command."""

from __future__ import annotations

import subprocess
from typing import Callable, Iterable, Optional, Sequence, Tuple, Union

CommandRunner = Callable[..., Union[bytes, str]]


class GitCommandError(RuntimeError):
    """Raised when an external command fails."""

    def __init__(
        self, command: Sequence[str], returncode: Optional[int], output: str
    ) -> None:
        self.command: Tuple[str, ...] = tuple(command)
        self.returncode = returncode
        self.output = output
        detail = output.strip()
        status = "could not start" if returncode is None else f"exited with {returncode}"
        message = f"{' '.join(self.command)} {status}"
        super().__init__(f"{message}: {detail}" if detail else message)


def execute_command(name: str, *args: str) -> bytes:
    """Run a command and return its combined stdout and stderr.

    Raises GitCommandError when the command cannot start or exits non-zero.
    """
    command = (name, *args)
    try:
        completed = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as error:
        raise GitCommandError(command, None, str(error)) from error

    if completed.returncode != 0:
        output = completed.stdout.decode("utf-8", errors="replace")
        raise GitCommandError(command, completed.returncode, output)
    return completed.stdout


def split_lines(content: str) -> list[str]:
    """Return the non-blank, stripped lines of ``content``."""
    return [line.strip() for line in content.strip().split("\n") if line.strip()]


def merge_file_lists(*args: Iterable[str]) -> list[str]:
    """Merge path lists into one sorted list without duplicates."""
    merged = {entry.strip() for group in args for entry in group}
    merged.discard("")
    return sorted(merged)


class Repository:
    """A Git work tree driven through a command runner."""

    def __init__(self, runner: Optional[CommandRunner] = None) -> None:
        self._runner: CommandRunner = runner or execute_command

    def get_diff(self, *args: str) -> str:
        """Return the staged diff, optionally limited to the given paths."""
        command = ["diff", "--cached"]
        if args:
            command += ["--", *args]
        return self._git(*command).strip()

    def is_repository(self) -> bool:
        """Tell whether the working directory is inside a Git work tree."""
        try:
            output = self._git("rev-parse", "--is-inside-work-tree")
        except Exception:  # any failure means "not a repository"
            return False
        return output.strip() == "true"

    def list_staged_files(self) -> list[str]:
        """Return added, copied, modified and renamed staged paths."""
        return self._list_files("diff", "--cached", "--name-only", "--diff-filter=ACMR")

    def list_changed_files(self) -> list[str]:
        """Return unstaged modified or deleted paths plus untracked files."""
        changed = self._list_files("diff", "--name-only", "--diff-filter=MD")
        untracked = self._list_files("ls-files", "--others", "--exclude-standard")
        return merge_file_lists(changed, untracked)

    def stage_files(self, paths: Sequence[str]) -> None:
        """Stage the given paths, including deletions."""
        if not paths:
            return
        self._git("add", "-A", "--", *paths)

    def commit(self, message: str) -> None:
        """Commit everything staged."""
        self._git("commit", "-m", message)

    def commit_paths(self, message: str, paths: Sequence[str]) -> None:
        """Commit only the given paths."""
        command = ["commit", "-m", message]
        if paths:
            command += ["--", *paths]
        self._git(*command)

    def create_branch(self, name: str) -> None:
        """Create and check out a new branch."""
        self._git("checkout", "-b", name)

    def _list_files(self, *args: str) -> list[str]:
        return split_lines(self._git(*args))

    def _git(self, *args: str) -> str:
        output = self._runner("git", *args)
        if isinstance(output, bytes):
            return output.decode("utf-8", errors="replace")
        return output