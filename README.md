# gitloom

A library of building blocks for writing semantic, conventional-style commit
messages from staged Git changes. It reads a staged diff, classifies the
change, works out a scope and a description, scores the result, and provides
colouring and prompt helpers for the terminal. All user-facing text is in
Portuguese.

## Installation

```
pip install .
```

The Git helpers run the `git` executable, which must be on your `PATH`.

## Generating a commit message

```python
from gitloom.git_repository import Repository
from gitloom.commit_classifier import classify_commit
from gitloom.commit_analyzer import analyze_diff
from gitloom.commit_model import CommitModel
from gitloom.commit_generator import generate_message

repo = Repository()
diff = repo.get_diff()

commit_type = classify_commit(diff)
analysis = analyze_diff(diff, commit_type)
message = generate_message(
    CommitModel(
        type=commit_type,
        scope=analysis.scope,
        description=analysis.description,
        body=analysis.body,
    )
)
print(message)
```

- `classify_commit` returns a `CommitType` (`feat`, `fix`, `refactor`,
  `chore`, `docs`, `test`) from file names and keywords in the diff.
- `analyze_diff` returns an `Analysis` with `scope`, `description` and a
  bulleted `body` listing each changed file, plus functions, flags and
  commands found on added lines.
- `generate_message` builds `type(scope): description`, followed by the body
  after a blank line when there is one. It raises `EmptyDescriptionError`
  (a `ValueError`) when the description is blank, falls back to `chore` for
  unknown types, and shortens the description on a word boundary so the
  header fits in 72 bytes.

## Working with the repository

`gitloom.git_repository.Repository` wraps the `git` command:
`get_diff(*paths)`, `is_repository()`, `list_staged_files()`,
`list_changed_files()`, `stage_files(paths)`, `commit(message)`,
`commit_paths(message, paths)` and `create_branch(name)`.

A failing command raises `GitCommandError`, which carries the `command`,
`returncode` and combined `output`; `is_repository()` returns `False` on any
failure instead. `Repository(runner=...)` accepts another callable with the
signature of `execute_command(name, *args)`, which is handy for tests.

`gitloom.interfaces` defines the `GitRepository` and `AIProvider` protocols;
`gitloom.ai.NoopProvider` is an `AIProvider` that always returns an empty
message.

## Semantic review

```python
from gitloom.semantic_context import new_commit_context, build_preview, build_grouping_key
from gitloom.semantic_intent import detect_intent
from gitloom.semantic_scorer import score_commit
from gitloom.semantic_suggestions import suggest_scope, suggest_description

context = new_commit_context(diff)
intent = detect_intent("docs", context)
quality = score_commit(intent, context)
preview = build_preview(context)

print(intent.description, quality.score, preview.additions, preview.deletions)
print(build_grouping_key("docs", context))
print(suggest_scope(intent.scope, context.files).alternatives)
print(suggest_description(intent.description).generic)
```

A score starts at 100 and loses points for blocks of more than four files,
a missing scope, a generic description, files spread over more than two
scopes, and a type that does not match the files changed. Each check is
reported in `quality.criteria`, and each deduction in `quality.reasons`.
`suggest_scope` offers up to three more specific scopes when the given one
is generic (`core`, `cli`, `ui`, `app`, `gitignore`, and the like).

## Configuration

`gitloom.config.load(path)` reads a small `.gitloom.yaml`; a missing file
gives the defaults from `default_config()`. `parse_config(text)` parses the
same format from a string, and `render_default_config()` returns a starter
file:

```yaml
commit:
  scope: ""

cli:
  auto_confirm: false
```

## Terminal helpers

`gitloom.ui_renderer` colours text with ANSI escapes unless the `NO_COLOR`
environment variable is set to a non-empty value. It offers
`colorize_line`, `colorize_text`, `score_badge`, `split_commit_message`,
`pluralize_commits`, `print_status` and `print_status_done`, and a
`Renderer` configured by `RenderOptions` (`RenderMode.CLEAN` or
`RenderMode.VERBOSE`).

`gitloom.ui_prompts.confirm_commit` asks a `[Y/n]` question and treats an
empty answer, `y` or `yes` as confirmation; `ask_input` returns the stripped
answer line.

## What it does not do

gitloom is a library only. It installs no command, and it does not plan,
render or create a full series of commits on its own: putting the pieces
above together into an interactive workflow is left to the caller.

## Tests

```
pip install ".[test]"
pytest
```