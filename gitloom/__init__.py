"""Building blocks for semantic commit messages: diff analysis, scoring, Git and terminal helpers."""

__version__ = "0.1.0"