"""Exceptions raised by the scaffolding core."""

from __future__ import annotations


class NgScaffoldError(Exception):
    """Base class for ngscaffold errors."""


class QuestionOrderError(NgScaffoldError, ValueError):
    """A question list is malformed: duplicate names or a forward ``use_answer`` reference."""


class MissingAnswerError(NgScaffoldError, LookupError):
    """An answer was looked up by name before any question produced it."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No answer named {name!r} has been resolved.")
        self.name = name


class TransformError(NgScaffoldError, ValueError):
    """A derived question rejected the answer it was derived from."""
