"""Shared fixtures for the ngscaffold test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from io import StringIO

import pytest
from rich.console import Console

from ngscaffold.core.types import Question


class ScriptedInput:
    """Answers questions from a fixed script and records what was asked."""

    def __init__(self, replies: Iterable[str]) -> None:
        self.replies = list(replies)
        self.asked: list[str] = []

    def __call__(self, question: Question) -> str:
        self.asked.append(question.name)
        if not self.replies:
            raise AssertionError(f"Unexpected question {question.name!r}")
        return self.replies.pop(0)


@pytest.fixture
def scripted() -> Callable[..., ScriptedInput]:
    def _make(*replies: str) -> ScriptedInput:
        return ScriptedInput(replies)

    return _make


@pytest.fixture
def console() -> Console:
    return Console(file=StringIO(), width=200, color_system=None)
