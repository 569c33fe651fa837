"""Tests for the post-generation instructions."""

from __future__ import annotations

import pytest
from rich.console import Console

from ngscaffold.component.notifier import notify_user
from ngscaffold.component.questions import known_selector_answers
from ngscaffold.core.errors import MissingAnswerError
from ngscaffold.core.types import Answer


class TestNotifyUser:
    def test_prints_registration_steps(self, console: Console) -> None:
        notify_user(known_selector_answers("my-widget"), console)

        output = console.file.getvalue()  # type: ignore[attr-defined]
        assert output.splitlines() == [
            "",
            "Don't forget to add the following to the module.ts file:",
            "    import { MyWidgetComponent } from './my-widget/my-widget.component';",
            "And to add MyWidgetComponent to the NgModule declarations list",
        ]

    def test_square_brackets_are_not_markup(self, console: Console) -> None:
        answers = [Answer("selector", "x"), Answer("componentName", "[bold]X[/bold]")]
        notify_user(answers, console)

        assert "[bold]X[/bold]" in console.file.getvalue()  # type: ignore[attr-defined]

    def test_missing_answer(self, console: Console) -> None:
        with pytest.raises(MissingAnswerError):
            notify_user([Answer("selector", "my-widget")], console)
