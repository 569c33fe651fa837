"""Clack-style interactive prompts using Rich."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape

from ngscaffold.core.types import Question

_console = Console()


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def ask_question(question: Question) -> str:
    """Display a clack-style text prompt and return the raw input."""
    text = escape(question.question or question.name)
    _console.print(f"[bold cyan]◆[/]  {text}")
    _print_bar()

    suffix = f"({question.default}) " if question.default else ""
    _console.print("[dim]│[/]  ", end="")
    try:
        answer = input(suffix)
    except EOFError:
        raise SystemExit(1) from None

    display = answer.strip() or question.default or ""

    # Overwrite the ◆ question + │ bar + │ input line
    _clear_lines(3)

    _console.print(f"[bold green]◇[/]  {text}")
    _console.print(f"[dim]│[/]  {escape(display)}")
    _print_bar()

    return answer


def report_rejected(question: Question, raw: str) -> None:
    """Explain why an answer was refused before the question is asked again."""
    if question.name == "selector":
        hint = "use lowercase letters and digits separated by single dashes, e.g. my-widget"
    else:
        hint = "please try again"
    _console.print(f"[bold red]▲[/]  [bold]'{escape(raw.strip())}'[/] is not valid: {hint}.")
    _print_bar()
