"""Typer CLI application for ngscaffold."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import ngscaffold
from ngscaffold.cli._prompts import ask_question, report_rejected
from ngscaffold.component import generate_component
from ngscaffold.core.config import GeneratorConfig
from ngscaffold.core.names import is_dash_format
from ngscaffold.core.resolver import AskFn
from ngscaffold.core.types import Question

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()


@app.callback()
def main() -> None:
    """ngscaffold — scaffolding tool for front-end components."""


def _print_preset(question: str, display: str) -> None:
    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {escape(display)}")
    _console.print("[dim]│[/]")


def _yes_no(value: bool) -> str:
    return "y" if value else "n"


def _preset_asker(presets: dict[str, tuple[str, str]]) -> AskFn:
    """Answer preset questions once, echoing them where they would have been asked.

    *presets* maps a question name to its raw input and the text shown for it.
    """
    remaining = dict(presets)

    def ask(question: Question) -> str:
        if question.name not in remaining:
            return ask_question(question)
        raw, display = remaining.pop(question.name)
        _print_preset(question.question or question.name, display)
        return raw

    return ask


@app.command()
def component(
    selector: Annotated[
        str | None, Argument(help="Component selector in dash-case, e.g. my-widget")
    ] = None,
    root: Annotated[
        Path, Option("--root", "-r", help="Project root directory", show_default=True)
    ] = Path("."),
    inline_styles: Annotated[
        bool | None,
        Option("--inline-styles/--no-inline-styles", help="Keep styles in the component"),
    ] = None,
    inline_template: Annotated[
        bool | None,
        Option("--inline-template/--no-inline-template", help="Keep the template in the component"),
    ] = None,
    hooks: Annotated[
        str | None,
        Option("--hooks", help="Comma-separated lifecycle hooks, e.g. 'init, destroy'"),
    ] = None,
    source_dir: Annotated[str, Option("--source-dir", help="Directory of components")] = "src",
    style_ext: Annotated[str, Option("--style-ext", help="Stylesheet extension")] = "scss",
    force: Annotated[
        bool, Option("--force", "-f", help="Overwrite files that already exist")
    ] = False,
) -> None:
    """Create a new component."""
    try:
        config = GeneratorConfig(source_dir=source_dir, style_ext=style_ext, overwrite=force)
    except ValueError as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}", soft_wrap=True)
        raise Exit(code=2) from None

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  ngscaffold v{ngscaffold.__version__}")
    _console.print("[dim]│[/]")

    if selector and not is_dash_format(selector):
        _console.print(
            f"[bold red]▲[/]  [bold]'{escape(selector)}'[/] is not in dash-case, "
            "asking for it instead."
        )
        _console.print("[dim]│[/]")
        selector = None
    elif selector:
        _print_preset("What is the component selector (in dash-case)?", selector)

    presets: dict[str, tuple[str, str]] = {}
    if inline_styles is not None:
        presets["styles"] = (_yes_no(inline_styles), "Yes" if inline_styles else "No")
    if inline_template is not None:
        presets["template"] = (_yes_no(inline_template), "Yes" if inline_template else "No")
    if hooks is not None:
        presets["hooks"] = (hooks, hooks)

    try:
        result = generate_component(
            root,
            selector,
            ask=_preset_asker(presets),
            config=config,
            on_reject=report_rejected,
            console=_console,
        )
    except FileExistsError as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}", soft_wrap=True)
        raise Exit(code=1) from None

    _console.print()
    _console.print("[bold green]◇[/]  Created")
    for path in result.created:
        _console.print(f"[dim]│[/]  {escape(str(path))}", soft_wrap=True)
    _console.print("[dim]│[/]")
    _console.print("[bold cyan]●[/]  Done!")
    _console.print()
