"""Post-generation instructions."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console

from ngscaffold.core.types import Answer, find_answer

_console = Console()


def notify_user(answers: Sequence[Answer], console: Console | None = None) -> None:
    """Print the steps needed to register the generated component in a module."""
    console = console or _console
    component_name = find_answer(answers, "componentName").text
    selector = find_answer(answers, "selector").text

    lines = [
        "",
        "Don't forget to add the following to the module.ts file:",
        f"    import {{ {component_name} }} from './{selector}/{selector}.component';",
        f"And to add {component_name} to the NgModule declarations list",
    ]
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)
