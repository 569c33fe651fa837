"""Entry point tying questions, rendering and notification together."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from ngscaffold.component.notifier import notify_user
from ngscaffold.component.questions import (
    all_questions,
    component_option_questions,
    known_selector_answers,
)
from ngscaffold.component.templates import component_templates
from ngscaffold.core.config import GeneratorConfig
from ngscaffold.core.names import is_dash_format
from ngscaffold.core.render import render_templates
from ngscaffold.core.resolver import AskFn, RejectFn, resolve_questions
from ngscaffold.core.types import Answers


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of one generation.

    Attributes:
        answers: Every answer, known ones first.
        created: Written files, in template order.
    """

    answers: Answers
    created: list[Path]


def generate_component(
    root_dir: str | Path,
    selector: str | None = None,
    *,
    ask: AskFn,
    config: GeneratorConfig | None = None,
    presets: Mapping[str, str] | None = None,
    on_reject: RejectFn | None = None,
    console: Console | None = None,
) -> GenerationResult:
    """
    Generate a component under *root_dir*.

    A valid dash-case *selector* is used as is and only the option questions
    are asked. Otherwise the selector is asked for first.

    Args:
        root_dir: Project root; files go to ``<root_dir>/<source_dir>/<selector>/``.
        selector: Component selector, or None to ask for it.
        ask: Returns the raw user input for a question.
        config: Generator configuration.
        presets: Raw input per question name, used instead of asking.
        on_reject: Called when an answer is rejected, before asking again.
        console: Console the follow-up instructions are printed to.

    Raises:
        FileExistsError: If a file exists and ``config.overwrite`` is False.
    """
    config = config or GeneratorConfig()
    templates = component_templates(root_dir, config)

    if selector is not None and is_dash_format(selector):
        known = tuple(known_selector_answers(selector))
        resolved = resolve_questions(
            component_option_questions(config),
            known,
            ask=ask,
            presets=presets,
            on_reject=on_reject,
        )
        answers = known + resolved
    else:
        answers = resolve_questions(
            all_questions(config), ask=ask, presets=presets, on_reject=on_reject
        )

    created = render_templates(answers, templates, overwrite=config.overwrite)
    notify_user(answers, console)
    return GenerationResult(answers=answers, created=created)
