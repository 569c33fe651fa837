"""Question lists for generating a component."""

from __future__ import annotations

from ngscaffold.component.hooks import lifecycle_hook_questions
from ngscaffold.core.config import GeneratorConfig
from ngscaffold.core.names import dash_to_pascal, is_dash_format
from ngscaffold.core.types import (
    INLINE,
    REJECTED,
    Accepted,
    Answer,
    Answers,
    AnswerValue,
    FileReference,
    InlineMarker,
    Question,
    Transform,
    TransformResult,
    find_answer,
)

COMPONENT_SUFFIX = "Component"

_YES = ("y", "yes")


def component_name(selector: str) -> str:
    """``my-widget`` -> ``MyWidgetComponent``."""
    return dash_to_pascal(selector) + COMPONENT_SUFFIX


def parse_yes_no(value: str, default: str) -> bool:
    """Interpret a y/N answer. Blank input takes *default*; anything but y/yes is no."""
    answer = value.strip().lower() or default
    return answer in _YES


def _check_selector(value: AnswerValue, answers: Answers) -> TransformResult:
    value = str(value).strip()
    return Accepted(value) if is_dash_format(value) else REJECTED


def _set_component_name(value: AnswerValue, answers: Answers) -> TransformResult:
    return Accepted(component_name(str(value)))


def selector_questions() -> list[Question]:
    return [
        Question(
            name="selector",
            question="What is the component selector (in dash-case)?",
            transform=_check_selector,
        ),
        Question(name="componentName", use_answer="selector", transform=_set_component_name),
    ]


def known_selector_answers(selector: str) -> list[Answer]:
    """Answers seeded when the selector is passed in up front."""
    return [
        Answer("selector", selector),
        Answer("componentName", component_name(selector)),
    ]


def _inline_toggle(extension: str, default: str = "n") -> Transform:
    """Transform for a "use inline ...?" question.

    Yes gives :data:`INLINE`, no gives a reference to the component's
    ``.{extension}`` file, named after the ``selector`` answer.
    """

    def transform(value: AnswerValue, answers: Answers) -> TransformResult:
        if parse_yes_no(str(value), default):
            return Accepted(INLINE)
        selector = find_answer(answers, "selector").text
        return Accepted(FileReference(f"./{selector}.component.{extension}"))

    return transform


def _attribute_picker(inline_name: str, file_name: str) -> Transform:
    def transform(value: AnswerValue, answers: Answers) -> TransformResult:
        return Accepted(inline_name if isinstance(value, InlineMarker) else file_name)

    return transform


def component_option_questions(config: GeneratorConfig | None = None) -> list[Question]:
    """Questions asked once the selector is known: styles, template and lifecycle hooks."""
    config = config or GeneratorConfig()
    return [
        Question(
            name="styles",
            question="Use inline styles (y/N)?",
            allow_blank=True,
            default="n",
            transform=_inline_toggle(config.style_ext),
        ),
        Question(
            name="template",
            question="Use inline template (y/N)?",
            allow_blank=True,
            default="n",
            transform=_inline_toggle(config.markup_ext),
        ),
        Question(
            name="styleAttribute",
            use_answer="styles",
            transform=_attribute_picker("styles", "styleUrls"),
        ),
        Question(
            name="templateAttribute",
            use_answer="template",
            transform=_attribute_picker("template", "templateUrl"),
        ),
        *lifecycle_hook_questions(),
    ]


def all_questions(config: GeneratorConfig | None = None) -> list[Question]:
    return selector_questions() + component_option_questions(config)
