"""Question resolution and template rendering."""

from ngscaffold.core.config import GeneratorConfig
from ngscaffold.core.errors import (
    MissingAnswerError,
    NgScaffoldError,
    QuestionOrderError,
    TransformError,
)
from ngscaffold.core.names import dash_to_pascal, is_dash_format
from ngscaffold.core.render import read_template, render_templates, substitute
from ngscaffold.core.resolver import resolve_questions, validate_order
from ngscaffold.core.templates import TemplateDescriptor
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
    Rejected,
    find_answer,
)

__all__ = [
    "INLINE",
    "REJECTED",
    "Accepted",
    "Answer",
    "AnswerValue",
    "Answers",
    "FileReference",
    "GeneratorConfig",
    "InlineMarker",
    "MissingAnswerError",
    "NgScaffoldError",
    "Question",
    "QuestionOrderError",
    "Rejected",
    "TemplateDescriptor",
    "TransformError",
    "dash_to_pascal",
    "find_answer",
    "is_dash_format",
    "read_template",
    "render_templates",
    "resolve_questions",
    "substitute",
    "validate_order",
]
