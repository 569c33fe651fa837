"""Component generator: questions, file templates and follow-up notes."""

from ngscaffold.component.generate import GenerationResult, generate_component
from ngscaffold.component.hooks import LifecycleHook, parse_hooks
from ngscaffold.component.notifier import notify_user
from ngscaffold.component.questions import (
    all_questions,
    component_name,
    component_option_questions,
    known_selector_answers,
    selector_questions,
)
from ngscaffold.component.templates import component_templates

__all__ = [
    "GenerationResult",
    "LifecycleHook",
    "all_questions",
    "component_name",
    "component_option_questions",
    "component_templates",
    "generate_component",
    "known_selector_answers",
    "notify_user",
    "parse_hooks",
    "selector_questions",
]
