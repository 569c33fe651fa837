"""Lifecycle hook questions and the code derived from them."""

from __future__ import annotations

from enum import Enum

from ngscaffold.core.types import Accepted, Answers, AnswerValue, Question, TransformResult

_SEPARATOR = ", "


class LifecycleHook(str, Enum):
    """Component lifecycle interfaces that can be scaffolded."""

    ON_CHANGES = "OnChanges"
    DO_CHECK = "DoCheck"
    ON_DESTROY = "OnDestroy"
    ON_INIT = "OnInit"

    @classmethod
    def parse(cls, name: str) -> LifecycleHook | None:
        """Match a user-typed hook name, e.g. ``init`` or ``OnInit``. Unknown names give None."""
        return _ALIASES.get(name.strip().lower())


_ALIASES: dict[str, LifecycleHook] = {
    "changes": LifecycleHook.ON_CHANGES,
    "onchanges": LifecycleHook.ON_CHANGES,
    "check": LifecycleHook.DO_CHECK,
    "docheck": LifecycleHook.DO_CHECK,
    "destroy": LifecycleHook.ON_DESTROY,
    "ondestroy": LifecycleHook.ON_DESTROY,
    "init": LifecycleHook.ON_INIT,
    "oninit": LifecycleHook.ON_INIT,
}


def parse_hooks(text: str) -> list[LifecycleHook]:
    """Parse a comma-separated hook list. Unrecognised names are dropped, repeats are kept."""
    hooks = (LifecycleHook.parse(name) for name in text.split(","))
    return [hook for hook in hooks if hook is not None]


def hooks_value(text: str) -> str:
    """Value of the ``hooks`` answer: empty, or the hooks with a leading ``", "``.

    The leading separator lets templates append it to an existing import list.
    """
    hooks = parse_hooks(text)
    if not hooks:
        return ""
    return _SEPARATOR + _SEPARATOR.join(hook.value for hook in hooks)


def _hook_names(hooks: str) -> list[str]:
    stripped = hooks.removeprefix(_SEPARATOR)
    return [name.strip() for name in stripped.split(",")]


def implements_value(hooks: str) -> str:
    """``" implements OnInit, OnDestroy"`` for a ``hooks`` answer, or empty."""
    if not hooks:
        return ""
    return " implements " + hooks.removeprefix(_SEPARATOR)


def lifecycle_methods(hooks: str) -> str:
    """Empty method stubs for a ``hooks`` answer, one block per hook in order."""
    methods = "\n"
    if hooks:
        for name in _hook_names(hooks):
            methods += f"\n    ng{name}() {{\n    }}\n"
    return methods


def _set_hooks(value: AnswerValue, answers: Answers) -> TransformResult:
    return Accepted(hooks_value(str(value)))


def _set_implements(value: AnswerValue, answers: Answers) -> TransformResult:
    return Accepted(implements_value(str(value)))


def _set_methods(value: AnswerValue, answers: Answers) -> TransformResult:
    return Accepted(lifecycle_methods(str(value)))


def lifecycle_hook_questions() -> list[Question]:
    return [
        Question(
            name="hooks",
            question="Lifecycle hooks (comma-separated):",
            allow_blank=True,
            transform=_set_hooks,
        ),
        Question(name="implements", use_answer="hooks", transform=_set_implements),
        Question(name="lifecycleNg", use_answer="hooks", transform=_set_methods),
    ]
