"""Answers, questions and the values that flow between them."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeAlias

from ngscaffold.core.errors import MissingAnswerError


@dataclass(frozen=True)
class InlineMarker:
    """Toggle value meaning the content lives inline in the component."""

    def __str__(self) -> str:
        return "``"


@dataclass(frozen=True)
class FileReference:
    """Toggle value pointing at a separate file, relative to the component."""

    path: str

    def __str__(self) -> str:
        return f"'{self.path}'"


INLINE = InlineMarker()

AnswerValue: TypeAlias = str | InlineMarker | FileReference


@dataclass(frozen=True)
class Answer:
    """A resolved value for a named question.

    Attributes:
        name: Unique key, also the ``{{ name }}`` token it substitutes.
        answer: The resolved value. Toggle answers keep their marker type.
    """

    name: str
    answer: AnswerValue

    @property
    def text(self) -> str:
        """The value as written into templates."""
        return str(self.answer)


Answers: TypeAlias = tuple[Answer, ...]


@dataclass(frozen=True)
class Accepted:
    """Transform outcome carrying the final answer value."""

    value: AnswerValue


@dataclass(frozen=True)
class Rejected:
    """Transform outcome meaning the input is invalid and must be asked again."""

    reason: str = "Invalid value."


REJECTED = Rejected()

TransformResult: TypeAlias = Accepted | Rejected
Transform: TypeAlias = Callable[[AnswerValue, Answers], TransformResult]


@dataclass(frozen=True, kw_only=True)
class Question:
    """
    Descriptor of one answer to resolve.

    Attributes:
        name: Name of the Answer this question produces.
        question: Prompt text. ``None`` for answers derived from another answer.
        allow_blank: Whether blank input is acceptable.
        use_answer: Name of an earlier answer used as raw input instead of asking.
        transform: Maps raw input and the answers known so far to a result.
        default: Hint shown to the user for blank input.
    """

    name: str
    question: str | None = None
    allow_blank: bool = False
    use_answer: str | None = None
    transform: Transform | None = None
    default: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Question name must not be empty.")
        if self.question is None and self.use_answer is None:
            raise ValueError(f"Question {self.name!r} needs either prompt text or use_answer.")


def find_answer(answers: Iterable[Answer], name: str) -> Answer:
    """Return the answer called *name*, raising :class:`MissingAnswerError` if absent."""
    for answer in answers:
        if answer.name == name:
            return answer
    raise MissingAnswerError(name)
