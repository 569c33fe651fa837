"""Resolves an ordered question list into answers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence

from ngscaffold.core.errors import QuestionOrderError, TransformError
from ngscaffold.core.types import (
    Accepted,
    Answer,
    Answers,
    AnswerValue,
    Question,
    Rejected,
    TransformResult,
    find_answer,
)

AskFn = Callable[[Question], str]
RejectFn = Callable[[Question, str], None]


def validate_order(questions: Sequence[Question], known_names: Iterable[str] = ()) -> None:
    """Check that every ``use_answer`` refers to an answer produced earlier.

    Raises:
        QuestionOrderError: On duplicate names, names shadowing a known answer,
            or a reference to an answer not yet available.
    """
    available = set(known_names)
    for question in questions:
        if question.name in available:
            raise QuestionOrderError(f"Answer {question.name!r} is produced more than once.")
        if question.use_answer is not None and question.use_answer not in available:
            raise QuestionOrderError(
                f"Question {question.name!r} uses answer {question.use_answer!r}, "
                "which no earlier question or known answer provides."
            )
        available.add(question.name)


def _apply(question: Question, raw: AnswerValue, answers: Answers) -> TransformResult:
    if question.transform is None:
        return Accepted(raw.strip() if isinstance(raw, str) else raw)
    return question.transform(raw, answers)


def _ask_until_accepted(
    question: Question,
    answers: Answers,
    ask: AskFn,
    preset: str | None,
    on_reject: RejectFn | None,
) -> AnswerValue:
    while True:
        if preset is not None:
            raw, preset = preset, None
        else:
            raw = ask(question)

        if not raw.strip() and not question.allow_blank:
            continue

        result = _apply(question, raw, answers)
        if isinstance(result, Accepted):
            return result.value
        if on_reject is not None:
            on_reject(question, raw)


def resolve_questions(
    questions: Sequence[Question],
    known_answers: Sequence[Answer] = (),
    *,
    ask: AskFn,
    presets: Mapping[str, str] | None = None,
    on_reject: RejectFn | None = None,
) -> Answers:
    """
    Resolve *questions* in order and return the newly resolved answers.

    Known answers are never asked again but are visible to every transform,
    ahead of the answers resolved in this call. Each transform receives an
    immutable snapshot of everything known at the time it runs.

    Args:
        questions: Ordered question list. Validated with :func:`validate_order`.
        known_answers: Answers supplied up front.
        ask: Called with a question to obtain raw user input.
        presets: Raw input per question name, used instead of asking once.
            A rejected preset falls back to asking.
        on_reject: Called with the question and raw input after a rejection.

    Returns:
        The resolved answers, in question order, without the known answers.
    """
    known = tuple(known_answers)
    validate_order(questions, (answer.name for answer in known))
    presets = presets or {}

    resolved: list[Answer] = []
    for question in questions:
        snapshot = known + tuple(resolved)

        if question.use_answer is not None:
            raw = find_answer(snapshot, question.use_answer).answer
            result = _apply(question, raw, snapshot)
            if isinstance(result, Rejected):
                raise TransformError(
                    f"Question {question.name!r} rejected answer {question.use_answer!r}: "
                    f"{result.reason}"
                )
            value = result.value
        else:
            value = _ask_until_accepted(
                question, snapshot, ask, presets.get(question.name), on_reject
            )

        resolved.append(Answer(question.name, value))

    return tuple(resolved)
