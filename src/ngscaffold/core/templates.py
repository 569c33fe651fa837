"""File template descriptors."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ngscaffold.core.types import Answers

CheckFn = Callable[[Answers], bool]


@dataclass(frozen=True, kw_only=True)
class TemplateDescriptor:
    """
    One file to emit.

    Attributes:
        destination: Output path, may contain ``{{ name }}`` tokens.
        name: Template resource name inside *package*. Ignored when *blank*.
        blank: Emit an empty file instead of a rendered template.
        check: Predicate over the final answers; the file is skipped when it
            returns False. ``None`` means always emit.
        package: Package holding the template resource.
    """

    destination: str
    name: str | None = None
    blank: bool = False
    check: CheckFn | None = None
    package: str = "ngscaffold.scaffold.component"

    def __post_init__(self) -> None:
        if not self.blank and self.name is None:
            raise ValueError(f"Template for {self.destination!r} needs a name unless blank.")

    def included(self, answers: Answers) -> bool:
        return self.check is None or self.check(answers)
