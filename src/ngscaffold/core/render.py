"""Token substitution and writing of rendered templates to disk."""

from __future__ import annotations

import importlib.resources as ilr
import re
from collections.abc import Sequence
from pathlib import Path

from ngscaffold.core.templates import TemplateDescriptor
from ngscaffold.core.types import Answer

_TOKEN = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def substitute(text: str, answers: Sequence[Answer]) -> str:
    """Replace every ``{{ name }}`` token with the matching answer, in a single pass.

    Tokens without a matching answer are left as they are.
    """
    values = {answer.name: answer.text for answer in answers}

    def _replace(match: re.Match[str]) -> str:
        return values.get(match.group(1), match.group(0))

    return _TOKEN.sub(_replace, text)


def read_template(name: str, package: str) -> str:
    return ilr.files(package).joinpath(name).read_text(encoding="utf-8")


def render_templates(
    answers: Sequence[Answer],
    descriptors: Sequence[TemplateDescriptor],
    *,
    overwrite: bool = False,
) -> list[Path]:
    """
    Render *descriptors* with *answers* and write them to disk.

    Descriptors whose ``check`` returns False are skipped. All destinations are
    resolved and checked before anything is written, so an existing file
    leaves the filesystem untouched.

    Returns:
        Paths of the written files, in descriptor order.

    Raises:
        ValueError: If two included templates resolve to the same destination.
        FileExistsError: If a destination exists and *overwrite* is False.
    """
    answers = tuple(answers)
    files: dict[Path, str] = {}
    for descriptor in descriptors:
        if not descriptor.included(answers):
            continue
        destination = Path(substitute(descriptor.destination, answers))
        if destination in files:
            raise ValueError(f"'{destination}' is the destination of more than one template.")
        if descriptor.blank or descriptor.name is None:
            content = ""
        else:
            content = substitute(read_template(descriptor.name, descriptor.package), answers)
        files[destination] = content

    if not overwrite:
        for destination in files:
            if destination.exists():
                raise FileExistsError(f"'{destination}' already exists.")

    for destination, content in files.items():
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(content, encoding="utf-8")

    return list(files)
