"""Files emitted for a component."""

from __future__ import annotations

from pathlib import Path

from ngscaffold.core.config import GeneratorConfig
from ngscaffold.core.templates import TemplateDescriptor
from ngscaffold.core.types import Answers, InlineMarker, find_answer

SELECTOR_TOKEN = "{{ selector }}"


def _is_inline(answers: Answers, name: str) -> bool:
    return isinstance(find_answer(answers, name).answer, InlineMarker)


def styles_file_needed(answers: Answers) -> bool:
    return not _is_inline(answers, "styles")


def template_file_needed(answers: Answers) -> bool:
    return not _is_inline(answers, "template")


def component_templates(
    root_dir: str | Path, config: GeneratorConfig | None = None
) -> list[TemplateDescriptor]:
    """
    Describe the component files under ``<root_dir>/<source_dir>/{{ selector }}/``.

    The class and spec files are always emitted. The stylesheet and the markup
    file are emitted blank, and only when the matching toggle is not inline.
    """
    config = config or GeneratorConfig()
    component_dir = Path(root_dir).resolve() / config.source_dir / SELECTOR_TOKEN
    base = f"{SELECTOR_TOKEN}.component"

    return [
        TemplateDescriptor(
            destination=str(component_dir / f"{base}.{config.script_ext}"),
            name="app.ts",
        ),
        TemplateDescriptor(
            destination=str(component_dir / f"{base}.spec.{config.script_ext}"),
            name="spec.ts",
        ),
        TemplateDescriptor(
            destination=str(component_dir / f"{base}.{config.style_ext}"),
            blank=True,
            check=styles_file_needed,
        ),
        TemplateDescriptor(
            destination=str(component_dir / f"{base}.{config.markup_ext}"),
            blank=True,
            check=template_file_needed,
        ),
    ]
