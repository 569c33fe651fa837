"""Unit tests for token substitution and file emission."""

from __future__ import annotations

from pathlib import Path

import pytest

from ngscaffold.component.questions import known_selector_answers
from ngscaffold.core.render import read_template, render_templates, substitute
from ngscaffold.core.templates import TemplateDescriptor
from ngscaffold.core.types import INLINE, Answer, FileReference

_PACKAGE = "ngscaffold.scaffold.component"


def _answers(**extra: object) -> tuple[Answer, ...]:
    defaults = {
        "styles": FileReference("./my-widget.component.scss"),
        "template": INLINE,
        "styleAttribute": "styleUrls",
        "templateAttribute": "template",
        "hooks": ", OnInit",
        "implements": " implements OnInit",
        "lifecycleNg": "\n\n    ngOnInit() {\n    }\n",
    }
    defaults.update(extra)
    return (
        *known_selector_answers("my-widget"),
        *(Answer(name, value) for name, value in defaults.items()),  # type: ignore[arg-type]
    )


class TestSubstitute:
    def test_tokens_with_and_without_spaces(self) -> None:
        answers = (Answer("selector", "my-widget"),)
        assert substitute("{{ selector }}/{{selector}}", answers) == "my-widget/my-widget"

    def test_unknown_tokens_left_alone(self) -> None:
        assert substitute("{{ missing }}", ()) == "{{ missing }}"

    def test_single_pass(self) -> None:
        answers = (Answer("a", "{{ b }}"), Answer("b", "x"))
        assert substitute("{{ a }}", answers) == "{{ b }}"

    def test_marker_rendering(self) -> None:
        answers = (Answer("styles", INLINE), Answer("template", FileReference("./t.html")))
        assert substitute("[{{ styles }}] {{ template }}", answers) == "[``] './t.html'"

    def test_tripled_braces(self) -> None:
        assert substitute("{{{ body }}}", (Answer("body", "x"),)) == "{x}"


class TestReadTemplate:
    @pytest.mark.parametrize("name", ["app.ts", "spec.ts"])
    def test_bundled(self, name: str) -> None:
        assert "{{ componentName }}" in read_template(name, _PACKAGE)


class TestRenderTemplates:
    def _descriptors(self, root: Path) -> list[TemplateDescriptor]:
        return [
            TemplateDescriptor(destination=str(root / "{{ selector }}" / "a.ts"), name="app.ts"),
            TemplateDescriptor(destination=str(root / "{{ selector }}" / "blank.txt"), blank=True),
            TemplateDescriptor(
                destination=str(root / "{{ selector }}" / "skipped.txt"),
                blank=True,
                check=lambda answers: False,
            ),
        ]

    def test_writes_included_files(self, tmp_path: Path) -> None:
        created = render_templates(_answers(), self._descriptors(tmp_path))

        assert created == [tmp_path / "my-widget" / "a.ts", tmp_path / "my-widget" / "blank.txt"]
        assert (tmp_path / "my-widget" / "blank.txt").read_text() == ""
        assert not (tmp_path / "my-widget" / "skipped.txt").exists()

    def test_component_class_content(self, tmp_path: Path) -> None:
        render_templates(_answers(), self._descriptors(tmp_path))
        content = (tmp_path / "my-widget" / "a.ts").read_text()

        assert "import { Component, OnInit } from '@angular/core';" in content
        assert "selector: 'my-widget'," in content
        assert "template: ``," in content
        assert "styleUrls: ['./my-widget.component.scss']" in content
        assert "export class MyWidgetComponent implements OnInit {\n\n    ngOnInit() {\n    }\n}" in content
        assert "{{" not in content

    def test_no_hooks_content(self, tmp_path: Path) -> None:
        answers = _answers(hooks="", implements="", lifecycleNg="\n")
        render_templates(answers, self._descriptors(tmp_path))
        content = (tmp_path / "my-widget" / "a.ts").read_text()

        assert "import { Component } from '@angular/core';" in content
        assert "export class MyWidgetComponent {\n}" in content

    def test_existing_file_aborts_everything(self, tmp_path: Path) -> None:
        (tmp_path / "my-widget").mkdir()
        (tmp_path / "my-widget" / "blank.txt").write_text("keep")

        with pytest.raises(FileExistsError, match="already exists"):
            render_templates(_answers(), self._descriptors(tmp_path))

        assert not (tmp_path / "my-widget" / "a.ts").exists()
        assert (tmp_path / "my-widget" / "blank.txt").read_text() == "keep"

    def test_overwrite(self, tmp_path: Path) -> None:
        (tmp_path / "my-widget").mkdir()
        (tmp_path / "my-widget" / "blank.txt").write_text("old")

        render_templates(_answers(), self._descriptors(tmp_path), overwrite=True)

        assert (tmp_path / "my-widget" / "blank.txt").read_text() == ""

    def test_duplicate_destination_rejected(self, tmp_path: Path) -> None:
        descriptors = [
            TemplateDescriptor(destination=str(tmp_path / "{{ selector }}.ts"), name="app.ts"),
            TemplateDescriptor(destination=str(tmp_path / "{{selector}}.ts"), blank=True),
        ]

        with pytest.raises(ValueError, match="more than one template"):
            render_templates(_answers(), descriptors)

        assert not (tmp_path / "my-widget.ts").exists()
