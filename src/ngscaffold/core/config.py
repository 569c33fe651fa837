"""Configuration for the component generator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath


def _check_extension(field_name: str, value: str) -> None:
    if not value or "." in value or "/" in value or "\\" in value:
        raise ValueError(f"{field_name} must be a bare file extension, got {value!r}.")


@dataclass(kw_only=True)
class GeneratorConfig:
    """
    Configuration for generating a component.

    Attributes:
        source_dir: Directory under the project root holding component folders.
        script_ext: Extension of the component class and its spec file.
        style_ext: Extension of the external stylesheet.
        markup_ext: Extension of the external template.
        overwrite: Replace files that already exist instead of failing.
    """

    source_dir: str = "src"
    script_ext: str = "ts"
    style_ext: str = "scss"
    markup_ext: str = "html"
    overwrite: bool = False

    def __post_init__(self) -> None:
        if not self.source_dir or PurePath(self.source_dir).is_absolute():
            raise ValueError(f"source_dir must be a relative path, got {self.source_dir!r}.")
        _check_extension("script_ext", self.script_ext)
        _check_extension("style_ext", self.style_ext)
        _check_extension("markup_ext", self.markup_ext)
        extensions = {
            "script_ext": self.script_ext,
            "style_ext": self.style_ext,
            "markup_ext": self.markup_ext,
        }
        if len(set(extensions.values())) < len(extensions):
            raise ValueError(
                f"script_ext, style_ext and markup_ext must differ, got {extensions}."
            )
