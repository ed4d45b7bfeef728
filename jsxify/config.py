"""Conversion options and their YAML loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidOptions


class ConvertOptions(BaseModel):
    """Knobs for the HTML to JSX conversion. Defaults target React."""

    raw_content_tags: List[str] = Field(
        default_factory=lambda: ["pre"],
        alias="rawContentTags",
        description=(
            "Elements whose children are kept as literal markup and injected "
            "through dangerouslySetInnerHTML instead of being converted."
        ),
    )
    class_attribute: str = Field(
        "className",
        alias="classAttribute",
        min_length=1,
        description="Attribute name that replaces the HTML class attribute.",
    )
    camel_case_style: bool = Field(
        True,
        alias="camelCaseStyle",
        description="Rewrite CSS property names to camelCase in style objects.",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    @field_validator("raw_content_tags")
    @classmethod
    def _normalize_tags(cls, value: List[str]) -> List[str]:
        tags = [tag.strip().lower() for tag in value]
        if any(not tag for tag in tags):
            raise ValueError("raw content tag names must be non-empty")
        return tags

    def is_raw_content_tag(self, name: str) -> bool:
        return name.lower() in self.raw_content_tags


DEFAULT_OPTIONS = ConvertOptions()


def load_options(path: Path) -> ConvertOptions:
    """Read options from a YAML mapping; an empty file yields the defaults."""
    try:
        payload: Any = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise InvalidOptions(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise InvalidOptions(f"{path} must contain a mapping of options.")
    try:
        return ConvertOptions.model_validate(payload)
    except ValidationError as exc:
        raise InvalidOptions(f"Invalid options in {path}: {exc}") from exc


__all__ = ["ConvertOptions", "DEFAULT_OPTIONS", "load_options"]
