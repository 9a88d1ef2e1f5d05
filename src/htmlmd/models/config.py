"""Pydantic configuration model for htmlmd."""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from ..constants import (
    HIDDEN_CLASS,
    HTML_ENTITIES,
    HTML_MARKERS,
    LIST_INDENT,
    MARKDOWN_WRAPPERS,
    SELF_CLOSING_TAGS,
    SKIP_TAGS,
)


class ConverterConfig(BaseModel):
    """
    Configuration for parsing and rendering.

    The defaults reproduce the built-in tables; every table can be
    replaced to support additional tags or entities.

    Example:
        config = ConverterConfig(strict=True, tidy_output=True)
        markdown = convert(html, config)

    YAML format:
        strict: true
        skip_tags: [script, style, title, noscript]
        wrappers:
          mark: ["==", "=="]
    """

    wrappers: dict[str, tuple[str, str]] = Field(
        default_factory=lambda: dict(MARKDOWN_WRAPPERS),
        description="Tags rendered as prefix + content + suffix",
    )
    skip_tags: list[str] = Field(
        default_factory=lambda: sorted(SKIP_TAGS),
        description="Tags dropped together with their content",
    )
    self_closing_tags: list[str] = Field(
        default_factory=lambda: sorted(SELF_CLOSING_TAGS),
        description="Tags that never take a closing tag",
    )
    entities: dict[str, str] = Field(
        default_factory=lambda: dict(HTML_ENTITIES),
        description="Character references decoded in text",
    )
    markers: list[str] = Field(
        default_factory=lambda: list(HTML_MARKERS),
        description="Substrings that make input look like HTML",
    )
    hidden_class: str = Field(HIDDEN_CLASS, description="Elements with this exact class are not rendered")
    list_indent: str = Field(LIST_INDENT, description="Indentation unit for nested list items")
    strict: bool = Field(False, description="Treat elements left open at end of input as an error")
    tidy_output: bool = Field(False, description="Collapse blank lines and trailing whitespace in output")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO",
        description="Logging level",
    )

    model_config = {"extra": "forbid"}

    @field_validator("entities")
    @classmethod
    def _check_entities(cls, value: dict[str, str]) -> dict[str, str]:
        for entity in value:
            if len(entity) < 3 or not entity.startswith("&") or not entity.endswith(";"):
                raise ValueError(f"Invalid entity {entity!r}: expected the form '&name;'")
        return value

    @field_validator("wrappers", "skip_tags", "self_closing_tags")
    @classmethod
    def _check_tag_names(cls, value: Any) -> Any:
        for name in value:
            if not name or any(ch.isspace() for ch in name):
                raise ValueError(f"Invalid tag name {name!r}")
        return value

    @field_validator("markers")
    @classmethod
    def _check_markers(cls, value: list[str]) -> list[str]:
        if any(not marker for marker in value):
            raise ValueError("Markers must be non-empty strings")
        return value

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json"), default_flow_style=False, allow_unicode=True)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConverterConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "ConverterConfig":
        """Load config from YAML file."""
        return cls.from_yaml(Path(path).read_text(encoding="utf-8"))
