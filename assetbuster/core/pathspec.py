"""
Path specifiers for the ``files`` setting.

A specifier is either a literal path or a regular expression searched
against the absolute paths under files-base.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from assetbuster.errors import ConfigError

FILES_SHAPE_MESSAGE = "buster.files must be a sequence of one or more strings or regexes."
FILES_EMPTY_MESSAGE = "buster.files is empty."


class LiteralSpec(BaseModel):
    """A file or directory path, relative to the project root."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    path: str = Field(description="Relative file or directory path")


class PatternSpec(BaseModel):
    """A regular expression searched against absolute file paths."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["pattern"] = "pattern"
    pattern: re.Pattern[str] = Field(description="Regex matched with search semantics")

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


PathSpec = Annotated[Union[LiteralSpec, PatternSpec], Field(discriminator="kind")]


def parse_path_spec(value: Any) -> LiteralSpec | PatternSpec:
    """
    Convert one raw configuration value into a path specifier.

    Accepted forms:
        - ``"css/app.css"``: literal path
        - ``re.compile(r"\\.css$")``: pattern
        - ``{"regex": "\\.css$"}``: pattern (YAML has no regex literal)
        - an existing ``LiteralSpec`` or ``PatternSpec``

    Raises:
        ConfigError: If the value is none of the above or the regex is invalid.
    """
    if isinstance(value, (LiteralSpec, PatternSpec)):
        return value
    if isinstance(value, str):
        return LiteralSpec(path=value)
    if isinstance(value, re.Pattern):
        return PatternSpec(pattern=value)
    if isinstance(value, Mapping) and set(value) == {"regex"}:
        expr = value["regex"]
        if not isinstance(expr, str):
            raise ConfigError(f"buster.files regex must be a string, got {type(expr).__name__}")
        try:
            return PatternSpec(pattern=re.compile(expr))
        except re.error as e:
            raise ConfigError(f"buster.files has invalid regex {expr!r}: {e}") from e

    raise ConfigError(f"{FILES_SHAPE_MESSAGE} Unsupported entry: {value!r}")


def parse_path_specs(raw: Any) -> tuple[LiteralSpec | PatternSpec, ...]:
    """
    Validate and convert the ``files`` setting.

    Raises:
        ConfigError: If ``raw`` is absent, not a sequence, or empty.
    """
    if raw is None or isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Sequence):
        raise ConfigError(FILES_SHAPE_MESSAGE)
    if len(raw) == 0:
        raise ConfigError(FILES_EMPTY_MESSAGE)

    return tuple(parse_path_spec(item) for item in raw)
