"""
Parser configuration model and YAML I/O for timew-line.

The line grammar itself is fixed; what is configurable is how strictly
the parser treats input that is well-formed but semantically odd. Every
flag defaults to the permissive behavior, so ``ParserConfig()`` accepts
exactly what the grammar accepts.

Key functions:
- load_config(path) -> ParserConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

Why Pydantic + YAML:
- Pydantic rejects misspelled or mistyped flags instead of silently
  ignoring them.
- YAML is easy to hand-edit next to the rest of a timewarrior setup.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

from timew_line.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ParserConfig(BaseModel):
    """Strictness toggles for LineParser."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    require_ordered_interval: bool = Field(
        False,
        description="If True, reject closed intervals whose end precedes the start",
    )
    reject_unbalanced_quotes: bool = Field(
        False,
        description="If True, reject tag sections with an odd number of '\"' characters",
    )
    drop_empty_tags: bool = Field(
        False,
        description="If True, remove empty-string tags produced by adjacent separators",
    )


def load_config(path: str | Path) -> ParserConfig:
    """Load and validate a parser config YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded parser config from %s", path)
    return ParserConfig.model_validate(raw)


def save_config(config: ParserConfig, path: str | Path) -> None:
    """Serialize a ParserConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# timew-line parser configuration\n")
        f.write("# All flags default to false (accept anything the grammar accepts).\n\n")
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved parser config to %s", path)
