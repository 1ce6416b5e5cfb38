"""Configuration loading and validation for table formatting.

The formatting functions take every setting explicitly. This module is
where the user-facing defaults live: it reads an optional JSON or YAML
file, applies environment overrides, and hands out the configuration
values the functions expect.

Example mdtable.json:
    {
        "delimiter_width": 3,
        "default_alignment": "left",
        "width": {
            "normalize": false,
            "wide_chars": ["∀"],
            "narrow_chars": [],
            "ambiguous_as_wide": false
        }
    }
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml
from dotenv import dotenv_values

from .alignment import Alignment
from .display_width import WidthPolicy
from .formatter import AlignConfig, CompleteOptions

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MDTABLE_CONFIG_PATH"
AMBIGUOUS_WIDTH_ENV_VAR = "MDTABLE_AMBIGUOUS_WIDTH"
NORMALIZE_ENV_VAR = "MDTABLE_NORMALIZE"
DELIMITER_WIDTH_ENV_VAR = "MDTABLE_DELIMITER_WIDTH"

_CONCRETE_ALIGNMENTS = ("left", "right", "center")
_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class FormatterConfig:
    """Structured representation of a table formatting configuration."""

    delimiter_width: int = 3
    default_alignment: str = "left"  # left, right, center

    # Width measurement
    normalize: bool = False
    wide_chars: List[str] = field(default_factory=list)
    narrow_chars: List[str] = field(default_factory=list)
    ambiguous_as_wide: bool = False

    def to_width_policy(self) -> WidthPolicy:
        return WidthPolicy(
            normalize=self.normalize,
            wide_chars=frozenset(self.wide_chars),
            narrow_chars=frozenset(self.narrow_chars),
            ambiguous_as_wide=self.ambiguous_as_wide,
        )

    def to_align_config(self, width: int) -> AlignConfig:
        """Build the align() configuration for a column of ``width`` columns."""
        return AlignConfig(
            normalize=self.normalize,
            wide_chars=frozenset(self.wide_chars),
            narrow_chars=frozenset(self.narrow_chars),
            ambiguous_as_wide=self.ambiguous_as_wide,
            width=width,
            default_alignment=Alignment(self.default_alignment),
        )

    def to_complete_options(self) -> CompleteOptions:
        return CompleteOptions(delimiter_width=self.delimiter_width)


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Configuration validation failed: {'; '.join(errors)}")


def _validate_chars(name: str, value: Any, errors: List[str]) -> None:
    if value is None:
        return
    if not isinstance(value, list):
        errors.append(f"Width '{name}' must be a list of characters")
        return
    for char in value:
        if not isinstance(char, str) or len(char) != 1:
            errors.append(f"Width '{name}' entries must be single characters, got {char!r}")


def validate_config(config: Dict[str, Any]) -> Tuple[bool, List[str]]:
    """Validate a raw configuration dict.

    Args:
        config: Configuration dict loaded from JSON or YAML.

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors: List[str] = []

    delimiter_width = config.get("delimiter_width")
    if delimiter_width is not None and (
        isinstance(delimiter_width, bool)
        or not isinstance(delimiter_width, int)
        or delimiter_width < 1
    ):
        errors.append("'delimiter_width' must be a positive integer")

    default_alignment = config.get("default_alignment")
    if default_alignment is not None and default_alignment not in _CONCRETE_ALIGNMENTS:
        errors.append(
            f"Invalid default_alignment: {default_alignment!r} "
            f"(expected one of {', '.join(_CONCRETE_ALIGNMENTS)})"
        )

    width = config.get("width", {})
    if not isinstance(width, dict):
        errors.append("'width' must be an object")
    else:
        for key in ("normalize", "ambiguous_as_wide"):
            value = width.get(key)
            if value is not None and not isinstance(value, bool):
                errors.append(f"Width '{key}' must be a boolean")
        _validate_chars("wide_chars", width.get("wide_chars"), errors)
        _validate_chars("narrow_chars", width.get("narrow_chars"), errors)

    return len(errors) == 0, errors


def _read_config_file(config_path: Path) -> Dict[str, Any]:
    content = config_path.read_text(encoding="utf-8")
    if config_path.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(content) or {}
    else:
        data = json.loads(content)
    if not isinstance(data, dict):
        raise ConfigValidationError([f"Config file must contain an object: {config_path}"])
    return data


def _default_paths() -> List[Path]:
    return [
        Path.cwd() / "mdtable.json",
        Path.cwd() / ".mdtable.json",
        Path.cwd() / ".mdtable.yaml",
        Path.home() / ".config" / "mdtable" / "config.json",
    ]


def _apply_env_overrides(config: FormatterConfig, env: Mapping[str, Optional[str]]) -> None:
    ambiguous = env.get(AMBIGUOUS_WIDTH_ENV_VAR)
    if ambiguous in ("1", "2"):
        config.ambiguous_as_wide = ambiguous == "2"
    elif ambiguous:
        logger.warning("Ignoring %s=%r (expected 1 or 2)", AMBIGUOUS_WIDTH_ENV_VAR, ambiguous)

    normalize = env.get(NORMALIZE_ENV_VAR)
    if normalize:
        config.normalize = normalize.strip().lower() in _TRUE_VALUES

    delimiter_width = env.get(DELIMITER_WIDTH_ENV_VAR)
    if delimiter_width:
        try:
            value = int(delimiter_width)
        except ValueError:
            value = 0
        if value >= 1:
            config.delimiter_width = value
        else:
            logger.warning(
                "Ignoring %s=%r (expected a positive integer)",
                DELIMITER_WIDTH_ENV_VAR, delimiter_width
            )


def load_config(
    path: Optional[str] = None,
    env_var: str = CONFIG_ENV_VAR,
    env_file: Optional[str] = None,
) -> FormatterConfig:
    """Load and validate a formatting configuration.

    Args:
        path: Direct path to a .json/.yaml/.yml config file. If None, uses
            env_var or the default locations.
        env_var: Environment variable name for the config path.
        env_file: Optional .env file whose values take precedence over
            the process environment for MDTABLE_* overrides.

    Returns:
        FormatterConfig instance (defaults when no file is found).

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ConfigValidationError: If config validation fails
        json.JSONDecodeError: If a JSON config file is malformed
        yaml.YAMLError: If a YAML config file is malformed
    """
    env: Dict[str, Optional[str]] = dict(os.environ)
    if env_file is not None:
        env.update(dotenv_values(env_file))

    if path is None:
        path = env.get(env_var) or None

    if path is None:
        for default_path in _default_paths():
            if default_path.exists():
                path = str(default_path)
                break

    if path is None:
        logger.debug("No table config file found, using defaults")
        config = FormatterConfig()
    else:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Table config file not found: {path}")

        raw_config = _read_config_file(config_path)
        is_valid, errors = validate_config(raw_config)
        if not is_valid:
            raise ConfigValidationError(errors)

        width = raw_config.get("width", {})
        config = FormatterConfig(
            delimiter_width=raw_config.get("delimiter_width", 3),
            default_alignment=raw_config.get("default_alignment", "left"),
            normalize=width.get("normalize", False),
            wide_chars=list(width.get("wide_chars") or []),
            narrow_chars=list(width.get("narrow_chars") or []),
            ambiguous_as_wide=width.get("ambiguous_as_wide", False),
        )
        logger.debug("Loaded table config from %s", config_path)

    _apply_env_overrides(config, env)
    return config
