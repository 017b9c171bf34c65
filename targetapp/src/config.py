"""
Configuration for the calculator.

A configuration is a small JSON object, e.g.:

    {"overflow_policy": "wrap", "bit_width": 32}

Values given on the command line override values loaded from a file.
"""

import json
import logging
from dataclasses import dataclass, asdict, fields, replace
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

# Overflow policies
UNBOUNDED = "unbounded"
WRAP = "wrap"
SATURATE = "saturate"
CHECKED = "checked"

OVERFLOW_POLICIES = (UNBOUNDED, WRAP, SATURATE, CHECKED)
SUPPORTED_BIT_WIDTHS = (8, 16, 32, 64)

DEFAULT_OVERFLOW_POLICY = UNBOUNDED
DEFAULT_BIT_WIDTH = 32


class ConfigError(ValueError):
    """Raised when a configuration file or value is invalid."""


@dataclass(frozen=True)
class Config:
    """
    Calculator settings.

    Attributes:
        overflow_policy: One of OVERFLOW_POLICIES
        bit_width: Signed integer width used by every policy except 'unbounded'
    """
    overflow_policy: str = DEFAULT_OVERFLOW_POLICY
    bit_width: int = DEFAULT_BIT_WIDTH

    def validate(self) -> "Config":
        """Check field values, returning self so calls can be chained."""
        if self.overflow_policy not in OVERFLOW_POLICIES:
            raise ConfigError(
                f"Unknown overflow policy: {self.overflow_policy!r} "
                f"(expected one of: {', '.join(OVERFLOW_POLICIES)})"
            )
        if (
            isinstance(self.bit_width, bool)
            or not isinstance(self.bit_width, int)
            or self.bit_width not in SUPPORTED_BIT_WIDTHS
        ):
            raise ConfigError(
                f"Unsupported bit width: {self.bit_width!r} "
                f"(expected one of: {', '.join(str(w) for w in SUPPORTED_BIT_WIDTHS)})"
            )
        return self

    @property
    def is_bounded(self) -> bool:
        return self.overflow_policy != UNBOUNDED

    def with_overrides(self, **overrides) -> "Config":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return replace(self, **changes).validate()

    def to_dict(self) -> dict:
        return asdict(self)


def load_config(path: Union[str, Path]) -> Config:
    """
    Load a configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        Validated Config

    Raises:
        ConfigError: If the file is missing, unreadable, not a JSON object,
            or contains unknown keys or invalid values
    """
    path = Path(path)

    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    if not path.is_file():
        raise ConfigError(f"Configuration path is not a file: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file {path}: {e}")
    except UnicodeDecodeError as e:
        raise ConfigError(f"Configuration file {path} is not valid UTF-8: {e}")
    except IOError as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration must be a JSON object, got {type(data).__name__}"
        )

    logger.debug(f"Loaded configuration from {path}: {data}")
    return Config().with_overrides(**data)
