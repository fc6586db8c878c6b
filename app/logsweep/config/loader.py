"""Rule configuration loading.

Rules come from a JSON file (a top-level array of rule objects) or a
TOML file (``[[rules]]`` tables). The loader is picked from the file
suffix; the sweep core only ever sees validated RetentionRule lists.
"""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError

from logsweep.config.models import RuleSet
from logsweep.core.paths import get_default_config_path
from logsweep.sweep.models import RetentionRule

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration content is invalid."""


class RuleLoader(Protocol):
    """Source of retention rules."""

    def load(self, path: Path) -> list[RetentionRule]:
        """Load and validate rules from path."""
        ...


def _validate(data: Any, path: Path) -> list[RetentionRule]:
    """Validate raw ``{"rules": [...]}`` data into rules."""
    try:
        return RuleSet.model_validate(data).to_rules()
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration in {path}: {e}") from e


class JsonRuleLoader:
    """Loads rules from a JSON array of ``{path, regex, day}`` objects."""

    def load(self, path: Path) -> list[RetentionRule]:
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigParseError(f"Invalid JSON syntax in {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigParseError(f"Configuration {path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read configuration {path}: {e}") from e

        if not isinstance(data, list):
            msg = f"Invalid configuration in {path}: top level must be an array of rules"
            raise ConfigValidationError(msg)

        return _validate({"rules": data}, path)


class TomlRuleLoader:
    """Loads rules from ``[[rules]]`` tables in a TOML file."""

    def load(self, path: Path) -> list[RetentionRule]:
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(f"Invalid TOML syntax in {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigParseError(f"Configuration {path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read configuration {path}: {e}") from e

        return _validate(data, path)


def get_loader(path: Path) -> RuleLoader:
    """Pick a loader from the file suffix (``.toml`` or JSON otherwise)."""
    if path.suffix.lower() == ".toml":
        return TomlRuleLoader()
    return JsonRuleLoader()


def load_rules(path: Path | None = None) -> list[RetentionRule]:
    """Load and validate retention rules.

    Args:
        path: Configuration file. If None, uses the default config path.

    Returns:
        Rules in configuration order.

    Raises:
        ConfigNotFoundError: If the file doesn't exist.
        ConfigParseError: If the syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_default_config_path()

    if not config_path.is_file():
        raise ConfigNotFoundError(f"Configuration not found: {config_path}")

    logger.debug("Loading rules from %s", config_path)
    rules = get_loader(config_path).load(config_path)
    logger.debug("Loaded %d rule(s)", len(rules))
    return rules


def require_rules(config_path: Path | None = None) -> list[RetentionRule]:
    """Load rules or exit with a helpful error message.

    Args:
        config_path: Optional configuration path.

    Returns:
        Loaded rules.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    import typer
    from rich.markup import escape

    from logsweep.utils.formatting import print_error, print_info

    path = config_path or get_default_config_path()
    try:
        return load_rules(path)
    except ConfigNotFoundError as e:
        print_error(f"Configuration not found: {escape(str(path))}")
        print_info("Run 'logsweep config init' to create a starter configuration.")
        raise typer.Exit(code=1) from e
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
