"""Colour theme for logsweep output.

The bundled ``data/theme.toml`` supplies every colour; a user file at
``~/.config/logsweep/theme.toml`` may override any subset of them.
"""

import logging
import re
import tomllib
from functools import lru_cache
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from logsweep.core.paths import get_config_dir

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")


class ThemeColors(BaseModel):
    """Named colours used by the CLI, as #RRGGBB hex codes."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    # Candidate, removed and retained files
    candidate: str = "#f5b332"
    deleted: str = "#f53263"
    kept: str = "#03b971"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, v: object) -> str:
        if not isinstance(v, str):
            msg = "color must be a string"
            raise ValueError(msg)
        color = v.strip()
        if not color.startswith("#"):
            msg = f"color must start with '#', got '{color}'"
            raise ValueError(msg)
        if _HEX_COLOR.fullmatch(color) is None:
            msg = f"invalid hex color '{color}'"
            raise ValueError(msg)
        return color


def get_user_theme_path() -> Path:
    """Path of the optional user override file."""
    return get_config_dir() / "theme.toml"


def get_bundled_theme_path() -> Path:
    """Path of the theme shipped inside the package."""
    return Path(str(resources.files("logsweep.data").joinpath("theme.toml")))


def read_theme_colors(path: Path) -> dict[str, str]:
    """Read the ``[colors]`` table of a theme file.

    Missing files give an empty mapping; unreadable or malformed files
    are logged and also give an empty mapping.

    Args:
        path: Theme file.

    Returns:
        Colour name to value, string values only.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    section = data.get("colors", {})
    if not isinstance(section, dict):
        logger.warning("Ignoring theme file %s: 'colors' must be a table", path)
        return {}
    return {k: v for k, v in section.items() if isinstance(v, str)}


def load_theme() -> ThemeColors:
    """Merge the bundled theme with the user's overrides.

    Returns:
        Validated colours, or the built-in defaults if the merge is invalid.
    """
    colors = read_theme_colors(get_bundled_theme_path())
    if not colors:
        logger.error("Bundled theme is missing or empty; using built-in colours")

    overrides = read_theme_colors(get_user_theme_path())
    if overrides:
        logger.debug("Applying %d user colour override(s)", len(overrides))

    try:
        return ThemeColors.model_validate({**colors, **overrides})
    except ValidationError as e:
        logger.warning("Invalid theme configuration, using defaults: %s", e)
        return ThemeColors()


def to_rich_theme(colors: ThemeColors) -> Theme:
    """Build the Rich theme: one style per colour plus derived styles."""
    styles = colors.model_dump()
    styles["error"] = f"bold {colors.error}"
    styles["bold_header"] = f"bold {colors.header}"
    styles["dim"] = colors.muted
    styles["rule.title"] = f"bold {colors.header}"
    return Theme(styles)


@lru_cache(maxsize=1)
def get_theme() -> Theme:
    """Rich theme for the shared consoles, loaded once."""
    return to_rich_theme(load_theme())
