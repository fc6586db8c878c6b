"""Starter configuration writer."""

import json
import os
from enum import Enum
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w

from logsweep.config.loader import ConfigError

STARTER_RULES: list[dict[str, Any]] = [
    {
        "name": "application logs",
        "path": "/var/log/myapp",
        "regex": r".*\.log$",
        "day": 30,
    },
    {
        "name": "rotated archives",
        "path": "/var/log/myapp",
        "regex": r".*\.log\.\d+\.gz$",
        "day": 90,
    },
]


class ConfigFormat(str, Enum):
    """Supported configuration file formats."""

    JSON = "json"
    TOML = "toml"


def render_starter_config(fmt: ConfigFormat) -> bytes:
    """Serialize the starter rules in the requested format."""
    if fmt == ConfigFormat.TOML:
        return tomli_w.dumps({"rules": STARTER_RULES}).encode("utf-8")
    return (json.dumps(STARTER_RULES, indent=2) + "\n").encode("utf-8")


def write_starter_config(path: Path, fmt: ConfigFormat, force: bool = False) -> Path:
    """Write an example configuration file.

    The file is written atomically through a temporary file in the
    target directory.

    Args:
        path: Destination file.
        fmt: Output format.
        force: Overwrite an existing file.

    Returns:
        Path that was written.

    Raises:
        ConfigError: If the file exists (without force) or cannot be written.
    """
    if path.exists() and not force:
        raise ConfigError(f"Configuration already exists: {path}")

    tmp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(mode="wb", dir=path.parent, delete=False, suffix=".tmp") as f:
            tmp_path = Path(f.name)
            f.write(render_starter_config(fmt))
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write configuration: {e}") from e

    return path
