"""XDG-compliant path management for logsweep.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and state storage.

XDG defaults:
- Config: ~/.config/logsweep/
- State: ~/.local/state/logsweep/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "logsweep"

# Config file looked up in the working directory before the XDG location
LOCAL_CONFIG_FILENAME = "config.json"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/logsweep/ (or XDG_CONFIG_HOME/logsweep/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Get the state directory path.

    State data holds the deletion audit log.

    Returns:
        Path to ~/.local/state/logsweep/ (or XDG_STATE_HOME/logsweep/).
    """
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_default_config_path() -> Path:
    """Get the rules file used when no --config option is given.

    A ``config.json`` in the current working directory wins over the
    XDG location so the tool can be run from a directory holding its
    rules.

    Returns:
        Path to ./config.json if it exists, else ~/.config/logsweep/config.json.
    """
    local = Path.cwd() / LOCAL_CONFIG_FILENAME
    if local.is_file():
        return local
    return get_config_dir() / LOCAL_CONFIG_FILENAME


def ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path
