"""Platform-specific directory detection for azmgmt configuration."""

import os
import sys
from pathlib import Path


def in_virtualenv() -> bool:
    """Check if running in a virtual environment."""
    return sys.prefix != sys.base_prefix


def is_user_install() -> bool:
    """Check if this is a user install (pip install --user)."""
    return sys.prefix.startswith(str(Path.home()))


def get_config_location() -> Path:
    """Get config location.

    Priority:
    1. AZMGMT_CONFIG_DIR environment variable
    2. Development: ./config if pyproject.toml exists in parent chain
    3. User install: ~/.config/azmgmt
    4. Virtualenv: sibling to venv
    5. Fallback: current directory
    """
    if env_dir := os.environ.get("AZMGMT_CONFIG_DIR"):
        return Path(env_dir)

    cwd = Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        if (parent / "pyproject.toml").exists():
            return parent / "config"

    if is_user_install():
        return Path.home() / ".config" / "azmgmt"

    if in_virtualenv():
        return Path(sys.prefix).parent / "config"

    return cwd / "config"


def get_logs_location() -> Path:
    """Get logs directory location.

    Priority:
    1. AZMGMT_LOG_DIR environment variable
    2. Sibling to config directory
    """
    if env_dir := os.environ.get("AZMGMT_LOG_DIR"):
        return Path(env_dir)

    return get_config_location().parent / "logs"
