"""Configuration management for Money Calc.

Configuration lives in one directory:

1. settings.json - Machine-specific preferences
   - tax_year: default tax year for CLI commands (e.g. "2025-26")

2. tax-rules/<tax_year>.yaml - Optional user-supplied tax years
   - Adds a tax year that is not built in, or overrides a built-in one

Config directory resolution:
1. MONEY_CALC_CONFIG_PATH environment variable (if set)
2. ~/.config/money-calc/ (XDG_CONFIG_HOME fallback)

The calculators never read configuration. Only the CLI resolves settings
and passes explicit assumptions into the SDK.
"""

import json
import os
from pathlib import Path
from typing import Any


APP_NAME = "money-calc"
SETTINGS_FILENAME = "settings.json"
TAX_RULES_DIRNAME = "tax-rules"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. MONEY_CALC_CONFIG_PATH environment variable
    2. ~/.config/money-calc/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    # 1. Check environment variable
    env_path = os.environ.get("MONEY_CALC_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    # 2. Fall back to XDG config path
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def get_tax_rules_dir() -> Path:
    """Get the directory holding user-supplied tax-rules/*.yaml files."""
    return get_config_dir() / TAX_RULES_DIRNAME


def load_settings() -> dict:
    """Load settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json.

    Args:
        key: Setting key (e.g., "tax_year")
        default: Default value if key not found

    Returns:
        Setting value or default
    """
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def clear_setting(key: str) -> bool:
    """Remove a setting from settings.json.

    Returns:
        True if the key was present and removed
    """
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True
