# sequential_ui/config.py
# Description: Configuration management for sequential_ui.
#
# Imports
import copy
import os
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
#
# Third-Party Imports
from loguru import logger
#
# Local Imports
from .state.panel import PanelDefinition
#
#######################################################################################################################
#
# Constants

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "sequential_ui" / "config.toml"
CONFIG_PATH_ENV_VAR = "SEQUENTIAL_UI_CONFIG"

DEFAULT_SETTINGS: Dict[str, Dict[str, Any]] = {
    "navigation": {
        "loop": False,
        "initial_panel": 0,
    },
    "logging": {
        "level": "INFO",
        "console": True,
        "file": "",
    },
}

_SETTINGS_CACHE: Optional[Dict[str, Any]] = None

#
# Functions:

def get_config_path() -> Path:
    """Resolve the settings file path, honouring the environment override."""
    override = os.environ.get(CONFIG_PATH_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merge ``update`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(config_path: Optional[Path] = None, force_reload: bool = False) -> Dict[str, Any]:
    """
    Load settings from TOML, merged over DEFAULT_SETTINGS.

    A missing or unreadable file is not an error: the defaults are used
    and the problem is logged.

    Args:
        config_path: Explicit file to read. Defaults to get_config_path().
        force_reload: Ignore the cached settings.

    Returns:
        The merged settings dictionary.
    """
    global _SETTINGS_CACHE
    if _SETTINGS_CACHE is not None and config_path is None and not force_reload:
        return _SETTINGS_CACHE

    path = Path(config_path) if config_path is not None else get_config_path()
    file_data: Dict[str, Any] = {}
    try:
        with open(path, "rb") as f:
            file_data = tomllib.load(f)
        logger.info(f"Loaded settings from {path}")
    except FileNotFoundError:
        logger.info(f"Settings file not found at {path}. Using defaults.")
    except tomllib.TOMLDecodeError as e:
        logger.error(f"Error decoding settings file {path}: {e}. Using defaults.")
    except OSError as e:
        logger.error(f"Could not read settings file {path}: {e}. Using defaults.")

    settings = deep_merge_dicts(DEFAULT_SETTINGS, file_data)
    if config_path is None:
        _SETTINGS_CACHE = settings
    return settings


def get_setting(section: str, key: str, default: Any = None) -> Any:
    """Get a single value from the loaded settings."""
    return load_settings().get(section, {}).get(key, default)


@dataclass
class SequentialConfig:
    """Configuration accepted by SequentialManager."""
    panels: List[PanelDefinition] = field(default_factory=list)
    current_panel: Optional[int] = 0
    loop: bool = False

    @classmethod
    def from_settings(
        cls,
        panels: Sequence[PanelDefinition],
        settings: Optional[Dict[str, Any]] = None,
    ) -> "SequentialConfig":
        """Build a config for ``panels`` from the [navigation] settings section."""
        if settings is None:
            settings = load_settings()
        navigation = settings.get("navigation", {})
        return cls(
            panels=list(panels),
            current_panel=int(navigation.get("initial_panel", 0)),
            loop=bool(navigation.get("loop", False)),
        )

#
# End of config.py
#######################################################################################################################
