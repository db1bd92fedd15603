"""
sequential_ui - Framework-agnostic sequential panel navigation

Tracks the position within an ordered list of panels (wizard or stepper
steps) and governs transitions between them: bounds and loop handling,
asynchronous panel guards, lifecycle hooks and a single in-flight
transition lock.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Version tuple for programmatic comparison
VERSION_TUPLE = (0, 1, 0)

from .config import SequentialConfig, load_settings, get_setting
from .navigation import NavigationManager, NavigationOptions, SequentialManager
from .state import (
    NavigationEvent,
    NavigationState,
    PanelDefinition,
    PanelGuard,
    TransitionDirection,
)

metadata = {
    "name": "sequential_ui",
    "version": __version__,
    "description": "Framework-agnostic core logic for sequential UI components",
    "keywords": ["sequential", "wizard", "stepper", "multi-step", "textual"],
    "license": __license__,
}

__all__ = [
    "__version__",
    "VERSION_TUPLE",
    "metadata",
    "SequentialConfig",
    "load_settings",
    "get_setting",
    "NavigationManager",
    "NavigationOptions",
    "SequentialManager",
    "NavigationEvent",
    "NavigationState",
    "PanelDefinition",
    "PanelGuard",
    "TransitionDirection",
]
