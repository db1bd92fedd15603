# sequential_ui/Widgets/__init__.py
# Description: Textual bindings for sequential navigation

from .sequential_navigation import SequentialNavigation, ReactiveSequentialManager

__all__ = [
    "SequentialNavigation",
    "ReactiveSequentialManager",
]
