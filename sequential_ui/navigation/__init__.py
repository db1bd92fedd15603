"""
Navigation management module.
"""

from .navigation_manager import NavigationManager, NavigationOptions
from .sequential_manager import SequentialManager

__all__ = [
    'NavigationManager',
    'NavigationOptions',
    'SequentialManager',
]
