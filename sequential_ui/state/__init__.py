"""
State containers for sequential navigation.
"""

from .panel import PanelDefinition, PanelGuard
from .navigation_state import NavigationState, NavigationEvent, TransitionDirection

__all__ = [
    'PanelDefinition',
    'PanelGuard',
    'NavigationState',
    'NavigationEvent',
    'TransitionDirection',
]
