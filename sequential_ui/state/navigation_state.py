"""
Navigation state management.
"""

from dataclasses import dataclass
from enum import Enum

from .panel import PanelDefinition


class TransitionDirection(str, Enum):
    """Direction of a transition between two panels."""
    NEXT = "next"
    PREVIOUS = "previous"
    NONE = "none"

    @classmethod
    def between(cls, from_panel: int, to_panel: int) -> "TransitionDirection":
        if to_panel > from_panel:
            return cls.NEXT
        if to_panel < from_panel:
            return cls.PREVIOUS
        return cls.NONE


@dataclass
class NavigationState:
    """Position and lock flag of a single navigation manager."""

    current_panel: int = 0
    is_navigating: bool = False
    loop: bool = False


@dataclass(frozen=True)
class NavigationEvent:
    """Describes one transition; ``panel`` is the destination panel."""

    from_panel: int
    to_panel: int
    direction: TransitionDirection
    panel: PanelDefinition

    @classmethod
    def create(cls, from_panel: int, to_panel: int, panel: PanelDefinition) -> "NavigationEvent":
        return cls(
            from_panel=from_panel,
            to_panel=to_panel,
            direction=TransitionDirection.between(from_panel, to_panel),
            panel=panel,
        )
