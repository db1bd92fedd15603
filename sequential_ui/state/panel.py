"""
Panel definitions.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional, Union

# Zero-argument guard; may return a bool or an awaitable resolving to one
PanelGuard = Callable[[], Union[bool, Awaitable[bool]]]


@dataclass
class PanelDefinition:
    """
    A single step in a sequence.

    Only ``id``, ``disabled`` and the two guards are read by the navigation
    core. The remaining fields are display payload for whatever renders the
    panel.
    """

    id: Union[str, int]
    disabled: bool = False
    can_navigate_from: Optional[PanelGuard] = None
    can_navigate_to: Optional[PanelGuard] = None

    # Display payload
    title: str = ""
    component: Any = None
    props: Dict[str, Any] = field(default_factory=dict)
    content: Optional[Callable[[], Any]] = None
