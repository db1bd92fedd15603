"""
Navigation manager for sequential panel navigation.
"""

import inspect
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, List, Optional, Sequence, Union

from loguru import logger

from ..state.navigation_state import NavigationEvent, NavigationState
from ..state.panel import PanelDefinition

logger = logger.bind(module="NavigationManager")

BeforeNavigateHook = Callable[[NavigationEvent], Union[bool, Awaitable[bool]]]
AfterNavigateHook = Callable[[NavigationEvent], Union[None, Awaitable[None]]]


@dataclass
class NavigationOptions:
    """Loop behaviour and lifecycle hooks for a NavigationManager."""
    loop: bool = False
    on_before_navigate: Optional[BeforeNavigateHook] = None
    on_after_navigate: Optional[AfterNavigateHook] = None


async def maybe_await(value: Any) -> Any:
    """Await ``value`` if it is awaitable, otherwise return it as is."""
    if inspect.isawaitable(value):
        return await value
    return value


class NavigationManager:
    """
    Tracks the current position in an ordered list of panels and
    governs transitions between them.

    Only one transition may be in flight at a time. A call made while
    another transition is pending is rejected, never queued.
    """

    def __init__(
        self,
        panels: Sequence[PanelDefinition],
        initial_panel: int = 0,
        options: Optional[NavigationOptions] = None,
    ):
        self._panels: List[PanelDefinition] = list(panels)
        self._options = options or NavigationOptions()
        self._state = NavigationState(
            current_panel=self._clamp(initial_panel),
            loop=self._options.loop,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def current_panel(self) -> int:
        return self._state.current_panel

    @property
    def total_panels(self) -> int:
        return len(self._panels)

    @property
    def is_first(self) -> bool:
        return self.current_panel == 0

    @property
    def is_last(self) -> bool:
        return self.current_panel == self.total_panels - 1

    @property
    def can_go_previous(self) -> bool:
        if self._state.is_navigating or self.total_panels == 0:
            return False
        return self.total_panels > 1 if self._state.loop else not self.is_first

    @property
    def can_go_next(self) -> bool:
        if self._state.is_navigating or self.total_panels == 0:
            return False
        return self.total_panels > 1 if self._state.loop else not self.is_last

    @property
    def progress(self) -> float:
        if self.total_panels == 0:
            return 0.0
        return (self.current_panel + 1) / self.total_panels * 100

    @property
    def is_navigating(self) -> bool:
        return self._state.is_navigating

    @property
    def loop(self) -> bool:
        return self._state.loop

    @loop.setter
    def loop(self, value: bool) -> None:
        self._state.loop = bool(value)

    @property
    def state(self) -> NavigationState:
        """Snapshot of the current navigation state."""
        return replace(self._state)

    # ------------------------------------------------------------------
    # Panel management
    # ------------------------------------------------------------------

    def update_panels(self, panels: Sequence[PanelDefinition]) -> None:
        """
        Replace the panel list.

        The current position is pulled back to the new last panel if it
        no longer exists. No guards or hooks run.
        """
        self._panels = list(panels)
        if self._state.current_panel >= len(self._panels):
            adjusted = max(0, len(self._panels) - 1)
            logger.debug(f"Current panel {self._state.current_panel} out of range after update, moved to {adjusted}")
            self._state.current_panel = adjusted

    def get_current_panel(self) -> Optional[PanelDefinition]:
        """Get the panel at the current position."""
        return self.get_panel(self.current_panel)

    def get_panel(self, index: int) -> Optional[PanelDefinition]:
        """Get a panel by index, or None if the index is out of range."""
        if 0 <= index < self.total_panels:
            return self._panels[index]
        return None

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    async def go_to(self, index: int) -> bool:
        """
        Navigate to a panel by index.

        Args:
            index: Target panel index; clamped into the valid range

        Returns:
            True if the manager is now on the target panel, False if the
            transition was rejected, blocked or failed
        """
        if self._state.is_navigating:
            logger.debug(f"Navigation to panel {index} rejected: another transition is in progress")
            return False

        target = self._clamp(index)
        current = self._state.current_panel
        if target == current:
            return True

        event = NavigationEvent.create(current, target, self._panels[target])

        self._state.is_navigating = True
        try:
            if not await self._validate_navigation(current, target):
                logger.debug(f"Navigation from panel {current} to {target} blocked by panel guard")
                return False

            if self._options.on_before_navigate:
                should_continue = await maybe_await(self._options.on_before_navigate(event))
                if not should_continue:
                    logger.debug(f"Navigation from panel {current} to {target} cancelled by before-navigate hook")
                    return False

            self._state.current_panel = target

            if self._options.on_after_navigate:
                await maybe_await(self._options.on_after_navigate(event))

            logger.info(f"Navigated from panel {current} to {target}")
            return True

        except Exception as e:
            logger.opt(exception=e).error(f"Navigation failed: {e}")
            return False
        finally:
            self._state.is_navigating = False

    async def next(self) -> bool:
        """Navigate to the next panel, wrapping around when looping."""
        if not self.can_go_next:
            return False

        next_index = self.current_panel + 1
        if next_index >= self.total_panels and self._state.loop:
            next_index = 0

        return await self.go_to(next_index)

    async def previous(self) -> bool:
        """Navigate to the previous panel, wrapping around when looping."""
        if not self.can_go_previous:
            return False

        previous_index = self.current_panel - 1
        if previous_index < 0 and self._state.loop:
            previous_index = self.total_panels - 1

        return await self.go_to(previous_index)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _clamp(self, index: int) -> int:
        return max(0, min(index, len(self._panels) - 1))

    async def _validate_navigation(self, from_index: int, to_index: int) -> bool:
        """Run the disabled check and the leave/enter guards, in that order."""
        from_panel = self.get_panel(from_index)
        to_panel = self.get_panel(to_index)

        if from_panel is None or to_panel is None:
            return False

        if to_panel.disabled:
            return False

        if from_panel.can_navigate_from:
            if not await maybe_await(from_panel.can_navigate_from()):
                return False

        if to_panel.can_navigate_to:
            if not await maybe_await(to_panel.can_navigate_to()):
                return False

        return True
