# sequential_ui/Widgets/sequential_navigation.py
# Description: Textual binding that mirrors a SequentialManager into reactive attributes
#
# Imports
from __future__ import annotations
from typing import Optional, Sequence

# 3rd-Party Imports
from loguru import logger
from textual.binding import Binding
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget

# Local Imports
from ..config import SequentialConfig
from ..navigation.navigation_manager import AfterNavigateHook, BeforeNavigateHook, maybe_await
from ..navigation.sequential_manager import SequentialManager
from ..state.navigation_state import NavigationEvent
from ..state.panel import PanelDefinition

# Configure logger
logger = logger.bind(module="SequentialNavigation")

########################################################################################################################
#
# Manager
#
########################################################################################################################

class ReactiveSequentialManager(SequentialManager):
    """SequentialManager whose hook slots keep a SequentialNavigation widget in sync."""

    def __init__(
        self,
        widget: "SequentialNavigation",
        config: SequentialConfig,
        on_before_navigate: Optional[BeforeNavigateHook] = None,
        on_after_navigate: Optional[AfterNavigateHook] = None,
    ):
        self._widget = widget
        self._on_before_navigate = on_before_navigate
        self._on_after_navigate = on_after_navigate
        super().__init__(config)

    async def handle_before_navigate(self, event: NavigationEvent) -> bool:
        if not await super().handle_before_navigate(event):
            return False
        if self._on_before_navigate:
            return bool(await maybe_await(self._on_before_navigate(event)))
        return True

    async def handle_after_navigate(self, event: NavigationEvent) -> None:
        super().handle_after_navigate(event)
        self._widget.refresh_state()
        self._widget.post_message(SequentialNavigation.Navigated(event))
        if self._on_after_navigate:
            await maybe_await(self._on_after_navigate(event))

########################################################################################################################
#
# Widget
#
########################################################################################################################

class SequentialNavigation(Widget):
    """
    Holds a SequentialManager and exposes its state as Textual reactives.

    The manager does not push state, so every call that can change it
    re-reads all properties afterwards. Widgets that render the panels can
    watch these reactives or handle ``SequentialNavigation.Navigated``.
    """

    DEFAULT_CSS = """
    SequentialNavigation {
        height: auto;
    }
    """

    BINDINGS = [
        Binding("ctrl+n", "next", "Next panel"),
        Binding("ctrl+b", "back", "Previous panel"),
    ]

    can_focus = True

    # Mirrored manager state
    current_panel = reactive(0)
    total_panels = reactive(0)
    can_go_next = reactive(False)
    can_go_previous = reactive(False)
    is_first_panel = reactive(True)
    is_last_panel = reactive(True)
    progress = reactive(0.0)
    is_navigating = reactive(False)

    class Navigated(Message):
        """Posted after a transition has been committed."""

        def __init__(self, event: NavigationEvent):
            super().__init__()
            self.event = event

    def __init__(
        self,
        panels: Sequence[PanelDefinition],
        initial_panel: int = 0,
        *,
        loop: bool = False,
        on_before_navigate: Optional[BeforeNavigateHook] = None,
        on_after_navigate: Optional[AfterNavigateHook] = None,
        **kwargs
    ):
        super().__init__(**kwargs)
        config = SequentialConfig(panels=list(panels), current_panel=initial_panel, loop=loop)
        self.manager = ReactiveSequentialManager(
            self,
            config,
            on_before_navigate=on_before_navigate,
            on_after_navigate=on_after_navigate,
        )
        self.refresh_state()

    def refresh_state(self) -> None:
        """Copy every observable property from the manager."""
        self.current_panel = self.manager.current_panel
        self.total_panels = self.manager.total_panels
        self.can_go_next = self.manager.can_go_next
        self.can_go_previous = self.manager.can_go_previous
        self.is_first_panel = self.manager.is_first
        self.is_last_panel = self.manager.is_last
        self.progress = self.manager.progress
        self.is_navigating = self.manager.is_navigating

    async def next(self) -> bool:
        result = await self.manager.next()
        self.refresh_state()
        return result

    async def previous(self) -> bool:
        result = await self.manager.previous()
        self.refresh_state()
        return result

    async def go_to(self, index: int) -> bool:
        result = await self.manager.go_to(index)
        self.refresh_state()
        return result

    def update_panels(self, panels: Sequence[PanelDefinition]) -> None:
        """Swap in a new panel list."""
        self.manager.update_config(panels=list(panels))
        self.refresh_state()
        logger.debug(f"Panels updated: {self.total_panels} panels, current {self.current_panel}")

    def get_current_panel(self) -> Optional[PanelDefinition]:
        return self.manager.get_current_panel()

    def get_panel(self, index: int) -> Optional[PanelDefinition]:
        return self.manager.get_panel(index)

    async def action_next(self) -> None:
        """Keyboard shortcut for next."""
        await self.next()

    async def action_back(self) -> None:
        """Keyboard shortcut for previous."""
        await self.previous()

    def on_unmount(self) -> None:
        self.manager.destroy()
