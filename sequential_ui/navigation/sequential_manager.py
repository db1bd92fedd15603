"""
Framework-agnostic facade over NavigationManager.
"""

from dataclasses import replace
from typing import List, Optional

from loguru import logger

from .navigation_manager import NavigationManager, NavigationOptions, maybe_await
from ..config import SequentialConfig
from ..state.navigation_state import NavigationEvent
from ..state.panel import PanelDefinition

logger = logger.bind(module="SequentialManager")


def _copy_config(config: SequentialConfig) -> SequentialConfig:
    return replace(config, panels=list(config.panels))


class SequentialManager:
    """
    Wraps a NavigationManager together with the configuration it was
    built from.

    ``handle_before_navigate`` and ``handle_after_navigate`` are the
    extension points for adapters. They are looked up on every
    transition, so overriding them in a subclass or on an instance both
    take effect.
    """

    def __init__(self, config: SequentialConfig):
        self._config = _copy_config(config)
        self.navigation_manager = NavigationManager(
            config.panels,
            config.current_panel or 0,
            NavigationOptions(
                loop=config.loop,
                on_before_navigate=self._dispatch_before_navigate,
                on_after_navigate=self._dispatch_after_navigate,
            ),
        )

    # Delegated state
    @property
    def current_panel(self) -> int:
        return self.navigation_manager.current_panel

    @property
    def total_panels(self) -> int:
        return self.navigation_manager.total_panels

    @property
    def can_go_next(self) -> bool:
        return self.navigation_manager.can_go_next

    @property
    def can_go_previous(self) -> bool:
        return self.navigation_manager.can_go_previous

    @property
    def is_first(self) -> bool:
        return self.navigation_manager.is_first

    @property
    def is_last(self) -> bool:
        return self.navigation_manager.is_last

    @property
    def progress(self) -> float:
        return self.navigation_manager.progress

    @property
    def is_navigating(self) -> bool:
        return self.navigation_manager.is_navigating

    # Delegated navigation
    async def next(self) -> bool:
        return await self.navigation_manager.next()

    async def previous(self) -> bool:
        return await self.navigation_manager.previous()

    async def go_to(self, index: int) -> bool:
        return await self.navigation_manager.go_to(index)

    # Configuration management
    def update_config(self, **changes) -> None:
        """
        Merge ``changes`` into the stored configuration.

        A new ``panels`` list is handed to the navigation manager and a new
        ``loop`` value takes effect immediately.

        Raises:
            TypeError: If a key is not a SequentialConfig field.
        """
        if "panels" in changes and changes["panels"] is None:
            del changes["panels"]
        self._config = replace(self._config, **changes)

        if "panels" in changes:
            self._config.panels = list(changes["panels"])
            self.navigation_manager.update_panels(self._config.panels)
        if "loop" in changes:
            self.navigation_manager.loop = self._config.loop

        logger.debug(f"Configuration updated: {sorted(changes)}")

    def get_config(self) -> SequentialConfig:
        """Return a copy of the stored configuration."""
        return _copy_config(self._config)

    # Panel management
    def get_current_panel(self) -> Optional[PanelDefinition]:
        return self.navigation_manager.get_current_panel()

    def get_panel(self, index: int) -> Optional[PanelDefinition]:
        return self.navigation_manager.get_panel(index)

    def get_panels(self) -> List[PanelDefinition]:
        return list(self._config.panels)

    # Event handlers, overridable by adapters
    async def handle_before_navigate(self, event: NavigationEvent) -> bool:
        return True

    def handle_after_navigate(self, event: NavigationEvent) -> None:
        pass

    async def _dispatch_before_navigate(self, event: NavigationEvent) -> bool:
        return await maybe_await(self.handle_before_navigate(event))

    async def _dispatch_after_navigate(self, event: NavigationEvent) -> None:
        await maybe_await(self.handle_after_navigate(event))

    def destroy(self) -> None:
        """Release resources held by adapters. Nothing to release in the core."""
        logger.debug("SequentialManager destroyed")
