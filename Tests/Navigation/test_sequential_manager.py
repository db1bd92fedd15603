"""
Tests for SequentialManager, the configuration-holding facade.
"""

from unittest.mock import MagicMock

import pytest

from sequential_ui.config import SequentialConfig
from sequential_ui.navigation.sequential_manager import SequentialManager
from sequential_ui.state.navigation_state import NavigationEvent, TransitionDirection
from sequential_ui.state.panel import PanelDefinition


@pytest.fixture
def manager(basic_panels):
    return SequentialManager(SequentialConfig(panels=basic_panels, current_panel=0, loop=False))


# ========== Initialization ==========

def test_initializes_with_default_state(manager):
    assert manager.current_panel == 0
    assert manager.total_panels == 3
    assert manager.is_first is True
    assert manager.is_last is False
    assert manager.progress == 33.33333333333333
    assert manager.is_navigating is False
    assert manager.can_go_next is True
    assert manager.can_go_previous is False


def test_initializes_with_custom_starting_panel(basic_panels):
    manager = SequentialManager(SequentialConfig(panels=basic_panels, current_panel=1))

    assert manager.current_panel == 1
    assert manager.is_first is False
    assert manager.is_last is False


def test_missing_starting_panel_defaults_to_zero(basic_panels):
    manager = SequentialManager(SequentialConfig(panels=basic_panels, current_panel=None))
    assert manager.current_panel == 0


# ========== Navigation ==========

@pytest.mark.asyncio
async def test_delegates_navigation(manager):
    assert await manager.next() is True
    assert manager.current_panel == 1
    assert manager.progress == 66.66666666666666

    assert await manager.go_to(2) is True
    assert manager.is_last is True
    assert manager.can_go_next is False

    assert await manager.previous() is True
    assert manager.current_panel == 1


@pytest.mark.asyncio
async def test_invalid_go_to_indices_are_clamped(manager):
    assert await manager.go_to(-1) is True
    assert manager.current_panel == 0

    assert await manager.go_to(10) is True
    assert manager.current_panel == 2


@pytest.mark.asyncio
async def test_loop_navigation(basic_panels):
    manager = SequentialManager(SequentialConfig(panels=basic_panels, current_panel=2, loop=True))

    assert manager.can_go_next is True
    assert await manager.next() is True
    assert manager.current_panel == 0
    assert await manager.previous() is True
    assert manager.current_panel == 2


@pytest.mark.asyncio
async def test_respects_panel_guards():
    panels = [
        PanelDefinition(id="a", can_navigate_from=lambda: False),
        PanelDefinition(id="b"),
    ]
    manager = SequentialManager(SequentialConfig(panels=panels))

    assert await manager.next() is False
    assert manager.current_panel == 0


# ========== Panel management ==========

def test_panel_accessors(manager, basic_panels):
    assert manager.get_current_panel() is basic_panels[0]
    assert manager.get_panel(1) is basic_panels[1]
    assert manager.get_panel(5) is None
    assert manager.get_panel(-1) is None


# ========== Configuration management ==========

def test_update_config_merges(manager):
    manager.update_config(loop=True)

    config = manager.get_config()
    assert config.loop is True
    assert len(config.panels) == 3
    assert manager.can_go_previous is True


@pytest.mark.asyncio
async def test_update_config_panels_reclamps(manager, basic_panels):
    await manager.go_to(2)
    manager.update_config(panels=basic_panels[:2])

    assert manager.total_panels == 2
    assert manager.current_panel == 1
    assert manager.get_config().panels == basic_panels[:2]


def test_update_config_ignores_missing_panels(manager, basic_panels):
    manager.update_config(panels=None)

    assert manager.total_panels == 3
    assert manager.get_config().panels == basic_panels


def test_update_config_rejects_unknown_keys(manager):
    with pytest.raises(TypeError):
        manager.update_config(colour="blue")


def test_get_config_returns_defensive_copy(manager):
    first = manager.get_config()
    second = manager.get_config()

    assert first == second
    assert first is not second
    assert first.panels is not second.panels

    first.panels.append(PanelDefinition(id="intruder"))
    first.loop = True
    assert manager.get_config() == second
    assert manager.total_panels == 3


def test_config_is_copied_on_construction(basic_panels):
    config = SequentialConfig(panels=basic_panels)
    manager = SequentialManager(config)

    config.loop = True
    basic_panels.pop()
    assert manager.get_config().loop is False
    assert manager.total_panels == 3


# ========== Hook slots ==========

@pytest.mark.asyncio
async def test_default_hooks_pass_through(manager):
    event = NavigationEvent.create(0, 1, manager.get_panel(1))

    assert await manager.handle_before_navigate(event) is True
    assert manager.handle_after_navigate(event) is None


@pytest.mark.asyncio
async def test_subclass_hooks_are_used(basic_panels):
    events = []

    class VetoingManager(SequentialManager):
        async def handle_before_navigate(self, event):
            events.append(("before", event))
            return event.to_panel != 2

        def handle_after_navigate(self, event):
            events.append(("after", event))

    manager = VetoingManager(SequentialConfig(panels=basic_panels))

    assert await manager.next() is True
    assert await manager.next() is False
    assert manager.current_panel == 1
    assert [name for name, _ in events] == ["before", "after", "before"]
    assert events[0][1].direction is TransitionDirection.NEXT


@pytest.mark.asyncio
async def test_instance_hook_override_takes_effect(manager):
    manager.handle_before_navigate = MagicMock(return_value=False)

    assert await manager.next() is False
    manager.handle_before_navigate.assert_called_once()
    assert manager.current_panel == 0


def test_destroy_is_a_noop(manager):
    manager.destroy()
    assert manager.total_panels == 3
