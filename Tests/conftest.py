"""
Root conftest.py for shared test fixtures and configuration.
This file provides common fixtures used across the test suite.
"""

import pytest
import sys
from pathlib import Path
from typing import List

from loguru import logger

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from sequential_ui import config as sequential_config
from sequential_ui.state.panel import PanelDefinition


# ========== Panel Fixtures ==========

@pytest.fixture
def basic_panels() -> List[PanelDefinition]:
    """Three plain panels with no guards."""
    return [
        PanelDefinition(id="panel-1"),
        PanelDefinition(id="panel-2"),
        PanelDefinition(id="panel-3"),
    ]


@pytest.fixture
def make_panels():
    """Factory for ``count`` plain panels."""
    def _make_panels(count: int) -> List[PanelDefinition]:
        return [PanelDefinition(id=f"panel-{i + 1}") for i in range(count)]
    return _make_panels


# ========== Logging Fixtures ==========

@pytest.fixture
def log_records():
    """Capture loguru records emitted during a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


# ========== Config Fixtures ==========

@pytest.fixture
def reset_settings_cache(monkeypatch):
    """Keep cached settings from leaking between tests."""
    monkeypatch.setattr(sequential_config, "_SETTINGS_CACHE", None)
    monkeypatch.delenv(sequential_config.CONFIG_PATH_ENV_VAR, raising=False)
