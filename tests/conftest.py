from datetime import datetime
from pathlib import Path

import pytest

from idleview.api.facade import IdleviewAPI
from idleview.config import AppConfig
from idleview.context.engine import ContextEngine
from idleview.display.formatting import epoch_millis
from idleview.settings.store import SettingsStore

# 2025-07-15 12:00 local, outside every festive window
FIXED_NOW = datetime(2025, 7, 15, 12, 0)


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "idleview" / "settings.json"


@pytest.fixture
def store(settings_path: Path) -> SettingsStore:
    s = SettingsStore(settings_path)
    s.initialize()
    return s


@pytest.fixture
def engine() -> ContextEngine:
    return ContextEngine(clock=lambda: FIXED_NOW)


@pytest.fixture
def api(store: SettingsStore, engine: ContextEngine) -> IdleviewAPI:
    config = AppConfig(unsplash_access_key="test-access-key-123456")
    return IdleviewAPI(store, engine=engine, config=config)


@pytest.fixture
def now_ms() -> int:
    """Epoch milliseconds of the engine clock."""
    return epoch_millis(FIXED_NOW)
