from __future__ import annotations

import pytest

from interactive_buttons.config.settings import get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Garante que cada teste lê o ambiente atual."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
