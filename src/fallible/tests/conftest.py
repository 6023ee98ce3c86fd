from __future__ import annotations

import pytest

from fallible.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Reload settings from the (possibly monkeypatched) environment per test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
