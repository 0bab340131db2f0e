from __future__ import annotations

from typing import Iterator

import pytest

from kanta.config import CONFIG_ENV_VAR, configure


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Every test starts from default settings, whatever the environment says."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    configure(None)
    yield
    configure(None)
