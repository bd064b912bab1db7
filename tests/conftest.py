from __future__ import annotations

from pathlib import Path
from typing import Iterator
import sys

import pytest
from fastapi.testclient import TestClient


# Ensure `import ghash.*` works when pytest chooses an import mode that
# doesn't automatically add the project root to sys.path.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture()
def client(monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    # Small cap so oversize ranges are cheap to exercise.
    monkeypatch.setenv("GHASH_RANGE_MAX_CELLS", "1000")
    monkeypatch.setenv("GHASH_DEFAULT_PRECISION", "6")
    monkeypatch.setenv("GHASH_LOG_LEVEL", "debug")

    from ghash.core.settings import get_settings

    get_settings.cache_clear()

    from ghash.main import create_app

    app = create_app()
    yield TestClient(app, raise_server_exceptions=False)

    get_settings.cache_clear()
