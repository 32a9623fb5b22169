import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from schedule_api.core.config import settings
from schedule_api.main import app


def write_schedule(directory: Path, week_type: str, content) -> Path:
    path = directory / f"schedule_{week_type}.json"
    if isinstance(content, str):
        path.write_text(content, encoding="utf-8")
    else:
        path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def schedule_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configured schedule directory at an empty temp dir."""
    monkeypatch.setattr(settings, "schedule_dir", tmp_path)
    return tmp_path


@pytest.fixture
def client(schedule_dir: Path) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
