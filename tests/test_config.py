from pathlib import Path

import pytest

from schedule_api.core.config import BASE_DIR, Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_ENV", "APP_PORT", "PORT", "SCHEDULE_DIR", "SERVICE_NAME"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.app_env == "dev"
    assert s.app_port == 8000
    assert s.schedule_dir == BASE_DIR / "static"
    assert s.cors_allow_origins == ["*"]


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.setenv("APP_PORT", "9100")
    monkeypatch.setenv("schedule_dir", str(tmp_path))

    s = Settings(_env_file=None)

    assert s.app_port == 9100
    assert s.schedule_dir == tmp_path


def test_bundled_static_schedules_load() -> None:
    from schedule_api.storage.schedules import get_all_groups

    groups = get_all_groups(BASE_DIR / "static")

    assert groups
    assert groups == sorted(set(groups))


def test_platform_port_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("APP_PORT", raising=False)
    monkeypatch.setenv("PORT", "9200")

    s = Settings(_env_file=None)

    assert s.app_port == 9200


def test_app_port_wins_over_platform_port(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_PORT", "9100")
    monkeypatch.setenv("PORT", "9200")

    s = Settings(_env_file=None)

    assert s.app_port == 9100
