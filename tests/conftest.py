# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest

from tests.test_support.fake_scheduler import FakeClock, ManualScheduler


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()
    countdown_dir = fake_home / ".countdown"
    countdown_dir.mkdir()

    # minimal config.json w/ test defaults
    config_data = {
        "total": 10.0,
        "interval": 1.0,
        "auto_start": True,
        "show_progress": True,
        "dev_mode": False,
    }
    config_file = countdown_dir / "config.json"
    config_file.write_text(json.dumps(config_data, indent=2), encoding="utf-8")

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("COUNTDOWN_CONFIG", raising=False)

    # ! reset global settings_manager state & point it at the isolated config
    from countdown.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = config_file

    # ! reset output manager to NullOutputManager for test isolation
    from countdown.core.output import reset_output_manager

    reset_output_manager()
    yield fake_home
    reset_output_manager()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return ManualScheduler(clock)


@pytest.fixture
def recorder():
    # collects callback invocations in order
    class Recorder:
        def __init__(self):
            self.ticks: list[float] = []
            self.finishes = 0
            self.events: list[tuple[str, float | None]] = []

        def on_tick(self, seconds_left: float) -> None:
            self.ticks.append(seconds_left)
            self.events.append(("tick", seconds_left))

        def on_finish(self) -> None:
            self.finishes += 1
            self.events.append(("finish", None))

    return Recorder()
