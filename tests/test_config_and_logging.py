# tests/test_config_and_logging.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tasklist.cli.bootstrap import create_initial_state
from tasklist.config import Settings
from tasklist.logging_setup import _ConsoleNoiseFilter, setup_logging
from tasklist.tasks.task_store import TaskStore


@pytest.fixture()
def clean_env(monkeypatch):
    for suffix in ("APP_NAME", "LOG_LEVEL", "LOG_FILE_ENABLED", "CONSOLE_ENABLED", "DATA_DIR"):
        monkeypatch.delenv(f"TASKLIST_{suffix}", raising=False)
    return monkeypatch


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    before, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


def test_settings_defaults(clean_env) -> None:
    s = Settings.from_env()
    assert s.app_name == "tasklist"
    assert s.log_level == "INFO"
    assert s.log_file_enabled is True
    assert s.console_enabled is True
    assert s.data_dir == Path(".local/tasklist")


def test_settings_from_env(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASKLIST_APP_NAME", "todo")
    clean_env.setenv("TASKLIST_LOG_LEVEL", "debug")
    clean_env.setenv("TASKLIST_LOG_FILE_ENABLED", "no")
    clean_env.setenv("TASKLIST_CONSOLE_ENABLED", "0")
    clean_env.setenv("TASKLIST_DATA_DIR", str(tmp_path))

    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.log_level == "DEBUG"
    assert s.log_file_enabled is False
    assert s.console_enabled is False
    assert s.data_dir == tmp_path


def test_create_initial_state_wires_empty_store(settings) -> None:
    state = create_initial_state(settings=settings)
    assert isinstance(state.task_store, TaskStore)
    assert state.task_store.count_tasks() == 0
    assert state.settings is settings


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path, console_level=logging.WARNING)
    logging.getLogger("tasklist.test").debug("hello file")

    for h in logging.getLogger().handlers:
        h.flush()
    assert "hello file" in (tmp_path / "tasklist.log").read_text("utf-8")


def test_setup_logging_without_file(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path / "unused", file_enabled=False)
    assert not (tmp_path / "unused").exists()
    assert len(logging.getLogger().handlers) == 1


def test_console_filter_hides_third_party_noise() -> None:
    f = _ConsoleNoiseFilter()

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert f.filter(rec("tasklist.tasks.task_store", logging.DEBUG))
    assert not f.filter(rec("urllib3", logging.WARNING))
    assert f.filter(rec("urllib3", logging.ERROR))
    assert not f.filter(rec("py.warnings", logging.WARNING))


@pytest.mark.parametrize("raw", ["ture", "enabled?", "2"])
def test_settings_unrecognized_bool_falls_back_to_default(clean_env, raw: str) -> None:
    clean_env.setenv("TASKLIST_CONSOLE_ENABLED", raw)
    clean_env.setenv("TASKLIST_LOG_FILE_ENABLED", raw)

    s = Settings.from_env()
    assert s.console_enabled is True
    assert s.log_file_enabled is True


@pytest.mark.parametrize("raw", ["0", "false", "No", "n", "OFF"])
def test_settings_recognized_false_values(clean_env, raw: str) -> None:
    clean_env.setenv("TASKLIST_CONSOLE_ENABLED", raw)
    assert Settings.from_env().console_enabled is False
