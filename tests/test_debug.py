"""Tests for the DebugManager logging layer."""

import logging

import pytest

from connect_four.debug import DebugLevel, DebugManager


@pytest.fixture
def manager():
    mgr = DebugManager()
    yield mgr
    mgr.configure(level=DebugLevel.WARNING, components=[], log_file="")


class TestDebugManager:
    """Tests for level handling, component filters and timers."""

    def test_level_from_string(self):
        assert DebugLevel.from_string(" Trace ") == DebugLevel.TRACE
        with pytest.raises(ValueError):
            DebugLevel.from_string("loud")

    def test_component_filter(self, manager):
        manager.configure(level=DebugLevel.DEBUG, components=["board"])

        assert manager._should_log(DebugLevel.DEBUG, "board")
        assert not manager._should_log(DebugLevel.DEBUG, "session")
        assert not manager._should_log(DebugLevel.TRACE, "board")

    def test_none_silences_everything(self, manager):
        manager.configure(level=DebugLevel.NONE)

        assert not manager._should_log(DebugLevel.ERROR)

    def test_env_var(self, manager):
        manager.configure_from_env({"CONNECT_FOUR_DEBUG": "debug"})
        assert manager.level == DebugLevel.DEBUG

        manager.configure_from_env({"CONNECT_FOUR_DEBUG": "bogus"})
        assert manager.level == DebugLevel.DEBUG

    def test_log_file(self, manager, tmp_path):
        log_file = tmp_path / "engine.log"
        manager.configure(level=DebugLevel.INFO, log_file=str(log_file))

        manager.info("round started", "session")
        for handler in logging.getLogger("connect_four").handlers:
            handler.flush()

        assert "[session] round started" in log_file.read_text()

    def test_timer(self, manager):
        manager.start_timer("work")

        assert manager.end_timer("work") >= 0.0
        assert manager.end_timer("work") is None
