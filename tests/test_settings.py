"""Tests for settings persistence and logging setup."""

import json
import logging

import pytest

from countdown import settings as settings_mod
from countdown.settings import Settings, load_settings, save_settings
from countdown import __main__ as main_mod
from countdown.__main__ import configure_logging


class TestSettings:

    def test_defaults(self):
        s = Settings()
        assert s.tick_interval_ms == 1000
        assert s.log_level == "INFO"
        assert s.window_x is None
        assert s.window_y is None
        assert s.always_on_top is False

    def test_missing_file_gives_defaults(self):
        assert load_settings() == Settings()

    def test_round_trip(self):
        original = Settings(
            tick_interval_ms=500, log_level="DEBUG",
            window_x=10, window_y=20, window_width=420, window_height=700,
            always_on_top=True,
        )
        save_settings(original)
        assert load_settings() == original

    def test_unknown_keys_ignored(self):
        settings_mod.SETTINGS_PATH.write_text(
            json.dumps({"always_on_top": True, "theme": "neon"}),
            encoding="utf-8",
        )
        loaded = load_settings()
        assert loaded.always_on_top is True
        assert not hasattr(loaded, "theme")

    def test_corrupt_file_falls_back(self, caplog):
        settings_mod.SETTINGS_PATH.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="countdown.settings"):
            loaded = load_settings()
        assert loaded == Settings()
        assert "unreadable settings" in caplog.text

    def test_non_object_json_falls_back(self):
        settings_mod.SETTINGS_PATH.write_text("[1, 2, 3]", encoding="utf-8")
        assert load_settings() == Settings()

    @pytest.mark.parametrize("value", [1000.0, 0, -5, "1000", True, None])
    def test_bad_tick_interval_falls_back(self, value):
        settings_mod.SETTINGS_PATH.write_text(
            json.dumps({"tick_interval_ms": value, "always_on_top": True}),
            encoding="utf-8",
        )
        loaded = load_settings()
        assert loaded.tick_interval_ms == 1000
        assert loaded.always_on_top is True

    @pytest.mark.parametrize("value", [10, "chatty", None])
    def test_bad_log_level_falls_back(self, value):
        settings_mod.SETTINGS_PATH.write_text(
            json.dumps({"log_level": value}), encoding="utf-8",
        )
        assert load_settings().log_level == "INFO"

    def test_lowercase_log_level_accepted(self):
        settings_mod.SETTINGS_PATH.write_text(
            json.dumps({"log_level": "debug"}), encoding="utf-8",
        )
        assert load_settings().log_level == "debug"

    def test_bad_window_fields_fall_back(self):
        settings_mod.SETTINGS_PATH.write_text(
            json.dumps({
                "window_x": "left", "window_y": 40,
                "window_width": 400.5, "always_on_top": "yes",
            }),
            encoding="utf-8",
        )
        loaded = load_settings()
        assert loaded.window_x is None
        assert loaded.window_y == 40
        assert loaded.window_width == 400
        assert loaded.always_on_top is False

    def test_invalid_value_is_logged(self, caplog):
        settings_mod.SETTINGS_PATH.write_text(
            json.dumps({"tick_interval_ms": 0}), encoding="utf-8",
        )
        with caplog.at_level(logging.WARNING, logger="countdown.settings"):
            load_settings()
        assert "tick_interval_ms=0" in caplog.text

    def test_bad_interval_still_builds_one_second_engine(self, qapp):
        from countdown.app import CountdownApp

        settings_mod.SETTINGS_PATH.write_text(
            json.dumps({"tick_interval_ms": 1000.0}), encoding="utf-8",
        )
        win = CountdownApp(load_settings())
        assert win.engine._qt_timer.interval() == 1000
        win.engine.close()


class TestLogging:

    def test_configure_logging_uses_level_name(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

        configure_logging("debug")

        assert calls[0]["level"] == logging.DEBUG
        assert calls[0]["force"] is True

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

        configure_logging("chatty")

        assert calls[0]["level"] == logging.INFO

    def test_bootstrap_configures_logging_before_loading(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            logging, "basicConfig", lambda **kw: calls.append(("config", kw["level"])),
        )
        real_load = main_mod.load_settings

        def recording_load():
            calls.append(("load", None))
            return real_load()

        monkeypatch.setattr(main_mod, "load_settings", recording_load)
        settings_mod.SETTINGS_PATH.write_text(
            json.dumps({"log_level": "WARNING"}), encoding="utf-8",
        )

        settings = main_mod.bootstrap()

        assert settings.log_level == "WARNING"
        assert calls == [
            ("config", logging.INFO),
            ("load", None),
            ("config", logging.WARNING),
        ]
