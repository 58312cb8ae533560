import logging

import pytest

from projgen.utils._logging import _log_level_from_string, create_config_logger


class TestLogLevelFromString:
    def test_debug_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROJGEN_DEBUG", "1")

        assert _log_level_from_string("error") == logging.DEBUG

    def test_explicit_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PROJGEN_DEBUG", raising=False)
        monkeypatch.setenv("PROJGEN_LOG_LEVEL", "error")

        assert _log_level_from_string("warning") == logging.WARNING

    def test_env_level_when_not_given(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PROJGEN_DEBUG", raising=False)
        monkeypatch.setenv("PROJGEN_LOG_LEVEL", "error")

        assert _log_level_from_string(None) == logging.ERROR

    def test_unknown_level_defaults_to_info(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("PROJGEN_DEBUG", raising=False)

        assert _log_level_from_string("chatty") == logging.INFO


class TestCreateConfigLogger:
    def test_text_logger_writes_to_stderr(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.delenv("PROJGEN_DEBUG", raising=False)

        logger = create_config_logger("info")
        logger.warning("legacy_key_migrated", key="sourceTargets")

        err = capsys.readouterr().err
        assert "legacy_key_migrated" in err
        assert "key=sourceTargets" in err

    def test_filters_below_level(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.delenv("PROJGEN_DEBUG", raising=False)

        logger = create_config_logger("warning")
        logger.info("generator_config_loaded")

        assert capsys.readouterr().err == ""
