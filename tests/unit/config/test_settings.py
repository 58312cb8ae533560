from pathlib import Path

import pytest

from projgen.config import LoaderSettings, LogFormat, LogLevel


class TestLoaderSettingsFromEnv:
    def test_defaults(self) -> None:
        settings = LoaderSettings.from_env({})

        assert settings.log_level == LogLevel.INFO
        assert settings.log_format == LogFormat.TEXT
        assert settings.log_file == ""

    def test_reads_environment(self) -> None:
        settings = LoaderSettings.from_env(
            {
                "PROJGEN_LOG_LEVEL": "DEBUG",
                "PROJGEN_LOG_FORMAT": "json",
                "PROJGEN_LOG_FILE": "/tmp/projgen.log",
            }
        )

        assert settings.log_level == LogLevel.DEBUG
        assert settings.log_format == LogFormat.JSON
        assert settings.log_file == "/tmp/projgen.log"

    def test_invalid_values_fall_back(self) -> None:
        settings = LoaderSettings.from_env(
            {"PROJGEN_LOG_LEVEL": "verbose", "PROJGEN_LOG_FORMAT": "xml"}
        )

        assert settings.log_level == LogLevel.INFO
        assert settings.log_format == LogFormat.TEXT

    def test_uses_process_environment_by_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PROJGEN_LOG_LEVEL", "warning")

        assert LoaderSettings.from_env().log_level == LogLevel.WARNING


class TestLoaderSettingsCreateLogger:
    def test_writes_json_to_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "projgen.log"
        settings = LoaderSettings(log_format=LogFormat.JSON, log_file=str(log_file))

        logger = settings.create_logger()
        logger.warning("path_filter_dropped", entry="//a:b:c")

        content = log_file.read_text()
        assert '"event": "path_filter_dropped"' in content
        assert '"entry": "//a:b:c"' in content
