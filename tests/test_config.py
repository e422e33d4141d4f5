import logging

import pytest
import structlog

from soundtouch_api.config import Settings
from soundtouch_api.logging_config import setup_logging


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("TTS_LANGUAGE", "TTS_BASE_URL", "LOG_LEVEL", "LOG_JSON", "PACKAGE_LOG_LEVEL"):
            monkeypatch.delenv(f"SOUNDTOUCH_{name}", raising=False)

        config = Settings()

        assert config.tts_language == "EN"
        assert config.tts_base_url == "http://translate.google.com/translate_tts"
        assert config.log_level == "INFO"
        assert config.log_json is False
        assert config.package_log_level == "INFO"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOUNDTOUCH_TTS_LANGUAGE", "DE")
        monkeypatch.setenv("SOUNDTOUCH_LOG_JSON", "true")

        config = Settings()

        assert config.tts_language == "DE"
        assert config.log_json is True


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root_logger = logging.getLogger()
        package_logger = logging.getLogger("soundtouch_api")
        handlers, level, package_level = root_logger.handlers[:], root_logger.level, package_logger.level
        yield
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)
        package_logger.setLevel(package_level)
        structlog.reset_defaults()

    def test_configures_root_logger(self) -> None:
        setup_logging(Settings(log_level="debug"))

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(Settings(log_json=True))

        structlog.get_logger("soundtouch").info("clock updated", utc=1609459200)

        captured = capsys.readouterr()
        assert '"event": "clock updated"' in captured.err
        assert '"utc": 1609459200' in captured.err

    def test_package_debug_quiet_by_default(self) -> None:
        setup_logging(Settings(log_level="debug"))

        package_logger = logging.getLogger("soundtouch_api.models.sources")
        assert logging.getLogger("soundtouch_api").level == logging.INFO
        assert not package_logger.isEnabledFor(logging.DEBUG)

    def test_package_debug_opt_in(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOUNDTOUCH_PACKAGE_LOG_LEVEL", "debug")

        setup_logging(Settings())

        assert logging.getLogger("soundtouch_api.models.sources").isEnabledFor(logging.DEBUG)
