"""Unit tests for configure_logging()."""

import json
import logging
from pathlib import Path

import pytest

from stringy.config.models import LoggingConfig
from stringy.logging import configure_logging, operation_context
from stringy.logging.handlers import JSONFormatter


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
        ],
    )
    def test_levels(self, level: str, expected: int) -> None:
        """Should set the root level, case-insensitively."""
        configure_logging(LoggingConfig(level=level))
        assert logging.getLogger().level == expected

    def test_stderr_only(self) -> None:
        """Should add a stderr handler when no file is specified."""
        configure_logging(LoggingConfig(file=None))

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_handler(self, tmp_path: Path) -> None:
        """Should add only a rotating file handler when file is specified."""
        configure_logging(
            LoggingConfig(file=tmp_path / "test.log", max_bytes=1024, backup_count=2)
        )

        root = logging.getLogger()
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert handler.maxBytes == 1024
        assert handler.backupCount == 2
        handler.close()

    def test_file_and_stderr(self, tmp_path: Path) -> None:
        """Should add both handlers when file and include_stderr."""
        configure_logging(LoggingConfig(file=tmp_path / "test.log", include_stderr=True))

        root = logging.getLogger()
        assert len(root.handlers) == 2
        for handler in root.handlers:
            handler.close()

    def test_creates_log_directory(self, tmp_path: Path) -> None:
        log_dir = tmp_path / "logs" / "nested"
        configure_logging(LoggingConfig(file=log_dir / "app.log"))

        assert log_dir.is_dir()
        for handler in logging.getLogger().handlers:
            handler.close()

    def test_fallback_on_file_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Should fall back to stderr when the log file cannot be opened."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")

        configure_logging(LoggingConfig(file=blocker / "test.log"))

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert "Could not open log file" in capsys.readouterr().err

    def test_json_formatter(self) -> None:
        configure_logging(LoggingConfig(format="json"))
        assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

    def test_text_formatter(self) -> None:
        configure_logging(LoggingConfig(format="text"))
        assert not isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

    def test_clears_existing_handlers(self) -> None:
        """Reconfiguring should not accumulate handlers."""
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig(level="debug"))
        assert len(logging.getLogger().handlers) == 1

    def test_text_output_tags_operation(self, tmp_path: Path) -> None:
        """Text lines carry the operation being dispatched."""
        log_file = tmp_path / "stringy.log"
        configure_logging(LoggingConfig(file=log_file))

        with operation_context("camelize"):
            logging.getLogger("stringy.test").info("inside")
        logging.getLogger("stringy.test").info("outside")
        for handler in logging.getLogger().handlers:
            handler.close()

        inside, outside = log_file.read_text(encoding="utf-8").splitlines()
        assert "[camelize] stringy.test - INFO - inside" in inside
        assert " - stringy.test - INFO - outside" in outside

    def test_json_output_has_operation(self, tmp_path: Path) -> None:
        log_file = tmp_path / "stringy.log"
        configure_logging(LoggingConfig(file=log_file, format="json"))

        with operation_context("slugify", "UTF-8"):
            logging.getLogger("stringy.test").warning("tagged")
        for handler in logging.getLogger().handlers:
            handler.close()

        entry = json.loads(log_file.read_text(encoding="utf-8"))
        assert entry["operation"] == "slugify"
        assert entry["level"] == "WARNING"
