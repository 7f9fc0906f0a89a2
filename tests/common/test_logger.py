"""Tests for logging utilities."""

import logging

from common.logger import error, get_logger, setup_logging, success, warning


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_logger_instance(self):
        """Test that get_logger returns a logger instance."""
        logger = get_logger("test")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test"

    def test_default_level_is_info(self, monkeypatch):
        """Test that default logging level is INFO."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        logger = get_logger("test.default")
        assert logger.level == logging.INFO

    def test_level_from_environment(self, monkeypatch):
        """Test that LOG_LEVEL sets the level when none is passed."""
        monkeypatch.setenv("LOG_LEVEL", "warning")
        logger = get_logger("test.env_level")
        assert logger.level == logging.WARNING

    def test_custom_level(self):
        """Test that custom logging level can be set."""
        logger = get_logger("test.custom", level="debug")
        assert logger.level == logging.DEBUG

    def test_reuses_existing_logger(self):
        """Test that get_logger does not add duplicate handlers."""
        logger1 = get_logger("test.reuse")
        logger2 = get_logger("test.reuse")
        assert logger1 is logger2
        assert len(logger2.handlers) == 1

    def test_logging_output(self, caplog):
        """Test that records propagate to pytest's caplog."""
        logger = get_logger("test.output", level="INFO")

        with caplog.at_level(logging.DEBUG):
            logger.debug("This should not appear")
            logger.info("Parsed 3 notes")

        assert "This should not appear" not in caplog.text
        assert "Parsed 3 notes" in caplog.text


class TestSetupLogging:
    """Tests for root logger configuration."""

    def test_configures_root_and_file(self, tmp_path, monkeypatch):
        """Test that setup_logging installs handlers and writes the log file."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        log_file = tmp_path / "run.log"
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level

        try:
            setup_logging(level="INFO", log_file=str(log_file))
            assert root.level == logging.INFO
            assert len(root.handlers) == 2

            logging.getLogger("test.file").info("written to file")
            for handler in root.handlers:
                handler.flush()
            assert "written to file" in log_file.read_text()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)


def test_console_helpers(capsys):
    """Test that console helpers print their icons."""
    success("Wrote 2 highlights")
    warning("Skipped 1 malformed note(s)")
    error("Expected element with 'bm-page' class")

    captured = capsys.readouterr()
    assert "✓" in captured.out and "Wrote 2 highlights" in captured.out
    assert "Skipped 1 malformed note(s)" in captured.out
    assert "bm-page" in captured.err


def test_console_helpers_print_brackets_literally(capsys):
    """Test that square brackets in messages are not parsed as markup."""
    warning("Skipping note: invalid digit found in '[/x]'")
    error("no ' - ' in '2021 Notes [/b]'")

    captured = capsys.readouterr()
    assert "'[/x]'" in captured.out
    assert "'2021 Notes [/b]'" in captured.err
