"""
Unit tests for the tiered logger and student error templates.
"""

import logging

import pytest

from common.utils import (
    TieredLogger,
    MeasurementStats,
    PHOTOELECTRIC_ERRORS,
    get_error,
    format_error_message,
)


@pytest.fixture
def logger(tmp_path):
    """Logger writing its debug file into a temporary directory."""
    return TieredLogger("photoelectric_test", log_dir=tmp_path)


class TestMeasurementStats:
    """Tests for MeasurementStats formatting and quality."""

    def test_format_for_student(self):
        stats = MeasurementStats(5.0, 0.25, 10, cv_percent=5.0, voltage=0.0)
        assert stats.format_for_student() == (
            "Measurement at 0.0 V: 5.000 ± 0.250 µA (10 readings, Fair)"
        )

    def test_format_for_console(self):
        stats = MeasurementStats(5.0, 0.25, 10, cv_percent=5.0, voltage=-0.5)
        assert stats.format_for_console() == (
            "-0.50 V: 5.0000 ± 0.2500 µA (n=10, CV=5.0%)"
        )

    @pytest.mark.parametrize("mean,cv,quality", [
        (1.0, 0.5, "Excellent"),
        (1.0, 3.0, "Good"),
        (1.0, 7.0, "Fair"),
        (1.0, 20.0, "Noisy"),
        (0.0, 0.0, "No current"),
    ])
    def test_quality(self, mean, cv, quality):
        stats = MeasurementStats(mean, 0.0, 10, cv_percent=cv)
        assert stats.quality == quality


class TestTieredLogger:
    """Tests for TieredLogger routing."""

    def test_student_message_reaches_callback(self, logger):
        messages = []
        logger.set_status_callback(messages.append)
        logger.student("Light ON")
        assert messages == ["Light ON"]

    def test_stats_callback(self, logger):
        received = []
        logger.set_stats_callback(received.append)
        stats = MeasurementStats(1.0, 0.1, 10)
        logger.student_stats(stats)
        assert received == [stats]

    def test_student_error_callback(self, logger):
        errors = []
        logger.set_error_callback(lambda *args: errors.append(args))
        logger.student_error("Title", "Message", ["cause"], ["action"])
        assert errors == [("Title", "Message", ["cause"], ["action"])]

    def test_debug_file_written(self, logger, tmp_path):
        logger.debug("Box-Muller draws: 20")
        for handler in logger._logger.handlers:
            handler.flush()
        log_file = tmp_path / "photoelectric_test_debug.log"
        assert "Box-Muller draws: 20" in log_file.read_text()

    def test_staff_debug_mode(self, logger):
        try:
            TieredLogger.set_staff_debug_mode(True)
            assert TieredLogger.is_staff_debug_mode()
            assert logger._console_handler.level == logging.DEBUG
        finally:
            TieredLogger.set_staff_debug_mode(False)
        assert logger._console_handler.level == logging.INFO

    def test_get_logger_returns_same_instance(self):
        assert TieredLogger.get_logger("photoelectric") is TieredLogger.get_logger("photoelectric")


class TestErrorTemplates:
    """Tests for student error templates."""

    def test_known_keys(self):
        for key in ["invalid_parameter", "no_data", "no_photocurrent", "data_save_failed"]:
            assert key in PHOTOELECTRIC_ERRORS

    def test_get_error_unknown(self):
        assert get_error("does_not_exist") is None

    def test_format_error_message(self):
        text = format_error_message(get_error("no_data"))
        assert text.startswith("No Measurements Yet\n")
        assert "Possible causes:" in text
        assert "What to do:" in text
