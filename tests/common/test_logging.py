import logging
import pytest
from src.common.logging import configure_logging, log_execution_time, setup_logger

@pytest.fixture
def logger():
    return setup_logger("src.tests.timing", logging.INFO)

def test_slow_call_is_logged_at_info(logger, caplog):
    @log_execution_time(logger, threshold_s=-1)
    def lookup():
        return "done"

    with caplog.at_level(logging.INFO, logger="src.tests.timing"):
        assert lookup() == "done"
    assert [r.levelno for r in caplog.records] == [logging.INFO]
    assert "lookup executed in" in caplog.records[0].getMessage()

def test_fast_call_stays_below_info(logger, caplog):
    @log_execution_time(logger, threshold_s=60)
    def lookup():
        return "done"

    with caplog.at_level(logging.INFO, logger="src.tests.timing"):
        lookup()
    assert caplog.records == []

def test_failure_is_logged_and_reraised(logger, caplog):
    @log_execution_time(logger)
    def lookup():
        raise RuntimeError("offline")

    with caplog.at_level(logging.INFO, logger="src.tests.timing"):
        with pytest.raises(RuntimeError):
            lookup()
    assert "lookup failed: offline" in caplog.records[-1].getMessage()

def test_configure_logging_relevels_project_loggers(logger):
    configure_logging("WARNING")
    try:
        assert logger.level == logging.WARNING
    finally:
        configure_logging("INFO")
