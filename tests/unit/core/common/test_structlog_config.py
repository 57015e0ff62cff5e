import logging

import pytest
import structlog
from servicecontainer.core.common.structlog_config import (
    LogFormat,
    configure_logging,
    get_logger,
)


@pytest.mark.parametrize("log_format", list(LogFormat))
def test_configure_logging_routes_through_stdlib(log_format: LogFormat) -> None:
    configure_logging(log_format, level=logging.DEBUG)

    assert structlog.is_configured()
    assert structlog.get_config()["logger_factory"].__class__ is (
        structlog.stdlib.LoggerFactory
    )


def test_get_logger_emits_events(caplog: pytest.LogCaptureFixture) -> None:
    configure_logging(LogFormat.PLAIN)

    with caplog.at_level(logging.INFO):
        get_logger("servicecontainer.test").info("container.compiled", aliases=1)

    assert "event='container.compiled'" in caplog.text
    assert "aliases=1" in caplog.text
