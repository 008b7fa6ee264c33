import logging

import pytest


@pytest.fixture
def anomaly_log(caplog):
    """Capture warnings from the uri_query loggers and return their messages."""
    caplog.set_level(logging.WARNING, logger="uri_query")

    def _messages():
        return [
            record.getMessage()
            for record in caplog.records
            if record.name.startswith("uri_query") and record.levelno == logging.WARNING
        ]
    return _messages
