import json
import logging

from nuget_client.core.logger import ROOT_LOGGER_NAME, QueryEvent, configure_logging


def test_query_event_serializes_to_json():
    event = QueryEvent(event_type="AGGREGATE", data={"endpoints": 2, "failed": ["https://x"]})

    payload = json.loads(event.to_json())

    assert payload["event_type"] == "AGGREGATE"
    assert payload["data"] == {"endpoints": 2, "failed": ["https://x"]}
    assert payload["timestamp"]


def test_configure_logging_installs_single_handler(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    log = logging.getLogger(ROOT_LOGGER_NAME)
    saved = list(log.handlers)
    for handler in saved:
        log.removeHandler(handler)
    try:
        configure_logging("DEBUG")
        configure_logging("INFO")

        assert len(log.handlers) == 1
        assert log.level == logging.INFO
        assert log.handlers[0].level == logging.INFO
    finally:
        for handler in list(log.handlers):
            log.removeHandler(handler)
        for handler in saved:
            log.addHandler(handler)
        log.setLevel(logging.NOTSET)
