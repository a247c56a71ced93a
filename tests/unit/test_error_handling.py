"""
Unit tests for application exceptions, error tracking and log formatting.
"""
import json
import logging

from lunch_roulette.core.error_handlers import ErrorHandler
from lunch_roulette.core.exceptions import (
    ErrorCode,
    LunchRouletteException,
    MissingRequiredParameterError,
    UpstreamCallFailedError,
)
from lunch_roulette.core.logging import (
    JsonFormatter,
    RequestIdFilter,
    configure_logging,
    request_id_var,
)


def test_missing_parameter_error():
    exc = MissingRequiredParameterError(["latitude"])
    assert isinstance(exc, LunchRouletteException)
    assert exc.status_code == 400
    assert exc.message == "Latitude and longitude are required."
    assert exc.details == {"missing": ["latitude"]}
    assert str(exc) == exc.message


def test_upstream_error():
    exc = UpstreamCallFailedError(404)
    assert exc.status_code == 500
    assert exc.error_code == ErrorCode.UPSTREAM_CALL_FAILED
    assert exc.message == "Azure Maps API call failed."
    assert exc.details == {"upstream_status": 404}


def test_error_statistics():
    handler = ErrorHandler()
    for _ in range(3):
        handler._track_error("UPSTREAM_CALL_FAILED")
    handler._track_error("MISSING_REQUIRED_PARAMETER")
    stats = handler.get_error_statistics()
    assert stats["error_counts"] == {"UPSTREAM_CALL_FAILED": 3, "MISSING_REQUIRED_PARAMETER": 1}
    assert stats["recent_errors"]["UPSTREAM_CALL_FAILED"] == 3
    assert stats["total_errors"] == 4


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("lunch_roulette.test", logging.ERROR, __file__, 1,
                               "Azure Maps API call failed.", None, None)
    record.upstream_status = 503
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "ERROR"
    assert payload["message"] == "Azure Maps API call failed."
    assert payload["logger"] == "lunch_roulette.test"
    assert payload["upstream_status"] == 503
    assert "lineno" not in payload


def test_request_id_is_stamped_on_records():
    record = logging.LogRecord("lunch_roulette.api", logging.INFO, __file__, 1,
                               "Processing Azure Maps request.", None, None)
    token = request_id_var.set("req-42")
    try:
        RequestIdFilter().filter(record)
    finally:
        request_id_var.reset(token)
    assert record.request_id == "req-42"
    assert json.loads(JsonFormatter().format(record))["request_id"] == "req-42"


def test_request_id_defaults_outside_requests():
    record = logging.LogRecord("lunch_roulette", logging.INFO, __file__, 1, "startup", None, None)
    RequestIdFilter().filter(record)
    assert record.request_id == "-"


def test_http_client_loggers_are_quieted():
    configure_logging("DEBUG", "text")
    try:
        assert logging.getLogger("httpx").getEffectiveLevel() == logging.WARNING
        assert logging.getLogger("httpcore").getEffectiveLevel() == logging.WARNING
    finally:
        logging.getLogger().setLevel(logging.INFO)
