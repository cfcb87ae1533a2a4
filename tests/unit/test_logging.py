import json
import logging

from app.core.logging import CustomJsonFormatter, LoggerAdapter, request_id, sanitize, user_id


def test_sanitize_masks_credentials_recursively():
    data = {
        "email": "a@b.com",
        "password": "hunter22",
        "nested": {"access_token": "abc", "block": "A"},
    }
    sanitize(data)
    assert data["email"] == "a@b.com"
    assert data["password"] == "[REDACTED]"
    assert data["nested"]["access_token"] == "[REDACTED]"
    assert data["nested"]["block"] == "A"


def test_json_formatter_adds_request_context():
    formatter = CustomJsonFormatter("%(message)s")
    record = logging.LogRecord("hostel.test", logging.INFO, __file__, 1, "hello", None, None)
    record.password = "plain"

    req_token = request_id.set("req-1")
    uid_token = user_id.set("user-1")
    try:
        payload = json.loads(formatter.format(record))
    finally:
        request_id.reset(req_token)
        user_id.reset(uid_token)

    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["request_id"] == "req-1"
    assert payload["user_id"] == "user-1"
    assert payload["password"] == "[REDACTED]"


class _Capture(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_bound_context_yields_to_call_extras():
    base = logging.getLogger("hostel.test.adapter")
    base.setLevel(logging.INFO)
    handler = _Capture()
    base.addHandler(handler)
    try:
        log = LoggerAdapter(base).bind(resource_type="Complaint", area="tickets")
        log.info("saved", extra={"resource_type": "Suggestion"})
    finally:
        base.removeHandler(handler)

    record = handler.records[0]
    assert record.resource_type == "Suggestion"
    assert record.area == "tickets"
