"""Exceptions, sanitization, permalinks, request id and logging helpers."""

import logging

import pytest

from app.core.request_context import get_request_id, reset_request_id, set_request_id
from app.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from app.infrastructure.services import PermalinkBuilder, ReferenceTemplateRenderer
from app.middleware.request_id import sanitize_request_id
from app.shared.telemetry.logging import RequestIdFilter
from app.shared.utils import InputSanitizer


def test_exception_to_dict() -> None:
    exc = ValidationException("bad", field="key")
    assert exc.to_dict() == {"error": "VALIDATION_ERROR", "message": "bad", "details": {"field": "key"}}
    assert ResourceNotFoundException("record", 3).details == {"resource_type": "record", "resource_id": 3}
    assert AuthorizationException("manage_options").message == "Permission denied: requires manage_options"


def test_strip_tags() -> None:
    assert InputSanitizer.strip_tags("<i>Tom &amp; Jerry</i>") == "Tom & Jerry"
    assert InputSanitizer.strip_tags(None) == ""


def test_permalinks() -> None:
    links = PermalinkBuilder("https://site.test/")
    assert links.permalink(7, "post", "hello world") == "https://site.test/post/hello%20world/"
    assert links.permalink(7, "post", None) == "https://site.test/?p=7"


def test_template_renderer_unknown_name() -> None:
    renderer = ReferenceTemplateRenderer(templates={"t.html": "{{ x }}"})
    assert renderer.render("t.html", x="<b>") == "&lt;b&gt;"
    with pytest.raises(KeyError):
        renderer.render("missing.html")


def test_sanitize_request_id() -> None:
    assert sanitize_request_id("abc-123_X") == "abc-123_X"
    generated = sanitize_request_id("bad id\n")
    assert generated != "bad id\n"
    assert len(generated) == 36
    assert len(sanitize_request_id("a" * 65)) == 36


def test_request_id_filter_uses_context() -> None:
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    RequestIdFilter().filter(record)
    assert record.request_id == "-"

    token = set_request_id("req-1")
    try:
        assert get_request_id() == "req-1"
        RequestIdFilter().filter(record)
        assert record.request_id == "req-1"
    finally:
        reset_request_id(token)
    assert get_request_id() is None
