"""
Unit tests for response formatters and Accept negotiation.
"""

from xml.etree import ElementTree as ET

import pytest

from rest_lab_api.app.core.negotiation import (
    HtmlFormatter,
    PlainTextFormatter,
    XmlFormatter,
    format_int,
    negotiate,
    parse_accept,
    to_text,
)


@pytest.mark.parametrize("accept, expected", [
    ("text/plain", PlainTextFormatter),
    ("text/html", HtmlFormatter),
    ("text/html, text/plain", PlainTextFormatter),
    ("text/html;q=0.9, application/xhtml+xml", HtmlFormatter),
    ("text/xml", XmlFormatter),
    ("application/xml", XmlFormatter),
    ("application/json", XmlFormatter),
    ("*/*", XmlFormatter),
    ("", XmlFormatter),
    (None, XmlFormatter),
])
def test_negotiate(accept, expected):
    assert isinstance(negotiate(accept), expected)


def test_parse_accept_drops_parameters():
    assert parse_accept("Text/Plain; q=0.5 , text/html") == ["text/plain", "text/html"]


def test_to_text():
    assert to_text([0, 1, 1, 2]) == "[0, 1, 1, 2]"
    assert to_text([]) == "[]"
    assert to_text(-1) == "-1"


def test_format_int_beyond_str_digit_limit():
    big = 10 ** 5000 + 7
    text = format_int(big)
    assert len(text) == 5001
    assert text.startswith("1000")
    assert text.endswith("0007")
    assert format_int(-big) == "-" + text


def test_format_int_keeps_zeros_inside_chunks():
    # high part 1, low part 5 padded to a full chunk
    value = 10 ** 4000 + 5
    assert format_int(value) == "1" + "0" * 3999 + "5"


def test_to_text_of_large_sequence_values():
    rendered = to_text([1, 10 ** 4500])
    assert rendered.startswith("[1, 1000")
    assert len(rendered) == len("[1, ]") + 4501


def test_plain_text():
    assert PlainTextFormatter().render([1, 2]) == "[1, 2]"


def test_html_wraps_and_escapes():
    rendered = HtmlFormatter().render("<b>5</b>")
    assert rendered.startswith("<html><head><title>")
    assert "<div>&lt;b&gt;5&lt;/b&gt;</div>" in rendered
    assert rendered.endswith("</body></html>")


def test_xml_document():
    rendered = XmlFormatter().render([1, 1, 2])
    assert rendered.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    root = ET.fromstring(rendered.encode())
    assert root.tag == "string"
    assert root.text == "[1, 1, 2]"


def test_response_carries_media_type():
    response = HtmlFormatter().response(8, status_code=200)
    assert response.status_code == 200
    assert response.media_type == "text/html"
    assert b"<div>8</div>" in response.body
