"""
Content negotiation for plain‑text, HTML and XML responses.

The rabbit counter service answers in whichever of three formats the
caller asks for through the ``Accept`` header.  Each format is a
``ResponseFormatter`` with a media type and a ``render`` method;
``negotiate`` picks one from a closed, ordered set and falls back to
XML when nothing matches (or no header was sent at all).
"""

import html
import logging
from typing import Any, Iterable, List, Optional, Tuple
from xml.etree import ElementTree as ET

from fastapi import Response

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


# Decimal digits per chunk when an int is too long for a single str() call.
INT_CHUNK_DIGITS = 4000
_INT_CHUNK = 10 ** INT_CHUNK_DIGITS


def format_int(value: int) -> str:
    """Render an int in decimal regardless of the interpreter's digit limit.

    Python 3.11+ refuses ``str()`` on ints of more than 4300 digits; such
    values are split into fixed-size chunks and rendered piecewise.
    """
    if value < 0:
        return "-" + format_int(-value)
    if value < _INT_CHUNK:
        return str(value)
    high, low = divmod(value, _INT_CHUNK)
    return format_int(high) + str(low).zfill(INT_CHUNK_DIGITS)


def _item_text(item: Any) -> str:
    if isinstance(item, int) and not isinstance(item, bool):
        return format_int(item)
    return str(item)


def to_text(data: Any) -> str:
    """Convert a payload to its textual form.

    Sequences render as ``[a, b, c]``; everything else through ``str``.
    """
    if isinstance(data, (list, tuple)):
        return "[" + ", ".join(_item_text(item) for item in data) + "]"
    return _item_text(data)


def parse_accept(accept: Optional[str]) -> List[str]:
    """Return the media ranges named in an ``Accept`` header.

    Parameters such as ``q`` are dropped; order is preserved.
    """
    if not accept:
        return []
    ranges = []
    for part in accept.split(","):
        media_range = part.split(";", 1)[0].strip().lower()
        if media_range:
            ranges.append(media_range)
    return ranges


class ResponseFormatter:
    """Base class for the response formats offered by the service."""

    media_type: str = "application/octet-stream"

    def accepts(self, media_ranges: Iterable[str]) -> bool:
        return self.media_type in media_ranges

    def render(self, data: Any) -> str:
        raise NotImplementedError

    def response(self, data: Any, status_code: int = 200) -> Response:
        return Response(
            content=self.render(data),
            status_code=status_code,
            media_type=self.media_type,
        )


class PlainTextFormatter(ResponseFormatter):
    media_type = "text/plain"

    def render(self, data: Any) -> str:
        return to_text(data)


class HtmlFormatter(ResponseFormatter):
    media_type = "text/html"
    title = "send_html response"

    def render(self, data: Any) -> str:
        return (
            f"<html><head><title>{self.title}</title></head>"
            f"<body><div>{html.escape(to_text(data))}</div></body></html>"
        )


class XmlFormatter(ResponseFormatter):
    """Wrap the textual payload in a ``<string>`` element.

    XML is also the fallback format, so it claims any ``xml`` media
    type (``application/xml``, ``text/xml``) as well as wildcards.
    """

    media_type = "application/xml"

    def accepts(self, media_ranges: Iterable[str]) -> bool:
        return any(r.endswith("/xml") or r in ("*/*", "application/*") for r in media_ranges)

    def render(self, data: Any) -> str:
        element = ET.Element("string")
        element.text = to_text(data)
        return XML_DECLARATION + "\n" + ET.tostring(element, encoding="unicode")


# Checked in order; the first formatter that accepts the request wins.
# Plain text is preferred over HTML when a client lists both.
FORMATTERS: Tuple[ResponseFormatter, ...] = (PlainTextFormatter(), HtmlFormatter())
DEFAULT_FORMATTER: ResponseFormatter = XmlFormatter()


def negotiate(accept: Optional[str]) -> ResponseFormatter:
    """Select the formatter for a request's ``Accept`` header."""
    media_ranges = parse_accept(accept)
    for formatter in FORMATTERS:
        if formatter.accepts(media_ranges):
            return formatter
    if media_ranges and not DEFAULT_FORMATTER.accepts(media_ranges):
        logger.debug("No formatter matches %r; answering with XML", accept)
    return DEFAULT_FORMATTER
