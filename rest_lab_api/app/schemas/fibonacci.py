"""
Parsing of Fibonacci positions received from clients.

Positions arrive as text: a single ``num`` query parameter, or a
``nums`` form field holding a list such as ``[1, 2, 3]`` (the brackets
are optional).  Only plain ASCII integers are accepted; ``1_000`` and
non‑ASCII digits are rejected.  When ``max_position`` is given, larger
positions are rejected too.
"""

import re
from typing import List, Optional

POSITION_RE = re.compile(r"[+-]?\d+", re.ASCII)


def _to_position(text: str, max_position: Optional[int]) -> int:
    if not POSITION_RE.fullmatch(text):
        raise ValueError(f"Invalid position {text!r}")
    n = int(text)
    if max_position is not None and n > max_position:
        raise ValueError(f"Position {n} exceeds the maximum of {max_position}")
    return n


def parse_position(text: Optional[str], max_position: Optional[int] = None) -> int:
    """Parse a single position; raises ``ValueError`` when not an integer."""
    if text is None:
        raise ValueError("No position supplied")
    return _to_position(text.strip(), max_position)


def parse_positions(text: str, max_position: Optional[int] = None) -> List[int]:
    """Parse a list of positions such as ``"[1, 2, 3]"``.

    Raises ``ValueError`` when the list is empty, an element is not an
    integer or an element is above ``max_position``.
    """
    inner = text.strip()
    if inner.startswith("["):
        inner = inner[1:]
    if inner.endswith("]"):
        inner = inner[:-1]
    parts = [part.strip() for part in inner.split(",")]
    if parts == [""]:
        raise ValueError("No positions supplied")
    return [_to_position(part, max_position) for part in parts]
