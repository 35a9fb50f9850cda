"""
Application package initializer.

The package is split into ``core`` (settings, logging, content
negotiation), ``schemas`` (records and wire formats), ``services``
(the in‑memory stores) and ``api`` (HTTP handlers).  ``main`` builds
one FastAPI application per service so each can run as its own
process.
"""

from .main import parolee_app, rabbit_app  # noqa: F401
