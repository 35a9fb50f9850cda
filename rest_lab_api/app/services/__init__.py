"""
Service layer.

Each service is an in‑memory store owned by the application that
created it.  Handlers reach the store through ``app.state`` rather
than module globals, so every application (and every test) starts
from an empty store.
"""
