"""
Top‑level package for the REST lab services.

Two independent services live under ``app``: a CRUD resource for
parolee records and a "rabbit counter" resource that memoizes
Fibonacci values.  A consumer client for both services is provided in
``rest_lab_api.client``.
"""

__all__ = []
