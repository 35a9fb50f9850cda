"""
Endpoint modules.

``parolees`` implements the XML CRUD resource and ``rabbit`` the
content‑negotiated Fibonacci resource.
"""
