"""
HTTP layer for both services.

``endpoints`` holds one module per resource; ``router`` groups them per
service and ``deps`` hands handlers the store owned by the running
application.
"""
