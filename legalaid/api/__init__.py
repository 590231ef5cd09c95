"""
HTTP API layer.

Routers, dependency wiring and exception handlers for the legal aid service.
"""
