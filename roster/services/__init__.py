"""
Use cases for the roster app.

Routers call into these services (store, form controller, notices, table
rendering) instead of manipulating storage or request state directly.
"""
