"""
Core utilities shared across the roster app.

This package hosts configuration helpers and cross-cutting request guards
(CSRF). Services and routers depend on these primitives instead of reading the
environment or cookies themselves.
"""
