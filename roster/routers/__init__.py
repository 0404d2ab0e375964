"""
FastAPI routers for the roster page.

Each module exposes an APIRouter included by roster.app.create_app.
"""
