import os
import threading

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from roster.core.config import Settings, get_settings
from roster.core.headers import SecurityHeadersMiddleware
from roster.repositories import build_storage
from roster.repositories.student_repository import StudentRepository
from roster.routers import layout as layout_router
from roster.routers import students as students_router
from roster.services.form_controller import FormController
from roster.services.notifications import NotificationCenter
from roster.services.student_store import StudentStore

BASE = os.path.dirname(__file__)
WEB = os.path.join(BASE, "..", "web")
TEMPLATES = os.path.join(BASE, "..", "templates")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with `uvicorn --factory roster.app:create_app`."""
    settings = settings or get_settings()
    app = FastAPI(title="Student Roster")
    app.mount("/static", StaticFiles(directory=WEB), name="static")

    # The roster, its edit cursor and the notice queue belong to the app and
    # are only touched while holding app.state.lock.
    store = StudentStore(StudentRepository(build_storage(settings), settings.storage_key))
    notices = NotificationCenter(settings.notice_duration_ms, settings.notice_fade_ms)
    app.state.settings = settings
    app.state.templates = Jinja2Templates(directory=TEMPLATES)
    app.state.store = store
    app.state.notices = notices
    app.state.controller = FormController(store, notices)
    app.state.lock = threading.Lock()

    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    app.include_router(students_router.router)
    app.include_router(layout_router.router)
    return app
