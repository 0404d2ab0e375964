from __future__ import annotations

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from roster.core import csrf
from roster.services.form_controller import DELETE_PROMPT, Delete, FormController, Reset, Submit
from roster.services.notifications import NotificationCenter
from roster.services.student_table import parse_row_action, render_table_body

router = APIRouter(tags=["students"])


def _app_state(request: Request, name: str):
    value = getattr(getattr(request.app, "state", None), name, None)
    if value is None:
        raise RuntimeError(f"{name} is not configured")
    return value


def _get_controller(request: Request) -> FormController:
    return _app_state(request, "controller")


def _get_notices(request: Request) -> NotificationCenter:
    return _app_state(request, "notices")


def _get_templates(request: Request) -> Jinja2Templates:
    return _app_state(request, "templates")


def _back_to_page() -> RedirectResponse:
    return RedirectResponse("/", status_code=303)


def _render(request: Request, template: str, context: dict) -> HTMLResponse:
    token = csrf.page_token(request)
    settings = _app_state(request, "settings")
    response = _get_templates(request).TemplateResponse(request, template, {**context, "csrf_token": token})
    csrf.attach_token(response, token, secure=settings.app_env == "prod")
    return response


@router.get("/", response_class=HTMLResponse)
def roster_page(request: Request):
    controller = _get_controller(request)
    with _app_state(request, "lock"):
        context = {
            "form": controller.form,
            "mode": controller.mode.value,
            "submit_label": controller.submit_label,
            "table_body": render_table_body(controller.store.students),
            "notices": _get_notices(request).pending(),
        }
    return _render(request, "index.html", context)


@router.get("/students")
def list_students(request: Request):
    controller = _get_controller(request)
    with _app_state(request, "lock"):
        return {
            "students": [s.to_dict() for s in controller.store.students],
            "mode": controller.mode.value,
            "edit_index": controller.edit_index,
        }


@router.post("/students", dependencies=[Depends(csrf.require_csrf)])
def submit_student(
    request: Request,
    name: str = Form(""),
    identifier: str = Form(""),
    email: str = Form(""),
    contact: str = Form(""),
):
    controller = _get_controller(request)
    with _app_state(request, "lock"):
        controller.dispatch(Submit(name, identifier, email, contact))
    return _back_to_page()


@router.post("/students/actions", dependencies=[Depends(csrf.require_csrf)])
def row_action(request: Request, action: str = Form(""), confirm: str | None = Form(None)):
    command = parse_row_action(action)
    if command is None:
        return _back_to_page()
    controller = _get_controller(request)
    with _app_state(request, "lock"):
        if isinstance(command, Delete) and confirm is None:
            student = controller.store.get(command.index)
            if student is None:
                return _back_to_page()
            return _render(
                request,
                "confirm_delete.html",
                {"prompt": DELETE_PROMPT, "student": student, "action": action},
            )
        answer = (confirm or "").strip().lower() == "yes"
        controller.dispatch(command, confirm=lambda _prompt: answer)
    return _back_to_page()


@router.post("/students/reset", dependencies=[Depends(csrf.require_csrf)])
def reset_form(request: Request):
    controller = _get_controller(request)
    with _app_state(request, "lock"):
        controller.dispatch(Reset())
    return _back_to_page()
