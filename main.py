from fastapi import FastAPI, Depends, Request, Form
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from interfaces.api import router as task_router, get_view
from application.use_cases import TaskListView
from domain.entities import NotificationKind
import logging

import config

# --- Basic Setup ---
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=config.APP_TITLE)
app.include_router(task_router)

templates = Jinja2Templates(directory=config.TEMPLATES_DIR)

# CSS class per notification kind; "none" keeps the banner hidden
NOTIFICATION_STYLES = {
    NotificationKind.SUCCESS: "notice notice-success",
    NotificationKind.ERROR: "notice notice-error",
    NotificationKind.NONE: "hidden",
}

logger.info(f"Starting {config.APP_TITLE} (notification TTL {config.NOTIFICATION_TTL}s)")


@app.get("/", response_class=HTMLResponse)
async def index(request: Request, view: TaskListView = Depends(get_view)):
    """Renders the task list page."""
    notification = view.notification
    return templates.TemplateResponse(request, "index.html", {
        "title": config.APP_TITLE,
        "tasks": view.tasks,
        "draft": view.draft,
        "notification": notification,
        "remaining_count": view.remaining_count,
        "completed_count": view.completed_count,
        "notification_class": NOTIFICATION_STYLES[notification.kind],
        "notification_ttl_ms": int(config.NOTIFICATION_TTL * 1000),
    })


@app.post("/add")
async def add_task(title: str = Form(""), view: TaskListView = Depends(get_view)):
    """Adds the submitted title; blank titles only raise the error banner."""
    view.add_task(title)
    return RedirectResponse(url="/", status_code=303)


@app.post("/tasks/{task_id}/toggle")
async def toggle_task(task_id: int, view: TaskListView = Depends(get_view)):
    """Flips a task's completion state; unknown ids are ignored."""
    view.toggle_task(task_id)
    return RedirectResponse(url="/", status_code=303)
