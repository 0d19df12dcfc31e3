# interfaces/api.py
from fastapi import APIRouter, HTTPException, Depends, status
from schemas.task import TaskCreate, DraftUpdate, TaskResponse, NotificationResponse, ViewStateResponse
from application.use_cases import TaskListView
from application.transitions import EMPTY_TITLE_MESSAGE
from domain.entities import Task
from typing import List

import config

router = APIRouter(prefix="/api")
view = TaskListView(notification_ttl=config.NOTIFICATION_TTL)


def get_view() -> TaskListView:
    return view


def to_response(task: Task) -> TaskResponse:
    return TaskResponse(id=task.id, title=task.title, completed=task.completed)


@router.get("/state", response_model=ViewStateResponse)
async def get_state(view: TaskListView = Depends(get_view)):
    return view.state.to_dict()


@router.get("/tasks", response_model=List[TaskResponse])
async def get_all_tasks(view: TaskListView = Depends(get_view)):
    return [to_response(task) for task in view.tasks]


@router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task(task_id: int, view: TaskListView = Depends(get_view)):
    task = view.get_task(task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return to_response(task)


@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(task: TaskCreate, view: TaskListView = Depends(get_view)):
    created_task = view.add_task(task.title)
    if not created_task:
        raise HTTPException(status_code=400, detail=EMPTY_TITLE_MESSAGE)
    return to_response(created_task)


@router.put("/tasks/{task_id}/toggle-complete", response_model=TaskResponse)
async def toggle_task_completion(task_id: int, view: TaskListView = Depends(get_view)):
    task = view.toggle_task(task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return to_response(task)


@router.put("/draft", response_model=ViewStateResponse)
async def update_draft(draft: DraftUpdate, view: TaskListView = Depends(get_view)):
    view.set_draft(draft.text)
    return view.state.to_dict()


@router.get("/notification", response_model=NotificationResponse)
async def get_notification(view: TaskListView = Depends(get_view)):
    notification = view.notification
    return NotificationResponse(text=notification.text, kind=notification.kind)
