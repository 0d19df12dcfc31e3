from typing import List

from pydantic import BaseModel

from domain.entities import NotificationKind


class TaskCreate(BaseModel):
    title: str


class DraftUpdate(BaseModel):
    text: str


class TaskResponse(BaseModel):
    id: int
    title: str
    completed: bool


class NotificationResponse(BaseModel):
    text: str
    kind: NotificationKind


class ViewStateResponse(BaseModel):
    tasks: List[TaskResponse]
    draft: str
    notification: NotificationResponse
