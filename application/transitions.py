"""Pure state transitions for the to-do view.

Each function takes a ViewState and returns a new one; nothing here touches
timers, ids or the web layer.
"""
from dataclasses import replace

from domain.entities import Notification, NotificationKind, Task, ViewState

EMPTY_TITLE_MESSAGE = "Please enter a task title."
TASK_ADDED_MESSAGE = "Task successfully added!"


def set_draft(state: ViewState, text: str) -> ViewState:
    return replace(state, draft=text)


def show_notification(state: ViewState, text: str, kind: NotificationKind) -> ViewState:
    return replace(state, notification=Notification(text=text, kind=kind))


def clear_notification(state: ViewState) -> ViewState:
    return replace(state, notification=Notification())


def add_task(state: ViewState, new_id: int) -> ViewState:
    """Append the trimmed draft as a new task, or flag an empty draft."""
    title = state.draft.strip()
    if not title:
        return show_notification(state, EMPTY_TITLE_MESSAGE, NotificationKind.ERROR)

    task = Task(id=new_id, title=title, completed=False)
    state = replace(state, tasks=state.tasks + (task,), draft="")
    return show_notification(state, TASK_ADDED_MESSAGE, NotificationKind.SUCCESS)


def toggle_task(state: ViewState, task_id: int) -> ViewState:
    # unknown ids leave the list as is
    if not any(task.id == task_id for task in state.tasks):
        return state
    return replace(state, tasks=tuple(
        replace(task, completed=not task.completed) if task.id == task_id else task
        for task in state.tasks
    ))
