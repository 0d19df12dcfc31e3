import logging
from typing import Callable, List, Optional, Protocol

from application import transitions
from domain.entities import Notification, Task, ViewState
from infrastructure.timers import NotificationTimer

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    def schedule(self, delay: float, callback: Callable[[], None]) -> None: ...

    def cancel(self) -> None: ...


class TaskListView:
    def __init__(self, notification_ttl: float = 3.0, scheduler: Optional[Scheduler] = None):
        self.notification_ttl = notification_ttl
        self.scheduler = scheduler or NotificationTimer()
        self._state = ViewState()
        self._next_id = 1

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def tasks(self) -> List[Task]:
        return list(self._state.tasks)

    @property
    def draft(self) -> str:
        return self._state.draft

    @property
    def notification(self) -> Notification:
        return self._state.notification

    @property
    def completed_count(self) -> int:
        return sum(1 for task in self._state.tasks if task.completed)

    @property
    def remaining_count(self) -> int:
        return len(self._state.tasks) - self.completed_count

    def get_task(self, task_id: int) -> Optional[Task]:
        for task in self._state.tasks:
            if task.id == task_id:
                return task
        return None

    def set_draft(self, text: str) -> None:
        self._state = transitions.set_draft(self._state, text)

    def add_task(self, draft: Optional[str] = None) -> Optional[Task]:
        """Add the current draft (or the given text) as a task.

        Returns the new task, or None when the title was blank; in both cases a
        notification is shown and its auto-clear is rescheduled.
        """
        if draft is not None:
            self.set_draft(draft)

        before = len(self._state.tasks)
        self._state = transitions.add_task(self._state, self._next_id)
        added = len(self._state.tasks) > before
        # the id is only taken once a task actually exists
        if added:
            self._next_id += 1
        self._schedule_clear()

        if not added:
            logger.warning("Rejected task with blank title")
            return None
        task = self._state.tasks[-1]
        logger.info(f"Task {task.id} added: {task.title!r}")
        return task

    def toggle_task(self, task_id: int) -> Optional[Task]:
        self._state = transitions.toggle_task(self._state, task_id)
        task = self.get_task(task_id)
        if task is None:
            logger.warning(f"Toggle ignored, task {task_id} not found")
            return None
        logger.info(f"Task {task_id} toggled to completed = {task.completed}")
        return task

    def clear_notification(self) -> None:
        self._state = transitions.clear_notification(self._state)
        logger.debug("Notification cleared")

    def _schedule_clear(self) -> None:
        self.scheduler.schedule(self.notification_ttl, self.clear_notification)
