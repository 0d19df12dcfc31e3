from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Tuple


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    NONE = "none"


@dataclass(frozen=True)
class Task:
    id: int
    title: str
    completed: bool = False


@dataclass(frozen=True)
class Notification:
    text: str = ""
    kind: NotificationKind = NotificationKind.NONE

    @property
    def visible(self) -> bool:
        return bool(self.text) and self.kind is not NotificationKind.NONE


@dataclass(frozen=True)
class ViewState:
    """Everything the to-do page shows: the task list, the draft and the banner."""
    tasks: Tuple[Task, ...] = ()
    draft: str = ""
    notification: Notification = field(default_factory=Notification)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["tasks"] = list(data["tasks"])
        data["notification"]["kind"] = self.notification.kind.value
        return data
