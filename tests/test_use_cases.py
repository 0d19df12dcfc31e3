# tests/test_use_cases.py

import asyncio

import pytest

from application.use_cases import TaskListView
from domain.entities import NotificationKind

from .fakes import FailingScheduler, FakeScheduler


def test_buy_milk_scenario(view: TaskListView) -> None:
    task = view.add_task("Buy milk")
    assert task is not None
    assert [(t.title, t.completed) for t in view.tasks] == [("Buy milk", False)]
    assert view.notification.kind is NotificationKind.SUCCESS

    assert view.add_task("   ") is None
    assert len(view.tasks) == 1
    assert view.notification.kind is NotificationKind.ERROR
    assert view.notification.text == "Please enter a task title."

    assert view.toggle_task(task.id).completed is True
    assert view.toggle_task(task.id).completed is False


def test_ids_are_unique_and_increasing(view: TaskListView) -> None:
    ids = [view.add_task(f"task {n}").id for n in range(5)]

    assert ids == sorted(set(ids))


def test_rejected_draft_does_not_consume_id(view: TaskListView) -> None:
    first = view.add_task("first")
    view.add_task("")
    second = view.add_task("second")

    assert second.id == first.id + 1


def test_add_uses_current_draft(view: TaskListView) -> None:
    view.set_draft("from the input")

    task = view.add_task()

    assert task.title == "from the input"
    assert view.draft == ""


def test_blank_add_keeps_draft(view: TaskListView) -> None:
    view.add_task("   ")

    assert view.draft == "   "


def test_toggle_unknown_id(view: TaskListView) -> None:
    view.add_task("only")
    before = view.state

    assert view.toggle_task(12345) is None
    assert view.state == before


def test_counts(view: TaskListView) -> None:
    for title in ("a", "b", "c"):
        view.add_task(title)
    view.toggle_task(view.tasks[1].id)

    assert view.completed_count == 1
    assert view.remaining_count == 2


def test_notification_clears_after_ttl(view: TaskListView, scheduler: FakeScheduler) -> None:
    view.add_task("x")

    scheduler.advance(2.9)
    assert view.notification.visible

    scheduler.advance(0.1)
    assert view.notification.kind is NotificationKind.NONE
    assert view.notification.text == ""


def test_newer_notification_gets_full_ttl(view: TaskListView, scheduler: FakeScheduler) -> None:
    view.add_task("x")
    scheduler.advance(2.0)
    view.add_task("")

    # the first notification's deadline has passed, the error stays up
    scheduler.advance(1.5)
    assert view.notification.kind is NotificationKind.ERROR

    scheduler.advance(1.5)
    assert not view.notification.visible
    assert scheduler.history == [3.0, 3.0]


def test_toggle_does_not_touch_notification(view: TaskListView, scheduler: FakeScheduler) -> None:
    task = view.add_task("x")
    scheduler.advance(3.0)

    view.toggle_task(task.id)

    assert not view.notification.visible
    assert not scheduler.pending


def test_id_is_spent_even_when_clear_cannot_be_scheduled() -> None:
    view = TaskListView(scheduler=FailingScheduler())
    with pytest.raises(RuntimeError):
        view.add_task("first")

    view.scheduler = FakeScheduler()
    second = view.add_task("second")

    assert [t.id for t in view.tasks] == [1, 2]
    assert second.id == 2


@pytest.mark.asyncio
async def test_default_timer_clears_notification() -> None:
    view = TaskListView(notification_ttl=0.01)

    view.add_task("x")
    assert view.notification.visible

    await asyncio.sleep(0.05)
    assert view.notification.kind is NotificationKind.NONE
    assert view.notification.text == ""
