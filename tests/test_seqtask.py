import io
import queue

import pytest

from booty.seqtask import (
    ProgressUpdate,
    SequentialTask,
    SequentialTaskRunner,
    TaskState,
    TaskStatus,
    execute_task,
)


def _task(task_id, message, result="ok"):
    return SequentialTask(task_id, message, lambda: result)


def _failing(task_id, message, error):
    def run():
        raise error

    return SequentialTask(task_id, message, run)


def _drain(updates, thread):
    thread.join(timeout=5)
    items = []
    while not updates.empty():
        items.append(updates.get_nowait())
    return items


def test_initial_statuses_are_queued():
    runner = SequentialTaskRunner([_task("a", "Alpha"), _task("b", "Beta")], "start", "end")
    assert runner.statuses["a"] == TaskStatus(TaskState.PENDING, "Alpha(queued)")
    assert runner.statuses["b"].message == "Beta(queued)"
    assert runner.finished is False


def test_next_task_walks_in_order():
    tasks = [_task("a", "Alpha"), _task("b", "Beta")]
    runner = SequentialTaskRunner(tasks, "start", "end")
    assert runner.next_task() is tasks[0]
    assert runner.next_task() is tasks[1]
    assert runner.next_task() is None


def test_execute_task_reports_success():
    updates = queue.Queue()
    thread = execute_task(_task("a", "Alpha", "done"), updates, None)
    items = _drain(updates, thread)
    assert [item.status.state for item in items] == [
        TaskState.PENDING,
        TaskState.IN_PROGRESS,
        TaskState.SUCCESS,
    ]
    assert items[0].status.message == "Alpha (pending)"
    assert items[1].status.message == "Alpha"
    assert items[2].status.message == "done"
    assert all(item.task_id == "a" for item in items)


def test_execute_task_reports_failure():
    updates = queue.Queue()
    thread = execute_task(_failing("a", "Alpha", ValueError("boom")), updates, None)
    items = _drain(updates, thread)
    assert items[-1] == ProgressUpdate("a", TaskStatus(TaskState.FAILED, "Alpha - boom"))


def test_execute_task_pauses_within_bounds():
    pauses = []
    updates = queue.Queue()
    thread = execute_task(_task("a", "Alpha"), updates, pauses.append)
    _drain(updates, thread)
    assert len(pauses) == 3
    assert all(0.1 <= pause < 0.6 for pause in pauses)


def test_handle_progress_moves_to_next_task():
    tasks = [_task("a", "Alpha"), _task("b", "Beta")]
    runner = SequentialTaskRunner(tasks, "start", "end")
    runner.next_task()
    assert runner.handle_progress(
        ProgressUpdate("a", TaskStatus(TaskState.IN_PROGRESS, "Alpha"))
    ) is None
    assert runner.finished is False
    assert runner.handle_progress(
        ProgressUpdate("a", TaskStatus(TaskState.SUCCESS, "ok"))
    ) is tasks[1]
    assert runner.handle_progress(
        ProgressUpdate("b", TaskStatus(TaskState.FAILED, "bad"))
    ) is None
    assert runner.finished is True


def test_view_symbols():
    tasks = [_task("a", "Alpha"), _task("b", "Beta"), _task("c", "Gamma"), _task("d", "Delta")]
    runner = SequentialTaskRunner(tasks, "start", "end")
    runner.statuses["a"] = TaskStatus(TaskState.SUCCESS, "good")
    runner.statuses["b"] = TaskStatus(TaskState.FAILED, "bad")
    runner.statuses["c"] = TaskStatus(TaskState.IN_PROGRESS, "busy")
    lines = runner.view().splitlines()
    assert lines[0] == "start"
    assert lines[1] == ""
    assert lines[2] == "[✓] good"
    assert lines[3] == "[X] bad"
    assert lines[4] == f"[{runner.spinner_frame}] busy"
    assert lines[5] == "[ ] Delta(queued)"


def test_run_completes_all_tasks():
    runner = SequentialTaskRunner(
        [_task("a", "Alpha", "first"), _failing("b", "Beta", OSError("nope")), _task("c", "Gamma", "third")],
        "start",
        "end",
    )
    runner.delay = None
    out = io.StringIO()
    final = runner.run(out)
    assert runner.finished is True
    assert out.getvalue() == final
    assert final.startswith("end\n\n")
    assert runner.statuses["a"] == TaskStatus(TaskState.SUCCESS, "first")
    assert runner.statuses["b"] == TaskStatus(TaskState.FAILED, "Beta - nope")
    assert runner.statuses["c"].state is TaskState.SUCCESS


def test_run_without_tasks():
    runner = SequentialTaskRunner([], "start", "end")
    out = io.StringIO()
    assert runner.run(out) == "end\n\n"
    assert runner.finished is True


@pytest.mark.parametrize("state", [TaskState.SUCCESS, TaskState.FAILED])
def test_terminal_states_are_done(state):
    assert TaskStatus(state, "x").done is True
    assert TaskStatus(TaskState.IN_PROGRESS, "x").done is False