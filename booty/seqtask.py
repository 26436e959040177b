"""Run a list of tasks one after another while rendering their progress."""

from __future__ import annotations

import enum
import queue
import random
import sys
import threading
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TextIO

_SPINNER_FRAMES = ("⢄", "⢂", "⢁", "⡁", "⡈", "⡐", "⡠")
_TICK_SECONDS = 0.1

Delay = Callable[[float], None]


@dataclass(frozen=True)
class SequentialTask:
    """A named unit of work; ``run`` returns a result message or raises."""

    id: str
    message: str
    run: Callable[[], str]


class TaskState(enum.Enum):
    PENDING = enum.auto()
    IN_PROGRESS = enum.auto()
    SUCCESS = enum.auto()
    FAILED = enum.auto()


@dataclass(frozen=True)
class TaskStatus:
    state: TaskState
    message: str

    @property
    def done(self) -> bool:
        return self.state in (TaskState.SUCCESS, TaskState.FAILED)


@dataclass(frozen=True)
class ProgressUpdate:
    """A status change reported by a running task."""

    task_id: str
    status: TaskStatus


def _pause(delay: Delay | None, low_ms: int, spread_ms: int) -> None:
    if delay is not None:
        delay((low_ms + random.randrange(spread_ms)) / 1000)


def execute_task(
    task: SequentialTask, updates: queue.Queue, delay: Delay | None = time.sleep
) -> threading.Thread:
    """Run ``task`` on a background thread, putting progress updates on ``updates``.

    ``delay`` is called with short random pauses between updates; ``None`` disables them.
    """

    def work() -> None:
        updates.put(
            ProgressUpdate(task.id, TaskStatus(TaskState.PENDING, f"{task.message} (pending)"))
        )
        _pause(delay, 100, 250)
        updates.put(ProgressUpdate(task.id, TaskStatus(TaskState.IN_PROGRESS, task.message)))
        _pause(delay, 100, 500)

        try:
            result = task.run()
        except Exception as err:  # any task failure is reported, not raised
            _pause(delay, 100, 200)
            updates.put(
                ProgressUpdate(
                    task.id, TaskStatus(TaskState.FAILED, f"{task.message} - {err}")
                )
            )
            return

        _pause(delay, 100, 200)
        updates.put(ProgressUpdate(task.id, TaskStatus(TaskState.SUCCESS, result)))

    thread = threading.Thread(target=work, name=f"task-{task.id}", daemon=True)
    thread.start()
    return thread


class SequentialTaskRunner:
    """Tracks and displays the progress of tasks run strictly in order."""

    def __init__(
        self, tasks: Sequence[SequentialTask], initial_title: str, final_title: str
    ) -> None:
        self.tasks = list(tasks)
        self.initial_title = initial_title
        self.final_title = final_title
        self.statuses: dict[str, TaskStatus] = {
            task.id: TaskStatus(TaskState.PENDING, task.message + "(queued)")
            for task in self.tasks
        }
        self.finished = False
        self.delay: Delay | None = time.sleep
        self._position = 0
        self._frame = 0

    @property
    def spinner_frame(self) -> str:
        return _SPINNER_FRAMES[self._frame % len(_SPINNER_FRAMES)]

    def next_task(self) -> SequentialTask | None:
        """Return the next task to run, or ``None`` when none are left."""
        if self._position >= len(self.tasks):
            return None
        task = self.tasks[self._position]
        self._position += 1
        return task

    def handle_progress(self, update: ProgressUpdate) -> SequentialTask | None:
        """Record ``update``; return the task to start next once the current one ends."""
        self.statuses[update.task_id] = update.status
        if not update.status.done:
            return None
        task = self.next_task()
        if task is None:
            self.finished = True
        return task

    def view(self) -> str:
        title = self.final_title if self.finished else self.initial_title
        lines = [f"{title}\n\n"]
        for task in self.tasks:
            status = self.statuses.get(task.id)
            if status is None:
                continue
            match status.state:
                case TaskState.SUCCESS:
                    symbol = "[✓]"
                case TaskState.FAILED:
                    symbol = "[X]"
                case TaskState.IN_PROGRESS:
                    symbol = f"[{self.spinner_frame}]"
                case _:
                    symbol = "[ ]"
            lines.append(f"{symbol} {status.message}\n")
        return "".join(lines)

    def run(self, stream: TextIO | None = None) -> str:
        """Run every task in order, rendering progress to ``stream``; return the final view.

        On a terminal the display is redrawn in place; otherwise only the final view is written.
        """
        out = stream if stream is not None else sys.stdout
        interactive = getattr(out, "isatty", lambda: False)()
        updates: queue.Queue = queue.Queue()
        drawn_lines = 0

        def draw() -> None:
            nonlocal drawn_lines
            if not interactive:
                return
            text = self.view()
            if drawn_lines:
                out.write(f"\x1b[{drawn_lines}A\x1b[J")
            out.write(text)
            out.flush()
            drawn_lines = text.count("\n")

        try:
            task = self.next_task()
            if task is None:
                self.finished = True
            else:
                execute_task(task, updates, self.delay)
            draw()
            while not self.finished:
                try:
                    update = updates.get(timeout=_TICK_SECONDS)
                except queue.Empty:
                    self._frame += 1
                    draw()
                    continue
                following = self.handle_progress(update)
                if following is not None:
                    execute_task(following, updates, self.delay)
                draw()
        except KeyboardInterrupt:
            pass

        final = self.view()
        if not interactive:
            out.write(final)
        out.flush()
        return final