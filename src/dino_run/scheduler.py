"""
scheduler.py: Per-frame repeating tasks driven by the host's render loop.
"""

from typing import Callable, List


class TickTask:
    """Handle for a callback that runs once per frame until cancelled."""

    def __init__(self, callback: Callable[[], None]):
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FrameScheduler:
    """
    The host calls run_frame() at its animation cadence. Nothing runs between
    frames, so a task cancelled inside a callback never fires again.
    """

    def __init__(self):
        self.tasks: List[TickTask] = []
        self.frame_count = 0

    def schedule(self, callback: Callable[[], None]) -> TickTask:
        task = TickTask(callback)
        self.tasks.append(task)
        return task

    @property
    def idle(self) -> bool:
        return all(t.cancelled for t in self.tasks)

    def run_frame(self) -> int:
        """Runs every live task once. Returns how many ran."""
        self.frame_count += 1
        ran = 0
        for task in list(self.tasks):
            if task.cancelled:
                continue
            task.callback()
            ran += 1
        self.tasks = [t for t in self.tasks if not t.cancelled]
        return ran
