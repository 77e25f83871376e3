"""Deterministic round-robin scheduler weighted by task priority."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

__all__ = ["Task", "NaiveScheduler"]


@dataclass(frozen=True)
class Task:
    """A callable run ``priority`` times per scheduler cycle."""

    code: Callable[[], object]
    priority: int


class NaiveScheduler:
    """Runs tasks from a table of slots filled at construction.

    Each task occupies ``priority`` slots, roughly evenly spaced; a slot of 0
    does nothing.
    """

    def __init__(self, num_slots: int, tasks: Sequence[Task]) -> None:
        if not 1 <= num_slots <= 255:
            raise ValueError(f"slot count must be from 1 to 255, got {num_slots}")
        if any(task.priority < 0 for task in tasks):
            raise ValueError("task priorities must not be negative")
        if sum(task.priority for task in tasks) > num_slots:
            raise ValueError("total task priority exceeds the number of slots")
        self._tasks = tuple(tasks)
        self._slots = [0] * num_slots
        self._current_slot = 0

        slot = 0
        for number, task in enumerate(self._tasks, start=1):
            for _ in range(task.priority):
                while True:
                    if slot >= num_slots:
                        slot = 0
                    if self._slots[slot] == 0:
                        break
                    slot += 1
                self._slots[slot] = number
                slot = (slot + num_slots // task.priority) & 0xFF

    @property
    def slots(self) -> tuple[int, ...]:
        """Slot table: 1-based task numbers, 0 for an empty slot."""
        return tuple(self._slots)

    def step(self) -> None:
        """Advance to the next slot and run its task, if any."""
        self._current_slot += 1
        if self._current_slot >= len(self._slots):
            self._current_slot = 0
        number = self._slots[self._current_slot]
        if number:
            self._tasks[number - 1].code()

    def run(self, steps: int | None = None) -> None:
        """Run ``steps`` slots, or forever when ``steps`` is ``None``."""
        if steps is None:
            while True:
                self.step()
        for _ in range(steps):
            self.step()