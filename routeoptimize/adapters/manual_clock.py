from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Callable, Dict, List


@dataclass(order=True)
class _Timer:
    due_ms: int
    seq: int
    callback: Callable[[], None] = field(compare=False)


class ManualClock:
    """In-memory stand-in for Tk ``after``/``after_cancel``.

    Time only moves when :meth:`advance` is called; due callbacks run in
    (due time, scheduling order) order.
    """

    def __init__(self) -> None:
        self.now_ms = 0
        self._seq = itertools.count(1)
        self._timers: Dict[str, _Timer] = {}
        self.cancelled: List[str] = []

    def after(self, delay_ms: int, callback: Callable[[], None]) -> str:
        seq = next(self._seq)
        token = f"after#{seq}"
        self._timers[token] = _Timer(self.now_ms + max(0, int(delay_ms)), seq, callback)
        return token

    def after_cancel(self, token: str) -> None:
        if self._timers.pop(token, None) is not None:
            self.cancelled.append(token)

    def pending(self) -> int:
        return len(self._timers)

    def advance(self, delta_ms: int) -> int:
        """Move time forward and run every callback that falls due.

        Callbacks scheduled while advancing run too if they fall inside the
        window. Returns the number of callbacks executed.
        """
        target = self.now_ms + max(0, int(delta_ms))
        ran = 0
        while True:
            due = [(timer, token) for token, timer in self._timers.items() if timer.due_ms <= target]
            if not due:
                break
            timer, token = min(due)
            del self._timers[token]
            self.now_ms = timer.due_ms
            timer.callback()
            ran += 1
        self.now_ms = target
        return ran
