"""Scheduler helper that owns deferred UI callbacks for the shell.

Controllers pass work through this class instead of calling Tk ``after``
directly, so every pending callback has a cancellable handle and can be
dropped when a newer action supersedes it or the session shuts down.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from ..domain.ports import CancelFn, ScheduleFn


@dataclass(eq=False)
class DeferredHandle:
    """Timer token for one scheduled callback.

    Attributes:
        channel: Channel key (``login``, ``arrival`` or ``None`` when detached).
        delay_ms: Delay the callback was scheduled with.
        token: Token returned by the UI scheduler implementation.
    """

    channel: Optional[str]
    delay_ms: int
    token: Any = None
    fired: bool = False
    cancelled: bool = False
    _cancel: Optional[Callable[["DeferredHandle"], None]] = field(default=None, repr=False)

    @property
    def active(self) -> bool:
        return not (self.fired or self.cancelled)

    def cancel(self) -> None:
        """Cancel the callback if it has not run yet."""
        if not self.active or self._cancel is None:
            return
        self._cancel(self)


class DeferredScheduler:
    """Manage deferred callbacks using a UI scheduler (for example Tk)."""

    def __init__(self, schedule: ScheduleFn, cancel: CancelFn) -> None:
        """Store schedule/cancel functions and initialize handle registry.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            cancel: Function compatible with ``after_cancel(token)``.
        """
        self._log = logging.getLogger(__name__)
        self._schedule = schedule
        self._cancel = cancel
        self._channels: Dict[str, DeferredHandle] = {}
        self._pending: Dict[int, DeferredHandle] = {}

    def schedule(self, channel: str, delay_ms: int, callback: Callable[[], None]) -> DeferredHandle:
        """Schedule a callback on a channel, replacing any pending one there.

        Args:
            channel: Channel key; at most one callback per channel is pending.
            delay_ms: Delay in milliseconds before callback execution.
            callback: Callback to execute.
        """
        self.cancel(channel)
        handle = self._submit(channel, delay_ms, callback)
        self._channels[channel] = handle
        return handle

    def schedule_detached(
        self, delay_ms: int, callback: Callable[[], None], *, channel: Optional[str] = None
    ) -> DeferredHandle:
        """Schedule a fire-and-forget callback that nothing replaces.

        ``channel`` only labels the handle; ``cancel(channel)`` does not
        reach detached callbacks, use the returned handle instead.
        """
        return self._submit(channel, delay_ms, callback)

    def cancel(self, channel: str) -> None:
        """Cancel the pending callback of a channel.

        Args:
            channel: Channel key to cancel.
        """
        handle = self._channels.pop(channel, None)
        if handle is None:
            return
        handle.cancel()

    def cancel_all(self) -> None:
        """Cancel every pending callback, channelled or detached."""
        for handle in list(self._pending.values()):
            self._cancel_handle(handle)
        self._channels.clear()

    def handle_for(self, channel: str) -> Optional[DeferredHandle]:
        """Return the current handle for a channel, if still pending."""
        handle = self._channels.get(channel)
        if handle is not None and not handle.active:
            return None
        return handle

    def pending_count(self) -> int:
        return len(self._pending)

    # ------------------------------------------------------------------
    def _submit(
        self, channel: Optional[str], delay_ms: int, callback: Callable[[], None]
    ) -> DeferredHandle:
        delay = max(0, int(delay_ms))
        handle = DeferredHandle(channel=channel, delay_ms=delay, _cancel=self._cancel_handle)

        def fire() -> None:
            if not handle.active:
                return
            handle.fired = True
            self._forget(handle)
            callback()

        handle.token = self._schedule(delay, fire)
        self._pending[id(handle)] = handle
        self._log.debug("Scheduled %s callback in %d ms", channel or "detached", delay)
        return handle

    def _cancel_handle(self, handle: DeferredHandle) -> None:
        if not handle.active:
            return
        handle.cancelled = True
        self._forget(handle)
        try:
            self._cancel(handle.token)
        except Exception:
            # The UI timer may already be gone (window destroyed); the handle
            # is marked cancelled so the callback will not run either way.
            self._log.debug("Ignoring failed timer cancel for %s", handle.channel, exc_info=True)

    def _forget(self, handle: DeferredHandle) -> None:
        self._pending.pop(id(handle), None)
        if handle.channel is not None and self._channels.get(handle.channel) is handle:
            del self._channels[handle.channel]


__all__ = ["DeferredHandle", "DeferredScheduler"]
