"""
Cancellation context bound to each API call.

A RequestContext carries an explicit cancel signal and an optional deadline.
The client checks it before sending, bounds the transport timeout by the
remaining time, and closes the in-flight response when it is cancelled.
"""

import logging
import threading
import time
from collections.abc import Callable

from ..exceptions import ContextCancelledError, ContextError, DeadlineExceededError


logger = logging.getLogger(__name__)


class RequestContext:
    """Cancellation signal with an optional deadline.

    Contexts can be nested: cancelling a parent cancels every child, and a
    child's deadline never extends past its parent's.

    Example:
        with RequestContext.with_timeout(5.0) as ctx:
            tools, response = client.tools.list(ctx)
    """

    def __init__(
        self,
        deadline: float | None = None,
        parent: "RequestContext | None" = None,
    ):
        """
        Args:
            deadline: Absolute time.monotonic() value after which the context
                is done, or None for no deadline
            parent: Context whose cancellation and deadline this one inherits
        """
        if parent is not None and parent.deadline is not None:
            if deadline is None or parent.deadline < deadline:
                deadline = parent.deadline

        self.deadline = deadline
        self._parent = parent
        self._cancelled = threading.Event()
        self._lock = threading.Lock()
        self._callbacks: dict[int, Callable[[], None]] = {}
        self._next_id = 0
        self._unregister_parent = None

        if parent is not None:
            self._unregister_parent = parent.on_cancel(self.cancel)

    @classmethod
    def background(cls) -> "RequestContext":
        """A context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(
        cls,
        seconds: float,
        parent: "RequestContext | None" = None,
    ) -> "RequestContext":
        """A context whose deadline is the given number of seconds from now."""
        return cls(deadline=time.monotonic() + seconds, parent=parent)

    def cancel(self) -> None:
        """Cancel the context and run the registered callbacks once."""
        with self._lock:
            if self._cancelled.is_set():
                return
            self._cancelled.set()
            callbacks = list(self._callbacks.values())
            self._callbacks.clear()

        for callback in callbacks:
            try:
                callback()
            except Exception as e:
                logger.warning(f"Cancel callback failed: {e}")

        if self._unregister_parent is not None:
            self._unregister_parent()
            self._unregister_parent = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def remaining(self) -> float | None:
        """Seconds until the deadline, or None without one."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def done(self) -> bool:
        return self.error() is not None

    def error(self) -> ContextError | None:
        """The reason the context is done, or None if it is still live.

        Cancellation takes precedence over an expired deadline.
        """
        if self._cancelled.is_set():
            return ContextCancelledError()
        if self.deadline is not None and time.monotonic() >= self.deadline:
            return DeadlineExceededError()
        return None

    def raise_if_done(self) -> None:
        """Raise ContextCancelledError or DeadlineExceededError if done."""
        error = self.error()
        if error is not None:
            raise error

    def on_cancel(
        self,
        callback: Callable[[], None],
    ) -> Callable[[], None]:
        """Register a callback to run when the context is cancelled.

        If the context is already cancelled the callback runs immediately.

        Returns:
            Function that unregisters the callback
        """
        with self._lock:
            if not self._cancelled.is_set():
                callback_id = self._next_id
                self._next_id += 1
                self._callbacks[callback_id] = callback

                def unregister() -> None:
                    with self._lock:
                        self._callbacks.pop(callback_id, None)

                return unregister

        callback()
        return lambda: None

    def __enter__(self) -> "RequestContext":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.cancel()
