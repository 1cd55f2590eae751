import threading
import time
from typing import Optional


class CancelSignal:
    """Cooperative cancellation token with an optional deadline.

    The signal fires either when ``cancel()`` is called or once
    ``time.monotonic()`` passes ``deadline``. Work polls ``cancelled``
    between units of work; waiters can block on ``wait()``.
    """

    def __init__(self, deadline: Optional[float] = None):
        self.deadline = deadline
        self._event = threading.Event()

    @classmethod
    def after(cls, seconds: float) -> "CancelSignal":
        """Signal that fires 'seconds' from now."""
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self):
        self._event.set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    @property
    def cancelled(self) -> bool:
        return self._event.is_set() or self.expired

    @property
    def reason(self) -> Optional[str]:
        if self._event.is_set():
            return "cancelled"
        if self.expired:
            return "deadline exceeded"
        return None

    def remaining(self) -> Optional[float]:
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the signal fires or 'timeout' elapses.

        Returns True if the signal fired.
        """
        limit = self.remaining()
        if limit is not None and (timeout is None or limit < timeout):
            timeout = limit
        self._event.wait(timeout)
        return self.cancelled

    def __repr__(self):
        return f"CancelSignal(deadline={self.deadline!r}, reason={self.reason!r})"
