"""Progress callbacks for in-flight agent calls.

A caller hands a ``StreamCallbacks`` pair to a facade operation. The facade
wraps it in a ``CallbackAdapter`` before passing it down, so the agent sees a
uniform object with both hooks present. Updates stop being delivered once
the call settles; errors are always delivered, once each, in the order the
agent reports them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

UpdateHandler = Callable[[str], None]
ErrorHandler = Callable[[str], None]


@dataclass(frozen=True)
class StreamCallbacks:
    """Caller-supplied observers for a single agent call."""

    on_update: UpdateHandler | None = None
    on_error: ErrorHandler | None = None


class CallbackAdapter:
    """Wraps a caller's callbacks into the shape agents stream into."""

    def __init__(self, callbacks: StreamCallbacks) -> None:
        self._callbacks = callbacks
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def on_update(self, message: str) -> None:
        if self._closed:
            logger.debug("Dropping update after the call settled")
            return
        if self._callbacks.on_update is not None:
            self._callbacks.on_update(message)

    def on_error(self, error: str) -> None:
        if self._callbacks.on_error is not None:
            self._callbacks.on_error(error)

    def close(self) -> None:
        """Mark the call as settled. Later updates are dropped."""
        self._closed = True


def wrap_callbacks(callbacks: StreamCallbacks | None) -> CallbackAdapter | None:
    """Return an adapter for ``callbacks``, or None when streaming is not wanted."""
    if callbacks is None:
        return None
    return CallbackAdapter(callbacks)
