"""Tests for the progress callback adapter."""

from unittest.mock import MagicMock

from vibekit.streaming import CallbackAdapter, StreamCallbacks, wrap_callbacks


class TestCallbackAdapter:
    def test_forwards_updates_and_errors(self):
        on_update, on_error = MagicMock(), MagicMock()
        adapter = CallbackAdapter(StreamCallbacks(on_update=on_update, on_error=on_error))

        adapter.on_update("step 1")
        adapter.on_error("boom")

        on_update.assert_called_once_with("step 1")
        on_error.assert_called_once_with("boom")

    def test_missing_handlers_are_ignored(self):
        adapter = CallbackAdapter(StreamCallbacks())
        adapter.on_update("step")
        adapter.on_error("boom")

    def test_updates_dropped_after_close(self):
        updates = []
        adapter = CallbackAdapter(StreamCallbacks(on_update=updates.append))

        adapter.on_update("before")
        adapter.close()
        adapter.on_update("after")

        assert adapter.closed
        assert updates == ["before"]

    def test_errors_delivered_after_close(self):
        errors = []
        adapter = CallbackAdapter(StreamCallbacks(on_error=errors.append))
        adapter.close()
        adapter.on_error("late failure")
        assert errors == ["late failure"]

    def test_order_preserved(self):
        events = []
        adapter = CallbackAdapter(StreamCallbacks(
            on_update=lambda m: events.append(("update", m)),
            on_error=lambda e: events.append(("error", e)),
        ))
        adapter.on_update("a")
        adapter.on_error("b")
        adapter.on_update("c")
        assert events == [("update", "a"), ("error", "b"), ("update", "c")]


class TestWrapCallbacks:
    def test_none(self):
        assert wrap_callbacks(None) is None

    def test_wraps(self):
        adapter = wrap_callbacks(StreamCallbacks())
        assert isinstance(adapter, CallbackAdapter)
        assert not adapter.closed
