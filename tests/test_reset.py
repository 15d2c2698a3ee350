from __future__ import annotations

import threading

import pytest

from convokeep.errors import StoreError
from convokeep.reset import CONFIRM_PROMPT, ResetCallbacks, reset_guard, reset_in_progress, reset_store


class RecordingReporter:
    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))


class FakeStore:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.cleared = 0

    def clear(self) -> None:
        if self.error is not None:
            raise self.error
        self.cleared += 1


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


def _recording_callbacks(events: list[str]) -> ResetCallbacks:
    return ResetCallbacks(
        on_before_reset=lambda: events.append("before"),
        on_after_reset=lambda: events.append("after"),
        on_cancel=lambda: events.append("cancel"),
        on_error=lambda exc: events.append(f"error:{exc}"),
    )


def test_confirmed_reset_clears(reporter):
    store = FakeStore()
    events: list[str] = []
    prompts: list[str] = []

    def confirm(prompt: str) -> bool:
        prompts.append(prompt)
        return True

    assert reset_store(store, confirm=confirm, reporter=reporter, callbacks=_recording_callbacks(events))
    assert store.cleared == 1
    assert prompts == [CONFIRM_PROMPT]
    assert events == ["before", "after"]
    assert reporter.messages == [
        ("info", "Clearing database..."),
        ("success", "Database cleared successfully!"),
    ]
    assert not reset_in_progress()


def test_declined_reset_leaves_store(reporter):
    store = FakeStore()
    events: list[str] = []
    assert not reset_store(store, confirm=lambda _: False, reporter=reporter, callbacks=_recording_callbacks(events))
    assert store.cleared == 0
    assert events == ["cancel"]
    assert reporter.messages == []
    assert not reset_in_progress()


def test_store_failure_is_reported(reporter):
    store = FakeStore(StoreError("disk full"))
    events: list[str] = []
    assert not reset_store(store, confirm=lambda _: True, reporter=reporter, callbacks=_recording_callbacks(events))
    assert events == ["before", "error:disk full"]
    assert reporter.messages == [("info", "Clearing database..."), ("error", "Error: disk full")]
    assert not reset_in_progress()


def test_failing_before_hook_is_reported(reporter):
    store = FakeStore()
    errors: list[Exception] = []

    def broken_hook() -> None:
        raise RuntimeError("hook broke")

    callbacks = ResetCallbacks(on_before_reset=broken_hook, on_error=errors.append)
    assert reset_store(store, confirm=lambda _: True, reporter=reporter, callbacks=callbacks) is False
    assert store.cleared == 0
    assert [str(exc) for exc in errors] == ["hook broke"]
    assert isinstance(errors[0], RuntimeError)
    assert reporter.messages == [("info", "Clearing database..."), ("error", "Error: hook broke")]
    assert not reset_in_progress()


def test_failing_after_hook_is_reported(reporter):
    store = FakeStore()
    errors: list[Exception] = []

    def broken_hook() -> None:
        raise ValueError("refresh failed")

    callbacks = ResetCallbacks(on_after_reset=broken_hook, on_error=errors.append)
    assert reset_store(store, confirm=lambda _: True, reporter=reporter, callbacks=callbacks) is False
    assert store.cleared == 1
    assert len(errors) == 1
    assert reporter.messages[-1] == ("error", "Error: refresh failed")
    assert not reset_in_progress()


def test_unexpected_store_exception_is_reported(reporter):
    events: list[str] = []
    store = FakeStore(OSError("read-only file system"))
    assert not reset_store(store, confirm=lambda _: True, reporter=reporter, callbacks=_recording_callbacks(events))
    assert events == ["before", "error:read-only file system"]
    assert reporter.messages[-1] == ("error", "Error: read-only file system")


def test_callbacks_are_optional(reporter):
    store = FakeStore()
    assert reset_store(store, confirm=lambda _: True, reporter=reporter)
    assert not reset_store(FakeStore(StoreError("boom")), confirm=lambda _: True, reporter=reporter)


def test_second_reset_is_ignored_while_one_runs(reporter):
    store = FakeStore()
    prompted: list[str] = []
    with reset_guard() as acquired:
        assert acquired
        assert reset_in_progress()
        result = reset_store(store, confirm=lambda p: prompted.append(p) or True, reporter=reporter)
    assert result is False
    assert prompted == []
    assert store.cleared == 0
    assert not reset_in_progress()


def test_guard_released_when_confirm_raises(reporter):
    def confirm(_: str) -> bool:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        reset_store(FakeStore(), confirm=confirm, reporter=reporter)
    assert not reset_in_progress()


def test_concurrent_requests_clear_once(reporter):
    store = FakeStore()
    entered = threading.Event()
    release = threading.Event()
    results: list[bool] = []

    def slow_confirm(_: str) -> bool:
        entered.set()
        release.wait(timeout=5)
        return True

    worker = threading.Thread(
        target=lambda: results.append(reset_store(store, confirm=slow_confirm, reporter=reporter))
    )
    worker.start()
    assert entered.wait(timeout=5)
    assert reset_store(store, confirm=lambda _: True, reporter=reporter) is False
    release.set()
    worker.join(timeout=5)
    assert results == [True]
    assert store.cleared == 1
