"""Tests for cooperative cancellation tokens."""

from __future__ import annotations

import pytest

from minimediator.errors import ErrorSeverity
from minimediator.mediator import cancellation
from minimediator.mediator import (
    CancellationToken,
    CancellationTokenSource,
    OperationCancelledError,
)


class TestNoneToken:
    def test_none_token_is_never_cancelled(self) -> None:
        token = CancellationToken.NONE

        assert not token.can_be_cancelled
        assert not token.is_cancellation_requested
        token.throw_if_cancellation_requested()

    def test_register_on_none_token_never_runs(self) -> None:
        calls: list[str] = []

        CancellationToken.NONE.register(lambda: calls.append("called"))

        assert calls == []

    def test_repr(self) -> None:
        assert repr(CancellationToken.NONE) == "CancellationToken.NONE"


class TestCancellationTokenSource:
    def test_cancel_is_observed_by_token(self) -> None:
        source = CancellationTokenSource()
        token = source.token

        assert token.can_be_cancelled
        assert not token.is_cancellation_requested

        source.cancel()

        assert source.is_cancellation_requested
        assert token.is_cancellation_requested
        assert repr(token) == "CancellationToken(cancelled=True)"

    def test_throw_if_cancellation_requested(self) -> None:
        source = CancellationTokenSource()
        source.cancel()

        with pytest.raises(OperationCancelledError) as exc_info:
            source.token.throw_if_cancellation_requested()

        assert exc_info.value.severity is ErrorSeverity.WARNING
        assert exc_info.value.code.code == "OPERATION_CANCELLED"

    def test_callbacks_run_once_in_registration_order(self) -> None:
        source = CancellationTokenSource()
        calls: list[int] = []
        source.token.register(lambda: calls.append(1))
        source.token.register(lambda: calls.append(2))

        source.cancel()
        source.cancel()

        assert calls == [1, 2]

    def test_register_after_cancel_runs_immediately(self) -> None:
        source = CancellationTokenSource()
        source.cancel()
        calls: list[str] = []

        source.token.register(lambda: calls.append("late"))

        assert calls == ["late"]

    def test_failing_callback_does_not_stop_others(self) -> None:
        source = CancellationTokenSource()
        calls: list[str] = []

        def broken() -> None:
            raise RuntimeError("callback broke")

        source.token.register(broken)
        source.token.register(lambda: calls.append("after"))

        source.cancel()

        assert calls == ["after"]

    def test_failing_callback_is_logged(
        self, monkeypatch: pytest.MonkeyPatch, recording_logger
    ) -> None:
        monkeypatch.setattr(cancellation, "logger", recording_logger)
        source = CancellationTokenSource()

        def broken() -> None:
            raise RuntimeError("callback broke")

        source.token.register(broken)
        source.cancel()

        assert recording_logger.messages("ERROR") == ["Cancellation callback failed"]

    def test_failing_late_callback_is_logged_not_raised(
        self, monkeypatch: pytest.MonkeyPatch, recording_logger
    ) -> None:
        monkeypatch.setattr(cancellation, "logger", recording_logger)
        source = CancellationTokenSource()
        source.cancel()

        def broken() -> None:
            raise RuntimeError("callback broke")

        source.token.register(broken)

        assert recording_logger.records[-1][0] == "ERROR"
        assert recording_logger.records[-1][2]["error"] == "callback broke"
