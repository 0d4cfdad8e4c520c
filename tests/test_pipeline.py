"""Tests for the countdown pipeline (deadline -> loop -> completion)."""

import pytest

from core.domain.errors import InputValidationError, PastDeadlineError, TerminalIOError
from core.domain.models import LoopStatus
from core.services.countdown_pipeline import (
    CountdownHooks,
    CountdownRequest,
    CountdownRuntime,
    prepare_deadline,
    run_countdown,
)

from conftest import FakeRunner, FakeTerminal, TerminalFactory


def make_runtime(clock, terminal, runner=None):
    factory = TerminalFactory(terminal)
    runtime = CountdownRuntime(
        wall_clock=clock,
        monotonic_clock=clock,
        open_terminal=factory,
        runner=runner or FakeRunner(),
        sleep=clock.sleep,
    )
    return runtime, factory


# --- prepare_deadline ---

def test_prepare_deadline_reads_wall_clock_once(clock):
    deadline, total = prepare_deadline(CountdownRequest(time="12:00:10"), clock)
    assert str(deadline) == "2026-10-18 12:00:10"
    assert total == 10.0


def test_prepare_deadline_rejects_now(clock):
    with pytest.raises(PastDeadlineError):
        prepare_deadline(CountdownRequest(), clock)


# --- run_countdown ---

def test_completed_run_invokes_command_once(clock):
    runner = FakeRunner()
    runtime, factory = make_runtime(clock, FakeTerminal(), runner)

    result = run_countdown(CountdownRequest(time="12:00:10", execute="echo hi"), runtime)

    assert result.outcome.status is LoopStatus.COMPLETED
    assert result.total_seconds == 10.0
    assert runner.calls == ["echo hi"]
    assert result.report.succeeded
    assert factory.events == ["open", "close"]


def test_cancelled_run_skips_command(clock):
    runner = FakeRunner()
    runtime, _ = make_runtime(clock, FakeTerminal(keys=[None, "q"]), runner)

    result = run_countdown(CountdownRequest(time="12:00:10", execute="echo hi"), runtime)

    assert result.cancelled
    assert result.report is None
    assert runner.calls == []


def test_invalid_input_fails_before_terminal_opens(clock):
    runtime, factory = make_runtime(clock, FakeTerminal())
    with pytest.raises(InputValidationError):
        run_countdown(CountdownRequest(time="25:00"), runtime)
    assert factory.events == []


def test_past_deadline_fails_before_terminal_opens(clock):
    runtime, factory = make_runtime(clock, FakeTerminal())
    with pytest.raises(PastDeadlineError):
        run_countdown(CountdownRequest(time="11:59"), runtime)
    assert factory.events == []


def test_terminal_released_on_error(clock):
    terminal = FakeTerminal(keys=[TerminalIOError("gone")])
    runner = FakeRunner()
    runtime, factory = make_runtime(clock, terminal, runner)

    with pytest.raises(TerminalIOError):
        run_countdown(CountdownRequest(time="12:00:10", execute="echo hi"), runtime)

    assert factory.events == ["open", "close"]
    assert runner.calls == []


def test_started_hook_receives_deadline_and_total(clock):
    seen = []
    runtime, _ = make_runtime(clock, FakeTerminal())
    hooks = CountdownHooks(started=lambda deadline, total: seen.append((str(deadline), total)))

    run_countdown(CountdownRequest(time="12:00:02"), runtime, hooks)

    assert seen == [("2026-10-18 12:00:02", 2.0)]


def test_command_runs_after_terminal_closed(clock):
    factory_events = []

    class RecordingRunner(FakeRunner):
        def run(self, command):
            factory_events.append("run")
            return super().run(command)

    runtime, factory = make_runtime(clock, FakeTerminal(), RecordingRunner())
    factory.events = factory_events

    run_countdown(CountdownRequest(time="12:00:01", execute="true"), runtime)

    assert factory_events == ["open", "close", "run"]
