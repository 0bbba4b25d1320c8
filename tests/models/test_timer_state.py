"""Unit tests for TimerSession and its enums."""

from __future__ import annotations

from datetime import timedelta

from pomodoro_cli.models.timer.state import Phase, RunState, TimerSession, TimerView


def _session(**overrides) -> TimerSession:
    values = dict(
        work_length=timedelta(minutes=25),
        break_length=timedelta(minutes=5),
        session_total=4,
        remaining=timedelta(minutes=25),
    )
    values.update(overrides)
    return TimerSession(**values)


class TestTimerSessionDefaults:
    def test_new_session_starts_in_running_work(self) -> None:
        session = _session()

        assert session.phase is Phase.WORK
        assert session.run_state is RunState.RUNNING
        assert session.session_index == 1
        assert session.generation == 0

    def test_run_state_helpers(self) -> None:
        session = _session()
        assert session.is_running

        session.run_state = RunState.PAUSED
        assert not session.is_running


class TestTimerSessionLengths:
    def test_length_of_each_phase(self) -> None:
        session = _session()

        assert session.length_of(Phase.WORK) == timedelta(minutes=25)
        assert session.length_of(Phase.BREAK) == timedelta(minutes=5)


class TestTimerView:
    def test_view_snapshots_render_fields(self) -> None:
        session = _session(phase=Phase.BREAK, session_index=3, remaining=timedelta(seconds=42))

        view = session.view()

        assert isinstance(view, TimerView)
        assert view == (Phase.BREAK, RunState.RUNNING, timedelta(seconds=42), 3, 4)

    def test_view_is_detached_from_later_changes(self) -> None:
        session = _session()
        view = session.view()

        session.remaining = timedelta(0)

        assert view.remaining == timedelta(minutes=25)


class TestEnums:
    def test_values_are_strings(self) -> None:
        assert Phase.WORK.value == "work"
        assert Phase.BREAK.value == "break"
        assert RunState.RUNNING.value == "running"
        assert RunState.PAUSED.value == "paused"
