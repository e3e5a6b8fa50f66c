from __future__ import annotations

import threading

import pytest
from adapters.pointer import ScriptedPointerPort, drag
from adapters.time import FakeClockPort, FakeSleeperPort
from domain.errors import SelectionCancelled
from domain.selection import GestureState, SelectionGesture, SelectionService, advance
from domain.types import Coord
from ports.input import PointerSample


def _run(samples: list[PointerSample]) -> SelectionGesture:
    g = SelectionGesture()
    for s in samples:
        g = advance(g, s)
    return g


def test_idle_ignores_released_samples():
    g = _run([PointerSample(1, 1, False), PointerSample(2, 2, False)])
    assert g.state is GestureState.IDLE
    assert g.start is None


def test_start_latches_on_first_press_only():
    g = _run([PointerSample(5, 6, True), PointerSample(9, 9, True), PointerSample(20, 20, True)])
    assert g.state is GestureState.SELECTING
    assert g.start == Coord(5, 6)
    assert g.end is None


def test_release_completes_and_terminal_state_is_sticky():
    g = _run(drag(10, 10, 40, 30))
    assert g.state is GestureState.COMPLETE
    assert (g.start, g.end) == (Coord(10, 10), Coord(40, 30))

    # a second drag after completion changes nothing
    again = _run([*drag(10, 10, 40, 30), *drag(0, 0, 1, 1)])
    assert again == g


def test_to_box_normalizes_up_left_drag():
    box = _run(drag(140, 90, 120, 60)).to_box()
    assert box.top_left == Coord(120, 60)
    assert box.bottom_right == Coord(140, 90)


def test_to_box_requires_completed_gesture():
    with pytest.raises(SelectionCancelled):
        SelectionGesture().to_box()
    with pytest.raises(SelectionCancelled):
        _run([PointerSample(1, 1, True)]).cancel().to_box()


def test_cancel_does_not_override_completion():
    g = _run(drag(0, 0, 3, 3))
    assert g.cancel() is g


def _service(pointer, timeout_s=None):
    clock = FakeClockPort()
    sleeper = FakeSleeperPort(clock)
    svc = SelectionService(pointer, clock, sleeper, poll_interval_s=0.01, timeout_s=timeout_s)
    return svc, sleeper


def test_service_returns_completed_gesture():
    pointer = ScriptedPointerPort(drag(10, 20, 30, 40))
    svc, _ = _service(pointer)
    g = svc.wait_for_selection()
    assert g.state is GestureState.COMPLETE
    assert g.start == Coord(10, 20)
    assert g.end == Coord(30, 40)
    assert pointer.polls == len(drag(10, 20, 30, 40))


def test_service_times_out_on_abandoned_gesture():
    # button pressed and never released
    pointer = ScriptedPointerPort([PointerSample(0, 0, False), PointerSample(5, 5, True)])
    svc, sleeper = _service(pointer, timeout_s=0.5)
    g = svc.wait_for_selection()
    assert g.state is GestureState.CANCELLED
    assert g.start == Coord(5, 5)
    assert sum(sleeper.slept) == pytest.approx(0.5, abs=0.011)


def test_service_honours_cancel_token():
    cancel = threading.Event()
    cancel.set()
    pointer = ScriptedPointerPort(drag(0, 0, 5, 5))
    svc, _ = _service(pointer)
    g = svc.wait_for_selection(cancel)
    assert g.state is GestureState.CANCELLED
    assert pointer.polls == 0


def test_zero_timeout_means_wait_forever():
    pointer = ScriptedPointerPort([PointerSample(0, 0, False)] * 50 + drag(1, 1, 2, 2))
    svc, _ = _service(pointer, timeout_s=0)
    assert svc.wait_for_selection().state is GestureState.COMPLETE
