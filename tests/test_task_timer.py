import time

import pytest

from collidelab.task_timer import TaskTimer


def test_task_runs_exactly_once():
    calls = []
    elapsed = TaskTimer().measure_task(lambda: calls.append(1))
    assert calls == [1]
    assert elapsed >= 0.0


def test_sleep_is_measured_in_milliseconds():
    elapsed = TaskTimer().measure_task(lambda: time.sleep(0.02))
    assert elapsed >= 20.0
    assert elapsed < 5000.0


def test_resolution_is_whole_microseconds():
    elapsed = TaskTimer().measure_task(lambda: time.sleep(0.001))
    assert elapsed * 1000 == pytest.approx(round(elapsed * 1000))


def test_exception_from_task_propagates():
    def failing():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        TaskTimer().measure_task(failing)