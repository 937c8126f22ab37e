from __future__ import annotations

import pytest

from engine.core.frame_clock import FrameClock


class _Recorder:
    def __init__(self, name: str, log: list[tuple[str, float]]):
        self.name = name
        self.log = log

    def tick(self, dt: float) -> None:
        self.log.append((self.name, dt))


def test_ticks_in_registration_order() -> None:
    log: list[tuple[str, float]] = []
    clock = FrameClock([_Recorder("a", log), _Recorder("b", log)])
    clock.tick(0.5)
    assert log == [("a", 0.5), ("b", 0.5)]
    assert clock.elapsed == 0.5


def test_tick_without_dt_measures_time() -> None:
    log: list[tuple[str, float]] = []
    clock = FrameClock([_Recorder("a", log)])
    clock.tick()
    assert len(log) == 1
    assert log[0][1] >= 0.0


def test_advance_uses_fixed_steps_and_remainder() -> None:
    log: list[tuple[str, float]] = []
    clock = FrameClock([_Recorder("a", log)])
    frames = clock.advance(1.0, 0.25)
    assert frames == 4
    assert [dt for _, dt in log] == [0.25] * 4
    log.clear()
    frames = clock.advance(0.6, 0.25)
    assert frames == 3
    assert sum(dt for _, dt in log) == pytest.approx(0.6)


def test_advance_rejects_non_positive_step() -> None:
    clock = FrameClock([])
    with pytest.raises(ValueError):
        clock.advance(1.0, 0.0)
