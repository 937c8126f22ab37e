"""
どこで: `engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を固定順序で呼び出す FrameClock（dt 測定とループ管理）。
なぜ: pyglet の `schedule_interval` からでも、ヘッドレスな固定刻みループからでも同じ順序で更新するため。
"""

from __future__ import annotations

import time
from typing import Sequence

from .tickable import Tickable


class FrameClock:
    """登録された Tickable を固定順序で実行する極小クラス。"""

    def __init__(self, tickables: Sequence[Tickable]):
        self._tickables = tuple(tickables)
        self._last_time = time.perf_counter()
        self._elapsed = 0.0

    @property
    def elapsed(self) -> float:
        """これまでに進めた合計秒数。"""
        return self._elapsed

    # pyglet.clock.schedule_interval から呼ばせる
    def tick(self, dt: float | None = None) -> None:
        if dt is None:  # pyglet は dt を渡してくれる
            now = time.perf_counter()
            dt = now - self._last_time
            self._last_time = now
        dt = max(0.0, float(dt))
        self._elapsed += dt
        for t in self._tickables:
            t.tick(dt)

    def advance(self, seconds: float, step: float) -> int:
        """`seconds` 秒ぶんを固定刻み `step` で進め、実行したフレーム数を返す（ヘッドレス用）。"""
        if step <= 0.0:
            raise ValueError(f"step must be > 0, got {step}")
        frames = 0
        remaining = float(seconds)
        # 浮動小数の端数で 1 フレーム余計に回らないよう許容誤差を取る
        while remaining > 1e-9:
            dt = min(step, remaining)
            self.tick(dt)
            remaining -= dt
            frames += 1
        return frames
