"""
どこで: `engine.core.interval_timer`。
何を: `tick(dt)` で駆動される繰り返しタイマ（開始/停止、経過ごとにコールバック）。
なぜ: 再配置の周期をイベントループ非依存にし、表示/非表示で確実に開始・停止できるようにするため。
"""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)


class IntervalTimer:
    """`interval` 秒ごとに `callback()` を呼ぶ Tickable。

    - 停止中は `tick()` を無視する。
    - 1 回の `tick()` で呼ぶのは高々 1 回。複数周期をまたいだ分は捨て、端数だけを次へ持ち越す
      （`pyglet.clock.schedule_interval` と同じく遅延時にまとめ撃ちしない）。
    - `stop()` は溜まった経過時間を破棄する。再開後は最初から 1 周期待つ。
    """

    def __init__(self, interval: float, callback: Callable[[], None]):
        if not interval > 0.0:
            raise ValueError(f"interval must be > 0, got {interval}")
        self._interval = float(interval)
        self._callback = callback
        self._accum = 0.0
        self._running = False
        self._fired = 0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def fire_count(self) -> int:
        return self._fired

    def start(self) -> None:
        if self._running:
            return
        self._accum = 0.0
        self._running = True
        logger.debug("timer started (interval=%.3fs)", self._interval)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self._accum = 0.0
        logger.debug("timer stopped")

    def tick(self, dt: float) -> None:
        if not self._running:
            return
        self._accum += max(0.0, float(dt))
        if self._accum < self._interval:
            return
        self._accum %= self._interval
        self._fired += 1
        self._callback()
