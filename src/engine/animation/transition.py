"""
どこで: `engine.animation.transition`。
何を: PositionAnimator の「変更直前」通知を購読し、旧位置→新位置をイージング付きで補間して提示する。
なぜ: UI フレームワークの暗黙アニメーションに相当する処理を、明示的な `lerp(start, end, ease(t))` で置き換えるため。

要点:
- 始点は通知時点で「いま提示している位置」。進行中の遷移が中断された場合もそこから滑らかに続く。
- 終点は常にモデル（animator）の現在位置。遷移終了後はモデル値そのものを返す。
- `animated(duration)` の外で起きた変更は即時反映（duration=0 扱い）。
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from common.easing import EasingFn, get_easing, lerp_point
from common.types import Vec2

from .animator import PositionAnimator
from .point import PointRecord

logger = logging.getLogger(__name__)


class TransitionPresenter:
    """点位置の補間遷移を管理する Tickable。"""

    def __init__(self, animator: PositionAnimator, *, easing: str | EasingFn = "ease_in_out"):
        self._animator = animator
        self._easing = get_easing(easing)
        self._start: dict[str, Vec2] = animator.positions()
        self._duration = 0.0
        self._elapsed = 0.0
        # animated() ブロック中のみ値を持つ
        self._pending_duration: float | None = None
        self._unsubscribe = animator.subscribe(self._on_will_change)

    # ---- 通知 -------------------------------------------------------------
    def _on_will_change(self) -> None:
        # 変更前の提示位置を始点として固定する
        self._start = self.presented_positions()
        self._duration = float(self._pending_duration or 0.0)
        self._elapsed = 0.0
        if self._duration > 0.0:
            logger.debug("transition started (duration=%.3fs)", self._duration)

    @contextmanager
    def animated(self, duration: float) -> Iterator[None]:
        """ブロック内で起きた位置変更を `duration` 秒の遷移として扱う。"""
        if duration < 0.0:
            raise ValueError(f"duration must be >= 0, got {duration}")
        prev = self._pending_duration
        self._pending_duration = float(duration)
        try:
            yield
        finally:
            self._pending_duration = prev

    # ---- Tickable ---------------------------------------------------------
    def tick(self, dt: float) -> None:
        if self.is_animating:
            self._elapsed = min(self._duration, self._elapsed + max(0.0, float(dt)))

    # ---- 参照 -------------------------------------------------------------
    @property
    def duration(self) -> float:
        return self._duration

    @property
    def progress(self) -> float:
        """遷移の経過率（0..1）。遷移が無ければ 1.0。"""
        if self._duration <= 0.0:
            return 1.0
        return min(1.0, self._elapsed / self._duration)

    @property
    def is_animating(self) -> bool:
        return self._duration > 0.0 and self._elapsed < self._duration

    def presented_positions(self) -> dict[str, Vec2]:
        """現在フレームで提示すべき位置 `{id: (x, y)}`。"""
        end = self._animator.positions()
        if not self.is_animating:
            return end
        w = self._easing(self.progress)
        return {pid: lerp_point(self._start.get(pid, pos), pos, w) for pid, pos in end.items()}

    def presented_points(self) -> tuple[PointRecord, ...]:
        """描画用レコード（位置は補間済み、順序はモデルと同じ）。"""
        pos = self.presented_positions()
        return tuple(
            PointRecord(rec.id, pos[rec.id], rec.color) for rec in self._animator.snapshot()
        )

    def close(self) -> None:
        self._unsubscribe()


__all__ = ["TransitionPresenter"]
