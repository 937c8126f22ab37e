"""
どこで: `engine.animation.animator`。
何を: 色付き点の確定リストを保持し、全点の位置を一様乱数で再配置する `PositionAnimator`。
なぜ: 「いつ動かすか」（driver）と「どこへ動かすか」（本モジュール）を分け、後者を純粋に検証可能にするため。

通知の順序:
- `reassign()` はまず購読者へ「変更直前」を同期通知し、その後に位置を書き換える。
- 購読者（TransitionPresenter など）は通知時点の値を遷移の始点として取得できる。
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Sequence

import numpy as np

from common.types import Vec2
from util.color import normalize_palette

from .point import ColoredPoint, PointRecord

logger = logging.getLogger(__name__)

WillChangeCallback = Callable[[], None]


def random_position(rng: np.random.Generator) -> Vec2:
    """各軸独立に [0,1] の一様乱数を引いた正規化座標を返す。"""
    x, y = rng.random(2)
    return (float(x), float(y))


class PositionAnimator:
    """色ごとに 1 点を持ち、`reassign()` で全点を新しい乱数位置へ移す。

    Parameters
    ----------
    colors : Sequence[object]
        パレット。順序と重複はそのまま点の並びになる（色名/Hex/タプル）。
    rng : numpy.random.Generator | None
        乱数生成器。None で `numpy.random.default_rng()`。
    """

    def __init__(self, colors: Sequence[object], *, rng: np.random.Generator | None = None):
        self._rng = rng if rng is not None else np.random.default_rng()
        self._points: tuple[ColoredPoint, ...] = tuple(
            ColoredPoint(position=random_position(self._rng), color=c)
            for c in normalize_palette(colors)
        )
        self._observers: list[WillChangeCallback] = []

    # ---- 観測 -------------------------------------------------------------
    def subscribe(self, callback: WillChangeCallback) -> Callable[[], None]:
        """「変更直前」通知を購読する。戻り値を呼ぶと購読解除（冪等）。"""
        self._observers.append(callback)

        def _unsubscribe() -> None:
            try:
                self._observers.remove(callback)
            except ValueError:
                pass

        return _unsubscribe

    def notify_will_change(self) -> None:
        for cb in tuple(self._observers):
            cb()

    # ---- 操作 -------------------------------------------------------------
    def reassign(self) -> None:
        """全点の位置を独立な一様乱数で置き換える（id/色/順序は不変）。"""
        self.notify_will_change()
        for p in self._points:
            p.position = random_position(self._rng)
        logger.debug("reassigned %d points", len(self._points))

    # ---- 参照 -------------------------------------------------------------
    @property
    def points(self) -> tuple[ColoredPoint, ...]:
        return self._points

    def positions(self) -> dict[str, Vec2]:
        return {p.id: p.position for p in self._points}

    def snapshot(self) -> tuple[PointRecord, ...]:
        return tuple(p.record() for p in self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[ColoredPoint]:
        return iter(self._points)


__all__ = ["PositionAnimator", "WillChangeCallback", "random_position"]
