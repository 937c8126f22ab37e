"""
どこで: `engine.animation.point`。
何を: 色付き点エンティティ `ColoredPoint` と、描画へ渡す読み取り専用レコード `PointRecord`。
なぜ: 同一性（id）で遷移の連続性を保ち、描画側には可変状態を渡さないため。
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import NamedTuple

from common.types import RGBA, Vec2


class PointRecord(NamedTuple):
    """描画 1 回分の点のスナップショット。"""

    id: str
    position: Vec2
    color: RGBA


@dataclass(eq=False)
class ColoredPoint:
    """正規化座標上の色付き点。

    - `id` は生成時に採番され不変。
    - `color` は生成時に固定（代入は `AttributeError`）。
    - `position` のみが `PositionAnimator.reassign()` により更新される。
    """

    position: Vec2
    color: RGBA
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __setattr__(self, name: str, value: object) -> None:
        if name in ("id", "color") and name in self.__dict__:
            raise AttributeError(f"ColoredPoint.{name} is immutable")
        super().__setattr__(name, value)

    def record(self) -> PointRecord:
        return PointRecord(self.id, self.position, self.color)
