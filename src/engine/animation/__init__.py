"""
どこで: `engine.animation` サブパッケージ。
何を: 色付き点の保持と再配置（PositionAnimator）、補間遷移（TransitionPresenter）、周期駆動（PresentationDriver）。
なぜ: 位置の決定・補間・スケジューリングを描画（render）から切り離し、ヘッドレスで検証可能にするため。
"""

from .animator import PositionAnimator, random_position
from .driver import PresentationDriver, Visibility
from .point import ColoredPoint, PointRecord
from .transition import TransitionPresenter

__all__ = [
    "ColoredPoint",
    "PointRecord",
    "PositionAnimator",
    "PresentationDriver",
    "TransitionPresenter",
    "Visibility",
    "random_position",
]
