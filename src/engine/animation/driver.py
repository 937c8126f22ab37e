"""
どこで: `engine.animation.driver`。
何を: 表示状態（Hidden/Visible）に応じて繰り返しタイマを開始・停止し、周期ごとにアニメーション付き再配置を要求する。
なぜ: 「いつ動かすか」を 1 箇所に集約し、ウィンドウイベント（on_show/on_hide）とヘッドレス起動の両方から同じ規則で駆動するため。

状態遷移:
    Hidden --appear()--> Visible（即時 1 回再配置 + タイマ開始）
    Visible --disappear()--> Hidden（タイマ停止。進行中の遷移はそのまま放棄）
"""

from __future__ import annotations

import logging
from enum import Enum, auto

from engine.core.interval_timer import IntervalTimer

from .animator import PositionAnimator
from .point import PointRecord
from .transition import TransitionPresenter

logger = logging.getLogger(__name__)


class Visibility(Enum):
    HIDDEN = auto()
    VISIBLE = auto()


class PresentationDriver:
    """再配置の周期駆動と描画入力の提供を行う Tickable。

    Parameters
    ----------
    animator : PositionAnimator
        位置の所有者。
    presenter : TransitionPresenter
        `animator` を購読している遷移提示器。
    transition_duration : float, default 4.0
        1 回の再配置の補間秒数（0 で即時）。
    tick_interval : float, default 3.0
        再配置の周期（秒, > 0）。
    """

    def __init__(
        self,
        animator: PositionAnimator,
        presenter: TransitionPresenter,
        *,
        transition_duration: float = 4.0,
        tick_interval: float = 3.0,
    ):
        if transition_duration < 0.0:
            raise ValueError(f"transition_duration must be >= 0, got {transition_duration}")
        self._animator = animator
        self._presenter = presenter
        self._transition_duration = float(transition_duration)
        self._timer = IntervalTimer(tick_interval, self.animate_points)
        self._state = Visibility.HIDDEN
        self._reassign_count = 0

    @property
    def state(self) -> Visibility:
        return self._state

    @property
    def is_visible(self) -> bool:
        return self._state is Visibility.VISIBLE

    @property
    def reassign_count(self) -> int:
        return self._reassign_count

    @property
    def timer(self) -> IntervalTimer:
        return self._timer

    # ---- 表示イベント -----------------------------------------------------
    def appear(self) -> None:
        if self._state is Visibility.VISIBLE:
            return
        self._state = Visibility.VISIBLE
        logger.info("presentation visible; reassigning every %.2fs", self._timer.interval)
        self.animate_points()
        self._timer.start()

    def disappear(self) -> None:
        if self._state is Visibility.HIDDEN:
            return
        self._timer.stop()
        self._state = Visibility.HIDDEN
        logger.info("presentation hidden; timer stopped")

    # ---- 操作 -------------------------------------------------------------
    def animate_points(self) -> None:
        """アニメーション付きで 1 回再配置する。"""
        with self._presenter.animated(self._transition_duration):
            self._animator.reassign()
        self._reassign_count += 1

    def tick(self, dt: float) -> None:
        # 遷移を先に進め、タイマ発火で始まった遷移は経過 0 から描画させる
        self._presenter.tick(dt)
        self._timer.tick(dt)

    def frame_points(self) -> tuple[PointRecord, ...]:
        return self._presenter.presented_points()


__all__ = ["PresentationDriver", "Visibility"]
