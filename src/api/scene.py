"""
どこで: `api.scene`。
何を: 設定から animator / presenter / driver / compositor を組み立てた `Scene` を返す。
なぜ: ウィンドウ実行とヘッドレス起動キャプチャで、まったく同じ結線を使うため。
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from engine.animation import PositionAnimator, PresentationDriver, TransitionPresenter
from engine.render.compositor import Compositor

from .config import MotionBlurConfig


@dataclass
class Scene:
    config: MotionBlurConfig
    animator: PositionAnimator
    presenter: TransitionPresenter
    driver: PresentationDriver
    compositor: Compositor

    def render_frame(self) -> np.ndarray:
        """現在の提示位置で 1 フレームを合成する。"""
        return self.compositor.render(self.driver.frame_points())

    def close(self) -> None:
        self.driver.disappear()
        self.presenter.close()


def build_scene(config: MotionBlurConfig) -> Scene:
    rng = np.random.default_rng(config.seed)
    animator = PositionAnimator(config.palette, rng=rng)
    presenter = TransitionPresenter(animator)
    driver = PresentationDriver(
        animator,
        presenter,
        transition_duration=config.transition_duration,
        tick_interval=config.tick_interval,
    )
    compositor = Compositor(
        config.width,
        config.height,
        blur_radius=config.blur_radius,
        background=config.background,
        render_scale=config.render_scale,
    )
    return Scene(config, animator, presenter, driver, compositor)


__all__ = ["Scene", "build_scene"]
