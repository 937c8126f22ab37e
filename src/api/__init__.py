"""
どこで: `api` 入口（高レベル公開 API）。
何を: ウィンドウ実行 `run`・ヘッドレス起動キャプチャ `capture_launch`・設定 `MotionBlurConfig` などを再輸出。
なぜ: 利用者が単一名前空間から設定 → 実行 → キャプチャまで完結できるようにするため。

Usage:
    from api import run, capture_launch

    run(palette=["red", "blue", "yellow", "red"], blur_radius=130)
    capture_launch("launch.png", settle_seconds=1.0)
"""

from engine.animation import ColoredPoint, PositionAnimator, PresentationDriver, TransitionPresenter
from engine.render.compositor import Compositor

from .config import MotionBlurConfig, resolve_config
from .launch import capture_launch
from .runner import run
from .scene import Scene, build_scene

__all__ = [
    # 実行
    "run",
    "capture_launch",
    # 設定
    "MotionBlurConfig",
    "resolve_config",
    # 組立（高度な使用）
    "Scene",
    "build_scene",
    "ColoredPoint",
    "PositionAnimator",
    "TransitionPresenter",
    "PresentationDriver",
    "Compositor",
]

__version__ = "2025.02"
