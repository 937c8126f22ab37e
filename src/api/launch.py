"""
どこで: `api.launch`（ヘッドレス起動キャプチャ）。
何を: 表示を開始（appear）し、固定刻みで一定時間進めてから 1 フレームを合成して PNG（"Launch Screen"）に保存する。
なぜ: ディスプレイの無い環境でも「起動してクラッシュせずに描ける」ことを成果物付きで確認するため。
"""

from __future__ import annotations

import logging
from pathlib import Path

from engine.core.frame_clock import FrameClock
from engine.export.image import save_frame_png
from util.paths import ensure_screenshots_dir, unique_path

from .config import MotionBlurConfig, resolve_config
from .scene import build_scene

logger = logging.getLogger(__name__)

LAUNCH_SCREEN_NAME = "launch_screen"


def capture_launch(
    path: Path | str | None = None,
    *,
    settle_seconds: float = 0.5,
    config: MotionBlurConfig | None = None,
) -> Path:
    """起動画面をヘッドレスに合成して保存し、保存先を返す。

    Parameters
    ----------
    path : Path | str | None
        出力先。None で `data/screenshot/launch_screen_<W>x<H>.png`（衝突時は連番）。
    settle_seconds : float, default 0.5
        保存前に進める時間 [s]（>= 0）。刻みは `1 / config.fps`。
    config : MotionBlurConfig | None
        None で `resolve_config()` の結果を使う。
    """
    if settle_seconds < 0.0:
        raise ValueError(f"settle_seconds must be >= 0, got {settle_seconds}")
    cfg = config if config is not None else resolve_config()
    scene = build_scene(cfg)
    try:
        scene.driver.appear()
        frames = FrameClock([scene.driver]).advance(settle_seconds, cfg.frame_dt)
        logger.info(
            "launch settled: %d frames, %d reassignments", frames, scene.driver.reassign_count
        )
        frame = scene.render_frame()
    finally:
        scene.close()

    if path is None:
        out = unique_path(ensure_screenshots_dir() / f"{LAUNCH_SCREEN_NAME}_{cfg.width}x{cfg.height}.png")
    else:
        out = Path(path)
    return save_frame_png(frame, out)


__all__ = ["LAUNCH_SCREEN_NAME", "capture_launch"]
