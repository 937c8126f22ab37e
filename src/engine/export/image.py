"""
どこで: `engine.export.image`。
何を: 画面バッファ（pyglet）または合成フレーム（numpy 配列）を PNG として保存する。
なぜ: P キーの画面保存とヘッドレス起動キャプチャで、保存先と命名規則を共有するため。
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
from PIL import Image

from util.paths import ensure_screenshots_dir, unique_path

if TYPE_CHECKING:  # pragma: no cover
    import pyglet

logger = logging.getLogger(__name__)


def default_png_path(width: int, height: int, *, prefix: str | None = None) -> Path:
    """`data/screenshot/<prefix_>YYYYmmdd_HHMMSS_<W>x<H>.png`（衝突時は連番）を返す。"""
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    head = f"{prefix}_" if prefix else ""
    return unique_path(ensure_screenshots_dir() / f"{head}{ts}_{width}x{height}.png")


def save_frame_png(frame: np.ndarray | Image.Image, path: Path | None = None) -> Path:
    """合成済みフレームを PNG で保存して保存先を返す。

    Parameters
    ----------
    frame : numpy.ndarray | PIL.Image.Image
        `(h, w, 4)` / `(h, w, 3)` の uint8 配列、または PIL 画像。
    path : Path | None
        出力先。None の場合は `data/screenshot/` にタイムスタンプ名で保存。
    """
    img = frame if isinstance(frame, Image.Image) else Image.fromarray(np.asarray(frame, dtype=np.uint8))
    if path is None:
        path = default_png_path(img.width, img.height)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path, format="PNG")
    logger.info("saved PNG: %s", path)
    return path


def save_window_png(window: "pyglet.window.Window", path: Path | None = None) -> Path:
    """現在のウィンドウ内容（カラーバッファ）を PNG として保存する。"""
    import pyglet

    if path is None:
        path = default_png_path(int(window.width), int(window.height), prefix="window")
    try:
        buffer = pyglet.image.get_buffer_manager().get_color_buffer()
        buffer.save(str(path))
    except Exception as e:  # pyglet が未初期化/ヘッドレスなど
        raise RuntimeError(f"PNG 保存に失敗: {e}") from e
    logger.info("saved PNG: %s", path)
    return Path(path)


__all__ = ["default_png_path", "save_frame_png", "save_window_png"]
