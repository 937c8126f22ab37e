"""
どこで: `engine.render.blitter`。
何を: Compositor の RGBA フレームを pyglet テクスチャへ転送し、ウィンドウ全面へ引き伸ばして描く。
なぜ: 合成（CPU）と表示（GL）の境界を 1 箇所にまとめ、テクスチャの寿命をサイズ変更時だけに限定するため。
"""

from __future__ import annotations

import logging

import numpy as np
import pyglet

logger = logging.getLogger(__name__)


class TextureBlitter:
    """フレーム配列 → テクスチャ → 画面の転送を担う。"""

    def __init__(self) -> None:
        self._texture: pyglet.image.Texture | None = None
        self._size: tuple[int, int] = (0, 0)

    def upload(self, frame: np.ndarray) -> None:
        """`(h, w, 4)` uint8 の RGBA フレームを転送する。"""
        if frame.ndim != 3 or frame.shape[2] != 4:
            raise ValueError(f"frame must be (h, w, 4) RGBA, got shape {frame.shape}")
        h, w = int(frame.shape[0]), int(frame.shape[1])
        if self._texture is None or self._size != (w, h):
            self.release()
            self._texture = pyglet.image.Texture.create(w, h)
            self._size = (w, h)
            logger.debug("texture (re)created: %dx%d", w, h)
        # pyglet は下端行が先頭
        data = np.ascontiguousarray(frame[::-1]).tobytes()
        image = pyglet.image.ImageData(w, h, "RGBA", data, pitch=w * 4)
        self._texture.blit_into(image, 0, 0, 0)

    def draw(self, width: int, height: int) -> None:
        if self._texture is None:
            return
        self._texture.blit(0, 0, width=width, height=height)

    def release(self) -> None:
        if self._texture is not None:
            try:
                self._texture.delete()
            except Exception as e:  # GL コンテキスト破棄後など
                logger.debug("texture release failed: %s", e)
            self._texture = None
            self._size = (0, 0)


__all__ = ["TextureBlitter"]
