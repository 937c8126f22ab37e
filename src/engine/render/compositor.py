"""
どこで: `engine.render.compositor`。
何を: 点ごとの塗り円を合成し、合成レイヤー全体へガウスぼかしを掛けて背景色の上に重ねた RGBA フレームを返す。
なぜ: GPU/ウィンドウに依存せず同じ絵を作れるようにし、画面表示・起動キャプチャ・テストで共有するため。

描画規則:
- 円の中心は `(x * W, y * H)`、半径は `min(W, H) / 2`。
- 並び順に重ねる（後の点が前の点を覆う）。
- ぼかしは乗算済みアルファで行い、縁が背景色以外に濁らないようにする。
- 内部では `render_scale` 倍の解像度で描いてから出力サイズへ拡大する（ぼかし半径も同率で縮める）。
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol

import numpy as np
from PIL import Image, ImageDraw, ImageFilter

from common.types import RGBA, Vec2
from util.color import normalize_color, to_u8_rgba

logger = logging.getLogger(__name__)


class DiscSource(Protocol):
    """描画に必要な最小属性（`PointRecord` / `ColoredPoint` が満たす）。"""

    position: Vec2
    color: RGBA


class Compositor:
    """塗り円 → ぼかし → 背景合成を行うラスタライザ。

    Parameters
    ----------
    width, height : int
        出力フレームのピクセルサイズ（>= 1）。
    blur_radius : float, default 130.0
        出力解像度でのぼかし半径 [px]（>= 0）。
    background : object, default "black"
        背景色（色名 / Hex / タプル）。アルファは無視して不透明として扱う。
    render_scale : float, default 0.25
        内部解像度の倍率（0 < scale <= 1）。
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        blur_radius: float = 130.0,
        background: object = "black",
        render_scale: float = 0.25,
    ):
        if blur_radius < 0.0:
            raise ValueError(f"blur_radius must be >= 0, got {blur_radius}")
        if not (0.0 < render_scale <= 1.0):
            raise ValueError(f"render_scale must be in (0, 1], got {render_scale}")
        self._blur_radius = float(blur_radius)
        self._render_scale = float(render_scale)
        bg = normalize_color(background)
        self._background = np.array(bg[:3], dtype=np.float32)
        self._width = 0
        self._height = 0
        self.resize(width, height)

    # ---- 設定 -------------------------------------------------------------
    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    @property
    def internal_size(self) -> tuple[int, int]:
        return (
            max(1, int(round(self._width * self._render_scale))),
            max(1, int(round(self._height * self._render_scale))),
        )

    @property
    def blur_radius(self) -> float:
        return self._blur_radius

    def resize(self, width: int, height: int) -> None:
        w, h = int(width), int(height)
        if w < 1 or h < 1:
            raise ValueError(f"frame size must be >= 1x1, got {(width, height)}")
        self._width, self._height = w, h

    # ---- 描画 -------------------------------------------------------------
    def _draw_discs(self, points: Iterable[DiscSource], size: tuple[int, int]) -> Image.Image:
        iw, ih = size
        radius = min(iw, ih) / 2.0
        layer = Image.new("RGBA", size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        for p in points:
            cx = float(p.position[0]) * iw
            cy = float(p.position[1]) * ih
            box = [cx - radius, cy - radius, cx + radius, cy + radius]
            fill = to_u8_rgba(p.color)
            if fill[3] == 255:
                draw.ellipse(box, fill=fill)
                continue
            # 半透明色は置換ではなく over 合成する
            disc = Image.new("RGBA", size, (0, 0, 0, 0))
            ImageDraw.Draw(disc).ellipse(box, fill=fill)
            layer = Image.alpha_composite(layer, disc)
            draw = ImageDraw.Draw(layer)
        return layer

    def render_image(self, points: Iterable[DiscSource]) -> Image.Image:
        """1 フレームを `PIL.Image`（RGBA, 出力サイズ）で返す。"""
        size = self.internal_size
        layer = np.asarray(self._draw_discs(points, size), dtype=np.float32) / 255.0

        # 乗算済みアルファへ変換してからぼかす（各チャネル独立に畳み込まれる）
        alpha = layer[..., 3:4]
        premul = np.concatenate([layer[..., :3] * alpha, alpha], axis=-1)
        radius = self._blur_radius * self._render_scale
        if radius > 0.0:
            img = Image.fromarray(np.round(premul * 255.0).astype(np.uint8))
            img = img.filter(ImageFilter.GaussianBlur(radius))
            premul = np.asarray(img, dtype=np.float32) / 255.0

        # 背景の上に over 合成（結果は不透明）
        a = premul[..., 3:4]
        rgb = premul[..., :3] + self._background * (1.0 - a)
        out = np.empty(rgb.shape[:2] + (4,), dtype=np.uint8)
        out[..., :3] = np.clip(np.round(rgb * 255.0), 0, 255).astype(np.uint8)
        out[..., 3] = 255
        frame = Image.fromarray(out)
        if size != self.size:
            frame = frame.resize(self.size, Image.BILINEAR)
        return frame

    def render(self, points: Iterable[DiscSource]) -> np.ndarray:
        """1 フレームを `(height, width, 4)` の uint8 配列（上端行が先頭）で返す。"""
        return np.asarray(self.render_image(points))


__all__ = ["Compositor", "DiscSource"]
