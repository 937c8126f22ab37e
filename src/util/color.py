"""
どこで: `util.color`。
何を: パレット指定（色名 / Hex / RGB(A) タプル）を RGBA(0–1) へ正規化し、8bit へ変換する。
なぜ: YAML 設定・API 引数・描画系のすべてで同じ受理仕様とエラーメッセージを使うため。
"""

from __future__ import annotations

from typing import Sequence

from common.types import RGBA

# システム色（sRGB 0–255）。UI フレームワーク既定の名前付き色に合わせる。
NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "gray": (142, 142, 147),
    "red": (255, 59, 48),
    "orange": (255, 149, 0),
    "yellow": (255, 204, 0),
    "green": (52, 199, 89),
    "mint": (0, 199, 190),
    "teal": (48, 176, 199),
    "cyan": (50, 173, 230),
    "blue": (0, 122, 255),
    "indigo": (88, 86, 214),
    "purple": (175, 82, 222),
    "pink": (255, 45, 85),
    "brown": (162, 132, 94),
}


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color(s: str) -> RGBA:
    """Hex 文字列（`#RRGGBB[AA]` / `0xRRGGBB[AA]` / `RRGGBB[AA]`）を RGBA(0–1) にする。"""
    digits = s.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    elif digits[:2].lower() == "0x":
        digits = digits[2:]
    if len(digits) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = (c / 255.0 for c in channels)
    return (r, g, b, a)


def _from_sequence(seq: Sequence[float | int]) -> RGBA:
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        vals = [float(v) for v in seq]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {seq!r}") from e
    if len(vals) == 3:
        vals.append(1.0)
    if all(0.0 <= v <= 1.0 for v in vals):
        r, g, b, a = vals
        return (r, g, b, a)
    # 0–255 とみなして丸め
    r, g, b, a = (max(0, min(255, int(round(v)))) / 255.0 for v in vals)
    # 3 要素で与えられた場合 a=1.0 が 1/255 にならないよう戻す
    if len(seq) == 3:
        a = 1.0
    return (r, g, b, a)


def _from_packed_int(value: int) -> RGBA:
    """YAML が `0xRRGGBB` を整数として読んだ値を RGBA にする。

    0xFFFFFF 以下は RRGGBB（a=1）、それより大きければ RRGGBBAA とみなす。
    """
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"packed color out of range: {value!r} (expected 0..0xFFFFFFFF)")
    if value <= 0xFFFFFF:
        return parse_hex_color(f"{value:06X}")
    return parse_hex_color(f"{value:08X}")


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 受理: 色名（`NAMED_COLORS`）, Hex 文字列, 0xRRGGBB[AA] 相当の整数,
      (r,g,b[,a]) （0–1 または 0–255）
    - 不正値は `ValueError`
    """
    if isinstance(value, str):
        key = value.strip().lower()
        if key in NAMED_COLORS:
            r, g, b = NAMED_COLORS[key]
            return (r / 255.0, g / 255.0, b / 255.0, 1.0)
        try:
            return parse_hex_color(value)
        except ValueError:
            raise ValueError(f"unknown color: '{value}'") from None
    if isinstance(value, int) and not isinstance(value, bool):
        return _from_packed_int(value)
    if isinstance(value, (list, tuple)):
        rgba = _from_sequence(value)
        return (_clamp01(rgba[0]), _clamp01(rgba[1]), _clamp01(rgba[2]), _clamp01(rgba[3]))
    raise ValueError(f"unsupported color type: {type(value)!r}")


def normalize_palette(values: Sequence[object]) -> tuple[RGBA, ...]:
    """パレット（色の列）を順序と重複を保ったまま正規化する。"""
    if isinstance(values, (str, bytes)):
        raise ValueError("palette must be a sequence of colors, not a single string")
    return tuple(normalize_color(v) for v in values)


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) へ変換する。"""
    r, g, b, a = normalize_color(value)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), int(round(a * 255)))


def to_u8_rgb(value: object) -> tuple[int, int, int]:
    r, g, b, _a = to_u8_rgba(value)
    return (r, g, b)


__all__ = [
    "NAMED_COLORS",
    "normalize_color",
    "normalize_palette",
    "parse_hex_color",
    "to_u8_rgb",
    "to_u8_rgba",
]
