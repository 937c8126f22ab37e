"""
どこで: `common.easing`
何を: 経過率 t∈[0,1] を補間重みへ写すイージング曲線と、線形補間ヘルパを提供する。
なぜ: 位置遷移の「ゆっくり始まりゆっくり終わる」動きを、描画系に依存しない純粋関数で表すため。

設計方針:
- 純粋・決定的。副作用なし。
- 曲線は CSS/UI フレームワークと同じ 3 次ベジェ `cubic-bezier(x1, y1, x2, y2)` で定義。
  端点は (0,0) と (1,1) に固定し、x(s)=t を解いて y(s) を返す。
- 入力 t は [0,1] に clamp。端点は厳密に 0.0/1.0 を返す。
"""

from __future__ import annotations

from typing import Callable

from .types import Vec2

EasingFn = Callable[[float], float]

_NEWTON_ITERATIONS = 8
_EPSILON = 1e-7


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def lerp(a: float, b: float, w: float) -> float:
    """`a` から `b` へ重み `w` で線形補間する（w は clamp しない）。"""
    return a + (b - a) * w


def lerp_point(p0: Vec2, p1: Vec2, w: float) -> Vec2:
    """2 次元点の線形補間。"""
    return (lerp(p0[0], p1[0], w), lerp(p0[1], p1[1], w))


def linear(t: float) -> float:
    return _clamp01(t)


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> EasingFn:
    """3 次ベジェのタイミング曲線を返す。

    Parameters
    ----------
    x1, y1, x2, y2 : float
        制御点。`x1`/`x2` は [0,1] でなければならない（x 単調性の前提）。

    Returns
    -------
    Callable[[float], float]
        t∈[0,1] → 補間重み。

    Raises
    ------
    ValueError
        `x1`/`x2` が [0,1] 外の場合。
    """
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise ValueError(f"cubic_bezier x control points must be in [0, 1], got x1={x1}, x2={x2}")

    # 多項式係数（B(s) = ((a*s + b)*s + c)*s）
    cx = 3.0 * x1
    bx = 3.0 * (x2 - x1) - cx
    ax = 1.0 - cx - bx
    cy = 3.0 * y1
    by = 3.0 * (y2 - y1) - cy
    ay = 1.0 - cy - by

    def sample_x(s: float) -> float:
        return ((ax * s + bx) * s + cx) * s

    def sample_y(s: float) -> float:
        return ((ay * s + by) * s + cy) * s

    def sample_dx(s: float) -> float:
        return (3.0 * ax * s + 2.0 * bx) * s + cx

    def solve_s(t: float) -> float:
        # Newton 法（収束しなければ二分法）
        s = t
        for _ in range(_NEWTON_ITERATIONS):
            err = sample_x(s) - t
            if abs(err) < _EPSILON:
                return s
            d = sample_dx(s)
            if abs(d) < 1e-6:
                break
            s -= err / d
        lo, hi = 0.0, 1.0
        s = t
        while lo < hi:
            x = sample_x(s)
            if abs(x - t) < _EPSILON:
                return s
            if t > x:
                lo = s
            else:
                hi = s
            if hi - lo < _EPSILON:
                break
            s = (lo + hi) * 0.5
        return s

    def curve(t: float) -> float:
        t = _clamp01(t)
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return sample_y(solve_s(t))

    return curve


ease_in = cubic_bezier(0.42, 0.0, 1.0, 1.0)
ease_out = cubic_bezier(0.0, 0.0, 0.58, 1.0)
ease_in_out = cubic_bezier(0.42, 0.0, 0.58, 1.0)

EASINGS: dict[str, EasingFn] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
}


def get_easing(name: str | EasingFn) -> EasingFn:
    """名前（または関数そのもの）からイージング関数を解決する。"""
    if callable(name):
        return name
    key = str(name).strip().lower().replace("-", "_")
    try:
        return EASINGS[key]
    except KeyError:
        allowed = ", ".join(sorted(EASINGS))
        raise ValueError(f"unknown easing: {name!r}; allowed={allowed}") from None


__all__ = [
    "EasingFn",
    "EASINGS",
    "cubic_bezier",
    "ease_in",
    "ease_in_out",
    "ease_out",
    "get_easing",
    "lerp",
    "lerp_point",
    "linear",
]
