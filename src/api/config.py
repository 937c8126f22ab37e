"""
どこで: `api.config`（設定解決）。
何を: 表示パラメータ `MotionBlurConfig` と、その解決関数 `resolve_config()`。
なぜ: 既定値・YAML・環境変数・明示引数の優先順位を 1 箇所で決め、不正値を起動前に `ValueError` で弾くため。

優先順位（低 → 高）:
1) 組込み既定値（`MotionBlurConfig()`）
2) `configs/default.yaml` → ルート `config.yaml` の `motion_blur` セクション
3) 環境変数（`MBL_SEED`, `MBL_RENDER_SCALE`）
4) `resolve_config()` に渡した None 以外の引数
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Sequence

from common.types import RGBA
from util.color import normalize_color, normalize_palette

logger = logging.getLogger(__name__)

CONFIG_SECTION = "motion_blur"

DEFAULT_PALETTE: tuple[str, ...] = ("red", "blue", "yellow", "red")


def _default_palette() -> tuple[RGBA, ...]:
    return normalize_palette(DEFAULT_PALETTE)


@dataclass(frozen=True)
class MotionBlurConfig:
    """表示パラメータ一式（不変）。

    Attributes
    ----------
    transition_duration : float
        1 回の位置遷移の秒数（>= 0）。
    tick_interval : float
        新しい目標位置を選ぶ周期 [s]（> 0）。
    blur_radius : float
        出力解像度でのぼかし半径 [px]（>= 0）。
    palette : tuple[RGBA, ...]
        円の色（順序・重複を保持）。
    background : RGBA
        背景色。
    width, height : int
        ウィンドウ/キャプチャのピクセルサイズ（>= 1）。
    fps : int
        フレームレート（>= 1）。
    render_scale : float
        合成の内部解像度倍率（0 < scale <= 1）。
    seed : int | None
        乱数シード（None で非決定的）。
    """

    transition_duration: float = 4.0
    tick_interval: float = 3.0
    blur_radius: float = 130.0
    palette: tuple[RGBA, ...] = field(default_factory=_default_palette)
    background: RGBA = (0.0, 0.0, 0.0, 1.0)
    width: int = 390
    height: int = 844
    fps: int = 60
    render_scale: float = 0.25
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.transition_duration < 0.0:
            raise ValueError(f"transition_duration must be >= 0, got {self.transition_duration}")
        if not self.tick_interval > 0.0:
            raise ValueError(f"tick_interval must be > 0, got {self.tick_interval}")
        if self.blur_radius < 0.0:
            raise ValueError(f"blur_radius must be >= 0, got {self.blur_radius}")
        if self.width < 1 or self.height < 1:
            raise ValueError(f"size must be >= 1x1, got {(self.width, self.height)}")
        if self.fps < 1:
            raise ValueError(f"fps must be >= 1, got {self.fps}")
        if not (0.0 < self.render_scale <= 1.0):
            raise ValueError(f"render_scale must be in (0, 1], got {self.render_scale}")

    @property
    def frame_dt(self) -> float:
        return 1.0 / float(self.fps)


def _coerce(name: str, value: Any) -> Any:
    """YAML/引数の生値を各フィールドの型へ寄せる。"""
    if value is None:
        return None
    try:
        if name in ("transition_duration", "tick_interval", "blur_radius", "render_scale"):
            return float(value)
        if name in ("width", "height", "fps", "seed"):
            return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid {name}: {value!r}") from e
    if name == "palette":
        return normalize_palette(value)
    if name == "background":
        return normalize_color(value)
    return value


_FIELD_NAMES = tuple(f.name for f in fields(MotionBlurConfig))
_COLOR_KEYS = ("background", "palette")


def _from_mapping(data: dict[str, Any], *, source: str) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in data.items():
        if key not in _FIELD_NAMES:
            logger.warning("%s: unknown key '%s' ignored", source, key)
            continue
        if value is None and key in _COLOR_KEYS:
            # YAML では未クォートの `#RRGGBB` がコメント扱いになり null になる
            logger.warning(
                "%s: '%s' is empty; keeping the default (quote hex colors, e.g. \"#1C1C1E\")",
                source,
                key,
            )
            continue
        coerced = _coerce(key, value)
        if coerced is not None:
            out[key] = coerced
    return out


def resolve_config(
    *,
    transition_duration: float | None = None,
    tick_interval: float | None = None,
    blur_radius: float | None = None,
    palette: Sequence[object] | None = None,
    background: object | None = None,
    width: int | None = None,
    height: int | None = None,
    fps: int | None = None,
    render_scale: float | None = None,
    seed: int | None = None,
    root: Path | None = None,
    use_files: bool = True,
) -> MotionBlurConfig:
    """既定値 → YAML → 環境変数 → 明示引数の順で上書きした設定を返す。

    Parameters
    ----------
    root : Path | None
        YAML を探すプロジェクトルート。None で自動推定。
    use_files : bool, default True
        False で YAML を読まない（テスト/埋め込み用）。

    Raises
    ------
    ValueError
        いずれかの値が不正な場合（メッセージに値を含む）。
    """
    values: dict[str, Any] = {}
    if use_files:
        from util.utils import config_section

        values.update(_from_mapping(config_section(CONFIG_SECTION, root), source="config"))

    from common.settings import get as _get_settings

    settings = _get_settings()
    if settings.SEED is not None:
        values["seed"] = settings.SEED
    if settings.RENDER_SCALE is not None:
        values["render_scale"] = settings.RENDER_SCALE

    explicit = {
        "transition_duration": transition_duration,
        "tick_interval": tick_interval,
        "blur_radius": blur_radius,
        "palette": palette,
        "background": background,
        "width": width,
        "height": height,
        "fps": fps,
        "render_scale": render_scale,
        "seed": seed,
    }
    values.update(_from_mapping({k: v for k, v in explicit.items() if v is not None}, source="args"))
    return replace(MotionBlurConfig(), **values)


__all__ = ["CONFIG_SECTION", "DEFAULT_PALETTE", "MotionBlurConfig", "resolve_config"]
