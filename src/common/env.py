"""
どこで: `common.env`
何を: 環境変数を型付きで読むための小さなパーサ群。
なぜ: `os.getenv` と変換失敗時のガードを各所に書かずに済ませるため。
"""

from __future__ import annotations

import os
from typing import Optional


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """文字列環境変数を返す。未設定または空白のみなら既定値。"""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数環境変数を取得する（未設定/不正値は `default`）。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[int]
        既定値。
    min_value : Optional[int]
        下限。指定時は結果を下限へ丸める。
    """
    raw = env_str(name)
    if raw is None:
        return default
    try:
        val = int(raw)
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_float(
    name: str,
    default: Optional[float] = None,
    *,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> Optional[float]:
    """浮動小数環境変数を取得する（未設定/不正値は `default`、範囲外は丸め）。"""
    raw = env_str(name)
    if raw is None:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    if max_value is not None and val > max_value:
        val = max_value
    return val


__all__ = ["env_str", "env_int", "env_float"]
