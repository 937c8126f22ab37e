"""
どこで: `common.settings`
何を: `MBL_*` 環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: YAML 設定より優先される上書き口を 1 箇所にまとめ、テストから差し替えやすくするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, env_int, env_str


@dataclass
class _Settings:
    # ロギング
    LOG_LEVEL: str = "INFO"

    # 乱数シード（None で非決定的）
    SEED: int | None = None

    # 内部ラスタ解像度の倍率（None で YAML/既定に委ねる）
    RENDER_SCALE: float | None = None


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込する。

    - `MBL_LOG_LEVEL`: ログレベル名（既定 INFO）
    - `MBL_SEED`: 整数シード
    - `MBL_RENDER_SCALE`: 0 より大きく 1 以下へ丸める
    """
    _settings.LOG_LEVEL = (env_str("MBL_LOG_LEVEL", "INFO") or "INFO").upper()
    _settings.SEED = env_int("MBL_SEED", None)
    scale = env_float("MBL_RENDER_SCALE", None, max_value=1.0)
    # 0 以下は無効値として扱う
    _settings.RENDER_SCALE = scale if scale is not None and scale > 0.0 else None


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
