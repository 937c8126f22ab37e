"""
どこで: `common.logging`。
何を: ルートロガーへ最小構成を 1 度だけ適用するヘルパを提供する。
なぜ: 各モジュールは `logging.getLogger(__name__)` のみを使い、ハンドラ構成はランナー/CLI 側に寄せるため。
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            return int(name)
        return int(getattr(logging, name, logging.INFO))
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - `level` 未指定時は `MBL_LOG_LEVEL`（`common.settings`）を用いる。
    - ルートロガーにハンドラが既にあれば何もしない（アプリ側の構成を尊重）。
    """
    if level is None:
        from .settings import get as _get_settings

        level = _get_settings().LOG_LEVEL
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=_coerce_level(level), format=LOG_FORMAT)


__all__ = ["LOG_FORMAT", "setup_default_logging"]
