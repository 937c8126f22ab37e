"""
どこで: `engine.core` の更新インターフェース。
何を: 1 フレーム更新 `tick(dt)` を持つ `Tickable` Protocol を定義。
なぜ: タイマ/遷移/ドライバなどフレーム駆動の部品を、pyglet の有無に関わらず一様に進めるため。
"""

from typing import Protocol


class Tickable(Protocol):
    """1 フレーム分の更新を行うインターフェース。"""

    def tick(self, dt: float) -> None:
        """内部状態を `dt` 秒ぶん進める。"""
