"""
どこで: `engine.render` サブパッケージ。
何を: 点 → 塗り円合成 → ぼかし → 背景合成（Compositor）と、結果の画面転送（TextureBlitter）。
なぜ: 合成はヘッドレスで検証し、GL 依存は転送部分だけに閉じ込めるため。
"""

from .compositor import Compositor

__all__ = ["Compositor"]
