"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: pyglet Window（背景クリア/描画コールバック/表示・非表示イベントの転送）を提供。
なぜ: ドライバやレンダラを pyglet のイベント名から切り離し、最小インターフェイスで結線するため。

使用例:
    win = RenderWindow(390, 844, bg_color=(0, 0, 0, 1))
    win.add_draw_callback(lambda: blitter.draw(win.width, win.height))
    win.add_visibility_callbacks(on_show=driver.appear, on_hide=driver.disappear)
    pyglet.app.run()
"""

from __future__ import annotations

import logging
from typing import Callable

import pyglet
from pyglet.gl import glClearColor

logger = logging.getLogger(__name__)


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        caption: str = "Dynamic Motion Blur",
        bg_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0),
        resizable: bool = True,
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            caption: タイトル。
            bg_color: 背景色 RGBA（0.0〜1.0）。フレーム転送前のクリア色。
        """
        super().__init__(width=width, height=height, caption=caption, resizable=resizable, vsync=True)
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []
        self._show_callbacks: list[Callable[[], None]] = []
        self._hide_callbacks: list[Callable[[], None]] = []

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """`on_draw` 中に呼び出す描画関数を登録する（登録順に呼ぶ）。"""
        self._draw_callbacks.append(func)

    def add_visibility_callbacks(
        self,
        *,
        on_show: Callable[[], None] | None = None,
        on_hide: Callable[[], None] | None = None,
    ) -> None:
        """表示/非表示（最小化を含む）で呼ぶ関数を登録する。"""
        if on_show is not None:
            self._show_callbacks.append(on_show)
        if on_hide is not None:
            self._hide_callbacks.append(on_hide)

    # ---- pyglet 既定のイベント名 ----
    def on_draw(self):
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    def on_show(self):
        logger.debug("window shown")
        for cb in self._show_callbacks:
            cb()

    def on_hide(self):
        logger.debug("window hidden")
        for cb in self._hide_callbacks:
            cb()
