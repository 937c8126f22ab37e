"""
どこで: `api.runner`（実行ランナー）。
何を: 色付き円のぼかしアニメーションを pyglet ウィンドウで全面表示する。
なぜ: 設定解決・シーン結線・フレーム駆動・キー操作を 1 関数にまとめ、`main.py` から 1 行で起動できるようにするため。

実行フロー（概要）:
1) 設定解決: `resolve_config()`（既定 → YAML → 環境変数 → 引数）。
2) シーン構築: `build_scene()` で animator / presenter / driver / compositor を結線。
3) ウィンドウ: `RenderWindow` を生成し、on_show/on_hide を driver.appear/disappear へ接続。
4) フレーム駆動: `FrameClock([driver])` を `pyglet.clock.schedule_interval` で `1/fps` ごとに実行。
5) 描画: on_draw ごとに Compositor でフレームを合成し、`TextureBlitter` で全面へ転送。

キー操作:
- `ESC`: 終了
- `P`: 画面を PNG 保存（`data/screenshot/`）

注意:
- ヘッドレス/仮想環境では pyglet の初期化に失敗する場合がある。その場合は `api.capture_launch` を使う。
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from common.logging import setup_default_logging

from .config import MotionBlurConfig, resolve_config
from .scene import build_scene

logger = logging.getLogger(__name__)


def _make_shutdown(*cleanups: Callable[[], None]) -> Callable[[], None]:
    """終了処理を 1 度だけ実行する関数を返す（ESC と on_close の両方から呼ぶ）。

    1 つの後始末が失敗しても残りは実行し、失敗はログに残す。
    """
    done = False

    def shutdown() -> None:
        nonlocal done
        if done:
            return
        done = True
        for fn in cleanups:
            try:
                fn()
            except Exception:
                logger.exception("cleanup failed: %r", fn)

    return shutdown


def run(
    *,
    width: int | None = None,
    height: int | None = None,
    fps: int | None = None,
    transition_duration: float | None = None,
    tick_interval: float | None = None,
    blur_radius: float | None = None,
    palette: Sequence[object] | None = None,
    background: object | None = None,
    render_scale: float | None = None,
    seed: int | None = None,
    init_only: bool = False,
) -> MotionBlurConfig:
    """ウィンドウを開いてアニメーションを実行する（ウィンドウを閉じると戻る）。

    Parameters
    ----------
    width, height : int | None
        ウィンドウサイズ [px]。None で設定/既定（390x844）。
    fps : int | None
        フレームレート。None で設定/既定（60）。
    transition_duration, tick_interval, blur_radius : float | None
        遷移秒数 / 再配置周期 / ぼかし半径。None で設定/既定（4.0 / 3.0 / 130.0）。
    palette : Sequence | None
        円の色（色名/Hex/タプル）。None で設定/既定（red, blue, yellow, red）。
    background : object | None
        背景色。None で設定/既定（black）。
    render_scale : float | None
        合成の内部解像度倍率。None で設定/既定（0.25）。
    seed : int | None
        乱数シード。
    init_only : bool, default False
        True で設定解決とシーン構築の検証のみ行い、pyglet を読み込まずに戻る。

    Returns
    -------
    MotionBlurConfig
        実際に使われた設定。
    """
    setup_default_logging()

    # ---- ① 設定解決 -------------------------------------------------
    config = resolve_config(
        transition_duration=transition_duration,
        tick_interval=tick_interval,
        blur_radius=blur_radius,
        palette=palette,
        background=background,
        width=width,
        height=height,
        fps=fps,
        render_scale=render_scale,
        seed=seed,
    )

    # ---- ② シーン構築 -----------------------------------------------
    scene = build_scene(config)
    logger.info(
        "scene: %d points, %dx%d @ %dfps, transition=%.2fs, interval=%.2fs, blur=%.1fpx",
        len(scene.animator),
        config.width,
        config.height,
        config.fps,
        config.transition_duration,
        config.tick_interval,
        config.blur_radius,
    )

    if init_only:
        scene.close()
        return config

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet
    from pyglet.window import key

    from engine.core.frame_clock import FrameClock
    from engine.core.render_window import RenderWindow
    from engine.export.image import save_window_png
    from engine.render.blitter import TextureBlitter

    # ---- ③ Window ---------------------------------------------------
    window = RenderWindow(config.width, config.height, bg_color=config.background)
    blitter = TextureBlitter()
    driver = scene.driver
    window.add_visibility_callbacks(on_show=driver.appear, on_hide=driver.disappear)

    def _draw_frame() -> None:
        blitter.upload(scene.render_frame())
        blitter.draw(window.width, window.height)

    window.add_draw_callback(_draw_frame)

    # ---- ④ Frame clock ----------------------------------------------
    frame_clock = FrameClock([driver])
    pyglet.clock.schedule_interval(frame_clock.tick, config.frame_dt)

    # ---- ⑤ pyglet イベント ------------------------------------------
    shutdown = _make_shutdown(
        lambda: pyglet.clock.unschedule(frame_clock.tick),
        scene.close,
        blitter.release,
        pyglet.app.exit,
    )

    @window.event
    def on_resize(w, h):  # noqa: ANN001
        # 合成は論理ピクセルで行い、転送時にフレームバッファへ伸ばす
        scene.compositor.resize(max(1, w), max(1, h))

    @window.event
    def on_key_press(sym, mods):  # noqa: ANN001
        if sym == key.ESCAPE:
            # window.close() は on_close を発火しないため、後始末を先に呼ぶ
            shutdown()
            window.close()
        if sym == key.P:
            try:
                save_window_png(window)
            except RuntimeError as e:
                logger.error("%s", e)

    @window.event
    def on_close():  # noqa: ANN001
        shutdown()

    # on_show が発火しないプラットフォームでも開始させる（appear は冪等）
    driver.appear()
    pyglet.app.run()
    return config


__all__ = ["run"]
