from __future__ import annotations

from typing import Iterator

import pytest

pyglet = pytest.importorskip("pyglet")
# ウィンドウ生成前に設定する（ディスプレイ不要の EGL コンテキスト）
pyglet.options["headless"] = True

from engine.animation import PresentationDriver, Visibility  # noqa: E402

# What this tests
# - RenderWindow の on_show/on_hide が driver.appear/disappear へ転送される
# - GL コンテキストを作れない環境ではスキップ


@pytest.fixture()
def window() -> Iterator[object]:
    try:
        from engine.core.render_window import RenderWindow

        win = RenderWindow(64, 48, resizable=False)
    except Exception as e:  # ヘッドレス GL が無い CI など
        pytest.skip(f"cannot create a GL window: {e}")
    yield win
    win.close()


@pytest.mark.integration
def test_visibility_events_drive_presentation(window, driver: PresentationDriver) -> None:
    window.add_visibility_callbacks(on_show=driver.appear, on_hide=driver.disappear)
    assert driver.state is Visibility.HIDDEN

    window.on_show()
    assert driver.is_visible
    assert driver.reassign_count == 1

    window.on_hide()
    assert driver.state is Visibility.HIDDEN
    assert not driver.timer.is_running
    driver.tick(10.0)
    assert driver.reassign_count == 1

    window.on_show()
    assert driver.reassign_count == 2


@pytest.mark.integration
def test_draw_callbacks_run_in_registration_order(window) -> None:
    calls: list[str] = []
    window.add_draw_callback(lambda: calls.append("a"))
    window.add_draw_callback(lambda: calls.append("b"))
    window.switch_to()
    window.on_draw()
    assert calls == ["a", "b"]
