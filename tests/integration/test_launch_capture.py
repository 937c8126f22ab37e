from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from api import capture_launch, resolve_config


@pytest.mark.integration
# What this tests
# - 起動 → 表示開始 → 数フレーム進行 → PNG 保存 がディスプレイ無しでクラッシュせず完了する
def test_capture_launch_writes_png_of_configured_size(tmp_path: Path) -> None:
    cfg = resolve_config(use_files=False, width=96, height=64, fps=30, seed=7)
    out = capture_launch(tmp_path / "launch.png", settle_seconds=0.5, config=cfg)
    assert out == tmp_path / "launch.png"
    assert out.exists()
    with Image.open(out) as img:
        assert img.size == (96, 64)
        assert img.format == "PNG"


@pytest.mark.integration
def test_capture_launch_default_path_uses_screenshot_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import api.launch as launch_mod

    monkeypatch.setattr(launch_mod, "ensure_screenshots_dir", lambda: tmp_path)
    cfg = resolve_config(use_files=False, width=32, height=32, seed=1)
    first = capture_launch(settle_seconds=0.0, config=cfg)
    second = capture_launch(settle_seconds=0.0, config=cfg)
    assert first.name == "launch_screen_32x32.png"
    assert second.name == "launch_screen_32x32-1.png"


def test_capture_launch_rejects_negative_settle(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        capture_launch(tmp_path / "x.png", settle_seconds=-1.0)
