from __future__ import annotations

from pathlib import Path

import pytest

from api.config import MotionBlurConfig, resolve_config
from util.color import normalize_color, normalize_palette

# What this tests
# - 既定値 / YAML / 環境変数 / 明示引数 の優先順位と不正値の ValueError


def _write_yaml(root: Path, rel: str, text: str) -> None:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.mark.smoke
def test_builtin_defaults() -> None:
    cfg = resolve_config(use_files=False)
    assert cfg == MotionBlurConfig()
    assert cfg.transition_duration == 4.0
    assert cfg.tick_interval == 3.0
    assert cfg.blur_radius == 130.0
    assert cfg.palette == normalize_palette(["red", "blue", "yellow", "red"])
    assert cfg.background == (0.0, 0.0, 0.0, 1.0)
    assert cfg.frame_dt == pytest.approx(1 / 60)


def test_yaml_root_overrides_default_section(tmp_path: Path) -> None:
    _write_yaml(
        tmp_path,
        "configs/default.yaml",
        "motion_blur:\n  tick_interval: 2.0\n  blur_radius: 40\n  palette: [green, '#112233']\n",
    )
    _write_yaml(tmp_path, "config.yaml", "motion_blur:\n  blur_radius: 10\n")
    cfg = resolve_config(root=tmp_path)
    assert cfg.tick_interval == 2.0
    assert cfg.blur_radius == 10.0
    assert cfg.palette == (normalize_color("green"), normalize_color("#112233"))


def test_env_overrides_yaml_and_args_override_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    from common.settings import reload_from_env

    _write_yaml(tmp_path, "configs/default.yaml", "motion_blur:\n  seed: 1\n  render_scale: 1.0\n")
    monkeypatch.setenv("MBL_SEED", "99")
    monkeypatch.setenv("MBL_RENDER_SCALE", "0.5")
    reload_from_env()
    cfg = resolve_config(root=tmp_path)
    assert cfg.seed == 99
    assert cfg.render_scale == 0.5
    cfg2 = resolve_config(root=tmp_path, seed=5, render_scale=0.75)
    assert cfg2.seed == 5
    assert cfg2.render_scale == 0.75


def test_unknown_yaml_keys_are_ignored(tmp_path: Path) -> None:
    _write_yaml(tmp_path, "configs/default.yaml", "motion_blur:\n  wobble: 3\n  fps: 30\n")
    cfg = resolve_config(root=tmp_path)
    assert cfg.fps == 30


def test_broken_yaml_falls_back_to_defaults(tmp_path: Path) -> None:
    _write_yaml(tmp_path, "configs/default.yaml", "motion_blur: [unclosed\n")
    assert resolve_config(root=tmp_path) == MotionBlurConfig()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tick_interval": 0.0},
        {"transition_duration": -1.0},
        {"blur_radius": -0.5},
        {"width": 0},
        {"fps": 0},
        {"render_scale": 1.5},
        {"palette": ["red", "nope"]},
        {"background": "#12"},
        {"fps": "fast"},
    ],
)
def test_invalid_values_raise(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        resolve_config(use_files=False, **kwargs)  # type: ignore[arg-type]


def test_duplicate_palette_entries_are_preserved() -> None:
    cfg = resolve_config(use_files=False, palette=["red", "red"])
    assert len(cfg.palette) == 2
    assert cfg.palette[0] == cfg.palette[1]


def test_unquoted_0x_hex_in_yaml_is_read_as_packed_color(tmp_path: Path) -> None:
    # YAML は 0x1C1C1E を整数として読む
    _write_yaml(
        tmp_path,
        "configs/default.yaml",
        "motion_blur:\n  background: 0x1C1C1E\n  palette: [0xFF3B30, '#007AFF']\n",
    )
    cfg = resolve_config(root=tmp_path)
    assert cfg.background == normalize_color("#1C1C1E")
    assert cfg.palette == (normalize_color("red"), normalize_color("blue"))


def test_unquoted_hash_hex_in_yaml_warns_and_keeps_default(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    # 未クォートの `#...` は YAML のコメントになり値は null
    _write_yaml(tmp_path, "configs/default.yaml", "motion_blur:\n  background: #1C1C1E\n")
    with caplog.at_level("WARNING", logger="api.config"):
        cfg = resolve_config(root=tmp_path)
    assert cfg.background == MotionBlurConfig().background
    assert any("background" in r.getMessage() for r in caplog.records)


def test_quoted_hash_hex_in_yaml(tmp_path: Path) -> None:
    _write_yaml(tmp_path, "configs/default.yaml", "motion_blur:\n  background: '#1C1C1E'\n")
    cfg = resolve_config(root=tmp_path)
    assert cfg.background == normalize_color("#1C1C1E")
