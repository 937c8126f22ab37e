from __future__ import annotations

import numpy as np

from api import build_scene, resolve_config
from engine.animation import Visibility


def test_build_scene_wires_palette_and_size() -> None:
    cfg = resolve_config(use_files=False, width=40, height=30, seed=3, render_scale=1.0)
    scene = build_scene(cfg)
    assert len(scene.animator) == 4
    assert scene.compositor.size == (40, 30)
    assert scene.driver.state is Visibility.HIDDEN
    frame = scene.render_frame()
    assert frame.shape == (30, 40, 4)
    scene.close()


def test_same_seed_gives_same_positions() -> None:
    cfg = resolve_config(use_files=False, seed=11)
    a = build_scene(cfg)
    b = build_scene(cfg)
    assert [p.position for p in a.animator.points] == [p.position for p in b.animator.points]
    a.driver.appear()
    b.driver.appear()
    np.testing.assert_allclose(
        [p.position for p in a.animator.points], [p.position for p in b.animator.points]
    )
