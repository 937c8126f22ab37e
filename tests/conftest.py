"""共通フィクスチャ。

- 乱数シード固定
- 既定パレットの animator / presenter / driver 一式
- 環境変数の影響を受けない設定
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from engine.animation import PositionAnimator, PresentationDriver, TransitionPresenter

PALETTE = ["red", "blue", "yellow", "red"]


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """`MBL_*` を外した状態で設定を読み直す。"""
    from common.settings import reload_from_env

    for name in ("MBL_SEED", "MBL_RENDER_SCALE", "MBL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reload_from_env()
    yield
    monkeypatch.undo()
    reload_from_env()


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(2025)


@pytest.fixture()
def animator(rng: np.random.Generator) -> PositionAnimator:
    return PositionAnimator(PALETTE, rng=rng)


@pytest.fixture()
def presenter(animator: PositionAnimator) -> Iterator[TransitionPresenter]:
    p = TransitionPresenter(animator)
    yield p
    p.close()


@pytest.fixture()
def driver(animator: PositionAnimator, presenter: TransitionPresenter) -> PresentationDriver:
    return PresentationDriver(animator, presenter, transition_duration=4.0, tick_interval=3.0)
