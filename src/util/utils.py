"""
どこで: `util.utils`。
何を: プロジェクトルートの推定と YAML 設定（`configs/default.yaml` + `config.yaml`）の読み込み。
なぜ: ランナー/キャプチャの双方が同じ優先順位で設定を解決できるようにするため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    """YAML を辞書として読む。読めない/辞書でない場合は空辞書（フェイルソフト）。"""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("config ignored: %s (%s)", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - 上位に `pyproject.toml` / `configs/` / `.git` がある最も近いディレクトリ。
    - 見つからない場合は `start.parent.parent`（典型: <repo>/src/util → <repo>）。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / "pyproject.toml").exists()
            or (parent / "configs").is_dir()
            or (parent / ".git").exists()
        ):
            return parent
    return cur.parent.parent


def project_root() -> Path:
    return _find_project_root(Path(__file__).parent)


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（上書き）

    - トップレベルのキーが辞書同士の場合は 1 段だけマージする（セクション単位の部分上書き）。
    - いずれも存在しない/不正な場合は空辞書。
    """
    base_dir = root if root is not None else project_root()
    merged: Dict[str, Any] = {}
    for path in (base_dir / "configs" / "default.yaml", base_dir / "config.yaml"):
        if not path.exists():
            continue
        for key, value in _safe_load_yaml(path).items():
            prev = merged.get(key)
            if isinstance(prev, dict) and isinstance(value, dict):
                merged[key] = {**prev, **value}
            else:
                merged[key] = value
    return merged


def config_section(name: str, root: Path | None = None) -> Dict[str, Any]:
    """`load_config()` の 1 セクションを辞書で返す（無い/辞書でない場合は空）。"""
    section = load_config(root).get(name, {})
    return dict(section) if isinstance(section, dict) else {}


__all__ = ["config_section", "load_config", "project_root"]
