"""
どこで: `util.paths`。
何を: スクリーンショット保存先ディレクトリの生成と、衝突しないファイル名の解決。
なぜ: ウィンドウ保存（P キー）と起動キャプチャが同じ場所・同じ命名規則を使うため。
"""

from __future__ import annotations

from pathlib import Path

from .utils import project_root


def ensure_screenshots_dir(root: Path | None = None) -> Path:
    """スクリーンショット出力先 `data/screenshot/` を作成して返す。

    - 既存の場合もそのまま Path を返す（`exist_ok=True`）。
    """
    out = (root if root is not None else project_root()) / "data" / "screenshot"
    out.mkdir(parents=True, exist_ok=True)
    return out


def unique_path(path: Path) -> Path:
    """既存ファイルと衝突しないよう `stem-1.png`, `stem-2.png` ... を返す。"""
    if not path.exists():
        return path
    i = 1
    while True:
        cand = path.with_name(f"{path.stem}-{i}{path.suffix}")
        if not cand.exists():
            return cand
        i += 1


__all__ = ["ensure_screenshots_dir", "unique_path"]
