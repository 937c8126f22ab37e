from __future__ import annotations

import argparse
import sys
from pathlib import Path

from api import capture_launch, run
from common.logging import setup_default_logging


def main(argv: list[str] | None = None) -> int:
    """ウィンドウ表示（既定）または起動画面のヘッドレス保存（--capture）。"""
    parser = argparse.ArgumentParser(description="Dynamic motion blur background")
    parser.add_argument(
        "--capture",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help="ウィンドウを開かずに起動画面を PNG 保存する（PATH 省略で data/screenshot/）",
    )
    parser.add_argument("--settle", type=float, default=0.5, help="キャプチャ前に進める秒数")
    parser.add_argument("--seed", type=int, default=None, help="乱数シード")
    args = parser.parse_args(argv)

    setup_default_logging()
    if args.capture is not None:
        from api import resolve_config

        path = Path(args.capture) if args.capture else None
        out = capture_launch(path, settle_seconds=args.settle, config=resolve_config(seed=args.seed))
        print(out)
        return 0

    run(seed=args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
