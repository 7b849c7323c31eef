"""コンソール出力。すべての行に [Inline Bundle] を付ける。"""

from __future__ import annotations

import sys

PREFIX = "[Inline Bundle]"


def info(message: str) -> None:
    print(f"{PREFIX} {message}")


def error(message: str) -> None:
    print(f"{PREFIX} ERROR: {message}", file=sys.stderr)
