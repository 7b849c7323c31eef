"""バンドルのドメインモデル。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class StrategyKind(Enum):
    """埋め込み方式。"""

    DIRECT = "direct"
    ENCODED = "encoded"


class BundlePreset(Enum):
    """既知のバンドルのプリセット。"""

    PORTFOLIO_OPTIMIZER = ("portfolio-optimizer", "Portfolio Optimizer", "calculator")
    CRYPTO_PORTFOLIO_OPTIMIZER = (
        "crypto-portfolio-optimizer", "Crypto Portfolio Optimizer", "calculator",
    )

    def __init__(self, stem: str, label: str, noun: str) -> None:
        self._stem = stem
        self._label = label
        self._noun = noun

    @property
    def stem(self) -> str:
        return self._stem

    @property
    def label(self) -> str:
        return self._label

    @property
    def noun(self) -> str:
        """エラー表示で使う呼称（"Failed to load calculator" 等）。"""
        return self._noun

    @property
    def mount_id(self) -> str:
        return f"{self._stem}-root"

    @property
    def script_src(self) -> str:
        return f"/assets/{self._stem}.js"

    @classmethod
    def from_stem(cls, stem: str) -> BundlePreset:
        for preset in cls:
            if preset.stem == stem:
                return preset
        raise ValueError(f"Unknown preset: {stem}")


@dataclass(frozen=True)
class InlinedDocument:
    """埋め込み済みのHTMLと、埋め込んだ内容の統計。"""

    html: str
    embedded_size: int
    escaped_count: int = 0


@dataclass(frozen=True)
class InlineResult:
    """インライン化1回分の結果。"""

    strategy: StrategyKind
    template_path: Path
    output_path: Path
    bundle_size: int
    embedded_size: int
    escaped_count: int = 0

