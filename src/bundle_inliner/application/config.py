"""インライン化の設定。

プリセットから既定値を作り、CLI 引数で個別に上書きする。
パスはカレントディレクトリではなくプロジェクトルート基準で解決する。
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from bundle_inliner.domain.bundle_model import BundlePreset, StrategyKind
from bundle_inliner.domain.inline_strategy import DirectInline, EncodedInline, InlineStrategy

# src/bundle_inliner/application/config.py → プロジェクトルート
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ASSETS_DIR = PROJECT_ROOT / "assets"

DEFAULT_PRESETS: dict[StrategyKind, BundlePreset] = {
    StrategyKind.DIRECT: BundlePreset.CRYPTO_PORTFOLIO_OPTIMIZER,
    StrategyKind.ENCODED: BundlePreset.PORTFOLIO_OPTIMIZER,
}


@dataclass(frozen=True)
class InlineConfig:
    """1回のインライン化に必要な設定。"""

    strategy: StrategyKind
    template_path: Path
    bundle_path: Path
    script_src: str
    mount_id: str
    label: str
    noun: str = "calculator"
    output_path: Path | None = None

    @classmethod
    def from_preset(
        cls,
        strategy: StrategyKind,
        preset: BundlePreset | None = None,
        assets_dir: str | Path | None = None,
    ) -> InlineConfig:
        """プリセットから設定を作る。

        Args:
            strategy: 埋め込み方式
            preset: バンドルのプリセット (None なら方式ごとの既定)
            assets_dir: テンプレートとバンドルを置くディレクトリ

        Returns:
            <assets_dir>/<stem>.html と <assets_dir>/<stem>.js を使う設定
        """
        preset = preset or DEFAULT_PRESETS[strategy]
        assets = Path(assets_dir) if assets_dir is not None else DEFAULT_ASSETS_DIR
        return cls(
            strategy=strategy,
            template_path=assets / f"{preset.stem}.html",
            bundle_path=assets / f"{preset.stem}.js",
            script_src=preset.script_src,
            mount_id=preset.mount_id,
            label=preset.label,
            noun=preset.noun,
        )

    def with_overrides(self, **overrides: object) -> InlineConfig:
        """None 以外の値だけを上書きした設定を返す。"""
        values = {k: v for k, v in overrides.items() if v is not None}
        for key in ("template_path", "bundle_path", "output_path"):
            if key in values:
                values[key] = Path(values[key])  # type: ignore[arg-type]
        return replace(self, **values)  # type: ignore[arg-type]

    def build_strategy(self) -> InlineStrategy:
        if self.strategy is StrategyKind.DIRECT:
            return DirectInline(self.script_src)
        return EncodedInline(self.mount_id, self.label, self.noun)
