"""bundle_model.py のテスト。"""

import pytest

from bundle_inliner.domain.bundle_model import BundlePreset, StrategyKind


class TestBundlePreset:
    def test_derived_values(self) -> None:
        preset = BundlePreset.PORTFOLIO_OPTIMIZER
        assert preset.stem == "portfolio-optimizer"
        assert preset.mount_id == "portfolio-optimizer-root"
        assert preset.script_src == "/assets/portfolio-optimizer.js"
        assert preset.label == "Portfolio Optimizer"
        assert preset.noun == "calculator"

    def test_from_stem(self) -> None:
        assert BundlePreset.from_stem("crypto-portfolio-optimizer") is BundlePreset.CRYPTO_PORTFOLIO_OPTIMIZER

    def test_from_stem_unknown(self) -> None:
        with pytest.raises(ValueError):
            BundlePreset.from_stem("mortgage-calculator")


class TestStrategyKind:
    def test_values(self) -> None:
        assert StrategyKind("direct") is StrategyKind.DIRECT
        assert StrategyKind("encoded") is StrategyKind.ENCODED
