"""コマンドラインインターフェース。

Usage:
    uv run inline-bundle                # 直接埋め込み
    uv run inline-bundle-encoded        # base64 埋め込み
    uv run python -m bundle_inliner encoded --preset portfolio-optimizer
"""

from __future__ import annotations

import argparse
from typing import Sequence

from bundle_inliner.application.config import InlineConfig
from bundle_inliner.application.inline_service import run
from bundle_inliner.domain.bundle_model import BundlePreset, StrategyKind
from bundle_inliner.domain.errors import InlineBundleError
from bundle_inliner.presentation import console


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--preset",
        choices=[p.stem for p in BundlePreset],
        help="Bundle preset (default depends on strategy)",
    )
    parser.add_argument("--assets-dir", help="Directory holding <preset>.html and <preset>.js")
    parser.add_argument("--template", help="HTML template path (overwritten unless --output)")
    parser.add_argument("--bundle", help="Compiled JS bundle path")
    parser.add_argument("--output", help="Write the result here instead of the template")
    parser.add_argument("--src", help='Placeholder src, e.g. "/assets/app.js" (direct only)')
    parser.add_argument("--mount-id", help="Element id for the load error message (encoded only)")
    parser.add_argument("--label", help="Name used in the console error (encoded only)")


def build_parser(strategy: StrategyKind | None = None) -> argparse.ArgumentParser:
    """strategy を固定しない場合は第1引数で direct / encoded を選ぶ。"""
    parser = argparse.ArgumentParser(
        prog="inline-bundle",
        description="Inline a compiled JS bundle into an HTML template",
    )
    if strategy is None:
        parser.add_argument("strategy", choices=[k.value for k in StrategyKind])
    _add_common_arguments(parser)
    return parser


def config_from_args(args: argparse.Namespace, strategy: StrategyKind) -> InlineConfig:
    preset = BundlePreset.from_stem(args.preset) if args.preset else None
    config = InlineConfig.from_preset(strategy, preset, args.assets_dir)
    return config.with_overrides(
        template_path=args.template,
        bundle_path=args.bundle,
        output_path=args.output,
        script_src=args.src,
        mount_id=args.mount_id,
        label=args.label,
    )


def main(argv: Sequence[str] | None = None, strategy: StrategyKind | None = None) -> int:
    """CLI を実行し、終了コードを返す。"""
    args = build_parser(strategy).parse_args(argv)
    kind = strategy or StrategyKind(args.strategy)
    config = config_from_args(args, kind)

    try:
        run(config, progress=console.info)
    except InlineBundleError as e:
        console.error(str(e))
        return 1
    return 0


def main_direct(argv: Sequence[str] | None = None) -> int:
    return main(argv, StrategyKind.DIRECT)


def main_encoded(argv: Sequence[str] | None = None) -> int:
    return main(argv, StrategyKind.ENCODED)
