"""バンドルのインライン化ユースケース。

読み込み→埋め込み→検証→書き込みの一連処理。
すべての変換が成功してから書き込むため、失敗時にファイルは変更されない。
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from bundle_inliner.application.config import InlineConfig
from bundle_inliner.domain.bundle_model import InlineResult, StrategyKind
from bundle_inliner.domain.inline_strategy import DirectInline, EncodedInline, InlineStrategy
from bundle_inliner.infrastructure.text_io import read_text, write_text


ProgressCallback = Callable[[str], None]
"""進捗コールバック: 1行分のメッセージを受け取る"""


class InlineService:
    """インライン化サービス。DI で埋め込み方式を注入する。"""

    def __init__(
        self,
        strategy: InlineStrategy,
        progress: ProgressCallback | None = None,
    ) -> None:
        self._strategy = strategy
        self._progress = progress

    @classmethod
    def from_config(
        cls, config: InlineConfig, progress: ProgressCallback | None = None,
    ) -> InlineService:
        return cls(config.build_strategy(), progress)

    @property
    def strategy(self) -> InlineStrategy:
        return self._strategy

    def _report(self, message: str) -> None:
        if self._progress is not None:
            self._progress(message)

    def inline(
        self,
        template_path: str | Path,
        bundle_path: str | Path,
        output_path: str | Path | None = None,
    ) -> InlineResult:
        """バンドルをテンプレートに埋め込み、書き込む。

        Args:
            template_path: HTMLテンプレートのパス
            bundle_path: JavaScriptバンドルのパス
            output_path: 書き込み先 (None ならテンプレートを上書き)

        Returns:
            InlineResult

        Raises:
            ReadError: 入力ファイルを読めない
            PlaceholderNotFoundError: マウントポイントがない
            PayloadMismatchError: ペイロードが元に戻らない
            WriteError: 書き込めない
        """
        template_path = Path(template_path)
        output = Path(output_path) if output_path is not None else template_path
        kind = self._strategy.kind

        self._report("Reading files...")
        template = read_text(template_path)
        bundle = read_text(bundle_path)
        self._report(f"JS bundle size: {len(bundle) / 1024:.2f} KB")

        document = self._strategy.apply(template, bundle)
        if kind is StrategyKind.DIRECT:
            self._report(f"Escaped {document.escaped_count} script tag(s) in JS content")
        else:
            self._report(f"Encoded size: {document.embedded_size / 1024:.2f} KB")

        write_text(output, document.html)
        if kind is StrategyKind.DIRECT:
            self._report("Successfully inlined bundle into HTML")
        else:
            self._report("Successfully inlined encoded bundle into HTML")
        self._report(f"Output: {output}")

        return InlineResult(
            strategy=kind,
            template_path=template_path,
            output_path=output,
            bundle_size=len(bundle),
            embedded_size=document.embedded_size,
            escaped_count=document.escaped_count,
        )


def inline_direct(
    template_path: str | Path,
    bundle_path: str | Path,
    script_src: str,
    progress: ProgressCallback | None = None,
) -> InlineResult:
    """直接埋め込み方式でテンプレートを上書きする。"""
    return InlineService(DirectInline(script_src), progress).inline(template_path, bundle_path)


def inline_encoded(
    template_path: str | Path,
    bundle_path: str | Path,
    mount_id: str,
    label: str,
    progress: ProgressCallback | None = None,
) -> InlineResult:
    """エンコード埋め込み方式でテンプレートを上書きする。"""
    return InlineService(EncodedInline(mount_id, label), progress).inline(template_path, bundle_path)


def run(config: InlineConfig, progress: ProgressCallback | None = None) -> InlineResult:
    """設定に従ってインライン化を実行する。"""
    service = InlineService.from_config(config, progress)
    return service.inline(config.template_path, config.bundle_path, config.output_path)
