"""埋め込み方式の定義。

Protocol + 直接埋め込み / エンコード埋め込みの2実装。
domain層のためファイルI/Oは行わず、文字列変換のみ。
"""

from __future__ import annotations

import re
from typing import Protocol

from bundle_inliner.domain.bundle_model import InlinedDocument, StrategyKind
from bundle_inliner.domain.errors import PayloadMismatchError, PlaceholderNotFoundError
from bundle_inliner.domain.payload import (
    build_bootstrap,
    decode_payload,
    encode_payload,
    extract_payload,
    is_bootstrap,
)
from bundle_inliner.domain.script_escape import (
    count_script_close,
    describe_missing_placeholder,
    escape_script_close,
    find_module_placeholder,
)

# </body> 直前の module script。本文は最初の </script で終わる（HTMLの字句解析と同じ）
_TRAILING_MODULE_SCRIPT = re.compile(
    r"""<script\b[^>]*\btype=["']module["'][^>]*>(?:(?!</script).)*?</script>\s*</body>""",
    re.DOTALL | re.IGNORECASE,
)


class InlineStrategy(Protocol):
    """埋め込み方式のProtocol。"""

    kind: StrategyKind

    def apply(self, template: str, bundle: str) -> InlinedDocument:
        """テンプレートのマウントポイントをバンドルで置き換える。

        Args:
            template: HTMLテンプレート
            bundle: コンパイル済みJavaScript

        Returns:
            置換後のHTMLと統計

        Raises:
            PlaceholderNotFoundError: マウントポイントがない、または置換結果が入力と同じ
        """
        ...


def _ensure_changed(template: str, html: str) -> None:
    if html == template:
        raise PlaceholderNotFoundError("replacement left the document unchanged")


class DirectInline:
    """</script をエスケープしてバンドルをそのまま埋め込む。

    <script type="module" src="..."></script> を
    <script type="module">\\n(バンドル)\\n</script> に置き換える。
    """

    kind = StrategyKind.DIRECT

    def __init__(self, script_src: str) -> None:
        self.script_src = script_src

    def apply(self, template: str, bundle: str) -> InlinedDocument:
        escaped = escape_script_close(bundle)

        span = find_module_placeholder(template, self.script_src)
        if span is None:
            raise PlaceholderNotFoundError(describe_missing_placeholder(template, self.script_src))

        start, end = span
        html = f'{template[:start]}<script type="module">\n{escaped}\n</script>{template[end:]}'
        _ensure_changed(template, html)
        return InlinedDocument(
            html=html,
            embedded_size=len(escaped),
            escaped_count=count_script_close(bundle),
        )


class EncodedInline:
    """バンドルを base64 化し、実行時に復号・import するブートストラップを埋め込む。

    </body> 直前の <script type="module">...</script> を置き換える。
    書き込み前にブートストラップからペイロードを取り出して復号し、元のバンドルと一致することを確認する。
    """

    kind = StrategyKind.ENCODED

    def __init__(self, mount_id: str, label: str, noun: str = "calculator") -> None:
        self.mount_id = mount_id
        self.label = label
        self.noun = noun

    def apply(self, template: str, bundle: str) -> InlinedDocument:
        payload = encode_payload(bundle)
        bootstrap = build_bootstrap(payload, self.mount_id, self.label, self.noun)

        m = _TRAILING_MODULE_SCRIPT.search(template)
        if m is None:
            raise PlaceholderNotFoundError('no <script type="module"> block before </body>')
        if is_bootstrap(m.group(0)):
            raise PlaceholderNotFoundError("encoded bundle is already inlined")

        html = template[:m.start()] + bootstrap + "\n  </body>" + template[m.end():]
        _ensure_changed(template, html)
        self._verify(bootstrap, bundle)
        return InlinedDocument(html=html, embedded_size=len(payload))

    @staticmethod
    def _verify(bootstrap: str, bundle: str) -> None:
        try:
            decoded = decode_payload(extract_payload(bootstrap))
        except ValueError as e:
            raise PayloadMismatchError(f"Embedded payload cannot be decoded: {e}") from e
        if decoded != bundle:
            raise PayloadMismatchError("Embedded payload does not decode to the original bundle")
