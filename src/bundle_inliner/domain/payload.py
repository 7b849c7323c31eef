"""base64 ペイロードとブートストラップスクリプトの生成。

エンコード埋め込み方式で使う。
ブートストラップはブラウザ上でペイロードを復号し、Blob URL 経由で
ES module として import する。失敗時はマウント要素にエラー表示を出す。
"""

from __future__ import annotations

import base64
import html
import json
import re

from bundle_inliner.domain.script_escape import escape_string_literal

PAYLOAD_BINDING = "const encodedScript = "

_PAYLOAD_LITERAL = re.compile(re.escape(PAYLOAD_BINDING) + r'("(?:[^"\\]|\\.)*")\s*;')

# atob はバイナリ文字列を返すため、Uint8Array に戻してから Blob に渡す。
# 文字列のまま渡すとマルチバイト文字が二重に UTF-8 化される。
_BOOTSTRAP_TEMPLATE = """
    <script type="module">
      // Decode and execute the base64-encoded bundle
      const encodedScript = __PAYLOAD__;
      const decodedScript = Uint8Array.from(atob(encodedScript), (c) => c.charCodeAt(0));
      const blob = new Blob([decodedScript], { type: 'text/javascript' });
      const url = URL.createObjectURL(blob);
      import(url)
        .catch(err => {
          console.error(__LOG_PREFIX__, err);
          const root = document.getElementById(__MOUNT_ID__);
          if (root) {
            root.innerHTML = __ERROR_HTML__;
          }
        });
    </script>"""

_ERROR_FRAGMENT = (
    '<div style="padding:20px;text-align:center;font-family:sans-serif;color:#DC2626">'
    "<h3>Failed to load {noun}</h3><p>Please refresh the page.</p></div>"
)


def encode_payload(source: str) -> str:
    """バンドルの UTF-8 バイト列を base64 文字列に変換。"""
    return base64.b64encode(source.encode("utf-8")).decode("ascii")


def decode_payload(payload: str) -> str:
    """encode_payload の逆変換。

    Raises:
        ValueError: base64 または UTF-8 として不正な場合
    """
    return base64.b64decode(payload, validate=True).decode("utf-8")


def _js_string(value: str) -> str:
    """<script> 内に置ける JavaScript 文字列リテラルに変換。"""
    return escape_string_literal(json.dumps(value))


def build_bootstrap(payload: str, mount_id: str, label: str, noun: str = "calculator") -> str:
    """ペイロードを埋め込んだブートストラップ <script> を生成。

    Args:
        payload: encode_payload の結果
        mount_id: 失敗時にエラー表示を入れる要素の id
        label: console.error に出すアプリ名
        noun: エラー表示での呼称

    Returns:
        先頭に改行とインデントを含む <script type="module">...</script>
    """
    error_html = _ERROR_FRAGMENT.format(noun=html.escape(noun))
    return (
        _BOOTSTRAP_TEMPLATE
        .replace("__LOG_PREFIX__", _js_string(f"[{label}] Failed to load:"))
        .replace("__MOUNT_ID__", _js_string(mount_id))
        .replace("__ERROR_HTML__", _js_string(error_html))
        .replace("__PAYLOAD__", json.dumps(payload))
    )


def is_bootstrap(script_block: str) -> bool:
    """script_block が build_bootstrap で生成したものかどうか。"""
    return PAYLOAD_BINDING in script_block and _PAYLOAD_LITERAL.search(script_block) is not None


def extract_payload(document: str) -> str:
    """生成済み HTML からペイロード文字列を取り出す。

    Raises:
        ValueError: ブートストラップが含まれない場合
    """
    m = _PAYLOAD_LITERAL.search(document)
    if m is None:
        raise ValueError("No encoded payload found in document")
    return json.loads(m.group(1))
