"""</script エスケープとプレースホルダ検出。

直接埋め込み方式で使う。Pure Python（re のみ）。
"""

from __future__ import annotations

import re
from typing import Iterator

# HTMLの字句解析は大文字小文字を区別せずに </script で script 要素を閉じる
_SCRIPT_CLOSE = re.compile(r"</(script)", re.IGNORECASE)
_COMMENT_OPEN = "<!--"

# 中身が空の <script ...></script>
_EMPTY_SCRIPT_TAG = re.compile(r"<script\b(?P<attrs>[^>]*)>\s*</script\s*>", re.IGNORECASE)

# name="value" / name='value' / name=value / name
_ATTRIBUTE = re.compile(
    r"""(?P<name>[^\s"'>/=]+)"""
    r"""(?:\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\s"'>]+)))?"""
)

_INLINE_MODULE_SCRIPT = re.compile(r"<script\s+type=[\"']module[\"']\s*>\s*\S", re.IGNORECASE)


def escape_script_close(source: str) -> str:
    """</script を <\\/script に置換する（大文字小文字を問わず、元の表記は保つ）。

    文字列リテラル内も含めてすべての出現箇所を置換する。
    JavaScript 上は \\/ は / と同じ意味なので、バンドルの動作は変わらない。
    """
    return _SCRIPT_CLOSE.sub(r"<\\/\1", source)


def escape_string_literal(literal: str) -> str:
    """JavaScript 文字列リテラルを <script> 内に置ける形にする。

    </script に加えて <!-- もエスケープする（<!-- の後の <script で
    字句解析が double escaped 状態に入るのを防ぐ）。
    文字列リテラル内でのみ有効。\\! は ! と同じ意味になる。
    """
    return escape_script_close(literal).replace(_COMMENT_OPEN, "<\\!--")


def count_script_close(source: str) -> int:
    return len(_SCRIPT_CLOSE.findall(source))


def parse_attributes(attrs: str) -> dict[str, str]:
    """タグの属性文字列を辞書に変換。属性名は小文字化、値のない属性は空文字。"""
    result: dict[str, str] = {}
    for m in _ATTRIBUTE.finditer(attrs):
        name = m.group("name").lower()
        value = m.group("dq")
        if value is None:
            value = m.group("sq")
        if value is None:
            value = m.group("bare") or ""
        result.setdefault(name, value)
    return result


def _module_script_tags(template: str) -> Iterator[tuple[re.Match[str], str]]:
    for m in _EMPTY_SCRIPT_TAG.finditer(template):
        attrs = parse_attributes(m.group("attrs"))
        if attrs.get("type", "").lower() == "module" and "src" in attrs:
            yield m, attrs["src"]


def find_module_placeholder(template: str, script_src: str) -> tuple[int, int] | None:
    """src が script_src と一致する空の module script タグの範囲を返す。

    属性の順序、追加属性、引用符の種類、空白の違いは許容する。

    Args:
        template: HTMLテンプレート
        script_src: 期待する src 属性値 (例: "/assets/app.js")

    Returns:
        最初に一致したタグの (start, end)。見つからなければ None
    """
    for m, src in _module_script_tags(template):
        if src == script_src:
            return m.span()
    return None


def describe_missing_placeholder(template: str, script_src: str) -> str:
    """プレースホルダが見つからない理由を説明する文字列を返す。"""
    other_srcs = [src for _, src in _module_script_tags(template) if src != script_src]
    if other_srcs:
        found = ", ".join(other_srcs)
        return f"template references {found} instead of {script_src}"
    if _INLINE_MODULE_SCRIPT.search(template):
        return f"no <script type=\"module\" src=\"{script_src}\"> left, bundle appears to be inlined already"
    return f"no <script type=\"module\" src=\"{script_src}\"> in template"
