"""インライン化処理のエラー定義。

すべて InlineBundleError を基底とし、presentation層でのみ捕捉する。
"""

from __future__ import annotations

from pathlib import Path


class InlineBundleError(Exception):
    """バンドルのインライン化に失敗したことを示す基底例外。"""


class ReadError(InlineBundleError):
    """入力ファイルが存在しない、読めない、またはUTF-8として解釈できない。"""

    def __init__(self, path: str | Path, cause: BaseException | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Cannot read {self.path}{detail}")


class WriteError(InlineBundleError):
    """出力ファイルに書き込めない。"""

    def __init__(self, path: str | Path, cause: BaseException | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Cannot write {self.path}{detail}")


class PlaceholderNotFoundError(InlineBundleError):
    """テンプレートにマウントポイントが見つからない。

    置換結果が入力と同一になる場合（no-op）もこの例外とする。
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Script tag not found or not replaced! ({reason})")


class PayloadMismatchError(InlineBundleError):
    """埋め込んだペイロードを復号しても元のバンドルに戻らない。"""
