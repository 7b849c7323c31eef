"""テキストファイルI/O。

OSError / Unicode エラーをドメインの例外に変換する。
書き込みは同じディレクトリの一時ファイル経由で置き換えるため、失敗しても元のファイルは残る。
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

from bundle_inliner.domain.errors import ReadError, WriteError


def read_text(path: str | Path) -> str:
    """UTF-8 テキストとして読み込む。

    改行コードは変換しない（バンドルとテンプレートをバイト単位で保つ）。

    Raises:
        ReadError: ファイルが存在しない、読めない、UTF-8 でない場合
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(path, e) from e


def write_text(path: str | Path, content: str) -> None:
    """UTF-8 テキストとして上書き保存。

    一時ファイルに書き切ってから os.replace で差し替える。
    既存ファイルのパーミッションは引き継ぐ。

    Raises:
        WriteError: 書き込めない場合（元のファイルは変更されない）
    """
    path = Path(path)
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_name = f.name
            f.write(content)
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
        tmp_name = None
    except (OSError, UnicodeEncodeError) as e:
        raise WriteError(path, e) from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
