"""抽出結果をファイルまたは標準出力へ書き出す。"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from html_grep.errors import WriteError


def write_result(markup: str, output_path: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """
    抽出したマークアップを出力する。

    output_path 指定時はファイル全体を上書きし、保存先を標準出力に表示する。
    未指定時は stream（既定は標準出力）へマークアップと改行のみを書き出す。

    Args:
        markup: 抽出した要素のマークアップ文字列。
        output_path: 出力ファイルパス。
        stream: output_path 未指定時の出力先。

    Raises:
        WriteError: ファイルへの書き込みに失敗した場合。
    """
    out = stream if stream is not None else sys.stdout

    if output_path is None:
        print(markup, file=out)
        return

    try:
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(markup)
    except OSError as e:
        raise WriteError(f"Error writing to output file: {e}") from e

    print(f"Output saved to {output_path}", file=out)
