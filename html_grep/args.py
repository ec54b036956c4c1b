"""
コマンドライン引数の解析と検証。

argparse で --id / --file / --url / --output を解析し、
必須項目と排他条件を検証して Invocation を生成する。

例外方針:
- 検証失敗は UsageError を送出し、プロセスの終了は cli.py に任せる。
- argparse 自身のエラー（未知のフラグ等）も UsageError に変換する。
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from html_grep.errors import UsageError
from html_grep.models import Invocation

PROG = "html-grep"

_EXAMPLES = """\
Examples:
  html-grep --id=content --file=webpage.html
  html-grep --id=main --url=https://example.com
  html-grep --id=header --file=index.html --output=header.html
"""


class _ArgumentParser(argparse.ArgumentParser):
    """エラー時に終了せず UsageError を送出する ArgumentParser。"""

    def error(self, message):
        raise UsageError(f"Error: {message}")


def build_parser() -> argparse.ArgumentParser:
    """html-grep の ArgumentParser を生成して返す。"""
    parser = _ArgumentParser(
        prog=PROG,
        usage=(
            "%(prog)s --id=targetElementId "
            "[--file=input.html | --url=https://example.com] [--output=output.html]"
        ),
        description="Extract the HTML element with the given ID from a document.",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("--id", dest="element_id", help="ID of the HTML element to extract (required)")
    parser.add_argument("--file", dest="file_path", help="Path to a local HTML file")
    parser.add_argument("--url", help="URL of a webpage to fetch")
    parser.add_argument("--output", dest="output_path", help="Path to save the output (defaults to stdout)")
    parser.add_argument("--config", dest="config_path", help="Path to a settings.yaml file")
    parser.add_argument("--verbose", action="store_true", help="Write debug logs to stderr")
    return parser


def format_usage_text() -> str:
    """検証エラー時に表示する使い方テキストを返す。"""
    return build_parser().format_help()


def validate_namespace(ns: argparse.Namespace) -> Invocation:
    """
    解析済み引数を検証し Invocation に変換する。

    検証順序:
    1. --id が存在し空でないこと
    2. --file / --url のどちらか一方のみが指定されていること

    URLの形式やファイルの存在はここでは検証しない（取得時に LoadError となる）。

    Args:
        ns: argparse の解析結果。

    Returns:
        検証済みの Invocation。

    Raises:
        UsageError: 必須項目の欠落、または --file と --url の同時指定。
    """
    if not ns.element_id:
        raise UsageError("Error: --id argument is required.")

    if not ns.file_path and not ns.url:
        raise UsageError("Error: Either --file or --url argument is required.")

    if ns.file_path and ns.url:
        raise UsageError("Error: Please specify either --file or --url, not both.")

    return Invocation(
        element_id=ns.element_id,
        file_path=ns.file_path or None,
        url=ns.url or None,
        output_path=ns.output_path or None,
        config_path=ns.config_path or None,
        verbose=bool(ns.verbose),
    )


def parse_invocation(argv: Optional[List[str]] = None) -> Invocation:
    """
    コマンドライン引数を解析・検証して Invocation を返す。

    未知の引数は --id / 取得元の検証後に UsageError とする。
    フラグの省略形（--fil 等）は受け付けない。
    """
    parser = build_parser()
    ns, extras = parser.parse_known_args(argv)
    invocation = validate_namespace(ns)
    if extras:
        parser.error(f"unrecognized arguments: {' '.join(extras)}")
    return invocation
