"""
html-grep のエントリポイント。

以下の処理を順序実行する:
1. コマンドライン引数の解析・検証
2. HTMLコンテンツの取得（ファイルまたはURL）
3. 指定IDの要素を抽出
4. 抽出結果をファイルまたは標準出力へ出力

各段階は HtmlGrepError を送出するのみで、終了コードへの変換は本モジュールで行う。
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

from html_grep.args import format_usage_text, parse_invocation
from html_grep.config import default_settings, load_settings
from html_grep.errors import HtmlGrepError, UsageError
from html_grep.loader import load_html_content
from html_grep.parser import extract_element_by_id
from html_grep.writer import write_result

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """ログ出力先を標準エラーに設定する。"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(argv: Optional[List[str]] = None) -> int:
    """
    パイプラインを1回実行し、終了コードを返す。

    エラーはすべて致命的として扱い、標準エラーへメッセージを1つ出力する。
    UsageError の場合は使い方も併せて出力する。

    Args:
        argv: コマンドライン引数（プログラム名を除く）。None の場合は sys.argv を使用する。

    Returns:
        成功時は 0、失敗時は 1。
    """
    try:
        invocation = parse_invocation(argv)
        _configure_logging(invocation.verbose)

        if invocation.config_path:
            settings = load_settings(invocation.config_path)
        else:
            settings = default_settings()

        html = load_html_content(invocation, settings)
        markup = extract_element_by_id(html, invocation.element_id, parser=settings.parser)
        write_result(markup, invocation.output_path)

    except UsageError as e:
        print(e, file=sys.stderr)
        print(format_usage_text(), file=sys.stderr)
        return EXIT_FAILURE

    except HtmlGrepError as e:
        logger.debug("failed with %s error", e.kind)
        print(e, file=sys.stderr)
        return EXIT_FAILURE

    except Exception as e:  # pylint: disable=broad-exception-caught
        print(f"Unhandled error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_SUCCESS


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
