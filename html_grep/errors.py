"""
アプリケーション固有の例外定義モジュール。

引数検証、コンテンツ取得、要素抽出、結果出力の各段階で発生する例外を
分類して扱うために、基底例外および派生例外を定義する。

各例外は ``kind`` 属性で種別を判別できる。終了コードへの変換は
cli.py 側でのみ行い、各段階はプロセスを終了させない。
"""


class HtmlGrepError(Exception):
    """html-grep 全体の基底例外。"""

    kind = "error"


class UsageError(HtmlGrepError):
    """コマンドライン引数が不足、または矛盾している場合の例外。"""

    kind = "usage"


class ConfigError(HtmlGrepError):
    """設定ファイルの読み込みや設定値が不正な場合の例外。"""

    kind = "config"


class LoadError(HtmlGrepError):
    """ファイル読み込みやHTTP取得に失敗した場合の例外。"""

    kind = "load"


class FetchTimeoutError(LoadError):
    """HTTP取得がタイムアウトした場合の例外。"""

    kind = "timeout"


class ElementNotFoundError(HtmlGrepError):
    """指定IDを持つ要素がドキュメント内に存在しない場合の例外。"""

    kind = "not_found"

    def __init__(self, element_id: str):
        super().__init__(f'Error: Element with ID "{element_id}" not found.')
        self.element_id = element_id


class HtmlParseError(HtmlGrepError):
    """HTMLのパース自体に失敗した場合の例外。"""

    kind = "parse"


class WriteError(HtmlGrepError):
    """出力ファイルへの書き込みに失敗した場合の例外。"""

    kind = "write"
