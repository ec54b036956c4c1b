"""
HTMLパーサ。

HTML文字列を BeautifulSoup でパースし、id 属性が完全一致する要素を特定して
その要素自身のタグ・属性・子孫を含むマークアップ文字列へ変換する責務を持つ。

想定仕様:
- 既定パーサは html5lib（HTML5 の暗黙の終了タグ規則を適用する）
- id の照合は大文字小文字を区別した完全一致
- 重複IDを含む不正なドキュメントではドキュメント順で最初の要素を返す
- void 要素は自己終了スラッシュなし（<br>）で出力する
- テキストは &, <, > のみエスケープし、script/style の中身はそのまま出力する
"""

from __future__ import annotations

import logging
from typing import Any

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.builder import ParserRejectedMarkup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from html_grep.config import DEFAULT_PARSER
from html_grep.errors import ConfigError, ElementNotFoundError, HtmlParseError

logger = logging.getLogger(__name__)

OUTER_HTML_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)


def find_element_by_id(html: str, element_id: str, parser: str = DEFAULT_PARSER) -> Any:
    """
    HTML文字列から id 属性が element_id に一致する要素を返す。

    Args:
        html: 対象ドキュメントのHTML文字列。
        element_id: 抽出対象の id 属性値。
        parser: BeautifulSoup に渡すパーサ名。

    Returns:
        BeautifulSoup の Tag。

    Raises:
        ElementNotFoundError: 一致する要素が存在しない場合。
        HtmlParseError: パーサがマークアップを受け付けなかった場合。
        ConfigError: 指定パーサがインストールされていない場合。
    """
    try:
        soup = BeautifulSoup(html, parser)
    except FeatureNotFound as e:
        raise ConfigError(f"HTML parser is not available: {parser} ({e})") from e
    except ParserRejectedMarkup as e:
        raise HtmlParseError(f"Error parsing HTML or extracting element: {e}") from e

    logger.debug("parsed document with %s", parser)

    element = soup.find(id=element_id)
    if element is None:
        raise ElementNotFoundError(element_id)

    return element


def serialize_element(element: Any) -> str:
    """要素を外側のタグを含むマークアップ文字列へ変換する。"""
    return element.decode(formatter=OUTER_HTML_FORMATTER)


def extract_element_by_id(html: str, element_id: str, parser: str = DEFAULT_PARSER) -> str:
    """id に一致する要素を探し、そのマークアップ文字列を返す。"""
    return serialize_element(find_element_by_id(html, element_id, parser=parser))
