"""
HTMLコンテンツの取得処理。

ローカルファイルまたはURLからHTML文字列を取得する責務を持つ。
HTMLの解析や要素抽出は parser.py 側で行い、本モジュールは読み込みと通信のみを担当する。

例外方針:
- OSError / UnicodeDecodeError / requests 由来の例外は LoadError に変換して上位へ伝播する。
- タイムアウトは FetchTimeoutError として区別する。
- リトライは行わない（1回のみ試行）。
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from html_grep.config import Settings, default_settings
from html_grep.errors import FetchTimeoutError, LoadError
from html_grep.models import Invocation

logger = logging.getLogger(__name__)


def read_html_file(path: str, encoding: str = "utf-8") -> str:
    """
    ローカルファイルを文字列として読み込む。

    Args:
        path: HTMLファイルのパス。
        encoding: ファイルの文字コード。

    Returns:
        ファイル内容の文字列。

    Raises:
        LoadError: ファイルが存在しない、権限がない、文字コードが不正な場合。
    """
    try:
        with open(path, "r", encoding=encoding) as f:
            return f.read()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise LoadError(f"Error loading HTML content: {e}") from e


def fetch_html(url: str, timeout: Optional[float] = 30, user_agent: Optional[str] = None) -> str:
    """
    指定URLへHTTP GETを行い、レスポンスHTML文字列を返す。

    Content-Type に charset が含まれない場合は apparent_encoding で復号する。

    Args:
        url: 取得対象URL。
        timeout: requests.get に渡すタイムアウト秒。None の場合は無期限。
        user_agent: User-Agent ヘッダ。None の場合は送信しない。

    Returns:
        HTML文字列。

    Raises:
        FetchTimeoutError: タイムアウトした場合。
        LoadError: HTTPエラーや通信失敗が発生した場合。
    """
    headers = {"User-Agent": user_agent} if user_agent else None
    try:
        r = requests.get(url, headers=headers, timeout=timeout)
        r.raise_for_status()
        if "charset" not in r.headers.get("Content-Type", "").lower():
            r.encoding = r.apparent_encoding
        return r.text
    except requests.Timeout as e:
        raise FetchTimeoutError(f"Error: request timed out: {url} ({e})") from e
    except requests.RequestException as e:
        raise LoadError(f"Error loading HTML content: {e}") from e


def load_html_content(invocation: Invocation, settings: Optional[Settings] = None) -> str:
    """Invocation の取得元に応じてファイル読み込みまたはHTTP取得を行う。"""
    settings = settings or default_settings()

    logger.debug("loading %s: %s", invocation.source_mode, invocation.source)
    if invocation.file_path is not None:
        html = read_html_file(invocation.file_path, encoding=settings.file_encoding)
    else:
        html = fetch_html(
            str(invocation.url),
            timeout=settings.fetch_timeout,
            user_agent=settings.user_agent,
        )
    logger.debug("loaded %d characters", len(html))
    return html
