"""
設定ファイル(settings.yaml)の読み込み処理を提供するモジュール。

settings.yaml から取得・抽出処理に必要な各種設定を読み込み、
アプリ内で扱いやすい dataclass に変換する。
--config が指定されない場合はファイルを読まず既定値を使用する。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import yaml

from html_grep.errors import ConfigError

DEFAULT_FETCH_TIMEOUT = 30.0
DEFAULT_FILE_ENCODING = "utf-8"
DEFAULT_PARSER = "html5lib"

SUPPORTED_PARSERS = ("html.parser", "lxml", "html5lib")


@dataclass(frozen=True)
class Settings:
    """
    アプリケーション全体設定。

    settings.yaml の内容を保持する。

    Attributes:
        fetch_timeout: HTTP取得のタイムアウト秒。None の場合は無期限に待つ。
        user_agent: HTTP取得時の User-Agent。None の場合は requests の既定値。
        file_encoding: ローカルファイル読み込み時の文字コード。
        parser: BeautifulSoup に渡すパーサ名。
    """

    fetch_timeout: Optional[float] = DEFAULT_FETCH_TIMEOUT
    user_agent: Optional[str] = None
    file_encoding: str = DEFAULT_FILE_ENCODING
    parser: str = DEFAULT_PARSER


def default_settings() -> Settings:
    """設定ファイル未指定時の既定設定を返す。"""
    return Settings()


def _parse_timeout(value) -> Optional[float]:
    """fetch_timeout の値を検証して float または None に変換する。"""
    if value is None:
        return None

    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid fetch_timeout: {value!r}") from e

    if timeout <= 0:
        raise ConfigError(f"fetch_timeout must be positive: {value!r}")

    return timeout


def load_settings(path: str) -> Settings:
    """
    settings.yaml を読み込み Settings に変換する。

    キーが存在しない項目は既定値を使用する。
    fetch_timeout に null を指定した場合はタイムアウトなしとなる。

    Args:
        path: settings.yaml のファイルパス。

    Returns:
        Settingsオブジェクト。

    Raises:
        ConfigError: ファイルが読めない、YAMLのパースに失敗した、
                     または設定値が不正な場合。
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Error loading config file: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing config file: {path} ({e})") from e

    data = data or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")

    parser = str(data.get("parser", DEFAULT_PARSER)).strip()
    if parser not in SUPPORTED_PARSERS:
        raise ConfigError(
            f"Unsupported parser: {parser} (choose from {', '.join(SUPPORTED_PARSERS)})"
        )

    user_agent = data.get("user_agent")

    return Settings(
        fetch_timeout=_parse_timeout(data.get("fetch_timeout", DEFAULT_FETCH_TIMEOUT)),
        user_agent=str(user_agent).strip() if user_agent else None,
        file_encoding=str(data.get("file_encoding", DEFAULT_FILE_ENCODING)),
        parser=parser,
    )
