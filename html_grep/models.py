"""
データモデル定義モジュール。

引数検証の結果を後続の取得・抽出・出力処理に渡すための
Invocation（1回の実行パラメータ）を定義する。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Invocation:
    """
    1回の実行で使用する検証済みパラメータを保持するモデル。

    - element_id は抽出対象要素の id 属性値（空文字不可）
    - file_path / url はどちらか一方のみ指定される
    - output_path が None の場合は標準出力へ書き出す

    検証は args.py で行われ、本モデル生成時点で I/O は一切発生していない。
    """

    element_id: str
    file_path: Optional[str] = None
    url: Optional[str] = None
    output_path: Optional[str] = None
    config_path: Optional[str] = None
    verbose: bool = False

    @property
    def source_mode(self) -> str:
        """取得元の種別（"file" または "url"）を返す。"""
        return "file" if self.file_path is not None else "url"

    @property
    def source(self) -> str:
        """取得元のファイルパスまたはURLを返す。"""
        return self.file_path if self.file_path is not None else str(self.url)
