"""インポーターモジュール共通のユーティリティ関数."""

import re

from pathlib import Path


_WHITESPACE_RE = re.compile(r"\s")
# 符号付きの10進数のみ（NaN・Infinity・指数表記は不可）
_AMOUNT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def normalize_name(text: str) -> str:
    """名簿名・候補者名を正規化する（前後空白除去・大文字化）."""
    return text.strip().upper()


def normalize_number(value: str) -> float:
    """CSVの金額文字列を数値に変換する.

    "1 234,56" → 1234.56。空文字は0として扱う。

    Raises:
        ValueError: 10進数として解釈できない場合
    """
    cleaned = _WHITESPACE_RE.sub("", value or "").replace(",", ".")
    if not cleaned:
        return 0.0
    if not _AMOUNT_RE.fullmatch(cleaned):
        raise ValueError(f"金額ではありません: {value!r}")
    return float(cleaned)


def read_text(path: Path) -> str:
    """テキストファイルを読み込む（BOMを除去）."""
    return path.read_text(encoding="utf-8-sig")
