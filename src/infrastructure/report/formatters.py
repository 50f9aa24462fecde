"""レポート表示用のフォーマッター."""

import html


_NBSP = "\u00a0"


def format_eur(value: float | None) -> str:
    """金額をリトアニア式（桁区切りNBSP・小数点カンマ・小数2桁）で表示する.

    例: 1234.5 → "1\u00a0234,50"。Noneは"-"。
    """
    if value is None:
        return "-"
    return f"{value:,.2f}".replace(",", _NBSP).replace(".", ",")


def format_decimal(value: float | None) -> str:
    """小数2桁で表示する（Noneは"-"）."""
    if value is None:
        return "-"
    return f"{value:.2f}"


def format_yes_no(value: bool | None) -> str:
    if value is None:
        return "-"
    return "Taip" if value else "Ne"


def decode_entities(text: str | None) -> str:
    """HTMLエンティティ（&quot;等）をデコードする."""
    if not text:
        return ""
    return html.unescape(text)
