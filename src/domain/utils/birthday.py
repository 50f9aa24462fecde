"""生年月日と年齢の計算ユーティリティ."""

from datetime import date


def parse_birthday(text: str | None) -> date | None:
    """アンケートの生年月日（YYYY-MM-DD）をdateに変換する.

    空文字や不正な形式はNoneを返す。
    """
    if not text:
        return None
    try:
        return date.fromisoformat(text.strip()[:10])
    except ValueError:
        return None


def calculate_age(birthday: date, today: date) -> int:
    """満年齢を返す."""
    age = today.year - birthday.year
    if (today.month, today.day) < (birthday.month, birthday.day):
        age -= 1
    return age
