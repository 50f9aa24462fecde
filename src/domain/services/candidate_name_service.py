"""候補者名の分割・結合キー生成サービス."""


def split_member_name(name: str) -> tuple[str, str]:
    """候補者名を（名, 姓）に分割する.

    最後のトークンを姓とし、それ以前を全て名として扱う。
    例: "JONAS PETRAS JONAITIS" → ("JONAS PETRAS", "JONAITIS")
    """
    names = name.split(" ")
    return " ".join(names[:-1]), names[-1]


def make_application_key(list_name: str, member_name: str, position: int) -> str:
    """名簿名・候補者名・順位からアンケートの結合キーを生成する.

    一意性は前提としており、検証はしない。
    """
    return f"{list_name}-{member_name}-{position}"
