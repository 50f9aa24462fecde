"""名簿テキスト変換用DTO."""

from dataclasses import dataclass


@dataclass
class TransformCandidateListsInputDto:
    """名簿テキスト変換の入力DTO."""

    year: int


@dataclass
class TransformCandidateListsOutputDto:
    """名簿テキスト変換の出力DTO."""

    year: int
    list_count: int = 0
    member_count: int = 0
