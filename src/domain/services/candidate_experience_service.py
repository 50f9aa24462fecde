"""過去の選挙での立候補歴を特定するドメインサービス."""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.value_objects.candidate_list import (
    CandidateList,
    CandidateListDocument,
    ListMember,
)


@dataclass(frozen=True)
class PreviousCandidacy:
    """過去の選挙での立候補情報."""

    year: int
    list_name: str
    position: int
    position_change: int  # 過去の順位 - 今回の順位

    @property
    def label(self) -> str:
        """「名簿名 (+N)」形式の表示文字列."""
        if self.position_change > 0:
            sign = "+"
        elif self.position_change < 0:
            sign = "-"
        else:
            sign = ""
        return f"{self.list_name} ({sign}{abs(self.position_change)})"


def find_member_in_document(
    member_name: str,
    document: CandidateListDocument,
) -> tuple[CandidateList, ListMember] | None:
    """同名の候補者を含む名簿を検索する.

    複数の名簿に同名の候補者がいる場合は最後に見つかったものを返す。
    """
    result: tuple[CandidateList, ListMember] | None = None
    for candidate_list in document.lists:
        for member in candidate_list.members:
            if member.name == member_name:
                result = (candidate_list, member)
                break
    return result


def find_previous_candidacy(
    member: ListMember,
    year: int,
    document: CandidateListDocument,
) -> PreviousCandidacy | None:
    """指定年の名簿データから候補者の立候補歴を取得する."""
    found = find_member_in_document(member.name, document)
    if found is None:
        return None
    candidate_list, previous_member = found
    return PreviousCandidacy(
        year=year,
        list_name=candidate_list.name,
        position=previous_member.position,
        position_change=previous_member.position - member.position,
    )
