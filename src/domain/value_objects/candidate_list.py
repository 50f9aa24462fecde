"""候補者名簿の値オブジェクト — Domain layer."""

from dataclasses import dataclass, field


@dataclass
class ListMember:
    """名簿に掲載された候補者."""

    name: str
    position: int


@dataclass
class CandidateList:
    """候補者名簿（政党・選挙委員会ごと）."""

    name: str
    number: int | None = None
    members: list[ListMember] = field(default_factory=lambda: list[ListMember]())


@dataclass
class CandidateListDocument:
    """1選挙年分の名簿データ."""

    lists: list[CandidateList]
    list_names: list[str]

    @classmethod
    def from_lists(cls, lists: list[CandidateList]) -> "CandidateListDocument":
        """名簿リストから名簿名（昇順）付きのドキュメントを生成する."""
        return cls(lists=lists, list_names=sorted(lst.name for lst in lists))
