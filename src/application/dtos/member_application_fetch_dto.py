"""候補者アンケート取得用DTO."""

from dataclasses import dataclass, field


@dataclass
class FetchMemberApplicationsInputDto:
    """候補者アンケート取得の入力DTO."""

    year: int
    request_delay: float = 0.0


@dataclass
class FetchMemberApplicationsOutputDto:
    """候補者アンケート取得の出力DTO."""

    year: int
    total_members: int = 0
    found_applications: int = 0
    missing_applications: int = 0
    errors: int = 0
    error_details: list[str] = field(default_factory=lambda: list[str]())
