"""比較レポート生成用DTO."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from src.domain.services.list_summary_service import ListSummary
from src.domain.value_objects.member_application import MemberApplication


@dataclass
class MemberRowDto:
    """レポートの候補者1行分."""

    first_names: str
    last_name: str
    position: int
    # 過去の選挙年ごとの立候補歴ラベル（なしは"-"）
    previous_candidacies: list[str]
    age: int | None
    application: MemberApplication | None
    income_below_minimal_wage: bool = False
    income_below_average_wage: bool = False
    money_below_minimal_monthly_wage: bool = False
    is_millionaire: bool = False


@dataclass
class ListSectionDto:
    """レポートの名簿1件分."""

    name: str
    number: int | None
    can_fill_council: bool
    summary: ListSummary
    rows: list[MemberRowDto]


@dataclass
class ReportDto:
    """レポート全体."""

    latest_year: int
    previous_years: list[int]
    declaration_year: int
    available_seats: int
    generated_on: date
    sections: list[ListSectionDto] = field(
        default_factory=lambda: list[ListSectionDto]()
    )


@dataclass
class ProduceReportInputDto:
    """レポート生成の入力DTO."""

    years: list[int]
    available_seats: int
    output_path: Path


@dataclass
class ProduceReportOutputDto:
    """レポート生成の出力DTO."""

    output_path: Path
    list_count: int = 0
    member_count: int = 0
    members_with_data: int = 0
