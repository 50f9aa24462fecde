"""候補者名簿比較レポート生成ユースケース.

処理フロー:
    1. 全選挙年の変換済み名簿データを読み込み（新しい順に並べる）
    2. 最新年の候補者アンケートを読み込み
    3. 名簿ごとに集計、候補者ごとに過去の立候補歴を特定
    4. HTMLレポートを出力
"""

import logging

from collections.abc import Callable
from datetime import date

from src.application.dtos.report_dto import (
    ListSectionDto,
    MemberRowDto,
    ProduceReportInputDto,
    ProduceReportOutputDto,
    ReportDto,
)
from src.domain.repositories.transformed_data_repository import (
    TransformedDataRepository,
)
from src.domain.services.candidate_experience_service import find_previous_candidacy
from src.domain.services.candidate_name_service import (
    make_application_key,
    split_member_name,
)
from src.domain.services.list_summary_service import (
    ListSummaryService,
    WageThresholds,
)
from src.domain.value_objects.candidate_list import (
    CandidateList,
    CandidateListDocument,
)
from src.domain.value_objects.member_application import MemberApplications
from src.infrastructure.importers._constants import (
    AVERAGE_MONTHLY_WAGE_BRUTO,
    MINIMAL_MONTHLY_WAGE_BRUTO,
    TAX_DECLARATION_YEAR_OFFSET,
)
from src.infrastructure.report.html_report_renderer import HtmlReportRenderer


logger = logging.getLogger(__name__)


def build_wage_thresholds(election_year: int) -> WageThresholds:
    """選挙年に対応する申告年度の賃金基準を返す.

    Raises:
        ValueError: 申告年度の賃金データが定義されていない場合
    """
    declaration_year = election_year - TAX_DECLARATION_YEAR_OFFSET
    if (
        declaration_year not in MINIMAL_MONTHLY_WAGE_BRUTO
        or declaration_year not in AVERAGE_MONTHLY_WAGE_BRUTO
    ):
        raise ValueError(f"{declaration_year}年の賃金データが定義されていません")
    return WageThresholds(
        declaration_year=declaration_year,
        minimal_monthly_wage=MINIMAL_MONTHLY_WAGE_BRUTO[declaration_year],
        average_monthly_wage=AVERAGE_MONTHLY_WAGE_BRUTO[declaration_year],
    )


class ProduceReportUseCase:
    """選挙年をまたいだ名簿比較レポートを生成するユースケース."""

    def __init__(
        self,
        transformed_data_repository: TransformedDataRepository,
        renderer: HtmlReportRenderer,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._repository = transformed_data_repository
        self._renderer = renderer
        self._today = today

    async def execute(self, input_dto: ProduceReportInputDto) -> ProduceReportOutputDto:
        """レポート生成を実行する."""
        if not input_dto.years:
            raise ValueError("選挙年が指定されていません")

        data_sets: list[tuple[int, CandidateListDocument]] = []
        for year in sorted(input_dto.years, reverse=True):
            document = await self._repository.get_list_document(year)
            data_sets.append((year, document))
            logger.info("%d年の名簿データを読み込み: %d名簿", year, len(document.lists))

        (latest_year, latest_document), *previous_data_sets = data_sets
        applications = await self._repository.get_member_applications(latest_year)

        today = self._today()
        summary_service = ListSummaryService(build_wage_thresholds(latest_year), today)

        report = ReportDto(
            latest_year=latest_year,
            previous_years=[year for year, _ in previous_data_sets],
            declaration_year=summary_service.thresholds.declaration_year,
            available_seats=input_dto.available_seats,
            generated_on=today,
        )
        output = ProduceReportOutputDto(output_path=input_dto.output_path)

        for candidate_list in latest_document.lists:
            section = self._build_section(
                candidate_list,
                applications,
                previous_data_sets,
                summary_service,
                input_dto.available_seats,
            )
            report.sections.append(section)
            output.list_count += 1
            output.member_count += section.summary.member_count
            output.members_with_data += section.summary.members_with_data

        self._renderer.write(report, input_dto.output_path)

        logger.info(
            "レポート生成完了: 名簿=%d, 候補者=%d, アンケートあり=%d",
            output.list_count,
            output.member_count,
            output.members_with_data,
        )
        return output

    def _build_section(
        self,
        candidate_list: CandidateList,
        applications: MemberApplications,
        previous_data_sets: list[tuple[int, CandidateListDocument]],
        summary_service: ListSummaryService,
        available_seats: int,
    ) -> ListSectionDto:
        """名簿1件分のセクションを組み立てる."""
        rows: list[MemberRowDto] = []
        for member in candidate_list.members:
            first_names, last_name = split_member_name(member.name)
            application = applications.get(
                make_application_key(candidate_list.name, member.name, member.position)
            )

            previous_candidacies: list[str] = []
            for year, document in previous_data_sets:
                candidacy = find_previous_candidacy(member, year, document)
                previous_candidacies.append(candidacy.label if candidacy else "-")

            row = MemberRowDto(
                first_names=first_names,
                last_name=last_name,
                position=member.position,
                previous_candidacies=previous_candidacies,
                age=summary_service.age_of(application),
                application=application,
            )
            if application is not None:
                row.income_below_minimal_wage = (
                    summary_service.has_income_below_minimal_wage(application)
                )
                row.income_below_average_wage = (
                    summary_service.has_income_below_average_wage(application)
                )
                row.money_below_minimal_monthly_wage = (
                    summary_service.has_money_below_minimal_monthly_wage(application)
                )
                row.is_millionaire = summary_service.is_millionaire(application)
            rows.append(row)

        return ListSectionDto(
            name=candidate_list.name,
            number=candidate_list.number,
            can_fill_council=len(candidate_list.members) >= available_seats,
            summary=summary_service.summarize(candidate_list, applications),
            rows=rows,
        )
