"""ProduceReportUseCaseのテスト."""

from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.application.dtos.report_dto import ProduceReportInputDto, ReportDto
from src.application.usecases.produce_report_usecase import (
    ProduceReportUseCase,
    build_wage_thresholds,
)
from src.domain.repositories.transformed_data_repository import (
    TransformedDataRepository,
)
from src.domain.value_objects.candidate_list import (
    CandidateList,
    CandidateListDocument,
    ListMember,
)
from src.domain.value_objects.member_application import MemberApplication
from src.infrastructure.exceptions import TransformedDataNotFoundError
from src.infrastructure.report.html_report_renderer import HtmlReportRenderer


def _make_application(**overrides: object) -> MemberApplication:
    values: dict[str, object] = {
        "birthday": "1973-01-01",
        "occupation": "Direktorius",
        "party_membership": "&quot;Darbo partija&quot;",
        "is_penalty_pending": False,
        "different_citizenship": "",
        "was_convicted_guilty": "",
        "was_convicted_guilty_details": "",
        "income_sum_eur": 5000.0,
        "taxes_sum_eur": 1000.0,
        "property_sum_eur": 1_200_000.0,
        "values_sum_eur": 0.0,
        "money_sum_eur": 300.0,
        "loans_provided_eur": 0.0,
        "loans_received_eur": 0.0,
    }
    values.update(overrides)
    return MemberApplication(**values)  # type: ignore[arg-type]


DOCUMENTS = {
    2023: CandidateListDocument.from_lists(
        [
            CandidateList(
                "DARBO PARTIJA",
                number=4,
                members=[
                    ListMember("JONAS JONAITIS", 1),
                    ListMember("ONA ONAITĖ", 2),
                ],
            )
        ]
    ),
    2019: CandidateListDocument.from_lists(
        [
            CandidateList(
                "LIBERALŲ SĄJŪDIS",
                number=7,
                members=[ListMember("JONAS JONAITIS", 5)],
            )
        ]
    ),
    2015: CandidateListDocument.from_lists(
        [CandidateList("DARBO PARTIJA", members=[ListMember("ONA ONAITĖ", 1)])]
    ),
}


class TestBuildWageThresholds:
    def test_declaration_year_two_years_before(self) -> None:
        thresholds = build_wage_thresholds(2023)
        assert thresholds.declaration_year == 2021
        assert thresholds.minimal_monthly_wage == 642
        assert thresholds.average_monthly_wage == pytest.approx(1352.7)

    def test_undefined_year(self) -> None:
        with pytest.raises(ValueError):
            build_wage_thresholds(2011)


class TestProduceReportUseCase:
    """ProduceReportUseCaseのテスト."""

    @pytest.fixture()
    def mock_repository(self) -> AsyncMock:
        repository = AsyncMock(spec=TransformedDataRepository)
        repository.get_list_document.side_effect = lambda year: DOCUMENTS[year]
        repository.get_member_applications.return_value = {
            "DARBO PARTIJA-JONAS JONAITIS-1": _make_application(),
            "DARBO PARTIJA-ONA ONAITĖ-2": None,
        }
        return repository

    @pytest.fixture()
    def mock_renderer(self) -> MagicMock:
        return MagicMock(spec=HtmlReportRenderer)

    def _use_case(
        self, repository: AsyncMock, renderer: HtmlReportRenderer
    ) -> ProduceReportUseCase:
        return ProduceReportUseCase(
            transformed_data_repository=repository,
            renderer=renderer,
            today=lambda: date(2023, 3, 5),
        )

    @pytest.mark.asyncio
    async def test_report_structure(
        self, mock_repository: AsyncMock, tmp_path: Path
    ) -> None:
        captured: list[ReportDto] = []

        class _CapturingRenderer(HtmlReportRenderer):
            def write(self, report: ReportDto, output_path: Path) -> Path:
                captured.append(report)
                return output_path

        use_case = self._use_case(mock_repository, _CapturingRenderer())
        result = await use_case.execute(
            ProduceReportInputDto(
                years=[2015, 2023, 2019],
                available_seats=41,
                output_path=tmp_path / "index.html",
            )
        )

        assert result.list_count == 1
        assert result.member_count == 2
        assert result.members_with_data == 1
        mock_repository.get_member_applications.assert_awaited_once_with(2023)

        report = captured[0]
        assert report.latest_year == 2023
        assert report.previous_years == [2019, 2015]
        assert report.declaration_year == 2021

        section = report.sections[0]
        assert section.name == "DARBO PARTIJA"
        assert section.number == 4
        assert not section.can_fill_council

        jonas, ona = section.rows
        assert (jonas.first_names, jonas.last_name, jonas.position) == (
            "JONAS",
            "JONAITIS",
            1,
        )
        assert jonas.previous_candidacies == ["LIBERALŲ SĄJŪDIS (+4)", "-"]
        assert jonas.age == 50
        assert jonas.income_below_minimal_wage
        assert jonas.income_below_average_wage
        assert jonas.money_below_minimal_monthly_wage
        assert jonas.is_millionaire

        assert ona.previous_candidacies == ["-", "DARBO PARTIJA (-1)"]
        assert ona.application is None
        assert ona.age is None
        assert not ona.is_millionaire

    @pytest.mark.asyncio
    async def test_can_fill_council(
        self, mock_repository: AsyncMock, mock_renderer: MagicMock, tmp_path: Path
    ) -> None:
        captured: list[ReportDto] = []
        mock_renderer.write = lambda report, output_path: captured.append(report)

        use_case = self._use_case(mock_repository, mock_renderer)
        await use_case.execute(
            ProduceReportInputDto(
                years=[2023], available_seats=2, output_path=tmp_path / "index.html"
            )
        )

        assert captured[0].previous_years == []
        assert captured[0].sections[0].can_fill_council
        assert captured[0].sections[0].rows[0].previous_candidacies == []

    @pytest.mark.asyncio
    async def test_writes_html(self, mock_repository: AsyncMock, tmp_path: Path) -> None:
        output_path = tmp_path / "report" / "index.html"
        use_case = self._use_case(mock_repository, HtmlReportRenderer())

        result = await use_case.execute(
            ProduceReportInputDto(
                years=[2023, 2019, 2015], available_seats=41, output_path=output_path
            )
        )

        assert result.output_path == output_path
        content = output_path.read_text(encoding="utf-8")
        assert "Nr. 4. DARBO PARTIJA (2 narys/nariai)" in content
        assert "LIBERALŲ SĄJŪDIS (+4)" in content
        assert "1\u00a0200\u00a0000,00" in content
        assert "Sugeneruota 2023-03-05." in content

    @pytest.mark.asyncio
    async def test_no_years(
        self, mock_repository: AsyncMock, mock_renderer: MagicMock, tmp_path: Path
    ) -> None:
        use_case = self._use_case(mock_repository, mock_renderer)
        with pytest.raises(ValueError):
            await use_case.execute(
                ProduceReportInputDto(
                    years=[], available_seats=41, output_path=tmp_path / "index.html"
                )
            )

    @pytest.mark.asyncio
    async def test_missing_applications(
        self, mock_repository: AsyncMock, mock_renderer: MagicMock, tmp_path: Path
    ) -> None:
        mock_repository.get_member_applications.side_effect = (
            TransformedDataNotFoundError("transformed_data/members-applications-2023.json")
        )
        use_case = self._use_case(mock_repository, mock_renderer)

        with pytest.raises(TransformedDataNotFoundError):
            await use_case.execute(
                ProduceReportInputDto(
                    years=[2023], available_seats=41, output_path=tmp_path / "x.html"
                )
            )
