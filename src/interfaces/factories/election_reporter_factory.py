"""ユースケースファクトリー

設定（Settings）から各ユースケースと依存オブジェクトを組み立てます。
"""

import logging

from src.application.usecases.fetch_member_applications_usecase import (
    FetchMemberApplicationsUseCase,
)
from src.application.usecases.produce_report_usecase import ProduceReportUseCase
from src.application.usecases.transform_candidate_lists_usecase import (
    TransformCandidateListsUseCase,
)
from src.infrastructure.config.settings import Settings
from src.infrastructure.exceptions import UnsupportedElectionYearError
from src.infrastructure.external.rinkejo_puslapis import RinkejoPuslapisClient
from src.infrastructure.importers.candidate_list_text_data_source import (
    CandidateListTextDataSource,
)
from src.infrastructure.importers.member_application_data_source import (
    RinkejoPuslapisApplicationSource,
)
from src.infrastructure.persistence.transformed_data_repository_impl import (
    TransformedDataRepositoryImpl,
)
from src.infrastructure.report.html_report_renderer import HtmlReportRenderer


logger = logging.getLogger(__name__)


class ElectionReporterFactory:
    """設定からユースケースを生成するファクトリー"""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def create_repository(self) -> TransformedDataRepositoryImpl:
        return TransformedDataRepositoryImpl(self._settings.transformed_data_dir)

    def create_transform_usecase(self) -> TransformCandidateListsUseCase:
        return TransformCandidateListsUseCase(
            candidate_list_source=CandidateListTextDataSource(
                self._settings.lists_dir
            ),
            transformed_data_repository=self.create_repository(),
        )

    def create_fetch_applications_usecase(
        self, year: int
    ) -> FetchMemberApplicationsUseCase:
        """選挙年のアンケート取得ユースケースを生成する.

        Raises:
            UnsupportedElectionYearError: 選挙IDが設定されていない選挙年
        """
        election_ids = self._settings.rinkejo_election_ids
        election_id = election_ids.get(year)
        if election_id is None:
            raise UnsupportedElectionYearError(year, sorted(election_ids))

        logger.debug(
            "Creating application source: %s (year=%d, election_id=%d)",
            self._settings.rinkejo_endpoint,
            year,
            election_id,
        )
        client = RinkejoPuslapisClient(
            election_id=election_id,
            endpoint=self._settings.rinkejo_endpoint,
            timeout=self._settings.request_timeout,
        )
        return FetchMemberApplicationsUseCase(
            transformed_data_repository=self.create_repository(),
            application_source=RinkejoPuslapisApplicationSource(client),
        )

    def create_report_usecase(self) -> ProduceReportUseCase:
        return ProduceReportUseCase(
            transformed_data_repository=self.create_repository(),
            renderer=HtmlReportRenderer(),
        )
