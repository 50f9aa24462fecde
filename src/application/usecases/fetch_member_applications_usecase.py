"""候補者アンケート取得ユースケース.

変換済みの名簿データの全候補者について外部APIからアンケートを取得し、
「名簿名-候補者名-順位」をキーとして保存する。

処理フロー:
    1. 変換済み名簿データ（{year}.json）を読み込み
    2. 名簿→候補者の順に1名ずつアンケートを取得（APIの制限により逐次実行）
    3. members-applications-{year}.json に保存
"""

import asyncio
import logging

from src.application.dtos.member_application_fetch_dto import (
    FetchMemberApplicationsInputDto,
    FetchMemberApplicationsOutputDto,
)
from src.domain.repositories.transformed_data_repository import (
    TransformedDataRepository,
)
from src.domain.services.candidate_name_service import (
    make_application_key,
    split_member_name,
)
from src.domain.services.interfaces.member_application_source_service import (
    IMemberApplicationSourceService,
)
from src.domain.value_objects.member_application import MemberApplications


logger = logging.getLogger(__name__)


class FetchMemberApplicationsUseCase:
    """候補者アンケートを取得して名簿データと結合するユースケース."""

    def __init__(
        self,
        transformed_data_repository: TransformedDataRepository,
        application_source: IMemberApplicationSourceService,
    ) -> None:
        self._repository = transformed_data_repository
        self._source = application_source

    async def execute(
        self, input_dto: FetchMemberApplicationsInputDto
    ) -> FetchMemberApplicationsOutputDto:
        """取得を実行する."""
        output = FetchMemberApplicationsOutputDto(year=input_dto.year)
        document = await self._repository.get_list_document(input_dto.year)

        applications: MemberApplications = {}
        output.total_members = sum(len(lst.members) for lst in document.lists)
        logger.info(
            "%d年: %d名分のアンケートを取得します", input_dto.year, output.total_members
        )

        for candidate_list in document.lists:
            for member in candidate_list.members:
                key = make_application_key(
                    candidate_list.name, member.name, member.position
                )
                first_name, last_name = split_member_name(member.name)
                try:
                    application = await self._source.fetch_application(
                        first_name, last_name, candidate_list.name
                    )
                except Exception:
                    logger.exception("アンケート取得中に予期しないエラー: %s", key)
                    output.errors += 1
                    output.error_details.append(f"アンケート取得失敗: {key}")
                    application = None

                applications[key] = application
                if application is None:
                    output.missing_applications += 1
                else:
                    output.found_applications += 1

                if input_dto.request_delay > 0:
                    await asyncio.sleep(input_dto.request_delay)

        await self._repository.save_member_applications(input_dto.year, applications)

        logger.info(
            "アンケート取得完了: 候補者=%d, 取得=%d, 未取得=%d, エラー=%d",
            output.total_members,
            output.found_applications,
            output.missing_applications,
            output.errors,
        )
        return output
