"""名簿テキスト変換ユースケース.

処理フロー:
    1. {lists_dir}/{year}.txt を選挙年の書式で解析
    2. 名簿名一覧（昇順）を付与
    3. {transformed_data_dir}/{year}.json に保存
"""

import logging

from src.application.dtos.candidate_list_transform_dto import (
    TransformCandidateListsInputDto,
    TransformCandidateListsOutputDto,
)
from src.domain.repositories.transformed_data_repository import (
    TransformedDataRepository,
)
from src.infrastructure.importers.candidate_list_text_data_source import (
    CandidateListTextDataSource,
)


logger = logging.getLogger(__name__)


class TransformCandidateListsUseCase:
    """名簿テキストを構造化データに変換するユースケース."""

    def __init__(
        self,
        candidate_list_source: CandidateListTextDataSource,
        transformed_data_repository: TransformedDataRepository,
    ) -> None:
        self._source = candidate_list_source
        self._repository = transformed_data_repository

    async def execute(
        self, input_dto: TransformCandidateListsInputDto
    ) -> TransformCandidateListsOutputDto:
        """変換を実行する."""
        document = await self._source.read_candidate_lists(input_dto.year)
        await self._repository.save_list_document(input_dto.year, document)

        output = TransformCandidateListsOutputDto(
            year=input_dto.year,
            list_count=len(document.lists),
            member_count=sum(len(lst.members) for lst in document.lists),
        )
        logger.info(
            "%d年の名簿変換完了: 名簿=%d, 候補者=%d",
            output.year,
            output.list_count,
            output.member_count,
        )
        return output
