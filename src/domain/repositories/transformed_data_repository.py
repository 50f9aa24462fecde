"""変換済みデータリポジトリのインターフェース."""

from abc import ABC, abstractmethod

from src.domain.value_objects.candidate_list import CandidateListDocument
from src.domain.value_objects.member_application import MemberApplications


class TransformedDataRepository(ABC):
    """変換済みの名簿データ・アンケートデータのリポジトリインターフェース."""

    @abstractmethod
    async def save_list_document(
        self, year: int, document: CandidateListDocument
    ) -> None:
        """選挙年の名簿データを保存.

        Args:
            year: 選挙年
            document: 名簿データ
        """
        pass

    @abstractmethod
    async def get_list_document(self, year: int) -> CandidateListDocument:
        """選挙年の名簿データを取得.

        Args:
            year: 選挙年

        Returns:
            名簿データ

        Raises:
            TransformedDataNotFoundError: 変換済みデータが存在しない場合
        """
        pass

    @abstractmethod
    async def save_member_applications(
        self, year: int, applications: MemberApplications
    ) -> None:
        """選挙年の候補者アンケートを保存.

        Args:
            year: 選挙年
            applications: 結合キー → アンケートのマップ
        """
        pass

    @abstractmethod
    async def get_member_applications(self, year: int) -> MemberApplications:
        """選挙年の候補者アンケートを取得.

        Args:
            year: 選挙年

        Returns:
            結合キー → アンケートのマップ

        Raises:
            TransformedDataNotFoundError: 変換済みデータが存在しない場合
        """
        pass
