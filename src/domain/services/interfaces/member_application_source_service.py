"""候補者アンケートデータソースサービスのインターフェース — Domain layer."""

from typing import Protocol

from src.domain.value_objects.member_application import MemberApplication


class IMemberApplicationSourceService(Protocol):
    """候補者アンケートデータソースのインターフェース.

    外部データソース（選挙管理委員会の公開レポート等）から
    候補者1名分のアンケートを取得する。
    """

    async def fetch_application(
        self,
        first_name: str,
        last_name: str,
        list_name: str,
    ) -> MemberApplication | None:
        """候補者名と名簿名からアンケートを取得する.

        Args:
            first_name: 名（複数ある場合は空白区切り）
            last_name: 姓
            list_name: 所属名簿名

        Returns:
            アンケート。取得できない・特定できない場合はNone
        """
        ...
