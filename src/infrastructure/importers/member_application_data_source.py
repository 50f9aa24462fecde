"""選挙管理委員会レポートからの候補者アンケートデータソース.

候補者1名ごとにCSVレポートを取得し、名簿名で絞り込んでアンケートに変換する。
取得・特定できない場合はログを出力してNoneを返す（処理は継続する）。
"""

import logging

from src.domain.value_objects.member_application import MemberApplication
from src.infrastructure.exceptions import MemberApplicationParseError
from src.infrastructure.external.rinkejo_puslapis import (
    RinkejoPuslapisApiError,
    RinkejoPuslapisClient,
)
from src.infrastructure.importers.member_application_csv_parser import (
    build_member_application,
    parse_report_rows,
    select_rows_for_list,
)


logger = logging.getLogger(__name__)


class RinkejoPuslapisApplicationSource:
    """Rinkėjo puslapis CSVレポートからのアンケートデータソース実装."""

    def __init__(self, client: RinkejoPuslapisClient) -> None:
        self._client = client

    async def fetch_application(
        self,
        first_name: str,
        last_name: str,
        list_name: str,
    ) -> MemberApplication | None:
        """候補者名と名簿名からアンケートを取得する."""
        full_name = f"{first_name} {last_name}".strip()

        try:
            raw_csv = await self._client.download_candidate_report(first_name, last_name)
        except RinkejoPuslapisApiError:
            logger.exception("アンケート取得失敗: %s", full_name)
            return None

        rows = parse_report_rows(raw_csv)
        if not rows:
            logger.info("空行除去後のデータ行がありません。スキップ: %s", full_name)
            return None

        matched = select_rows_for_list(rows, list_name)
        if not matched:
            logger.error(
                "名簿「%s」に候補者「%s」のアンケートが見つかりません（要確認）",
                list_name,
                full_name,
            )
            return None

        if len(matched) > 1:
            logger.error(
                "同姓同名の候補者を%d名検出: %s（名簿: %s、要確認）",
                len(matched),
                full_name,
                list_name,
            )
            return None

        try:
            return build_member_application(matched[0])
        except MemberApplicationParseError as e:
            logger.error("アンケート解析失敗: %s (%s)", full_name, e.message)
            return None
