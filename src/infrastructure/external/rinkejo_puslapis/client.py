"""選挙管理委員会「Rinkėjo puslapis」レポートAPIクライアント.

httpx asyncベースのHTTPクライアントで、候補者アンケート
（ELECTED_MUNICIPALITY_CANDIDATES_ADDITIONAL_INFO）のCSVレポートを取得する。
"""

from __future__ import annotations

import logging

from typing import Any

import httpx


logger = logging.getLogger(__name__)

# Liferayポートレットのインスタンス名（クエリパラメータの名前空間）
_PORTLET_ID = "electionreportslistportlet_WAR_rpportlet_INSTANCE_qYVVN74fslyU"
_NAMESPACE = f"_{_PORTLET_ID}_"

REPORT_CODE = "ELECTED_MUNICIPALITY_CANDIDATES_ADDITIONAL_INFO"


class RinkejoPuslapisApiError(Exception):
    """レポートAPIクライアントのエラー."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RinkejoPuslapisClient:
    """候補者アンケートCSVレポートAPIクライアント (httpx async)."""

    DEFAULT_ENDPOINT = "https://www.rinkejopuslapis.lt/ataskaitos87"

    def __init__(
        self,
        election_id: int,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._election_id = election_id
        self._endpoint = endpoint
        self._timeout = timeout
        self._external_client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTPクライアントを取得（外部注入 or 自動生成）."""
        if self._external_client is not None:
            return self._external_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def download_candidate_report(self, first_name: str, last_name: str) -> str:
        """候補者名で検索したアンケートCSVを取得する.

        Args:
            first_name: 名（複数ある場合は空白区切り）
            last_name: 姓

        Returns:
            CSVレポート本文

        Raises:
            RinkejoPuslapisApiError: HTTPエラー・タイムアウト時
        """
        params = self.build_params(first_name, last_name)
        client = await self._get_client()

        try:
            response = await client.get(self._endpoint, params=params)
            response.raise_for_status()
            return response.text
        except httpx.HTTPStatusError as e:
            raise RinkejoPuslapisApiError(
                f"APIリクエストエラー: {e.response.status_code} "
                f"{e.response.reason_phrase}",
                status_code=e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            raise RinkejoPuslapisApiError("APIリクエストタイムアウト") from e
        except httpx.HTTPError as e:
            raise RinkejoPuslapisApiError(f"HTTPエラー: {e}") from e
        finally:
            if self._owns_client:
                await client.aclose()

    def build_params(self, first_name: str, last_name: str) -> dict[str, Any]:
        """ポートレットのリソースリクエスト用クエリパラメータを組み立てる."""
        return {
            "p_p_id": _PORTLET_ID,
            "p_p_lifecycle": "2",
            "p_p_state": "normal",
            "p_p_mode": "view",
            "p_p_resource_id": "downloadElectionReport",
            "p_p_cacheability": "cacheLevelPage",
            "p_p_col_id": "column-2",
            "p_p_col_count": "1",
            "type": "CSV",
            f"{_NAMESPACE}reportCode": REPORT_CODE,
            f"{_NAMESPACE}r42reportCode": REPORT_CODE,
            f"{_NAMESPACE}r42ignoreType": "STE",
            f"{_NAMESPACE}r42electionFilterTypeSAV": "SAV",
            f"{_NAMESPACE}r42surname": last_name,
            f"{_NAMESPACE}r42name": first_name,
            f"{_NAMESPACE}r42electionId": str(self._election_id),
            f"{_NAMESPACE}r42countyId": "",
            f"{_NAMESPACE}r42organizationId": "",
            "select-r42cadidateSuggestedBy": "",
            f"{_NAMESPACE}r42cadidateSuggestedBy": "",
            f"{_NAMESPACE}r42sorting": "",
        }
