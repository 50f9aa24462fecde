"""名簿テキストファイルのデータソース.

{lists_dir}/{year}.txt を読み込み、選挙年に対応する書式で解析する。
"""

import asyncio
import logging

from pathlib import Path

from src.domain.value_objects.candidate_list import CandidateListDocument
from src.infrastructure.exceptions import (
    CandidateListFileNotFoundError,
    UnsupportedElectionYearError,
)
from src.infrastructure.importers._constants import (
    LIST_FORMAT_BY_YEAR,
    SUPPORTED_YEARS,
)
from src.infrastructure.importers._utils import read_text
from src.infrastructure.importers.candidate_list_text_parser import (
    parse_candidate_list_text,
)


logger = logging.getLogger(__name__)


class CandidateListTextDataSource:
    """プレーンテキストの名簿ファイルからの名簿データソース."""

    def __init__(self, lists_dir: Path) -> None:
        self._lists_dir = lists_dir

    def get_file_path(self, year: int) -> Path:
        return self._lists_dir / f"{year}.txt"

    async def read_candidate_lists(self, year: int) -> CandidateListDocument:
        """選挙年の名簿テキストを読み込み名簿データに変換する.

        Raises:
            UnsupportedElectionYearError: 書式が定義されていない選挙年
            CandidateListFileNotFoundError: 名簿ファイルが存在しない場合
        """
        list_format = LIST_FORMAT_BY_YEAR.get(year)
        if list_format is None:
            raise UnsupportedElectionYearError(year, SUPPORTED_YEARS)

        path = self.get_file_path(year)
        if not path.is_file():
            raise CandidateListFileNotFoundError(str(path))

        logger.info("%d年の名簿を読み込み中: %s（書式: %s）", year, path, list_format.value)
        text = await asyncio.to_thread(read_text, path)
        document = parse_candidate_list_text(text, list_format)
        logger.info(
            "%d年: %d名簿、%d候補者を抽出",
            year,
            len(document.lists),
            sum(len(lst.members) for lst in document.lists),
        )
        return document
