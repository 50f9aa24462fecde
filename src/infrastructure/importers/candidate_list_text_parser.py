"""候補者名簿テキストファイルのパーサー.

選挙年ごとに書式の異なるプレーンテキストの名簿を、共通の名簿データに変換する。
HEADER_ONLY: 「.」を含まない行が名簿名（2011, 2015年）
NUMBERED: 「Nr. 5. 名簿名」形式の行が名簿名（2019, 2023年）
いずれの書式でも、その他の行は「順位. 候補者名」形式の候補者行として扱う。
"""

import logging

from collections.abc import Iterable

from src.domain.value_objects.candidate_list import (
    CandidateList,
    CandidateListDocument,
    ListMember,
)
from src.infrastructure.importers._constants import (
    NUMBERED_HEADER_PREFIX,
    ListFormat,
)
from src.infrastructure.importers._utils import normalize_name


logger = logging.getLogger(__name__)


def parse_candidate_list_lines(
    lines: Iterable[str],
    list_format: ListFormat,
) -> list[CandidateList]:
    """名簿テキストの行から名簿リストを抽出する.

    直前に読んだ名簿と同名のヘッダ行は同じ名簿の続きとして扱う
    （ページ区切りで名簿名が繰り返される場合）。

    Args:
        lines: 名簿テキストの各行
        list_format: 名簿の書式

    Returns:
        ファイル内の出現順の名簿リスト
    """
    lists: list[CandidateList] = []
    current_list: CandidateList | None = None

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        header = _parse_header(line, list_format, line_number)
        if header is not None:
            if current_list is None or current_list.name != header.name:
                if current_list is not None:
                    lists.append(current_list)
                current_list = header
            continue

        if current_list is None:
            logger.warning("名簿名より前の候補者行をスキップ (%d行目): %s", line_number, line)
            continue

        member = _parse_member(line, line_number)
        if member is not None:
            current_list.members.append(member)

    if current_list is not None:
        lists.append(current_list)

    return lists


def parse_candidate_list_text(text: str, list_format: ListFormat) -> CandidateListDocument:
    """名簿テキスト全体から名簿データを生成する."""
    lists = parse_candidate_list_lines(text.splitlines(), list_format)
    return CandidateListDocument.from_lists(lists)


def _parse_header(
    line: str,
    list_format: ListFormat,
    line_number: int,
) -> CandidateList | None:
    """ヘッダ行であれば空の名簿を返す."""
    if list_format is ListFormat.HEADER_ONLY:
        if "." in line:
            return None
        return CandidateList(name=normalize_name(line))

    if not line.startswith(NUMBERED_HEADER_PREFIX):
        return None

    # "Nr. 5. LIETUVOS ŽALIŲJŲ PARTIJA" → ["Nr.", "5.", "LIETUVOS", ...]
    tokens = line.split()
    number_text = tokens[1].replace(".", "") if len(tokens) > 1 else ""
    name = normalize_name(" ".join(tokens[2:]))
    try:
        number: int | None = int(number_text)
    except ValueError:
        logger.warning("名簿番号を解釈できません (%d行目): %s", line_number, line)
        number = None
    return CandidateList(name=name, number=number)


def _parse_member(line: str, line_number: int) -> ListMember | None:
    """「順位. 候補者名」形式の行を解析する."""
    position_text, separator, name_text = line.partition(".")
    if not separator:
        logger.warning("候補者行の書式が不正 (%d行目): %s", line_number, line)
        return None

    try:
        position = int(position_text.strip())
    except ValueError:
        logger.warning("順位を解釈できません (%d行目): %s", line_number, line)
        return None

    name = normalize_name(name_text)
    if not name:
        logger.warning("候補者名が空 (%d行目): %s", line_number, line)
        return None

    return ListMember(name=name, position=position)
