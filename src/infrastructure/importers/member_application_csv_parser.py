"""候補者アンケートCSVレポートのパーサー.

1行目はヘッダ。2行目以降が候補者1名につき1行のデータ行。
同姓同名の候補者は別名簿の行として複数返ることがあるため、
名簿名の列で絞り込んでから値オブジェクトに変換する。
"""

import csv
import io

from src.domain.value_objects.member_application import MemberApplication
from src.infrastructure.exceptions import MemberApplicationParseError
from src.infrastructure.importers._constants import (
    CSV_COLUMN_BIRTHDAY,
    CSV_COLUMN_CITIZENSHIP,
    CSV_COLUMN_CITIZENSHIP_DETAILS,
    CSV_COLUMN_CONVICTED_GUILTY,
    CSV_COLUMN_CONVICTED_GUILTY_DETAILS,
    CSV_COLUMN_INCOME,
    CSV_COLUMN_LIST_NAME,
    CSV_COLUMN_LOANS_PROVIDED,
    CSV_COLUMN_LOANS_RECEIVED,
    CSV_COLUMN_MONEY,
    CSV_COLUMN_OCCUPATION,
    CSV_COLUMN_PARTY_MEMBERSHIP,
    CSV_COLUMN_PENALTY_PENDING,
    CSV_COLUMN_PROPERTY,
    CSV_COLUMN_TAXES,
    CSV_COLUMN_VALUES,
)
from src.infrastructure.importers._utils import normalize_number


_MIN_COLUMNS = CSV_COLUMN_LOANS_RECEIVED + 1


def parse_report_rows(raw_csv: str) -> list[list[str]]:
    """CSVレポートからヘッダを除いたデータ行を抽出する.

    空行は除外する。ヘッダのみ（またはそれ以下）の場合は空リストを返す。
    """
    rows = [row for row in csv.reader(io.StringIO(raw_csv)) if any(row)]
    return rows[1:]


def select_rows_for_list(rows: list[list[str]], list_name: str) -> list[list[str]]:
    """名簿名の列が一致する行のみを返す（大文字小文字を区別しない）."""
    target = list_name.upper()
    return [
        row
        for row in rows
        if len(row) > CSV_COLUMN_LIST_NAME and row[CSV_COLUMN_LIST_NAME].upper() == target
    ]


def build_member_application(row: list[str]) -> MemberApplication:
    """CSVデータ行をMemberApplicationに変換する.

    Raises:
        MemberApplicationParseError: 列数不足・金額が数値でない場合
    """
    if len(row) < _MIN_COLUMNS:
        raise MemberApplicationParseError(
            f"列数が不足しています: {len(row)}列（必要: {_MIN_COLUMNS}列）",
            {"columns": len(row)},
        )

    citizenship = row[CSV_COLUMN_CITIZENSHIP]
    different_citizenship = (
        f"{citizenship}, {row[CSV_COLUMN_CITIZENSHIP_DETAILS] or '-'}"
        if citizenship
        else ""
    )

    return MemberApplication(
        birthday=row[CSV_COLUMN_BIRTHDAY],
        occupation=row[CSV_COLUMN_OCCUPATION],
        party_membership=row[CSV_COLUMN_PARTY_MEMBERSHIP],
        is_penalty_pending=bool(row[CSV_COLUMN_PENALTY_PENDING]),
        different_citizenship=different_citizenship,
        was_convicted_guilty=row[CSV_COLUMN_CONVICTED_GUILTY],
        was_convicted_guilty_details=row[CSV_COLUMN_CONVICTED_GUILTY_DETAILS],
        income_sum_eur=_to_amount(row, CSV_COLUMN_INCOME),
        taxes_sum_eur=_to_amount(row, CSV_COLUMN_TAXES),
        property_sum_eur=_to_amount(row, CSV_COLUMN_PROPERTY),
        values_sum_eur=_to_amount(row, CSV_COLUMN_VALUES),
        money_sum_eur=_to_amount(row, CSV_COLUMN_MONEY),
        loans_provided_eur=_to_amount(row, CSV_COLUMN_LOANS_PROVIDED),
        loans_received_eur=_to_amount(row, CSV_COLUMN_LOANS_RECEIVED),
    )


def _to_amount(row: list[str], column: int) -> float:
    try:
        return normalize_number(row[column])
    except ValueError as e:
        raise MemberApplicationParseError(
            f"金額を解釈できません（{column}列目）: {row[column]!r}",
            {"column": column, "value": row[column]},
        ) from e
