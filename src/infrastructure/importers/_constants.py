"""インポーターモジュール共通の定数."""

from enum import Enum


class ListFormat(Enum):
    """名簿テキストファイルの書式."""

    # 「.」を含まない行が名簿名（2011, 2015年）
    HEADER_ONLY = "header_only"
    # 「Nr. 5. 名簿名」形式の行が名簿名（2019, 2023年）
    NUMBERED = "numbered"


# 選挙年ごとの名簿書式
LIST_FORMAT_BY_YEAR: dict[int, ListFormat] = {
    2011: ListFormat.HEADER_ONLY,
    2015: ListFormat.HEADER_ONLY,
    2019: ListFormat.NUMBERED,
    2023: ListFormat.NUMBERED,
}

SUPPORTED_YEARS: list[int] = sorted(LIST_FORMAT_BY_YEAR)

NUMBERED_HEADER_PREFIX = "Nr."

# アンケートCSVの列インデックス
CSV_COLUMN_BIRTHDAY = 3
CSV_COLUMN_LIST_NAME = 8
CSV_COLUMN_OCCUPATION = 14
CSV_COLUMN_PARTY_MEMBERSHIP = 15
CSV_COLUMN_PENALTY_PENDING = 16
CSV_COLUMN_CITIZENSHIP = 20
CSV_COLUMN_CITIZENSHIP_DETAILS = 21
CSV_COLUMN_CONVICTED_GUILTY = 23
CSV_COLUMN_CONVICTED_GUILTY_DETAILS = 24
CSV_COLUMN_INCOME = 28
CSV_COLUMN_TAXES = 33
CSV_COLUMN_PROPERTY = 34
CSV_COLUMN_VALUES = 35
CSV_COLUMN_MONEY = 36
CSV_COLUMN_LOANS_PROVIDED = 37
CSV_COLUMN_LOANS_RECEIVED = 38

# 最低月額賃金（税引前）
# 出典: https://www.tagidas.lt/savadai/9003/
MINIMAL_MONTHLY_WAGE_BRUTO: dict[int, float] = {
    2021: 642,
    2022: 730,
    2023: 840,
}

# 平均月額賃金（税引前）
# 出典: https://www.tagidas.lt/savadai/9029/
AVERAGE_MONTHLY_WAGE_BRUTO: dict[int, float] = {
    2021: 1352.7,
    2022: 1504.1,
    2023: 1684.9,
}

# 所得申告は選挙年の2年前のもの
TAX_DECLARATION_YEAR_OFFSET = 2
