"""アプリケーション設定.

環境変数（接頭辞 ELECTION_REPORTER_）または .env ファイルから読み込む。
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PREFIX = "ELECTION_REPORTER_"


def find_env_file(start: Path | None = None) -> Path | None:
    """カレントディレクトリから親方向に .env を探索する."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


ENV_FILE_PATH = find_env_file()


class Settings(BaseSettings):
    """election-reporter の設定."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 入出力パス
    lists_dir: Path = Path("lists")
    transformed_data_dir: Path = Path("transformed-data")
    report_path: Path = Path("report.html")

    # 比較対象の選挙年（最後が最新）
    years: list[int] = Field(default_factory=lambda: [2011, 2015, 2019, 2023])

    # 選挙管理委員会レポートAPI
    rinkejo_endpoint: str = "https://www.rinkejopuslapis.lt/ataskaitos87"
    # 選挙年ごとのレポートAPI上の選挙ID（未登録の年はアンケート取得不可）
    rinkejo_election_ids: dict[int, int] = Field(
        default_factory=lambda: {2023: 1630}
    )
    request_timeout: float = 30.0
    # APIのレート制限対策（リクエスト間のスリープ秒数）
    request_delay: float = 0.0

    # カウナス市議会の議席数
    available_seats: int = 41

    log_level: str = "INFO"

    @property
    def latest_year(self) -> int:
        return max(self.years)


@lru_cache
def get_settings() -> Settings:
    """設定のシングルトンを取得する."""
    return Settings()


def reload_settings() -> Settings:
    """キャッシュを破棄して設定を再読み込みする."""
    get_settings.cache_clear()
    return get_settings()
