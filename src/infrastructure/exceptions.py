"""Infrastructure layer exceptions."""


class InfrastructureError(Exception):
    """インフラ層の基底例外."""

    def __init__(self, message: str, details: dict[str, object] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UnsupportedElectionYearError(InfrastructureError):
    """処理対象として設定されていない選挙年（名簿書式・選挙IDなし）."""

    def __init__(self, year: int, supported_years: list[int]):
        super().__init__(
            f"未対応の選挙年: {year}（対応: {supported_years}）",
            {"year": year, "supported_years": supported_years},
        )
        self.year = year


class CandidateListFileNotFoundError(InfrastructureError):
    """名簿テキストファイルが存在しない."""

    def __init__(self, path: str):
        super().__init__(f"名簿ファイルが見つかりません: {path}", {"path": path})
        self.path = path


class TransformedDataNotFoundError(InfrastructureError):
    """変換済みJSONファイルが存在しない."""

    def __init__(self, path: str):
        super().__init__(
            f"変換済みデータが見つかりません: {path}（先にtransformを実行してください）",
            {"path": path},
        )
        self.path = path


class MemberApplicationParseError(InfrastructureError):
    """アンケートCSV行の解析失敗."""
