"""候補者アンケート（資産・経歴申告）の値オブジェクト — Domain layer."""

from dataclasses import dataclass


@dataclass
class MemberApplication:
    """選挙管理委員会が公開する候補者アンケート.

    金額は全てユーロ建て。所得・納税額は所得申告(PD)、
    資産関連は資産申告(TD)に由来する。
    """

    birthday: str
    occupation: str
    party_membership: str
    is_penalty_pending: bool
    different_citizenship: str
    was_convicted_guilty: str
    was_convicted_guilty_details: str
    income_sum_eur: float
    taxes_sum_eur: float
    property_sum_eur: float
    values_sum_eur: float
    money_sum_eur: float
    loans_provided_eur: float
    loans_received_eur: float

    @property
    def wealth_sum_eur(self) -> float:
        """所得+資産+有価証券等+現金の合計（借入・貸付は含めない）."""
        return (
            self.income_sum_eur
            + self.property_sum_eur
            + self.values_sum_eur
            + self.money_sum_eur
        )


# 名簿名-候補者名-順位 → アンケート（取得失敗時はNone）
MemberApplications = dict[str, MemberApplication | None]
