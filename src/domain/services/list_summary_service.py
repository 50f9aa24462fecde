"""候補者名簿の集計ドメインサービス."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import ClassVar

from src.domain.services.candidate_name_service import make_application_key
from src.domain.utils.birthday import calculate_age, parse_birthday
from src.domain.value_objects.candidate_list import CandidateList
from src.domain.value_objects.member_application import (
    MemberApplication,
    MemberApplications,
)


@dataclass(frozen=True)
class WageThresholds:
    """申告年度の最低賃金・平均賃金（月額・税引前）."""

    declaration_year: int
    minimal_monthly_wage: float
    average_monthly_wage: float

    @property
    def minimal_yearly_wage(self) -> float:
        return self.minimal_monthly_wage * 12

    @property
    def average_yearly_wage(self) -> float:
        return self.average_monthly_wage * 12


@dataclass
class ListSummary:
    """名簿単位の集計結果."""

    member_count: int = 0
    members_with_data: int = 0
    members_with_age: int = 0
    age_sum: int = 0
    count_with_different_citizenship: int = 0
    count_with_pending_penalty: int = 0
    count_of_convicted_guilty: int = 0
    income_sum_eur: float = 0.0
    taxes_sum_eur: float = 0.0
    values_sum_eur: float = 0.0
    property_sum_eur: float = 0.0
    loans_received_sum_eur: float = 0.0
    loans_provided_sum_eur: float = 0.0
    count_with_no_income: int = 0
    count_with_no_money: int = 0
    count_with_no_property: int = 0
    count_of_millionaires: int = 0
    count_with_income_below_minimal_wage: int = 0
    count_with_income_below_average_wage: int = 0

    def average(self, total: float) -> float | None:
        """アンケート取得済み人数での平均（データなしはNone）."""
        if self.members_with_data == 0:
            return None
        return total / self.members_with_data

    @property
    def average_age(self) -> float | None:
        if self.members_with_age == 0:
            return None
        return self.age_sum / self.members_with_age


class ListSummaryService:
    """名簿ごとの年齢・犯罪歴・資産状況を集計する."""

    MILLIONAIRE_THRESHOLD_EUR: ClassVar[float] = 1_000_000

    def __init__(self, thresholds: WageThresholds, today: date) -> None:
        self._thresholds = thresholds
        self._today = today

    @property
    def thresholds(self) -> WageThresholds:
        return self._thresholds

    def age_of(self, application: MemberApplication | None) -> int | None:
        """アンケートの生年月日から満年齢を求める."""
        if application is None:
            return None
        birthday = parse_birthday(application.birthday)
        if birthday is None:
            return None
        return calculate_age(birthday, self._today)

    def is_millionaire(self, application: MemberApplication) -> bool:
        return application.wealth_sum_eur > self.MILLIONAIRE_THRESHOLD_EUR

    def has_income_below_minimal_wage(self, application: MemberApplication) -> bool:
        return application.income_sum_eur < self._thresholds.minimal_yearly_wage

    def has_income_below_average_wage(self, application: MemberApplication) -> bool:
        return application.income_sum_eur < self._thresholds.average_yearly_wage

    def has_money_below_minimal_monthly_wage(
        self, application: MemberApplication
    ) -> bool:
        """現金が最低賃金1か月分に満たないか."""
        return application.money_sum_eur < self._thresholds.minimal_monthly_wage

    def summarize(
        self,
        candidate_list: CandidateList,
        applications: MemberApplications,
    ) -> ListSummary:
        """名簿1件分を集計する.

        アンケートが取得できなかった候補者は集計対象外とする。
        """
        summary = ListSummary(member_count=len(candidate_list.members))

        for member in candidate_list.members:
            application = applications.get(
                make_application_key(candidate_list.name, member.name, member.position)
            )
            if application is None:
                continue

            summary.members_with_data += 1

            age = self.age_of(application)
            if age is not None:
                summary.age_sum += age
                summary.members_with_age += 1

            summary.income_sum_eur += application.income_sum_eur
            summary.taxes_sum_eur += application.taxes_sum_eur
            summary.property_sum_eur += application.property_sum_eur
            summary.values_sum_eur += application.values_sum_eur
            summary.loans_received_sum_eur += application.loans_received_eur
            summary.loans_provided_sum_eur += application.loans_provided_eur

            if application.different_citizenship.strip():
                summary.count_with_different_citizenship += 1
            if application.is_penalty_pending:
                summary.count_with_pending_penalty += 1
            if application.was_convicted_guilty.strip():
                summary.count_of_convicted_guilty += 1
            if application.income_sum_eur == 0:
                summary.count_with_no_income += 1
            if application.money_sum_eur == 0:
                summary.count_with_no_money += 1
            if application.property_sum_eur == 0:
                summary.count_with_no_property += 1
            if self.is_millionaire(application):
                summary.count_of_millionaires += 1
            if self.has_income_below_minimal_wage(application):
                summary.count_with_income_below_minimal_wage += 1
            if self.has_income_below_average_wage(application):
                summary.count_with_income_below_average_wage += 1

        return summary
