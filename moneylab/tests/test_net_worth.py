from __future__ import annotations

from math import isclose

import pytest

from moneylab.core.net_worth import estimate_net_worth, months_to_target, roadmap_label, top_percentile
from moneylab.schemas.net_worth import NetWorthParams


@pytest.mark.parametrize(
    "net_worth, expected",
    [
        (-1, 98),
        (0, 95),
        (50_000_000, 80),
        (100_000_000, 65),
        (300_000_000, 40),
        (1_000_000_000, 10),
        (2_000_000_000, 5.5),
        (3_000_000_000, 1),
        (8_000_000_000, 0.5),
        (20_000_000_000, 0.1),
    ],
)
def test_top_percentile_interpolates_bands(net_worth, expected):
    assert isclose(top_percentile(net_worth), expected, abs_tol=1e-9)


def test_balance_sheet_and_tier():
    result = estimate_net_worth(
        NetWorthParams(
            financial_assets=50_000_000,
            real_estate=300_000_000,
            rent_deposit=100_000_000,
            other_assets=50_000_000,
            loans=80_000_000,
            tenant_deposit=20_000_000,
        )
    )

    assert result.total_assets == 500_000_000
    assert result.total_liabilities == 100_000_000
    assert result.net_worth == 400_000_000
    assert result.tier.name == "BRONZE"
    assert result.tier.top_percent == 65
    assert result.next_tier.name == "GOLD"
    assert result.amount_needed == 600_000_000


def test_top_tier_has_nothing_left_to_reach():
    result = estimate_net_worth(NetWorthParams(financial_assets=3_500_000_000))

    assert result.tier.name == "DIAMOND"
    assert result.next_tier is None
    assert result.roadmap.months == 0
    assert result.roadmap.feasible is True
    assert result.roadmap.label == "달성 완료"


def test_gold_aims_for_diamond():
    result = estimate_net_worth(NetWorthParams(real_estate=1_200_000_000, monthly_savings=5_000_000))

    assert result.tier.name == "GOLD"
    assert result.next_tier.name == "DIAMOND"
    assert result.next_tier.target == 3_000_000_000
    assert 0 < result.roadmap.months < 9999


def test_months_to_target_without_savings():
    # 500M -> 1B at 5%/12 a month: ln(2) / ln(1 + 0.05/12) = 166.7
    months = months_to_target(500_000_000, 1_000_000_000, 0, 5.0)

    assert months == 167
    assert roadmap_label(months) == "13년 11개월"


def test_debt_with_no_savings_is_infeasible():
    result = estimate_net_worth(NetWorthParams(loans=50_000_000))

    assert result.net_worth == -50_000_000
    assert result.percentile == 98
    assert result.roadmap.months == 9999
    assert result.roadmap.feasible is False
    assert result.roadmap.label == "달성 불가 (이자 부담 과다)"


def test_roadmap_label_formats():
    assert roadmap_label(5) == "5개월"
    assert roadmap_label(24) == "2년"
    assert roadmap_label(0) == "달성 완료"


def test_zero_rate_roadmap_is_linear():
    assert months_to_target(0, 1_000_000, 100_000, 0.0) == 10
    assert months_to_target(0, 1_000_000, 0, 0.0) == 9999


def test_non_finite_balances_are_treated_as_zero():
    result = estimate_net_worth(
        NetWorthParams(financial_assets=float("nan"), real_estate=300_000_000, loans=float("inf"))
    )

    assert result.total_assets == 300_000_000
    assert result.total_liabilities == 0
    assert result.net_worth == 300_000_000
