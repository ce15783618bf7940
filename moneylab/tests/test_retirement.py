from __future__ import annotations

from math import isclose

import pytest

from moneylab.core.retirement import AGE_ORDER_MESSAGE, market_factor, simulate_retirement
from moneylab.core.rules import SimulationRules
from moneylab.schemas.retirement import RetirementParams, WithdrawalStrategy


def base_params(**overrides) -> RetirementParams:
    values = dict(
        current_age=35,
        retire_age=55,
        target_monthly_expense=2_000_000,
        safe_assets=10_000_000,
        invest_assets=10_000_000,
        safe_rate=2.0,
        invest_rate=5.0,
        monthly_contribution=1_500_000,
        withdrawal_strategy=WithdrawalStrategy.UNIFORM,
    )
    values.update(overrides)
    return RetirementParams(**values)


@pytest.mark.parametrize("current_age, retire_age", [(55, 55), (60, 55), (85, 40)])
def test_current_age_not_before_retirement_fails_fast(current_age, retire_age):
    result = simulate_retirement(base_params(current_age=current_age, retire_age=retire_age))

    assert result.error is True
    assert result.message == AGE_ORDER_MESSAGE
    assert result.data == []
    assert result.total_assets_at_retire == 0
    assert result.score == 0
    assert result.depletion_age is None


def test_rows_run_from_current_age_to_life_expectancy():
    result = simulate_retirement(base_params())

    ages = [row.age for row in result.data]
    assert ages == list(range(35, 86))
    assert [row.is_retired for row in result.data] == [age >= 55 for age in ages]
    assert result.error is False


def test_uniform_strategy_spends_down_to_zero():
    result = simulate_retirement(base_params(withdrawal_strategy=WithdrawalStrategy.UNIFORM))

    final = result.data[-1]
    assert final.age == 85
    assert final.balance == 0
    assert result.depletion_age is None


def test_expense_need_inflates_from_year_zero():
    result = simulate_retirement(base_params())

    assert result.data[0].expense == 2_000_000
    assert result.data[1].expense == 2_050_000
    assert result.data[10].expense == round(2_000_000 * 1.025 ** 10)


def test_target_strategy_records_first_depletion_age_once():
    params = base_params(
        current_age=50,
        retire_age=51,
        target_monthly_expense=3_000_000,
        safe_assets=5_000_000,
        invest_assets=5_000_000,
        monthly_contribution=0,
        withdrawal_strategy=WithdrawalStrategy.TARGET,
    )
    result = simulate_retirement(params)

    assert result.depletion_age == 52
    after = [row for row in result.data if row.age >= 52]
    assert all(row.balance == 0 for row in after)
    assert all(row.withdrawal == 0 for row in after)
    assert all(row.shortfall == row.expense for row in after)
    assert result.avg_monthly_shortfall > 0


def test_target_strategy_with_ample_assets_has_no_shortfall():
    params = base_params(
        target_monthly_expense=500_000,
        safe_assets=2_000_000_000,
        invest_assets=0,
        withdrawal_strategy=WithdrawalStrategy.TARGET,
    )
    result = simulate_retirement(params)

    assert result.avg_monthly_shortfall == 0
    assert all(row.shortfall == 0 for row in result.data)
    retired = [row for row in result.data if row.is_retired]
    assert all(row.withdrawal == row.expense for row in retired)


def test_contributions_follow_current_pool_shares():
    params = base_params(
        current_age=30,
        retire_age=33,
        safe_assets=1_000_000,
        invest_assets=0,
        safe_rate=0.0,
        monthly_contribution=100_000,
    )
    result = simulate_retirement(params)

    before_retirement = result.data[2]
    assert before_retirement.age == 32
    assert before_retirement.safe == 4_600_000
    assert before_retirement.invest == 0
    # first retired year withdraws an even share over ages 33..85
    assert isclose(result.total_assets_at_retire, 4_600_000 - 4_600_000 / 53, abs_tol=1)


def test_degenerate_amounts_are_treated_as_zero():
    clean = simulate_retirement(base_params(safe_assets=0, monthly_contribution=0))
    dirty = simulate_retirement(base_params(safe_assets=-5_000_000, monthly_contribution=float("nan")))

    assert dirty == clean


def test_non_finite_rate_is_treated_as_zero():
    assert simulate_retirement(base_params(safe_rate=float("nan"))) == simulate_retirement(base_params(safe_rate=0.0))


def test_simulation_is_reproducible():
    assert simulate_retirement(base_params()) == simulate_retirement(base_params())


def test_market_factor_is_deterministic_waveform():
    assert isclose(market_factor(0), 0.015)
    assert market_factor(7) == market_factor(7)
    assert any(market_factor(i) < 0 for i in range(20))


def test_readiness_score_is_clamped():
    rich = simulate_retirement(base_params(safe_assets=10_000_000_000))
    poor = simulate_retirement(base_params(safe_assets=0, invest_assets=0, monthly_contribution=0))
    no_target = simulate_retirement(base_params(target_monthly_expense=0))

    assert rich.score == 150
    assert poor.score == 0
    assert no_target.score == 150


def test_life_expectancy_comes_from_rules():
    result = simulate_retirement(base_params(), rules=SimulationRules(life_expectancy=90))

    assert result.data[-1].age == 90
    assert result.data[-1].balance == 0
