"""Two-pool retirement simulation: accumulation, then drawdown to life expectancy."""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from moneylab.core.money import finite_or_zero, round_won, safe_amount
from moneylab.core.rules import DEFAULT_SIMULATION_RULES, SimulationRules
from moneylab.schemas.retirement import (
    RetirementParams,
    RetirementResult,
    RetirementYear,
    WithdrawalStrategy,
)

logger = logging.getLogger(__name__)

AGE_ORDER_MESSAGE = "현재 나이가 은퇴 목표 나이보다 많거나 같습니다."


def market_factor(year_index: int) -> float:
    """
    Deterministic swing applied to the invest pool's return (as a fraction).

    A slow sine trend plus a faster cosine ripple; identical inputs always give
    identical paths, so this is not a random draw.
    """
    trend = math.sin(year_index * 0.5)
    noise = math.cos(year_index * 1.5) * 0.3
    return (trend + noise) * 0.05


def _grow(pool: float, rate_percent: float) -> float:
    return safe_amount(pool * (1 + rate_percent / 100))


def readiness_score(total_at_retire: float, target_monthly: float, rules: SimulationRules) -> int:
    """Assets at retirement vs. ``readiness_multiple`` x annual spend, as a percentage in [0, cap]."""
    if total_at_retire <= 0:
        return 0
    needed = target_monthly * 12 * rules.readiness_multiple
    if needed <= 0:
        return rules.readiness_cap
    score = round_won(total_at_retire / needed * 100)
    return max(0, min(rules.readiness_cap, score))


def _error_result(message: str) -> RetirementResult:
    return RetirementResult(
        data=[],
        total_assets_at_retire=0,
        avg_monthly_shortfall=0,
        depletion_age=None,
        score=0,
        error=True,
        message=message,
    )


def simulate_retirement(
    params: RetirementParams,
    rules: Optional[SimulationRules] = None,
) -> RetirementResult:
    """
    Simulate ages current_age..life_expectancy in annual steps.

    Order of operations (per year):
      Accumulating (age < retire_age):
        1) grow both pools (invest rate shifted by ``market_factor``)
        2) add the year's contributions split by the pools' current shares
      Retired (age >= retire_age):
        1) grow both pools
        2) withdraw (uniform or target) pro rata from the pools, or record the
           depletion age if nothing is left
        3) shortfall = max(0, inflated need - withdrawal)

    An impossible age combination returns ``error=True`` and no rows.
    """
    rules = rules or DEFAULT_SIMULATION_RULES

    if params.current_age >= params.retire_age:
        logger.debug(
            "retirement simulation rejected: current_age=%s retire_age=%s",
            params.current_age,
            params.retire_age,
        )
        return _error_result(AGE_ORDER_MESSAGE)

    life_expectancy = rules.life_expectancy
    inflation = rules.inflation_rate / 100

    target_monthly = safe_amount(params.target_monthly_expense)
    annual_contribution = safe_amount(params.monthly_contribution) * 12
    pool_safe = safe_amount(params.safe_assets)
    pool_invest = safe_amount(params.invest_assets)

    rows: List[RetirementYear] = []
    total_pv_shortfall = 0.0
    retired_years = 0
    depletion_age: Optional[int] = None
    total_at_retire = 0

    for age in range(params.current_age, life_expectancy + 1):
        is_retired = age >= params.retire_age
        year_index = age - params.current_age

        inflation_factor = (1 + inflation) ** year_index
        annual_need = target_monthly * 12 * inflation_factor

        rate_safe = finite_or_zero(params.safe_rate)
        rate_invest = finite_or_zero(params.invest_rate) + market_factor(year_index) * 100

        withdrawal = 0.0
        shortfall = 0.0

        pool_safe = _grow(pool_safe, rate_safe)
        pool_invest = _grow(pool_invest, rate_invest)

        if not is_retired:
            total = pool_safe + pool_invest
            safe_share = pool_safe / total if total > 0 else 0.5
            pool_safe += annual_contribution * safe_share
            pool_invest += annual_contribution * (1 - safe_share)
        else:
            retired_years += 1
            total_liquid = pool_safe + pool_invest

            if total_liquid > 0:
                if params.withdrawal_strategy == WithdrawalStrategy.UNIFORM:
                    months_remaining = max(1, (life_expectancy - age + 1) * 12)
                    withdrawal = total_liquid / months_remaining * 12
                else:
                    withdrawal = min(total_liquid, annual_need)

                if withdrawal >= total_liquid:
                    # emptied; no float residue left to "withdraw" next year
                    pool_safe = pool_invest = 0.0
                else:
                    safe_share = pool_safe / total_liquid
                    pool_safe = safe_amount(pool_safe - withdrawal * safe_share)
                    pool_invest = safe_amount(pool_invest - withdrawal * (1 - safe_share))
            elif depletion_age is None:
                depletion_age = age

            shortfall = max(0.0, annual_need - withdrawal)
            total_pv_shortfall += shortfall / inflation_factor

        if age == params.retire_age:
            total_at_retire = round_won(pool_safe + pool_invest)

        rows.append(
            RetirementYear(
                age=age,
                balance=round_won(pool_safe + pool_invest),
                safe=round_won(pool_safe),
                invest=round_won(pool_invest),
                expense=round_won(annual_need / 12),
                withdrawal=round_won(withdrawal / 12),
                shortfall=round_won(shortfall / 12),
                is_retired=is_retired,
            )
        )

    avg_monthly_shortfall = round_won(total_pv_shortfall / retired_years / 12) if retired_years else 0

    return RetirementResult(
        data=rows,
        total_assets_at_retire=total_at_retire,
        avg_monthly_shortfall=avg_monthly_shortfall,
        depletion_age=depletion_age,
        score=readiness_score(total_at_retire, target_monthly, rules),
        error=False,
    )


__all__ = ["AGE_ORDER_MESSAGE", "market_factor", "readiness_score", "simulate_retirement"]
