"""FIRE (financial independence, retire early) target simulator."""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from moneylab.core.money import finite_or_zero, round_won, safe_amount
from moneylab.core.rules import DEFAULT_SIMULATION_RULES, SimulationRules
from moneylab.schemas.fire import FireParams, FirePoint, FireResult, TimeToFire, YearMonth

logger = logging.getLogger(__name__)


def fi_number(target_monthly_expense: float, withdrawal_rate: float) -> float:
    """Portfolio size whose ``withdrawal_rate`` percent covers a year of target spending."""
    rate = finite_or_zero(withdrawal_rate) / 100
    if rate <= 0:
        return 0.0
    return target_monthly_expense * 12 / rate


def real_return_rate(nominal_percent: float, inflation_percent: float) -> float:
    return (1 + nominal_percent / 100) / (1 + inflation_percent / 100) - 1


def simulate_fire(
    params: FireParams,
    rules: Optional[SimulationRules] = None,
) -> FireResult:
    """
    Project the portfolio month by month in today's money until it crosses the
    FI number.

    The annual real return is turned into a monthly rate by dividing by 12
    (not by taking the 12th root). A point is recorded at month 0, every
    January and at the month the target is first reached; once reached the
    run continues for ``fire_months_after_achievement`` months so charts have
    a tail, then stops. Never reaching the target within ``fire_max_months``
    is reported through ``is_possible=False``.
    """
    rules = rules or DEFAULT_SIMULATION_RULES
    start = params.start_date or date.today()

    income = safe_amount(params.monthly_income)
    expense = safe_amount(params.monthly_expense)
    monthly_savings = max(0.0, income - expense)
    savings_rate = monthly_savings / income * 100 if income > 0 else 0.0

    target = fi_number(safe_amount(params.target_monthly_expense), params.withdrawal_rate)
    monthly_real = real_return_rate(finite_or_zero(params.expected_return), rules.inflation_rate) / 12

    balance = safe_amount(params.current_assets)
    achieved_month: Optional[int] = None
    points: List[FirePoint] = []

    for i in range(rules.fire_max_months):
        months_since_jan = (start.month - 1) + i
        year = start.year + months_since_jan // 12
        month = months_since_jan % 12 + 1
        age = params.current_age + i // 12

        if achieved_month is None and balance >= target:
            achieved_month = i
            points.append(
                FirePoint(
                    month_index=i,
                    year=year,
                    month=month,
                    age=age,
                    assets=round_won(balance),
                    fi_number=round_won(target),
                    is_achieved=True,
                )
            )
        elif achieved_month is not None and i - achieved_month >= rules.fire_months_after_achievement:
            break

        already_recorded = bool(points) and points[-1].month_index == i
        if (month == 1 or i == 0) and not already_recorded:
            points.append(
                FirePoint(
                    month_index=i,
                    year=year,
                    month=month,
                    age=age,
                    assets=round_won(balance),
                    fi_number=round_won(target),
                    is_achieved=achieved_month is not None,
                )
            )

        balance += balance * monthly_real + monthly_savings

    if achieved_month is None:
        logger.debug("FI number %.0f not reached within %d months", target, rules.fire_max_months)
        return FireResult(
            monthly_savings=monthly_savings,
            savings_rate=savings_rate,
            fi_number=target,
            data=points,
            is_possible=False,
        )

    reached_on = date(start.year, start.month, 1) + relativedelta(months=achieved_month)
    return FireResult(
        monthly_savings=monthly_savings,
        savings_rate=savings_rate,
        fi_number=target,
        data=points,
        time_to_fire=TimeToFire(years=achieved_month // 12, months=achieved_month % 12),
        fire_date=YearMonth(year=reached_on.year, month=reached_on.month),
        is_possible=True,
        achieved_year=reached_on.year,
    )


__all__ = ["fi_number", "real_return_rate", "simulate_fire"]
