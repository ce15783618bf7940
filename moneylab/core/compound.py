"""Monthly compound growth with a simple-interest baseline."""

from __future__ import annotations

import logging
from typing import List, Tuple

from moneylab.core.money import finite_or_zero, round_won
from moneylab.schemas.common import ContributionTiming
from moneylab.schemas.compound import CompoundParams, CompoundResult, CompoundYear

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def monthly_rate_from_percent(rate: float) -> float:
    return rate / 100 / MONTHS_PER_YEAR


def compound_month(
    balance: float,
    principal: float,
    monthly_rate: float,
    contribution: float,
    timing: ContributionTiming = ContributionTiming.END,
) -> Tuple[float, float]:
    """
    Advance one month and return ``(balance, principal)``.

    END: interest accrues on the opening balance, then the deposit is added,
         so a deposit starts earning the following month.
    START: the deposit is added first and earns interest the same month.
    """
    if timing == ContributionTiming.START:
        balance = (balance + contribution) * (1 + monthly_rate)
    else:
        balance += balance * monthly_rate
        balance += contribution
    return balance, principal + contribution


def grow_monthly(
    balance: float,
    principal: float,
    monthly_rate: float,
    contribution: float,
    months: int,
    timing: ContributionTiming = ContributionTiming.END,
) -> Tuple[float, float]:
    """Apply :func:`compound_month` ``months`` times."""
    for _ in range(months):
        balance, principal = compound_month(balance, principal, monthly_rate, contribution, timing)
    return balance, principal


def simple_interest_amount(initial: float, monthly: float, rate: float, year: int) -> float:
    """
    Closed-form simple interest after ``year`` years.

    The lump sum earns ``rate`` for ``year`` years. The k-th monthly deposit
    (k = 1..n, n = 12 * year) earns for ``n - k`` months, so the deposit part is
    ``monthly * monthly_rate * n(n-1)/2``.
    """
    n = year * MONTHS_PER_YEAR
    lump_sum = initial * (rate / 100) * year
    deposits = monthly * monthly_rate_from_percent(rate) * (n * (n - 1) / 2)
    return lump_sum + deposits


def project_compound(params: CompoundParams) -> CompoundResult:
    """
    Year-by-year table for years 0..N.

    Compounded figures come from the monthly recurrence; the simple-interest
    columns are recomputed from scratch each year rather than accumulated.
    """
    initial = finite_or_zero(params.initial_amount)
    monthly = finite_or_zero(params.monthly_amount)
    rate = finite_or_zero(params.rate)
    monthly_rate = monthly_rate_from_percent(rate)

    balance = float(initial)
    principal = float(initial)

    rows: List[CompoundYear] = [
        CompoundYear(
            year=0,
            amount=round_won(balance),
            principal=round_won(principal),
            interest=0,
            simple_amount=round_won(balance),
            simple_interest=0,
        )
    ]

    for year in range(1, params.years + 1):
        balance, principal = grow_monthly(balance, principal, monthly_rate, monthly, MONTHS_PER_YEAR)

        principal_to_date = initial + monthly * year * MONTHS_PER_YEAR
        simple_amount = principal_to_date + simple_interest_amount(initial, monthly, rate, year)

        rows.append(
            CompoundYear(
                year=year,
                amount=round_won(balance),
                principal=round_won(principal),
                interest=round_won(balance - principal),
                simple_amount=round_won(simple_amount),
                simple_interest=round_won(simple_amount - principal_to_date),
            )
        )

    last = rows[-1]
    logger.debug("compound projection: %d years at %.2f%%, final %d", params.years, rate, last.amount)

    return CompoundResult(
        yearly_data=rows,
        total_amount=round_won(balance),
        total_principal=round_won(principal),
        total_interest=round_won(balance - principal),
        total_simple_interest=last.simple_amount - last.principal,
    )


__all__ = [
    "MONTHS_PER_YEAR",
    "monthly_rate_from_percent",
    "compound_month",
    "grow_monthly",
    "simple_interest_amount",
    "project_compound",
]
