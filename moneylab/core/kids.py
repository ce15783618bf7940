"""Investing for a child: overseas brokerage vs pension savings fund, plus a gift-tax check."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from moneylab.core.compound import compound_month, monthly_rate_from_percent
from moneylab.core.money import finite_or_zero, format_currency, round_won
from moneylab.core.rules import DEFAULT_KIDS_TAX_RULES, KidsTaxRules
from moneylab.schemas.kids import KidsParams, KidsResult, KidsYear

logger = logging.getLogger(__name__)


def harvest_gain(balance: float, cost_basis: float, allowance: float) -> float:
    """Gain realised (and re-bought) within the yearly tax-free allowance."""
    unrealized = max(0.0, balance - cost_basis)
    return min(unrealized, allowance)


def gift_limit_check(
    current_age: int,
    initial_amount: float,
    monthly_amount: float,
    rules: KidsTaxRules,
) -> Tuple[float, float, bool, str]:
    """
    Advisory check of ``gift_horizon_years`` of deposits against the
    exemption for the child's age bracket. Returns
    ``(limit, ten_year_principal, exceeded, message)``.
    """
    horizon_principal = initial_amount + monthly_amount * 12 * rules.gift_horizon_years
    is_adult = current_age >= rules.gift_adult_age
    limit = rules.gift_limit_adult if is_adult else rules.gift_limit_minor
    exceeded = horizon_principal > limit

    if exceeded:
        message = (
            f"{rules.gift_horizon_years}년 간 납입 원금이 "
            f"증여세 면제 한도({format_currency(limit)})를 초과할 수 있습니다."
        )
    else:
        message = "증여세 면제 한도 내에서 안전하게 증여 가능합니다."
    return limit, horizon_principal, exceeded, message


def simulate_kids_account(
    params: KidsParams,
    rules: Optional[KidsTaxRules] = None,
) -> KidsResult:
    """
    Yearly table from current_age to target_age.

    Brokerage scenario: each year-end, gains up to the allowance are sold and
    bought back, lifting the cost basis; at exit only the gain above that
    basis is taxed. Pension scenario: an early withdrawal pays
    other-income tax on all accumulated earnings.
    """
    rules = rules or DEFAULT_KIDS_TAX_RULES

    initial = finite_or_zero(params.initial_amount)
    monthly = finite_or_zero(params.monthly_amount)
    monthly_rate = monthly_rate_from_percent(finite_or_zero(params.rate))
    duration = max(0, params.target_age - params.current_age)

    balance = initial
    principal = initial
    cost_basis = initial

    rows: List[KidsYear] = [
        KidsYear(
            age=params.current_age,
            amount=round_won(balance),
            principal=round_won(principal),
            total_interest=0,
            after_tax_us=round_won(balance),
            after_tax_pension=round_won(balance),
            tax_us=0,
            tax_pension=0,
        )
    ]

    for year in range(1, duration + 1):
        for _ in range(12):
            balance, principal = compound_month(
                balance, principal, monthly_rate, monthly, params.contribution_timing
            )
            cost_basis += monthly

        total_interest = balance - principal

        cost_basis += harvest_gain(balance, cost_basis, rules.annual_harvest_allowance)
        tax_us = max(0.0, balance - cost_basis) * (rules.capital_gains_rate / 100)
        tax_pension = max(0.0, total_interest) * (rules.pension_other_income_rate / 100)

        rows.append(
            KidsYear(
                age=params.current_age + year,
                amount=round_won(balance),
                principal=round_won(principal),
                total_interest=round_won(total_interest),
                after_tax_us=round_won(balance - tax_us),
                after_tax_pension=round_won(balance - tax_pension),
                tax_us=round_won(tax_us),
                tax_pension=round_won(tax_pension),
            )
        )

    limit, ten_year_principal, exceeded, message = gift_limit_check(
        params.current_age, initial, monthly, rules
    )
    if exceeded:
        logger.debug("gift exemption exceeded: %.0f > %.0f", ten_year_principal, limit)

    final = rows[-1]
    return KidsResult(
        yearly_data=rows,
        final_amount=final.amount,
        final_after_tax_us=final.after_tax_us,
        final_after_tax_pension=final.after_tax_pension,
        total_principal=final.principal,
        total_interest=final.total_interest,
        gift_limit=round_won(limit),
        ten_year_principal=round_won(ten_year_principal),
        is_gift_limit_exceeded=exceeded,
        gift_limit_message=message,
    )


__all__ = ["harvest_gain", "gift_limit_check", "simulate_kids_account"]
