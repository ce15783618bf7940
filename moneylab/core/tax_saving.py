"""General (taxable) account vs tax-advantaged account (ISA / pension savings)."""

from __future__ import annotations

import logging
from typing import List, Optional

from moneylab.core.compound import MONTHS_PER_YEAR, grow_monthly, monthly_rate_from_percent
from moneylab.core.money import finite_or_zero, round_won
from moneylab.core.rules import DEFAULT_TAX_RULES, TaxRules
from moneylab.schemas.tax_saving import TaxSavingParams, TaxSavingResult, TaxSavingYear

logger = logging.getLogger(__name__)


def tax_on_gain(gain: float, rate_percent: float) -> float:
    """Flat tax on a positive gain; principal and losses are never taxed."""
    if gain <= 0:
        return 0.0
    return gain * (rate_percent / 100)


def compare_tax_saving(
    params: TaxSavingParams,
    rules: Optional[TaxRules] = None,
) -> TaxSavingResult:
    """
    Both accounts share one pre-tax path; each year's figures are the value
    if the whole account were cashed out that year, so the full accumulated
    gain is taxed at the account's rate.
    """
    rules = rules or DEFAULT_TAX_RULES
    rate_general = params.tax_rate_general if params.tax_rate_general is not None else rules.general_rate
    rate_saving = params.tax_rate_saving if params.tax_rate_saving is not None else rules.saving_rate
    rate_general, rate_saving = finite_or_zero(rate_general), finite_or_zero(rate_saving)

    monthly = finite_or_zero(params.monthly_amount)
    monthly_rate = monthly_rate_from_percent(finite_or_zero(params.rate))
    balance = finite_or_zero(params.initial_amount)
    principal = balance

    rows: List[TaxSavingYear] = [
        TaxSavingYear(
            year=0,
            amount_general=round_won(balance),
            amount_saving=round_won(balance),
            principal=round_won(principal),
            tax_general=0,
            tax_saving=0,
        )
    ]

    for year in range(1, params.years + 1):
        balance, principal = grow_monthly(
            balance,
            principal,
            monthly_rate,
            monthly,
            MONTHS_PER_YEAR,
            params.contribution_timing,
        )
        gain = balance - principal
        tax_general = tax_on_gain(gain, rate_general)
        tax_saving = tax_on_gain(gain, rate_saving)

        rows.append(
            TaxSavingYear(
                year=year,
                amount_general=round_won(balance - tax_general),
                amount_saving=round_won(balance - tax_saving),
                principal=round_won(principal),
                tax_general=round_won(tax_general),
                tax_saving=round_won(tax_saving),
            )
        )

    final = rows[-1]
    logger.debug(
        "tax comparison: %d years, general %.1f%% vs saving %.1f%%", params.years, rate_general, rate_saving
    )
    return TaxSavingResult(
        yearly_data=rows,
        total_general=final.amount_general,
        total_saving=final.amount_saving,
        total_principal=final.principal,
        total_tax_saved=final.amount_saving - final.amount_general,
    )


__all__ = ["tax_on_gain", "compare_tax_saving"]
