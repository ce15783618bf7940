"""Lotto 6/45 odds, expected wait and prize tax."""

from __future__ import annotations

from typing import Optional

from moneylab.core.money import safe_amount
from moneylab.core.rules import DEFAULT_LOTTERY_RULES, LotteryRules
from moneylab.schemas.lottery import LotteryParams, LotteryResult


def prize_tax(prize: float, rules: LotteryRules) -> float:
    """Progressive withholding: low rate up to the bracket, high rate on the excess."""
    tax = 0.0
    if prize > 0:
        tax += min(prize, rules.tax_bracket) * (rules.tax_rate_low / 100)
    if prize > rules.tax_bracket:
        tax += (prize - rules.tax_bracket) * (rules.tax_rate_high / 100)
    return tax


def calculate_lottery(params: LotteryParams, rules: Optional[LotteryRules] = None) -> LotteryResult:
    rules = rules or DEFAULT_LOTTERY_RULES
    combinations = rules.total_combinations
    games = max(1, params.weekly_games)

    lotto_odds = combinations / games
    prize = safe_amount(params.prize_amount)
    tax = prize_tax(prize, rules)

    return LotteryResult(
        probability=params.weekly_games / combinations * 100,
        years_to_win=lotto_odds / rules.weeks_per_year,
        prize_amount=prize,
        total_tax=tax,
        after_tax_amount=prize - tax,
        lotto_odds=lotto_odds,
        relative_to_lightning=lotto_odds / rules.lightning_odds,
    )
