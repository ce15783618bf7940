from __future__ import annotations

from math import isclose

from moneylab.core.lottery import calculate_lottery, prize_tax
from moneylab.core.rules import DEFAULT_LOTTERY_RULES
from moneylab.schemas.lottery import LotteryParams


def test_probability_is_linear_in_games():
    one = calculate_lottery(LotteryParams(weekly_games=1, prize_amount=2_000_000_000))
    five = calculate_lottery(LotteryParams(weekly_games=5, prize_amount=2_000_000_000))

    assert isclose(five.probability, one.probability * 5)
    assert isclose(one.probability, 100 / 8_145_060)


def test_doubling_games_halves_the_wait():
    one = calculate_lottery(LotteryParams(weekly_games=1, prize_amount=0))
    two = calculate_lottery(LotteryParams(weekly_games=2, prize_amount=0))

    assert isclose(two.years_to_win, one.years_to_win / 2)
    assert isclose(one.years_to_win, 8_145_060 / 52)


def test_no_games_means_zero_chance_but_finite_wait():
    result = calculate_lottery(LotteryParams(weekly_games=0, prize_amount=1_000_000_000))

    assert result.probability == 0
    assert isclose(result.years_to_win, 8_145_060 / 52)


def test_prize_tax_is_progressive():
    assert isclose(prize_tax(100_000_000, DEFAULT_LOTTERY_RULES), 22_000_000)
    assert isclose(prize_tax(300_000_000, DEFAULT_LOTTERY_RULES), 66_000_000)
    assert prize_tax(0, DEFAULT_LOTTERY_RULES) == 0

    result = calculate_lottery(LotteryParams(weekly_games=5, prize_amount=2_000_000_000))
    assert isclose(result.total_tax, 66_000_000 + 1_700_000_000 * 0.33)
    assert isclose(result.after_tax_amount, 2_000_000_000 - result.total_tax)


def test_odds_compared_to_lightning():
    result = calculate_lottery(LotteryParams(weekly_games=1, prize_amount=0))

    assert isclose(result.lotto_odds, 8_145_060)
    assert isclose(result.relative_to_lightning, 8_145_060 / 6_000_000)


def test_infinite_prize_is_treated_as_zero():
    result = calculate_lottery(LotteryParams(weekly_games=1, prize_amount=float("inf")))

    assert result.prize_amount == 0
    assert result.total_tax == 0
    assert result.after_tax_amount == 0
