"""Data contracts for the lottery odds calculator."""

from pydantic import Field

from moneylab.schemas.common import ParamsModel, ResultModel


class LotteryParams(ParamsModel):
    weekly_games: int = Field(1, ge=0, description="Games bought per weekly draw.")
    prize_amount: float = Field(..., ge=0, description="First prize before tax, in won.")


class LotteryResult(ResultModel):
    probability: float = Field(..., description="Weekly chance of winning, percent.")
    years_to_win: float
    prize_amount: float
    total_tax: float
    after_tax_amount: float
    lotto_odds: float
    relative_to_lightning: float
