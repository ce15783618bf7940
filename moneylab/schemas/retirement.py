"""Data contracts for the retirement drawdown simulator."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from moneylab.schemas.common import ParamsModel, ResultModel


class WithdrawalStrategy(str, Enum):
    UNIFORM = "uniform"  # spread what is left evenly over the remaining years
    TARGET = "target"  # withdraw the inflated target expense, capped at the balance


class RetirementParams(ParamsModel):
    """Inputs for the two-pool accumulation + drawdown simulation (amounts in won)."""

    current_age: int = Field(..., ge=0, le=120)
    retire_age: int = Field(..., ge=0, le=120)
    target_monthly_expense: float = Field(..., description="Monthly spending goal in today's won.")
    safe_assets: float = 0.0
    invest_assets: float = 0.0
    safe_rate: float = Field(2.0, description="Annual return of the safe pool, percent.")
    invest_rate: float = Field(5.0, description="Annual return of the invest pool, percent.")
    monthly_contribution: float = 0.0
    withdrawal_strategy: WithdrawalStrategy = WithdrawalStrategy.UNIFORM


class RetirementYear(ResultModel):
    """
    One simulated age. ``expense``, ``withdrawal`` and ``shortfall`` are the
    monthly averages of that year's (nominal) figures.
    """

    age: int
    balance: int
    safe: int
    invest: int
    expense: int
    withdrawal: int
    shortfall: int
    is_retired: bool


class RetirementResult(ResultModel):
    data: List[RetirementYear]
    total_assets_at_retire: int
    avg_monthly_shortfall: int
    depletion_age: Optional[int] = None
    score: int = Field(..., ge=0)
    error: bool = False
    message: Optional[str] = None
