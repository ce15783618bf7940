"""Data contracts for the FIRE target simulator."""

from datetime import date
from typing import List, Optional

from pydantic import Field

from moneylab.schemas.common import ParamsModel, ResultModel


class FireParams(ParamsModel):
    monthly_income: float = 0.0
    monthly_expense: float = 0.0
    current_assets: float = 0.0
    expected_return: float = Field(..., description="Nominal annual return, percent.")
    target_monthly_expense: float = Field(..., description="Desired monthly spend after FIRE, today's won.")
    current_age: int = Field(35, ge=0, le=120)
    withdrawal_rate: float = Field(4.0, description="Safe withdrawal rate, percent.")
    start_date: Optional[date] = Field(
        None, description="First simulated month; defaults to today."
    )


class FirePoint(ResultModel):
    month_index: int
    year: int
    month: int
    age: int
    assets: int
    fi_number: int
    is_achieved: bool


class TimeToFire(ResultModel):
    years: int
    months: int


class YearMonth(ResultModel):
    year: int
    month: int


class FireResult(ResultModel):
    monthly_savings: float
    savings_rate: float
    fi_number: float
    data: List[FirePoint]
    time_to_fire: Optional[TimeToFire] = None
    fire_date: Optional[YearMonth] = None
    is_possible: bool
    achieved_year: Optional[int] = None
