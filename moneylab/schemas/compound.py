"""Data contracts for the compound vs simple interest projector."""

from typing import List

from pydantic import Field

from moneylab.schemas.common import ParamsModel, ResultModel


class CompoundParams(ParamsModel):
    """Inputs for a monthly-compounded savings projection."""

    initial_amount: float = Field(0.0, description="Principal at year 0, in won.")
    monthly_amount: float = Field(0.0, description="Deposit added every month, in won.")
    years: int = Field(..., ge=0, le=100, description="Number of years to project.")
    rate: float = Field(..., description="Annual rate in percent (e.g. 5 for 5%).")


class CompoundYear(ResultModel):
    """Single row of the yearly table."""

    year: int = Field(..., ge=0)
    amount: int
    principal: int
    interest: int
    simple_amount: int
    simple_interest: int


class CompoundResult(ResultModel):
    yearly_data: List[CompoundYear]
    total_amount: int
    total_principal: int
    total_interest: int
    total_simple_interest: int
