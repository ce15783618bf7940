"""Data contracts for the children's investment account simulator."""

from typing import List

from pydantic import Field

from moneylab.schemas.common import ContributionTiming, ParamsModel, ResultModel


class KidsParams(ParamsModel):
    current_age: int = Field(..., ge=0, le=100)
    target_age: int = Field(..., ge=0, le=100)
    initial_amount: float = 0.0
    monthly_amount: float = 0.0
    rate: float = Field(..., description="Annual return, percent.")
    contribution_timing: ContributionTiming = ContributionTiming.END


class KidsYear(ResultModel):
    age: int
    amount: int
    principal: int
    total_interest: int
    # liquidation value under each exit scenario
    after_tax_us: int
    after_tax_pension: int
    tax_us: int
    tax_pension: int


class KidsResult(ResultModel):
    yearly_data: List[KidsYear]
    final_amount: int
    final_after_tax_us: int
    final_after_tax_pension: int
    total_principal: int
    total_interest: int
    gift_limit: int
    ten_year_principal: int
    is_gift_limit_exceeded: bool
    gift_limit_message: str
