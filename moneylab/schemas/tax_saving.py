"""Data contracts for the tax-advantaged vs general account comparison."""

from typing import List, Optional

from pydantic import Field

from moneylab.schemas.common import ContributionTiming, ParamsModel, ResultModel


class TaxSavingParams(ParamsModel):
    initial_amount: float = 0.0
    monthly_amount: float = 0.0
    rate: float = Field(..., description="Annual return, percent.")
    years: int = Field(..., ge=0, le=100)
    tax_rate_general: Optional[float] = Field(None, description="Defaults to 15.4%.")
    tax_rate_saving: Optional[float] = Field(None, description="Defaults to 0% (ISA 9.9% is common).")
    contribution_timing: ContributionTiming = ContributionTiming.END


class TaxSavingYear(ResultModel):
    year: int
    amount_general: int
    amount_saving: int
    principal: int
    tax_general: int
    tax_saving: int


class TaxSavingResult(ResultModel):
    yearly_data: List[TaxSavingYear]
    total_general: int
    total_saving: int
    total_principal: int
    total_tax_saved: int
