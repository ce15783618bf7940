"""Data contracts for the national health-insurance eligibility check."""

from enum import Enum
from typing import List

from moneylab.schemas.common import ParamsModel, ResultModel


class HealthStatus(str, Enum):
    SAFE = "SAFE"
    WARNING = "WARNING"
    DANGER = "DANGER"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    def escalate(self, other: "HealthStatus") -> "HealthStatus":
        """Return the more severe of the two; a status never goes back down."""
        return other if other.severity > self.severity else self


_SEVERITY = {HealthStatus.SAFE: 0, HealthStatus.WARNING: 1, HealthStatus.DANGER: 2}


class HealthCalcMode(str, Enum):
    DEPENDENT = "DEPENDENT"  # 피부양자 자격 유지 여부
    EMPLOYEE = "EMPLOYEE"  # 직장가입자 소득월액 보험료


class HealthParams(ParamsModel):
    """Annual amounts in won."""

    mode: HealthCalcMode = HealthCalcMode.DEPENDENT
    is_biz_registered: bool = False
    has_spouse_job: bool = True
    annual_rental_income: float = 0.0
    biz_income: float = 0.0
    financial_income: float = 0.0
    pension_income: float = 0.0
    other_income: float = 0.0
    property_value: float = 0.0
    jeonse_deposit: float = 0.0


class IncomeBreakdown(ResultModel):
    financial: float
    rental: float
    biz: float
    pension: float
    other: float


class HealthCalculations(ResultModel):
    annual_rental_income: float
    final_property: float
    total_income: float
    income_breakdown: IncomeBreakdown


class HealthResult(ResultModel):
    status: HealthStatus
    reasons: List[str]
    description: str
    monthly_premium: int
    calculations: HealthCalculations
