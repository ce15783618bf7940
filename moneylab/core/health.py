"""
National health insurance (국민건강보험) checks.

DEPENDENT mode answers "can I stay on my spouse's employee plan?" by running
an ordered list of disqualifying rules. EMPLOYEE mode estimates the extra
monthly premium owed on non-salary income above the annual floor.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from moneylab.core.money import safe_amount
from moneylab.core.rules import DEFAULT_HEALTH_RULES, HealthInsuranceRules
from moneylab.schemas.health import (
    HealthCalcMode,
    HealthCalculations,
    HealthParams,
    HealthResult,
    HealthStatus,
    IncomeBreakdown,
)

logger = logging.getLogger(__name__)

DEPENDENT_DESCRIPTIONS = {
    HealthStatus.DANGER: "피부양자 자격 유지 불가능 (지역가입자 전환 대상)",
    HealthStatus.WARNING: "주의가 필요합니다. 소득이나 재산이 기준선에 근접해 있습니다.",
    HealthStatus.SAFE: "현재 기준으로 피부양자 자격 유지가 가능합니다.",
}


def _man(amount: float) -> str:
    return f"{amount / 10_000:,.0f}만원"


def _eok(amount: float) -> str:
    value = amount / 100_000_000
    return f"{value:g}억원"


class _Verdict:
    """Status + reasons accumulated while the rules run."""

    def __init__(self) -> None:
        self.status = HealthStatus.SAFE
        self.reasons: List[str] = []

    def flag(self, status: HealthStatus, reason: str) -> None:
        self.status = self.status.escalate(status)
        self.reasons.append(reason)


def _check_dependent(
    params: HealthParams,
    total_income: float,
    final_property: float,
    rules: HealthInsuranceRules,
) -> _Verdict:
    verdict = _Verdict()
    rental = safe_amount(params.annual_rental_income)
    biz = safe_amount(params.biz_income)
    financial = safe_amount(params.financial_income)

    if not params.has_spouse_job:
        verdict.flag(
            HealthStatus.DANGER,
            "배우자가 직장가입자가 아니면 피부양자가 될 수 없습니다. (지역가입자 전환)",
        )

    if params.is_biz_registered:
        if biz > 0 or rental > 0:
            verdict.flag(
                HealthStatus.DANGER,
                "사업자 등록 상태에서 소득(사업/임대)이 발생하면 자격이 박탈됩니다.",
            )
    else:
        if rental > rules.unregistered_rental_ceiling:
            verdict.flag(
                HealthStatus.WARNING,
                f"미등록 주택임대소득이 연 {_man(rules.unregistered_rental_ceiling)}을 초과하여 "
                "자격 박탈 위험이 있습니다. (공단 확인 필요)",
            )
        if biz > rules.unregistered_biz_ceiling:
            verdict.flag(
                HealthStatus.DANGER,
                f"프리랜서 등 사업소득이 연 {_man(rules.unregistered_biz_ceiling)}을 초과하여 자격이 박탈됩니다.",
            )

    if financial > rules.dependent_financial_income_ceiling:
        verdict.flag(
            HealthStatus.DANGER,
            f"연간 금융소득(이자+배당)이 {_man(rules.dependent_financial_income_ceiling)}을 초과하여 "
            "자격이 박탈됩니다.",
        )

    if total_income > rules.dependent_income_ceiling:
        verdict.flag(
            HealthStatus.DANGER,
            f"연간 합산 소득이 {_man(rules.dependent_income_ceiling)}을 초과하여 자격이 박탈됩니다.",
        )

    if final_property > rules.dependent_property_ceiling_high:
        verdict.flag(
            HealthStatus.DANGER,
            f"재산 환산액(과표 + 전세금{rules.jeonse_property_ratio * 100:g}%)이 "
            f"{_eok(rules.dependent_property_ceiling_high)}을 초과하여 자격이 박탈됩니다.",
        )
    elif final_property > rules.dependent_property_ceiling_low:
        if total_income > rules.dependent_low_property_income_ceiling:
            verdict.flag(
                HealthStatus.DANGER,
                f"재산 환산액이 {_eok(rules.dependent_property_ceiling_low)}을 초과하고 "
                f"연 소득이 {_man(rules.dependent_low_property_income_ceiling)}을 넘어 자격이 박탈됩니다.",
            )

    return verdict


def employee_monthly_premium(total_income: float, rules: HealthInsuranceRules) -> int:
    """소득월액 보험료: monthly share of the income above the floor times the premium rate, floored."""
    excess = total_income - rules.employee_income_floor
    if excess <= 0:
        return 0
    return int(math.floor(excess / 12 * rules.employee_premium_rate))


def check_health_insurance(
    params: HealthParams,
    rules: Optional[HealthInsuranceRules] = None,
) -> HealthResult:
    rules = rules or DEFAULT_HEALTH_RULES

    breakdown = IncomeBreakdown(
        financial=safe_amount(params.financial_income),
        rental=safe_amount(params.annual_rental_income),
        biz=safe_amount(params.biz_income),
        pension=safe_amount(params.pension_income),
        other=safe_amount(params.other_income),
    )
    total_income = breakdown.financial + breakdown.rental + breakdown.biz + breakdown.pension + breakdown.other
    final_property = safe_amount(params.property_value) + safe_amount(params.jeonse_deposit) * rules.jeonse_property_ratio

    reasons: List[str] = []
    monthly_premium = 0

    if params.mode == HealthCalcMode.DEPENDENT:
        verdict = _check_dependent(params, total_income, final_property, rules)
        status = verdict.status
        reasons = verdict.reasons
        description = DEPENDENT_DESCRIPTIONS[status]
    else:
        floor_label = _man(rules.employee_income_floor)
        monthly_premium = employee_monthly_premium(total_income, rules)
        if total_income > rules.employee_income_floor:
            status = HealthStatus.WARNING
            description = f"월급 외 소득이 연 {floor_label}을 초과하여 추가 보험료가 발생합니다."
        else:
            status = HealthStatus.SAFE
            description = f"월급 외 소득이 연 {floor_label} 이하이므로 추가 보험료가 발생하지 않습니다."

    logger.debug("health insurance check (%s): %s, %d reason(s)", params.mode.value, status.value, len(reasons))

    return HealthResult(
        status=status,
        reasons=reasons,
        description=description,
        monthly_premium=monthly_premium,
        calculations=HealthCalculations(
            annual_rental_income=breakdown.rental,
            final_property=final_property,
            total_income=total_income,
            income_breakdown=breakdown,
        ),
    )


__all__ = ["DEPENDENT_DESCRIPTIONS", "employee_monthly_premium", "check_health_insurance"]
