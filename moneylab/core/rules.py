"""
Regulatory and modelling constants used by the calculators.

These mirror government brackets and tax rates that change over time, so each
calculator takes its rule set as an argument (falling back to the defaults
below) instead of hard-coding literals. All amounts are in won.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class _Rules(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class SimulationRules(_Rules):
    life_expectancy: int = Field(85, ge=1, le=120)
    inflation_rate: float = 2.5  # percent, fixed
    readiness_multiple: float = 25.0  # 4% rule -> 25x annual spend
    readiness_cap: int = 150
    fire_max_months: int = 1200
    fire_months_after_achievement: int = 240


class TaxRules(_Rules):
    general_rate: float = 15.4  # 이자/배당소득세 (percent)
    saving_rate: float = 0.0  # ISA / pension account (percent)


class KidsTaxRules(_Rules):
    annual_harvest_allowance: float = 2_500_000  # 해외주식 양도소득 기본공제
    capital_gains_rate: float = 22.0  # percent
    pension_other_income_rate: float = 16.5  # percent
    gift_limit_minor: float = 20_000_000
    gift_limit_adult: float = 50_000_000
    gift_adult_age: int = 19
    gift_horizon_years: int = 10


class HealthInsuranceRules(_Rules):
    """2022 개편안 기준 피부양자 / 소득월액 보험료 기준."""

    dependent_income_ceiling: float = 20_000_000
    dependent_financial_income_ceiling: float = 20_000_000
    dependent_property_ceiling_high: float = 900_000_000
    dependent_property_ceiling_low: float = 540_000_000
    dependent_low_property_income_ceiling: float = 10_000_000
    unregistered_rental_ceiling: float = 4_000_000
    unregistered_biz_ceiling: float = 5_000_000
    jeonse_property_ratio: float = 0.3
    employee_income_floor: float = 20_000_000
    employee_premium_rate: float = 0.0709


class LotteryRules(_Rules):
    total_combinations: int = 8_145_060  # 6/45
    weeks_per_year: int = 52
    tax_bracket: float = 300_000_000
    tax_rate_low: float = 22.0
    tax_rate_high: float = 33.0
    lightning_odds: float = 6_000_000


class PercentileBand(_Rules):
    """Linear band: ``top_at_floor`` percent at ``floor`` down to ``top_at_ceiling`` at ``ceiling``."""

    floor: float
    ceiling: float
    top_at_floor: float
    top_at_ceiling: float


class TierRule(_Rules):
    name: str
    label: str
    threshold: float
    top_percent: int


class NetWorthRules(_Rules):
    bands: List[PercentileBand] = Field(
        default_factory=lambda: [
            PercentileBand(floor=3_000_000_000, ceiling=13_000_000_000, top_at_floor=1, top_at_ceiling=0),
            PercentileBand(floor=1_000_000_000, ceiling=3_000_000_000, top_at_floor=10, top_at_ceiling=1),
            PercentileBand(floor=300_000_000, ceiling=1_000_000_000, top_at_floor=40, top_at_ceiling=10),
            PercentileBand(floor=100_000_000, ceiling=300_000_000, top_at_floor=65, top_at_ceiling=40),
            PercentileBand(floor=0, ceiling=100_000_000, top_at_floor=95, top_at_ceiling=65),
        ]
    )
    min_top_percent: float = 0.1
    debt_top_percent: float = 98.0
    # highest first
    tiers: List[TierRule] = Field(
        default_factory=lambda: [
            TierRule(name="DIAMOND", label="다이아몬드", threshold=3_000_000_000, top_percent=1),
            TierRule(name="GOLD", label="골드", threshold=1_000_000_000, top_percent=10),
            TierRule(name="BRONZE", label="브론즈", threshold=float("-inf"), top_percent=65),
        ]
    )
    roadmap_annual_rate: float = 5.0  # percent
    roadmap_infeasible_months: int = 9999


DEFAULT_SIMULATION_RULES = SimulationRules()
DEFAULT_TAX_RULES = TaxRules()
DEFAULT_KIDS_TAX_RULES = KidsTaxRules()
DEFAULT_HEALTH_RULES = HealthInsuranceRules()
DEFAULT_LOTTERY_RULES = LotteryRules()
DEFAULT_NET_WORTH_RULES = NetWorthRules()
