"""Data contracts for the net-worth percentile estimator."""

from typing import Optional

from moneylab.schemas.common import ParamsModel, ResultModel


class NetWorthParams(ParamsModel):
    """Balance-sheet items in won."""

    financial_assets: float = 0.0
    real_estate: float = 0.0
    rent_deposit: float = 0.0  # 임차 보증금 (asset)
    other_assets: float = 0.0
    loans: float = 0.0
    tenant_deposit: float = 0.0  # 임대 보증금 (liability)
    monthly_savings: float = 0.0


class Tier(ResultModel):
    name: str
    label: str
    top_percent: int


class NextTier(ResultModel):
    name: str
    label: str
    target: float


class Roadmap(ResultModel):
    months: int
    feasible: bool
    label: str


class NetWorthResult(ResultModel):
    total_assets: float
    total_liabilities: float
    net_worth: float
    percentile: float
    tier: Tier
    next_tier: Optional[NextTier] = None
    amount_needed: float
    roadmap: Roadmap
