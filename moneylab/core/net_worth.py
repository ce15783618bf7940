"""Where a household's net worth sits in the national distribution."""

from __future__ import annotations

import logging
import math
from typing import Optional

from moneylab.core.money import safe_amount
from moneylab.core.rules import DEFAULT_NET_WORTH_RULES, NetWorthRules, TierRule
from moneylab.schemas.net_worth import NetWorthParams, NetWorthResult, NextTier, Roadmap, Tier

logger = logging.getLogger(__name__)


def top_percentile(net_worth: float, rules: Optional[NetWorthRules] = None) -> float:
    """
    Estimated "top X%" position, linearly interpolated inside the survey
    bands. Households in debt land at ``debt_top_percent``.
    """
    rules = rules or DEFAULT_NET_WORTH_RULES
    if net_worth < 0:
        return rules.debt_top_percent

    for band in rules.bands:
        if net_worth >= band.floor:
            span = band.ceiling - band.floor
            share = (band.ceiling - net_worth) / span
            percent = band.top_at_ceiling + (band.top_at_floor - band.top_at_ceiling) * share
            return max(rules.min_top_percent, percent)
    return rules.debt_top_percent


def tier_for(net_worth: float, rules: NetWorthRules) -> TierRule:
    for tier in rules.tiers:
        if net_worth >= tier.threshold:
            return tier
    return rules.tiers[-1]


def next_tier_for(net_worth: float, rules: NetWorthRules) -> Optional[TierRule]:
    """Cheapest tier above the current one, or None at the top."""
    current = tier_for(net_worth, rules)
    index = rules.tiers.index(current)
    if index == 0:
        return None
    return rules.tiers[index - 1]


def months_to_target(
    present_value: float,
    target: float,
    monthly_savings: float,
    annual_rate: float,
    infeasible: int = 9999,
) -> int:
    """
    Months of saving ``monthly_savings`` at ``annual_rate`` percent (monthly
    compounding) until ``present_value`` grows to ``target``; the future value
    of an annuity solved for n. Returns ``infeasible`` when the balance can
    never get there.
    """
    if target - present_value <= 0:
        return 0

    r = annual_rate / 100 / 12
    if r == 0:
        if monthly_savings <= 0:
            return infeasible
        return int(math.ceil((target - present_value) / monthly_savings))

    numer = target + monthly_savings / r
    denom = present_value + monthly_savings / r
    if denom <= 0 or numer <= 0:
        return infeasible

    months = math.log(numer / denom) / math.log(1 + r)
    if not math.isfinite(months):
        return infeasible
    return int(math.ceil(months))


def roadmap_label(months: int, infeasible: int = 9999) -> str:
    if months <= 0:
        return "달성 완료"
    if months >= infeasible:
        return "달성 불가 (이자 부담 과다)"
    years, rest = divmod(months, 12)
    if years == 0:
        return f"{rest}개월"
    if rest == 0:
        return f"{years}년"
    return f"{years}년 {rest}개월"


def estimate_net_worth(
    params: NetWorthParams,
    rules: Optional[NetWorthRules] = None,
) -> NetWorthResult:
    rules = rules or DEFAULT_NET_WORTH_RULES

    total_assets = sum(
        safe_amount(value)
        for value in (params.financial_assets, params.real_estate, params.rent_deposit, params.other_assets)
    )
    total_liabilities = safe_amount(params.loans) + safe_amount(params.tenant_deposit)
    net_worth = total_assets - total_liabilities

    tier = tier_for(net_worth, rules)
    upcoming = next_tier_for(net_worth, rules)

    if upcoming is None:
        amount_needed = 0.0
        months = 0
    else:
        amount_needed = upcoming.threshold - net_worth
        months = months_to_target(
            net_worth,
            upcoming.threshold,
            safe_amount(params.monthly_savings),
            rules.roadmap_annual_rate,
            rules.roadmap_infeasible_months,
        )

    feasible = months < rules.roadmap_infeasible_months
    if not feasible:
        logger.debug("next tier unreachable from net worth %.0f", net_worth)

    return NetWorthResult(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=net_worth,
        percentile=top_percentile(net_worth, rules),
        tier=Tier(name=tier.name, label=tier.label, top_percent=tier.top_percent),
        next_tier=(
            NextTier(name=upcoming.name, label=upcoming.label, target=upcoming.threshold)
            if upcoming is not None
            else None
        ),
        amount_needed=amount_needed,
        roadmap=Roadmap(
            months=months,
            feasible=feasible,
            label=roadmap_label(months, rules.roadmap_infeasible_months),
        ),
    )


__all__ = [
    "top_percentile",
    "tier_for",
    "next_tier_for",
    "months_to_target",
    "roadmap_label",
    "estimate_net_worth",
]
