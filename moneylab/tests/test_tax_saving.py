from __future__ import annotations

from math import isclose

from moneylab.core.compound import project_compound
from moneylab.core.rules import TaxRules
from moneylab.core.tax_saving import compare_tax_saving, tax_on_gain
from moneylab.schemas.common import ContributionTiming
from moneylab.schemas.compound import CompoundParams
from moneylab.schemas.tax_saving import TaxSavingParams


def test_only_the_gain_is_taxed():
    result = compare_tax_saving(TaxSavingParams(initial_amount=10_000, monthly_amount=0, rate=12, years=1))

    start, year1 = result.yearly_data
    assert start.amount_general == start.amount_saving == 10_000
    assert start.tax_general == start.tax_saving == 0

    # 10,000 * 1.01^12 = 11,268.25; gain 1,268.25 taxed at 15.4%
    assert year1.tax_general == 195
    assert year1.amount_general == 11_073
    assert year1.tax_saving == 0
    assert year1.amount_saving == 11_268
    assert year1.principal == 10_000


def test_both_accounts_share_the_growth_projectors_path():
    inputs = dict(initial_amount=10_000_000, monthly_amount=500_000, rate=6, years=15)
    comparison = compare_tax_saving(TaxSavingParams(**inputs))
    growth = project_compound(CompoundParams(**inputs))

    for tax_row, growth_row in zip(comparison.yearly_data, growth.yearly_data):
        assert tax_row.amount_saving == growth_row.amount
        assert tax_row.principal == growth_row.principal
        assert tax_row.amount_general <= tax_row.amount_saving


def test_totals_and_tax_saved():
    result = compare_tax_saving(
        TaxSavingParams(initial_amount=10_000_000, monthly_amount=1_000_000, rate=5, years=10, tax_rate_saving=9.9)
    )

    final = result.yearly_data[-1]
    assert result.total_general == final.amount_general
    assert result.total_saving == final.amount_saving
    assert result.total_principal == final.principal == 130_000_000
    assert result.total_tax_saved == final.amount_saving - final.amount_general
    assert result.total_tax_saved > 0
    assert final.tax_saving > 0


def test_losses_are_not_taxed():
    result = compare_tax_saving(TaxSavingParams(initial_amount=10_000_000, monthly_amount=0, rate=-10, years=3))

    assert all(row.tax_general == 0 and row.tax_saving == 0 for row in result.yearly_data)
    assert result.total_tax_saved == 0


def test_rates_default_to_rules():
    params = TaxSavingParams(initial_amount=10_000_000, monthly_amount=0, rate=5, years=5)
    custom = compare_tax_saving(params, rules=TaxRules(general_rate=0.0, saving_rate=0.0))

    assert custom.total_general == custom.total_saving


def test_start_of_month_deposits_earn_more():
    inputs = dict(initial_amount=0, monthly_amount=1_000_000, rate=6, years=5)
    end = compare_tax_saving(TaxSavingParams(**inputs))
    start = compare_tax_saving(TaxSavingParams(contribution_timing=ContributionTiming.START, **inputs))

    assert start.total_saving > end.total_saving
    assert start.total_principal == end.total_principal


def test_tax_on_gain():
    assert isclose(tax_on_gain(1000, 15.4), 154.0)
    assert tax_on_gain(0, 15.4) == 0.0
    assert tax_on_gain(-500, 15.4) == 0.0


def test_non_finite_inputs_are_treated_as_zero():
    result = compare_tax_saving(
        TaxSavingParams(initial_amount=1_000_000, monthly_amount=float("inf"), rate=float("nan"), years=2)
    )

    assert [row.amount_general for row in result.yearly_data] == [1_000_000] * 3
    assert result.total_tax_saved == 0
