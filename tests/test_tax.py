import pytest

from rvb.tax import (
    compute_federal_tax,
    compute_income_taxes,
    compute_payroll_tax,
    mortgage_interest_deduction,
    rental_tax_benefit,
)
from rvb.tax_data import FEDERAL_BRACKETS, MAX_RENTAL_LOSS_DEDUCTION


def test_income_taxes_single_breakdown():
    taxes = compute_income_taxes(75_000, "single", 5.0)

    assert round(taxes.federal_tax, 2) == 11_553.00
    assert round(taxes.state_tax, 2) == 3_750.00
    assert taxes.payroll_tax == 0
    assert round(taxes.total_taxes, 2) == 15_303.00
    assert round(taxes.after_tax_income, 2) == 59_697.00
    assert round(taxes.monthly_after_tax_income, 2) == 4_974.75
    assert taxes.effective_tax_rate == pytest.approx(15_303 / 75_000 * 100)


def test_married_brackets():
    assert round(compute_federal_tax(100_000, "married"), 2) == 12_106.00


def test_bracket_boundary_equals_sum_of_filled_brackets():
    assert round(compute_federal_tax(47_150, "single"), 2) == 1_160.00 + 4_266.00
    assert round(compute_federal_tax(11_600, "single"), 2) == 1_160.00


@pytest.mark.parametrize("status", sorted(FEDERAL_BRACKETS))
def test_federal_tax_is_continuous_and_non_decreasing(status):
    previous = 0.0
    for upper, _ in FEDERAL_BRACKETS[status]:
        if upper is None:
            break
        below = compute_federal_tax(upper - 0.01, status)
        at = compute_federal_tax(upper, status)
        above = compute_federal_tax(upper + 0.01, status)
        assert previous <= below <= at <= above
        assert above - below < 0.01
        previous = above


def test_unknown_filing_status_falls_back_to_single(caplog):
    fallback = compute_income_taxes(75_000, "widowed", 5.0)
    single = compute_income_taxes(75_000, "single", 5.0)
    assert fallback.federal_tax == single.federal_tax
    assert "Unknown filing status" in caplog.text


def test_zero_income_has_zero_effective_rate():
    taxes = compute_income_taxes(0, "single", 5.0)
    assert taxes.total_taxes == 0
    assert taxes.effective_tax_rate == 0


def test_payroll_tax_is_opt_in():
    without = compute_income_taxes(75_000, "single", 5.0)
    with_payroll = compute_income_taxes(75_000, "single", 5.0, include_payroll_tax=True)

    assert round(with_payroll.payroll_tax, 2) == 5_737.50
    assert with_payroll.total_taxes == pytest.approx(without.total_taxes + 5_737.50)


def test_payroll_tax_caps_social_security_and_adds_medicare_surtax():
    assert round(compute_payroll_tax(300_000, "single"), 2) == 15_703.20
    assert round(compute_payroll_tax(300_000, "married"), 2) == 15_253.20
    assert compute_payroll_tax(0, "single") == 0


def test_mortgage_interest_deduction_only_above_standard_deduction():
    assert mortgage_interest_deduction(12_000, 5_700, 29_200, 24) == 0
    assert mortgage_interest_deduction(30_000, 5_000, 29_200, 24) == pytest.approx(1_392.0)


def test_rental_benefit_profitable_property_shelters_depreciation():
    benefit = rental_tax_benefit(240_000, 20_000, 10_000, 24)
    assert benefit == pytest.approx(240_000 / 27.5 * 0.24)


def test_rental_benefit_small_loss_is_fully_deductible():
    benefit = rental_tax_benefit(240_000, 10_000, 15_000, 24)
    assert benefit == pytest.approx((5_000 + 240_000 / 27.5) * 0.24)


@pytest.mark.parametrize("expenses", [100_000, 1_000_000, 10_000_000])
def test_rental_benefit_loss_is_capped(expenses):
    benefit = rental_tax_benefit(240_000, 0, expenses, 24)
    assert benefit == pytest.approx(MAX_RENTAL_LOSS_DEDUCTION * 0.24)
    assert benefit <= 25_000 * 24 / 100


def test_rental_benefit_custom_depreciation_period():
    assert rental_tax_benefit(390_000, 50_000, 0, 10, depreciation_years=39) == pytest.approx(1_000.0)
