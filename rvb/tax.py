"""Income tax and housing tax-benefit calculations."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from .tax_data import (
    ADDITIONAL_MEDICARE_THRESHOLDS,
    FEDERAL_BRACKETS,
    FICA_RATES,
    MAX_RENTAL_LOSS_DEDUCTION,
    RENTAL_DEPRECIATION_YEARS,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class IncomeTaxes:
    federal_tax: float
    state_tax: float
    payroll_tax: float
    total_taxes: float
    after_tax_income: float
    monthly_after_tax_income: float
    effective_tax_rate: float


def normalize_filing_status(filing_status: str) -> str:
    if filing_status in FEDERAL_BRACKETS:
        return filing_status
    logger.warning("Unknown filing status %r; using single brackets", filing_status)
    return "single"


def _progressive_tax(amount: float, brackets: list[tuple[float | None, float]]) -> float:
    if amount <= 0:
        return 0.0

    remaining = amount
    lower = 0.0
    tax = 0.0
    for upper, rate in brackets:
        if remaining <= 0:
            break
        if upper is None:
            taxable_at_rate = remaining
        else:
            taxable_at_rate = min(remaining, upper - lower)
        tax += taxable_at_rate * rate
        remaining -= taxable_at_rate
        if upper is None:
            break
        lower = upper
    return tax


def compute_federal_tax(gross_income: float, filing_status: str) -> float:
    brackets = FEDERAL_BRACKETS[normalize_filing_status(filing_status)]
    return _progressive_tax(gross_income, brackets)


def compute_state_tax(gross_income: float, state_rate_percent: float) -> float:
    return gross_income * (state_rate_percent / 100)


def compute_payroll_tax(wages: float, filing_status: str) -> float:
    """Social Security plus Medicare (and additional Medicare) on a year of wages."""
    if wages <= 0:
        return 0.0

    fs = normalize_filing_status(filing_status)
    ss_tax = min(wages, FICA_RATES["social_security_wage_base"]) * FICA_RATES["social_security_rate"]
    medicare_tax = wages * FICA_RATES["medicare_rate"]
    additional_taxable = max(0.0, wages - ADDITIONAL_MEDICARE_THRESHOLDS[fs])
    return ss_tax + medicare_tax + additional_taxable * FICA_RATES["additional_medicare_rate"]


def compute_income_taxes(
    gross_income: float,
    filing_status: str,
    state_rate_percent: float,
    include_payroll_tax: bool = False,
) -> IncomeTaxes:
    """Federal bracket tax plus flat state tax, optionally with payroll tax.

    Unknown filing statuses fall back to the single bracket table.
    """
    federal_tax = compute_federal_tax(gross_income, filing_status)
    state_tax = compute_state_tax(gross_income, state_rate_percent)
    payroll_tax = compute_payroll_tax(gross_income, filing_status) if include_payroll_tax else 0.0

    total_taxes = federal_tax + state_tax + payroll_tax
    after_tax_income = gross_income - total_taxes
    effective_tax_rate = (total_taxes / gross_income) * 100 if gross_income else 0.0
    return IncomeTaxes(
        federal_tax=federal_tax,
        state_tax=state_tax,
        payroll_tax=payroll_tax,
        total_taxes=total_taxes,
        after_tax_income=after_tax_income,
        monthly_after_tax_income=after_tax_income / 12,
        effective_tax_rate=effective_tax_rate,
    )


def mortgage_interest_deduction(
    interest_paid: float,
    property_tax_paid: float,
    standard_deduction: float,
    marginal_rate_percent: float,
) -> float:
    """Tax saved by itemizing interest and property tax over the standard deduction."""
    itemized = interest_paid + property_tax_paid
    if itemized > standard_deduction:
        return (itemized - standard_deduction) * (marginal_rate_percent / 100)
    return 0.0


def rental_tax_benefit(
    building_value: float,
    annual_rental_income: float,
    annual_expenses: float,
    marginal_rate_percent: float,
    depreciation_years: float = RENTAL_DEPRECIATION_YEARS,
) -> float:
    """Tax saved by straight-line depreciation and passive rental losses.

    A net loss is deductible up to the passive-loss allowance; a profitable
    property still shelters income equal to its depreciation.
    """
    depreciation = building_value / depreciation_years
    net_rental_income = annual_rental_income - annual_expenses - depreciation

    if net_rental_income < 0:
        deductible_loss = min(abs(net_rental_income), MAX_RENTAL_LOSS_DEDUCTION)
        return deductible_loss * (marginal_rate_percent / 100)
    return depreciation * (marginal_rate_percent / 100)
