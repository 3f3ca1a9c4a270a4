"""Semantic validation for projection parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .mortgage import monthly_payment
from .params import Parameters, to_camel
from .tax_data import FILING_STATUSES, RECOMMENDED_HOUSING_PERCENT

CONTRIBUTION_FREQUENCIES = {"monthly", "yearly"}

# Whole-number percentages that must stay within 0..100.
BOUNDED_PERCENT_FIELDS = (
    "down_payment_percent",
    "land_value_percent",
    "vacancy_rate",
    "property_management_percent",
)

NON_NEGATIVE_FIELDS = (
    "initial_cash",
    "yearly_income",
    "home_insurance",
    "hoa_fees",
    "monthly_rent_fixed",
    "contribution_amount",
    "monthly_groceries",
    "monthly_transportation",
    "monthly_insurance",
    "monthly_utilities",
    "monthly_subscriptions",
    "monthly_other",
    "monthly_rent_to_live",
    "renter_insurance",
    "turnover_cost_months",
)

# Above this horizon the per-year history re-summation gets slow.
MAX_COMFORTABLE_YEARS = 50


@dataclass(slots=True)
class ValidationResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _check_enum(result: ValidationResult, path: str, value: str, allowed: Iterable[str]) -> None:
    allowed_set = set(allowed)
    if value not in allowed_set:
        expected = ", ".join(sorted(allowed_set))
        result.errors.append(f"{path}: '{value}' is not valid; expected one of [{expected}]")


def _check_range(result: ValidationResult, params: Parameters, name: str, low: float, high: float) -> None:
    value = getattr(params, name)
    if value < low:
        result.errors.append(f"{to_camel(name)}: must be >= {low:g}")
    elif value > high:
        result.errors.append(f"{to_camel(name)}: must be <= {high:g}")


def validate_params(params: Parameters) -> ValidationResult:
    result = ValidationResult()

    if params.years_to_analyze < 0:
        result.errors.append("yearsToAnalyze: must be >= 0")
    elif params.years_to_analyze > MAX_COMFORTABLE_YEARS:
        result.warnings.append(
            f"yearsToAnalyze: {params.years_to_analyze} years exceeds {MAX_COMFORTABLE_YEARS}; projection may be slow"
        )
    if params.loan_term_years <= 0:
        result.errors.append("loanTermYears: must be > 0")
    if params.house_price <= 0:
        result.errors.append("housePrice: must be > 0")
    if params.avg_tenancy_years <= 0:
        result.errors.append("avgTenancyYears: must be > 0")

    for name in BOUNDED_PERCENT_FIELDS:
        _check_range(result, params, name, 0.0, 100.0)
    for name in NON_NEGATIVE_FIELDS:
        if getattr(params, name) < 0:
            result.errors.append(f"{to_camel(name)}: must be >= 0")

    _check_enum(result, "contributionFrequency", params.contribution_frequency, CONTRIBUTION_FREQUENCIES)

    if params.filing_status not in FILING_STATUSES:
        expected = ", ".join(sorted(FILING_STATUSES))
        result.warnings.append(
            f"filingStatus: '{params.filing_status}' is not one of [{expected}]; single brackets will be used"
        )

    if not result.is_valid:
        return result

    if params.initial_cash < params.down_payment:
        result.warnings.append(
            f"initialCash: {params.initial_cash:,.0f} does not cover the {params.down_payment:,.0f} down payment"
        )
    if params.down_payment_percent < params.pmi_threshold:
        result.warnings.append(
            f"downPaymentPercent: below the {params.pmi_threshold:g}% PMI threshold; PMI applies until equity reaches it"
        )

    gross_monthly_income = params.yearly_income / 12
    if gross_monthly_income > 0:
        housing = (
            monthly_payment(params.loan_amount, params.mortgage_rate, params.loan_term_years)
            + params.house_price * (params.property_tax_rate / 100) / 12
            + params.home_insurance
            + params.hoa_fees
        )
        housing_percent = housing / gross_monthly_income * 100
        if housing_percent > RECOMMENDED_HOUSING_PERCENT:
            result.warnings.append(
                f"housing: {housing_percent:.1f}% of gross monthly income exceeds the recommended {RECOMMENDED_HOUSING_PERCENT:g}%"
            )

    return result
