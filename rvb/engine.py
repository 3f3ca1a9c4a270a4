"""Year-by-year projection driver for the four strategies."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
import logging
from typing import Any

from .growth import compound_growth
from .mortgage import equity_percent, monthly_payment, remaining_balance
from .params import ParameterError, Parameters, to_camel
from .strategies import (
    BUY_TO_LIVE,
    BUY_TO_RENT,
    RENT_TO_LIVE,
    STOCKS_ONLY,
    BuyToLiveYear,
    BuyToRentYear,
    RentToLiveYear,
    StocksOnlyYear,
    YearContext,
    buy_to_live,
    buy_to_rent,
    rent_to_live,
    stocks_only,
)
from .tax import IncomeTaxes, compute_income_taxes, mortgage_interest_deduction, rental_tax_benefit
from .validate import validate_params

logger = logging.getLogger(__name__)


def _camel_dict(obj: Any) -> dict[str, Any]:
    return {to_camel(f.name): getattr(obj, f.name) for f in fields(obj)}


@dataclass(slots=True)
class TaxSummary:
    federal_tax: float
    state_tax: float
    payroll_tax: float
    total_taxes: float
    after_tax_income: float
    monthly_after_tax_income: float
    effective_tax_rate: float
    gross_income: float

    @classmethod
    def from_income_taxes(cls, taxes: IncomeTaxes, gross_income: float) -> "TaxSummary":
        return cls(
            federal_tax=taxes.federal_tax,
            state_tax=taxes.state_tax,
            payroll_tax=taxes.payroll_tax,
            total_taxes=taxes.total_taxes,
            after_tax_income=taxes.after_tax_income,
            monthly_after_tax_income=taxes.monthly_after_tax_income,
            effective_tax_rate=taxes.effective_tax_rate,
            gross_income=gross_income,
        )

    def to_dict(self) -> dict[str, Any]:
        return _camel_dict(self)


@dataclass(slots=True)
class LivingExpenseSummary:
    monthly_total: float
    annual_total: float

    def to_dict(self) -> dict[str, Any]:
        return _camel_dict(self)


@dataclass(slots=True)
class ProjectionResult:
    params: Parameters
    taxes: TaxSummary
    living_expenses: LivingExpenseSummary
    buy_to_live: list[BuyToLiveYear] = field(default_factory=list)
    buy_to_rent: list[BuyToRentYear] = field(default_factory=list)
    rent_to_live: list[RentToLiveYear] = field(default_factory=list)
    stocks_only: list[StocksOnlyYear] = field(default_factory=list)

    def series(self, strategy: str) -> list[Any]:
        by_key = {
            BUY_TO_LIVE: self.buy_to_live,
            BUY_TO_RENT: self.buy_to_rent,
            RENT_TO_LIVE: self.rent_to_live,
            STOCKS_ONLY: self.stocks_only,
        }
        if strategy not in by_key:
            raise KeyError(f"unknown strategy '{strategy}'")
        return by_key[strategy]

    def net_worth(self, strategy: str) -> list[float]:
        return [row.net_worth for row in self.series(strategy)]

    def to_dict(self) -> dict[str, Any]:
        return {
            BUY_TO_LIVE: [row.to_dict() for row in self.buy_to_live],
            BUY_TO_RENT: [row.to_dict() for row in self.buy_to_rent],
            RENT_TO_LIVE: [row.to_dict() for row in self.rent_to_live],
            STOCKS_ONLY: [row.to_dict() for row in self.stocks_only],
            "taxes": self.taxes.to_dict(),
            "livingExpenses": self.living_expenses.to_dict(),
        }


def _check_params(params: Parameters) -> None:
    validation = validate_params(params)
    if not validation.is_valid:
        raise ParameterError("; ".join(validation.errors))


def project(params: Parameters) -> ProjectionResult:
    """Project every strategy from year 0 through ``params.years_to_analyze``.

    Raises :class:`ParameterError` before computing anything when the
    parameters fail validation.
    """
    _check_params(params)
    logger.debug("Projecting %d years", params.years_to_analyze)

    income_taxes = compute_income_taxes(
        params.yearly_income,
        params.filing_status,
        params.state_tax_rate,
        include_payroll_tax=params.include_payroll_tax,
    )
    monthly_income = income_taxes.monthly_after_tax_income
    living = params.monthly_living_expenses

    result = ProjectionResult(
        params=params,
        taxes=TaxSummary.from_income_taxes(income_taxes, params.yearly_income),
        living_expenses=LivingExpenseSummary(monthly_total=living, annual_total=living * 12),
    )

    down_payment = params.down_payment
    loan_amount = params.loan_amount
    total_months = params.loan_term_years * 12
    monthly_mortgage = monthly_payment(loan_amount, params.mortgage_rate, params.loan_term_years)
    monthly_property_tax = (params.house_price * (params.property_tax_rate / 100)) / 12
    monthly_maintenance = (params.house_price * (params.maintenance_percent / 100)) / 12
    needs_pmi = params.down_payment_percent < params.pmi_threshold
    monthly_pmi = (loan_amount * (params.pmi_rate / 100)) / 12 if needs_pmi else 0.0
    building_value = params.house_price * (1 - params.land_value_percent / 100)
    logger.debug(
        "Loan %.2f at %.3f%% over %d years: payment %.2f, PMI %.2f",
        loan_amount,
        params.mortgage_rate,
        params.loan_term_years,
        monthly_mortgage,
        monthly_pmi,
    )

    cumulative_live = 0.0
    cumulative_rent = 0.0
    pmi_active = monthly_pmi > 0

    for year in range(params.years_to_analyze + 1):
        home_value = compound_growth(params.house_price, params.home_appreciation, year)
        remaining_mortgage = remaining_balance(loan_amount, params.mortgage_rate, total_months, year * 12)
        current_pmi = monthly_pmi if needs_pmi and equity_percent(home_value, remaining_mortgage) < params.pmi_threshold else 0.0
        if pmi_active and current_pmi == 0.0:
            logger.debug("PMI removed in year %d", year)
            pmi_active = False

        ctx = YearContext(
            year=year,
            params=params,
            monthly_income=monthly_income,
            monthly_living_expenses=living,
            down_payment=down_payment,
            home_value=home_value,
            remaining_mortgage=remaining_mortgage,
            monthly_mortgage=monthly_mortgage,
            monthly_property_tax=monthly_property_tax,
            monthly_maintenance=monthly_maintenance,
            current_pmi=current_pmi,
        )

        live = buy_to_live(ctx)
        live_benefit = 0.0
        if params.enable_tax_benefits and year > 0:
            principal_paid = result.buy_to_live[year - 1].remaining_mortgage - remaining_mortgage
            interest_paid = monthly_mortgage * 12 - principal_paid
            live_benefit = mortgage_interest_deduction(
                interest_paid,
                monthly_property_tax * 12,
                params.standard_deduction,
                params.marginal_tax_rate,
            )
            cumulative_live += live_benefit
        result.buy_to_live.append(
            replace(
                live,
                net_worth=live.net_worth + cumulative_live,
                tax_benefit=live_benefit,
                cumulative_tax_benefit=cumulative_live,
            )
        )

        rental = buy_to_rent(ctx)
        rent_benefit = 0.0
        if params.enable_tax_benefits and year > 0:
            rent_benefit = rental_tax_benefit(
                building_value,
                rental.monthly_rent * 12,
                rental.monthly_expenses * 12,
                params.marginal_tax_rate,
            )
            cumulative_rent += rent_benefit
        result.buy_to_rent.append(
            replace(
                rental,
                net_worth=rental.net_worth + cumulative_rent,
                tax_benefit=rent_benefit,
                cumulative_tax_benefit=cumulative_rent,
            )
        )

        result.rent_to_live.append(rent_to_live(ctx))
        result.stocks_only.append(stocks_only(ctx))

    logger.debug(
        "Projection complete: final net worth %s",
        {key: round(result.net_worth(key)[-1], 2) for key in (BUY_TO_LIVE, BUY_TO_RENT, RENT_TO_LIVE, STOCKS_ONLY)},
    )
    return result
