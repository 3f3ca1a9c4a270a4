"""Per-year calculators for the four housing/investment strategies.

Each calculator is a pure function of a :class:`YearContext` and returns one
frozen year record. The driver in :mod:`rvb.engine` adds the cumulative tax
benefit afterwards by building a new record.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable

from .growth import compound_growth, dividend_accumulation, future_value_of_contributions
from .params import Parameters, to_camel

BUY_TO_LIVE = "buyToLive"
BUY_TO_RENT = "buyToRent"
RENT_TO_LIVE = "rentToLive"
STOCKS_ONLY = "stocksOnly"

STRATEGY_KEYS: tuple[str, ...] = (BUY_TO_LIVE, BUY_TO_RENT, RENT_TO_LIVE, STOCKS_ONLY)

STRATEGY_NAMES: dict[str, str] = {
    BUY_TO_LIVE: "Own Your Home",
    BUY_TO_RENT: "Buy Rental Property",
    RENT_TO_LIVE: "Rent & Invest More",
    STOCKS_ONLY: "Skip Homeownership",
}


@dataclass(frozen=True, slots=True)
class YearContext:
    """Quantities shared by every strategy for one projection year."""

    year: int
    params: Parameters
    monthly_income: float
    monthly_living_expenses: float
    down_payment: float = 0.0
    home_value: float = 0.0
    remaining_mortgage: float = 0.0
    monthly_mortgage: float = 0.0
    monthly_property_tax: float = 0.0
    monthly_maintenance: float = 0.0
    current_pmi: float = 0.0


class _Record:
    __slots__ = ()

    def to_dict(self) -> dict[str, Any]:
        return {to_camel(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True, slots=True)
class BuyToLiveYear(_Record):
    year: int
    net_worth: float
    home_equity: float
    home_value: float
    remaining_mortgage: float
    stock_value: float
    stock_value_base: float
    monthly_contributions: float
    dividends: float
    monthly_payment: float
    monthly_pmi: float
    monthly_leftover: float
    monthly_dividend_income: float
    net_monthly_cash_flow: float
    tax_benefit: float = 0.0
    cumulative_tax_benefit: float = 0.0


@dataclass(frozen=True, slots=True)
class BuyToRentYear(_Record):
    year: int
    net_worth: float
    home_equity: float
    home_value: float
    remaining_mortgage: float
    stock_value: float
    stock_value_base: float
    rental_profits: float
    gross_monthly_rent: float
    monthly_rent: float
    monthly_expenses: float
    monthly_pmi: float
    monthly_cash_flow: float
    monthly_leftover: float
    net_monthly_cash_flow: float
    turnover_costs: float
    tax_benefit: float = 0.0
    cumulative_tax_benefit: float = 0.0


@dataclass(frozen=True, slots=True)
class RentToLiveYear(_Record):
    year: int
    net_worth: float
    home_equity: float
    stock_value: float
    stock_value_base: float
    monthly_contributions: float
    dividends: float
    monthly_rent: float
    monthly_rent_cost: float
    monthly_leftover: float
    monthly_dividend_income: float
    monthly_cash_flow: float


@dataclass(frozen=True, slots=True)
class StocksOnlyYear(_Record):
    year: int
    net_worth: float
    stock_value: float
    contributions: float
    dividends: float
    monthly_dividend_income: float
    monthly_contribution: float
    monthly_cash_flow: float


def _invested_portfolio(
    params: Parameters,
    year: int,
    base_principal: float,
    annual_contribution: float,
) -> tuple[float, float, float, float]:
    """Return (base value, contributions value, dividends, dividend paid this year)."""
    stock_value_base = compound_growth(base_principal, params.stock_return, year)

    contributions = 0.0
    if year > 0 and annual_contribution > 0:
        contributions = future_value_of_contributions(annual_contribution, params.stock_return, year)

    accumulated = dividend_accumulation(
        base_principal,
        annual_contribution,
        params.dividend_yield,
        params.stock_return,
        year,
        params.dividends_reinvested,
    )
    return stock_value_base, contributions, accumulated.total, accumulated.annual_income


def buy_to_live(ctx: YearContext) -> BuyToLiveYear:
    params = ctx.params
    home_equity = ctx.home_value - ctx.remaining_mortgage

    monthly_housing_cost = (
        ctx.monthly_mortgage
        + ctx.current_pmi
        + ctx.monthly_property_tax
        + params.home_insurance
        + params.hoa_fees
        + ctx.monthly_maintenance
    )
    monthly_leftover = ctx.monthly_income - monthly_housing_cost - ctx.monthly_living_expenses

    # This year's leftover stands in for every earlier year's contribution.
    annual_contribution = monthly_leftover * 12 if monthly_leftover > 0 else 0.0
    stock_value_base, contributions, dividends, dividend_income = _invested_portfolio(
        params, ctx.year, params.initial_cash - ctx.down_payment, annual_contribution
    )

    monthly_dividend_income = dividend_income / 12
    dividend_offset = 0.0 if params.dividends_reinvested else monthly_dividend_income
    stock_value = stock_value_base + contributions + dividends

    return BuyToLiveYear(
        year=ctx.year,
        net_worth=home_equity + stock_value,
        home_equity=home_equity,
        home_value=ctx.home_value,
        remaining_mortgage=ctx.remaining_mortgage,
        stock_value=stock_value,
        stock_value_base=stock_value_base,
        monthly_contributions=contributions,
        dividends=dividends,
        monthly_payment=monthly_housing_cost,
        monthly_pmi=ctx.current_pmi,
        monthly_leftover=monthly_leftover,
        monthly_dividend_income=monthly_dividend_income,
        net_monthly_cash_flow=ctx.monthly_income + dividend_offset - monthly_housing_cost - ctx.monthly_living_expenses,
    )


def gross_monthly_rent(params: Parameters, year: int) -> float:
    if params.use_rent_percentage:
        base = params.house_price * (params.rent_percentage / 100) / 12
    else:
        base = params.monthly_rent_fixed
    return base * (1 + params.rent_growth / 100) ** year


def _net_rent(params: Parameters, rent: float) -> float:
    effective = rent * (1 - params.vacancy_rate / 100)
    return effective - effective * (params.property_management_percent / 100)


def annualized_turnover_cost(params: Parameters, rent: float) -> float:
    return (rent * params.turnover_cost_months) / params.avg_tenancy_years


def _landlord_insurance(params: Parameters) -> float:
    return params.home_insurance * (1 + params.landlord_insurance_premium / 100)


def rental_profits_invested(ctx: YearContext) -> float:
    """Sum of every past year's rental profit, compounded to ``ctx.year``.

    Each year is rebuilt from that year's rent. PMI is left out of the
    historical expenses and an annualized turnover cost is charged instead.
    """
    params = ctx.params
    insurance = _landlord_insurance(params)
    total = 0.0
    for y in range(1, ctx.year + 1):
        rent = gross_monthly_rent(params, y)
        expenses = (
            ctx.monthly_mortgage
            + ctx.monthly_property_tax
            + insurance
            + params.hoa_fees
            + rent * (params.maintenance_rental / 100)
            + rent * (params.capex_reserve / 100)
        )
        cash_flow = (_net_rent(params, rent) - expenses) * 12
        profit = cash_flow - annualized_turnover_cost(params, rent)
        total += profit * (1 + params.stock_return / 100) ** (ctx.year - y)
    return total


def buy_to_rent(ctx: YearContext) -> BuyToRentYear:
    params = ctx.params
    home_equity = ctx.home_value - ctx.remaining_mortgage

    rent = gross_monthly_rent(params, ctx.year)
    net_rent = _net_rent(params, rent)
    monthly_expenses = (
        ctx.monthly_mortgage
        + ctx.current_pmi
        + ctx.monthly_property_tax
        + _landlord_insurance(params)
        + params.hoa_fees
        + rent * (params.maintenance_rental / 100)
        + rent * (params.capex_reserve / 100)
    )
    property_cash_flow = net_rent - monthly_expenses

    # Job income and living expenses belong in the personal figure, not just the property's.
    monthly_leftover = ctx.monthly_income + property_cash_flow - ctx.monthly_living_expenses

    rental_profits = rental_profits_invested(ctx)
    stock_value_base = compound_growth(params.initial_cash - ctx.down_payment, params.stock_return, ctx.year)
    stock_value = stock_value_base + rental_profits
    turnover_costs = annualized_turnover_cost(params, rent) if ctx.year > 0 else 0.0

    return BuyToRentYear(
        year=ctx.year,
        net_worth=home_equity + stock_value,
        home_equity=home_equity,
        home_value=ctx.home_value,
        remaining_mortgage=ctx.remaining_mortgage,
        stock_value=stock_value,
        stock_value_base=stock_value_base,
        rental_profits=rental_profits,
        gross_monthly_rent=rent,
        monthly_rent=net_rent,
        monthly_expenses=monthly_expenses,
        monthly_pmi=ctx.current_pmi,
        monthly_cash_flow=property_cash_flow,
        monthly_leftover=monthly_leftover,
        net_monthly_cash_flow=monthly_leftover,
        turnover_costs=turnover_costs,
    )


def rent_to_live(ctx: YearContext) -> RentToLiveYear:
    params = ctx.params
    current_rent = params.monthly_rent_to_live * (1 + params.rent_to_live_growth / 100) ** ctx.year
    monthly_rent_cost = current_rent + params.renter_insurance
    monthly_leftover = ctx.monthly_income - monthly_rent_cost - ctx.monthly_living_expenses

    annual_contribution = monthly_leftover * 12 if monthly_leftover > 0 else 0.0
    stock_value_base, contributions, dividends, dividend_income = _invested_portfolio(
        params, ctx.year, params.initial_cash, annual_contribution
    )

    monthly_dividend_income = dividend_income / 12
    dividend_offset = 0.0 if params.dividends_reinvested else monthly_dividend_income
    stock_value = stock_value_base + contributions + dividends

    return RentToLiveYear(
        year=ctx.year,
        net_worth=stock_value,
        home_equity=0.0,
        stock_value=stock_value,
        stock_value_base=stock_value_base,
        monthly_contributions=contributions,
        dividends=dividends,
        monthly_rent=current_rent,
        monthly_rent_cost=monthly_rent_cost,
        monthly_leftover=monthly_leftover,
        monthly_dividend_income=monthly_dividend_income,
        monthly_cash_flow=ctx.monthly_income + dividend_offset - monthly_rent_cost - ctx.monthly_living_expenses,
    )


def stocks_only(ctx: YearContext) -> StocksOnlyYear:
    params = ctx.params
    annual_contribution = params.annual_contribution if params.enable_recurring_contributions else 0.0
    stock_value_base, contributions, dividends, dividend_income = _invested_portfolio(
        params, ctx.year, params.initial_cash, annual_contribution
    )

    monthly_dividend_income = 0.0 if params.dividends_reinvested else dividend_income / 12
    monthly_contribution = params.contribution_amount if params.enable_recurring_contributions else 0.0

    return StocksOnlyYear(
        year=ctx.year,
        net_worth=stock_value_base + contributions + dividends,
        stock_value=stock_value_base,
        contributions=contributions,
        dividends=dividends,
        monthly_dividend_income=monthly_dividend_income,
        monthly_contribution=monthly_contribution,
        monthly_cash_flow=ctx.monthly_income + monthly_dividend_income - ctx.monthly_living_expenses - monthly_contribution,
    )


STRATEGIES: dict[str, Callable[[YearContext], Any]] = {
    BUY_TO_LIVE: buy_to_live,
    BUY_TO_RENT: buy_to_rent,
    RENT_TO_LIVE: rent_to_live,
    STOCKS_ONLY: stocks_only,
}
