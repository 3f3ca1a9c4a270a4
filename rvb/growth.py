"""Compound growth, contribution annuity and dividend helpers.

Every rate is a whole-number percentage (``7.5`` means 7.5%).
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence


@dataclass(slots=True)
class DividendAccumulation:
    total: float = 0.0
    annual_income: float = 0.0


def compound_growth(principal: float, annual_rate_percent: float, years: float) -> float:
    return principal * (1 + annual_rate_percent / 100) ** years


def future_value_of_contributions(annual_contribution: float, annual_rate_percent: float, years: int) -> float:
    """Value at ``years`` of one lump contribution per year, each compounding for the years left."""
    total = 0.0
    for y in range(1, years + 1):
        total += annual_contribution * (1 + annual_rate_percent / 100) ** (years - y)
    return total


def dividend_accumulation(
    base_principal: float,
    annual_contribution: float,
    dividend_yield_percent: float,
    stock_return_percent: float,
    target_year: int,
    reinvest: bool,
) -> DividendAccumulation:
    """Dividends paid from year 1 through ``target_year``.

    Each year's portfolio is the compounded base plus contributions to date
    grown for ``y - y // 2`` years. Reinvested dividends compound to the
    target year; cash dividends are summed as paid. ``annual_income`` is the
    dividend paid in the target year itself.
    """
    result = DividendAccumulation()
    if dividend_yield_percent <= 0 or target_year <= 0:
        return result

    for y in range(1, target_year + 1):
        contributions_so_far = annual_contribution * y
        base_value = compound_growth(base_principal, stock_return_percent, y)
        contributions_value = contributions_so_far * (1 + stock_return_percent / 100) ** (y - math.floor(y / 2))
        dividend = (base_value + contributions_value) * (dividend_yield_percent / 100)

        if reinvest:
            result.total += compound_growth(dividend, stock_return_percent, target_year - y)
        else:
            result.total += dividend

        if y == target_year:
            result.annual_income = dividend
    return result


def crossover_year(series_a: Sequence[float], series_b: Sequence[float]) -> int | None:
    """First year where ``series_a`` moves strictly above ``series_b``."""
    for year in range(1, min(len(series_a), len(series_b))):
        if series_a[year] > series_b[year] and series_a[year - 1] <= series_b[year - 1]:
            return year
    return None


def yoy_growth(current_value: float, previous_value: float) -> float:
    if previous_value == 0:
        return 0.0
    return ((current_value - previous_value) / previous_value) * 100


def cagr(beginning_value: float, ending_value: float, years: float) -> float:
    if beginning_value == 0 or years == 0:
        return 0.0
    ratio = ending_value / beginning_value
    if ratio < 0:
        return 0.0
    return (ratio ** (1 / years) - 1) * 100
