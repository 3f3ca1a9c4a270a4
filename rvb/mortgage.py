"""Fixed-rate mortgage amortization helpers."""

from __future__ import annotations


def _monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100 / 12


def monthly_payment(principal: float, annual_rate_percent: float, years: float) -> float:
    if years <= 0:
        raise ValueError(f"loan term must be positive, got {years}")

    rate = _monthly_rate(annual_rate_percent)
    num_payments = years * 12
    if rate == 0:
        return principal / num_payments

    factor = (1 + rate) ** num_payments
    return principal * (rate * factor) / (factor - 1)


def remaining_balance(principal: float, annual_rate_percent: float, total_months: int, months_paid: int) -> float:
    """Closed-form balance left after ``months_paid`` payments, floored at zero."""
    if total_months <= 0:
        raise ValueError(f"total months must be positive, got {total_months}")
    if months_paid >= total_months:
        return 0.0

    rate = _monthly_rate(annual_rate_percent)
    if rate == 0:
        return max(0.0, principal * (1 - months_paid / total_months))

    remaining = principal * ((1 + rate) ** total_months - (1 + rate) ** months_paid) / ((1 + rate) ** total_months - 1)
    return max(0.0, remaining)


def total_interest(principal: float, annual_rate_percent: float, years: float) -> float:
    return monthly_payment(principal, annual_rate_percent, years) * years * 12 - principal


def equity_percent(home_value: float, remaining_mortgage: float) -> float:
    if home_value == 0:
        return 0.0
    return ((home_value - remaining_mortgage) / home_value) * 100
