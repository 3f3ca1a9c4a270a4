"""Projection parameter record and JSON loading."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace as _replace
import json
from pathlib import Path
from typing import Any


class ParameterError(ValueError):
    """Raised when raw input cannot be turned into a usable parameter record."""


def to_camel(name: str) -> str:
    """Map a snake_case attribute to the camelCase key used on the wire."""
    head, *rest = name.split("_")
    parts = [head] + [("PMI" if part == "pmi" else part.capitalize()) for part in rest]
    return "".join(parts)


def _expect_dict(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ParameterError(f"{path}: expected object")
    return value


def _coerce(value: Any, kind: str, path: str) -> Any:
    try:
        if kind == "bool":
            if isinstance(value, str):
                return value.strip().lower() in {"1", "true", "yes", "on"}
            return bool(value)
        if kind == "int":
            number = float(value)
            if not number.is_integer():
                raise ValueError(value)
            return int(number)
        if kind == "float":
            return float(value)
    except (TypeError, ValueError) as exc:
        raise ParameterError(f"{path}: expected {kind}, got {value!r}") from exc
    return str(value)


@dataclass(frozen=True, slots=True)
class Parameters:
    # Property
    house_price: float = 300_000.0
    down_payment_percent: float = 20.0
    mortgage_rate: float = 5.0
    loan_term_years: int = 30
    property_tax_rate: float = 1.9
    home_insurance: float = 417.0
    hoa_fees: float = 100.0
    home_appreciation: float = 4.0
    maintenance_percent: float = 1.0
    pmi_rate: float = 0.5
    pmi_threshold: float = 20.0

    # Rental property
    use_rent_percentage: bool = True
    rent_percentage: float = 8.0
    monthly_rent_fixed: float = 2_400.0
    vacancy_rate: float = 7.0
    property_management_percent: float = 8.0
    rent_growth: float = 3.0
    landlord_insurance_premium: float = 20.0
    maintenance_rental: float = 3.0
    capex_reserve: float = 8.0
    turnover_cost_months: float = 2.0
    avg_tenancy_years: float = 3.0

    # Stock market
    stock_return: float = 7.5
    dividend_yield: float = 2.0
    dividends_reinvested: bool = True

    # Recurring contributions (stocks-only track)
    enable_recurring_contributions: bool = False
    contribution_amount: float = 500.0
    contribution_frequency: str = "monthly"

    # Timeline
    years_to_analyze: int = 30
    initial_cash: float = 60_000.0

    # Taxes
    enable_tax_benefits: bool = False
    marginal_tax_rate: float = 24.0
    standard_deduction: float = 29_200.0
    land_value_percent: float = 20.0
    yearly_income: float = 75_000.0
    filing_status: str = "single"
    state_tax_rate: float = 5.0
    include_payroll_tax: bool = False

    # Monthly living expenses
    monthly_groceries: float = 400.0
    monthly_transportation: float = 200.0
    monthly_insurance: float = 150.0
    monthly_utilities: float = 150.0
    monthly_subscriptions: float = 50.0
    monthly_other: float = 200.0

    # Rent-to-live track
    monthly_rent_to_live: float = 1_800.0
    renter_insurance: float = 25.0
    rent_to_live_growth: float = 3.0

    @property
    def down_payment(self) -> float:
        return self.house_price * (self.down_payment_percent / 100)

    @property
    def loan_amount(self) -> float:
        return self.house_price - self.down_payment

    @property
    def monthly_living_expenses(self) -> float:
        return (
            self.monthly_groceries
            + self.monthly_transportation
            + self.monthly_insurance
            + self.monthly_utilities
            + self.monthly_subscriptions
            + self.monthly_other
        )

    @property
    def annual_contribution(self) -> float:
        """Recurring contribution converted to a yearly figure."""
        if self.contribution_frequency == "monthly":
            return self.contribution_amount * 12
        return self.contribution_amount

    def replace(self, **changes: Any) -> "Parameters":
        return _replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {to_camel(f.name): getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str = "params") -> "Parameters":
        data = _expect_dict(data, path)
        values: dict[str, Any] = {}
        for f in fields(cls):
            key = to_camel(f.name)
            raw = data.get(key, data.get(f.name))
            if raw is None:
                continue
            values[f.name] = _coerce(raw, str(f.type), f"{path}.{key}")
        return cls(**values)


def default_params() -> Parameters:
    return Parameters()


def load_params(path: str | Path) -> Parameters:
    """Load a parameter JSON file into an immutable record."""
    source = Path(path)
    raw = json.loads(source.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ParameterError("params: root must be a JSON object")
    return Parameters.from_dict(raw)
