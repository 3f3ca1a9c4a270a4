"""Tax bracket tables and planning constants."""

from __future__ import annotations

from typing import Final

BASE_TAX_YEAR: Final[int] = 2024

FILING_STATUSES: Final[set[str]] = {"single", "married", "headOfHousehold"}

# Brackets are (upper_bound, marginal_rate). Upper bound None means infinity.
FEDERAL_BRACKETS: Final[dict[str, list[tuple[float | None, float]]]] = {
    "single": [
        (11_600.0, 0.10),
        (47_150.0, 0.12),
        (100_525.0, 0.22),
        (191_950.0, 0.24),
        (243_725.0, 0.32),
        (609_350.0, 0.35),
        (None, 0.37),
    ],
    "married": [
        (23_200.0, 0.10),
        (94_300.0, 0.12),
        (201_050.0, 0.22),
        (383_900.0, 0.24),
        (487_450.0, 0.32),
        (731_200.0, 0.35),
        (None, 0.37),
    ],
    "headOfHousehold": [
        (16_550.0, 0.10),
        (63_100.0, 0.12),
        (100_500.0, 0.22),
        (191_950.0, 0.24),
        (243_700.0, 0.32),
        (609_350.0, 0.35),
        (None, 0.37),
    ],
}

FICA_RATES: Final[dict[str, float]] = {
    "social_security_rate": 0.062,
    "social_security_wage_base": 168_600.0,
    "medicare_rate": 0.0145,
    "additional_medicare_rate": 0.009,
}

ADDITIONAL_MEDICARE_THRESHOLDS: Final[dict[str, float]] = {
    "single": 200_000.0,
    "married": 250_000.0,
    "headOfHousehold": 200_000.0,
}

RENTAL_DEPRECIATION_YEARS: Final[float] = 27.5
MAX_RENTAL_LOSS_DEDUCTION: Final[float] = 25_000.0

# Share of gross monthly income above which housing is flagged as expensive.
RECOMMENDED_HOUSING_PERCENT: Final[float] = 30.0
