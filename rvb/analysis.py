"""Cross-strategy comparison metrics derived from a projection."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import permutations

from .engine import ProjectionResult
from .growth import cagr, crossover_year, yoy_growth
from .strategies import STRATEGY_KEYS

SNAPSHOT_STEP = 5
SNAPSHOT_LIMIT = 35


@dataclass(slots=True)
class StrategyMetrics:
    strategy: str
    final_net_worth: float
    cagr: float
    yoy_growth: list[float]

    def to_dict(self) -> dict[str, object]:
        return {
            "strategy": self.strategy,
            "finalNetWorth": self.final_net_worth,
            "cagr": self.cagr,
            "yoyGrowth": list(self.yoy_growth),
        }


def best_strategy(result: ProjectionResult) -> str:
    """Strategy with the highest final-year net worth; earlier keys win ties."""
    best = STRATEGY_KEYS[0]
    for key in STRATEGY_KEYS[1:]:
        if result.net_worth(key)[-1] > result.net_worth(best)[-1]:
            best = key
    return best


def crossovers(result: ProjectionResult) -> dict[tuple[str, str], int | None]:
    """Year each strategy first overtakes each other one, keyed by (leader, trailer)."""
    return {
        (a, b): crossover_year(result.net_worth(a), result.net_worth(b))
        for a, b in permutations(STRATEGY_KEYS, 2)
    }


def strategy_metrics(result: ProjectionResult) -> dict[str, StrategyMetrics]:
    years = result.params.years_to_analyze
    metrics: dict[str, StrategyMetrics] = {}
    for key in STRATEGY_KEYS:
        series = result.net_worth(key)
        growth = [0.0] + [yoy_growth(series[i], series[i - 1]) for i in range(1, len(series))]
        metrics[key] = StrategyMetrics(
            strategy=key,
            final_net_worth=series[-1],
            cagr=cagr(series[0], series[-1], years),
            yoy_growth=growth,
        )
    return metrics


def snapshot_years(years_to_analyze: int) -> list[int]:
    years = [y for y in range(0, SNAPSHOT_LIMIT + 1, SNAPSHOT_STEP) if y <= years_to_analyze]
    if years_to_analyze not in years:
        years.append(years_to_analyze)
    return years


def analysis_payload(result: ProjectionResult) -> dict[str, object]:
    return {
        "bestStrategy": best_strategy(result),
        "crossovers": [
            {"leader": a, "trailer": b, "year": year}
            for (a, b), year in crossovers(result).items()
        ],
        "metrics": {key: m.to_dict() for key, m in strategy_metrics(result).items()},
    }
