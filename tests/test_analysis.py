import pytest

from rvb.analysis import analysis_payload, best_strategy, crossovers, snapshot_years, strategy_metrics
from rvb.engine import project
from rvb.params import Parameters
from rvb.strategies import STRATEGY_KEYS


def test_best_strategy_has_highest_final_net_worth():
    result = project(Parameters(years_to_analyze=15))
    best = best_strategy(result)
    finals = {key: result.net_worth(key)[-1] for key in STRATEGY_KEYS}
    assert finals[best] == max(finals.values())


def test_crossovers_cover_every_ordered_pair():
    result = project(Parameters(years_to_analyze=30))
    pairs = crossovers(result)
    assert len(pairs) == 12
    for (leader, trailer), year in pairs.items():
        if year is None:
            continue
        a = result.net_worth(leader)
        b = result.net_worth(trailer)
        assert a[year] > b[year] and a[year - 1] <= b[year - 1]


def test_metrics_for_pure_stock_growth():
    params = Parameters(dividend_yield=0.0, enable_recurring_contributions=False, stock_return=7.5, years_to_analyze=10)
    metrics = strategy_metrics(project(params))["stocksOnly"]

    assert metrics.cagr == pytest.approx(7.5)
    assert metrics.yoy_growth[0] == 0
    assert metrics.yoy_growth[1] == pytest.approx(7.5)
    assert len(metrics.yoy_growth) == 11
    assert metrics.final_net_worth == pytest.approx(60_000 * 1.075**10)


@pytest.mark.parametrize(
    ("years", "expected"),
    [
        (0, [0]),
        (12, [0, 5, 10, 12]),
        (30, [0, 5, 10, 15, 20, 25, 30]),
        (40, [0, 5, 10, 15, 20, 25, 30, 35, 40]),
    ],
)
def test_snapshot_years(years, expected):
    assert snapshot_years(years) == expected


def test_analysis_payload_shape():
    payload = analysis_payload(project(Parameters(years_to_analyze=5)))
    assert payload["bestStrategy"] in STRATEGY_KEYS
    assert len(payload["crossovers"]) == 12
    assert set(payload["metrics"]) == set(STRATEGY_KEYS)
    assert {"finalNetWorth", "cagr", "yoyGrowth"} <= set(payload["metrics"]["buyToLive"])
