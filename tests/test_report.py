import json

from rvb.engine import project
from rvb.params import Parameters
from rvb.report import render_json, render_summary, write_json


def test_summary_lists_milestone_rows_and_best_strategy():
    text = render_summary(project(Parameters(years_to_analyze=12)))
    lines = text.splitlines()

    assert "Own Your Home" in lines[0]
    assert "Skip Homeownership" in lines[0]
    assert [line.split()[0] for line in lines[2:6]] == ["0", "5", "10", "12"]
    assert any(line.startswith("Best strategy after 12 years:") for line in lines)
    assert "After-tax income: $59,697/yr" in text


def test_json_export_contains_series_params_and_analysis(tmp_path):
    result = project(Parameters(years_to_analyze=3))
    path = tmp_path / "projection.json"
    write_json(path, result)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert len(data["buyToLive"]) == 4
    assert data["params"]["yearsToAnalyze"] == 3
    assert data["analysis"]["bestStrategy"] in {"buyToLive", "buyToRent", "rentToLive", "stocksOnly"}
    assert data["taxes"]["grossIncome"] == 75_000


def test_json_export_without_analysis():
    data = json.loads(render_json(project(Parameters(years_to_analyze=1)), analysis=False))
    assert "analysis" not in data
    assert data["stocksOnly"][0]["netWorth"] == 60_000
