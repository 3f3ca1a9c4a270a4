"""JSON export and plain-text summaries of a projection."""

from __future__ import annotations

from datetime import UTC, datetime
import json
from pathlib import Path

from .analysis import analysis_payload, best_strategy, snapshot_years
from .engine import ProjectionResult
from .strategies import STRATEGY_KEYS, STRATEGY_NAMES


def _money(value: float) -> str:
    return f"${value:,.0f}"


def render_json(result: ProjectionResult, *, analysis: bool = True) -> str:
    payload: dict[str, object] = result.to_dict()
    payload["params"] = result.params.to_dict()
    payload["generated"] = datetime.now(UTC).isoformat(timespec="seconds")
    if analysis:
        payload["analysis"] = analysis_payload(result)
    return json.dumps(payload, indent=2)


def write_json(path: str | Path, result: ProjectionResult, *, analysis: bool = True) -> None:
    Path(path).write_text(render_json(result, analysis=analysis), encoding="utf-8")


def render_summary(result: ProjectionResult) -> str:
    """Net worth per strategy at the milestone years, as an aligned text table."""
    width = max(len(name) for name in STRATEGY_NAMES.values()) + 2
    header = "Year".ljust(6) + "".join(STRATEGY_NAMES[key].rjust(width) for key in STRATEGY_KEYS)
    lines = [header, "-" * len(header)]

    for year in snapshot_years(result.params.years_to_analyze):
        cells = "".join(_money(result.series(key)[year].net_worth).rjust(width) for key in STRATEGY_KEYS)
        lines.append(str(year).ljust(6) + cells)

    best = best_strategy(result)
    lines.append("")
    lines.append(
        f"Best strategy after {result.params.years_to_analyze} years: {STRATEGY_NAMES[best]} "
        f"({_money(result.net_worth(best)[-1])})"
    )
    lines.append(
        f"After-tax income: {_money(result.taxes.after_tax_income)}/yr "
        f"({_money(result.taxes.monthly_after_tax_income)}/mo, effective rate {result.taxes.effective_tax_rate:.1f}%)"
    )
    return "\n".join(lines)
