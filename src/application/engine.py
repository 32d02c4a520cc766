from __future__ import annotations

import logging
import time
from datetime import date

from application.tool_executor import ToolExecutor
from domain.schemas import (
    AlertView,
    CategoryBreakdown,
    DashboardSnapshot,
    GoalProgressView,
    LedgerData,
    PlanCall,
    ToolContext,
    ToolResponse,
    TrendSeries,
)

logger = logging.getLogger(__name__)

DASHBOARD_CALLS: list[PlanCall] = [
    PlanCall(id="c1", tool="budget.alerts", purpose="overspent categories this month"),
    PlanCall(id="c2", tool="forecast.spending_trend", purpose="line chart series"),
    PlanCall(id="c3", tool="ledger.category_breakdown", purpose="doughnut chart series"),
    PlanCall(id="c4", tool="goals.progress", purpose="goal completion"),
]


class DashboardEngine:
    """Runs the fixed dashboard tool plan against a ledger snapshot and assembles the numbers."""

    def __init__(self, tool_executor: ToolExecutor, calls: list[PlanCall] | None = None):
        self._tool_executor = tool_executor
        self._calls = list(calls if calls is not None else DASHBOARD_CALLS)

    def run(self, ledger: LedgerData, reference_date: date | None = None) -> DashboardSnapshot:
        context = ToolContext(reference_date=reference_date or date.today())
        logger.info(
            "Dashboard run start reference_date=%s transactions=%d goals=%d",
            context.reference_date,
            len(ledger.transactions),
            len(ledger.goals),
        )
        t0 = time.perf_counter()
        responses = self._tool_executor.run_calls(self._calls, ledger, context)
        snapshot = self._assemble(context.reference_date, responses)
        logger.info("Dashboard run complete in %.3fs issues=%d", time.perf_counter() - t0, len(snapshot.issues))
        return snapshot

    def _assemble(self, reference_date: date, responses: list[ToolResponse]) -> DashboardSnapshot:
        snapshot = DashboardSnapshot(reference_date=reference_date)
        for response in responses:
            if not response.ok:
                snapshot.issues.extend(f"{response.tool}: {error}" for error in response.errors)
                continue
            result = response.result
            if response.tool == "budget.alerts":
                snapshot.alerts = [AlertView.model_validate(a) for a in result.get("alerts", [])]
            elif response.tool == "forecast.spending_trend":
                snapshot.trend = TrendSeries.model_validate(result)
            elif response.tool == "ledger.category_breakdown":
                snapshot.category_breakdown = CategoryBreakdown.model_validate(result)
            elif response.tool == "goals.progress":
                snapshot.goals = [GoalProgressView.model_validate(g) for g in result.get("goals", [])]
        return snapshot
