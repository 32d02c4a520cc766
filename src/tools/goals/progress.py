from __future__ import annotations

import math

from domain.models import Goal
from domain.schemas import GoalProgressView, ToolRequest, ToolResponse
from tools._ledger_support import ledger_goals
from tools.base import Tool
from tools.registry import register_tool


def _ieee_divide(numerator: float, denominator: float) -> float:
    # Python raises on float division by zero; reproduce IEEE 754 results instead.
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def progress(goal: Goal) -> float:
    """Percent of the target saved; a zero target gives inf (or nan when nothing is saved)."""
    return _ieee_divide(100.0 * goal.saved_amount, goal.target_amount)


@register_tool
class GoalProgressTool(Tool):
    name = "goals.progress"
    description = "Completion percentage for every savings goal."

    def run(self, request: ToolRequest) -> ToolResponse:
        goals = [
            GoalProgressView(
                id=goal.id,
                name=goal.name,
                target_amount=goal.target_amount,
                saved_amount=goal.saved_amount,
                percentage=progress(goal),
            ).model_dump()
            for goal in ledger_goals(request)
        ]
        return self.respond(request, {"goals": goals, "goal_count": len(goals)})
