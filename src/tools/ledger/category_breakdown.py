from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from domain.models import Category, Transaction
from domain.schemas import CategoryBreakdown, ToolRequest, ToolResponse
from tools._ledger_support import ledger_transactions
from tools.base import Tool
from tools.registry import register_tool


def category_totals(transactions: Iterable[Transaction]) -> dict[Category, float]:
    """Spend per category over every transaction, keyed in first-appearance order."""
    totals: dict[Category, float] = defaultdict(float)
    for txn in transactions:
        totals[txn.category] += txn.amount
    return dict(totals)


@register_tool
class CategoryBreakdownTool(Tool):
    name = "ledger.category_breakdown"
    description = "Total spend per category across all recorded transactions (doughnut chart series)."

    def run(self, request: ToolRequest) -> ToolResponse:
        totals = category_totals(ledger_transactions(request))
        breakdown = CategoryBreakdown(
            labels=[category.value for category in totals],
            amounts=list(totals.values()),
        )
        result = breakdown.model_dump()
        result["category_count"] = len(totals)
        return self.respond(request, result)
