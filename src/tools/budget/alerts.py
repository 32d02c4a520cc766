from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Mapping

from domain.models import BudgetAlert, Category, Transaction
from domain.schemas import AlertView, ToolRequest, ToolResponse
from tools._ledger_support import budgets_from_args, ledger_transactions, reference_date
from tools.base import Tool, ToolSpec
from tools.registry import register_tool


def monthly_spending(transactions: Iterable[Transaction], reference: date) -> dict[Category, float]:
    spending: dict[Category, float] = defaultdict(float)
    for txn in transactions:
        if txn.posted_on.year == reference.year and txn.posted_on.month == reference.month:
            spending[txn.category] += txn.amount
    return dict(spending)


def compute_alerts(
    transactions: Iterable[Transaction],
    budgets: Mapping[Category, float],
    reference: date,
) -> list[BudgetAlert]:
    """
    Alerts for categories whose spend in the reference calendar month exceeds the budget.

    Alerts follow the iteration order of `budgets`; spending exactly the budget is not an alert.
    """
    spending = monthly_spending(transactions, reference)
    alerts: list[BudgetAlert] = []
    for category, budget in budgets.items():
        spent = spending.get(category, 0.0)
        if spent > budget:
            alerts.append(BudgetAlert(category=category, budget=budget, exceeded=spent - budget))
    return alerts


@register_tool
class BudgetAlertsTool(Tool):
    name = "budget.alerts"
    description = (
        "List categories overspent in the reference month. "
        "Optional `reference_date` (YYYY-MM-DD) defaults to today; optional `budgets` overrides the budget table."
    )

    def run(self, request: ToolRequest) -> ToolResponse:
        reference = reference_date(request)
        budgets = budgets_from_args(request.args)
        alerts = compute_alerts(ledger_transactions(request), budgets, reference)
        result = {
            "year": reference.year,
            "month_number": reference.month,
            "alerts": [AlertView.from_model(alert).model_dump() for alert in alerts],
            "alert_count": len(alerts),
        }
        return self.respond(request, result)

    def spec(self) -> ToolSpec:
        return ToolSpec(
            name=self.name,
            description=self.description,
            args_schema={
                "type": "object",
                "properties": {
                    "reference_date": {"type": "string", "format": "date"},
                    "budgets": {"type": "object", "additionalProperties": {"type": "number"}},
                },
            },
        )
