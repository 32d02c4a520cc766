from __future__ import annotations

from datetime import date
from typing import Any, Mapping

from domain.config import DEFAULT_BUDGETS
from domain.models import Category, Goal, Transaction
from domain.schemas import ToolRequest, coerce_date


def ledger_transactions(request: ToolRequest) -> list[Transaction]:
    return [record.to_model() for record in request.ledger.transactions]


def ledger_goals(request: ToolRequest) -> list[Goal]:
    return [record.to_model() for record in request.ledger.goals]


def reference_date(request: ToolRequest) -> date:
    """An explicit `reference_date` arg wins over the request context."""
    args = request.args if isinstance(request.args, dict) else {}
    value = coerce_date(args.get("reference_date"))
    if isinstance(value, date):
        return value
    return request.context.reference_date


def budgets_from_args(args: Mapping[str, Any]) -> dict[Category, float]:
    raw = args.get("budgets")
    if not isinstance(raw, dict):
        return dict(DEFAULT_BUDGETS)
    return {Category(name): float(amount) for name, amount in raw.items()}
