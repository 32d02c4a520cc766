from __future__ import annotations

from calendar import month_abbr
from datetime import date
from typing import Any, Iterable, Sequence

from domain.config import DEFAULT_PAST_MONTHLY_TOTALS, FORECAST_GROWTH_FACTORS, HISTORY_MONTHS
from domain.models import Transaction
from domain.schemas import ToolRequest, ToolResponse, TrendSeries
from tools._ledger_support import ledger_transactions, reference_date
from tools.base import Tool, ToolSpec
from tools.registry import register_tool


def current_month_total(transactions: Iterable[Transaction]) -> float:
    # Sums every recorded transaction; deliberately not filtered to the current month.
    return sum((txn.amount for txn in transactions), 0.0)


def forecast(
    past_monthly_totals: Sequence[float],
    current_total: float,
    growth_factors: Sequence[float] = FORECAST_GROWTH_FACTORS,
) -> list[float]:
    """
    Project the next months as the mean of the prior months times a fixed growth schedule.

    `current_total` is charted next to the projection but does not feed the average.
    """
    if len(past_monthly_totals) != HISTORY_MONTHS:
        raise ValueError(f"expected {HISTORY_MONTHS} past monthly totals, got {len(past_monthly_totals)}")
    average = sum(past_monthly_totals) / HISTORY_MONTHS
    return [average * factor for factor in growth_factors]


def month_labels(reference: date, before: int = HISTORY_MONTHS, after: int = len(FORECAST_GROWTH_FACTORS)) -> list[str]:
    labels = []
    for offset in range(-before, after + 1):
        index = (reference.month - 1 + offset) % 12
        labels.append(month_abbr[index + 1])
    return labels


def spending_trend(
    transactions: Iterable[Transaction],
    past_monthly_totals: Sequence[float],
    reference: date,
) -> TrendSeries:
    current = current_month_total(transactions)
    past = [float(value) for value in past_monthly_totals]
    projected = forecast(past, current)
    return TrendSeries(
        labels=month_labels(reference),
        actual=[*past, current],
        forecast=projected,
        average=sum(past) / HISTORY_MONTHS,
        current_month_total=current,
    )


def _past_totals(args: dict[str, Any]) -> list[float]:
    raw = args.get("past_monthly_totals")
    if isinstance(raw, (list, tuple)):
        return [float(value) for value in raw]
    return list(DEFAULT_PAST_MONTHLY_TOTALS)


@register_tool
class SpendingTrendTool(Tool):
    name = "forecast.spending_trend"
    description = (
        "Chart series of five past months, the current running total and a three-month projection "
        "(mean of the past months times 1.05/1.08/1.12)."
    )

    def run(self, request: ToolRequest) -> ToolResponse:
        trend = spending_trend(
            ledger_transactions(request),
            _past_totals(request.args),
            reference_date(request),
        )
        result = trend.model_dump()
        result["method"] = "mean of prior months with fixed growth factors"
        return self.respond(request, result)

    def spec(self) -> ToolSpec:
        return ToolSpec(
            name=self.name,
            description=self.description,
            args_schema={
                "type": "object",
                "properties": {
                    "past_monthly_totals": {
                        "type": "array",
                        "items": {"type": "number"},
                        "minItems": HISTORY_MONTHS,
                        "maxItems": HISTORY_MONTHS,
                    },
                    "reference_date": {"type": "string", "format": "date"},
                },
            },
        )
