from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.models import BudgetAlert, Category, Goal, Transaction


def coerce_date(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return value

    text = value.strip()
    if not text:
        return value

    # Canonical format first.
    for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%m/%d/%Y", "%m-%d-%Y"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return value


class TransactionRecord(BaseModel):
    """Stored/wire shape of a transaction; keeps the `date` key of the persisted JSON."""

    model_config = ConfigDict(populate_by_name=True)
    id: str
    description: str
    amount: float
    posted_on: date = Field(alias="date")
    category: Category

    @field_validator("posted_on", mode="before")
    @classmethod
    def _coerce_posted_on(cls, value: Any) -> Any:
        return coerce_date(value)

    def to_model(self) -> Transaction:
        return Transaction(
            id=self.id,
            description=self.description,
            amount=self.amount,
            posted_on=self.posted_on,
            category=self.category,
        )

    @classmethod
    def from_model(cls, txn: Transaction) -> "TransactionRecord":
        return cls(
            id=txn.id,
            description=txn.description,
            amount=txn.amount,
            posted_on=txn.posted_on,
            category=txn.category,
        )


class GoalRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    id: str
    name: str
    target_amount: float = Field(alias="targetAmount")
    saved_amount: float = Field(default=0.0, alias="savedAmount")

    def to_model(self) -> Goal:
        return Goal(id=self.id, name=self.name, target_amount=self.target_amount, saved_amount=self.saved_amount)

    @classmethod
    def from_model(cls, goal: Goal) -> "GoalRecord":
        return cls(id=goal.id, name=goal.name, target_amount=goal.target_amount, saved_amount=goal.saved_amount)


class NewTransaction(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    description: str = Field(min_length=1)
    amount: float = Field(gt=0, allow_inf_nan=False)
    posted_on: date = Field(alias="date", description="Transaction date in YYYY-MM-DD format, e.g. 2026-01-31.")

    @field_validator("description", mode="before")
    @classmethod
    def _strip_description(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("posted_on", mode="before")
    @classmethod
    def _coerce_posted_on(cls, value: Any) -> Any:
        return coerce_date(value)


class NewGoal(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    name: str = Field(min_length=1)
    target_amount: float = Field(gt=0, allow_inf_nan=False, alias="targetAmount")
    saved_amount: float = Field(default=0.0, ge=0, allow_inf_nan=False, alias="savedAmount")

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class LedgerData(BaseModel):
    transactions: List[TransactionRecord] = Field(default_factory=list)
    goals: List[GoalRecord] = Field(default_factory=list)

    @classmethod
    def from_models(cls, transactions: List[Transaction], goals: List[Goal]) -> "LedgerData":
        return cls(
            transactions=[TransactionRecord.from_model(t) for t in transactions],
            goals=[GoalRecord.from_model(g) for g in goals],
        )


class ToolContext(BaseModel):
    reference_date: date = Field(default_factory=date.today)


class ToolRequest(BaseModel):
    request_id: str
    tool: str
    args: Dict[str, Any] = Field(default_factory=dict)
    ledger: LedgerData = Field(
        default_factory=LedgerData,
        description="Snapshot of the ledger collections the tool reads. Tools never mutate it.",
    )
    context: ToolContext = Field(default_factory=ToolContext)


class ToolResponse(BaseModel):
    request_id: str
    tool: str
    ok: bool = True
    result: Dict[str, Any] = Field(default_factory=dict)
    errors: List[str] = Field(default_factory=list)
    context: ToolContext


class PlanCall(BaseModel):
    id: str
    tool: str
    args: Dict[str, Any] = Field(default_factory=dict)
    purpose: str = ""


class AlertView(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="constants")
    category: Category
    budget: float
    exceeded: float
    spent: float

    @classmethod
    def from_model(cls, alert: BudgetAlert) -> "AlertView":
        return cls(category=alert.category, budget=alert.budget, exceeded=alert.exceeded, spent=alert.spent)


class TrendSeries(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="constants")
    labels: List[str] = Field(default_factory=list)
    actual: List[float] = Field(default_factory=list)
    forecast: List[float] = Field(default_factory=list)
    average: float = 0.0
    current_month_total: float = 0.0


class CategoryBreakdown(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="constants")
    labels: List[str] = Field(default_factory=list)
    amounts: List[float] = Field(default_factory=list)


class GoalProgressView(BaseModel):
    model_config = ConfigDict(populate_by_name=True, ser_json_inf_nan="constants")
    id: str
    name: str
    target_amount: float = Field(alias="targetAmount")
    saved_amount: float = Field(alias="savedAmount")
    percentage: float


class DashboardSnapshot(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="constants")
    reference_date: date
    alerts: List[AlertView] = Field(default_factory=list)
    trend: Optional[TrendSeries] = None
    category_breakdown: Optional[CategoryBreakdown] = None
    goals: List[GoalProgressView] = Field(default_factory=list)
    issues: List[str] = Field(default_factory=list)
