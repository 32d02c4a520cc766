from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Any, Mapping

from pydantic import TypeAdapter, ValidationError

from domain.config import DEFAULT_BUDGETS, GOALS_KEY, SAMPLE_GOALS, SAMPLE_TRANSACTIONS, TRANSACTIONS_KEY
from domain.models import BudgetAlert, Category, Goal, Transaction
from domain.schemas import GoalRecord, LedgerData, NewGoal, NewTransaction, TransactionRecord
from infrastructure.stores.store import KeyValueStore
from tools.budget.alerts import compute_alerts
from tools.ledger.categorize import categorize

logger = logging.getLogger(__name__)

_transaction_rows = TypeAdapter(list[TransactionRecord])
_goal_rows = TypeAdapter(list[GoalRecord])


class FinanceLedger:
    """
    Owns the ordered transaction and goal collections.

    Every mutation completes (persist + alert recompute) before returning, so callers
    always observe alerts that match the current transactions.
    """

    def __init__(
        self,
        store: KeyValueStore,
        budgets: Mapping[Category, float] | None = None,
        today: Any = date.today,
    ):
        self._store = store
        self._budgets = dict(budgets if budgets is not None else DEFAULT_BUDGETS)
        self._today = today
        self._transactions: list[Transaction] = []
        self._goals: list[Goal] = []
        self._alerts: list[BudgetAlert] = []

    @property
    def transactions(self) -> list[Transaction]:
        return list(self._transactions)

    @property
    def goals(self) -> list[Goal]:
        return list(self._goals)

    @property
    def alerts(self) -> list[BudgetAlert]:
        return list(self._alerts)

    @property
    def budgets(self) -> dict[Category, float]:
        return dict(self._budgets)

    def load(self) -> None:
        self._transactions = [r.to_model() for r in self._load_rows(TRANSACTIONS_KEY, _transaction_rows, SAMPLE_TRANSACTIONS)]
        self._goals = [r.to_model() for r in self._load_rows(GOALS_KEY, _goal_rows, SAMPLE_GOALS)]
        logger.info("FinanceLedger loaded transactions=%d goals=%d", len(self._transactions), len(self._goals))
        self.refresh_alerts()

    def add_transaction(self, description: str, amount: float, posted_on: date | str) -> Transaction:
        payload = self._validate(NewTransaction, {"description": description, "amount": amount, "date": posted_on})
        txn = Transaction(
            id=uuid.uuid4().hex,
            description=payload.description,
            amount=payload.amount,
            posted_on=payload.posted_on,
            category=categorize(payload.description),
        )
        transactions = [txn, *self._transactions]
        self._save_transactions(transactions)
        self._transactions = transactions
        logger.info("FinanceLedger added transaction id=%s category=%s amount=%.2f", txn.id, txn.category.value, txn.amount)
        self.refresh_alerts()
        return txn

    def add_goal(self, name: str, target_amount: float, saved_amount: float = 0.0) -> Goal:
        payload = self._validate(NewGoal, {"name": name, "target_amount": target_amount, "saved_amount": saved_amount})
        goal = Goal(
            id=uuid.uuid4().hex,
            name=payload.name,
            target_amount=payload.target_amount,
            saved_amount=payload.saved_amount,
        )
        goals = [*self._goals, goal]
        self._save_goals(goals)
        self._goals = goals
        logger.info("FinanceLedger added goal id=%s target=%.2f", goal.id, goal.target_amount)
        return goal

    def refresh_alerts(self) -> list[BudgetAlert]:
        self._alerts = compute_alerts(self._transactions, self._budgets, self._today())
        logger.info("FinanceLedger alerts recomputed count=%d", len(self._alerts))
        return self.alerts

    def snapshot(self) -> LedgerData:
        return LedgerData.from_models(self._transactions, self._goals)

    def _load_rows(self, key: str, adapter: TypeAdapter, sample: list[dict[str, Any]]) -> list[Any]:
        rows = self._store.load(key)
        if rows is not None:
            try:
                return adapter.validate_python(rows)
            except ValidationError as exc:
                logger.warning("FinanceLedger malformed stored data key=%s errors=%d; using sample data", key, exc.error_count())
        else:
            logger.info("FinanceLedger no stored data key=%s; using sample data", key)
        return adapter.validate_python(sample)

    def _save_transactions(self, transactions: list[Transaction]) -> None:
        rows = [TransactionRecord.from_model(t).model_dump(mode="json", by_alias=True) for t in transactions]
        self._store.save(TRANSACTIONS_KEY, rows)

    def _save_goals(self, goals: list[Goal]) -> None:
        rows = [GoalRecord.from_model(g).model_dump(mode="json", by_alias=True) for g in goals]
        self._store.save(GOALS_KEY, rows)

    @staticmethod
    def _validate(schema: Any, payload: dict[str, Any]) -> Any:
        try:
            return schema.model_validate(payload)
        except ValidationError as exc:
            raise ValueError(f"Invalid {schema.__name__}: {exc}") from exc
