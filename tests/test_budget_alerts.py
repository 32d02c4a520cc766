from __future__ import annotations

import unittest
from datetime import date

import tools  # noqa: F401
from domain.config import DEFAULT_BUDGETS
from domain.models import BudgetAlert, Category, Transaction
from domain.schemas import LedgerData, ToolContext, ToolRequest
from tools.budget.alerts import compute_alerts, monthly_spending
from tools.registry import registry

REFERENCE = date(2026, 10, 19)


def _txn(txn_id: str, amount: float, posted_on: date, category: Category = Category.GROCERIES) -> Transaction:
    return Transaction(id=txn_id, description=f"txn {txn_id}", amount=amount, posted_on=posted_on, category=category)


class ComputeAlertsTests(unittest.TestCase):
    def test_overspent_category_reports_exceeded_amount(self) -> None:
        txns = [_txn("t1", 120.0, date(2026, 10, 2)), _txn("t2", 200.0, date(2026, 10, 15))]

        alerts = compute_alerts(txns, {Category.GROCERIES: 300.0}, REFERENCE)

        self.assertEqual(alerts, [BudgetAlert(category=Category.GROCERIES, budget=300.0, exceeded=20.0)])
        self.assertEqual(alerts[0].spent, 320.0)

    def test_spending_exactly_the_budget_is_not_an_alert(self) -> None:
        txns = [_txn("t1", 100.0, date(2026, 10, 2)), _txn("t2", 200.0, date(2026, 10, 3))]
        self.assertEqual(compute_alerts(txns, {Category.GROCERIES: 300.0}, REFERENCE), [])

    def test_other_months_and_years_are_ignored(self) -> None:
        txns = [
            _txn("t1", 250.0, date(2026, 9, 30)),
            _txn("t2", 250.0, date(2025, 10, 10)),
            _txn("t3", 150.0, date(2026, 10, 1)),
        ]
        self.assertEqual(compute_alerts(txns, DEFAULT_BUDGETS, REFERENCE), [])

    def test_other_category_never_alerts(self) -> None:
        txns = [_txn("t1", 10_000.0, date(2026, 10, 5), Category.OTHER)]
        self.assertEqual(compute_alerts(txns, DEFAULT_BUDGETS, REFERENCE), [])

    def test_alerts_follow_budget_order(self) -> None:
        txns = [
            _txn("t1", 175.0, date(2026, 10, 5), Category.DINING),
            _txn("t2", 310.0, date(2026, 10, 6), Category.GROCERIES),
            _txn("t3", 101.0, date(2026, 10, 7), Category.ENTERTAINMENT),
        ]

        alerts = compute_alerts(txns, DEFAULT_BUDGETS, REFERENCE)

        self.assertEqual(
            [a.category for a in alerts],
            [Category.GROCERIES, Category.DINING, Category.ENTERTAINMENT],
        )
        self.assertEqual(alerts[1].exceeded, 25.0)

    def test_empty_input_yields_no_alerts(self) -> None:
        self.assertEqual(compute_alerts([], DEFAULT_BUDGETS, REFERENCE), [])

    def test_repeated_calls_are_identical(self) -> None:
        txns = [_txn("t1", 400.0, date(2026, 10, 5)), _txn("t2", 250.0, date(2026, 10, 6), Category.TRANSPORTATION)]
        self.assertEqual(
            compute_alerts(txns, DEFAULT_BUDGETS, REFERENCE),
            compute_alerts(txns, DEFAULT_BUDGETS, REFERENCE),
        )

    def test_monthly_spending_sums_per_category(self) -> None:
        txns = [
            _txn("t1", 10.0, date(2026, 10, 1)),
            _txn("t2", 5.0, date(2026, 10, 2)),
            _txn("t3", 7.0, date(2026, 10, 3), Category.DINING),
            _txn("t4", 99.0, date(2026, 11, 1)),
        ]
        self.assertEqual(monthly_spending(txns, REFERENCE), {Category.GROCERIES: 15.0, Category.DINING: 7.0})


class BudgetAlertsToolTests(unittest.TestCase):
    def setUp(self) -> None:
        self.ledger = LedgerData.model_validate(
            {
                "transactions": [
                    {"id": "t1", "description": "Walmart", "amount": 320.0, "date": "2026-10-03", "category": "Groceries"},
                    {"id": "t2", "description": "Walmart", "amount": 500.0, "date": "2026-09-03", "category": "Groceries"},
                ]
            }
        )

    def test_uses_context_reference_date(self) -> None:
        tool = registry.get_tool("budget.alerts")
        req = ToolRequest(
            request_id="req:alerts",
            tool=tool.name,
            ledger=self.ledger,
            context=ToolContext(reference_date=REFERENCE),
        )

        res = tool.run(req)

        self.assertTrue(res.ok)
        self.assertEqual(res.result["alert_count"], 1)
        self.assertEqual(res.result["alerts"][0]["category"], "Groceries")
        self.assertEqual(res.result["alerts"][0]["exceeded"], 20.0)

    def test_reference_date_and_budget_args_override_defaults(self) -> None:
        tool = registry.get_tool("budget.alerts")
        req = ToolRequest(
            request_id="req:alerts",
            tool=tool.name,
            args={"reference_date": "2026-09-30", "budgets": {"Groceries": 450}},
            ledger=self.ledger,
            context=ToolContext(reference_date=REFERENCE),
        )

        res = tool.run(req)

        self.assertEqual(res.result["month_number"], 9)
        self.assertEqual(res.result["alerts"][0]["exceeded"], 50.0)
        self.assertEqual(res.result["alerts"][0]["budget"], 450.0)


if __name__ == "__main__":
    unittest.main()
