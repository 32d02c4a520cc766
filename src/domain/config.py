from __future__ import annotations

from typing import Any

from domain.models import Category

# Precedence order matters: the first category with a matching keyword wins.
CATEGORY_KEYWORDS: dict[Category, tuple[str, ...]] = {
    Category.GROCERIES: ("grocery", "food", "walmart", "supermarket"),
    Category.TRANSPORTATION: ("gas", "uber", "taxi", "transport"),
    Category.UTILITIES: ("electric", "water", "utility", "internet"),
    Category.DINING: ("restaurant", "coffee", "dining", "pizza"),
    Category.ENTERTAINMENT: ("movie", "netflix", "game", "entertainment"),
}

# Monthly ceilings. Other has no threshold and never alerts.
DEFAULT_BUDGETS: dict[Category, float] = {
    Category.GROCERIES: 300.0,
    Category.TRANSPORTATION: 200.0,
    Category.UTILITIES: 150.0,
    Category.DINING: 150.0,
    Category.ENTERTAINMENT: 100.0,
}

HISTORY_MONTHS = 5
FORECAST_GROWTH_FACTORS: tuple[float, ...] = (1.05, 1.08, 1.12)
DEFAULT_PAST_MONTHLY_TOTALS: tuple[float, ...] = (850.0, 920.0, 780.0, 890.0, 950.0)

TRANSACTIONS_KEY = "finSmart_transactions"
GOALS_KEY = "finSmart_goals"

SAMPLE_TRANSACTIONS: list[dict[str, Any]] = [
    {"id": "1", "description": "Grocery Store", "amount": 85.50, "date": "2024-01-15", "category": "Groceries"},
    {"id": "2", "description": "Gas Station", "amount": 45.00, "date": "2024-01-14", "category": "Transportation"},
    {"id": "3", "description": "Netflix Subscription", "amount": 15.99, "date": "2024-01-13", "category": "Entertainment"},
    {"id": "4", "description": "Electric Bill", "amount": 120.00, "date": "2024-01-12", "category": "Utilities"},
    {"id": "5", "description": "Coffee Shop", "amount": 4.50, "date": "2024-01-11", "category": "Dining"},
]

SAMPLE_GOALS: list[dict[str, Any]] = [
    {"id": "1", "name": "Emergency Fund", "targetAmount": 5000, "savedAmount": 2800},
    {"id": "2", "name": "Vacation Fund", "targetAmount": 3000, "savedAmount": 1200},
]
