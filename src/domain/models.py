from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Category(str, Enum):
    GROCERIES = "Groceries"
    TRANSPORTATION = "Transportation"
    UTILITIES = "Utilities"
    DINING = "Dining"
    ENTERTAINMENT = "Entertainment"
    OTHER = "Other"


@dataclass(frozen=True)
class Transaction:
    id: str
    description: str
    amount: float
    posted_on: date
    category: Category


@dataclass(frozen=True)
class Goal:
    id: str
    name: str
    target_amount: float
    saved_amount: float = 0.0


@dataclass(frozen=True)
class BudgetAlert:
    category: Category
    budget: float
    exceeded: float

    @property
    def spent(self) -> float:
        return self.budget + self.exceeded
