from __future__ import annotations

import argparse
import json
import sys
from datetime import date

from application.engine import DashboardEngine
from application.ledger import FinanceLedger
from application.tool_executor import ToolExecutor
from domain.schemas import coerce_date
from infrastructure.stores.json_file_store import JsonFileStore
from infrastructure.stores.store import KeyValueStore, StoreError
from tools.ledger.categorize import categorize
from tools.registry import registry


def build_engine() -> DashboardEngine:
    import tools  # noqa: F401

    return DashboardEngine(tool_executor=ToolExecutor(registry))


def build_ledger(store: KeyValueStore | None = None) -> FinanceLedger:
    ledger = FinanceLedger(store or JsonFileStore())
    ledger.load()
    return ledger


def _reference_date(value: str | None) -> date | None:
    if not value:
        return None
    parsed = coerce_date(value)
    if not isinstance(parsed, date):
        raise ValueError(f"unrecognized date: {value!r}")
    return parsed


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="finsmart", description="Track spending, budgets and savings goals.")
    sub = parser.add_subparsers(dest="command")

    add = sub.add_parser("add", help="record a transaction")
    add.add_argument("description")
    add.add_argument("amount", type=float)
    add.add_argument("date", nargs="?", default=None, help="YYYY-MM-DD, defaults to today")

    goal = sub.add_parser("goal", help="create a savings goal")
    goal.add_argument("name")
    goal.add_argument("target", type=float)
    goal.add_argument("saved", type=float, nargs="?", default=0.0)

    show = sub.add_parser("show", help="print the dashboard numbers")
    show.add_argument("--reference-date", default=None, help="YYYY-MM-DD (or MM/DD/YYYY), defaults to today")

    cat = sub.add_parser("categorize", help="classify a description")
    cat.add_argument("description")
    return parser


def main(argv: list[str] | None = None, store: KeyValueStore | None = None) -> int:
    args = _parser().parse_args(argv)
    command = args.command or "show"

    if command == "categorize":
        print(json.dumps({"description": args.description, "category": categorize(args.description).value}))
        return 0

    ledger = build_ledger(store)
    try:
        if command == "add":
            txn = ledger.add_transaction(args.description, args.amount, args.date or date.today())
            print(json.dumps({"id": txn.id, "category": txn.category.value, "alerts": len(ledger.alerts)}))
            return 0
        if command == "goal":
            goal = ledger.add_goal(args.name, args.target, args.saved)
            print(json.dumps({"id": goal.id, "name": goal.name}))
            return 0
        reference = _reference_date(getattr(args, "reference_date", None))
    except ValueError as exc:
        print(f"[finsmart] invalid input: {exc}", file=sys.stderr)
        return 2
    except StoreError as exc:
        print(f"[finsmart] error: {exc}", file=sys.stderr)
        return 1

    snapshot = build_engine().run(ledger.snapshot(), reference_date=reference)
    print(snapshot.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
