from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import FastAPI, HTTPException, Response

from domain.schemas import AlertView, GoalRecord, NewGoal, NewTransaction, TransactionRecord
from infrastructure.stores.store import StoreError
from interface.cli import build_engine, build_ledger
from tools.ledger.categorize import categorize

app = FastAPI(title="FinSmart API")
engine = build_engine()
ledger = build_ledger()


def _json(payload: str, status_code: int = 200) -> Response:
    # Goal percentages may be inf/nan, which the default JSON response rejects.
    return Response(content=payload, media_type="application/json", status_code=status_code)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/categorize")
def categorize_description(description: str = "") -> dict[str, str]:
    return {"description": description, "category": categorize(description).value}


@app.get("/dashboard")
def dashboard(reference_date: Optional[date] = None) -> Response:
    snapshot = engine.run(ledger.snapshot(), reference_date=reference_date)
    return _json(snapshot.model_dump_json(by_alias=True))


@app.post("/transactions", status_code=201)
def add_transaction(payload: NewTransaction) -> dict:
    try:
        txn = ledger.add_transaction(payload.description, payload.amount, payload.posted_on)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except StoreError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return {
        "transaction": TransactionRecord.from_model(txn).model_dump(mode="json", by_alias=True),
        "alerts": [AlertView.from_model(a).model_dump(mode="json") for a in ledger.alerts],
    }


@app.post("/goals", status_code=201)
def add_goal(payload: NewGoal) -> dict:
    try:
        goal = ledger.add_goal(payload.name, payload.target_amount, payload.saved_amount)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except StoreError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return {"goal": GoalRecord.from_model(goal).model_dump(mode="json", by_alias=True)}
