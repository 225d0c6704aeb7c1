"""GET/POST/DELETE /api/gold-rates - per-gram rate maintenance"""

import logging
from typing import List
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from gold_loan.api.v1.schemas import GoldRateRequest, GoldRateResponse
from gold_loan.infrastructure.database.session import get_db
from gold_loan.infrastructure.database.repositories import GoldRateRepository
from gold_loan.infrastructure.observability.metrics import gold_rate_update_counter

router = APIRouter()


def to_response(record) -> GoldRateResponse:
    return GoldRateResponse(
        id=record.id,
        purity=record.purity,
        interest_scheme_id=record.interest_scheme_id,
        rate_per_gram=record.rate_per_gram,
        updated_at=record.updated_at,
    )


@router.get("/gold-rates", response_model=List[GoldRateResponse])
def list_gold_rates(db: Session = Depends(get_db)):
    """All stored rates, grouped by scheme"""
    return [to_response(r) for r in GoldRateRepository(db).list_rates()]


@router.post("/gold-rates", response_model=GoldRateResponse)
def upsert_gold_rate(request_body: GoldRateRequest, db: Session = Depends(get_db)):
    """
    Create or update the rate for a purity under a scheme.

    Returns:
        The stored rate with its refreshed updatedAt
    """
    try:
        record = GoldRateRepository(db).upsert_rate(
            request_body.purity, request_body.interest_scheme_id, request_body.rate_per_gram
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    gold_rate_update_counter.labels(purity=record.purity).inc()
    logging.info(
        "Gold rate updated",
        extra={
            "purity": record.purity,
            "interest_scheme_id": record.interest_scheme_id,
            "rate_per_gram": record.rate_per_gram,
        },
    )
    db.refresh(record)
    return to_response(record)


@router.delete("/gold-rates/{rate_id}", status_code=204)
def delete_gold_rate(rate_id: int, db: Session = Depends(get_db)):
    try:
        GoldRateRepository(db).delete_rate(rate_id)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return Response(status_code=204)
