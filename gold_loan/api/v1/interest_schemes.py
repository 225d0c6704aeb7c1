"""CRUD for /api/interest-schemes"""

from typing import List
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from gold_loan.api.v1.schemas import InterestSchemeCreate, InterestSchemeResponse, InterestSchemeUpdate
from gold_loan.domain.exceptions import SchemeNotFoundError
from gold_loan.infrastructure.database.session import get_db
from gold_loan.infrastructure.database.repositories import InterestSchemeRepository

router = APIRouter()


def to_response(record) -> InterestSchemeResponse:
    return InterestSchemeResponse(id=record.id, rate=record.rate, label=record.label)


@router.get("/interest-schemes", response_model=List[InterestSchemeResponse])
def list_interest_schemes(db: Session = Depends(get_db)):
    return [to_response(s) for s in InterestSchemeRepository(db).list_schemes()]


@router.get("/interest-schemes/{scheme_id}", response_model=InterestSchemeResponse)
def get_interest_scheme(scheme_id: int, db: Session = Depends(get_db)):
    scheme = InterestSchemeRepository(db).get_scheme(scheme_id)
    if scheme is None:
        raise SchemeNotFoundError(scheme_id)
    return to_response(scheme)


@router.post("/interest-schemes", response_model=InterestSchemeResponse, status_code=201)
def create_interest_scheme(request_body: InterestSchemeCreate, db: Session = Depends(get_db)):
    try:
        scheme = InterestSchemeRepository(db).create_scheme(request_body.rate, request_body.label)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return to_response(scheme)


@router.put("/interest-schemes/{scheme_id}", response_model=InterestSchemeResponse)
def update_interest_scheme(scheme_id: int, request_body: InterestSchemeUpdate, db: Session = Depends(get_db)):
    """Partial update: omitted fields keep their stored values"""
    try:
        scheme = InterestSchemeRepository(db).update_scheme(
            scheme_id, rate=request_body.rate, label=request_body.label
        )
        db.commit()
    except Exception:
        db.rollback()
        raise
    return to_response(scheme)


@router.delete("/interest-schemes/{scheme_id}", status_code=204)
def delete_interest_scheme(scheme_id: int, db: Session = Depends(get_db)):
    """Deleting a scheme also deletes its gold rates"""
    try:
        InterestSchemeRepository(db).delete_scheme(scheme_id)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return Response(status_code=204)
