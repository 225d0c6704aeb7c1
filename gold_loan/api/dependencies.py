"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from gold_loan.infrastructure.database.session import get_db
from gold_loan.infrastructure.database.repositories import SqlRateLookup
from gold_loan.services.calculation import LoanCalculationService


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_calculation_service(db: Session = Depends(get_db)) -> LoanCalculationService:
    """Provide a calculation service bound to the request's session"""
    return LoanCalculationService(SqlRateLookup(db))
