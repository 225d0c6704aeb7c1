"""Pydantic schemas for API request/response validation (camelCase on the wire)"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits camelCase field names"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoanByAmountRequest(CamelModel):
    """Request body for POST /api/calculate/by-amount"""

    # Left untyped so validation.py rejects booleans and numeric strings
    loan_amount: Any = Field(None, description="Desired loan amount")
    purity: Any = Field(None, description="24k | 22k | 18k | mixed")
    interest_scheme_id: Any = Field(None, description="Interest scheme identifier")


class LoanByWeightRequest(CamelModel):
    """Request body for POST /api/calculate/by-weight"""

    gold_weight: Any = Field(None, description="Available gold in grams")
    purity: Any = Field(None, description="24k | 22k | 18k | mixed")
    interest_scheme_id: Any = Field(None, description="Interest scheme identifier")


class CalculationResponse(CamelModel):
    """Calculation result; exactly one of gold_weight/loan_amount is present"""

    purity: str
    interest_rate: float
    principal_amount: float
    interest_amount: float
    eligible_amount: float
    gold_weight: Optional[float] = None
    loan_amount: Optional[float] = None
    rate_per_gram: Optional[float] = None
    summary: str


class GoldRateRequest(CamelModel):
    """Request body for POST /api/gold-rates"""

    purity: str
    interest_scheme_id: int
    rate_per_gram: float


class GoldRateResponse(CamelModel):
    id: int
    purity: str
    interest_scheme_id: int
    rate_per_gram: float
    updated_at: datetime


class InterestSchemeCreate(CamelModel):
    """Request body for POST /api/interest-schemes"""

    rate: float
    label: str


class InterestSchemeUpdate(CamelModel):
    """Request body for PUT /api/interest-schemes/{id}; omitted fields are kept"""

    rate: Optional[float] = None
    label: Optional[str] = None


class InterestSchemeResponse(CamelModel):
    id: int
    rate: float
    label: str
