"""Explicit input validation for calculation and rate management requests"""

import math
from typing import Any

from gold_loan.domain.exceptions import InvalidInputError
from gold_loan.domain.models import CalculationMode, LoanCalculationInput, Purity


def require_positive_number(value: Any, field: str) -> float:
    """Return value as float, or raise InvalidInputError if missing, non-numeric, non-finite or <= 0"""
    if value is None:
        raise InvalidInputError(f"{field} is required", field=field)
    # bool is an int subclass; True must not pass as 1
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"{field} must be a number", field=field)
    number = float(value)
    if not math.isfinite(number):
        raise InvalidInputError(f"{field} must be finite", field=field)
    if number <= 0:
        raise InvalidInputError(f"{field} must be positive", field=field)
    return number


def parse_purity(value: Any) -> Purity:
    """Map a wire string to Purity"""
    if isinstance(value, Purity):
        return value
    try:
        return Purity(value)
    except ValueError:
        allowed = ", ".join(p.value for p in Purity)
        raise InvalidInputError(f"purity must be one of: {allowed}", field="purity") from None


def require_scheme_id(value: Any) -> int:
    """Interest scheme ids are positive integers"""
    if value is None:
        raise InvalidInputError("Interest scheme must be selected", field="interestSchemeId")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidInputError("Interest scheme must be selected", field="interestSchemeId")
    return value


def validate_by_amount(loan_amount: Any, purity: Any, interest_scheme_id: Any) -> LoanCalculationInput:
    """Validate a calculate-by-amount request"""
    return LoanCalculationInput(
        mode=CalculationMode.BY_AMOUNT,
        purity=parse_purity(purity),
        interest_scheme_id=require_scheme_id(interest_scheme_id),
        loan_amount=require_positive_number(loan_amount, "loanAmount"),
    )


def validate_by_weight(gold_weight: Any, purity: Any, interest_scheme_id: Any) -> LoanCalculationInput:
    """Validate a calculate-by-weight request"""
    return LoanCalculationInput(
        mode=CalculationMode.BY_WEIGHT,
        purity=parse_purity(purity),
        interest_scheme_id=require_scheme_id(interest_scheme_id),
        gold_weight=require_positive_number(gold_weight, "goldWeight"),
    )


def validate_scheme_label(label: Any) -> str:
    if not isinstance(label, str) or not label.strip():
        raise InvalidInputError("label must be a non-empty string", field="label")
    return label.strip()
