"""Loan calculation engine - converts between loan amount and gold weight"""

import math

from gold_loan.domain.exceptions import InvalidInputError
from gold_loan.domain.models import GoldRate, LoanCalculationResult
from gold_loan.domain.validation import require_positive_number


def amount_adjustment_factor(interest_rate: float) -> float:
    """
    Gold weight multiplier for calculate-by-amount.

    Lower-interest schemes need more gold to secure the same loan:
    - 2.0% -> 1.0 (no adjustment)
    - 0.5% -> 1.1875
    """
    return 1 + ((2 - interest_rate) / 8)


def weight_adjustment_factor(interest_rate: float) -> float:
    """
    Loan amount multiplier for calculate-by-weight.

    Higher-interest schemes lend less per gram:
    - 0.5% -> 1.0 (no adjustment)
    - 2.0% -> 0.8

    Not the inverse of amount_adjustment_factor. Amount -> weight -> amount
    does not round-trip and is not meant to.
    """
    return 1 - ((interest_rate - 0.5) / 7.5)


def split_principal(principal_amount: float, interest_rate: float) -> tuple[float, float]:
    """Return (interest_amount, eligible_amount) for a principal"""
    interest_amount = principal_amount * (interest_rate / 100)
    eligible_amount = principal_amount - interest_amount
    return interest_amount, eligible_amount


def _check_inputs(value: float, field: str, gold_rate: GoldRate, interest_rate: float) -> None:
    require_positive_number(value, field)
    require_positive_number(gold_rate.rate_per_gram, "ratePerGram")
    require_positive_number(interest_rate, "interestRate")
    if interest_rate >= 100:
        raise InvalidInputError("interestRate must be below 100%", field="interestRate")


def _check_output(*values: float) -> None:
    for value in values:
        if not math.isfinite(value) or value <= 0:
            raise InvalidInputError("Inputs produce a non-positive or non-finite result")


def calculate_by_amount(loan_amount: float, gold_rate: GoldRate, interest_rate: float) -> LoanCalculationResult:
    """
    Derive the gold weight required to secure a desired loan amount.

    Args:
        loan_amount: Desired principal
        gold_rate: Per-gram rate for the requested purity and scheme
        interest_rate: Scheme interest percentage

    Raises:
        InvalidInputError: On non-positive inputs or a non-positive result

    Example:
        100000 at 6250/g, 0.5% -> base 16.0 g x 1.1875 = 19.0 g,
        interest 500, eligible 99500
    """
    _check_inputs(loan_amount, "loanAmount", gold_rate, interest_rate)

    principal_amount = float(loan_amount)
    interest_amount, eligible_amount = split_principal(principal_amount, interest_rate)

    base_weight = principal_amount / gold_rate.rate_per_gram
    gold_weight = base_weight * amount_adjustment_factor(interest_rate)

    _check_output(gold_weight, eligible_amount)

    return LoanCalculationResult(
        purity=gold_rate.purity,
        interest_rate=interest_rate,
        principal_amount=principal_amount,
        interest_amount=interest_amount,
        eligible_amount=eligible_amount,
        gold_weight=gold_weight,
    )


def calculate_by_weight(gold_weight: float, gold_rate: GoldRate, interest_rate: float) -> LoanCalculationResult:
    """
    Derive the loan amount a given weight of gold secures.

    Args:
        gold_weight: Available gold in grams
        gold_rate: Per-gram rate for the requested purity and scheme
        interest_rate: Scheme interest percentage

    Raises:
        InvalidInputError: On non-positive inputs, or when the rate is high
            enough (>= 8%) to drive the adjustment factor to zero or below

    Example:
        10 g at 6250/g, 2.0% -> base 62500 x 0.8 = 50000,
        interest 1000, eligible 49000
    """
    _check_inputs(gold_weight, "goldWeight", gold_rate, interest_rate)

    base_loan_amount = float(gold_weight) * gold_rate.rate_per_gram
    factor = weight_adjustment_factor(interest_rate)
    if factor <= 0:
        raise InvalidInputError(
            f"Interest rate {interest_rate}% leaves no lendable amount", field="interestRate"
        )
    loan_amount = base_loan_amount * factor

    principal_amount = loan_amount
    interest_amount, eligible_amount = split_principal(principal_amount, interest_rate)

    _check_output(loan_amount, eligible_amount)

    return LoanCalculationResult(
        purity=gold_rate.purity,
        interest_rate=interest_rate,
        principal_amount=principal_amount,
        interest_amount=interest_amount,
        eligible_amount=eligible_amount,
        loan_amount=loan_amount,
    )
