"""Resolves purity and interest scheme through a RateLookup, then runs the calculation engine"""

from gold_loan.domain.calculator import calculate_by_amount, calculate_by_weight
from gold_loan.domain.exceptions import InvalidInputError, RateNotFoundError, SchemeNotFoundError
from gold_loan.domain.lookup import RateLookup
from gold_loan.domain.models import CalculationMode, GoldRate, InterestScheme, LoanCalculationInput, LoanCalculationResult
from gold_loan.domain.validation import validate_by_amount, validate_by_weight
from gold_loan.infrastructure.observability.metrics import record_calculation, record_calculation_error

ERROR_REASONS = {
    InvalidInputError: "invalid_input",
    RateNotFoundError: "rate_not_found",
    SchemeNotFoundError: "scheme_not_found",
}


class LoanCalculationService:
    """Entry point for both calculation modes"""

    def __init__(self, lookup: RateLookup):
        self.lookup = lookup

    def calculate_by_amount(self, loan_amount, purity, interest_scheme_id) -> LoanCalculationResult:
        """
        Required gold weight for a desired loan amount.

        Raises:
            InvalidInputError: Bad amount, purity or scheme id
            SchemeNotFoundError: Scheme id does not resolve
            RateNotFoundError: No gold rate for purity under the scheme
        """
        return self._run(CalculationMode.BY_AMOUNT, validate_by_amount, loan_amount, purity, interest_scheme_id)

    def calculate_by_weight(self, gold_weight, purity, interest_scheme_id) -> LoanCalculationResult:
        """Eligible loan amount for a gold weight. Raises as calculate_by_amount."""
        return self._run(CalculationMode.BY_WEIGHT, validate_by_weight, gold_weight, purity, interest_scheme_id)

    def _run(self, mode: CalculationMode, validate, value, purity, interest_scheme_id) -> LoanCalculationResult:
        try:
            request = validate(value, purity, interest_scheme_id)
            scheme, gold_rate = self.resolve(request)

            if request.mode is CalculationMode.BY_AMOUNT:
                result = calculate_by_amount(request.loan_amount, gold_rate, scheme.rate)
            else:
                result = calculate_by_weight(request.gold_weight, gold_rate, scheme.rate)

        except tuple(ERROR_REASONS) as e:
            record_calculation_error(mode.value, ERROR_REASONS[type(e)])
            raise

        record_calculation(mode.value, result.purity.value, result.principal_amount)
        return result

    def resolve(self, request: LoanCalculationInput) -> tuple[InterestScheme, GoldRate]:
        """Look up the scheme, then the rate for purity under that scheme"""
        scheme = self.lookup.get_interest_scheme(request.interest_scheme_id)
        if scheme is None:
            raise SchemeNotFoundError(request.interest_scheme_id)

        gold_rate = self.lookup.get_gold_rate(request.purity, request.interest_scheme_id)
        if gold_rate is None:
            raise RateNotFoundError(request.purity.value, request.interest_scheme_id)

        return scheme, gold_rate
