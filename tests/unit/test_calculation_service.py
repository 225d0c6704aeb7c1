"""Unit tests for scheme/rate resolution in the calculation service"""

import logging
import pytest
from prometheus_client import REGISTRY
from gold_loan.domain.exceptions import InvalidInputError, RateNotFoundError, SchemeNotFoundError
from gold_loan.domain.models import Purity
from gold_loan.services.calculation import LoanCalculationService


def error_count(mode: str, reason: str) -> float:
    value = REGISTRY.get_sample_value(
        "gold_loan_calculation_errors_total", {"mode": mode, "reason": reason}
    )
    return value or 0.0


def test_by_amount_uses_scheme_rate(lookup):
    service = LoanCalculationService(lookup)

    result = service.calculate_by_amount(100000, "24k", 1)

    assert result.interest_rate == 0.5
    assert result.gold_weight == pytest.approx(19.0)
    assert result.eligible_amount == pytest.approx(99500)


def test_by_weight_uses_scheme_rate(lookup):
    service = LoanCalculationService(lookup)

    result = service.calculate_by_weight(10, "24k", 4)

    assert result.interest_rate == 2.0
    assert result.loan_amount == pytest.approx(50000)
    assert result.eligible_amount == pytest.approx(49000)


def test_unknown_scheme(lookup):
    service = LoanCalculationService(lookup)
    before = error_count("by_amount", "scheme_not_found")

    with pytest.raises(SchemeNotFoundError) as exc_info:
        service.calculate_by_amount(100000, "24k", 99)

    assert exc_info.value.interest_scheme_id == 99
    assert error_count("by_amount", "scheme_not_found") == before + 1


def test_missing_rate_for_purity(lookup):
    service = LoanCalculationService(lookup)

    with pytest.raises(RateNotFoundError) as exc_info:
        service.calculate_by_weight(10, "18k", 1)

    assert exc_info.value.purity == "18k"
    assert exc_info.value.interest_scheme_id == 1


def test_invalid_input_checked_before_lookup(lookup):
    """A bad amount fails validation even when the scheme is unknown"""
    service = LoanCalculationService(lookup)

    with pytest.raises(InvalidInputError):
        service.calculate_by_amount(0, "24k", 99)
    with pytest.raises(InvalidInputError):
        service.calculate_by_weight(5, "gold", 1)


def test_rate_is_scheme_specific(lookup):
    lookup.add_rate(Purity.K22, 4, 5800.0)
    service = LoanCalculationService(lookup)

    assert service.calculate_by_weight(10, "22k", 4).loan_amount == pytest.approx(46400)
    with pytest.raises(RateNotFoundError):
        service.calculate_by_weight(10, "22k", 1)


def test_missing_rate_is_not_logged_by_service(lookup, caplog):
    """The route logs rejections with the request id; the service stays quiet"""
    service = LoanCalculationService(lookup)

    with caplog.at_level(logging.DEBUG):
        with pytest.raises(RateNotFoundError):
            service.calculate_by_amount(100000, "18k", 1)

    assert caplog.records == []
