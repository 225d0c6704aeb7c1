"""Unit tests for result display formatting"""

import pytest
from gold_loan.domain.calculator import calculate_by_amount, calculate_by_weight
from gold_loan.domain.models import GoldRate, Purity
from gold_loan.utils.formatting import (
    build_summary,
    format_currency,
    format_weight,
    group_indian,
    implied_rate_per_gram,
    purity_label,
)

RATE_24K = GoldRate(purity=Purity.K24, rate_per_gram=6250.0)


@pytest.mark.parametrize(
    "digits, expected",
    [
        ("0", "0"),
        ("999", "999"),
        ("1000", "1,000"),
        ("100000", "1,00,000"),
        ("1234567", "12,34,567"),
        ("12345678", "1,23,45,678"),
    ],
)
def test_group_indian(digits: str, expected: str):
    assert group_indian(digits) == expected


def test_format_currency():
    assert format_currency(100000) == "₹1,00,000.00"
    assert format_currency(62187.5) == "₹62,187.50"
    assert format_currency(0.5) == "₹0.50"
    assert format_currency(-500) == "-₹500.00"
    assert format_currency(1234.5, symbol="Rs ") == "Rs 1,234.50"


def test_format_weight():
    assert format_weight(19) == "19.00 grams"
    assert format_weight(16.666) == "16.67 grams"


def test_purity_label():
    assert purity_label(Purity.K24) == "24K (99.9% Pure)"
    assert purity_label("22k") == "22K (91.6% Pure)"
    assert purity_label("18k") == "18K (75% Pure)"
    assert purity_label("mixed") == "Mixed"
    assert purity_label("platinum") == "Platinum"


def test_implied_rate_per_gram_by_amount():
    result = calculate_by_amount(100000, RATE_24K, 0.5)
    assert implied_rate_per_gram(result) == pytest.approx(100000 / 19.0)


def test_implied_rate_per_gram_by_weight_needs_supplied_weight():
    result = calculate_by_weight(10, RATE_24K, 2.0)

    assert implied_rate_per_gram(result) is None
    assert implied_rate_per_gram(result, gold_weight=10) == pytest.approx(5000)


def test_build_summary_by_amount():
    summary = build_summary(calculate_by_amount(100000, RATE_24K, 0.5))

    assert summary.splitlines() == [
        "Gold Loan Calculation:",
        "",
        "Gold Purity: 24K (99.9% Pure)",
        "Interest Rate: 0.5%",
        "Rate Per Gram: ₹5,263.16 per gram",
        "Required Gold Weight: 19.00 grams",
        "Principal Amount: ₹1,00,000.00",
        "Interest Amount: ₹500.00",
        "Eligible Loan Amount: ₹99,500.00",
    ]


def test_build_summary_by_weight():
    summary = build_summary(calculate_by_weight(10, RATE_24K, 0.5), gold_weight=10)

    assert "Interest Rate: 0.5%" in summary
    assert "Rate Per Gram: ₹6,250.00 per gram" in summary
    assert "Loan Amount: ₹62,500.00" in summary
    assert "Interest Amount: ₹312.50" in summary
    assert "Eligible Loan Amount: ₹62,187.50" in summary
    assert "Required Gold Weight" not in summary


def test_format_currency_sign_follows_rounded_value():
    assert format_currency(-0.001) == "₹0.00"
    assert format_currency(-0.004) == "₹0.00"
    assert format_currency(-0.005 - 1e-9) == "-₹0.01"
