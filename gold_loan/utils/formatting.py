"""Display formatting for calculation results (INR amounts, gram weights, summaries)"""

from typing import Optional

from gold_loan.config import settings
from gold_loan.domain.models import LoanCalculationResult, Purity

PURITY_LABELS = {
    Purity.K24: "24K (99.9% Pure)",
    Purity.K22: "22K (91.6% Pure)",
    Purity.K18: "18K (75% Pure)",
    Purity.MIXED: "Mixed",
}


def group_indian(integer_part: str) -> str:
    """Group digits the Indian way: last three, then pairs (1234567 -> 12,34,567)"""
    if len(integer_part) <= 3:
        return integer_part
    head, tail = integer_part[:-3], integer_part[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(amount: float, symbol: str | None = None) -> str:
    """
    Format an amount as rupees with two decimals.

    Example:
        100000 -> ₹1,00,000.00
        -62187.5 -> -₹62,187.50
    """
    symbol = settings.currency_symbol if symbol is None else symbol
    rounded = f"{amount:.2f}"
    # "-0.00" prints unsigned
    sign = "-" if rounded.startswith("-") and rounded.strip("-0.") else ""
    integer_part, fraction = rounded.lstrip("-").split(".")
    return f"{sign}{symbol}{group_indian(integer_part)}.{fraction}"


def format_weight(weight: float) -> str:
    return f"{weight:.2f} grams"


def purity_label(purity: Purity | str) -> str:
    """Human label for a purity; unknown values are capitalised"""
    try:
        return PURITY_LABELS[Purity(purity)]
    except ValueError:
        text = str(purity)
        return text[:1].upper() + text[1:]


def implied_rate_per_gram(result: LoanCalculationResult, gold_weight: Optional[float] = None) -> Optional[float]:
    """
    Principal divided by the gold weight behind it.

    By-amount results carry their own gold_weight; for by-weight results pass
    the weight the caller supplied. Returns None when no weight is known.
    """
    weight = result.gold_weight if result.gold_weight is not None else gold_weight
    if not weight:
        return None
    return result.principal_amount / weight


def build_summary(result: LoanCalculationResult, gold_weight: Optional[float] = None) -> str:
    """Shareable plain-text breakdown of a calculation"""
    lines = [
        "Gold Loan Calculation:",
        "",
        f"Gold Purity: {purity_label(result.purity)}",
        f"Interest Rate: {result.interest_rate:g}%",
    ]

    rate = implied_rate_per_gram(result, gold_weight)
    if rate is not None:
        lines.append(f"Rate Per Gram: {format_currency(rate)} per gram")

    if result.gold_weight is not None:
        lines.append(f"Required Gold Weight: {format_weight(result.gold_weight)}")
    else:
        lines.append(f"Loan Amount: {format_currency(result.loan_amount)}")

    lines += [
        f"Principal Amount: {format_currency(result.principal_amount)}",
        f"Interest Amount: {format_currency(result.interest_amount)}",
        f"Eligible Loan Amount: {format_currency(result.eligible_amount)}",
    ]
    return "\n".join(lines)
