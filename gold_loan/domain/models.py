"""Domain models - pure Python dataclasses representing loan calculation values"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Purity(str, Enum):
    """Gold fineness grade; values are the wire strings"""

    K24 = "24k"
    K22 = "22k"
    K18 = "18k"
    MIXED = "mixed"


class CalculationMode(str, Enum):
    """Which quantity the caller supplied"""

    BY_AMOUNT = "by_amount"
    BY_WEIGHT = "by_weight"


@dataclass(frozen=True)
class InterestScheme:
    """Named interest percentage applied to a loan's principal"""

    id: int
    rate: float  # percentage, e.g. 0.5 means 0.5%
    label: str


@dataclass(frozen=True)
class GoldRate:
    """Price per gram for a purity under an interest scheme"""

    purity: Purity
    rate_per_gram: float
    interest_scheme_id: Optional[int] = None
    id: Optional[int] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class LoanCalculationInput:
    """Validated calculation request; exactly one of loan_amount/gold_weight is set"""

    mode: CalculationMode
    purity: Purity
    interest_scheme_id: int
    loan_amount: Optional[float] = None
    gold_weight: Optional[float] = None


@dataclass(frozen=True)
class LoanCalculationResult:
    """Output of a single calculation.

    By-amount results carry the derived gold_weight, by-weight results the
    derived loan_amount. The other field stays None.
    """

    purity: Purity
    interest_rate: float
    principal_amount: float
    interest_amount: float
    eligible_amount: float
    gold_weight: Optional[float] = None
    loan_amount: Optional[float] = None

    @property
    def mode(self) -> CalculationMode:
        return CalculationMode.BY_AMOUNT if self.gold_weight is not None else CalculationMode.BY_WEIGHT
