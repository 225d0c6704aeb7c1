"""Rate lookup interface consumed by the calculation service"""

from typing import Optional, Protocol

from gold_loan.domain.models import GoldRate, InterestScheme, Purity


class RateLookup(Protocol):
    """Read access to stored gold rates and interest schemes"""

    def get_gold_rate(self, purity: Purity, interest_scheme_id: int) -> Optional[GoldRate]:
        ...

    def get_interest_scheme(self, interest_scheme_id: int) -> Optional[InterestScheme]:
        ...
