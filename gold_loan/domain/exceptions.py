"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Calculation or management input failed validation"""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class RateNotFoundError(DomainException):
    """No gold rate stored for the requested purity and interest scheme"""

    def __init__(self, purity: str, interest_scheme_id: int):
        super().__init__(f"Gold rate for {purity} not found for interest scheme {interest_scheme_id}")
        self.purity = purity
        self.interest_scheme_id = interest_scheme_id


class SchemeNotFoundError(DomainException):
    """Interest scheme id does not resolve to a stored scheme"""

    def __init__(self, interest_scheme_id: int):
        super().__init__(f"Interest scheme {interest_scheme_id} not found")
        self.interest_scheme_id = interest_scheme_id


class GoldRateNotFoundError(DomainException):
    """Gold rate record id does not exist"""

    def __init__(self, rate_id: int):
        super().__init__(f"Gold rate {rate_id} not found")
        self.rate_id = rate_id
