"""Data access layer for interest schemes and gold rates"""

from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session
from gold_loan.infrastructure.database.models import GoldRateRecord, InterestSchemeRecord
from gold_loan.domain.exceptions import GoldRateNotFoundError, SchemeNotFoundError
from gold_loan.domain.models import GoldRate, InterestScheme, Purity
from gold_loan.domain.validation import parse_purity, require_positive_number, validate_scheme_label


class InterestSchemeRepository:
    """Repository for interest schemes"""

    def __init__(self, db: Session):
        self.db = db

    def list_schemes(self) -> List[InterestSchemeRecord]:
        return self.db.query(InterestSchemeRecord).order_by(InterestSchemeRecord.rate).all()

    def get_scheme(self, scheme_id: int) -> Optional[InterestSchemeRecord]:
        return self.db.get(InterestSchemeRecord, scheme_id)

    def require_scheme(self, scheme_id: int) -> InterestSchemeRecord:
        """Fetch scheme or raise SchemeNotFoundError"""
        scheme = self.get_scheme(scheme_id)
        if scheme is None:
            raise SchemeNotFoundError(scheme_id)
        return scheme

    def create_scheme(self, rate: float, label: str) -> InterestSchemeRecord:
        scheme = InterestSchemeRecord(
            rate=require_positive_number(rate, "rate"),
            label=validate_scheme_label(label),
        )
        self.db.add(scheme)
        self.db.flush()  # Get ID without committing
        return scheme

    def update_scheme(
        self,
        scheme_id: int,
        rate: Optional[float] = None,
        label: Optional[str] = None,
    ) -> InterestSchemeRecord:
        """Partial update; fields left as None are unchanged"""
        scheme = self.require_scheme(scheme_id)
        if rate is not None:
            scheme.rate = require_positive_number(rate, "rate")
        if label is not None:
            scheme.label = validate_scheme_label(label)
        self.db.flush()
        return scheme

    def delete_scheme(self, scheme_id: int) -> None:
        """Delete scheme along with the gold rates attached to it"""
        scheme = self.require_scheme(scheme_id)
        self.db.delete(scheme)
        self.db.flush()


class GoldRateRepository:
    """Repository for per-gram gold rates"""

    def __init__(self, db: Session):
        self.db = db

    def list_rates(self) -> List[GoldRateRecord]:
        return (
            self.db.query(GoldRateRecord)
            .order_by(GoldRateRecord.interest_scheme_id, GoldRateRecord.purity)
            .all()
        )

    def get_rate(self, purity: Purity, scheme_id: int) -> Optional[GoldRateRecord]:
        return (
            self.db.query(GoldRateRecord)
            .filter(
                GoldRateRecord.purity == Purity(purity).value,
                GoldRateRecord.interest_scheme_id == scheme_id,
            )
            .first()
        )

    def upsert_rate(self, purity: Purity | str, scheme_id: int, rate_per_gram: float) -> GoldRateRecord:
        """
        Set the rate for a purity under a scheme.

        Updates the existing row in place when the (purity, scheme) pair is
        already stored, otherwise inserts one.

        Raises:
            InvalidInputError: Unknown purity or non-positive rate
            SchemeNotFoundError: Scheme id does not exist
        """
        purity = parse_purity(purity)
        rate_per_gram = require_positive_number(rate_per_gram, "ratePerGram")
        InterestSchemeRepository(self.db).require_scheme(scheme_id)

        now = datetime.now(timezone.utc)
        existing = self.get_rate(purity, scheme_id)
        if existing is not None:
            existing.rate_per_gram = rate_per_gram
            existing.updated_at = now
            self.db.flush()
            return existing

        record = GoldRateRecord(
            purity=purity.value,
            interest_scheme_id=scheme_id,
            rate_per_gram=rate_per_gram,
            updated_at=now,
        )
        self.db.add(record)
        self.db.flush()
        return record

    def delete_rate(self, rate_id: int) -> None:
        record = self.db.get(GoldRateRecord, rate_id)
        if record is None:
            raise GoldRateNotFoundError(rate_id)
        self.db.delete(record)
        self.db.flush()


def to_interest_scheme(record: InterestSchemeRecord) -> InterestScheme:
    return InterestScheme(id=record.id, rate=record.rate, label=record.label)


def to_gold_rate(record: GoldRateRecord) -> GoldRate:
    return GoldRate(
        purity=Purity(record.purity),
        rate_per_gram=record.rate_per_gram,
        interest_scheme_id=record.interest_scheme_id,
        id=record.id,
        updated_at=record.updated_at,
    )


class SqlRateLookup:
    """RateLookup backed by the database repositories"""

    def __init__(self, db: Session):
        self.schemes = InterestSchemeRepository(db)
        self.rates = GoldRateRepository(db)

    def get_gold_rate(self, purity: Purity, interest_scheme_id: int) -> Optional[GoldRate]:
        record = self.rates.get_rate(purity, interest_scheme_id)
        return to_gold_rate(record) if record is not None else None

    def get_interest_scheme(self, interest_scheme_id: int) -> Optional[InterestScheme]:
        record = self.schemes.get_scheme(interest_scheme_id)
        return to_interest_scheme(record) if record is not None else None
