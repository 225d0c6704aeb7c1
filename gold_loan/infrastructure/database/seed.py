"""Table creation and default scheme/rate seeding"""

from typing import Dict, List
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from gold_loan.infrastructure.database.models import Base, InterestSchemeRecord
from gold_loan.infrastructure.database.repositories import GoldRateRepository, InterestSchemeRepository

DEFAULT_SCHEMES = [
    (0.5, "0.5% Interest"),
    (1.0, "1% Interest"),
    (1.5, "1.5% Interest"),
    (2.0, "2% Interest"),
]


def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)


def seed_defaults(db: Session, rates: Dict[str, float] | None = None) -> List[InterestSchemeRecord]:
    """
    Insert the default interest schemes when none exist, and optionally the
    same per-gram rates for every scheme.

    Args:
        rates: purity -> rate per gram, applied under each scheme

    Returns:
        The stored schemes, lowest rate first
    """
    scheme_repo = InterestSchemeRepository(db)
    if not scheme_repo.list_schemes():
        for rate, label in DEFAULT_SCHEMES:
            scheme_repo.create_scheme(rate, label)

    schemes = scheme_repo.list_schemes()
    if rates:
        rate_repo = GoldRateRepository(db)
        for scheme in schemes:
            for purity, rate_per_gram in rates.items():
                rate_repo.upsert_rate(purity, scheme.id, rate_per_gram)

    db.commit()
    return schemes
