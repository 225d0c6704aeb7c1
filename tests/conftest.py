"""Pytest fixtures for testing"""

import pytest
from typing import Dict, Generator, Optional
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from gold_loan.api.main import create_app
from gold_loan.domain.models import GoldRate, InterestScheme, Purity
from gold_loan.infrastructure.database.models import Base
from gold_loan.infrastructure.database.seed import create_tables, seed_defaults
from gold_loan.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

DEFAULT_RATES = {"24k": 6250.0, "22k": 5800.0, "18k": 4700.0, "mixed": 4000.0}


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    create_tables(engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def scheme_ids(db: Session) -> Dict[float, int]:
    """Default schemes with DEFAULT_RATES under each, keyed by interest rate"""
    schemes = seed_defaults(db, DEFAULT_RATES)
    return {s.rate: s.id for s in schemes}


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


class InMemoryRateLookup:
    """RateLookup over plain dicts"""

    def __init__(self):
        self.schemes: Dict[int, InterestScheme] = {}
        self.rates: Dict[tuple, GoldRate] = {}

    def add_scheme(self, scheme_id: int, rate: float) -> InterestScheme:
        scheme = InterestScheme(id=scheme_id, rate=rate, label=f"{rate:g}% Interest")
        self.schemes[scheme_id] = scheme
        return scheme

    def add_rate(self, purity: Purity, scheme_id: int, rate_per_gram: float) -> None:
        self.rates[(purity, scheme_id)] = GoldRate(
            purity=purity, rate_per_gram=rate_per_gram, interest_scheme_id=scheme_id
        )

    def get_gold_rate(self, purity: Purity, interest_scheme_id: int) -> Optional[GoldRate]:
        return self.rates.get((purity, interest_scheme_id))

    def get_interest_scheme(self, interest_scheme_id: int) -> Optional[InterestScheme]:
        return self.schemes.get(interest_scheme_id)


@pytest.fixture
def lookup() -> InMemoryRateLookup:
    """Scheme 1 at 0.5%, scheme 4 at 2.0%, 24k at 6250/g under both"""
    lookup = InMemoryRateLookup()
    lookup.add_scheme(1, 0.5)
    lookup.add_scheme(4, 2.0)
    lookup.add_rate(Purity.K24, 1, 6250.0)
    lookup.add_rate(Purity.K24, 4, 6250.0)
    return lookup
