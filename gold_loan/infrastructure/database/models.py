"""SQLAlchemy ORM models for interest schemes and gold rates"""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class InterestSchemeRecord(Base):
    """Named interest percentage offered to borrowers"""

    __tablename__ = "interest_schemes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    rate = Column(Float, nullable=False)  # 0.5, 1.0, 1.5, 2.0
    label = Column(Text, nullable=False)  # "0.5% Interest"

    gold_rates = relationship("GoldRateRecord", back_populates="interest_scheme", cascade="all, delete-orphan")


class GoldRateRecord(Base):
    """Per-gram gold rate for one purity under one interest scheme"""

    __tablename__ = "gold_rates"
    __table_args__ = (UniqueConstraint("purity", "interest_scheme_id", name="uq_gold_rate_purity_scheme"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    purity = Column(Text, nullable=False)  # "24k", "22k", "18k", "mixed"
    interest_scheme_id = Column(
        Integer, ForeignKey("interest_schemes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    rate_per_gram = Column(Float, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    interest_scheme = relationship("InterestSchemeRecord", back_populates="gold_rates")
