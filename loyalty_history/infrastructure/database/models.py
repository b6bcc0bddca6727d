"""SQLAlchemy ORM models for the two history tables."""

import uuid

from sqlalchemy import Column, DateTime, Double, String

from .base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class PointRecord(Base):
    __tablename__ = "histPoints"

    id = Column(String(64), primary_key=True)
    user_id = Column("idUser", String(64), nullable=False, index=True)
    points = Column(Double, nullable=False)
    # Naive wall-clock time in the configured history timezone.
    occurred_at = Column("date", DateTime, nullable=False, index=True)


class TransactionRecord(Base):
    __tablename__ = "histTransactions"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column("idUser", String(64), nullable=False, index=True)
    description = Column(String(255), nullable=False)
    points = Column(Double, nullable=False)
    occurred_at = Column("date", DateTime, nullable=False, index=True)
