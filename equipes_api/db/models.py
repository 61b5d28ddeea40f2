"""SQLAlchemy models for accounts and their JSON documents."""
from __future__ import annotations

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    ForeignKey,
    String,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from .session import Base

JSONDocument = JSON().with_variant(JSONB(), "postgresql")


class Account(Base):
    __tablename__ = "users"

    username = Column(String(255), primary_key=True)
    password_hash = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    document = relationship(
        "UserDocument",
        uselist=False,
        back_populates="account",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )


class UserDocument(Base):
    __tablename__ = "user_data"

    username = Column(String(255), ForeignKey("users.username", ondelete="CASCADE"), primary_key=True)
    personnes = Column(JSONDocument, nullable=True)
    equipes = Column(JSONDocument, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    account = relationship("Account", back_populates="document")
