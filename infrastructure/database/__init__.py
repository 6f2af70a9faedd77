"""
Infrastructure Database - Configuration et repositories SQLAlchemy
"""

from infrastructure.database.session import SessionLocal, engine, create_db_engine
from infrastructure.database.models import Base, UserModel, MessageModel
from infrastructure.database.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyMessageRepository
)

__all__ = [
    "Base",
    "engine",
    "create_db_engine",
    "SessionLocal",
    "UserModel",
    "MessageModel",
    "SQLAlchemyUserRepository",
    "SQLAlchemyMessageRepository"
]
