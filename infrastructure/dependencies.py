"""
Dépendances FastAPI pour l'injection de services
"""

from typing import Generator
from sqlalchemy.orm import Session
from fastapi import Depends

from infrastructure.database.session import SessionLocal
from infrastructure.database.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyMessageRepository
)
from infrastructure.security.password_hasher import PasswordHasher
from infrastructure.security.jwt_service import JWTService
from application.services.user_service import UserService
from application.services.message_service import MessageService
from config import Config

config = Config()


def get_db() -> Generator[Session, None, None]:
    """Dépendance pour obtenir une session de base de données"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_user_repository(db: Session = Depends(get_db)) -> SQLAlchemyUserRepository:
    """Dépendance pour obtenir le UserRepository"""
    return SQLAlchemyUserRepository(db)


def get_message_repository(db: Session = Depends(get_db)) -> SQLAlchemyMessageRepository:
    """Dépendance pour obtenir le MessageRepository"""
    return SQLAlchemyMessageRepository(db)


def get_password_hasher() -> PasswordHasher:
    """Dépendance pour obtenir le PasswordHasher"""
    return PasswordHasher(schemes=config.password_schemes)


def get_jwt_service() -> JWTService:
    """Dépendance pour obtenir le JWTService"""
    return JWTService(
        secret_key=config.jwt_secret_key,
        algorithm=config.jwt_algorithm,
        expire_minutes=config.jwt_expire_minutes
    )


def get_user_service(
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher)
) -> UserService:
    """Dépendance pour obtenir le UserService"""
    return UserService(user_repository, password_hasher)


def get_message_service(
    message_repository: SQLAlchemyMessageRepository = Depends(get_message_repository),
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository)
) -> MessageService:
    """Dépendance pour obtenir le MessageService"""
    return MessageService(message_repository, user_repository)
