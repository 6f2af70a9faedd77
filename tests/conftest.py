"""Fixtures partagées : repositories en mémoire, base SQLite en mémoire, client API."""

import os

# Avant tout import applicatif : base en mémoire et hachage rapide
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PASSWORD_SCHEMES"] = "pbkdf2_sha256"
os.environ["JWT_SECRET_KEY"] = "test-secret"

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from domain.entities import (
    User, UserSummary, Message, MessageDetail, SentMessage, ReceivedMessage
)
from domain.exceptions import DuplicateKeyError
from domain.repositories import UserRepository, MessageRepository
from infrastructure.database.session import create_db_engine
from infrastructure.database.init_db import init_db
from infrastructure.security.password_hasher import PasswordHasher
from application.services.user_service import UserService
from application.services.message_service import MessageService


class FakeClock:
    """Horloge déterministe : chaque appel avance d'une seconde."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)) -> None:
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current += timedelta(seconds=1)
        return now


class InMemoryStore:
    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        self.messages: List[Message] = []


class InMemoryUserRepository(UserRepository):
    """Implémentation en mémoire de UserRepository pour les tests."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def find_by_username(self, username: str) -> Optional[User]:
        user = self.store.users.get(username)
        return replace(user) if user else None

    def find_all(self) -> List[UserSummary]:
        return [user.to_summary() for user in self.store.users.values()]

    def add(self, user: User) -> User:
        if user.username in self.store.users:
            raise DuplicateKeyError(f"Username '{user.username}' already exists")
        self.store.users[user.username] = replace(user)
        return replace(user)

    def update_last_login(self, username: str, when: datetime) -> bool:
        user = self.store.users.get(username)
        if user is None:
            return False
        user.last_login_at = when
        return True

    def find_messages_from(self, username: str) -> List[SentMessage]:
        return [
            SentMessage(
                id=m.id, body=m.body, sent_at=m.sent_at, read_at=m.read_at,
                to_user=self.store.users[m.to_username].to_summary()
            )
            for m in self.store.messages if m.from_username == username
        ]

    def find_messages_to(self, username: str) -> List[ReceivedMessage]:
        return [
            ReceivedMessage(
                id=m.id, body=m.body, sent_at=m.sent_at, read_at=m.read_at,
                from_user=self.store.users[m.from_username].to_summary()
            )
            for m in self.store.messages if m.to_username == username
        ]


class InMemoryMessageRepository(MessageRepository):
    """Implémentation en mémoire de MessageRepository pour les tests."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def add(self, message: Message) -> Message:
        stored = replace(message, id=len(self.store.messages) + 1)
        self.store.messages.append(stored)
        return replace(stored)

    def _find(self, message_id: int) -> Optional[Message]:
        message = next((m for m in self.store.messages if m.id == message_id), None)
        return replace(message) if message else None

    def find_detail(self, message_id: int) -> Optional[MessageDetail]:
        message = self._find(message_id)
        if message is None:
            return None
        return MessageDetail(
            id=message.id, body=message.body, sent_at=message.sent_at, read_at=message.read_at,
            from_user=self.store.users[message.from_username].to_summary(),
            to_user=self.store.users[message.to_username].to_summary()
        )

    def mark_read(self, message_id: int, when: datetime) -> Optional[Message]:
        message = next((m for m in self.store.messages if m.id == message_id), None)
        if message is None:
            return None
        message.read_at = when
        return replace(message)


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(schemes=["pbkdf2_sha256"])


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def user_service(store, hasher, clock) -> UserService:
    return UserService(InMemoryUserRepository(store), hasher, clock=clock)


@pytest.fixture
def message_service(store, clock) -> MessageService:
    return MessageService(
        InMemoryMessageRepository(store), InMemoryUserRepository(store), clock=clock
    )


@pytest.fixture
def register(user_service, hasher):
    """Inscrit un utilisateur avec un mot de passe haché comme le ferait l'API."""

    def _register(username: str, password: str = "secret") -> User:
        return user_service.register(
            username=username,
            hashed_password=hasher.hash(password),
            first_name=username.capitalize(),
            last_name="Test",
            phone="+33 6 00 00 00 00"
        )

    return _register


@pytest.fixture
def db_engine():
    engine = create_db_engine("sqlite://")
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    from app import app
    from infrastructure.dependencies import get_db

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
