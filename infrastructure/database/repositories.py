"""
Implémentations des repositories SQLAlchemy
"""

import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, aliased

from domain.entities import (
    User, UserSummary, Message, MessageDetail, SentMessage, ReceivedMessage
)
from domain.exceptions import DuplicateKeyError, InvalidReferenceError
from domain.repositories import UserRepository, MessageRepository
from infrastructure.database.models import UserModel, MessageModel
from infrastructure.database.mappers import UserMapper, MessageMapper

logger = logging.getLogger(__name__)

# Codes SQLSTATE PostgreSQL; SQLite ne fournit que le message
UNIQUE_VIOLATION = ("23505", "UNIQUE CONSTRAINT")
FOREIGN_KEY_VIOLATION = ("23503", "FOREIGN KEY CONSTRAINT")


def _is_violation(error: IntegrityError, kind) -> bool:
    """Indique si l'IntegrityError correspond au type de contrainte donné"""
    sqlstate, sqlite_marker = kind
    pgcode = getattr(error.orig, "pgcode", None)
    if pgcode:
        return pgcode == sqlstate
    return sqlite_marker in str(error.orig).upper()


class SQLAlchemyUserRepository(UserRepository):
    """Implémentation SQLAlchemy du UserRepository"""

    def __init__(self, session: Session):
        self.session = session

    def find_by_username(self, username: str) -> Optional[User]:
        """Trouve un utilisateur par son nom d'utilisateur"""
        model = self.session.query(UserModel).filter(UserModel.username == username).first()
        return UserMapper.to_domain(model) if model else None

    def find_all(self) -> List[UserSummary]:
        """Retourne le profil public de tous les utilisateurs"""
        models = self.session.query(UserModel).order_by(UserModel.join_at, UserModel.username).all()
        return [UserMapper.to_summary(model) for model in models]

    def add(self, user: User) -> User:
        """Insère un nouvel utilisateur"""
        model = UserMapper.to_model(user)
        self.session.add(model)

        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if not _is_violation(e, UNIQUE_VIOLATION):
                logger.error(f"Error saving user: {e.orig}")
                raise
            logger.warning(f"Duplicate username '{user.username}': {e.orig}")
            raise DuplicateKeyError(f"Username '{user.username}' already exists") from e
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error saving user: {e}")
            raise

        self.session.refresh(model)
        return UserMapper.to_domain(model)

    def update_last_login(self, username: str, when: datetime) -> bool:
        """Met à jour last_login_at"""
        try:
            updated = (
                self.session.query(UserModel)
                .filter(UserModel.username == username)
                .update({UserModel.last_login_at: when}, synchronize_session=False)
            )
            self.session.commit()
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error updating last login of '{username}': {e}")
            raise
        return updated > 0

    def find_messages_from(self, username: str) -> List[SentMessage]:
        """Messages envoyés, joints au profil du destinataire"""
        rows = (
            self.session.query(MessageModel, UserModel)
            .join(UserModel, MessageModel.to_username == UserModel.username)
            .filter(MessageModel.from_username == username)
            .order_by(MessageModel.id)
            .all()
        )
        return [MessageMapper.to_sent(message, recipient) for message, recipient in rows]

    def find_messages_to(self, username: str) -> List[ReceivedMessage]:
        """Messages reçus, joints au profil de l'expéditeur"""
        rows = (
            self.session.query(MessageModel, UserModel)
            .join(UserModel, MessageModel.from_username == UserModel.username)
            .filter(MessageModel.to_username == username)
            .order_by(MessageModel.id)
            .all()
        )
        return [MessageMapper.to_received(message, sender) for message, sender in rows]


class SQLAlchemyMessageRepository(MessageRepository):
    """Implémentation SQLAlchemy du MessageRepository"""

    def __init__(self, session: Session):
        self.session = session

    def add(self, message: Message) -> Message:
        """Insère un message"""
        model = MessageMapper.to_model(message)
        self.session.add(model)

        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if not _is_violation(e, FOREIGN_KEY_VIOLATION):
                logger.error(f"Error saving message: {e.orig}")
                raise
            logger.warning(f"Message references an unknown user: {e.orig}")
            raise InvalidReferenceError(
                f"Unknown sender or recipient: '{message.from_username}' -> '{message.to_username}'"
            ) from e
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error saving message: {e}")
            raise

        self.session.refresh(model)
        return MessageMapper.to_domain(model)

    def find_detail(self, message_id: int) -> Optional[MessageDetail]:
        """Trouve un message joint aux profils expéditeur/destinataire"""
        sender = aliased(UserModel, name="sender")
        recipient = aliased(UserModel, name="recipient")
        row = (
            self.session.query(MessageModel, sender, recipient)
            .join(sender, MessageModel.from_username == sender.username)
            .join(recipient, MessageModel.to_username == recipient.username)
            .filter(MessageModel.id == message_id)
            .first()
        )
        if row is None:
            return None

        message, from_user, to_user = row
        return MessageMapper.to_detail(message, from_user, to_user)

    def mark_read(self, message_id: int, when: datetime) -> Optional[Message]:
        """Positionne read_at"""
        model = self.session.query(MessageModel).filter(MessageModel.id == message_id).first()
        if model is None:
            return None

        model.read_at = when
        try:
            self.session.commit()
            self.session.refresh(model)
            return MessageMapper.to_domain(model)
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error marking message {message_id} as read: {e}")
            raise
