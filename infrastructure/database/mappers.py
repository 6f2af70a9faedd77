"""
Mappers - Conversion entre modèles SQLAlchemy et entités de domaine
"""

from typing import Optional
from infrastructure.database.models import UserModel, MessageModel
from domain.entities import (
    User, UserSummary, Message, MessageDetail, SentMessage, ReceivedMessage
)


class UserMapper:
    """Mapper entre UserModel et User"""

    @staticmethod
    def to_domain(model: UserModel) -> User:
        """Convertit un UserModel en entité User"""
        return User(
            username=model.username,
            password=model.password,
            first_name=model.first_name,
            last_name=model.last_name,
            phone=model.phone,
            join_at=model.join_at,
            last_login_at=model.last_login_at
        )

    @staticmethod
    def to_summary(model: UserModel) -> UserSummary:
        """Convertit un UserModel en profil public"""
        return UserSummary(
            username=model.username,
            first_name=model.first_name,
            last_name=model.last_name,
            phone=model.phone
        )

    @staticmethod
    def to_model(user: User, model: Optional[UserModel] = None) -> UserModel:
        """Convertit une entité User en UserModel"""
        if model is None:
            model = UserModel()

        model.username = user.username
        model.password = user.password
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.phone = user.phone
        model.join_at = user.join_at
        model.last_login_at = user.last_login_at

        return model


class MessageMapper:
    """Mapper entre MessageModel et Message (et ses vues jointes)"""

    @staticmethod
    def to_domain(model: MessageModel) -> Message:
        """Convertit un MessageModel en entité Message"""
        return Message(
            id=model.id,
            from_username=model.from_username,
            to_username=model.to_username,
            body=model.body,
            sent_at=model.sent_at,
            read_at=model.read_at
        )

    @staticmethod
    def to_model(message: Message, model: Optional[MessageModel] = None) -> MessageModel:
        """Convertit une entité Message en MessageModel (l'id reste généré par la base)"""
        if model is None:
            model = MessageModel()

        model.from_username = message.from_username
        model.to_username = message.to_username
        model.body = message.body
        model.sent_at = message.sent_at
        model.read_at = message.read_at

        return model

    @staticmethod
    def to_detail(model: MessageModel, from_user: UserModel, to_user: UserModel) -> MessageDetail:
        return MessageDetail(
            id=model.id,
            body=model.body,
            sent_at=model.sent_at,
            read_at=model.read_at,
            from_user=UserMapper.to_summary(from_user),
            to_user=UserMapper.to_summary(to_user)
        )

    @staticmethod
    def to_sent(model: MessageModel, to_user: UserModel) -> SentMessage:
        return SentMessage(
            id=model.id,
            body=model.body,
            sent_at=model.sent_at,
            read_at=model.read_at,
            to_user=UserMapper.to_summary(to_user)
        )

    @staticmethod
    def to_received(model: MessageModel, from_user: UserModel) -> ReceivedMessage:
        return ReceivedMessage(
            id=model.id,
            body=model.body,
            sent_at=model.sent_at,
            read_at=model.read_at,
            from_user=UserMapper.to_summary(from_user)
        )
