"""
MessageService - Service applicatif pour la gestion des messages
"""

import logging
from datetime import datetime
from typing import Callable
from domain.clock import utcnow
from domain.entities.message import Message, MessageDetail
from domain.exceptions import InvalidReferenceError, NotFoundError
from domain.repositories.message_repository import MessageRepository
from domain.repositories.user_repository import UserRepository
from application.services.message_access import ensure_can_view, ensure_can_mark_read

logger = logging.getLogger(__name__)


class MessageService:
    """Service pour la gestion des messages"""

    def __init__(
        self,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        clock: Callable[[], datetime] = utcnow
    ):
        self.message_repository = message_repository
        self.user_repository = user_repository
        self.clock = clock

    def create(self, from_username: str, to_username: str, body: str) -> Message:
        """Crée un nouveau message non lu"""
        for username in (from_username, to_username):
            if self.user_repository.find_by_username(username) is None:
                raise InvalidReferenceError(f"User '{username}' does not exist")

        message = Message(
            id=None,
            from_username=from_username,
            to_username=to_username,
            body=body,
            sent_at=self.clock(),
            read_at=None
        )

        created = self.message_repository.add(message)
        logger.info(f"Message {created.id} sent from '{from_username}' to '{to_username}'")
        return created

    def get(self, message_id: int) -> MessageDetail:
        """Récupère un message avec les profils expéditeur et destinataire"""
        detail = self.message_repository.find_detail(message_id)
        if detail is None:
            raise NotFoundError(f"No such message: {message_id}")
        return detail

    def mark_read(self, message_id: int) -> Message:
        """
        Marque un message comme lu.

        Chaque appel écrase read_at avec l'instant courant (le dernier appel
        l'emporte).
        """
        message = self.message_repository.mark_read(message_id, self.clock())
        if message is None:
            raise NotFoundError(f"No such message: {message_id}")
        logger.info(f"Message {message_id} marked as read")
        return message

    def get_for(self, message_id: int, username: str) -> MessageDetail:
        """Récupère un message si l'utilisateur en est l'expéditeur ou le destinataire"""
        detail = self.get(message_id)
        ensure_can_view(detail, username)
        return detail

    def mark_read_by(self, message_id: int, username: str) -> Message:
        """Marque un message comme lu si l'utilisateur en est le destinataire"""
        detail = self.get(message_id)
        ensure_can_mark_read(detail, username)
        return self.mark_read(message_id)
