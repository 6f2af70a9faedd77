"""
Interface MessageRepository - Définit les opérations d'accès aux données pour Message
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from domain.entities.message import Message, MessageDetail


class MessageRepository(ABC):
    """Interface pour le repository des messages"""

    @abstractmethod
    def add(self, message: Message) -> Message:
        """Insère un message et retourne la version persistée (avec son id)"""
        pass

    @abstractmethod
    def find_detail(self, message_id: int) -> Optional[MessageDetail]:
        """Trouve un message joint aux profils expéditeur/destinataire"""
        pass

    @abstractmethod
    def mark_read(self, message_id: int, when: datetime) -> Optional[Message]:
        """Positionne read_at; None si le message n'existe pas"""
        pass
