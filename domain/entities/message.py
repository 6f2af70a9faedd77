"""
Entité Message - Modèle métier pour les messages entre utilisateurs
"""

from datetime import datetime
from typing import Optional
from dataclasses import dataclass

from domain.entities.user import UserSummary


@dataclass
class Message:
    """Entité Message du domaine"""
    id: Optional[int]
    from_username: str
    to_username: str
    body: str
    sent_at: Optional[datetime] = None
    read_at: Optional[datetime] = None

    def __post_init__(self):
        """Validation de l'entité"""
        if not self.from_username or not self.to_username:
            raise ValueError("Message must have a sender and a recipient")
        if self.body is None:
            raise ValueError("Message body cannot be null")


@dataclass(frozen=True)
class MessageDetail:
    """Message joint avec les profils de l'expéditeur et du destinataire"""
    id: int
    body: str
    sent_at: datetime
    read_at: Optional[datetime]
    from_user: UserSummary
    to_user: UserSummary


@dataclass(frozen=True)
class SentMessage:
    """Message envoyé, avec le profil du destinataire"""
    id: int
    body: str
    sent_at: datetime
    read_at: Optional[datetime]
    to_user: UserSummary


@dataclass(frozen=True)
class ReceivedMessage:
    """Message reçu, avec le profil de l'expéditeur"""
    id: int
    body: str
    sent_at: datetime
    read_at: Optional[datetime]
    from_user: UserSummary
