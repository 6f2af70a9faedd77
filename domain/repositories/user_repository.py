"""
Interface UserRepository - Définit les opérations d'accès aux données pour User
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from domain.entities.user import User, UserSummary
from domain.entities.message import SentMessage, ReceivedMessage


class UserRepository(ABC):
    """Interface pour le repository des utilisateurs"""

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[User]:
        """Trouve un utilisateur par son nom d'utilisateur"""
        pass

    @abstractmethod
    def find_all(self) -> List[UserSummary]:
        """Retourne le profil public de tous les utilisateurs"""
        pass

    @abstractmethod
    def add(self, user: User) -> User:
        """Insère un nouvel utilisateur (DuplicateKeyError si le nom existe)"""
        pass

    @abstractmethod
    def update_last_login(self, username: str, when: datetime) -> bool:
        """Met à jour last_login_at; False si l'utilisateur n'existe pas"""
        pass

    @abstractmethod
    def find_messages_from(self, username: str) -> List[SentMessage]:
        """Messages envoyés par l'utilisateur, joints au destinataire"""
        pass

    @abstractmethod
    def find_messages_to(self, username: str) -> List[ReceivedMessage]:
        """Messages reçus par l'utilisateur, joints à l'expéditeur"""
        pass
