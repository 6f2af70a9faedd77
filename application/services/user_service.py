"""
UserService - Service applicatif pour la gestion des utilisateurs
"""

import logging
from datetime import datetime
from typing import Callable, List
from domain.clock import utcnow
from domain.entities.user import User, UserSummary
from domain.entities.message import SentMessage, ReceivedMessage
from domain.exceptions import DuplicateKeyError, NotFoundError
from domain.repositories.user_repository import UserRepository
from infrastructure.security.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


class UserService:
    """Service pour la gestion des utilisateurs"""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        clock: Callable[[], datetime] = utcnow
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.clock = clock

    def register(
        self,
        username: str,
        hashed_password: str,
        first_name: str,
        last_name: str,
        phone: str
    ) -> User:
        """
        Enregistre un nouvel utilisateur.

        Le mot de passe doit déjà être haché par l'appelant; une valeur que le
        hasher ne reconnaît pas est refusée plutôt que stockée en clair.
        join_at et last_login_at reçoivent le même instant.
        """
        if not self.password_hasher.is_hash(hashed_password):
            raise ValueError("register() expects an already-hashed password")

        if self.user_repository.find_by_username(username):
            raise DuplicateKeyError(f"Username '{username}' already exists")

        now = self.clock()
        user = User(
            username=username,
            password=hashed_password,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            join_at=now,
            last_login_at=now
        )

        created = self.user_repository.add(user)
        logger.info(f"User '{username}' registered")
        return created

    def authenticate(self, username: str, password: str) -> bool:
        """Vérifie le couple username/password; ne distingue pas les causes d'échec"""
        user = self.user_repository.find_by_username(username)
        if user is None:
            self.password_hasher.dummy_verify()
            logger.warning(f"Authentication failed for user '{username}'")
            return False

        if not self.password_hasher.verify(password, user.password):
            logger.warning(f"Authentication failed for user '{username}'")
            return False

        logger.info(f"Authentication success: User '{username}' authenticated")
        return True

    def update_login_timestamp(self, username: str) -> None:
        """Met à jour la date de dernière connexion"""
        if not self.user_repository.update_last_login(username, self.clock()):
            raise NotFoundError(f"User '{username}' not found")

    def all(self) -> List[UserSummary]:
        """Profil public de tous les utilisateurs"""
        return self.user_repository.find_all()

    def get(self, username: str) -> User:
        """Récupère un utilisateur par son nom d'utilisateur"""
        user = self.user_repository.find_by_username(username)
        if user is None:
            raise NotFoundError(f"User '{username}' not found")
        return user

    def messages_from(self, username: str) -> List[SentMessage]:
        """Messages envoyés par l'utilisateur"""
        return self.user_repository.find_messages_from(username)

    def messages_to(self, username: str) -> List[ReceivedMessage]:
        """Messages reçus par l'utilisateur"""
        return self.user_repository.find_messages_to(username)
