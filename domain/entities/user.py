"""
Entité User - Modèle métier pour les utilisateurs
"""

from datetime import datetime
from typing import Optional
from dataclasses import dataclass


@dataclass(frozen=True)
class UserSummary:
    """Profil public d'un utilisateur (sans le mot de passe)"""
    username: str
    first_name: str
    last_name: str
    phone: str


@dataclass
class User:
    """Entité User du domaine"""
    username: str
    password: str
    first_name: str
    last_name: str
    phone: str
    join_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None

    def __post_init__(self):
        """Validation de l'entité"""
        if not self.username:
            raise ValueError("Username cannot be empty")
        if not self.password:
            raise ValueError("Hashed password cannot be empty")

    def to_summary(self) -> UserSummary:
        """Projection publique de l'utilisateur"""
        return UserSummary(
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone
        )
