"""
PasswordHasher - Service pour le hachage des mots de passe
"""

from typing import Optional, Sequence
from passlib.context import CryptContext


class PasswordHasher:
    """Service pour le hachage et la vérification des mots de passe"""

    def __init__(self, schemes: Optional[Sequence[str]] = None):
        self.pwd_context = CryptContext(schemes=list(schemes or ["bcrypt"]), deprecated="auto")

    def hash(self, password: str) -> str:
        """Génère un hachage pour un mot de passe"""
        return self.pwd_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Vérifie un mot de passe non haché contre un mot de passe haché"""
        return self.pwd_context.verify(plain_password, hashed_password)

    def dummy_verify(self) -> bool:
        """Simule une vérification (même coût) quand l'utilisateur n'existe pas"""
        return self.pwd_context.dummy_verify()

    def is_hash(self, value: str) -> bool:
        """Indique si la valeur est un hachage reconnu par le contexte"""
        if not value:
            return False
        return self.pwd_context.identify(value) is not None
