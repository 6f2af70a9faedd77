"""
Services de sécurité : hachage des mots de passe et jetons d'identité
"""

from infrastructure.security.password_hasher import PasswordHasher
from infrastructure.security.jwt_service import JWTService

__all__ = [
    "PasswordHasher",
    "JWTService"
]
