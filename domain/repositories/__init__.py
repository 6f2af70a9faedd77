"""
Repositories - Interfaces pour l'accès aux données
"""

from domain.repositories.user_repository import UserRepository
from domain.repositories.message_repository import MessageRepository

__all__ = [
    "UserRepository",
    "MessageRepository"
]
