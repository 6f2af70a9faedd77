"""
Services applicatifs
"""

from application.services.user_service import UserService
from application.services.message_service import MessageService

__all__ = [
    "UserService",
    "MessageService"
]
