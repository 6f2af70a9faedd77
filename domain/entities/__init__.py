"""
Entités du domaine
"""

from domain.entities.user import User, UserSummary
from domain.entities.message import (
    Message,
    MessageDetail,
    SentMessage,
    ReceivedMessage
)

__all__ = [
    "User",
    "UserSummary",
    "Message",
    "MessageDetail",
    "SentMessage",
    "ReceivedMessage"
]
