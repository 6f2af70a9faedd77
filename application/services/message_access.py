"""
Règles d'accès aux messages
"""

from domain.entities.message import MessageDetail
from domain.exceptions import UnauthorizedError


def ensure_can_view(message: MessageDetail, username: str) -> None:
    """Seuls l'expéditeur et le destinataire peuvent lire un message"""
    if username not in (message.from_user.username, message.to_user.username):
        raise UnauthorizedError("Unauthorized to view this message")


def ensure_can_mark_read(message: MessageDetail, username: str) -> None:
    """Seul le destinataire peut marquer un message comme lu"""
    if username != message.to_user.username:
        raise UnauthorizedError("Unauthorized to mark this message as read")
