"""
messagely-api/api/schemas.py
Schémas Pydantic pour la validation et la sérialisation
"""

from typing import Optional, List
from pydantic import BaseModel, Field, field_serializer
from datetime import datetime


def _isoformat(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    return dt.isoformat()

# ============================================================================
# AUTHENTIFICATION
# ============================================================================

class RegisterRequest(BaseModel):
    """Schéma pour l'inscription d'un utilisateur"""
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)
    first_name: str
    last_name: str
    phone: str

class LoginRequest(BaseModel):
    username: str
    password: str

class TokenResponse(BaseModel):
    token: str

class Token(BaseModel):
    """Réponse OAuth2 (formulaire /auth/token)"""
    access_token: str
    token_type: str

# ============================================================================
# UTILISATEURS
# ============================================================================

class UserSummaryResponse(BaseModel):
    """Profil public (jamais le hachage du mot de passe)"""
    username: str
    first_name: str
    last_name: str
    phone: str

    class Config:
        from_attributes = True

class UserDetailResponse(UserSummaryResponse):
    join_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None

    @field_serializer('join_at', 'last_login_at')
    def serialize_timestamps(self, dt: Optional[datetime], _info):
        return _isoformat(dt)

class UserListEnvelope(BaseModel):
    users: List[UserSummaryResponse]

class UserEnvelope(BaseModel):
    user: UserDetailResponse

# ============================================================================
# MESSAGES
# ============================================================================

class MessageCreate(BaseModel):
    """Schéma pour envoyer un message"""
    to_username: str
    body: str

class MessageCreatedResponse(BaseModel):
    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime

    @field_serializer('sent_at')
    def serialize_sent_at(self, dt: datetime, _info):
        return _isoformat(dt)

    class Config:
        from_attributes = True

class _MessageBase(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None

    @field_serializer('sent_at', 'read_at')
    def serialize_timestamps(self, dt: Optional[datetime], _info):
        return _isoformat(dt)

    class Config:
        from_attributes = True

class MessageDetailResponse(_MessageBase):
    """Message avec les profils de l'expéditeur et du destinataire"""
    from_user: UserSummaryResponse
    to_user: UserSummaryResponse

class SentMessageResponse(_MessageBase):
    to_user: UserSummaryResponse

class ReceivedMessageResponse(_MessageBase):
    from_user: UserSummaryResponse

class MessageReadResponse(BaseModel):
    id: int
    read_at: Optional[datetime] = None

    @field_serializer('read_at')
    def serialize_read_at(self, dt: Optional[datetime], _info):
        return _isoformat(dt)

    class Config:
        from_attributes = True

class MessageDetailEnvelope(BaseModel):
    message: MessageDetailResponse

class MessageCreatedEnvelope(BaseModel):
    message: MessageCreatedResponse

class MessageReadEnvelope(BaseModel):
    message: MessageReadResponse

class SentMessagesEnvelope(BaseModel):
    messages: List[SentMessageResponse]

class ReceivedMessagesEnvelope(BaseModel):
    messages: List[ReceivedMessageResponse]
