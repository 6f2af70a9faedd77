"""
messagely-api/api/endpoints.py
Endpoints de l'API : authentification, utilisateurs, messages
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from api import schemas
from api.auth import get_current_username, ensure_correct_user
from application.services.user_service import UserService
from application.services.message_service import MessageService
from infrastructure.dependencies import (
    get_user_service, get_message_service, get_password_hasher, get_jwt_service
)
from infrastructure.security.password_hasher import PasswordHasher
from infrastructure.security.jwt_service import JWTService

logger = logging.getLogger(__name__)
auth_router = APIRouter(prefix="/auth", tags=["Authentication"])
users_router = APIRouter(prefix="/users", tags=["Users"])
messages_router = APIRouter(prefix="/messages", tags=["Messages"])

# ============================================================================
# AUTHENTIFICATION
# ============================================================================

@auth_router.post("/register", response_model=schemas.TokenResponse)
def register(
    payload: schemas.RegisterRequest,
    user_service: UserService = Depends(get_user_service),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JWTService = Depends(get_jwt_service)
):
    """
    Inscrit un utilisateur, le connecte et retourne un token.
    Le mot de passe est haché ici, avant l'appel à UserService.register.
    """
    hashed_password = password_hasher.hash(payload.password)
    user_service.register(
        username=payload.username,
        hashed_password=hashed_password,
        first_name=payload.first_name,
        last_name=payload.last_name,
        phone=payload.phone
    )
    user_service.update_login_timestamp(payload.username)
    return schemas.TokenResponse(token=jwt_service.create_access_token(payload.username))


@auth_router.post("/login", response_model=schemas.TokenResponse)
def login(
    payload: schemas.LoginRequest,
    user_service: UserService = Depends(get_user_service),
    jwt_service: JWTService = Depends(get_jwt_service)
):
    """Échange username/password contre un token et met à jour last_login_at"""
    if not user_service.authenticate(payload.username, payload.password):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid user/password"
        )

    token = jwt_service.create_access_token(payload.username)
    user_service.update_login_timestamp(payload.username)
    return schemas.TokenResponse(token=token)


@auth_router.post("/token", response_model=schemas.Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    user_service: UserService = Depends(get_user_service),
    jwt_service: JWTService = Depends(get_jwt_service)
):
    """
    Variante OAuth2 de /login (formulaire username/password).
    C'est l'URL déclarée par oauth2_scheme pour la documentation interactive.
    """
    if not user_service.authenticate(form_data.username, form_data.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = jwt_service.create_access_token(form_data.username)
    user_service.update_login_timestamp(form_data.username)
    return {"access_token": access_token, "token_type": "bearer"}

# ============================================================================
# UTILISATEURS
# ============================================================================

@users_router.get("", response_model=schemas.UserListEnvelope)
def list_users(
    current_username: str = Depends(get_current_username),
    user_service: UserService = Depends(get_user_service)
):
    """Liste le profil public de tous les utilisateurs"""
    users = [
        schemas.UserSummaryResponse.model_validate(user)
        for user in user_service.all()
    ]
    return schemas.UserListEnvelope(users=users)


@users_router.get("/{username}", response_model=schemas.UserEnvelope)
def get_user(
    username: str,
    current_username: str = Depends(ensure_correct_user),
    user_service: UserService = Depends(get_user_service)
):
    """Détail de l'utilisateur courant"""
    user = user_service.get(username)
    return schemas.UserEnvelope(user=schemas.UserDetailResponse.model_validate(user))


@users_router.get("/{username}/to", response_model=schemas.ReceivedMessagesEnvelope)
def get_messages_to(
    username: str,
    current_username: str = Depends(ensure_correct_user),
    user_service: UserService = Depends(get_user_service)
):
    """Messages reçus par l'utilisateur courant"""
    messages = [
        schemas.ReceivedMessageResponse.model_validate(message)
        for message in user_service.messages_to(username)
    ]
    return schemas.ReceivedMessagesEnvelope(messages=messages)


@users_router.get("/{username}/from", response_model=schemas.SentMessagesEnvelope)
def get_messages_from(
    username: str,
    current_username: str = Depends(ensure_correct_user),
    user_service: UserService = Depends(get_user_service)
):
    """Messages envoyés par l'utilisateur courant"""
    messages = [
        schemas.SentMessageResponse.model_validate(message)
        for message in user_service.messages_from(username)
    ]
    return schemas.SentMessagesEnvelope(messages=messages)

# ============================================================================
# MESSAGES
# ============================================================================

@messages_router.get("/{message_id}", response_model=schemas.MessageDetailEnvelope)
def get_message(
    message_id: int,
    current_username: str = Depends(get_current_username),
    message_service: MessageService = Depends(get_message_service)
):
    """Détail d'un message, visible par l'expéditeur ou le destinataire"""
    message = message_service.get_for(message_id, current_username)
    return schemas.MessageDetailEnvelope(
        message=schemas.MessageDetailResponse.model_validate(message)
    )


@messages_router.post("", response_model=schemas.MessageCreatedEnvelope, status_code=status.HTTP_201_CREATED)
def create_message(
    payload: schemas.MessageCreate,
    current_username: str = Depends(get_current_username),
    message_service: MessageService = Depends(get_message_service)
):
    """Envoie un message de la part de l'utilisateur courant"""
    message = message_service.create(current_username, payload.to_username, payload.body)
    return schemas.MessageCreatedEnvelope(
        message=schemas.MessageCreatedResponse.model_validate(message)
    )


@messages_router.post("/{message_id}/read", response_model=schemas.MessageReadEnvelope)
def mark_message_read(
    message_id: int,
    current_username: str = Depends(get_current_username),
    message_service: MessageService = Depends(get_message_service)
):
    """Marque un message comme lu (destinataire uniquement)"""
    message = message_service.mark_read_by(message_id, current_username)
    return schemas.MessageReadEnvelope(
        message=schemas.MessageReadResponse.model_validate(message)
    )
