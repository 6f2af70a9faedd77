"""
messagely-api/api/auth.py
Dépendances d'authentification (jeton JWT, utilisateur courant)
"""

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from infrastructure.dependencies import get_jwt_service
from infrastructure.security.jwt_service import JWTService

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")


def get_current_username(
    token: str = Depends(oauth2_scheme),
    jwt_service: JWTService = Depends(get_jwt_service)
) -> str:
    """
    Dépendance FastAPI : décode le token JWT et retourne le nom d'utilisateur.
    Le jeton signé suffit, aucune lecture en base n'est faite ici.
    """
    username = jwt_service.get_username_from_token(token)
    if username is None:
        logger.warning("JWTError: token rejected")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return username


def ensure_correct_user(
    username: str,
    current_username: str = Depends(get_current_username)
) -> str:
    """Dépendance qui vérifie que le chemin /users/{username} est celui de l'utilisateur courant"""
    if username != current_username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized"
        )
    return current_username
