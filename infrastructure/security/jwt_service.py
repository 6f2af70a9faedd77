"""
JWTService - Service pour la gestion des tokens JWT
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt

logger = logging.getLogger(__name__)


class JWTService:
    """Émet et vérifie le jeton signé identifiant un nom d'utilisateur"""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 10080):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def create_access_token(self, username: str, expires_delta: Optional[timedelta] = None) -> str:
        """Crée un token JWT pour un utilisateur"""
        expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=self.expire_minutes))
        to_encode = {"sub": username, "exp": expire}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """Décode un token JWT"""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"JWT decode error: {e}")
            raise ValueError(f"Invalid token: {str(e)}")

    def get_username_from_token(self, token: str) -> Optional[str]:
        """Extrait le nom d'utilisateur depuis un token JWT"""
        try:
            payload = self.decode_token(token)
        except ValueError:
            return None
        return payload.get("sub")
