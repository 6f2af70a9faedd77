"""
messagely-api/config.py
Configuration de l'API (variables d'environnement, fichier .env)
"""

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _get_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class Config:
    """Configuration lue depuis l'environnement à l'instanciation"""

    def __init__(self):
        # Base de données
        self.database_url = os.getenv("DATABASE_URL", "sqlite:///./messagely.db")
        self.db_echo = _get_bool("DB_ECHO", False)

        # Sécurité
        self.jwt_secret_key = os.getenv("JWT_SECRET_KEY", "change-me")
        self.jwt_algorithm = os.getenv("JWT_ALGORITHM", "HS256")
        self.jwt_expire_minutes = int(os.getenv("JWT_EXPIRE_MINUTES", "10080"))
        self.password_schemes = _get_list("PASSWORD_SCHEMES", "bcrypt")

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_colored = _get_bool("LOG_COLORED", False)
        self.log_file_enabled = _get_bool("LOG_FILE_ENABLED", False)
        self.log_file_path = os.getenv("LOG_FILE_PATH", "logs/messagely.log")

        # API
        self.cors_origins = _get_list("CORS_ORIGINS", "*")
