"""
Initialisation de la base de données
"""

import logging
from typing import Optional
from sqlalchemy.engine import Engine
from infrastructure.database.session import engine as default_engine
from infrastructure.database.models import Base

logger = logging.getLogger(__name__)


def init_db(bind: Optional[Engine] = None):
    """Crée les tables users et messages si elles n'existent pas"""
    bind = bind or default_engine
    Base.metadata.create_all(bind=bind)
    logger.info(f"✅ Tables de base de données créées: {', '.join(Base.metadata.tables)}")
