"""
messagely-api/app.py
Point d'entrée principal de l'API de messagerie
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import Config
from api.endpoints import auth_router, users_router, messages_router
from api.errors import register_exception_handlers
from infrastructure.database.init_db import init_db
from logging_config import setup_logging, setup_colored_logging

# Initialiser la configuration
config = Config()

# Configurer le logging
log_file = config.log_file_path if config.log_file_enabled else None
if config.log_colored:
    logger = setup_colored_logging(log_level=config.log_level, log_file=log_file)
else:
    logger = setup_logging(log_level=config.log_level, log_file=log_file)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestion du cycle de vie de l'application"""
    # --- Startup ---
    logger.info("🚀 Démarrage de Messagely API")
    logger.info(f"📊 Database: {config.database_url.split('@')[-1]}")
    init_db()
    app.state.config = config

    yield

    # --- Shutdown ---
    logger.info("🛑 Arrêt de Messagely API")


# Créer l'application FastAPI
app = FastAPI(
    title="Messagely API",
    description="API de messagerie entre utilisateurs",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(messages_router, prefix="/api")


@app.get("/", tags=["Root"])
def root():
    """Page d'accueil de l'API"""
    return {
        "service": "messagely-api",
        "version": app.version,
        "status": "operational",
        "documentation": "/docs"
    }


@app.get("/health", tags=["System"])
def health_check():
    """Endpoint de santé pour les orchestrateurs (Kubernetes, Docker, etc.)"""
    return {
        "status": "healthy",
        "service": "messagely-api"
    }


if __name__ == "__main__":
    import uvicorn
    from logging_config import get_uvicorn_log_config

    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_config=get_uvicorn_log_config(log_level=config.log_level)
    )
