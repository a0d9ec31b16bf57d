"""
Point d'entrée principal de l'application FastAPI
Chatbot FAQ (avec repli LLM) et capture de demandes client
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings, Settings
from app.middleware.logging import LoggingMiddleware
from app.exceptions import setup_exception_handlers
from app.routers import chat_router, lead_router, health_router
from core.completion import CompletionClient
from core.faq_store import load_faqs
from core.logging_config import setup_logging_from_config
from core.resolvers import build_resolver_chain


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gestionnaire de cycle de vie de l'application
    """
    settings = app.state.settings

    logger.info("=" * 60)
    logger.info("🚀 %s v%s", settings.app_name, settings.app_version)
    logger.info("=" * 60)
    logger.info("Completion model: %s @ %s", settings.groq_model, settings.groq_base_url)
    logger.info("SMTP relay: %s:%s", settings.smtp_host, settings.smtp_port)
    logger.info("✓ Application startup complete")

    yield

    logger.info("👋 Shutting down application")


def create_app(
    settings: Optional[Settings] = None,
    completion_client: Optional[CompletionClient] = None,
) -> FastAPI:
    """
    Créer et configurer l'application FastAPI

    Args:
        settings: Configuration, lue depuis l'environnement si None
        completion_client: Client de repli, construit depuis la configuration si None

    Returns:
        FastAPI: Application configurée
    """
    settings = settings or get_settings()

    setup_logging_from_config(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ========================================
    # FAQ & RESOLVER CHAIN (une seule fois par processus)
    # ========================================
    faq_entries = load_faqs(settings.faq_file)
    app.state.faq_entries = faq_entries
    app.state.resolver_chain = build_resolver_chain(
        faq_entries,
        completion_client or CompletionClient.from_settings(settings),
        fuzzy_threshold=settings.faq_fuzzy_threshold,
    )
    logger.info("✓ Resolver chain ready (%d FAQ entries)", len(faq_entries))

    # ========================================
    # MIDDLEWARE
    # ========================================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    logger.info("✓ CORS middleware configured")

    app.add_middleware(LoggingMiddleware)
    logger.info("✓ Logging middleware configured")

    # ========================================
    # EXCEPTION HANDLERS
    # ========================================
    setup_exception_handlers(app)
    logger.info("✓ Exception handlers configured")

    # ========================================
    # ROUTERS
    # ========================================
    app.include_router(chat_router)
    logger.info("✓ Chat routes registered")

    app.include_router(lead_router)
    logger.info("✓ Lead routes registered")

    app.include_router(health_router)
    logger.info("✓ Health route registered")

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    setup_logging_from_config(settings.log_level, settings.log_file)

    uvicorn_config = {
        "app": "main:create_app",
        "factory": True,
        "host": "0.0.0.0",
        "port": settings.port,
        "reload": settings.debug,
        "log_level": settings.log_level.lower(),
        "access_log": True,
    }

    logger.info("Starting uvicorn server on %s:%s", uvicorn_config["host"], uvicorn_config["port"])

    uvicorn.run(**uvicorn_config)
