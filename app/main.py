import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.auth import router as auth_router
from app.api.v1.router import api_router
from app.config.database import close_db, init_db
from app.config.logging import configure_logging
from app.config.settings import settings
from app.core.error_handlers import register_exception_handlers
from app.core.seeder_sync import run_seeder

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializar base de datos y datos de prueba al arrancar"""
    logger.info("Iniciando Sistema de Autogestión Académica...")
    init_db()

    if settings.run_seeder:
        if run_seeder():
            logger.info("Datos iniciales creados")
        else:
            logger.info("Base de datos ya contiene datos")

    logger.info("Sistema listo")
    yield
    close_db()


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Sistema de Autogestión Académica API",
        description="""
    ## Sistema de Autogestión Académica 🎓

    - 📝 **Inscripciones** a cursadas por comisión, con cupo y correlativas
    - 🎓 **Exámenes finales** con verificación de correlativas
    - 📊 **Carga de notas** restringida al jefe de cátedra
    - ⏰ **Mi horario** semanal del estudiante

    ### **Credenciales de Prueba** (con `RUN_SEEDER=true`):
    - EST001 / 123456 (Victor Salvatierra)
    - EST002 / 123456 (Tatiana Cuéllar)
    - DOC001 / 123456 (Marta Ríos, jefa de cátedra)
    """,
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_exception_handlers(app)

    app.include_router(auth_router, prefix="/auth", tags=["🔐 Autenticación"])
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health", tags=["🏠 General"])
    def health_check():
        """Verificación de salud del servicio"""
        return {
            "status": "healthy",
            "service": "autogestion-academica-api",
            "version": "1.0.0",
            "environment": settings.environment,
        }

    return app


app = create_app()
