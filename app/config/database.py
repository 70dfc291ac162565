import logging
import time

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from sqlalchemy.pool import StaticPool

from .settings import settings

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    """Opciones del motor según el dialecto de la URL"""
    if url.startswith("sqlite"):
        # SQLite en memoria necesita una única conexión compartida
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return {
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        "pool_size": 10,
        "max_overflow": 20,
        "pool_timeout": 30,
        "connect_args": {"options": "-c default_transaction_isolation=read_committed"},
    }


# Configurar el motor de la base de datos
engine = create_engine(
    settings.database_url_sync,
    echo=settings.debug,
    **_engine_options(settings.database_url_sync),
)

# Crear una sesión local
SessionLocal = sessionmaker(
    bind=engine, autocommit=False, autoflush=True, expire_on_commit=False
)

Base = declarative_base()


def get_db() -> Session:
    """Obtener una sesión de base de datos con manejo de errores adecuado"""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def test_connection(max_retries: int = 5, delay: float = 2.0) -> bool:
    for attempt in range(max_retries):
        try:
            with SessionLocal() as session:
                session.execute(text("SELECT 1"))
                session.commit()
                logger.info("Database connection successful on attempt %d", attempt + 1)
                return True
        except Exception as e:
            logger.warning("Database connection attempt %d failed: %s", attempt + 1, e)
            if attempt < max_retries - 1:
                logger.info("Retrying in %s seconds...", delay)
                time.sleep(delay)
            else:
                logger.error("All database connection attempts failed")
                return False
    return False


def wait_for_db(max_wait: int = 60) -> bool:
    logger.info("Waiting for database to be ready...")
    start_time = time.time()

    while True:
        if test_connection(max_retries=1):
            return True

        elapsed = time.time() - start_time
        if elapsed > max_wait:
            logger.error("Timeout waiting for database after %d seconds", max_wait)
            return False

        time.sleep(2)


def init_db():
    # Registrar todos los modelos en el metadata antes de crear las tablas
    import app.models  # noqa: F401

    if not wait_for_db():
        raise RuntimeError("Database is not ready")

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables initialized successfully")
    return True


def close_db():
    engine.dispose()
    logger.info("Database connections closed")
