from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from catalog.config import get_settings

settings = get_settings()


def engine_options(database_url: str) -> dict:
    """
    Engine keyword arguments for the given database URL.

    SQLite connections are shared across the request threadpool, so the
    same-thread check is disabled. Server databases get a bounded pool with
    a checkout timeout so a dead database fails fast instead of hanging.
    """
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "pool_pre_ping": True,
    }


# Create SQLAlchemy engine with connection pooling
engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency to get database session.
    Yields a database session and closes it after use.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
