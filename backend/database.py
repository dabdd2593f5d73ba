"""
Database connection and session management
"""
from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from config import settings


def _create_engine(database_url: str):
    """
    Build the SQLAlchemy engine for the configured database
    """
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            echo=False
        )
        enable_sqlite_foreign_keys(engine)
        return engine

    return create_engine(
        database_url,
        pool_pre_ping=True,
        echo=False
    )


def enable_sqlite_foreign_keys(engine) -> None:
    """
    SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    """
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = _create_engine(settings.DATABASE_URL)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency for FastAPI routes to get a database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize database (create all tables)
    """
    # Register models on the metadata before creating tables
    import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
