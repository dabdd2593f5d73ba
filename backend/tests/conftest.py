"""
Shared test fixtures: in-memory SQLite database and a FastAPI test client
"""
import os

# Must be set before config/database are imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from database import Base, enable_sqlite_foreign_keys, get_db
from main import app
from models import DatabaseLogin, FTPLogin, Website


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """Test client with get_db overridden to use the test database"""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def website(db_session):
    website = Website(name="Example", domain="example.com")
    db_session.add(website)
    db_session.commit()
    db_session.refresh(website)
    return website


@pytest.fixture
def other_website(db_session):
    website = Website(name="Other", domain="other.example.com")
    db_session.add(website)
    db_session.commit()
    db_session.refresh(website)
    return website


@pytest.fixture
def ftp_login(db_session, website):
    record = FTPLogin(
        website_id=website.id,
        type="sftp",
        hostname="ftp.example.com",
        username="deploy",
        password="s3cret",
        path="/var/www/html",
        notes="Primary upload account",
    )
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record


@pytest.fixture
def database_login(db_session, website):
    record = DatabaseLogin(
        website_id=website.id,
        type="mysql",
        database="example",
        hostname="localhost",
        username="root",
        password="toor",
        url="http://example.com/phpmyadmin",
    )
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record
