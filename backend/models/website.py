"""
Website SQLAlchemy model
Parent entity owning FTP and database login records
"""
from sqlalchemy import Column, Integer, String, Text, TIMESTAMP
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from database import Base


class Website(Base):
    __tablename__ = "websites"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    domain = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    # Relationships
    ftp_logins = relationship(
        "FTPLogin", back_populates="website", cascade="all, delete-orphan", passive_deletes=True
    )
    database_logins = relationship(
        "DatabaseLogin", back_populates="website", cascade="all, delete-orphan", passive_deletes=True
    )
