"""
Database login SQLAlchemy model
"""
from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from database import Base


class DatabaseLogin(Base):
    __tablename__ = "database_data"

    id = Column(Integer, primary_key=True, index=True)
    website_id = Column(Integer, ForeignKey("websites.id", ondelete="CASCADE"), nullable=False, index=True)

    type = Column(String(20), nullable=False)  # mysql, sqlite, mssql, oracle, pgsql, access, other
    database = Column(String(100), nullable=True)  # Database name
    hostname = Column(String(100), nullable=True)
    username = Column(String(100), nullable=True)
    password = Column(String(100), nullable=True)
    url = Column(String(255), nullable=True)  # Admin panel (phpMyAdmin, etc.)
    notes = Column(Text, nullable=True)

    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    # Relation
    website = relationship("Website", back_populates="database_logins")
