"""
FTP login SQLAlchemy model
"""
from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from database import Base


class FTPLogin(Base):
    __tablename__ = "ftp_data"

    id = Column(Integer, primary_key=True, index=True)
    website_id = Column(Integer, ForeignKey("websites.id", ondelete="CASCADE"), nullable=False, index=True)

    type = Column(String(20), nullable=False)  # ftp, sftp, ftps, webdav, other
    hostname = Column(String(100), nullable=True)
    username = Column(String(100), nullable=True)
    password = Column(String(100), nullable=True)
    path = Column(String(255), nullable=True)  # Remote document root
    notes = Column(Text, nullable=True)

    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    # Relation
    website = relationship("Website", back_populates="ftp_logins")
