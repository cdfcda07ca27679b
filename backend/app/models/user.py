from sqlalchemy import Column, Integer, String, DateTime as SADateTime
from sqlalchemy.sql import func

from app.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    # Stored as plaintext; compared verbatim at login
    password = Column(String(255), nullable=False)
    created_at = Column(SADateTime, server_default=func.now(), nullable=False)
    updated_at = Column(SADateTime, server_default=func.now(), onupdate=func.now(), nullable=False)
